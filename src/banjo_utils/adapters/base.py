"""Base adapter protocol for cache persistence backends."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PersistenceAdapter(Protocol):
    """String key-value store holding cache snapshots."""

    def get(self, key: str) -> str | None:
        """Get the snapshot stored under key."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a snapshot under key."""
        ...
