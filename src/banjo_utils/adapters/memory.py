"""In-memory persistence adapter."""

import threading


class MemoryAdapter:
    """Dict-backed string store, the in-process stand-in for local storage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Get the snapshot stored under key."""
        with self._lock:
            return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a snapshot under key."""
        with self._lock:
            self._items[key] = value

    def remove(self, key: str) -> None:
        """Remove a stored snapshot."""
        with self._lock:
            self._items.pop(key, None)

    def clear(self) -> None:
        """Remove all stored snapshots."""
        with self._lock:
            self._items.clear()
