"""Redis persistence adapter."""

from __future__ import annotations

from typing import Any


class RedisAdapter:
    """Sync Redis persistence adapter."""

    def __init__(
        self,
        client: Any,  # redis.Redis
        *,
        prefix: str = "",
    ) -> None:
        self._client = client
        self._prefix = prefix

    def _full_key(self, key: str) -> str:
        """Generate full Redis key for a snapshot."""
        return f"{self._prefix}:{key}" if self._prefix else key

    def get(self, key: str) -> str | None:
        """Get the snapshot stored under key."""
        data = self._client.get(self._full_key(key))
        if data is None:
            return None
        if isinstance(data, bytes):
            return data.decode("utf-8")
        return str(data)

    def set(self, key: str, value: str) -> None:
        """Store a snapshot under key."""
        # Snapshots don't expire - entries carry their own expiry
        self._client.set(self._full_key(key), value)

    def disconnect(self) -> None:
        """Close the Redis connection."""
        self._client.close()
