"""Persistence adapters for the banjo_utils cache."""

from contextlib import suppress

from banjo_utils.adapters.base import PersistenceAdapter
from banjo_utils.adapters.memory import MemoryAdapter

# Optional adapters - only available when dependencies are installed
with suppress(ImportError):
    from banjo_utils.adapters.redis import RedisAdapter

with suppress(ImportError):
    from banjo_utils.adapters.upstash import UpstashAdapter

__all__ = [
    "MemoryAdapter",
    "PersistenceAdapter",
    "RedisAdapter",
    "UpstashAdapter",
]
