"""banjo_utils - Result types and an expiring cache for Python."""

from contextlib import suppress

# Adapters
from banjo_utils.adapters import MemoryAdapter, PersistenceAdapter

# Cache
from banjo_utils.cache import ExpiringCache, create_cache

# Duration parsing
from banjo_utils.duration import parse_duration, to_milliseconds
from banjo_utils.errors import BanjoError, UnwrapError

# Result API
from banjo_utils.result import (
    AsyncResult,
    Err,
    Ok,
    ResultType,
    err,
    from_async_throwable,
    from_throwable,
    ok,
)
from banjo_utils.simple_result import (
    SimpleError,
    SimpleResult,
    SimpleSuccess,
    create_result_with_type,
    simple_error,
    simple_ok,
    try_error,
    try_ok,
)

# Core types
from banjo_utils.types import CacheEntry, Duration

# Optional adapter imports - only available when dependencies are installed
with suppress(ImportError):
    from banjo_utils.adapters import RedisAdapter

with suppress(ImportError):
    from banjo_utils.adapters import UpstashAdapter

__version__ = "0.1.0"

__all__ = [
    "AsyncResult",
    "BanjoError",
    "CacheEntry",
    "Duration",
    "Err",
    "ExpiringCache",
    "MemoryAdapter",
    "Ok",
    "PersistenceAdapter",
    "RedisAdapter",
    "ResultType",
    "SimpleError",
    "SimpleResult",
    "SimpleSuccess",
    "UnwrapError",
    "UpstashAdapter",
    "create_cache",
    "create_result_with_type",
    "err",
    "from_async_throwable",
    "from_throwable",
    "ok",
    "parse_duration",
    "simple_error",
    "simple_ok",
    "to_milliseconds",
    "try_error",
    "try_ok",
]
