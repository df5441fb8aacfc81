"""Core types for the banjo_utils cache."""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    """A cached value with its expiry."""

    data: T
    expires_at: int | None  # Unix timestamp ms, None never expires


# Duration type alias
Duration = str | int  # "30s", "5m", "2h", "1d" or milliseconds

# A duration, or False to switch the feature off
OptionalDuration = Union[Duration, Literal[False]]
