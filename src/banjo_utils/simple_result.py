"""Simple result records and Go-style try expressions.

Lighter than ResultType: no combinators, just a success record or an
error record with a message, an optional error type and optional data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
ExcT = TypeVar("ExcT", bound=BaseException)


@dataclass(frozen=True, slots=True)
class SimpleSuccess(Generic[T]):
    """A successful simple result."""

    data: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class SimpleError:
    """A failed simple result."""

    message: str
    type: str | None = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return False


SimpleResult = Union[SimpleSuccess[T], SimpleError]

# (error, value) - exactly one side is None
TryExpressionResult = tuple[ExcT, None] | tuple[None, T]


def simple_ok(data: T | None = None) -> SimpleSuccess[T | None]:
    """Create a successful simple result."""
    return SimpleSuccess(data)


def simple_error(
    message: str, type: str | None = None, data: Any = None
) -> SimpleError:
    """Create a failed simple result."""
    return SimpleError(message=message, type=type, data=data)


@dataclass(frozen=True, slots=True)
class TypedResultHelpers:
    """ok/error helpers whose errors fall back to a default type."""

    default_type: str | None = None

    def ok(self, data: T | None = None) -> SimpleSuccess[T | None]:
        return simple_ok(data)

    def error(
        self, message: str, type: str | None = None, data: Any = None
    ) -> SimpleError:
        return simple_error(
            message, type if type is not None else self.default_type, data
        )


def create_result_with_type(default_type: str | None = None) -> TypedResultHelpers:
    """Create result helpers with a default error type.

    Example:
        result = create_result_with_type("UnknownError")
        error = result.error("not found", "NotFound", {"id": 1})
        error.type   # "NotFound"
        result.error("boom").type   # "UnknownError"
    """
    return TypedResultHelpers(default_type)


def try_ok(value: T | None = None) -> tuple[None, T | None]:
    """Successful try expression: (None, value)."""
    return (None, value)


def try_error(error: ExcT) -> tuple[ExcT, None]:
    """Failed try expression: (error, None)."""
    return (error, None)


__all__ = [
    "SimpleError",
    "SimpleResult",
    "SimpleSuccess",
    "TryExpressionResult",
    "TypedResultHelpers",
    "create_result_with_type",
    "simple_error",
    "simple_ok",
    "try_error",
    "try_ok",
]
