"""Exceptions raised by banjo_utils."""

from typing import Any


class BanjoError(Exception):
    """Base class for banjo_utils errors."""


class UnwrapError(BanjoError):
    """Raised when unwrap() is called on an Err."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"Attempted to unwrap an Err: {error}")
        self.error = error
