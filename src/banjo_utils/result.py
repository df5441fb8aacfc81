"""Result type - return a value or an error instead of raising.

This module provides:
- Ok / Err: the two variants of ResultType
- ok(), err(): factories
- from_throwable(), from_async_throwable(): wrap raising functions
- AsyncResult: awaitable ResultType that keeps the combinators chainable

Usage:
    result = ok("42").map(int).and_then(validate)
    if result.ok:
        print(result.data)
    else:
        print(result.error)

    value = await ok(1).map_async(fetch).map(str).unwrap_or("n/a")
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Generator
from dataclasses import dataclass
from functools import wraps
from typing import Any, Generic, ParamSpec, TypeVar, Union, cast

from banjo_utils.errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
P = ParamSpec("P")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T, E]):
    """A successful result. Create with ok()."""

    data: T

    @property
    def ok(self) -> bool:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> ResultType[U, E]:
        return Ok(fn(self.data))

    def map_err(self, fn: Callable[[E], F]) -> ResultType[T, F]:
        return Ok(self.data)

    def tap(self, fn: Callable[[T], Any]) -> ResultType[T, E]:
        fn(self.data)
        return self

    def tap_err(self, fn: Callable[[E], Any]) -> ResultType[T, E]:
        return self

    def and_then(self, fn: Callable[[T], ResultType[U, E]]) -> ResultType[U, E]:
        return fn(self.data)

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return ok(self.data)

    def unwrap(self) -> T:
        return self.data

    def unwrap_or(self, default: U) -> T | U:
        return self.data

    def map_async(self, fn: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        async def run() -> ResultType[U, E]:
            return Ok(await fn(self.data))

        return AsyncResult(run())

    def map_err_async(self, fn: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        return AsyncResult(_resolved(Ok(self.data)))

    def tap_async(self, fn: Callable[[T], Awaitable[Any]]) -> AsyncResult[T, E]:
        async def run() -> ResultType[T, E]:
            await fn(self.data)
            return self

        return AsyncResult(run())

    def tap_err_async(self, fn: Callable[[E], Awaitable[Any]]) -> AsyncResult[T, E]:
        return AsyncResult(_resolved(self))

    def and_then_async(
        self, fn: Callable[[T], Awaitable[ResultType[U, E]]]
    ) -> AsyncResult[U, E]:
        async def run() -> ResultType[U, E]:
            return await fn(self.data)

        return AsyncResult(run())


@dataclass(frozen=True, slots=True)
class Err(Generic[T, E]):
    """A failed result. Create with err()."""

    error: E

    @property
    def ok(self) -> bool:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> ResultType[U, E]:
        return Err(self.error)

    def map_err(self, fn: Callable[[E], F]) -> ResultType[T, F]:
        return Err(fn(self.error))

    def tap(self, fn: Callable[[T], Any]) -> ResultType[T, E]:
        return self

    def tap_err(self, fn: Callable[[E], Any]) -> ResultType[T, E]:
        fn(self.error)
        return self

    def and_then(self, fn: Callable[[T], ResultType[U, E]]) -> ResultType[U, E]:
        return Err(self.error)

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def unwrap(self) -> T:
        raise UnwrapError(self.error)

    def unwrap_or(self, default: U) -> T | U:
        return default

    def map_async(self, fn: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        return AsyncResult(_resolved(Err(self.error)))

    def map_err_async(self, fn: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        async def run() -> ResultType[T, F]:
            return Err(await fn(self.error))

        return AsyncResult(run())

    def tap_async(self, fn: Callable[[T], Awaitable[Any]]) -> AsyncResult[T, E]:
        return AsyncResult(_resolved(self))

    def tap_err_async(self, fn: Callable[[E], Awaitable[Any]]) -> AsyncResult[T, E]:
        async def run() -> ResultType[T, E]:
            await fn(self.error)
            return self

        return AsyncResult(run())

    def and_then_async(
        self, fn: Callable[[T], Awaitable[ResultType[U, E]]]
    ) -> AsyncResult[U, E]:
        return AsyncResult(_resolved(Err(self.error)))


ResultType = Union[Ok[T, E], Err[T, E]]


async def _resolved(result: ResultType[T, E]) -> ResultType[T, E]:
    return result


class AsyncResult(Generic[T, E]):
    """An awaitable ResultType with the same combinators.

    Sync and async steps can be mixed; the chain runs when awaited:
        result = await ok(2).map_async(double).map(str)   # Ok("4")

    Awaiting twice returns the same container without re-running the chain.
    """

    __slots__ = ("_awaitable", "_future")

    def __init__(self, awaitable: Awaitable[ResultType[T, E]]) -> None:
        self._awaitable = awaitable
        self._future: asyncio.Future[ResultType[T, E]] | None = None

    def __await__(self) -> Generator[Any, None, ResultType[T, E]]:
        if self._future is None:
            self._future = asyncio.ensure_future(self._awaitable)
        return self._future.__await__()

    def _then(self, step: Callable[[ResultType[T, E]], Any]) -> AsyncResult[Any, Any]:
        """Chain a step that may return a ResultType or an awaitable of one."""

        async def run() -> ResultType[Any, Any]:
            outcome = step(await self)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            return cast(ResultType[Any, Any], outcome)

        return AsyncResult(run())

    def map(self, fn: Callable[[T], U]) -> AsyncResult[U, E]:
        return self._then(lambda r: r.map(fn))

    def map_err(self, fn: Callable[[E], F]) -> AsyncResult[T, F]:
        return self._then(lambda r: r.map_err(fn))

    def tap(self, fn: Callable[[T], Any]) -> AsyncResult[T, E]:
        return self._then(lambda r: r.tap(fn))

    def tap_err(self, fn: Callable[[E], Any]) -> AsyncResult[T, E]:
        return self._then(lambda r: r.tap_err(fn))

    def and_then(self, fn: Callable[[T], ResultType[U, E]]) -> AsyncResult[U, E]:
        return self._then(lambda r: r.and_then(fn))

    def map_async(self, fn: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        return self._then(lambda r: r.map_async(fn))

    def map_err_async(self, fn: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        return self._then(lambda r: r.map_err_async(fn))

    def tap_async(self, fn: Callable[[T], Awaitable[Any]]) -> AsyncResult[T, E]:
        return self._then(lambda r: r.tap_async(fn))

    def tap_err_async(self, fn: Callable[[E], Awaitable[Any]]) -> AsyncResult[T, E]:
        return self._then(lambda r: r.tap_err_async(fn))

    def and_then_async(
        self, fn: Callable[[T], Awaitable[ResultType[U, E]]]
    ) -> AsyncResult[U, E]:
        return self._then(lambda r: r.and_then_async(fn))

    async def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return (await self).match(ok=ok, err=err)

    async def unwrap(self) -> T:
        return (await self).unwrap()

    async def unwrap_or(self, default: U) -> T | U:
        return (await self).unwrap_or(default)


def ok(data: T) -> Ok[T, Any]:
    """Create an Ok result."""
    return Ok(data)


def err(error: E) -> Err[Any, E]:
    """Create an Err result."""
    return Err(error)


def from_throwable(
    fn: Callable[P, T],
    error_fn: Callable[[Exception], E] | None = None,
) -> Callable[P, ResultType[T, Any]]:
    """Wrap a function that may raise so that it returns a ResultType.

    Args:
        fn: Function to wrap
        error_fn: Optional mapper applied to the caught exception

    Returns:
        Function with the same signature returning Ok(value) or Err(error)

    Example:
        safe_loads = from_throwable(json.loads)
        safe_loads('{"a": 1}')   # Ok({"a": 1})
        safe_loads("nope")       # Err(JSONDecodeError(...))
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> ResultType[T, Any]:
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as e:
            return Err(error_fn(e) if error_fn is not None else e)

    return wrapper


def from_async_throwable(
    fn: Callable[P, Awaitable[T]],
    error_fn: Callable[[Exception], E] | None = None,
) -> Callable[P, Awaitable[ResultType[T, Any]]]:
    """Wrap a coroutine function that may raise so that it resolves to a ResultType."""

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ResultType[T, Any]:
        try:
            return Ok(await fn(*args, **kwargs))
        except Exception as e:
            return Err(error_fn(e) if error_fn is not None else e)

    return wrapper


__all__ = [
    "AsyncResult",
    "Err",
    "Ok",
    "ResultType",
    "err",
    "from_async_throwable",
    "from_throwable",
    "ok",
]
