"""Tests for the sync Result API."""

import json

import pytest

from banjo_utils import Err, Ok, ResultType, UnwrapError, err, from_throwable, ok


class TestVariants:
    """Tests for Ok/Err construction and queries."""

    def test_ok_is_ok(self) -> None:
        """Test that ok() creates an Ok variant."""
        result = ok("success")
        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.ok is True
        assert result.data == "success"

    def test_err_is_err(self) -> None:
        """Test that err() creates an Err variant."""
        result = err("failure")
        assert result.is_err() is True
        assert result.is_ok() is False
        assert result.ok is False
        assert result.error == "failure"

    def test_discriminant_is_read_only(self) -> None:
        """Test that the variant cannot be changed after construction."""
        result = ok(1)
        with pytest.raises(AttributeError):
            result.ok = False  # type: ignore[misc]
        with pytest.raises(AttributeError):
            result.data = 2  # type: ignore[misc]

    def test_none_payloads(self) -> None:
        """Test that None is a valid payload for both variants."""
        assert ok(None).is_ok()
        assert err(None).is_err()


class TestMap:
    """Tests for map and map_err."""

    def test_map_ok(self) -> None:
        """Test that map transforms an Ok value."""
        mapped = ok("42").map(int)
        assert mapped == Ok(42)

    def test_map_err_is_untouched(self) -> None:
        """Test that map on Err keeps the error and skips fn."""
        calls: list[object] = []

        def fn(value: object) -> object:
            calls.append(value)
            return value

        mapped = err("boom").map(fn)
        assert mapped == Err("boom")
        assert calls == []

    def test_map_err_on_err(self) -> None:
        """Test that map_err transforms an Err value."""
        mapped = err("An error occurred").map_err(lambda e: f"Error: {e}")
        assert mapped == Err("Error: An error occurred")

    def test_map_err_skipped_on_ok(self) -> None:
        """Test that map_err on Ok does not run fn."""
        called = False

        def fn(error: object) -> str:
            nonlocal called
            called = True
            return "never"

        result = ok(42).map(lambda x: x + 1).map_err(fn)
        assert result == Ok(43)
        assert called is False

    def test_map_returns_new_container(self) -> None:
        """Test that map leaves the receiver unchanged."""
        original = ok(1)
        mapped = original.map(lambda x: x + 1)
        assert original == Ok(1)
        assert mapped is not original


class TestTap:
    """Tests for tap and tap_err."""

    def test_tap_runs_on_ok(self) -> None:
        """Test that tap sees the value and returns the same result."""
        seen: list[str] = []
        tapped = ok("42").tap(seen.append)
        assert tapped == Ok("42")
        assert seen == ["42"]

    def test_tap_ignores_return_value(self) -> None:
        """Test that tap does not replace the value with fn's return."""
        assert ok(1).tap(lambda x: x * 100) == Ok(1)

    def test_tap_skipped_on_err(self) -> None:
        """Test that tap does not run for Err."""
        seen: list[object] = []
        assert err("x").tap(seen.append) == Err("x")
        assert seen == []

    def test_tap_err_runs_on_err(self) -> None:
        """Test that tap_err sees the error."""
        seen: list[str] = []
        tapped = err("An error occurred").tap_err(seen.append)
        assert tapped == Err("An error occurred")
        assert seen == ["An error occurred"]

    def test_tap_err_skipped_on_ok(self) -> None:
        """Test that tap_err does not run for Ok."""
        seen: list[object] = []
        assert ok(1).tap_err(seen.append) == Ok(1)
        assert seen == []


class TestAndThen:
    """Tests for and_then chaining."""

    def test_and_then_ok(self) -> None:
        """Test that and_then delegates to fn on Ok."""
        assert ok("42").and_then(lambda v: ok(int(v))) == Ok(42)

    def test_and_then_err(self) -> None:
        """Test that and_then short-circuits on Err."""
        assert err("An error occurred").and_then(lambda _: ok(42)) == Err(
            "An error occurred"
        )

    def test_long_chain(self) -> None:
        """Test a chain of successful steps."""
        result = (
            ok("42")
            .and_then(lambda v: ok(int(v)))
            .and_then(lambda v: ok(v + 1))
        )
        assert result == Ok(43)

    def test_chain_breaks_on_err(self) -> None:
        """Test that an Err in the middle stops the chain."""
        calls: list[int] = []

        def next_step(value: int) -> ResultType[int, str]:
            calls.append(value)
            return ok(value + 1)

        result = ok(1).and_then(lambda _: err("boom")).and_then(next_step)
        assert result == Err("boom")
        assert calls == []


class TestMatch:
    """Tests for match."""

    def test_match_ok(self) -> None:
        """Test that match dispatches to the ok branch."""
        message = ok("42").match(ok=lambda d: f"Value: {d}", err=lambda e: f"Error: {e}")
        assert message == "Value: 42"

    def test_match_err(self) -> None:
        """Test that match dispatches to the err branch."""
        message = err("An error occurred").match(
            ok=lambda d: f"Value: {d}", err=lambda e: f"Error: {e}"
        )
        assert message == "Error: An error occurred"

    def test_chain_then_match(self) -> None:
        """Test matching at the end of a chain."""
        message = (
            ok("42")
            .and_then(lambda v: ok(int(v)))
            .and_then(lambda v: ok(v + 1))
            .match(ok=lambda d: f"Value: {d}", err=lambda e: f"Error: {e}")
        )
        assert message == "Value: 43"


class TestUnwrap:
    """Tests for unwrap and unwrap_or."""

    def test_unwrap_ok(self) -> None:
        """Test that unwrap returns the Ok value."""
        assert ok("success").unwrap() == "success"

    def test_unwrap_err_raises(self) -> None:
        """Test that unwrap on Err raises with the error in the message."""
        with pytest.raises(UnwrapError, match="Attempted to unwrap an Err: failure"):
            err("failure").unwrap()

    def test_unwrap_error_keeps_payload(self) -> None:
        """Test that the raised error carries the original payload."""
        payload = {"code": 404}
        with pytest.raises(UnwrapError) as exc_info:
            err(payload).unwrap()
        assert exc_info.value.error is payload

    def test_unwrap_or(self) -> None:
        """Test that unwrap_or never raises."""
        assert ok(5).unwrap_or(99) == 5
        assert err("x").unwrap_or(99) == 99


class TestFromThrowable:
    """Tests for from_throwable."""

    @staticmethod
    def dangerous(x: int) -> int:
        if x < 0:
            raise ValueError("Negative value not allowed")
        return x * 2

    def test_wraps_return_value(self) -> None:
        """Test that a normal return becomes Ok."""
        safe = from_throwable(self.dangerous)
        assert safe(5) == Ok(10)

    def test_wraps_raised_exception(self) -> None:
        """Test that a raised exception becomes Err with the exception."""
        safe = from_throwable(self.dangerous)
        result = safe(-5)
        assert result.is_err()
        assert isinstance(result.error, ValueError)
        assert str(result.error) == "Negative value not allowed"

    def test_wraps_json_loads(self) -> None:
        """Test wrapping a parser."""
        safe_loads = from_throwable(json.loads)
        assert safe_loads('{"key": "value"}') == Ok({"key": "value"})

        failed = safe_loads("tjenare")
        assert failed.is_err()
        assert isinstance(failed.error, json.JSONDecodeError)

    def test_error_fn(self) -> None:
        """Test that error_fn maps the caught exception."""
        safe = from_throwable(self.dangerous, lambda e: f"Custom error: {e}")
        assert safe(5) == Ok(10)
        assert safe(-5) == Err("Custom error: Negative value not allowed")

    def test_keyword_arguments(self) -> None:
        """Test that keyword arguments are forwarded."""
        safe_int = from_throwable(int)
        assert safe_int("ff", base=16) == Ok(255)

    def test_preserves_metadata(self) -> None:
        """Test that the wrapper keeps the wrapped function's name."""
        assert from_throwable(self.dangerous).__name__ == "dangerous"
