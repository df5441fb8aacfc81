"""Shared pytest fixtures."""

import pytest

from banjo_utils import MemoryAdapter


class FakeClock:
    """Controllable millisecond clock for TTL tests."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    """Replace the cache clock with a FakeClock."""
    fake = FakeClock()
    monkeypatch.setattr("banjo_utils.cache._now_ms", fake)
    return fake


@pytest.fixture
def adapter() -> MemoryAdapter:
    """Create a fresh MemoryAdapter for each test."""
    return MemoryAdapter()
