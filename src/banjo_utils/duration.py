"""Duration parsing utilities."""

import re

from banjo_utils.types import Duration

_DURATION_PATTERN = re.compile(r"^(\d+)(ms|s|m|h|d)$")
_UNITS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
}


def parse_duration(duration: Duration) -> int:
    """Parse duration string to milliseconds. Passthrough if already int."""
    if isinstance(duration, bool):
        raise TypeError(f"Invalid duration: {duration!r}")
    if isinstance(duration, int):
        return duration

    match = _DURATION_PATTERN.match(duration)
    if not match:
        raise ValueError(f"Invalid duration: {duration!r}")

    value, unit = match.groups()
    return int(value) * _UNITS[unit]


def to_milliseconds(
    *,
    days: float = 0,
    hours: float = 0,
    minutes: float = 0,
    seconds: float = 0,
    milliseconds: float = 0,
) -> int:
    """Sum the given parts into whole milliseconds.

    Example:
        to_milliseconds(minutes=5)             # 300_000
        to_milliseconds(hours=1, seconds=30)   # 3_630_000
    """
    total = (
        days * _UNITS["d"]
        + hours * _UNITS["h"]
        + minutes * _UNITS["m"]
        + seconds * _UNITS["s"]
        + milliseconds
    )
    return int(total)
