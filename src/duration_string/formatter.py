from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Union

from duration_string.units import MAX_NANOS, NANOSECOND, UNITS_DESCENDING

if TYPE_CHECKING:
    from duration_string.durations import DurationString


def timedelta_to_nanos(value: timedelta) -> int:
    if value < timedelta(0):
        raise ValueError("duration must be >= 0")
    # Integer arithmetic on the components avoids float rounding.
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    return micros * 1000


def format_nanos(nanos: int) -> str:
    """
    Renders `nanos` in the largest unit that divides it evenly.

    Examples: 0 -> "0ns", 60_000_000_000 -> "1m", 330_000_000_000 -> "330s".
    """
    if isinstance(nanos, bool) or not isinstance(nanos, int):
        raise TypeError("nanos must be an int")
    if nanos < 0 or nanos > MAX_NANOS:
        raise ValueError(f"duration out of range: {nanos} ns")
    if nanos == 0:
        return f"0{NANOSECOND.suffix}"
    # "ns" is last and divides everything.
    unit = next(u for u in UNITS_DESCENDING if nanos % u.nanos == 0)
    return f"{nanos // unit.nanos}{unit.suffix}"


def format_duration(value: Union[int, timedelta, DurationString]) -> str:
    """
    Canonical text for an int (nanoseconds), a timedelta, or a DurationString.
    """
    if isinstance(value, timedelta):
        return format_nanos(timedelta_to_nanos(value))
    if isinstance(value, int) and not isinstance(value, bool):
        return format_nanos(value)
    nanos = getattr(value, "nanoseconds", None)
    if not isinstance(nanos, int):
        raise TypeError(f"cannot format {type(value).__name__} as a duration")
    return format_nanos(nanos)
