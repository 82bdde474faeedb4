from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional, Union

from duration_string.formatter import format_nanos, timedelta_to_nanos
from duration_string.parser import parse_nanos
from duration_string.units import MAX_NANOS


DurationLike = Union["DurationString", timedelta]
_MICROSECOND = timedelta(microseconds=1)


def _checked(nanos: int) -> int:
    if nanos < 0:
        raise OverflowError("duration would be negative")
    if nanos > MAX_NANOS:
        raise OverflowError("duration is too large to fit in 64-bit nanoseconds")
    return nanos


def _nanos_of(value: object) -> Optional[int]:
    if isinstance(value, DurationString):
        return value.nanoseconds
    if isinstance(value, timedelta):
        # May be negative; callers range-check.
        return value // _MICROSECOND * 1000
    return None


@dataclass(frozen=True, eq=False)
class DurationString:
    """
    A non-negative duration with nanosecond resolution whose text form is
    the canonical duration string.

    - DurationString.from_string("1h10m") -> DurationString('70m')
    - DurationString.from_timedelta(timedelta(seconds=1)) -> DurationString('1s')
    - str(DurationString(100_000_000)) -> "100ms"

    Equality, ordering and arithmetic work on the numeric value and accept
    plain timedelta operands.
    """

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.nanoseconds, bool) or not isinstance(self.nanoseconds, int):
            raise TypeError("nanoseconds must be an int")
        if self.nanoseconds < 0:
            raise ValueError("duration must be >= 0")
        if self.nanoseconds > MAX_NANOS:
            raise ValueError("duration is too large to fit in 64-bit nanoseconds")

    @classmethod
    def from_string(cls, text: str) -> DurationString:
        return cls(parse_nanos(text))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> DurationString:
        return cls(timedelta_to_nanos(value))

    def to_timedelta(self) -> timedelta:
        # timedelta stops at microseconds; the remainder is truncated.
        return timedelta(microseconds=self.nanoseconds // 1000)

    def total_seconds(self) -> float:
        return self.nanoseconds / 1_000_000_000

    def __str__(self) -> str:
        return format_nanos(self.nanoseconds)

    def __repr__(self) -> str:
        return f"DurationString({str(self)!r})"

    def __hash__(self) -> int:
        # Must agree with hash() of an equal timedelta.
        if self.nanoseconds % 1000 == 0:
            return hash(self.to_timedelta())
        return hash(self.nanoseconds)

    def __bool__(self) -> bool:
        return self.nanoseconds != 0

    def __eq__(self, other: object) -> bool:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds == nanos

    def __lt__(self, other: DurationLike) -> bool:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds < nanos

    def __le__(self, other: DurationLike) -> bool:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds <= nanos

    def __gt__(self, other: DurationLike) -> bool:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds > nanos

    def __ge__(self, other: DurationLike) -> bool:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds >= nanos

    def __add__(self, other: DurationLike) -> DurationString:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return DurationString(_checked(self.nanoseconds + nanos))

    def __radd__(self, other: object):
        # sum() starts from 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        if isinstance(other, timedelta):
            return other + self.to_timedelta()
        return NotImplemented

    def __sub__(self, other: DurationLike) -> DurationString:
        nanos = _nanos_of(other)
        if nanos is None:
            return NotImplemented
        return DurationString(_checked(self.nanoseconds - nanos))

    def __rsub__(self, other: object):
        if isinstance(other, timedelta):
            return other - self.to_timedelta()
        return NotImplemented

    def __mul__(self, factor: int) -> DurationString:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return DurationString(_checked(self.nanoseconds * factor))

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> DurationString:
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("duration division by zero")
        if divisor < 0:
            raise ValueError("divisor must be > 0")
        return DurationString(self.nanoseconds // divisor)

    # Integer division, as for the nanosecond count.
    __truediv__ = __floordiv__


def sum_durations(values: Iterable[DurationLike]) -> DurationString:
    total = DurationString()
    for v in values:
        total = total + v
    return total
