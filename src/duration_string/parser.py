from __future__ import annotations

from datetime import timedelta

from duration_string.errors import (
    DurationOverflowError,
    EmptyDurationError,
    InvalidNumberError,
    MissingNumberError,
    TrailingInputError,
    UnknownUnitError,
)
from duration_string.units import MAX_NANOS, match_unit


_DIGITS = "0123456789"
_FORMAT_HINT = "must be multiples of `[0-9]+(ns|us|ms|[smhdwy])`"
_MAX_DIGITS = len(str(MAX_NANOS))


def _skip_space(text: str, index: int) -> int:
    while index < len(text) and text[index].isspace():
        index += 1
    return index


def _scan_digits(text: str, index: int) -> int:
    while index < len(text) and text[index] in _DIGITS:
        index += 1
    return index


def parse_nanos(text: str) -> int:
    """
    Parses a duration string into a count of nanoseconds.

    Supported:
    - "100ms"   -> 100_000_000
    - "1h10m"   -> 4_200_000_000_000
    - "5m 30s"  -> 330_000_000_000
    - "1s2s"    -> 3_000_000_000 (segments add up, in any order)

    Raises a DurationParseError subclass on the first invalid token.
    """
    index = _skip_space(text, 0)
    if index == len(text):
        raise EmptyDurationError("empty duration", text=text, index=index)

    total = 0
    segments = 0
    while index < len(text):
        start = index
        index = _scan_digits(text, index)
        if index == start:
            if segments:
                raise TrailingInputError(
                    f"unexpected {text[start:]!r} after duration", text=text, index=start
                )
            raise MissingNumberError(f"expected a number, {_FORMAT_HINT}", text=text, index=start)

        digits = text[start:index].lstrip("0") or "0"
        # Length check first: int() refuses very long digit strings.
        if len(digits) > _MAX_DIGITS or int(digits) > MAX_NANOS:
            raise InvalidNumberError("number is too large for 64 bits", text=text, index=start)
        value = int(digits)

        unit = match_unit(text, index)
        if unit is None:
            if index == len(text):
                raise UnknownUnitError(f"missing unit, {_FORMAT_HINT}", text=text, index=index)
            raise UnknownUnitError(f"unknown unit, {_FORMAT_HINT}", text=text, index=index)

        total += value * unit.nanos
        if total > MAX_NANOS:
            raise DurationOverflowError(
                "number is too large to fit in target type", text=text, index=start
            )
        segments += 1
        index = _skip_space(text, index + len(unit.suffix))

    return total


def parse_duration(text: str) -> timedelta:
    """
    Like parse_nanos, but returns a timedelta (sub-microsecond precision is dropped).
    """
    return timedelta(microseconds=parse_nanos(text) // 1000)
