from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from duration_string.errors import UnknownUnitError


# Largest value of the unsigned 64-bit nanosecond counter.
MAX_NANOS = 2**64 - 1


@dataclass(frozen=True)
class Unit:
    suffix: str
    nanos: int


NANOSECOND = Unit("ns", 1)
MICROSECOND = Unit("us", 1_000)
MILLISECOND = Unit("ms", 1_000_000)
SECOND = Unit("s", 1_000_000_000)
MINUTE = Unit("m", 60 * SECOND.nanos)
HOUR = Unit("h", 60 * MINUTE.nanos)
DAY = Unit("d", 24 * HOUR.nanos)
WEEK = Unit("w", 7 * DAY.nanos)
YEAR = Unit("y", 365 * DAY.nanos)

UNITS: Tuple[Unit, ...] = (
    NANOSECOND,
    MICROSECOND,
    MILLISECOND,
    SECOND,
    MINUTE,
    HOUR,
    DAY,
    WEEK,
    YEAR,
)
UNITS_DESCENDING: Tuple[Unit, ...] = tuple(reversed(UNITS))

_BY_SUFFIX: Dict[str, Unit] = {u.suffix: u for u in UNITS}
# Two-letter suffixes go first so "ms" never matches as "m" + "s".
_MATCH_ORDER: Tuple[Unit, ...] = tuple(sorted(UNITS, key=lambda u: -len(u.suffix)))


def scale_of(suffix: str) -> int:
    """
    Nanoseconds per `suffix`, e.g. scale_of("ms") -> 1_000_000.
    """
    unit = _BY_SUFFIX.get(suffix)
    if unit is None:
        raise UnknownUnitError(f"unknown unit {suffix!r}", text=suffix, index=0)
    return unit.nanos


def match_unit(text: str, index: int) -> Optional[Unit]:
    """
    Returns the longest unit whose suffix starts at `text[index]`, or None.
    """
    for unit in _MATCH_ORDER:
        if text.startswith(unit.suffix, index):
            return unit
    return None
