from __future__ import annotations

from datetime import timedelta

import pytest

from duration_string.durations import DurationString
from duration_string.formatter import format_duration, format_nanos, timedelta_to_nanos
from duration_string.parser import parse_nanos
from duration_string.units import MAX_NANOS

S = 1_000_000_000


@pytest.mark.parametrize(
    "nanos,expected",
    [
        (0, "0ns"),
        (1, "1ns"),
        (1_500, "1500ns"),
        (2_000, "2us"),
        (100_000_000, "100ms"),
        (S, "1s"),
        (60 * S, "1m"),
        (61 * S, "61s"),
        (330 * S, "330s"),
        (4200 * S, "70m"),
        (3600 * S, "1h"),
        (86_400 * S, "1d"),
        (7 * 86_400 * S, "1w"),
        (14 * 86_400 * S, "2w"),
        (365 * 86_400 * S, "1y"),
        (MAX_NANOS, "18446744073709551615ns"),
    ],
)
def test_format_nanos(nanos: int, expected: str) -> None:
    assert format_nanos(nanos) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("60s", "1m"),
        ("1000ms", "1s"),
        ("60000ms", "1m"),
        ("61000ms", "61s"),
        ("5m 30s", "330s"),
        ("1h10m", "70m"),
        ("24h", "1d"),
        ("0h", "0ns"),
    ],
)
def test_format_picks_largest_even_unit(raw: str, expected: str) -> None:
    assert format_nanos(parse_nanos(raw)) == expected


@pytest.mark.parametrize(
    "nanos",
    [0, 1, 999, 1_000, 1_234_567, 60 * S, 330 * S, 4200 * S, 31_536_000 * S + 1, MAX_NANOS],
)
def test_parse_of_format_is_identity(nanos: int) -> None:
    assert parse_nanos(format_nanos(nanos)) == nanos


@pytest.mark.parametrize("nanos", [-1, MAX_NANOS + 1])
def test_format_nanos_out_of_range(nanos: int) -> None:
    with pytest.raises(ValueError):
        format_nanos(nanos)


def test_format_duration_accepts_host_types() -> None:
    assert format_duration(timedelta(milliseconds=100)) == "100ms"
    assert format_duration(timedelta(seconds=90)) == "90s"
    assert format_duration(60 * S) == "1m"
    assert format_duration(DurationString(2 * S)) == "2s"


def test_format_duration_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        format_duration("1s")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        format_duration(True)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        format_duration(timedelta(seconds=-1))


def test_timedelta_to_nanos_is_exact() -> None:
    assert timedelta_to_nanos(timedelta(days=1, microseconds=5)) == 86_400 * S + 5_000
    assert timedelta_to_nanos(timedelta(0)) == 0


def test_format_nanos_rejects_bool() -> None:
    with pytest.raises(TypeError):
        format_nanos(True)
