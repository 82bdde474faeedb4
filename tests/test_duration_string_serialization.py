from __future__ import annotations

import json
from datetime import timedelta

import pytest

from duration_string.durations import DurationString
from duration_string.errors import UnknownUnitError
from duration_string.serialization import DurationSerializationError, from_text, json_default, to_text


def test_to_text() -> None:
    assert to_text(DurationString.from_string("60s")) == "1m"
    assert to_text(timedelta(seconds=90)) == "90s"
    assert to_text(0) == "0ns"


def test_from_text() -> None:
    assert str(from_text("2m")) == "2m"
    assert from_text("5m 30s") == timedelta(seconds=330)


def test_from_text_invalid_value() -> None:
    with pytest.raises(DurationSerializationError) as exc_info:
        from_text("1000x")
    assert isinstance(exc_info.value.__cause__, UnknownUnitError)


@pytest.mark.parametrize("value", [5, None, ["1s"], 1.5])
def test_from_text_invalid_type(value: object) -> None:
    with pytest.raises(DurationSerializationError):
        from_text(value)


def test_json_round_trip() -> None:
    payload = {"t": DurationString.from_string("1m")}
    encoded = json.dumps(payload, default=json_default, separators=(",", ":"))
    assert encoded == '{"t":"1m"}'

    decoded = json.loads('{"d":"2m"}')
    assert from_text(decoded["d"]) == DurationString.from_string("120s")


def test_json_default_rejects_other_objects() -> None:
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, default=json_default)


def test_from_text_very_long_number() -> None:
    with pytest.raises(DurationSerializationError):
        from_text("1" * 5000 + "ns")
