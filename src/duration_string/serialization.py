from __future__ import annotations

from datetime import timedelta
from typing import Any, Union

from duration_string.durations import DurationString
from duration_string.errors import DurationParseError
from duration_string.formatter import format_duration


class DurationSerializationError(ValueError):
    """Raised when a serialized value cannot be turned into a DurationString."""


def to_text(value: Union[DurationString, timedelta, int]) -> str:
    return format_duration(value)


def from_text(value: Any) -> DurationString:
    if not isinstance(value, str):
        raise DurationSerializationError(
            f"invalid type: expected a duration string, got {type(value).__name__}"
        )
    try:
        return DurationString.from_string(value)
    except DurationParseError as e:
        raise DurationSerializationError(f"invalid value {value!r}: {e}") from e


def json_default(obj: Any) -> str:
    if isinstance(obj, DurationString):
        return to_text(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
