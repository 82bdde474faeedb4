from __future__ import annotations


class DurationParseError(ValueError):
    """Base exception for invalid duration text.

    `text` is the input being parsed and `index` the position where
    scanning stopped.
    """

    def __init__(self, message: str, *, text: str = "", index: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.index = index


class EmptyDurationError(DurationParseError):
    """Raised when the input is empty or only whitespace."""


class MissingNumberError(DurationParseError):
    """Raised when a segment does not start with a digit."""


class InvalidNumberError(DurationParseError):
    """Raised when a digit run does not fit in 64 bits."""


class UnknownUnitError(DurationParseError):
    """Raised when no known unit suffix follows a number."""


class DurationOverflowError(DurationParseError, OverflowError):
    """Raised when the total exceeds the 64-bit nanosecond range."""


class TrailingInputError(DurationParseError):
    """Raised when unrecognized characters follow the last segment."""
