"""
Error taxonomy for hex parsing and RGB conversions.

Every failure raised by the core is a :class:`ColorParserError` carrying one of
the three :class:`ErrorKind` members. The base class derives from ``ValueError``
so callers can catch it with ordinary ``except ValueError`` handling.
"""
from __future__ import annotations
from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"
    INVALID_RGB_VALUE = "invalid_rgb_value"

    @property
    def message(self) -> str:
        return error_messages[self]


error_messages = {
    ErrorKind.INVALID_LENGTH: "Hex color must be 3, 4, 6 or 8 characters long",
    ErrorKind.INVALID_CHARACTER: "Invalid character in hex color",
    # Unreachable from parse_hex output; only raw channel input can trigger it.
    ErrorKind.INVALID_RGB_VALUE: "RGB values must be between 0 and 255",
}


class ColorParserError(ValueError):
    kind: ClassVar[ErrorKind]

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = self.kind.message
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidLengthError(ColorParserError):
    """The hex string (without ``#``) is not 3, 4, 6 or 8 characters long."""
    kind = ErrorKind.INVALID_LENGTH


class InvalidCharacterError(ColorParserError):
    """A two-character slice of the expanded hex string is not base-16."""
    kind = ErrorKind.INVALID_CHARACTER


class InvalidRgbValueError(ColorParserError):
    """A red/green/blue/alpha channel lies outside ``[0, 255]``."""
    kind = ErrorKind.INVALID_RGB_VALUE


error_classes: dict[ErrorKind, type[ColorParserError]] = {
    cls.kind: cls
    for cls in (InvalidLengthError, InvalidCharacterError, InvalidRgbValueError)
}

__all__ = [
    "ErrorKind",
    "ColorParserError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "InvalidRgbValueError",
    "error_classes",
]
