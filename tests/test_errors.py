import pytest

from chromahex.errors import (
    ColorParserError,
    ErrorKind,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidRgbValueError,
    error_classes,
)


def test_every_kind_has_one_class():
    assert set(error_classes) == set(ErrorKind)
    for kind, cls in error_classes.items():
        assert cls.kind is kind
        assert issubclass(cls, ColorParserError)
        assert issubclass(cls, ValueError)


def test_messages():
    assert str(InvalidLengthError()) == "Hex color must be 3, 4, 6 or 8 characters long"
    assert str(InvalidCharacterError()) == "Invalid character in hex color"
    assert str(InvalidRgbValueError()) == "RGB values must be between 0 and 255"


def test_detail_is_appended():
    err = InvalidCharacterError("'GG'")
    assert err.detail == "'GG'"
    assert str(err) == "Invalid character in hex color: 'GG'"


def test_kind_message_property():
    assert ErrorKind.INVALID_LENGTH.message == str(InvalidLengthError())


def test_catchable_as_base():
    with pytest.raises(ColorParserError):
        raise InvalidRgbValueError("red=300")
