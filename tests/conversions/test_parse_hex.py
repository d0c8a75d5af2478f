import itertools

import numpy as np
import pytest

from chromahex.colors import RGBA
from chromahex.conversions import parse_hex, np_parse_hex, expand_hex
from chromahex.errors import ErrorKind, InvalidCharacterError, InvalidLengthError
from ..samples import samples_hex_rgba

HEX = "0123456789abcdef"


def test_parse_hex_samples():
    for text, expected in samples_hex_rgba.items():
        rgba = parse_hex(text)
        assert isinstance(rgba, RGBA)
        assert tuple(rgba) == expected


def test_full_hex_with_alpha():
    assert parse_hex("#FFAA33CC") == RGBA(255, 170, 51, 204)


def test_six_digits_default_to_opaque():
    for r, g, b in [("00", "00", "00"), ("12", "ab", "ef"), ("ff", "ff", "ff")]:
        assert parse_hex("#" + r + g + b).alpha == 255


def test_shorthand_equals_doubled_digits():
    for r, g, b in itertools.product("0f7a", repeat=3):
        short = parse_hex(r + g + b)
        full = parse_hex(r * 2 + g * 2 + b * 2)
        assert short == full
        assert short.alpha == 255


def test_shorthand_with_alpha():
    assert parse_hex("#1234") == RGBA(0x11, 0x22, 0x33, 0x44)


def test_case_insensitive():
    assert parse_hex("#FA3") == parse_hex("#fa3")
    assert parse_hex("#AbCdEf") == parse_hex("abcdef")


def test_only_one_hash_is_stripped():
    with pytest.raises(InvalidCharacterError):
        parse_hex("##fff")


@pytest.mark.parametrize("text", ["FFFFF", "", "#", "#ff", "#fffffff", "#fffffffff", "f"])
def test_invalid_length(text):
    with pytest.raises(InvalidLengthError) as excinfo:
        parse_hex(text)
    assert excinfo.value.kind is ErrorKind.INVALID_LENGTH


@pytest.mark.parametrize("text", ["#GGHHII", "#12345G", "zzz", "#+f+f+f", "# f f f", "#_f_f_f", "0x1234"])
def test_invalid_character(text):
    with pytest.raises(InvalidCharacterError) as excinfo:
        parse_hex(text)
    assert excinfo.value.kind is ErrorKind.INVALID_CHARACTER


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_hex("nope")


def test_non_string_input():
    with pytest.raises(TypeError):
        parse_hex(0xFFAA33)  # type: ignore[arg-type]


def test_expand_hex():
    assert expand_hex("abc") == "aabbccFF"
    assert expand_hex("abcd") == "aabbccdd"
    assert expand_hex("aabbcc") == "aabbccFF"
    assert expand_hex("aabbccdd") == "aabbccdd"
    with pytest.raises(InvalidLengthError):
        expand_hex("abcde")


def test_every_byte_round_trips_through_hex():
    for value in range(256):
        pair = f"{value:02x}"
        assert parse_hex(pair * 3).red == value


def test_np_parse_hex():
    texts = list(samples_hex_rgba.keys())
    result = np_parse_hex(texts)
    assert result.shape == (len(texts), 4)
    assert result.dtype == np.uint8
    assert np.array_equal(result, np.array(list(samples_hex_rgba.values())))


def test_np_parse_hex_empty():
    assert np_parse_hex([]).shape == (0, 4)


def test_np_parse_hex_propagates_errors():
    with pytest.raises(InvalidLengthError):
        np_parse_hex(["#fff", "#ffff5"])
