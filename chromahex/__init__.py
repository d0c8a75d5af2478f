"""
Chromahex - Hex Color Parsing and Conversion
============================================

Parses hexadecimal color strings into RGBA and converts RGBA into HSL, HSV
and CMYK.

Key Features
------------
- Hex input in 3, 4, 6 and 8 digit forms, ``#`` optional, any letter case
- RGB → HSL, HSV and CMYK with the usual achromatic and pure-black handling
- Immutable, value-equal color instances safe to share between threads
- Vectorized numpy variants of every conversion
- A closed error taxonomy rooted at ``ValueError``

Quick Start
-----------
>>> from chromahex import parse_hex, rgb_to_hsl, rgb_to_cmyk
>>>
>>> rgba = parse_hex("#FFAA33CC")
>>> rgba
RGBA(red=255, green=170, blue=51, alpha=204)
>>>
>>> hsl = rgb_to_hsl(rgba)
>>> round(hsl.hue), round(hsl.saturation), round(hsl.lightness)
(35, 100, 60)
>>>
>>> rgb_to_cmyk((0, 0, 0)).black
Percentage(100.0)
"""

from .errors import (
    ErrorKind,
    ColorParserError,
    InvalidLengthError,
    InvalidCharacterError,
    InvalidRgbValueError,
)

from .colors import ColorBase, RGBA, HSL, HSV, CMYK

from .conversions import (
    parse_hex, np_parse_hex,
    rgb_to_hsl, np_rgb_to_hsl,
    rgb_to_hsv, np_rgb_to_hsv,
    rgb_to_cmyk, np_rgb_to_cmyk,
    convert, np_convert,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ErrorKind",
    "ColorParserError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "InvalidRgbValueError",

    # Color classes
    "ColorBase", "RGBA", "HSL", "HSV", "CMYK",

    # Conversions
    "parse_hex", "np_parse_hex",
    "rgb_to_hsl", "np_rgb_to_hsl",
    "rgb_to_hsv", "np_rgb_to_hsv",
    "rgb_to_cmyk", "np_rgb_to_cmyk",
    "convert", "np_convert",

    # Version
    "__version__",
]
