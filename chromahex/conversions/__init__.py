"""
Chromahex Conversions
=====================

Hex parsing and RGB → HSL / HSV / CMYK conversions, each with a scalar
function returning a value object and a vectorized numpy twin.

Hex → RGBA:
    parse_hex(text)
        "#RGB", "#RGBA", "#RRGGBB" or "#RRGGBBAA" (``#`` optional) to RGBA
    np_parse_hex(texts)
        Many strings to an (N, 4) uint8 array

RGB → HSL:
    rgb_to_hsl(color)
    np_rgb_to_hsl(r, g, b)

RGB → HSV:
    rgb_to_hsv(color)
    np_rgb_to_hsv(r, g, b)

RGB → CMYK:
    rgb_to_cmyk(color)
    np_rgb_to_cmyk(r, g, b)

High-Level API
--------------
    convert(color, to_space)
    np_convert(array, to_space)

Ranges
------
Hue is in degrees [0, 360). Saturation, lightness, value and the CMYK
channels are percentages in [0, 100]. Alpha is never consulted.

Examples
--------
>>> from chromahex.conversions import parse_hex, rgb_to_hsl
>>> rgba = parse_hex("#0F0")
>>> rgb_to_hsl(rgba)
HSL(hue=Degrees(120.0), saturation=Percentage(100.0), lightness=Percentage(50.0))
"""

from .hex import parse_hex, np_parse_hex, expand_hex
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .wrapper import convert, np_convert

__all__ = [
    'parse_hex',
    'np_parse_hex',
    'expand_hex',
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'rgb_to_cmyk',
    'np_rgb_to_cmyk',
    'convert',
    'np_convert',
]
