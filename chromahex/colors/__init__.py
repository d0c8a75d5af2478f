"""
Chromahex Color Classes
=======================

Immutable value objects for the four supported representations.

Features
--------
- Frozen instances (``__slots__`` plus a blocking ``__setattr__``)
- Value equality and hashing, so colors work as dict keys and set members
- Iterable and indexable like the tuple they wrap
- Range enforcement on construction: RGBA rejects out-of-range channels,
  HSL/HSV/CMYK clamp percentages to [0, 100] and wrap hue into [0, 360)

Usage
-----
>>> from chromahex.colors import RGBA
>>> red = RGBA(255, 0, 0)
>>> red.alpha
255
>>> r, g, b, a = red
>>> red.to_hsv()
HSV(hue=Degrees(0.0), saturation=Percentage(100.0), value=Percentage(100.0))
>>> red.with_alpha(128).hex()
'#FF000080'

Color Classes
-------------
    - RGBA: 8-bit red/green/blue/alpha
    - HSL: hue, saturation, lightness
    - HSV: hue, saturation, value (exposed as ``brightness``)
    - CMYK: cyan, magenta, yellow, black (also ``key``)
"""

from .color_base import ColorBase
from .rgb import RGBA
from .hsl import HSL
from .hsv import HSV
from .cmyk import CMYK
from .color import get_color_class, space_to_class

__all__ = ['ColorBase', 'RGBA', 'HSL', 'HSV', 'CMYK', 'get_color_class', 'space_to_class']
