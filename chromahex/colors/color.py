from __future__ import annotations
from .color_base import ColorBase
from .rgb import RGBA
from .hsl import HSL
from .hsv import HSV
from .cmyk import CMYK
from ..conversions import parse_hex, rgb_to_hsl, rgb_to_hsv, rgb_to_cmyk, convert
from ..types.color_types import ColorSpace

space_to_class: dict[ColorSpace, type[ColorBase]] = {
    cls.mode: cls for cls in (RGBA, HSL, HSV, CMYK)
}


def rgba_from_hex(cls: type[RGBA], text: str) -> RGBA:
    """Parse ``text`` with :func:`parse_hex`."""
    return parse_hex(text)


def rgba_convert(self: RGBA, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to another space.

    Args:
        to_space: "rgba", "hsl", "hsv" or "cmyk"

    Returns:
        New instance of the class registered for ``to_space``
    """
    return convert(self, to_space)


RGBA.from_hex = classmethod(rgba_from_hex)  # type: ignore[attr-defined]
RGBA.convert = rgba_convert  # type: ignore[attr-defined]
RGBA.to_hsl = rgb_to_hsl  # type: ignore[attr-defined]
RGBA.to_hsv = rgb_to_hsv  # type: ignore[attr-defined]
RGBA.to_cmyk = rgb_to_cmyk  # type: ignore[attr-defined]


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = space_to_class.get(color_space.lower())  # type: ignore[call-overload]
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class
