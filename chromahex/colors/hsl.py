from typing import Any, ClassVar, Tuple

from ..types.numbers import Degrees, Percentage
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class HSL(ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = "hsl"
    channels:     ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")
    maxima:       ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)

    hue = channel(0, "Hue in degrees, [0, 360).")
    saturation = channel(1, "Saturation percentage, [0, 100].")
    lightness = channel(2, "Lightness percentage, [0, 100].")

    @classmethod
    def _coerce(cls, values: Tuple[Any, ...]) -> Tuple[float, ...]:
        if len(values) != cls.num_channels:
            return values
        h, s, l = values
        return Degrees(h), Percentage(s), Percentage(l)
