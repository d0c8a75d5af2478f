from typing import Any, ClassVar, Tuple

from ..types.numbers import Degrees, Percentage
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class HSV(ColorBase):
    """
    Hue, saturation and value percentages.

    ``value`` already names the whole channel tuple on every color, so the V
    channel is read as ``brightness`` (or ``v``). ``as_dict()`` and ``repr``
    still label it ``"value"``.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = "hsv"
    channels:     ClassVar[Tuple[str, ...]] = ("hue", "saturation", "value")
    maxima:       ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)

    hue = channel(0, "Hue in degrees, [0, 360).")
    saturation = channel(1, "Saturation percentage, [0, 100].")
    brightness = channel(2, "Value (brightness) percentage, [0, 100].")
    v = brightness

    @classmethod
    def _coerce(cls, values: Tuple[Any, ...]) -> Tuple[float, ...]:
        if len(values) != cls.num_channels:
            return values
        h, s, v = values
        return Degrees(h), Percentage(s), Percentage(v)
