from typing import Any, ClassVar, Tuple

from ..types.numbers import Percentage
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class CMYK(ColorBase):
    """Subtractive cyan/magenta/yellow/black percentages."""
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorSpace] = "cmyk"
    channels:     ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "black")
    maxima:       ClassVar[Tuple[float, float, float, float]] = (100.0, 100.0, 100.0, 100.0)

    cyan = channel(0)
    magenta = channel(1)
    yellow = channel(2)
    black = channel(3)
    key = black

    @classmethod
    def _coerce(cls, values: Tuple[Any, ...]) -> Tuple[float, ...]:
        if len(values) != cls.num_channels:
            return values
        return tuple(Percentage(v) for v in values)
