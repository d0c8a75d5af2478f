from numbers import Integral
from typing import Any, ClassVar, Tuple

from ..errors import InvalidRgbValueError
from ..types.color_types import ColorSpace, CHANNEL_MAX
from .color_base import ColorBase, WithAlpha, channel


def validate_channel(name: str, value: Any) -> int:
    """Return ``value`` as an int, raising InvalidRgbValueError unless it is an 8-bit integer."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidRgbValueError(f"{name}={value!r} is not an integer")
    if not 0 <= value <= CHANNEL_MAX:
        raise InvalidRgbValueError(f"{name}={value!r}")
    return int(value)


class RGBA(ColorBase, WithAlpha):
    """
    An 8-bit red/green/blue/alpha color.

    Every channel is checked on construction, so an RGBA instance can never
    hold a value outside ``[0, 255]``. A three-channel input gets an opaque
    alpha.

    >>> RGBA(255, 170, 51)
    RGBA(red=255, green=170, blue=51, alpha=255)
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorSpace] = "rgba"
    channels:     ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    maxima:       ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    alpha_max:    ClassVar[int] = CHANNEL_MAX

    red = channel(0)
    green = channel(1)
    blue = channel(2)

    @classmethod
    def _coerce(cls, values: Tuple[Any, ...]) -> Tuple[int, ...]:
        if len(values) == 3:
            values = values + (CHANNEL_MAX,)
        if len(values) != cls.num_channels:
            return values
        return tuple(validate_channel(name, v) for name, v in zip(cls.channels, values))

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._value[:3]

    @property
    def unit_rgb(self) -> Tuple[float, float, float]:
        """Red, green and blue as fractions of 255."""
        return tuple(c / CHANNEL_MAX for c in self._value[:3])  # type: ignore[return-value]

    def hex(self, with_alpha: bool | None = None) -> str:
        """
        Format as ``#RRGGBB`` or ``#RRGGBBAA``.

        Args:
            with_alpha: Force the alpha pair on or off. ``None`` drops it only
                when the color is fully opaque.
        """
        if with_alpha is None:
            with_alpha = not self.is_opaque
        channels = self._value if with_alpha else self._value[:3]
        return "#" + "".join(f"{c:02X}" for c in channels)
