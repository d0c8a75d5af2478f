from boundednumbers.functions import clamp

from .color_types import Scalar, PERCENT_MAX, HUE_360


class Percentage(float):
    """A floating-point number clamped to the inclusive range ``[0, 100]``."""

    def __new__(cls, value: Scalar):
        if not 0.0 <= value <= PERCENT_MAX:
            value = float(clamp(value, 0.0, PERCENT_MAX))
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Percentage({float(self)})"


class Degrees(float):
    """A hue angle wrapped into ``[0, 360)``."""

    def __new__(cls, value: Scalar):
        return super().__new__(cls, normalize_hue(value))

    def __repr__(self):
        return f"Degrees({float(self)})"


def normalize_hue(h: Scalar) -> float:
    """Normalize hue to [0, 360) range."""
    return float(h) % HUE_360


def unit_to_percentage(value: Scalar) -> Percentage:
    return Percentage(value * PERCENT_MAX)
