from __future__ import annotations
from typing import Literal, Sequence, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ChannelSequence = Sequence[int]
ChannelArray = Union[ndarray, Sequence[int], int]
ColorSpace = Literal["rgba", "hsl", "hsv", "cmyk"]
COLOR_SPACES = ("rgba", "hsl", "hsv", "cmyk")
HUE_SPACES = {"hsl", "hsv"}

CHANNEL_MAX = 255
PERCENT_MAX = 100.0
HUE_360 = 360.0


def element_to_array(element: Union[ChannelSequence, ndarray]) -> np.ndarray:
    """
    Convert a channel sequence to a numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    return np.asarray(element)


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space carries a hue channel (HSV or HSL).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
