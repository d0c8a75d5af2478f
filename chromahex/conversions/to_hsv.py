import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsv import HSV
from ..types.color_types import PERCENT_MAX
from .channels import RGBALike, unit_rgb, np_unit_rgb
from .hue import rgb_hue, np_rgb_hue


def rgb_to_hsv(color: RGBALike) -> HSV:
    """
    Convert RGB to HSV. Alpha, if present, is ignored.

    Args:
        color: RGBA instance or (r, g, b[, a]) sequence of ints in [0, 255]

    Returns:
        HSV: (hue [0,360), saturation [0,100], value [0,100])
    """
    r, g, b = unit_rgb(color)
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)

    saturation = 0.0 if delta == 0 else delta / max_c
    hue = rgb_hue(r, g, b, max_c, delta)

    return HSV(hue, saturation * PERCENT_MAX, max_c * PERCENT_MAX)


def np_rgb_to_hsv(r, g, b) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,100], value [0,100])
    """
    r, g, b = np_unit_rgb(r, g, b)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    saturation = np.zeros_like(max_c)
    mask = delta > 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = np_rgb_hue(r, g, b, max_c, delta)

    return np.stack([hue, saturation * PERCENT_MAX, max_c * PERCENT_MAX], axis=-1)
