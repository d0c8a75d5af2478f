import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsl import HSL
from ..types.color_types import PERCENT_MAX
from .channels import RGBALike, unit_rgb, np_unit_rgb
from .hue import rgb_hue, np_rgb_hue

## RGB to HSL conversions

def rgb_to_hsl(color: RGBALike) -> HSL:
    """
    Convert RGB to HSL. Alpha, if present, is ignored.

    Args:
        color: RGBA instance or (r, g, b[, a]) sequence of ints in [0, 255]

    Returns:
        HSL: (hue [0,360), saturation [0,100], lightness [0,100])

    Raises:
        InvalidRgbValueError: a channel of a raw sequence is outside [0, 255]
    """
    r, g, b = unit_rgb(color)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    hue = rgb_hue(r, g, b, max_c, delta)

    return HSL(hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX)


def np_rgb_to_hsl(r, g, b) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r, g, b = np_unit_rgb(r, g, b)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    saturation = np.zeros_like(lightness)
    mask_delta = delta > 0
    saturation[mask_delta] = delta[mask_delta] / (1 - np.abs(2 * lightness[mask_delta] - 1))

    hue = np_rgb_hue(r, g, b, max_c, delta)

    return np.stack([
        hue,
        np.clip(saturation * PERCENT_MAX, 0.0, PERCENT_MAX),
        np.clip(lightness * PERCENT_MAX, 0.0, PERCENT_MAX),
    ], axis=-1)
