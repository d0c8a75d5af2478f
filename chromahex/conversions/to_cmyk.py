import numpy as np
from numpy import ndarray as NDArray

from ..colors.cmyk import CMYK
from ..types.color_types import PERCENT_MAX
from .channels import RGBALike, unit_rgb, np_unit_rgb

PURE_BLACK = (0.0, 0.0, 0.0, PERCENT_MAX)


def rgb_to_cmyk(color: RGBALike) -> CMYK:
    """
    Convert RGB to CMYK. Alpha, if present, is ignored.

    Pure black short-circuits to (0, 0, 0, 100) instead of dividing by zero.

    Args:
        color: RGBA instance or (r, g, b[, a]) sequence of ints in [0, 255]

    Returns:
        CMYK: (cyan, magenta, yellow, black), each in [0, 100]
    """
    r, g, b = unit_rgb(color)
    k = 1 - max(r, g, b)

    if k == 1:
        return CMYK(PURE_BLACK)

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)

    return CMYK(c * PERCENT_MAX, m * PERCENT_MAX, y * PERCENT_MAX, k * PERCENT_MAX)


def np_rgb_to_cmyk(r, g, b) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to CMYK.

    Returns:
        cmyk: array of shape (..., 4): (cyan, magenta, yellow, black) in [0, 100]
    """
    r, g, b = np_unit_rgb(r, g, b)

    k = 1 - np.maximum.reduce([r, g, b])

    # Pure black keeps c = m = y = 0; the safe denominator only avoids warnings
    chromatic = k < 1
    denom = np.where(chromatic, 1 - k, 1.0)
    c = np.where(chromatic, (1 - r - k) / denom, 0.0)
    m = np.where(chromatic, (1 - g - k) / denom, 0.0)
    y = np.where(chromatic, (1 - b - k) / denom, 0.0)

    out = np.stack([c, m, y, k], axis=-1) * PERCENT_MAX
    return np.clip(out, 0.0, PERCENT_MAX)
