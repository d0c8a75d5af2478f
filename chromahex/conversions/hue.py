import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_360


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue in degrees shared by the HSL and HSV conversions.

    The dominant channel is tested red, then green, then blue, so ties
    resolve to the first match.

    Args:
        r, g, b: Channels in [0, 1]
        max_c: max(r, g, b)
        delta: max(r, g, b) - min(r, g, b)

    Returns:
        Hue in [0, 360); 0 for achromatic input
    """
    if delta == 0:
        return 0.0
    if max_c == r:
        sector = ((g - b) / delta) % 6
    elif max_c == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4
    return (sector * 60) % HUE_360


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized :func:`rgb_hue`; all arguments already broadcast to one shape."""
    hue = np.zeros_like(max_c, dtype=float)
    chromatic = delta > 0

    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    return (hue * 60) % HUE_360
