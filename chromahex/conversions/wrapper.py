import logging
from typing import Callable, Union

import numpy as np

from ..colors.color_base import ColorBase
from ..types.color_types import COLOR_SPACES, CHANNEL_MAX, ColorSpace, element_to_array
from .channels import RGBALike, as_rgba, np_unit_rgb, np_validate_channel
from .hex import parse_hex
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv

logger = logging.getLogger(__name__)

ColorInput = Union[str, RGBALike]

CONVERT_SCALAR: dict[str, Callable[[RGBALike], ColorBase]] = {
    "rgba": as_rgba,
    "hsl": rgb_to_hsl,
    "hsv": rgb_to_hsv,
    "cmyk": rgb_to_cmyk,
}

CONVERT_NUMPY: dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "hsl": np_rgb_to_hsl,
    "hsv": np_rgb_to_hsv,
    "cmyk": np_rgb_to_cmyk,
}


def _target_space(to_space: str) -> str:
    space = to_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {to_space!r}; expected one of {COLOR_SPACES}")
    return space


def convert(color: ColorInput, to_space: ColorSpace) -> ColorBase:
    """
    Convert a hex string, RGBA or channel sequence into ``to_space``.

    Args:
        color: ``"#FA3"``-style string, RGBA, or (r, g, b[, a]) ints
        to_space: one of "rgba", "hsl", "hsv", "cmyk" (case-insensitive)

    Returns:
        RGBA, HSL, HSV or CMYK instance
    """
    space = _target_space(to_space)
    rgba = parse_hex(color) if isinstance(color, str) else as_rgba(color)
    logger.debug("converting %r to %s", rgba, space)
    return CONVERT_SCALAR[space](rgba)


def np_convert(color: np.ndarray, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized: convert an array of 8-bit RGB(A) colors into ``to_space``.

    Args:
        color: array of shape (..., 3) or (..., 4); alpha is ignored
        to_space: one of "rgba", "hsl", "hsv", "cmyk"

    Returns:
        float array of shape (..., 3) for hsl/hsv, (..., 4) for cmyk; for
        "rgba" the input with an opaque alpha appended when it has none
    """
    space = _target_space(to_space)
    arr = element_to_array(color)
    if arr.ndim == 0 or arr.shape[-1] not in (3, 4):
        raise ValueError(f"expected last dimension of 3 or 4, got shape {arr.shape}")

    if space == "rgba":
        np_unit_rgb(arr[..., 0], arr[..., 1], arr[..., 2])  # range check only
        if arr.shape[-1] == 4:
            np_validate_channel("alpha", arr[..., 3])
            return arr
        alpha = np.full(arr.shape[:-1] + (1,), CHANNEL_MAX, dtype=arr.dtype)
        return np.concatenate([arr, alpha], axis=-1)

    return CONVERT_NUMPY[space](arr[..., 0], arr[..., 1], arr[..., 2])
