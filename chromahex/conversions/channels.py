"""Normalization and validation of RGB input shared by every conversion."""
from typing import Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGBA
from ..errors import InvalidRgbValueError
from ..types.color_types import CHANNEL_MAX, ChannelArray

RGBALike = Union[RGBA, Sequence[int]]


def as_rgba(color: RGBALike) -> RGBA:
    """
    Return ``color`` as an :class:`RGBA`.

    An RGBA instance is already valid. Any other 3- or 4-item sequence is
    checked channel by channel and raises InvalidRgbValueError on values
    outside ``[0, 255]``.
    """
    if isinstance(color, RGBA):
        return color
    if isinstance(color, (str, bytes)):
        raise TypeError(f"Expected RGBA or channel sequence, got {type(color).__name__}; use parse_hex for strings")
    return RGBA(tuple(color))


def unit_rgb(color: RGBALike) -> Tuple[float, float, float]:
    return as_rgba(color).unit_rgb


def np_validate_channel(name: str, arr: ChannelArray) -> None:
    """
    Vectorized :func:`~chromahex.colors.rgb.validate_channel`.

    Raises:
        InvalidRgbValueError: if any element is not finite, has a fractional
            part, or lies outside [0, 255]
    """
    arr = np.asarray(arr, dtype=float)
    with np.errstate(invalid="ignore"):
        bad = ~np.isfinite(arr) | (arr < 0) | (arr > CHANNEL_MAX) | (arr != np.floor(arr))
    if bad.any():
        raise InvalidRgbValueError(f"{name} has {int(bad.sum())} invalid element(s)")


def np_unit_rgb(r: ChannelArray, g: ChannelArray, b: ChannelArray) -> Tuple[NDArray, NDArray, NDArray]:
    """
    Broadcast 8-bit channel arrays together and scale them to [0, 1].

    Raises:
        InvalidRgbValueError: if any element is not an integer in [0, 255]
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    for name, arr in (("red", r), ("green", g), ("blue", b)):
        np_validate_channel(name, arr)

    return r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX
