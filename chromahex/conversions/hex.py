import logging
from typing import Iterable

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGBA
from ..errors import InvalidCharacterError, InvalidLengthError

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
OPAQUE_ALPHA = "FF"


def expand_hex(digits: str) -> str:
    """
    Expand a bare hex string (no ``#``) to the 8-digit ``RRGGBBAA`` form.

    - 8 digits: used as-is
    - 6 digits: ``FF`` alpha appended
    - 4 digits: every digit doubled (``RGBA`` → ``RRGGBBAA``)
    - 3 digits: every digit doubled, then ``FF`` appended

    Raises:
        InvalidLengthError: for any other length, including empty input
    """
    size = len(digits)
    if size == 8:
        return digits
    if size == 6:
        return digits + OPAQUE_ALPHA
    if size == 4:
        return "".join(ch * 2 for ch in digits)
    if size == 3:
        return "".join(ch * 2 for ch in digits) + OPAQUE_ALPHA
    raise InvalidLengthError(f"got {size}")


def _parse_pair(pair: str) -> int:
    # int(x, 16) alone would also accept "+f", " f" and "_f"
    if len(pair) != 2 or not HEX_DIGITS.issuperset(pair):
        raise InvalidCharacterError(repr(pair))
    return int(pair, 16)


def parse_hex(text: str) -> RGBA:
    """
    Parse a hex color string into an :class:`RGBA`.

    Accepts 3, 4, 6 or 8 hex digits with an optional leading ``#``, in any
    letter case. Missing alpha defaults to 255.

    Args:
        text: e.g. ``"#FA3"``, ``"ffaa33cc"``

    Returns:
        RGBA: the four parsed channels

    Raises:
        InvalidLengthError: wrong number of digits after stripping ``#``
        InvalidCharacterError: a non-hex character in any channel pair

    >>> parse_hex("#FFAA33CC")
    RGBA(red=255, green=170, blue=51, alpha=204)
    """
    if not isinstance(text, str):
        raise TypeError(f"hex color must be a str, got {type(text).__name__}")

    digits = text[1:] if text.startswith("#") else text
    expanded = expand_hex(digits)
    channels = tuple(_parse_pair(expanded[i:i + 2]) for i in range(0, 8, 2))

    logger.debug("parsed %r as %s", text, channels)
    return RGBA(channels)


def np_parse_hex(texts: Iterable[str]) -> NDArray:
    """
    Vectorized: parse many hex strings.

    Returns:
        array of shape (N, 4), dtype uint8: (r, g, b, a) per input
    """
    rows = [tuple(parse_hex(text)) for text in texts]
    if not rows:
        return np.empty((0, 4), dtype=np.uint8)
    return np.array(rows, dtype=np.uint8)
