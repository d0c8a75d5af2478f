import numpy as np
import pytest

from chromahex.colors import CMYK, RGBA
from chromahex.conversions import rgb_to_cmyk, np_rgb_to_cmyk
from chromahex.errors import InvalidRgbValueError
from ..samples import samples_rgb_cmyk


def test_rgb_to_cmyk():
    for (r, g, b), expected in samples_rgb_cmyk.items():
        cmyk = rgb_to_cmyk(RGBA(r, g, b))
        for out, exp in zip(cmyk, expected):
            assert abs(out - exp) < 1e-6


def test_cmyk_black():
    cmyk = rgb_to_cmyk(RGBA(0, 0, 0))
    assert isinstance(cmyk, CMYK)
    assert cmyk.cyan == 0.0
    assert cmyk.magenta == 0.0
    assert cmyk.yellow == 0.0
    assert cmyk.black == 100.0


def test_cmyk_white():
    assert tuple(rgb_to_cmyk(RGBA(255, 255, 255))) == (0.0, 0.0, 0.0, 0.0)


def test_cmyk_red():
    cmyk = rgb_to_cmyk(RGBA(255, 0, 0))
    assert round(cmyk.cyan) == 0
    assert round(cmyk.magenta) == 100
    assert round(cmyk.yellow) == 100
    assert round(cmyk.black) == 0


def test_black_ignores_alpha():
    assert rgb_to_cmyk((0, 0, 0, 0)) == rgb_to_cmyk((0, 0, 0, 255))


def test_out_of_range_channels():
    with pytest.raises(InvalidRgbValueError):
        rgb_to_cmyk((-1, 0, 0))


def test_rgb_to_cmyk_numpy():
    the_matrix = np.array(list(samples_rgb_cmyk.keys()))
    expected = np.array(list(samples_rgb_cmyk.values()))
    result = np_rgb_to_cmyk(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == (len(samples_rgb_cmyk), 4)
    assert np.allclose(result, expected, atol=1e-6)


def test_numpy_black_has_no_nan():
    result = np_rgb_to_cmyk(np.zeros((2, 2)), np.zeros((2, 2)), np.zeros((2, 2)))
    assert result.shape == (2, 2, 4)
    assert not np.isnan(result).any()
    assert np.all(result[..., 3] == 100.0)
    assert np.all(result[..., :3] == 0.0)


def test_numpy_rejects_fractional_channels():
    with pytest.raises(InvalidRgbValueError):
        np_rgb_to_cmyk(np.array([0.25, 255]), 0, 0)
