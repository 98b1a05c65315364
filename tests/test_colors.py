import colorsys
import math

import numpy as np
import pytest

from fractalviewer.colors import apply_colormap_hsb, color_of, hsb_to_rgb


def _reference(h, s, v):
    return tuple(int(x * 255 + 0.5) for x in colorsys.hsv_to_rgb(h, s, v))


def test_interior_is_black():
    assert color_of(800.0, 800) == (0, 0, 0)
    assert color_of(800.3, 800) == (0, 0, 0)
    assert color_of(math.inf, 800) == (0, 0, 0)


def test_zero_iterations_color():
    assert color_of(0.0, 800) == _reference(0.95, 0.6, 1.0)
    assert color_of(0.0, 800) == (255, 102, 148)


def test_halfway_color():
    assert color_of(400.0, 800) == _reference(0.95 - 0.95 * 0.5, 0.6 + 0.4 * 0.5, 1.0)


def test_color_depends_only_on_fraction():
    assert color_of(25.0, 100) == color_of(200.0, 800)


@pytest.mark.parametrize("value", [-3.5, -math.inf, math.nan])
def test_out_of_range_values_clamp_to_start_of_ramp(value):
    assert color_of(value, 800) == color_of(0.0, 800)


def test_channels_stay_in_byte_range():
    for value in np.linspace(-10.0, 810.0, 200):
        r, g, b = color_of(value, 800)
        assert 0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255


@pytest.mark.parametrize("h,expected", [
    (0.0, (255, 0, 0)),
    (0.5, (0, 255, 255)),
    (0.75, (128, 0, 255)),
])
def test_hsb_primaries(h, expected):
    assert hsb_to_rgb(h, 1.0, 1.0) == expected


def test_hsb_zero_saturation_is_gray():
    assert hsb_to_rgb(0.3, 0.0, 1.0) == (255, 255, 255)
    assert hsb_to_rgb(0.3, 0.0, 0.5) == (128, 128, 128)


def test_hsb_hue_wraps():
    assert hsb_to_rgb(1.25, 0.7, 1.0) == hsb_to_rgb(0.25, 0.7, 1.0)
    assert hsb_to_rgb(-0.75, 0.7, 1.0) == hsb_to_rgb(0.25, 0.7, 1.0)


def test_apply_colormap_matches_color_of():
    data = np.array([[0.0, 10.5, 50.0],
                     [99.9, 100.0, math.nan]])
    out = np.zeros((2, 3, 3), dtype=np.uint8)
    apply_colormap_hsb(data, 100, out)
    for row in range(2):
        for col in range(3):
            assert tuple(out[row, col]) == color_of(data[row, col], 100)
    assert tuple(out[1, 1]) == (0, 0, 0)
