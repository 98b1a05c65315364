import pytest

from fractalviewer.coords import complex_to_pixel, pixel_to_complex
from fractalviewer.view import ORIGINAL_RECT, ViewRect


@pytest.mark.parametrize("rect", [
    ORIGINAL_RECT,
    ViewRect(0.1, 0.3, -0.7, 0.2),
    ViewRect(-0.7436447860, -0.7436438870, 0.1318259043, 0.1318264660),
])
@pytest.mark.parametrize("width,height", [(2, 2), (7, 5), (800, 600)])
def test_corners_land_exactly_on_bounds(rect, width, height):
    assert pixel_to_complex(0, 0, rect, width, height) == (rect.real_min, rect.imag_max)
    assert pixel_to_complex(width - 1, 0, rect, width, height) == (rect.real_max, rect.imag_max)
    assert pixel_to_complex(0, height - 1, rect, width, height) == (rect.real_min, rect.imag_min)
    assert pixel_to_complex(width - 1, height - 1, rect, width, height) == (rect.real_max, rect.imag_min)


def test_row_zero_is_top_of_image():
    _, top = pixel_to_complex(3, 0, ORIGINAL_RECT, 10, 10)
    _, below = pixel_to_complex(3, 1, ORIGINAL_RECT, 10, 10)
    assert top > below


def test_interior_pixel_follows_linear_mapping():
    re, im = pixel_to_complex(400, 300, ORIGINAL_RECT, 801, 601)
    assert re == pytest.approx(-0.5)
    assert im == pytest.approx(0.0, abs=1e-15)


def test_round_trip_every_pixel():
    rect = ViewRect(-1.25, 0.75, -0.4, 1.1)
    width, height = 13, 9
    for row in range(height):
        for col in range(width):
            re, im = pixel_to_complex(col, row, rect, width, height)
            back_col, back_row = complex_to_pixel(re, im, rect, width, height)
            assert back_col == pytest.approx(col, abs=1e-9)
            assert back_row == pytest.approx(row, abs=1e-9)


def test_complex_to_pixel_of_bounds():
    assert complex_to_pixel(-2.0, 1.2, ORIGINAL_RECT, 800, 600) == (0.0, 0.0)
    col, row = complex_to_pixel(1.0, -1.2, ORIGINAL_RECT, 800, 600)
    assert col == pytest.approx(799)
    assert row == pytest.approx(599)


@pytest.mark.parametrize("width,height", [(1, 10), (10, 1), (0, 0)])
def test_degenerate_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        pixel_to_complex(0, 0, ORIGINAL_RECT, width, height)
    with pytest.raises(ValueError):
        complex_to_pixel(0.0, 0.0, ORIGINAL_RECT, width, height)
