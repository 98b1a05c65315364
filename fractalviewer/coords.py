"""
Pixel <-> complex plane coordinate mapping.

Column 0 is the left edge (real_min) and row 0 is the top edge
(imag_max): image rows grow downward while the imaginary axis grows
upward. The far column and row are pinned to real_max / imag_min so
the four corners of the image land exactly on the view rectangle.

The *_xy kernels take plain floats so they can be called from the
JIT-compiled frame kernel in compute.py.
"""

from numba import jit


@jit(nopython=True, cache=True)
def pixel_to_complex_xy(col, row, real_min, real_max, imag_min, imag_max, width, height):
    """Map pixel (col, row) to (re, im) for the given bounds."""
    if col == width - 1:
        re = real_max
    else:
        re = real_min + col * (real_max - real_min) / (width - 1)
    if row == height - 1:
        im = imag_min
    else:
        im = imag_max - row * (imag_max - imag_min) / (height - 1)
    return re, im


@jit(nopython=True, cache=True)
def complex_to_pixel_xy(re, im, real_min, real_max, imag_min, imag_max, width, height):
    """Inverse of pixel_to_complex_xy. Returns fractional (col, row)."""
    col = (re - real_min) * (width - 1) / (real_max - real_min)
    row = (imag_max - im) * (height - 1) / (imag_max - imag_min)
    return col, row


def _check_dimensions(width, height):
    if width < 2 or height < 2:
        raise ValueError(
            f"image must be at least 2x2 pixels, got {width}x{height}"
        )


def pixel_to_complex(col, row, rect, width, height):
    """
    Convert a pixel position to a point in the complex plane.

    Args:
        col, row: Pixel position (row 0 is the top of the image)
        rect: ViewRect with the visible bounds
        width, height: Image dimensions in pixels (both > 1)

    Returns:
        (re, im) tuple of floats
    """
    _check_dimensions(width, height)
    re, im = pixel_to_complex_xy(
        col, row, rect.real_min, rect.real_max, rect.imag_min, rect.imag_max,
        width, height
    )
    return float(re), float(im)


def complex_to_pixel(re, im, rect, width, height):
    """
    Convert a point in the complex plane to a (fractional) pixel position.

    Used to read back where a complex value sits on screen; round the
    result if an integer pixel is needed.
    """
    _check_dimensions(width, height)
    col, row = complex_to_pixel_xy(
        re, im, rect.real_min, rect.real_max, rect.imag_min, rect.imag_max,
        width, height
    )
    return float(col), float(row)
