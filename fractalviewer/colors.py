"""
Color mapping for smooth iteration counts.

Escaping points are colored along an HSB ramp:
    hue        0.95 -> 0.0   (reddish at low counts toward purple at high)
    saturation 0.6  -> 1.0
    brightness 1.0
Points that never escaped (value >= max_iter) are black.

Channels are rounded as int(x * 255 + 0.5). The ramp position is
clamped to [0, 1], which also absorbs the non-finite values the
smoothing formula can produce at |z| == 1.
"""

import numpy as np
from numba import jit, prange


BLACK = (0, 0, 0)

HUE_START = 0.95
SAT_START = 0.6
SAT_SPAN = 0.4


@jit(nopython=True, cache=True)
def hsb_to_rgb(h, s, v):
    """Convert HSB/HSV (0-1 range, hue wraps) to RGB (0-255 range)."""
    if s == 0.0:
        gray = int(v * 255.0 + 0.5)
        return gray, gray, gray

    h = (h - np.floor(h)) * 6.0
    i = int(h)
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        r, g, b = v, t, p
    elif i == 1:
        r, g, b = q, v, p
    elif i == 2:
        r, g, b = p, v, t
    elif i == 3:
        r, g, b = p, q, v
    elif i == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return int(r * 255.0 + 0.5), int(g * 255.0 + 0.5), int(b * 255.0 + 0.5)


@jit(nopython=True, cache=True)
def color_of(value, max_iter):
    """
    Map a smooth iteration count to an (r, g, b) tuple.

    Args:
        value: Smooth iteration count from compute.iterate
        max_iter: The iteration cap used to compute value

    Returns:
        (r, g, b) ints in 0-255
    """
    if value >= max_iter:
        return 0, 0, 0

    frac = value / max_iter
    if np.isnan(frac) or frac < 0.0:
        frac = 0.0
    elif frac > 1.0:
        frac = 1.0

    hue = HUE_START - HUE_START * frac
    sat = SAT_START + SAT_SPAN * frac
    return hsb_to_rgb(hue, sat, 1.0)


@jit(nopython=True, parallel=True, cache=True)
def apply_colormap_hsb(data, max_iter, out):
    """
    Color a grid of smooth iteration counts.

    Args:
        data: 2D array of iteration counts from compute_fractal
        max_iter: Maximum iteration value (points with this value are black)
        out: Output RGB image array (height, width, 3) uint8, modified in place
    """
    height, width = data.shape
    for py in prange(height):
        for px in range(width):
            r, g, b = color_of(data[py, px], max_iter)
            out[py, px, 0] = r
            out[py, px, 1] = g
            out[py, px, 2] = b
