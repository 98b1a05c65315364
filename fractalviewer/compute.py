"""
Escape-time computation functions using Numba JIT compilation.

This module contains the performance-critical part of the viewer:
- The z² + c recurrence with a continuous (smoothed) iteration count
- Mandelbrot and Julia instantiations of it
- The parallel frame kernel that evaluates every pixel of an image

Smoothing uses n + 1 - log(log|z_n|) / log(2). When |z_n| is exactly 1
at escape this is -inf (NaN below 1); the value is returned as is and
the color mapper clamps it. The kernels are compiled without fastmath
so these values follow IEEE semantics.
"""

import numpy as np
from numba import jit, prange

from .coords import pixel_to_complex_xy


DEFAULT_MAX_ITER = 800
DEFAULT_ESCAPE_RADIUS = 2.0

LOG2 = np.log(2.0)


@jit(nopython=True, cache=True)
def iterate(z0r, z0i, cr, ci, max_iter=DEFAULT_MAX_ITER, escape_radius=DEFAULT_ESCAPE_RADIUS):
    """
    Run z_{n+1} = z_n² + c from z_0 and return the smooth iteration count.

    Args:
        z0r, z0i: Starting point z_0
        cr, ci: The constant c
        max_iter: Iteration cap
        escape_radius: Escape threshold on |z|

    Returns:
        float: exactly max_iter if the orbit never escaped, otherwise
        n + 1 - log(log|z_n|) / log(2)
    """
    escape_r2 = escape_radius * escape_radius
    zr = float(z0r)
    zi = float(z0i)
    zr2 = zr * zr
    zi2 = zi * zi
    n = 0

    while zr2 + zi2 <= escape_r2 and n < max_iter:
        zi = 2.0 * zr * zi + ci
        zr = zr2 - zi2 + cr
        zr2 = zr * zr
        zi2 = zi * zi
        n += 1

    if n >= max_iter:
        return float(max_iter)

    mod_z = np.sqrt(zr2 + zi2)
    return n + 1.0 - np.log(np.log(mod_z)) / LOG2


@jit(nopython=True, cache=True)
def continuous_iteration_mandelbrot(cr, ci, max_iter=DEFAULT_MAX_ITER,
                                    escape_radius=DEFAULT_ESCAPE_RADIUS):
    """Mandelbrot: z_0 = 0, c = the pixel."""
    return iterate(0.0, 0.0, cr, ci, max_iter, escape_radius)


@jit(nopython=True, cache=True)
def continuous_iteration_julia(z0r, z0i, cr, ci, max_iter=DEFAULT_MAX_ITER,
                               escape_radius=DEFAULT_ESCAPE_RADIUS):
    """Julia: z_0 = the pixel, c = the fixed constant of the Julia mode."""
    return iterate(z0r, z0i, cr, ci, max_iter, escape_radius)


@jit(nopython=True, parallel=True, cache=True)
def compute_fractal(real_min, real_max, imag_min, imag_max, width, height, max_iter,
                    escape_radius=DEFAULT_ESCAPE_RADIUS, julia=False,
                    julia_re=0.0, julia_im=0.0):
    """
    Compute smooth iteration counts for every pixel of a frame.

    Rows are distributed across threads with prange; each pixel only
    writes its own cell, so no synchronization is needed.

    Args:
        real_min, real_max: Real axis bounds in the complex plane
        imag_min, imag_max: Imaginary axis bounds in the complex plane
        width, height: Output image dimensions in pixels
        max_iter: Maximum iteration count before assuming point is in set
        escape_radius: Escape threshold (default 2.0)
        julia: If True, iterate the Julia set of (julia_re, julia_im)
        julia_re, julia_im: The Julia constant

    Returns:
        2D numpy array (height, width) of float64 smooth iteration counts.
        Row 0 is the top of the image. Points in the set have value = max_iter.
    """
    result = np.empty((height, width), dtype=np.float64)

    for row in prange(height):
        for col in range(width):
            re, im = pixel_to_complex_xy(col, row, real_min, real_max,
                                         imag_min, imag_max, width, height)
            if julia:
                result[row, col] = iterate(re, im, julia_re, julia_im,
                                           max_iter, escape_radius)
            else:
                result[row, col] = iterate(0.0, 0.0, re, im,
                                           max_iter, escape_radius)

    return result
