"""
Saving rendered frames to disk.

Frames are written as 8-bit RGB PNGs through pygame, named after the
fractal mode and a timestamp, e.g. fractal_julia_20250602T231529.png.
"""

import os
from datetime import datetime

import numpy as np
import pygame


def mode_label(mode):
    """Human readable description of a fractal mode (used for overlays)."""
    if mode.name == 'julia':
        return f"Julia (c = {mode.c_re:.4f} + {mode.c_im:.4f}i)"
    return "Mandelbrot"


def snapshot_filename(mode, now=None):
    """Timestamped PNG file name for a frame rendered in mode."""
    now = now or datetime.now()
    return f"fractal_{mode.name}_{now.strftime('%Y%m%dT%H%M%S')}.png"


def buffer_to_surface(rgb):
    """Make a pygame Surface from a (height, width, 3) uint8 buffer."""
    # surfarray indexes surfaces as [x, y]
    return pygame.surfarray.make_surface(np.ascontiguousarray(rgb.swapaxes(0, 1)))


def save_snapshot(rgb, mode, directory='.', filename=None):
    """
    Save a rendered frame as a PNG.

    Args:
        rgb: (height, width, 3) uint8 pixel buffer
        mode: FractalMode the frame was rendered in (names the file)
        directory: Output directory, created if missing
        filename: Override the generated file name

    Returns:
        Path of the written file
    """
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) RGB buffer, got shape {rgb.shape}")

    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, filename or snapshot_filename(mode))
    pygame.image.save(buffer_to_surface(rgb), path)
    print(f"Saved current view to: {path}")
    return path
