"""
Mandelbrot/Julia Set Viewer Package

An interactive escape-time fractal explorer using Numba for
JIT-compiled, row-parallel computation and Pygame for display.

Quick Start:
    from fractalviewer import initial_state, render
    rgb = render(initial_state(), 800, 600)

Or from command line:
    python -m fractalviewer
    python -m fractalviewer --snapshot mandelbrot.png

Package Structure:
    - coords.py: Pixel <-> complex plane mapping
    - compute.py: JIT-compiled escape-time evaluator and frame kernel
    - colors.py: Smooth iteration count -> HSB color ramp
    - renderer.py: Pure frame rendering plus an async background renderer
    - view.py: Immutable view state and zoom/toggle/reset transitions
    - snapshot.py: PNG output
    - settings.py: settings.json loading and verbose logging
    - app.py: Pygame window and event loop
    - cli.py: Command line options

Controls:
    - Left or middle click: Zoom in (2x) centered on the click
    - Right click: Zoom out (2x) centered on the click
    - J: Toggle Mandelbrot <-> Julia (c taken from the cursor)
    - S: Save the current view as a PNG
    - R: Reset to default view
    - ESC: Quit
"""

from .colors import color_of
from .compute import (
    continuous_iteration_julia,
    continuous_iteration_mandelbrot,
    compute_fractal,
    iterate,
)
from .coords import complex_to_pixel, pixel_to_complex
from .renderer import FractalRenderer, render, render_samples
from .view import (
    Julia,
    Mandelbrot,
    ViewController,
    ViewRect,
    ViewState,
    apply_reset,
    apply_toggle,
    apply_zoom,
    initial_state,
)

__version__ = "1.0.0"
__all__ = [
    "FractalRenderer",
    "Julia",
    "Mandelbrot",
    "ViewController",
    "ViewRect",
    "ViewState",
    "apply_reset",
    "apply_toggle",
    "apply_zoom",
    "color_of",
    "complex_to_pixel",
    "compute_fractal",
    "continuous_iteration_julia",
    "continuous_iteration_mandelbrot",
    "initial_state",
    "iterate",
    "pixel_to_complex",
    "render",
    "render_samples",
]
