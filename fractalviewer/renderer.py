"""
Frame rendering for the fractal viewer.

render() is the pure entry point: ViewState + image size in, a fresh
RGB pixel buffer out. The FractalRenderer class wraps it for the
interactive shell:
- Background (async) computation so the UI stays responsive
- Requests made during a render coalesce; only the latest is rendered
- Results are handed back together with the ViewState they show
"""

import threading
import time

import numpy as np

from .colors import apply_colormap_hsb
from .compute import (
    DEFAULT_ESCAPE_RADIUS,
    DEFAULT_MAX_ITER,
    compute_fractal,
    continuous_iteration_mandelbrot,
)
from .settings import log
from .view import initial_state


def _check_render_args(width, height, max_iter, escape_radius):
    if width < 2 or height < 2:
        raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be positive, got {max_iter}")
    if not escape_radius > 0:
        raise ValueError(f"escape_radius must be positive, got {escape_radius}")


def render_samples(state, width, height, max_iter=DEFAULT_MAX_ITER,
                   escape_radius=DEFAULT_ESCAPE_RADIUS):
    """
    Compute the smooth iteration count of every pixel.

    Returns:
        (height, width) float64 array, row 0 at the top
    """
    _check_render_args(width, height, max_iter, escape_radius)
    rect = state.rect
    if state.is_julia:
        julia, julia_re, julia_im = True, float(state.mode.c_re), float(state.mode.c_im)
    else:
        julia, julia_re, julia_im = False, 0.0, 0.0
    return compute_fractal(
        float(rect.real_min), float(rect.real_max),
        float(rect.imag_min), float(rect.imag_max),
        int(width), int(height), int(max_iter), float(escape_radius),
        julia, julia_re, julia_im
    )


def render(state, width, height, max_iter=DEFAULT_MAX_ITER,
           escape_radius=DEFAULT_ESCAPE_RADIUS):
    """
    Render a ViewState into a new RGB pixel buffer.

    Args:
        state: ViewState to render
        width, height: Image dimensions in pixels (both > 1)
        max_iter: Iteration cap (default 800)
        escape_radius: Escape threshold (default 2.0)

    Returns:
        (height, width, 3) uint8 array, row-major, row 0 at the top
    """
    data = render_samples(state, width, height, max_iter, escape_radius)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    apply_colormap_hsb(data, int(max_iter), rgb)
    return rgb


def warmup_jit():
    """
    Warm up JIT compilation with a tiny frame.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on first actual use.
    """
    continuous_iteration_mandelbrot(0.0, 0.0, 10, 2.0)
    render(initial_state(), 10, 10, max_iter=10)


class FractalRenderer:
    """
    Renders ViewStates on a background thread.

    Usage:
        renderer = FractalRenderer(800, 600)
        renderer.compute_async(view.snapshot())

        # In your game loop:
        rgb, state = renderer.get_result()
        if rgb is not None:
            display(rgb)

    Attributes:
        width, height: Display dimensions
        max_iter: Maximum iteration count
        escape_radius: Escape threshold
    """

    def __init__(self, width, height, max_iter=DEFAULT_MAX_ITER,
                 escape_radius=DEFAULT_ESCAPE_RADIUS):
        _check_render_args(width, height, max_iter, escape_radius)
        self.width = width
        self.height = height
        self.max_iter = max_iter
        self.escape_radius = escape_radius

        # Async computation state
        self.computing = False
        self.result_ready = False
        self.pending_state = None
        self.rgb = None
        self.rendered_state = None
        self.lock = threading.Lock()
        self._thread = None

    def compute_async(self, state):
        """
        Queue a render of state.

        If a render is already running, state replaces whatever was
        queued behind it; superseded states are never rendered.
        """
        with self.lock:
            self.pending_state = state
            if not self.computing:
                self.computing = True
                self._thread = threading.Thread(target=self._compute_thread)
                self._thread.daemon = True
                self._thread.start()

    def _compute_thread(self):
        """Background thread: render pending states until none are left."""
        while True:
            with self.lock:
                state = self.pending_state
                self.pending_state = None
                if state is None:
                    self.computing = False
                    break

            start = time.perf_counter()
            try:
                rgb = render(state, self.width, self.height, self.max_iter, self.escape_radius)
            except Exception:
                # let the next compute_async start a fresh thread
                with self.lock:
                    self.computing = False
                raise
            log(f"Rendered {self.width}x{self.height} {state.mode.name} "
                f"in {time.perf_counter() - start:.3f}s")

            with self.lock:
                self.rgb = rgb
                self.rendered_state = state
                self.result_ready = True

    def get_result(self):
        """
        Get the latest render result if ready.

        Returns:
            Tuple of (image, state) if a new result is ready, (None, None) otherwise.
        """
        with self.lock:
            if self.result_ready:
                self.result_ready = False
                return self.rgb, self.rendered_state
        return None, None

    def is_busy(self):
        with self.lock:
            return self.computing

    def wait(self, timeout=None):
        """Block until the background thread has drained its queue."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
