"""View state for the fractal viewer.

A ViewState is an immutable snapshot of everything needed to render one
frame: the visible rectangle of the complex plane and the fractal mode.
User actions never mutate a state; the transition functions below return
a new one, and ViewController swaps it in under a lock.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, replace
from typing import Union

from .coords import pixel_to_complex
from .settings import ORIGINAL_BOUNDS

ZOOM_IN_FACTOR = 0.5
ZOOM_OUT_FACTOR = 2.0


@dataclass(frozen=True)
class ViewRect:
    """Visible bounds of the complex plane."""

    real_min: float
    real_max: float
    imag_min: float
    imag_max: float

    def __post_init__(self) -> None:
        bounds = (self.real_min, self.real_max, self.imag_min, self.imag_max)
        if not all(math.isfinite(v) for v in bounds):
            raise ValueError(f"view bounds must be finite, got {bounds}")
        if not self.real_max > self.real_min:
            raise ValueError(f"real_max ({self.real_max}) must exceed real_min ({self.real_min})")
        if not self.imag_max > self.imag_min:
            raise ValueError(f"imag_max ({self.imag_max}) must exceed imag_min ({self.imag_min})")

    @property
    def real_span(self) -> float:
        return self.real_max - self.real_min

    @property
    def imag_span(self) -> float:
        return self.imag_max - self.imag_min

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.real_min, self.real_max, self.imag_min, self.imag_max


@dataclass(frozen=True)
class Mandelbrot:
    """Mandelbrot mode: z0 = 0, c = pixel."""

    name = "mandelbrot"


@dataclass(frozen=True)
class Julia:
    """Julia mode for the constant c captured when the mode was entered."""

    c_re: float
    c_im: float

    name = "julia"


FractalMode = Union[Mandelbrot, Julia]


@dataclass(frozen=True)
class ViewState:
    """Everything needed to render one frame."""

    rect: ViewRect
    mode: FractalMode

    @property
    def is_julia(self) -> bool:
        return isinstance(self.mode, Julia)


ORIGINAL_RECT = ViewRect(*ORIGINAL_BOUNDS)


def initial_state() -> ViewState:
    """The startup view: the original rectangle in Mandelbrot mode."""
    return ViewState(rect=ORIGINAL_RECT, mode=Mandelbrot())


def apply_reset() -> ViewState:
    """Go back to the original view, dropping any zoom or Julia mode."""
    return initial_state()


def apply_zoom(state: ViewState, col: int, row: int, width: int, height: int, zoom_in: bool) -> ViewState:
    """Recenter on the clicked pixel and halve (zoom in) or double (zoom out) the spans."""
    rect = state.rect
    click_re, click_im = pixel_to_complex(col, row, rect, width, height)
    factor = ZOOM_IN_FACTOR if zoom_in else ZOOM_OUT_FACTOR

    real_range = rect.real_span * factor / 2
    imag_range = rect.imag_span * factor / 2

    new_rect = ViewRect(
        real_min=click_re - real_range,
        real_max=click_re + real_range,
        imag_min=click_im - imag_range,
        imag_max=click_im + imag_range,
    )
    return replace(state, rect=new_rect)


def apply_toggle(state: ViewState, last_col: int, last_row: int, width: int, height: int) -> ViewState:
    """
    Switch between Mandelbrot and Julia mode, keeping the rectangle.

    Entering Julia mode takes c from the last cursor position mapped
    through the current rectangle. Leaving it discards c.
    """
    if state.is_julia:
        return replace(state, mode=Mandelbrot())
    c_re, c_im = pixel_to_complex(last_col, last_row, state.rect, width, height)
    return replace(state, mode=Julia(c_re, c_im))


class ViewController:
    """
    Holds the current ViewState for an interactive session.

    Every command computes the next state from the current one and
    swaps it in under a lock, so readers always see a state produced
    by a single transition.

    Usage:
        view = ViewController(800, 600)
        view.zoom(400, 300, zoom_in=True)
        state = view.snapshot()
    """

    def __init__(self, width, height, state=None):
        self.width = width
        self.height = height
        self._state = state or initial_state()
        self._lock = threading.Lock()

    def snapshot(self):
        """Return the current ViewState."""
        with self._lock:
            return self._state

    def zoom(self, col, row, zoom_in=True):
        with self._lock:
            self._state = apply_zoom(self._state, col, row, self.width, self.height, zoom_in)
            return self._state

    def toggle(self, last_col, last_row):
        with self._lock:
            self._state = apply_toggle(self._state, last_col, last_row, self.width, self.height)
            return self._state

    def reset(self):
        with self._lock:
            self._state = apply_reset()
            return self._state
