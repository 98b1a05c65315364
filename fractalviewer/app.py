"""
Main application module for the fractal viewer.

Contains the FractalApp class which handles:
- Window setup and main loop
- User input (click to zoom, J to toggle Julia, S to save, R to reset)
- Handing ViewStates to the background renderer and displaying results
"""

import pygame

from .renderer import FractalRenderer, warmup_jit
from .settings import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    ESCAPE_RADIUS,
    MAX_ITER,
    SNAPSHOT_DIR,
    log,
)
from .snapshot import buffer_to_surface, mode_label, save_snapshot
from .view import ViewController


class FractalApp:
    """
    Main application class for the fractal viewer.

    Handles the pygame window and event loop. All view changes go
    through the ViewController; every change queues a fresh render.
    """

    CAPTION = "Mandelbrot/Julia Viewer (Press J to toggle, S to save)"
    HELP_TEXT = "[J=toggle  S=save  R=reset]"

    def __init__(self, width=None, height=None, max_iter=None, escape_radius=None,
                 snapshot_dir=None):
        """
        Initialize the application.

        Args:
            width: Window width in pixels (default from settings.json)
            height: Window height in pixels (default from settings.json)
            max_iter: Maximum iteration count (default from settings.json)
            escape_radius: Escape threshold (default from settings.json)
            snapshot_dir: Where S saves PNGs (default from settings.json)
        """
        self.width = width or DEFAULT_WIDTH
        self.height = height or DEFAULT_HEIGHT
        self.max_iter = max_iter or MAX_ITER
        self.escape_radius = escape_radius or ESCAPE_RADIUS
        self.snapshot_dir = snapshot_dir or SNAPSHOT_DIR

        self.view = ViewController(self.width, self.height)
        self.renderer = FractalRenderer(self.width, self.height, self.max_iter,
                                        self.escape_radius)

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.font = None

        # Display state
        self.current_rgb = None
        self.current_surface = None
        self.current_state = None

        # Last known cursor position, used to pick the Julia constant
        self.last_mouse = (0, 0)

        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._warmup_and_initial_render()

        self.running = True
        while self.running:
            self._handle_events()
            self._check_render_result()
            self._draw()
            self.clock.tick(60)

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.DOUBLEBUF)
        pygame.display.set_caption(self.CAPTION)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('Arial', 14)

    def _warmup_and_initial_render(self):
        """Warm up JIT and queue the first frame."""
        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit()
        self._request_render()

    def _request_render(self):
        state = self.view.snapshot()
        log(f"View: {state.rect.as_tuple()} {mode_label(state.mode)}")
        self.renderer.compute_async(state)
        pygame.display.set_caption("Computing...")

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEMOTION:
                self.last_mouse = event.pos
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._handle_click(event)
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_click(self, event):
        """Right click zooms out, left or middle click zooms in, centered on the click."""
        # 4 and 5 are the scroll wheel
        if event.button not in (1, 2, 3):
            return
        col, row = event.pos
        try:
            self.view.zoom(col, row, zoom_in=(event.button != 3))
        except ValueError as e:
            print(f"Zoom limit reached: {e}")
            pygame.display.set_caption(f"Zoom limit reached - {self.CAPTION}")
            return
        self._request_render()

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_j:
            self.view.toggle(*self.last_mouse)
            self._request_render()
        elif event.key == pygame.K_r:
            self.view.reset()
            self._request_render()
        elif event.key == pygame.K_s:
            self._save_image()
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def _save_image(self):
        """Save the frame currently on screen."""
        if self.current_rgb is None:
            return
        try:
            path = save_snapshot(self.current_rgb, self.current_state.mode, self.snapshot_dir)
        except (pygame.error, OSError) as e:
            print(f"Could not save image: {e}")
            pygame.display.set_caption(f"Save failed - {self.CAPTION}")
            return
        pygame.display.set_caption(f"Saved: {path} - {self.CAPTION}")

    def _check_render_result(self):
        """Check if async render has completed."""
        rgb, state = self.renderer.get_result()
        if rgb is not None:
            self.current_rgb = rgb
            self.current_state = state
            self.current_surface = buffer_to_surface(rgb)
            if not self.renderer.is_busy():
                pygame.display.set_caption(self.CAPTION)

    def _draw(self):
        """Draw the current frame and the mode overlay."""
        self.screen.fill((0, 0, 0))
        if self.current_surface is not None:
            self.screen.blit(self.current_surface, (0, 0))
            text = f"{mode_label(self.current_state.mode)}  {self.HELP_TEXT}"
            overlay = self.font.render(text, True, (255, 255, 255))
            self.screen.blit(overlay, (5, 5))
        pygame.display.flip()


def run(width=None, height=None, max_iter=None, escape_radius=None, snapshot_dir=None):
    """
    Run the fractal viewer.

    Args:
        width: Window width (default 800)
        height: Window height (default 600)
        max_iter: Maximum iterations (default 800)
        escape_radius: Escape threshold (default 2.0)
        snapshot_dir: Directory for saved PNGs (default: current directory)
    """
    app = FractalApp(width, height, max_iter, escape_radius, snapshot_dir)
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
