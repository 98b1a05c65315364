from types import SimpleNamespace

import pygame
import pytest

from fractalviewer.app import FractalApp
from fractalviewer.view import ViewRect, initial_state


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setattr(pygame.display, "set_caption", lambda *args: None)
    app = FractalApp(800, 600, max_iter=20)
    app.requests = []
    monkeypatch.setattr(app, "_request_render",
                        lambda: app.requests.append(app.view.snapshot()))
    return app


def _click(button, pos=(123, 457)):
    return SimpleNamespace(button=button, pos=pos)


def test_left_and_middle_click_zoom_in(app):
    app._handle_click(_click(1))
    assert app.view.snapshot().rect.real_span == pytest.approx(1.5)
    app._handle_click(_click(2))
    assert app.view.snapshot().rect.real_span == pytest.approx(0.75)
    assert len(app.requests) == 2


def test_right_click_zooms_out(app):
    app._handle_click(_click(3))
    assert app.view.snapshot().rect.real_span == pytest.approx(6.0)


def test_scroll_wheel_buttons_are_ignored(app):
    app._handle_click(_click(4))
    app._handle_click(_click(5))
    assert app.view.snapshot() == initial_state()
    assert app.requests == []


def test_zooming_past_double_precision_keeps_last_valid_view(app, capsys):
    for _ in range(60):
        app._handle_click(_click(1))

    state = app.view.snapshot()
    rect = state.rect
    # still a valid, non-degenerate rectangle
    assert ViewRect(*rect.as_tuple()) == rect
    assert rect.real_max > rect.real_min
    assert rect.imag_max > rect.imag_min
    assert len(app.requests) < 60
    assert app.requests[-1] == state
    assert "Zoom limit reached" in capsys.readouterr().out

    # the viewer keeps working after hitting the limit
    requested = len(app.requests)
    app._handle_click(_click(3))
    assert len(app.requests) == requested + 1
    assert app.view.snapshot() != state
