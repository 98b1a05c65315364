"""
Settings for the fractal viewer.

Defaults live in settings.json next to this module. Any key missing
from the file (or the whole file) falls back to DEFAULT_SETTINGS.
"""

import json
import os


DEFAULT_SETTINGS = {
    'width': 800,
    'height': 600,
    'max_iter': 800,
    'escape_radius': 2.0,
    'original_rect': [-2.0, 1.0, -1.2, 1.2],  # real_min, real_max, imag_min, imag_max
    'snapshot_dir': '.',
}

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

VERBOSE = False


def set_verbose(enabled):
    """Turn the verbose log() output on or off."""
    global VERBOSE
    VERBOSE = bool(enabled)


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def load_settings(path=None):
    """Load settings from a JSON file (settings.json by default)."""
    settings_path = path or SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load settings.json: {e}")
        return None


def get_settings(path=None):
    """
    Get the effective settings.

    Keys from the JSON file override DEFAULT_SETTINGS; unknown keys
    are ignored.

    Args:
        path: Optional settings file (default: packaged settings.json)

    Returns:
        dict with every key of DEFAULT_SETTINGS
    """
    settings = dict(DEFAULT_SETTINGS)
    loaded = load_settings(path)
    if loaded:
        for key in DEFAULT_SETTINGS:
            if key in loaded:
                settings[key] = loaded[key]
    return settings


# Global settings, resolved once at import
_SETTINGS = get_settings()

DEFAULT_WIDTH = int(_SETTINGS['width'])
DEFAULT_HEIGHT = int(_SETTINGS['height'])
MAX_ITER = int(_SETTINGS['max_iter'])
ESCAPE_RADIUS = float(_SETTINGS['escape_radius'])
ORIGINAL_BOUNDS = tuple(float(v) for v in _SETTINGS['original_rect'])
SNAPSHOT_DIR = _SETTINGS['snapshot_dir']
