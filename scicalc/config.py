"""
User preferences stored as JSON next to the application.

Only display preferences live here. Calculator state (display, memory,
variables, history) is never written to disk.
"""

import json
import sys
from pathlib import Path

DEFAULT_CONFIG = {
    "show_commas": False,
    "display_font": None,
    "start_in_degrees": True,
}


def get_app_path():
    """Resolve the correct path for both script and frozen (PyInstaller) execution."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent


def default_config_file():
    return get_app_path() / "config.json"


def load_settings(config_file=None):
    """Load settings from JSON file, on top of the defaults"""
    config_file = Path(config_file) if config_file else default_config_file()
    config = dict(DEFAULT_CONFIG)

    if config_file.exists():
        try:
            with open(config_file, 'r') as f:
                saved_config = json.load(f)
            if isinstance(saved_config, dict):
                config.update(saved_config)
            else:
                print(f"Ignoring config {config_file}: expected an object")
        except (OSError, ValueError) as e:
            print(f"Error loading config: {e}")

    return config


def save_settings(config, config_file=None):
    """Save settings to JSON file"""
    config_file = Path(config_file) if config_file else default_config_file()
    try:
        with open(config_file, 'w') as f:
            json.dump(config, f, indent=4)
    except OSError as e:
        print(f"Error saving config: {e}")
        return False
    return True
