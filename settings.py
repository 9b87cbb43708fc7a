# settings.py

"""
User Settings

Loads and saves the user's screensaver preferences as plain key=value lines:

    shape=heart
    threshold=0.73

Every failure degrades to defaults. A missing or unreadable file loads as the
default settings, malformed values are skipped, and a failed save is logged and
otherwise ignored so the current run keeps the chosen settings.
"""

import logging
import math
import os
import sys
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("hex_saver")

APP_DIR_NAME = "hex_saver"
SETTINGS_FILE_NAME = "settings.txt"
LOCAL_FALLBACK_NAME = "hex_saver_settings.txt"


class Shape(Enum):
    HEXAGON = "hexagon"
    HEART = "heart"


@dataclass
class ScreensaverConfig:
    shape: Shape = Shape.HEXAGON
    threshold: float = 0.0


def clamp_threshold(value: float) -> float:
    return min(1.0, max(0.0, value))


def parse_settings(text: str) -> ScreensaverConfig:
    """
    Parses key=value lines into a ScreensaverConfig.

    Unknown keys, blank lines and lines without '=' are ignored. An unknown shape
    name or an unparsable threshold leaves that field at its default.
    """
    config = ScreensaverConfig()
    for line in text.splitlines():
        key, sep, value = line.partition('=')
        if not sep:
            continue
        key = key.strip().lower()
        value = value.strip()

        if key == 'shape':
            try:
                config.shape = Shape(value.lower())
            except ValueError:
                logger.warning(f"Ignoring unknown shape '{value}' in settings.")
        elif key == 'threshold':
            try:
                threshold = float(value)
            except ValueError:
                logger.warning(f"Ignoring unparsable threshold '{value}' in settings.")
                continue
            if math.isnan(threshold):
                logger.warning("Ignoring NaN threshold in settings.")
                continue
            config.threshold = clamp_threshold(threshold)
    return config


def format_settings(config: ScreensaverConfig) -> str:
    return f"shape={config.shape.value}\nthreshold={config.threshold!r}\n"


def _app_data_base():
    """The platform's per-user application data directory, or None if unknown."""
    if sys.platform.startswith('win'):
        return os.environ.get('APPDATA') or None
    home = os.path.expanduser('~')
    if home == '~':
        return None
    if sys.platform == 'darwin':
        return os.path.join(home, 'Library', 'Application Support')
    return os.environ.get('XDG_CONFIG_HOME') or os.path.join(home, '.config')


def settings_path(create: bool = True) -> str:
    """
    Location of the settings file.

    Uses <app data>/hex_saver/settings.txt. With create=True the directory is
    created when needed; with create=False nothing is touched and an absent
    app data directory means no file was ever saved there. Falls back to a file
    in the working directory when there is no app data directory or it cannot
    be created, which is also where such a fallback save would have gone.
    """
    base = _app_data_base()
    if base:
        app_dir = os.path.join(base, APP_DIR_NAME)
        if not create:
            if os.path.isdir(app_dir):
                return os.path.join(app_dir, SETTINGS_FILE_NAME)
        else:
            try:
                os.makedirs(app_dir, exist_ok=True)
                return os.path.join(app_dir, SETTINGS_FILE_NAME)
            except OSError as e:
                logger.warning(f"Could not create settings directory {app_dir}: {e}")
    return os.path.abspath(LOCAL_FALLBACK_NAME)


def load_settings(path: str = None) -> ScreensaverConfig:
    """
    Reads the settings file.

    Data Contract:
    - Inputs: path (str) - Settings file; defaults to settings_path(create=False).
    - Outputs: ScreensaverConfig. Defaults when the file is missing or unreadable.
    - Side Effects: None besides logging.
    """
    if path is None:
        path = settings_path(create=False)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        logger.info(f"No settings file at {path}; using defaults.")
        return ScreensaverConfig()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read settings from {path}: {e}. Using defaults.")
        return ScreensaverConfig()
    return parse_settings(text)


def save_settings(config: ScreensaverConfig, path: str = None) -> bool:
    """
    Writes the settings file.

    - Outputs: bool - True if the file was written. An unwritable destination
      is logged and reported as False; it never raises.
    """
    if path is None:
        path = settings_path()
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(format_settings(config))
    except OSError as e:
        logger.warning(f"Could not save settings to {path}: {e}. Settings apply to this run only.")
        return False
    logger.info(f"Settings saved to {path}: shape={config.shape.value}, threshold={config.threshold:.3f}")
    return True
