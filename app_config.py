# app_config.py

import copy
import json
import logging
import math
import os

# config.json lives next to the modules, not in the working directory: Windows
# launches screensavers with the system directory as cwd.
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')

DEFAULT_APP_CONFIG = {
    'run_id': 'default',
    'master_seed': None,
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
    'engine': {
        'cell_radius': 40.0,
    },
}


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _valid_run_id(value):
    if not isinstance(value, str) or value.strip() == '' or value in ('.', '..'):
        return False
    return '/' not in value and '\\' not in value


def _valid_seed(value):
    return value is None or (isinstance(value, int) and not isinstance(value, bool) and value >= 0)


def _valid_level(value):
    # getLevelName maps known names to their int value and anything else to "Level ...".
    return isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int)


def _valid_format(value):
    if not isinstance(value, str):
        return False
    try:
        logging.Formatter(value)
    except (ValueError, TypeError):
        return False
    return True


def _valid_radius(value):
    return _is_number(value) and math.isfinite(value) and value > 0


def load_app_config(config_path=DEFAULT_CONFIG_PATH):
    """
    Loads the run-tunable application configuration.

    Values found in the file override the built-in defaults one key at a
    time, so a partial config.json is valid. A value of the wrong type or out
    of range keeps the default for that key only.

    Data Contract:
    - Inputs: config_path (str) - Path to the JSON configuration file.
    - Outputs: dict with 'run_id', 'master_seed', 'logging' and 'engine'.
    - Side Effects: None. Logging is usually not configured yet, so problems
      are reported through the returned defaults rather than raised.
    - Invariants: The returned dict always contains every default key, each
      holding a usable value (log level names are upper-cased).
    """
    config = copy.deepcopy(DEFAULT_APP_CONFIG)
    try:
        with open(config_path, 'r') as f:
            loaded = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return config

    if not isinstance(loaded, dict):
        return config

    if _valid_run_id(loaded.get('run_id')):
        config['run_id'] = loaded['run_id']
    if 'master_seed' in loaded and _valid_seed(loaded['master_seed']):
        config['master_seed'] = loaded['master_seed']

    log_section = loaded.get('logging')
    if isinstance(log_section, dict):
        if _valid_level(log_section.get('level')):
            config['logging']['level'] = log_section['level'].upper()
        if _valid_format(log_section.get('format')):
            config['logging']['format'] = log_section['format']

    engine_section = loaded.get('engine')
    if isinstance(engine_section, dict) and _valid_radius(engine_section.get('cell_radius')):
        config['engine']['cell_radius'] = float(engine_section['cell_radius'])

    return config
