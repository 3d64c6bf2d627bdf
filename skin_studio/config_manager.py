import json
import logging
import os

from .config import CANVAS_SIZE, ConfigError

logger = logging.getLogger(__name__)

# We define the file name here
CONFIG_FILE = "config.json"
CONFIG_ENV_VAR = "SKIN_STUDIO_CONFIG"

REQUIRED_SECTIONS = ("app_settings", "theme", "history", "bounds", "preview")
REQUIRED_BOUNDS = ("body", "body-shadow", "hand", "hand-shadow", "foot", "foot-shadow", "eye")


def default_config_path():
    base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_path, CONFIG_FILE)


def load_config(path=None):
    """
    Load and validate the editor configuration.

    Args:
        path: Explicit config file. Falls back to $SKIN_STUDIO_CONFIG,
            then to the config.json bundled with the package.
    """
    config_path = path or os.environ.get(CONFIG_ENV_VAR) or default_config_path()
    try:
        with open(config_path, 'r') as file:
            data = json.load(file)
    except FileNotFoundError as e:
        logger.error("Config file not found: %s", config_path)
        raise ConfigError(f"config file not found: {config_path}") from e
    except json.JSONDecodeError as e:
        logger.error("JSON error in %s: %s", config_path, e)
        raise ConfigError(f"invalid JSON in {config_path}: {e}") from e

    validate_config(data)
    logger.debug("Loaded config from %s", config_path)
    return data


def validate_config(data):
    missing = [s for s in REQUIRED_SECTIONS if s not in data]
    if missing:
        raise ConfigError(f"missing config sections: {', '.join(missing)}")

    bounds = data['bounds']
    for name in REQUIRED_BOUNDS:
        if name not in bounds:
            raise ConfigError(f"missing bounds for '{name}'")

    for name, rect in bounds.items():
        if len(rect) != 4 or not all(isinstance(v, int) for v in rect):
            raise ConfigError(f"bounds for '{name}' must be four integers, got {rect!r}")
        x, y, w, h = rect
        if w <= 0 or h <= 0:
            raise ConfigError(f"bounds for '{name}' have a non-positive size")
        if x < 0 or y < 0 or x + w > CANVAS_SIZE or y + h > CANVAS_SIZE:
            raise ConfigError(f"bounds for '{name}' exceed the {CANVAS_SIZE}px canvas")

    depth = data['history'].get('max_depth')
    if not isinstance(depth, int) or depth < 1:
        raise ConfigError(f"history.max_depth must be a positive integer, got {depth!r}")


CONFIG = load_config()
