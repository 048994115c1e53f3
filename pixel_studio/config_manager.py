import json
import logging
import os
from dataclasses import dataclass, fields

from . import config
from .errors import ConfigError

logger = logging.getLogger(__name__)

# We define the file name here
CONFIG_FILE = "config.json"


@dataclass
class EditorConfig:
    grid_size: int = config.DEFAULT_GRID_SIZE
    color: str = config.DEFAULT_COLOR
    brush_size: int = config.DEFAULT_BRUSH_SIZE
    max_brush_size: int = config.MAX_BRUSH_SIZE
    max_history: int = config.MAX_HISTORY
    max_zoom: float = config.MAX_ZOOM
    spritesheet_max_columns: int = config.SPRITESHEET_MAX_COLUMNS


# Settings that are not plain positive ints
_EXPECTED_TYPES = {
    "color": str,
    "max_zoom": (int, float),
}


def _check_value(name, value, expected):
    # bool is an int subclass; reject it for numeric settings
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConfigError(f"Config value '{name}' has the wrong type: {value!r}")
    if expected is not str and value <= 0:
        raise ConfigError(f"Config value '{name}' must be positive: {value!r}")
    return value


def load_config(path=None) -> EditorConfig:
    """
    Load editor settings from a JSON file, falling back to the defaults.

    Args:
        path: Path to the JSON file. Defaults to config.json next to this module.

    Returns:
        EditorConfig: Defaults overlaid with whatever the file provides
    """
    if path is None:
        base_path = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(base_path, CONFIG_FILE)

    try:
        with open(path, 'r') as file:
            data = json.load(file)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return EditorConfig()
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    known = {f.name for f in fields(EditorConfig)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown config key '%s'", key)
            continue
        values[key] = _check_value(key, value, _EXPECTED_TYPES.get(key, int))

    if values.get("max_zoom", config.MAX_ZOOM) < config.MIN_ZOOM:
        raise ConfigError(f"Config value 'max_zoom' must be at least {config.MIN_ZOOM}: {values['max_zoom']!r}")

    return EditorConfig(**values)
