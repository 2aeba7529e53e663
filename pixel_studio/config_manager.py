import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Optional, Tuple

from . import config
from .errors import ConfigError
from .logic.color import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    grid_sizes: Tuple[int, ...] = config.GRID_SIZES
    default_grid_size: int = config.DEFAULT_GRID_SIZE
    brush_sizes: Tuple[int, ...] = config.BRUSH_SIZES
    max_history: int = config.MAX_HISTORY
    max_recent_colors: int = config.MAX_RECENT_COLORS
    export_resolution: int = config.EXPORT_RESOLUTION
    default_color: Color = field(default_factory=lambda: Color.from_hex(config.DEFAULT_COLOR))
    palette: Tuple[Color, ...] = field(default_factory=lambda: tuple(Color.from_hex(h) for h in config.PALETTE))

    def __post_init__(self):
        if not self.grid_sizes or any(not isinstance(s, int) or s <= 0 for s in self.grid_sizes):
            raise ConfigError(f"grid_sizes must be positive integers, got {self.grid_sizes!r}")
        if self.default_grid_size not in self.grid_sizes:
            raise ConfigError(f"default_grid_size {self.default_grid_size} not in {self.grid_sizes}")
        if not self.brush_sizes or any(not isinstance(s, int) or s <= 0 for s in self.brush_sizes):
            raise ConfigError(f"brush_sizes must be positive integers, got {self.brush_sizes!r}")
        if self.max_history < 1:
            raise ConfigError("max_history must be at least 1")
        if self.max_recent_colors < 0:
            raise ConfigError("max_recent_colors cannot be negative")
        if self.export_resolution <= 0:
            raise ConfigError("export_resolution must be positive")


def _coerce(key, value):
    try:
        if key in ("grid_sizes", "brush_sizes"):
            return tuple(int(v) for v in value)
        if key == "palette":
            return tuple(Color.from_hex(v) for v in value)
        if key == "default_color":
            return Color.from_hex(value)
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {key!r}: {value!r} ({e})") from e


def config_path() -> str:
    """Explicit env override, else config.json next to this package"""
    env_path = os.environ.get(config.CONFIG_ENV_VAR)
    if env_path:
        return env_path
    base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_path, config.CONFIG_FILE)


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Load settings from a JSON file

    A missing file means defaults. Unknown keys are ignored.

    Raises:
        ConfigError: malformed JSON or invalid values
    """
    path = path or config_path()
    try:
        with open(path, 'r') as file:
            raw = json.load(file)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()
    except json.JSONDecodeError as e:
        logger.error("JSON error in %s: %s", path, e)
        raise ConfigError(f"Malformed settings file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {path} must hold a JSON object")

    known = {f.name for f in fields(Settings)}
    overrides = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        overrides[key] = _coerce(key, value)

    return Settings(**overrides)
