"""Presentation settings for taskline displays."""

import os
import yaml
from dataclasses import dataclass, fields

CONFIG_ENV = "TASKLINE_CONFIG"


class ConfigError(ValueError):
    """Raised when a presentation setting cannot be honored."""


@dataclass
class DisplayConfig:
    tick_interval: float = 0.08  # seconds between spinner frames
    indent: int = 5              # columns per nesting level
    frames: str = "-\\|/"        # spinner phases, clockwise
    animate: bool = True

    def __post_init__(self):
        # bool is an int subclass; "tick_interval: yes" is not a number
        if isinstance(self.tick_interval, bool) or not isinstance(self.tick_interval, (int, float)):
            raise ConfigError(f"tick_interval must be a number, got {self.tick_interval!r}")
        if self.tick_interval <= 0:
            raise ConfigError(f"tick_interval must be positive, got {self.tick_interval!r}")

        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ConfigError(f"indent must be an integer, got {self.indent!r}")
        # the "┗━ " connector needs three columns
        if self.indent < 3:
            raise ConfigError(f"indent must be at least 3, got {self.indent!r}")

        if isinstance(self.frames, (list, tuple)):
            if any(not isinstance(f, str) or len(f) != 1 for f in self.frames):
                raise ConfigError("each spinner frame must be a single character")
            self.frames = "".join(self.frames)
        if not isinstance(self.frames, str):
            raise ConfigError(f"frames must be a string or a list of characters, got {self.frames!r}")
        if not self.frames:
            raise ConfigError("frames must not be empty")

        if not isinstance(self.animate, bool):
            raise ConfigError(f"animate must be true or false, got {self.animate!r}")


def load_config(path: str | None = None) -> DisplayConfig:
    """Load display settings from YAML, with defaults for missing values.

    Uses ``path`` if given, otherwise ``$TASKLINE_CONFIG``. With neither,
    or when the file does not exist, the defaults are returned.
    """
    path = path or os.environ.get(CONFIG_ENV)
    data = {}
    if path and os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    # Drop keys we don't know about rather than failing on them
    known = {f.name for f in fields(DisplayConfig)}
    return DisplayConfig(**{k: v for k, v in data.items() if k in known})
