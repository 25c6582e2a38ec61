"""Nested, animated task lines for command-line tools."""

import logging

from taskline.config import ConfigError, DisplayConfig, load_config
from taskline.tasks import (
    Outcome, TaskDisplay, fail, get_display, start, succeed, task, warn,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError", "DisplayConfig", "Outcome", "TaskDisplay",
    "fail", "get_display", "load_config", "start", "succeed", "task", "warn",
]
