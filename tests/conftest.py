"""Shared test fixtures for taskline tests."""

import io
import os
import sys

import pytest

# Add project root to path so `taskline` is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from taskline.config import DisplayConfig
from taskline.tasks import TaskDisplay


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def still_display(stream):
    """Display with animation off, so output is exactly what begin/end wrote."""
    return TaskDisplay(stream, DisplayConfig(animate=False))


@pytest.fixture
def live_display(stream):
    """Animated display with a fast tick."""
    return TaskDisplay(stream, DisplayConfig(tick_interval=0.005))


@pytest.fixture
def sample_config_dict():
    return {"tick_interval": 0.1, "indent": 4, "frames": "◐◓◑◒"}


@pytest.fixture
def tmp_config_file(tmp_path, sample_config_dict):
    """Write a temporary config YAML file and return its path."""
    import yaml
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(sample_config_dict, allow_unicode=True), encoding="utf-8")
    return str(config_path)
