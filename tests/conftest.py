# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the yoz test suite.
"""

from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch) -> Path:
    """Point every config lookup at a temporary directory."""
    config_dir = tmp_path / "yoz-config"
    monkeypatch.setenv("YOZ_CONFIG_HOME", str(config_dir))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    return config_dir


@pytest.fixture
def write_config(isolated_config_home):
    """Write a config.toml into the isolated config home."""
    def _write(text: str) -> Path:
        isolated_config_home.mkdir(parents=True, exist_ok=True)
        path = isolated_config_home / "config.toml"
        path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by setup_logging, which may point at closed streams."""
    yield
    logger.remove()
