# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_background.py

from pathlib import Path
from unittest.mock import patch

import pytest

from yoz.config.manager import Position
from yoz.core.background import background_command, set_background
from yoz.system.exceptions import CommandError, ValidationError
from yoz.system.execution import CommandExecutor
from tests.helpers import failed, ok


def test_background_command():
    assert background_command(Path("/img/a.png"), Position.TILE) == [
        "feh", "--no-fehbg", "--bg-tile", "/img/a.png",
    ]


def test_given_file_and_position():
    with patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
        cmd = set_background(Path("/img/a.png"), Position.CENTER)

    assert cmd == ["feh", "--no-fehbg", "--bg-center", "/img/a.png"]
    mock_run.assert_called_once_with(cmd, check=False)


def test_configured_defaults():
    with patch.object(CommandExecutor, "run_local", return_value=ok()):
        cmd = set_background(None, None, Path("/img/b.png"), Position.MAX)
    assert cmd == ["feh", "--no-fehbg", "--bg-max", "/img/b.png"]


def test_position_falls_back_to_fill():
    with patch.object(CommandExecutor, "run_local", return_value=ok()):
        cmd = set_background(Path("/img/a.png"), None)
    assert cmd[2] == "--bg-fill"


def test_no_file():
    with pytest.raises(ValidationError, match="no file has been provided for the background"):
        set_background(None, Position.FILL)


def test_feh_failure():
    with patch.object(CommandExecutor, "run_local", return_value=failed()):
        with pytest.raises(CommandError, match="cannot set the background"):
            set_background(Path("/img/a.png"), None)
