# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_command_executor.py

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from yoz.system.exceptions import CommandError
from yoz.system.execution import CommandExecutor, CommandResult
from tests.helpers import completed


class TestCommandResult:
    """Test CommandResult dataclass functionality."""

    def test_success_property(self):
        assert CommandResult(returncode=0, stdout="output").success is True
        assert CommandResult(returncode=1, stderr="error").success is False
        assert CommandResult(returncode=127).success is False


class TestRunLocal:
    """Test local command execution."""

    @patch("yoz.system.execution.subprocess.run")
    def test_run_local_success(self, mock_run):
        mock_run.return_value = completed(stdout="test output")

        result = CommandExecutor.run_local(["echo", "test"])

        assert result.success is True
        assert result.stdout == "test output"
        mock_run.assert_called_once_with(
            ["echo", "test"],
            cwd=None,
            capture_output=True,
            text=True,
            timeout=None
        )

    @patch("yoz.system.execution.subprocess.run")
    def test_run_local_passes_cwd_and_timeout(self, mock_run, tmp_path):
        mock_run.return_value = completed()

        CommandExecutor.run_local(["sleep", "1"], cwd=tmp_path, timeout=5)

        mock_run.assert_called_once_with(
            ["sleep", "1"],
            cwd=tmp_path,
            capture_output=True,
            text=True,
            timeout=5
        )

    @patch("yoz.system.execution.subprocess.run")
    def test_run_local_without_capture(self, mock_run):
        mock_run.return_value = completed(stdout=None, stderr=None)

        result = CommandExecutor.run_local(["nvim", "."], capture=False)

        mock_run.assert_called_once_with(["nvim", "."], cwd=None, timeout=None)
        assert result.stdout == ""
        assert result.stderr == ""

    @patch("yoz.system.execution.subprocess.run")
    def test_run_local_stringifies_arguments(self, mock_run, tmp_path):
        mock_run.return_value = completed()

        CommandExecutor.run_local(["feh", tmp_path / "a.png"])

        assert mock_run.call_args[0][0] == ["feh", str(tmp_path / "a.png")]

    @patch("yoz.system.execution.subprocess.run")
    def test_failure_with_check_raises(self, mock_run):
        mock_run.return_value = completed(returncode=2, stderr="boom\n")

        with pytest.raises(CommandError, match="`cargo check` failed: boom") as exc_info:
            CommandExecutor.run_local(["cargo", "check"])

        assert exc_info.value.command == ["cargo", "check"]
        assert exc_info.value.returncode == 2

    @patch("yoz.system.execution.subprocess.run")
    def test_failure_without_stderr_mentions_exit_code(self, mock_run):
        mock_run.return_value = completed(returncode=3)

        with pytest.raises(CommandError, match="failed with exit code 3"):
            CommandExecutor.run_local(["false"])

    @patch("yoz.system.execution.subprocess.run")
    def test_failure_without_check_returns_result(self, mock_run):
        mock_run.return_value = completed(returncode=1, stderr="nope")

        result = CommandExecutor.run_local(["cargo", "fmt"], check=False)

        assert result.success is False
        assert result.stderr == "nope"

    @patch("yoz.system.execution.subprocess.run")
    def test_missing_program_raises_command_error(self, mock_run):
        mock_run.side_effect = FileNotFoundError("No such file")

        with pytest.raises(CommandError, match="cannot launch `flameshot`"):
            CommandExecutor.run_local(["flameshot", "gui"], check=False)

    @patch("yoz.system.execution.subprocess.run")
    def test_timeout_propagates(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(["sleep"], 1)

        with pytest.raises(subprocess.TimeoutExpired):
            CommandExecutor.run_local(["sleep", "10"], timeout=1)


class TestRunSudo:

    @patch("yoz.system.execution.subprocess.run")
    def test_prefixes_sudo(self, mock_run):
        mock_run.return_value = completed()

        CommandExecutor.run_sudo(["pacman", "--sync", "feh"], capture=False)

        mock_run.assert_called_once_with(
            ["sudo", "pacman", "--sync", "feh"], cwd=None, timeout=None
        )


class TestSpawn:

    @patch("yoz.system.execution.subprocess.Popen")
    def test_spawn_returns_process(self, mock_popen, tmp_path):
        process = MagicMock()
        mock_popen.return_value = process

        assert CommandExecutor.spawn(["alacritty"], cwd=tmp_path) is process
        mock_popen.assert_called_once_with(["alacritty"], cwd=tmp_path)

    @patch("yoz.system.execution.subprocess.Popen")
    def test_spawn_failure_raises(self, mock_popen):
        mock_popen.side_effect = FileNotFoundError("missing")

        with pytest.raises(CommandError, match="cannot launch `alacritty`"):
            CommandExecutor.spawn(["alacritty"])


class TestIsAvailable:

    @patch("yoz.system.execution.subprocess.run")
    def test_installed_program(self, mock_run):
        mock_run.return_value = completed()
        assert CommandExecutor.is_available("bat") is True
        mock_run.assert_called_once_with(["bat", "--version"], capture_output=True, text=True)

    @patch("yoz.system.execution.subprocess.run")
    def test_program_failing_its_version_check(self, mock_run):
        mock_run.return_value = completed(returncode=1)
        assert CommandExecutor.is_available("bat") is False

    @patch("yoz.system.execution.subprocess.run")
    def test_missing_program(self, mock_run):
        mock_run.side_effect = FileNotFoundError("missing")
        assert CommandExecutor.is_available("bat") is None
