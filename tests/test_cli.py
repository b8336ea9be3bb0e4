# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_cli.py

"""Test suite for CLI functionality."""

from unittest.mock import patch

from typer.testing import CliRunner

from yoz.cli import app
from yoz.system.execution import CommandExecutor
from tests.helpers import failed, ok
from tests.test_scaffold_project import fake_cargo_new
from tests.test_screen import TWO_MONITORS

runner = CliRunner(env={"COLUMNS": "200"})


class TestGlobalOptions:

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("new", "checks", "launch", "screen", "update", "dotfiles"):
            assert command in result.output

    def test_version(self):
        with patch("yoz.cli.main.version", return_value="1.2.3"):
            result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "yoz version 1.2.3" in result.output

    def test_verbose_and_quiet(self):
        result = runner.invoke(app, ["update", "--all", "--verbose", "--quiet"])
        assert result.exit_code == 2

    def test_first_run_creates_config(self, isolated_config_home):
        result = runner.invoke(app, ["update", "--rust", "--dry-run"])
        assert result.exit_code == 0
        assert (isolated_config_home / "config.toml").exists()
        assert "Config file created at" in result.output

    def test_config_error_with_json(self, write_config):
        write_config("full_name = \n")

        result = runner.invoke(app, ["update", "--all", "--json"])

        assert result.exit_code == 1
        assert "<JSON-STDOUT>" in result.output
        assert '"error_type": "ConfigError"' in result.output
        assert "Configuration error" in result.output


class TestProjectCommands:

    def test_new(self, tmp_path):
        with patch.object(CommandExecutor, "run_local", side_effect=fake_cargo_new):
            result = runner.invoke(app, [
                "new", "demo", "--path", str(tmp_path), "--full-name", "Jane Doe", "--no-ci",
            ])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "demo" / "LICENSE.MIT").exists()

    def test_new_uses_configured_full_name_and_projects_path(self, tmp_path, write_config):
        write_config(f'full_name = "Jane Doe"\nprojects_path = "{tmp_path}"\n')

        with patch.object(CommandExecutor, "run_local", side_effect=fake_cargo_new):
            result = runner.invoke(app, ["new", "demo", "--lib"])

        assert result.exit_code == 0, result.output
        assert "Jane Doe" in (tmp_path / "demo" / "LICENSE.MIT").read_text()

    def test_new_without_full_name(self, tmp_path):
        result = runner.invoke(app, ["new", "demo", "--path", str(tmp_path)])
        assert result.exit_code == 1
        assert "full_name" in result.output

    def test_add_nothing_selected(self, tmp_path):
        result = runner.invoke(app, ["add", str(tmp_path)])
        assert result.exit_code == 1
        assert "Please select something to add" in result.output

    def test_add_ci(self, tmp_path):
        result = runner.invoke(app, ["add", str(tmp_path), "--ci", "--lib"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / ".github" / "workflows" / "pr.yml").exists()

    def test_checks_all_pass(self, tmp_path):
        with patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
            result = runner.invoke(app, ["checks", str(tmp_path), "--test", "test --lib"])

        assert result.exit_code == 0, result.output
        mock_run.assert_any_call(["cargo", "test", "--lib"], cwd=tmp_path.resolve(), check=False)

    def test_checks_failure_exits_non_zero(self, tmp_path):
        with patch.object(CommandExecutor, "run_local", side_effect=[ok(), failed(), ok(), ok()]):
            result = runner.invoke(app, ["checks", str(tmp_path)])

        assert result.exit_code == 1
        assert "some checks failed" in result.output

    def test_checks_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["checks", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestDesktopCommands:

    def test_launch_needs_configuration(self, tmp_path):
        result = runner.invoke(app, ["launch", str(tmp_path)])
        assert result.exit_code == 1
        assert "Please configure `launch_command`" in result.output

    def test_launch_splits_commands(self, tmp_path):
        with patch.object(CommandExecutor, "spawn") as mock_spawn, \
             patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
            result = runner.invoke(app, [
                "launch", str(tmp_path), "--command", "nvim .", "--terminal", "alacritty --hold",
            ])

        assert result.exit_code == 0, result.output
        mock_spawn.assert_called_once_with(["alacritty", "--hold"], cwd=tmp_path.resolve())
        mock_run.assert_called_once_with(["nvim", "."], cwd=tmp_path.resolve(), check=False, capture=False)

    def test_background_from_config(self, write_config):
        write_config('[background]\nfile_path = "/img/wall.png"\nposition = "tile"\n')

        with patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
            result = runner.invoke(app, ["background"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(["feh", "--no-fehbg", "--bg-tile", "/img/wall.png"], check=False)

    def test_background_bad_position(self):
        result = runner.invoke(app, ["background", "/img/wall.png", "stretch"])
        assert result.exit_code == 1
        assert "Cannot parse position from stretch" in result.output

    def test_screen_lists_monitors(self):
        with patch.object(CommandExecutor, "run_local", return_value=ok(TWO_MONITORS)):
            result = runner.invoke(app, ["screen"])

        assert result.exit_code == 0, result.output
        assert "0: eDP-1 1920x1080 60Hz" in result.output
        assert "1: HDMI-1 2560x1440 60Hz" in result.output

    def test_screen_all(self):
        with patch.object(CommandExecutor, "run_local", return_value=ok(TWO_MONITORS)) as mock_run:
            result = runner.invoke(app, ["screen", "--all", "--rate", "144", "--direction", "left"])

        assert result.exit_code == 0, result.output
        mock_run.assert_any_call(
            ["xrandr", "--output", "HDMI-1", "--left-of", "eDP-1", "--mode", "2560x1440", "--rate", "144"],
            check=False,
        )

    def test_screen_direction_ignores_case(self):
        with patch.object(CommandExecutor, "run_local", return_value=ok(TWO_MONITORS)) as mock_run:
            result = runner.invoke(app, ["screen", "--all", "--direction", "LEFT"])

        assert result.exit_code == 0, result.output
        mock_run.assert_any_call(
            ["xrandr", "--output", "HDMI-1", "--left-of", "eDP-1", "--mode", "2560x1440", "--rate", "60"],
            check=False,
        )

    def test_screen_external_missing(self):
        single = "Monitors: 1\n 0: +*eDP-1 1920/344x1080/194+0+0  eDP-1\n"
        with patch.object(CommandExecutor, "run_local", return_value=ok(single)):
            result = runner.invoke(app, ["screen", "--external"])

        assert result.exit_code == 1
        assert "external screen not detected" in result.output

    def test_shot_modes_are_exclusive(self):
        result = runner.invoke(app, ["shot", "--screen", "--desktop"])
        assert result.exit_code == 1
        assert "mutually exclusive" in result.output

    def test_shot_json(self):
        with patch.object(CommandExecutor, "run_local", return_value=ok()):
            result = runner.invoke(app, ["shot", "--desktop", "--clipboard", "--json"])

        assert result.exit_code == 0, result.output
        assert "<JSON-STDOUT>" in result.output
        assert '"--clipboard"' in result.output


class TestSystemCommands:

    def test_install_nothing_selected(self):
        result = runner.invoke(app, ["install"])
        assert result.exit_code == 1
        assert "Please select something to install" in result.output

    def test_install_cargo(self):
        with patch.object(CommandExecutor, "is_available", return_value=None), \
             patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
            result = runner.invoke(app, ["install", "bat", "--cargo"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(["cargo", "install", "bat"], capture=False)

    def test_update_nothing_selected(self):
        result = runner.invoke(app, ["update"])
        assert result.exit_code == 1
        assert "Please select something to update" in result.output

    def test_update_dry_run_runs_nothing(self):
        with patch.object(CommandExecutor, "run_local") as mock_run:
            result = runner.invoke(app, ["update", "--rust", "--rust-bin", "--dry-run"])

        assert result.exit_code == 0, result.output
        mock_run.assert_not_called()
        assert "rustup update" in result.output

    def test_update_failure_exits_non_zero(self):
        with patch.object(CommandExecutor, "run_local", side_effect=[failed(), ok()]) as mock_run:
            result = runner.invoke(app, ["update", "--rust", "--rust-bin"])

        assert result.exit_code == 1
        assert mock_run.call_count == 2

    def test_dotfiles_needs_configuration(self):
        result = runner.invoke(app, ["dotfiles"])
        assert result.exit_code == 1
        assert "dotfiles.repository_path" in result.output

    def test_dotfiles_from_arguments(self, tmp_path):
        checkout = tmp_path / "repos" / "dotfiles" / "nvim"
        checkout.mkdir(parents=True)
        (checkout / "init.lua").write_text("-- nvim\n")

        result = runner.invoke(app, [
            "dotfiles", str(tmp_path / "repos"), "dotfiles", "https://example.com/dotfiles.git",
        ])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "xdg" / "nvim" / "init.lua").read_text() == "-- nvim\n"

    def test_install_aur_uses_default_builds_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.chdir(tmp_path)
        url = "https://aur.archlinux.org/paru.git"

        with patch.object(CommandExecutor, "is_available", return_value=None), \
             patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
            result = runner.invoke(app, ["install", "paru", "--aur", url])

        builds_dir = tmp_path / "home" / ".builds"
        assert result.exit_code == 0, result.output
        assert builds_dir.is_dir()
        assert not (tmp_path / "~").exists()
        mock_run.assert_any_call(["git", "clone", url], cwd=builds_dir)

    def test_update_aur_uses_default_builds_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        build = tmp_path / "home" / ".builds" / "paru"
        build.mkdir(parents=True)

        result = runner.invoke(app, ["update", "--aur", "--dry-run", "--json"])

        assert result.exit_code == 0, result.output
        assert f'"cwd": "{build}"' in result.output

    def test_update_empty_plan(self, tmp_path, write_config):
        write_config(f'builds_dir = "{tmp_path / "none"}"\n')

        with patch.object(CommandExecutor, "run_local") as mock_run:
            result = runner.invoke(app, ["update", "--aur"])

        assert result.exit_code == 1
        assert "Please select something to update" in result.output
        mock_run.assert_not_called()
