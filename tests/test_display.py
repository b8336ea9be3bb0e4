# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_display.py

from pathlib import Path

from rich.console import Console

from yoz.core.checks import CheckResult
from yoz.core.dotfiles import GeneratedConfig
from yoz.core.packages import InstallResult, InstallStatus, Manager
from yoz.core.screen import Monitor
from yoz.core.update import UpdateStep
from yoz.scaffold.project import ScaffoldResult
from yoz.system.display import (
    display_check_results,
    display_dotfiles,
    display_install_results,
    display_monitors,
    display_scaffold_result,
    display_update_plan,
    display_update_results,
)


def make_console() -> Console:
    return Console(record=True, width=200)


def test_check_results():
    console = make_console()
    display_check_results(console, [
        CheckResult("check", ["check"], True),
        CheckResult("clippy", ["clippy"], False, output="warning: unused"),
    ], verbose=True)

    text = console.export_text()
    assert "Ok" in text and "Nope" in text
    assert "warning: unused" in text
    assert "1 of 2 checks failed" in text


def test_monitors_sorted_by_id():
    console = make_console()
    display_monitors(console, {1: Monitor(1, "HDMI-1", 2560, 1440, 144), 0: Monitor(0, "eDP-1", 1920, 1080)})

    lines = console.export_text().splitlines()
    assert lines == ["0: eDP-1 1920x1080 60Hz", "1: HDMI-1 2560x1440 144Hz"]


def test_install_results():
    console = make_console()
    display_install_results(console, [
        InstallResult("bat", Manager.CARGO, InstallStatus.ALREADY_INSTALLED),
        InstallResult("feh", Manager.PACMAN, InstallStatus.INSTALLED),
    ])

    text = console.export_text()
    assert "already installed" in text
    assert "pacman" in text


def test_update_plan_and_results():
    steps = [
        UpdateStep("Update Rust", ["rustup", "update"], success=True),
        UpdateStep("Pull paru", ["git", "pull"], cwd=Path("/b/paru"), success=False),
    ]
    console = make_console()
    display_update_plan(console, steps)
    display_update_results(console, steps)

    text = console.export_text()
    assert "git pull (in /b/paru)" in text
    assert "1 update step(s) failed" in text


def test_dotfiles(tmp_path):
    source = tmp_path / "src" / "nvim"
    source.mkdir(parents=True)
    (source / "init.lua").write_text("x" * 2000)
    destination = tmp_path / "config" / "nvim"

    console = make_console()
    display_dotfiles(console, [
        GeneratedConfig("nvim", source, destination, files=[destination / "init.lua"]),
        GeneratedConfig("i3", tmp_path / "src" / "i3", tmp_path / "config" / "i3", skipped=True),
    ], dry_run=True)

    text = console.export_text()
    assert "Dotfiles (dry run)" in text
    assert "2.0 kB" in text
    assert "skipped" in text


def test_scaffold_result(tmp_path):
    console = make_console()
    result = ScaffoldResult(tmp_path, files=[tmp_path / "LICENSE.MIT"])

    display_scaffold_result(console, result, verbose=True)

    assert "LICENSE.MIT" in console.export_text()
