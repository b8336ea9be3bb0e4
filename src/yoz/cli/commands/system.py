# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/commands/system.py

"""
System maintenance command handlers.

Handles: install, update, dotfiles
"""

from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from yoz.config.manager import YozConfig, config_home, resolve_setting
from yoz.core.dotfiles import generate_dotfiles
from yoz.core.packages import run_install
from yoz.core.update import generate_commands, run_updates
from yoz.system.display import (
    display_dotfiles,
    display_install_results,
    display_update_plan,
    display_update_results,
)
from yoz.system.exceptions import PartialFailureError


def install(
    console: Console,
    config: YozConfig,
    name: Optional[str] = None,
    cargo: bool = False,
    aur: Optional[str] = None,
    prelude: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> list[dict]:
    """Install a program with pacman, the AUR or cargo, or the whole prelude."""
    results = run_install(name, cargo, aur, prelude, config.prelude, config.builds_dir)
    display_install_results(console, results)
    return [result.to_dict() for result in results]


def update(
    console: Console,
    config: YozConfig,
    update_all: bool = False,
    arch: bool = False,
    aur: bool = False,
    rust: bool = False,
    rust_bin: bool = False,
    dry_run: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    """Update the system.

    Args:
        console: Rich console for output
        config: Loaded configuration
        dry_run: Show the plan without running it

    Raises:
        PartialFailureError: If any update step failed
    """
    steps = generate_commands(
        config.builds_dir,
        update_all=update_all,
        arch=arch,
        aur=aur,
        rust=rust,
        rust_bin=rust_bin,
    )

    if dry_run:
        display_update_plan(console, steps)
        return {"dry_run": True, "steps": [step.to_dict() for step in steps]}

    run_updates(steps)
    display_update_results(console, steps)

    summary = {"dry_run": False, "steps": [step.to_dict() for step in steps]}
    if any(step.success is False for step in steps):
        raise PartialFailureError("some updates failed", result=summary)
    return summary


def dotfiles(
    console: Console,
    config: YozConfig,
    repository_path: Optional[Path] = None,
    config_files_dir: Optional[Path] = None,
    config_repository_url: Optional[str] = None,
    dry_run: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> list[dict]:
    """Generate application configs from the dotfiles repository."""
    settings = config.dotfiles
    repository = resolve_setting(
        repository_path, settings.repository_path, "dotfiles.repository_path"
    )
    files_dir = resolve_setting(
        config_files_dir, settings.config_files_dir, "dotfiles.config_files_dir"
    )
    url = resolve_setting(
        config_repository_url, settings.config_repository_url, "dotfiles.config_repository_url"
    )
    target_dir = settings.target_dir or config_home()

    generated = generate_dotfiles(repository, files_dir, url, target_dir, dry_run=dry_run)
    display_dotfiles(console, generated, dry_run=dry_run, verbose=verbose)
    return [config_entry.to_dict() for config_entry in generated]
