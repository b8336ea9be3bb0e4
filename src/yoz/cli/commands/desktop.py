# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/commands/desktop.py

"""
Desktop command handlers.

Handles: launch, background, screen, shot
"""

from pathlib import Path
from typing import Any, Optional

from loguru import logger
from rich.console import Console

from yoz.config.manager import Position, YozConfig
from yoz.core.background import set_background
from yoz.core.launch import launch as run_launch, plan_launch
from yoz.core.paths import set_working_dir
from yoz.core.screen import (
    Direction,
    ScreenMode,
    configure_screens,
    fetch_monitors,
    plan_screen_commands,
    resolve_monitors,
)
from yoz.core.shot import shot_command, take_shot
from yoz.system.display import display_monitors
from yoz.system.exceptions import ValidationError


def launch(
    console: Console,
    config: YozConfig,
    path: Optional[Path] = None,
    command: Optional[list[str]] = None,
    terminal: Optional[list[str]] = None,
    no_command: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    """Open the editor and a terminal in a project directory."""
    working_dir = set_working_dir(path)
    plan = plan_launch(
        working_dir,
        command,
        terminal,
        no_command,
        config.launch_command,
        config.terminal_command,
    )
    run_launch(plan)
    return plan.to_dict()


def background(
    console: Console,
    config: YozConfig,
    file_path: Optional[Path] = None,
    position: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    parsed = Position.parse(position) if position else None
    cmd = set_background(
        file_path,
        parsed,
        default_file_path=config.background.file_path,
        default_position=config.background.position,
    )
    if not quiet:
        console.print(f"[green]✓[/green] Background set to {cmd[-1]}")
    return {"command": cmd}


def screen(
    console: Console,
    config: YozConfig,
    laptop: bool = False,
    external: bool = False,
    all_screens: bool = False,
    rate: Optional[int] = None,
    direction: Direction = Direction.RIGHT,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    """Arrange the laptop and external screens, or list monitors.

    Args:
        console: Rich console for output
        config: Loaded configuration
        laptop: Only the laptop screen
        external: Only the external screen
        all_screens: Both screens side by side
        rate: Refresh rate of the external screen

    Returns:
        Detected monitors and the xrandr commands run
    """
    if sum([laptop, external, all_screens]) > 1:
        raise ValidationError("--laptop, --external and --all are mutually exclusive")

    monitors = fetch_monitors()

    if not (laptop or external or all_screens):
        display_monitors(console, monitors)
        return {"monitors": [monitors[i].to_dict() for i in sorted(monitors)]}

    if laptop:
        mode = ScreenMode.LAPTOP
    elif external:
        mode = ScreenMode.EXTERNAL
    else:
        mode = ScreenMode.ALL

    laptop_monitor, external_monitor = resolve_monitors(
        monitors, config.main_monitor, config.external_monitor
    )
    commands = plan_screen_commands(
        mode, laptop_monitor, external_monitor, rate=rate, direction=direction
    )
    logger.debug(f"xrandr commands: {commands}")
    configure_screens(commands)

    if not quiet:
        console.print(f"[green]✓[/green] Screen layout: {mode.value}")
    return {
        "mode": mode.value,
        "monitors": [monitors[i].to_dict() for i in sorted(monitors)],
        "commands": commands,
    }


def shot(
    console: Console,
    text: Optional[Path] = None,
    screen: bool = False,
    desktop: bool = False,
    clipboard: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    cmd = shot_command(text=text, screen=screen, desktop=desktop, clipboard=clipboard)
    take_shot(cmd)
    return {"command": cmd}
