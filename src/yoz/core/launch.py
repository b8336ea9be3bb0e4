# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/launch.py

"""
Launch a program and a terminal at the same working directory.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.config.manager import resolve_setting
from yoz.system.exceptions import CommandError
from yoz.system.execution import CommandExecutor as ce


@dataclass
class LaunchPlan:
    working_dir: Path
    main_command: Optional[list[str]]
    terminal_command: list[str]

    def to_dict(self) -> dict:
        return {
            "working_dir": str(self.working_dir),
            "main_command": self.main_command,
            "terminal_command": self.terminal_command,
        }


def plan_launch(
    working_dir: Path,
    command: Optional[list[str]],
    terminal: Optional[list[str]],
    no_command: bool,
    default_launch_command: list[str],
    default_terminal_command: list[str],
) -> LaunchPlan:
    """Resolve which main program and terminal to start.

    Raises:
        MissingSettingError: If a command is neither given nor configured
    """
    if no_command:
        main_command = None
    else:
        main_command = resolve_setting(command, default_launch_command, "launch_command")
        logger.info("Launching given command" if command else "Launching the default command")

    terminal_command = resolve_setting(terminal, default_terminal_command, "terminal_command")
    logger.info("Launching given terminal command" if terminal else "Launching default terminal command")

    return LaunchPlan(
        working_dir=working_dir,
        main_command=list(main_command) if main_command else None,
        terminal_command=list(terminal_command),
    )


def launch(plan: LaunchPlan) -> None:
    """Start the terminal in the background and the main program in the foreground.

    The terminal is closed once the main program exits.

    Raises:
        CommandError: If the main program fails, or if the terminal cannot
            be started when it is the only thing to launch
    """
    if plan.main_command is None:
        ce.spawn(plan.terminal_command, cwd=plan.working_dir)
        return

    try:
        terminal = ce.spawn(plan.terminal_command, cwd=plan.working_dir)
    except CommandError as e:
        logger.error(f"an error occurred when launching the terminal: {e}")
        terminal = None

    try:
        result = ce.run_local(plan.main_command, cwd=plan.working_dir, check=False, capture=False)
        if not result.success:
            raise CommandError(
                "launch command failed",
                command=plan.main_command,
                returncode=result.returncode,
            )
    finally:
        if terminal is not None:
            terminal.terminate()
            terminal.wait()
