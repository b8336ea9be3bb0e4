# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/system/execution.py

"""
Unified external command execution.

All yoz subcommands go through CommandExecutor so that argument lists,
working directories and exit statuses are handled (and logged) the same way.

Usage:
    from yoz.system.execution import CommandExecutor as ce

    result = ce.run_local(["cargo", "check"], cwd=project_dir, check=False)
    if result.success:
        ...
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from yoz.system.exceptions import CommandError

PathLike = Union[str, Path]


@dataclass
class CommandResult:
    """Outcome of a finished external command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandExecutor:
    """Static helpers around subprocess for local and sudo commands."""

    @staticmethod
    def run_local(
        cmd: Sequence[str],
        cwd: Optional[PathLike] = None,
        timeout: Optional[int] = None,
        check: bool = True,
        capture: bool = True,
    ) -> CommandResult:
        """Run a command and wait for it.

        Args:
            cmd: Program and arguments
            cwd: Working directory of the process
            timeout: Seconds before subprocess.TimeoutExpired is raised
            check: Raise CommandError on non-zero exit
            capture: Capture stdout/stderr; interactive programs (editors,
                package managers asking for confirmation) need capture=False

        Returns:
            CommandResult with the exit status and captured output

        Raises:
            CommandError: If the program cannot be launched, or exits
                non-zero while check is True
            subprocess.TimeoutExpired: If the timeout expires
        """
        argv = [str(arg) for arg in cmd]
        logger.debug(f"Running: {' '.join(argv)} (cwd={cwd or '.'})")

        try:
            if capture:
                proc = subprocess.run(
                    argv,
                    cwd=cwd,
                    capture_output=True,
                    text=True,
                    timeout=timeout
                )
            else:
                proc = subprocess.run(argv, cwd=cwd, timeout=timeout)
        except FileNotFoundError as e:
            raise CommandError(f"cannot launch `{argv[0]}`: {e}", command=argv) from e

        result = CommandResult(
            returncode=proc.returncode,
            stdout=proc.stdout if capture else "",
            stderr=proc.stderr if capture else "",
        )

        if check and not result.success:
            detail = result.stderr.strip() if result.stderr else ""
            if detail:
                message = f"`{' '.join(argv)}` failed: {detail}"
            else:
                message = f"`{' '.join(argv)}` failed with exit code {result.returncode}"
            raise CommandError(message, command=argv, returncode=result.returncode)

        return result

    @staticmethod
    def run_sudo(
        cmd: Sequence[str],
        cwd: Optional[PathLike] = None,
        timeout: Optional[int] = None,
        check: bool = True,
        capture: bool = True,
    ) -> CommandResult:
        """Run a command through sudo."""
        return CommandExecutor.run_local(
            ["sudo", *cmd], cwd=cwd, timeout=timeout, check=check, capture=capture
        )

    @staticmethod
    def spawn(cmd: Sequence[str], cwd: Optional[PathLike] = None) -> subprocess.Popen:
        """Start a command in the background and return without waiting.

        Raises:
            CommandError: If the program cannot be launched
        """
        argv = [str(arg) for arg in cmd]
        logger.debug(f"Spawning: {' '.join(argv)} (cwd={cwd or '.'})")
        try:
            return subprocess.Popen(argv, cwd=cwd)
        except OSError as e:
            raise CommandError(f"cannot launch `{argv[0]}`: {e}", command=argv) from e

    @staticmethod
    def is_available(program: str) -> Optional[bool]:
        """Probe a program with `--version`.

        Returns:
            True if it ran successfully, False if it ran but failed, None if
            it cannot be executed at all (not installed)
        """
        try:
            proc = subprocess.run(
                [program, "--version"],
                capture_output=True,
                text=True,
            )
        except OSError:
            return None
        return proc.returncode == 0
