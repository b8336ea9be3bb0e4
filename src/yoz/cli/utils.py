# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/utils.py

"""
CLI utility functions shared by yoz commands.

All functions handle console output and typer exits consistently.
"""

import shlex
from typing import Optional

import typer
from rich.console import Console

from yoz.config.manager import YozConfig
from yoz.data.json_collector import JSONCollector
from yoz.system.exceptions import ConfigError


def load_config_with_console(
    console: Console,
    verbose: bool = False,
    collector: Optional[JSONCollector] = None,
) -> YozConfig:
    """
    Load the yoz configuration, creating the file on first use.

    Args:
        console: Rich console for output
        verbose: Show loading message if True
        collector: JSON collector that reports a loading error before exiting

    Returns:
        Loaded configuration object

    Raises:
        typer.Exit: If configuration loading fails
    """
    if verbose:
        console.print("[dim]Loading configuration...[/dim]")

    try:
        return YozConfig.get_or_create()
    except ConfigError as e:
        if collector is not None:
            collector.capture_error(e)
            collector.output()
        handle_config_error(console, str(e))


def split_command(value: Optional[str]) -> Optional[list[str]]:
    """Shell-split a command given on the command line."""
    if value is None:
        return None
    try:
        return shlex.split(value)
    except ValueError as e:
        raise typer.BadParameter(f"cannot parse command {value!r}: {e}")


def handle_config_error(console: Console, error_message: str) -> None:
    """Handle configuration errors with consistent formatting."""
    console.print(f"[red]✗[/red] Configuration error: {error_message}")
    raise typer.Exit(1)


def handle_operation_error(console: Console, operation: str, error: Exception) -> None:
    """Handle operation errors with consistent formatting."""
    console.print(f"[red]✗[/red] Error {operation}: {error}")
    raise typer.Exit(1)
