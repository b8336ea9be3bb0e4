# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/main.py

"""
CLI dispatcher routing yoz commands to their handlers.

Every command is wrapped by one of the decorator patterns:
- config_command_pattern: commands reading defaults from the config file
- standalone_command_pattern: commands that need no configuration
"""

# Standard library imports
from importlib.metadata import version
from pathlib import Path
from typing import Any, Optional

# Third-party imports
import typer
from rich.console import Console

# Local yoz imports
from yoz.cli.patterns import cli_state, config_command_pattern, standalone_command_pattern
from yoz.cli.utils import handle_operation_error, split_command
from yoz.cli.commands import desktop as desktop_commands
from yoz.cli.commands import project as project_commands
from yoz.cli.commands import system as system_commands
from yoz.core.screen import Direction

# Initialize Typer app
app = typer.Typer(
    help="""yoz - A personal toolbox for a Rust developer on Arch Linux

[bold blue]Projects:[/bold blue] new, add, checks
[bold green]Desktop:[/bold green] launch, background, screen, shot
[bold magenta]System:[/bold magenta] install, update, dotfiles
""",
    rich_markup_mode="rich"
)

console = Console()

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show detailed output")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Suppress output")
JSON_OPTION = typer.Option(False, "--json", help="Output results as JSON")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("yoz")
        except Exception as e:
            handle_operation_error(console, "retrieving version", e)
        console.print(f"yoz version {pkg_version}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """yoz - A personal toolbox for a Rust developer on Arch Linux."""
    cli_state["debug"] = debug


# =============================================================================
# PROJECT COMMANDS
# =============================================================================

@app.command()
def new(
    name: str = typer.Argument(..., help="Name of the new project"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Parent directory (default: projects_path)"),
    full_name: Optional[str] = typer.Option(None, "--full-name", help="License holder (default: full_name)"),
    lib: bool = typer.Option(False, "--lib", "-l", help="Create a library"),
    xtask: bool = typer.Option(False, "--xtask", "-x", help="Add an xtask workspace member"),
    no_license: bool = typer.Option(False, "--no-license", help="Do not add licenses"),
    no_ci: bool = typer.Option(False, "--no-ci", help="Do not add CI workflows"),
    no_windows: bool = typer.Option(False, "--no-windows", help="Skip Windows in CI"),
    no_osx: bool = typer.Option(False, "--no-osx", help="Skip macOS in CI"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold blue]Projects[/bold blue]: Create a cargo project with licenses and CI."""
    decorated_handler = config_command_pattern(project_commands.new)
    return decorated_handler(
        name=name, path=path, full_name=full_name, lib=lib, xtask=xtask,
        no_license=no_license, no_ci=no_ci, no_windows=no_windows, no_osx=no_osx,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def add(
    path: Optional[Path] = typer.Argument(None, help="Project directory (default: current directory)"),
    licenses: bool = typer.Option(False, "--licenses", help="Add MIT and Apache-2.0 licenses"),
    ci: bool = typer.Option(False, "--ci", help="Add GitHub workflows"),
    lib: bool = typer.Option(False, "--lib", "-l", help="Library workflows (no release)"),
    name: Optional[str] = typer.Option(None, "--name", help="Project name (default: directory name)"),
    full_name: Optional[str] = typer.Option(None, "--full-name", help="License holder (default: full_name)"),
    no_windows: bool = typer.Option(False, "--no-windows", help="Skip Windows in CI"),
    no_osx: bool = typer.Option(False, "--no-osx", help="Skip macOS in CI"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold blue]Projects[/bold blue]: Add licenses and/or CI to an existing project."""
    decorated_handler = config_command_pattern(project_commands.add)
    return decorated_handler(
        path=path, licenses=licenses, ci=ci, lib=lib, name=name, full_name=full_name,
        no_windows=no_windows, no_osx=no_osx,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def checks(
    path: Optional[Path] = typer.Argument(None, help="Project directory (default: current directory)"),
    check: Optional[str] = typer.Option(None, "--check", help="Arguments replacing the cargo check defaults"),
    fmt: Optional[str] = typer.Option(None, "--fmt", help="Arguments replacing the cargo fmt defaults"),
    test: Optional[str] = typer.Option(None, "--test", help="Arguments replacing the cargo test defaults"),
    clippy: Optional[str] = typer.Option(None, "--clippy", help="Arguments replacing the cargo clippy defaults"),
    clean: bool = typer.Option(False, "--clean", help="Run cargo clean first"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold blue]Projects[/bold blue]: Run cargo check, test, fmt and clippy."""
    decorated_handler = config_command_pattern(project_commands.checks)
    return decorated_handler(
        path=path, check=check, fmt=fmt, test=test, clippy=clippy, clean_first=clean,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


# =============================================================================
# DESKTOP COMMANDS
# =============================================================================

@app.command()
def launch(
    path: Optional[Path] = typer.Argument(None, help="Working directory (default: current directory)"),
    command: Optional[str] = typer.Option(None, "--command", "-x", help="Main command (default: launch_command)"),
    terminal: Optional[str] = typer.Option(None, "--terminal", "-t", help="Terminal command (default: terminal_command)"),
    no_command: bool = typer.Option(False, "--no-command", "-c", help="Only open the terminal"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold green]Desktop[/bold green]: Open the editor and a terminal in a project."""
    decorated_handler = config_command_pattern(desktop_commands.launch)
    return decorated_handler(
        path=path, command=split_command(command), terminal=split_command(terminal),
        no_command=no_command,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def background(
    file_path: Optional[Path] = typer.Argument(None, help="Image file (default: background.file_path)"),
    position: Optional[str] = typer.Argument(None, help="center, fill, max, scale or tile"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold green]Desktop[/bold green]: Set the desktop background with feh."""
    decorated_handler = config_command_pattern(desktop_commands.background)
    return decorated_handler(
        file_path=file_path, position=position,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def screen(
    laptop: bool = typer.Option(False, "--laptop", help="Only the laptop screen"),
    external: bool = typer.Option(False, "--external", help="Only the external screen"),
    all_screens: bool = typer.Option(False, "--all", "-l", help="Laptop and external screens"),
    rate: Optional[int] = typer.Option(None, "--rate", min=1, help="External refresh rate (default: configured, else 60)"),
    direction: Direction = typer.Option(
        Direction.RIGHT, "--direction", case_sensitive=False, help="Side of the external screen"
    ),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold green]Desktop[/bold green]: Arrange screens with xrandr, or list monitors."""
    decorated_handler = config_command_pattern(desktop_commands.screen)
    return decorated_handler(
        laptop=laptop, external=external, all_screens=all_screens, rate=rate, direction=direction,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def shot(
    text: Optional[Path] = typer.Option(None, "--text", help="Show a file with bat for a screenshot"),
    screen: bool = typer.Option(False, "--screen", help="Capture the current screen"),
    desktop: bool = typer.Option(False, "--desktop", help="Capture every screen"),
    clipboard: bool = typer.Option(False, "--clipboard", help="Copy the capture to the clipboard"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold green]Desktop[/bold green]: Take a screenshot with flameshot."""
    decorated_handler = standalone_command_pattern(desktop_commands.shot)
    return decorated_handler(
        text=text, screen=screen, desktop=desktop, clipboard=clipboard,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


# =============================================================================
# SYSTEM COMMANDS
# =============================================================================

@app.command()
def install(
    name: Optional[str] = typer.Argument(None, help="Program to install"),
    cargo: bool = typer.Option(False, "--cargo", "-c", help="Install with cargo"),
    aur: Optional[str] = typer.Option(None, "--aur", "-a", help="Install from this AUR git url"),
    prelude: bool = typer.Option(False, "--prelude", help="Install the base programs"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold magenta]System[/bold magenta]: Install programs with pacman, the AUR or cargo."""
    decorated_handler = config_command_pattern(system_commands.install)
    return decorated_handler(
        name=name, cargo=cargo, aur=aur, prelude=prelude,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def update(
    update_all: bool = typer.Option(False, "--all", help="Update everything"),
    arch: bool = typer.Option(False, "--arch", help="Update Arch Linux packages"),
    aur: bool = typer.Option(False, "--aur", help="Rebuild AUR packages"),
    rust: bool = typer.Option(False, "--rust", help="Update the Rust toolchain"),
    rust_bin: bool = typer.Option(False, "--rust-bin", help="Update cargo-installed binaries"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the plan without running it"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold magenta]System[/bold magenta]: Update packages, AUR builds and Rust."""
    decorated_handler = config_command_pattern(system_commands.update)
    return decorated_handler(
        update_all=update_all, arch=arch, aur=aur, rust=rust, rust_bin=rust_bin, dry_run=dry_run,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


@app.command()
def dotfiles(
    repository_path: Optional[Path] = typer.Argument(None, help="Where the dotfiles repository lives"),
    config_files_dir: Optional[Path] = typer.Argument(None, help="Checkout directory inside the repository path"),
    config_repository_url: Optional[str] = typer.Argument(None, help="Git url of the dotfiles repository"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be copied"),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    to_json: bool = JSON_OPTION,
) -> Any:
    """[bold magenta]System[/bold magenta]: Generate application configs from dotfiles."""
    decorated_handler = config_command_pattern(system_commands.dotfiles)
    return decorated_handler(
        repository_path=repository_path, config_files_dir=config_files_dir,
        config_repository_url=config_repository_url, dry_run=dry_run,
        verbose=verbose, quiet=quiet, to_json=to_json,
    )


def cli_main() -> None:
    """Entry point for the yoz console script."""
    app()


if __name__ == "__main__":
    cli_main()
