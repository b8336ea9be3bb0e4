# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/system/display.py

# Standard library imports
from typing import Optional

# Third-party imports
import humanize
from rich.console import Console
from rich.table import Table

# Local yoz imports
from yoz.core.checks import CheckResult
from yoz.core.dotfiles import GeneratedConfig
from yoz.core.packages import InstallResult, InstallStatus
from yoz.core.screen import Monitor
from yoz.core.update import UpdateStep
from yoz.scaffold.project import ScaffoldResult


def _mark(success: Optional[bool]) -> str:
    if success is None:
        return "[dim]-[/dim]"
    return "[green]✓[/green]" if success else "[red]✗[/red]"


def display_scaffold_result(console: Console, result: ScaffoldResult, verbose: bool = False) -> None:
    """Display the files written by `new` or `add`."""
    console.print(f"[green]✓[/green] {result.project_dir}")
    if not verbose:
        console.print(f"  {len(result.files)} files written")
        return
    for path in result.files:
        try:
            shown = path.relative_to(result.project_dir)
        except ValueError:
            shown = path
        console.print(f"  [dim]{shown}[/dim]")


def display_check_results(console: Console, results: list[CheckResult], verbose: bool = False) -> None:
    """Display cargo check outcomes.

    Args:
        console: Rich console for output
        results: One result per check, in run order
        verbose: Show the captured output of failing checks
    """
    table = Table(title="cargo checks")
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Command", style="dim")

    for result in results:
        status = f"{_mark(result.passed)} {result.label}"
        table.add_row(result.name, status, " ".join(["cargo", *result.args]))

    console.print(table)

    if verbose:
        for result in results:
            if not result.passed and result.output.strip():
                console.print(f"\n[bold red]cargo {result.name}[/bold red]")
                console.print(result.output.rstrip(), markup=False, highlight=False)

    failed = sum(1 for r in results if not r.passed)
    if failed:
        console.print(f"[red]{failed} of {len(results)} checks failed[/red]")
    else:
        console.print(f"[green]All {len(results)} checks passed[/green]")


def display_monitors(console: Console, monitors: dict[int, Monitor]) -> None:
    """List detected monitors, one `<id>: <name> <w>x<h> <rate>Hz` line each."""
    for monitor_id in sorted(monitors):
        console.print(str(monitors[monitor_id]), markup=False, highlight=False)


def display_install_results(console: Console, results: list[InstallResult]) -> None:
    table = Table(title="Install")
    table.add_column("Program", style="cyan", no_wrap=True)
    table.add_column("Manager", style="yellow", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    styles = {
        InstallStatus.INSTALLED: "[green]installed[/green]",
        InstallStatus.ALREADY_INSTALLED: "[dim]already installed[/dim]",
        InstallStatus.CHECK_FAILED: "[red]check failed[/red]",
    }
    for result in results:
        table.add_row(result.program, result.manager.value, styles[result.status])

    console.print(table)


def display_update_plan(console: Console, steps: list[UpdateStep]) -> None:
    """Display the commands `update` would run."""
    table = Table(title="Update plan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Command")

    for i, step in enumerate(steps, 1):
        table.add_row(str(i), step.description, str(step))

    console.print(table)


def display_update_results(console: Console, steps: list[UpdateStep]) -> None:
    for step in steps:
        console.print(f"{_mark(step.success)} {step.description}")

    failed = [step for step in steps if step.success is False]
    if failed:
        console.print(f"\n[red]{len(failed)} update step(s) failed[/red]")


def display_dotfiles(
    console: Console,
    generated: list[GeneratedConfig],
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    """Display generated application configs.

    Args:
        console: Rich console for output
        generated: One entry per application
        dry_run: Label the table as a preview
        verbose: List every file
    """
    table = Table(title="Dotfiles (dry run)" if dry_run else "Dotfiles")
    table.add_column("Application", style="cyan", no_wrap=True)
    table.add_column("Destination", style="green")
    table.add_column("Files", justify="right", style="magenta")
    table.add_column("Size", justify="right", style="blue")

    for config in generated:
        if config.skipped:
            table.add_row(config.name, "[yellow]skipped[/yellow]", "-", "-")
            continue
        size = config.total_size
        table.add_row(
            config.name,
            str(config.destination),
            str(len(config.files)),
            humanize.naturalsize(size),
        )

    console.print(table)

    if verbose:
        for config in generated:
            for path in config.files:
                console.print(f"  [dim]{path}[/dim]")
