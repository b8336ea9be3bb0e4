# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/commands/project.py

"""
Rust project command handlers.

Handles: new, add, checks
"""

from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from yoz.config.manager import YozConfig, resolve_setting
from yoz.core.checks import build_check_args, clean, run_checks
from yoz.core.paths import set_working_dir
from yoz.scaffold.project import add_to_project, create_project
from yoz.system.display import display_check_results, display_scaffold_result
from yoz.system.exceptions import PartialFailureError


def new(
    console: Console,
    config: YozConfig,
    name: str,
    path: Optional[Path] = None,
    full_name: Optional[str] = None,
    lib: bool = False,
    xtask: bool = False,
    no_license: bool = False,
    no_ci: bool = False,
    no_windows: bool = False,
    no_osx: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    """Create a new cargo project with licenses and CI workflows.

    Args:
        console: Rich console for output
        config: Loaded configuration
        name: Name of the new crate
        path: Parent directory; falls back to `projects_path`, then the cwd

    Returns:
        Scaffold result for JSON output
    """
    working_dir = set_working_dir(path or config.projects_path)

    holder = None
    if not no_license:
        holder = resolve_setting(full_name, config.full_name, "full_name")

    if not quiet:
        console.print(f"[dim]Creating {name} in {working_dir}...[/dim]")

    result = create_project(
        working_dir,
        name,
        holder,
        lib=lib,
        xtask=xtask,
        no_license=no_license,
        no_ci=no_ci,
        no_windows=no_windows,
        no_osx=no_osx,
    )
    display_scaffold_result(console, result, verbose=verbose)
    return result.to_dict()


def add(
    console: Console,
    config: YozConfig,
    path: Optional[Path] = None,
    licenses: bool = False,
    ci: bool = False,
    lib: bool = False,
    name: Optional[str] = None,
    full_name: Optional[str] = None,
    no_windows: bool = False,
    no_osx: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> dict[str, Any]:
    """Add licenses and/or CI workflows to an existing project."""
    project_dir = set_working_dir(path)

    holder = full_name
    if licenses:
        holder = resolve_setting(full_name, config.full_name, "full_name")

    result = add_to_project(
        project_dir,
        licenses=licenses,
        ci=ci,
        full_name=holder,
        name=name,
        lib=lib,
        no_windows=no_windows,
        no_osx=no_osx,
    )
    display_scaffold_result(console, result, verbose=verbose)
    return result.to_dict()


def checks(
    console: Console,
    config: YozConfig,
    path: Optional[Path] = None,
    check: Optional[str] = None,
    fmt: Optional[str] = None,
    test: Optional[str] = None,
    clippy: Optional[str] = None,
    clean_first: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> list[dict]:
    """Run cargo check, test, fmt and clippy.

    Raises:
        PartialFailureError: If any check failed, after running all of them
    """
    working_dir = set_working_dir(path)

    if clean_first:
        clean(working_dir)

    args = build_check_args({"check": check, "test": test, "fmt": fmt, "clippy": clippy})
    results = run_checks(working_dir, args)
    display_check_results(console, results, verbose=verbose)

    summary = [result.to_dict() for result in results]
    if not all(result.passed for result in results):
        raise PartialFailureError("some checks failed", result=summary)
    return summary
