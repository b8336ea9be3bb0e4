# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/patterns.py

"""
Decorator patterns wrapping every yoz command.

- config_command_pattern: commands reading defaults from the config file
- standalone_command_pattern: commands that need no configuration

Both validate --verbose/--quiet, set up logging, collect --json output and
turn errors into a red message and a non-zero exit code.
"""

import functools
from typing import Any, Callable

import typer
from rich.console import Console

from yoz.cli.utils import handle_operation_error, load_config_with_console
from yoz.data.json_collector import JSONCollector
from yoz.system.exceptions import YozError
from yoz.system.logging_setup import setup_logging

# Global options set by the app callback
cli_state: dict[str, Any] = {"debug": False}


def _validate_mutually_exclusive_flags(verbose: bool, quiet: bool) -> None:
    if verbose and quiet:
        raise typer.BadParameter("--verbose and --quiet are mutually exclusive")


def _operation_name(func: Callable) -> str:
    return "running " + func.__name__.replace("_", " ")


def _run_with_handling(
    func: Callable,
    console: Console,
    collector: JSONCollector,
    call: Callable[[], Any],
    config: Any = None,
) -> Any:
    """Run a command body, mapping its errors to exit codes."""
    try:
        result = call()
    except typer.Exit:
        collector.output()
        raise
    except typer.BadParameter:
        raise
    except KeyboardInterrupt as e:
        collector.capture_error(e, config)
        collector.output()
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
    except YozError as e:
        collector.capture_error(e, config, partial_result=getattr(e, "result", None))
        collector.output()
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        collector.capture_error(e, config)
        collector.output()
        handle_operation_error(console, _operation_name(func), e)

    collector.capture_success(result, config)
    collector.output()
    return result


def config_command_pattern(func: Callable) -> Callable:
    """Wrap a handler called as func(console, config, verbose=..., quiet=..., **kwargs)."""

    @functools.wraps(func)
    def wrapper(*args, verbose: bool = False, quiet: bool = False, to_json: bool = False, **kwargs) -> Any:
        _validate_mutually_exclusive_flags(verbose, quiet)
        setup_logging(verbose=verbose, debug=cli_state["debug"])

        console = Console(quiet=quiet)
        collector = JSONCollector(enabled=to_json)

        try:
            config = load_config_with_console(console, verbose, collector=collector)
        except typer.Exit:
            raise
        except Exception as e:
            collector.capture_error(e)
            collector.output()
            handle_operation_error(console, "loading configuration", e)

        return _run_with_handling(
            func,
            console,
            collector,
            lambda: func(console, config, *args, verbose=verbose, quiet=quiet, **kwargs),
            config=config,
        )

    return wrapper


def standalone_command_pattern(func: Callable) -> Callable:
    """Wrap a handler called as func(console, verbose=..., quiet=..., **kwargs)."""

    @functools.wraps(func)
    def wrapper(*args, verbose: bool = False, quiet: bool = False, to_json: bool = False, **kwargs) -> Any:
        _validate_mutually_exclusive_flags(verbose, quiet)
        setup_logging(verbose=verbose, debug=cli_state["debug"])

        console = Console(quiet=quiet)
        collector = JSONCollector(enabled=to_json)

        return _run_with_handling(
            func,
            console,
            collector,
            lambda: func(console, *args, verbose=verbose, quiet=quiet, **kwargs),
        )

    return wrapper
