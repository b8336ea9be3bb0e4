# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/checks.py

"""
Project quality checks run through cargo.
"""

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.system.exceptions import CommandError
from yoz.system.execution import CommandExecutor as ce

DEFAULT_CHECKS: dict[str, list[str]] = {
    "check": ["check", "--workspace", "--all-features"],
    "test": ["test", "--workspace", "--all-features"],
    "fmt": ["fmt", "--all", "--check"],
    "clippy": ["clippy", "--all", "--tests", "--", "-D", "warnings"],
}


@dataclass
class CheckResult:
    """Outcome of one cargo invocation."""
    name: str
    args: list[str]
    passed: bool
    output: str = ""

    @property
    def label(self) -> str:
        return "Ok" if self.passed else "Nope"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "command": ["cargo", *self.args],
            "passed": self.passed,
        }


def build_check_args(overrides: Optional[dict[str, Optional[str]]] = None) -> dict[str, list[str]]:
    """Cargo arguments per check; an override replaces the whole default list."""
    overrides = overrides or {}
    checks = {}
    for name, default in DEFAULT_CHECKS.items():
        override = overrides.get(name)
        checks[name] = shlex.split(override) if override else list(default)
    return checks


def clean(working_dir: Path) -> bool:
    """Remove the target directory."""
    try:
        result = ce.run_local(["cargo", "clean"], cwd=working_dir, check=False)
    except CommandError as e:
        logger.error(str(e))
        return False

    if result.success:
        logger.info("Cleaned")
    else:
        logger.error("command `cargo clean` failed")
    return result.success


def run_checks(working_dir: Path, checks: dict[str, list[str]]) -> list[CheckResult]:
    """Run every check in order, even after a failure."""
    results = []
    width = max(len(name) for name in checks)

    for name, args in checks.items():
        result = ce.run_local(["cargo", *args], cwd=working_dir, check=False)
        check = CheckResult(
            name=name,
            args=args,
            passed=result.success,
            output=result.stderr or result.stdout,
        )
        if check.passed:
            logger.info(f"cargo {name:<{width}}: {check.label}")
        else:
            logger.error(f"cargo {name:<{width}}: {check.label}")
        results.append(check)

    return results
