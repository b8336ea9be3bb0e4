# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/update.py

"""
System update: Arch packages, AUR builds, the Rust toolchain and cargo binaries.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.system.exceptions import CommandError, ValidationError
from yoz.system.execution import CommandExecutor as ce


@dataclass
class UpdateStep:
    """One command of the update plan."""
    description: str
    argv: list[str]
    cwd: Optional[Path] = None
    success: Optional[bool] = None

    def __str__(self) -> str:
        where = f" (in {self.cwd})" if self.cwd else ""
        return f"{' '.join(self.argv)}{where}"

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "command": self.argv,
            "cwd": str(self.cwd) if self.cwd else None,
            "success": self.success,
        }


def aur_build_dirs(builds_dir: Path) -> list[Path]:
    """Directories directly under builds_dir, one per AUR package."""
    if not builds_dir.is_dir():
        logger.warning(f"AUR builds directory {builds_dir} does not exist")
        return []
    return sorted(entry for entry in builds_dir.iterdir() if entry.is_dir())


def generate_commands(
    builds_dir: Path,
    update_all: bool = False,
    arch: bool = False,
    aur: bool = False,
    rust: bool = False,
    rust_bin: bool = False,
) -> list[UpdateStep]:
    """Build the ordered update plan.

    Raises:
        ValidationError: If nothing is selected, or the selection plans no steps
    """
    if not (update_all or arch or aur or rust or rust_bin):
        raise ValidationError("Please select something to update, or pass `--all`")

    steps = []

    if arch or update_all:
        steps.append(UpdateStep(
            "Update Arch Linux",
            ["sudo", "pacman", "--sync", "--refresh", "--sysupgrade", "--clean"],
        ))

    if aur or update_all:
        for build_dir in aur_build_dirs(builds_dir):
            steps.append(UpdateStep(f"Pull {build_dir.name}", ["git", "pull"], cwd=build_dir))
            steps.append(UpdateStep(
                f"Build {build_dir.name}",
                ["makepkg", "--syncdeps", "--install", "--clean"],
                cwd=build_dir,
            ))

    if rust or update_all:
        steps.append(UpdateStep("Update Rust", ["rustup", "update"]))

    if rust_bin or update_all:
        steps.append(UpdateStep("Update Rust binaries", ["cargo", "install-update", "--all"]))

    if not steps:
        raise ValidationError("Please select something to update, or pass `--all`")

    return steps


def run_updates(steps: list[UpdateStep]) -> list[UpdateStep]:
    """Run every step in order; a failing step does not stop the others."""
    for step in steps:
        try:
            result = ce.run_local(step.argv, cwd=step.cwd, check=False, capture=False)
            step.success = result.success
        except CommandError as e:
            logger.error(str(e))
            step.success = False

        if step.success:
            logger.info(f"{step.description}: Success")
        else:
            logger.error(f"{step.description}: an error occurred")

    return steps
