# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/packages.py

"""
Package installation through pacman, the AUR or cargo.

A program is only installed when `<program> --version` cannot be executed,
so running the same install twice is harmless.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.config.manager import PreludeConfig
from yoz.system.exceptions import ValidationError
from yoz.system.execution import CommandExecutor as ce


class InstallStatus(str, Enum):
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already installed"
    CHECK_FAILED = "check failed"


@dataclass
class InstallResult:
    program: str
    manager: "Manager"
    status: InstallStatus

    def to_dict(self) -> dict:
        return {
            "program": self.program,
            "manager": self.manager.value,
            "status": self.status.value,
        }


class Manager(str, Enum):
    """Package managers yoz knows how to drive."""
    PACMAN = "pacman"
    AUR = "aur"
    CARGO = "cargo"

    def install(self, program: str, url: Optional[str] = None, builds_dir: Optional[Path] = None) -> None:
        """Install a program; CommandError propagates from failing steps."""
        logger.info(f"Installing {program}")

        if self is Manager.PACMAN:
            ce.run_sudo(["pacman", "--sync", program], capture=False)
        elif self is Manager.CARGO:
            ce.run_local(["cargo", "install", program], capture=False)
        else:
            if not url:
                raise ValidationError(f"Cannot install {program} via AUR without url")
            if builds_dir is None:
                raise ValidationError("Cannot install via AUR without a builds directory")
            builds_dir.mkdir(parents=True, exist_ok=True)
            ce.run_local(["git", "clone", url], cwd=builds_dir)
            ce.run_local(
                ["makepkg", "--syncdeps", "--install", "--clean"],
                cwd=builds_dir / program,
                capture=False,
            )

    def check_or_install(
        self,
        program: str,
        url: Optional[str] = None,
        builds_dir: Optional[Path] = None,
    ) -> InstallResult:
        available = ce.is_available(program)

        if available is None:
            self.install(program, url=url, builds_dir=builds_dir)
            status = InstallStatus.INSTALLED
        elif available:
            logger.info(f"{program} is already installed")
            status = InstallStatus.ALREADY_INSTALLED
        else:
            logger.error(f"an error occurred when checking {program}")
            status = InstallStatus.CHECK_FAILED

        return InstallResult(program=program, manager=self, status=status)


def select_manager(cargo: bool = False, aur: Optional[str] = None) -> Manager:
    if cargo and aur:
        raise ValidationError("--cargo and --aur are mutually exclusive")
    if cargo:
        return Manager.CARGO
    if aur:
        return Manager.AUR
    return Manager.PACMAN


def install_prelude(prelude: PreludeConfig, builds_dir: Path) -> list[InstallResult]:
    """Install the base programs of a yoz system: cargo, then AUR, then pacman."""
    results = []
    for program in prelude.cargo:
        results.append(Manager.CARGO.check_or_install(program))
    for program, url in prelude.aur.items():
        results.append(Manager.AUR.check_or_install(program, url=url, builds_dir=builds_dir))
    for program in prelude.pacman:
        results.append(Manager.PACMAN.check_or_install(program))
    return results


def run_install(
    name: Optional[str],
    cargo: bool,
    aur: Optional[str],
    prelude: bool,
    prelude_config: PreludeConfig,
    builds_dir: Path,
) -> list[InstallResult]:
    """Install one program, or the whole prelude.

    Raises:
        ValidationError: If nothing, or both a name and the prelude, are selected
    """
    if prelude and name:
        raise ValidationError("NAME and --prelude are mutually exclusive")
    if prelude:
        return install_prelude(prelude_config, builds_dir)
    if not name:
        raise ValidationError("Please select something to install")

    manager = select_manager(cargo, aur)
    return [manager.check_or_install(name, url=aur, builds_dir=builds_dir)]
