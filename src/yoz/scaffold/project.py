# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/scaffold/project.py

"""
Creation of new Rust projects and addition of licenses/CI to existing ones.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.scaffold.licenses import add_licenses
from yoz.scaffold.workflows import add_bin_ci, add_lib_ci
from yoz.system.exceptions import ValidationError
from yoz.system.execution import CommandExecutor as ce

XTASK_ALIAS = """[alias]
xtask = "run --package xtask --"
"""

XTASK_WORKSPACE = """
[workspace]
members = ["xtask"]
"""


@dataclass
class ScaffoldResult:
    """What a scaffolding operation produced."""
    project_dir: Path
    files: list[Path] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "project_dir": str(self.project_dir),
            "files": [str(path) for path in self.files],
        }


def add_xtask(project_dir: Path) -> list[Path]:
    """Turn a cargo project into a workspace with an `xtask` helper crate."""
    ce.run_local(["cargo", "new", "xtask"], cwd=project_dir)

    manifest = project_dir / "Cargo.toml"
    with manifest.open("a", encoding="utf-8") as f:
        f.write(XTASK_WORKSPACE)

    cargo_dir = project_dir / ".cargo"
    cargo_dir.mkdir(exist_ok=True)
    alias_file = cargo_dir / "config.toml"
    alias_file.write_text(XTASK_ALIAS, encoding="utf-8")

    logger.info(f"Added xtask to {project_dir}")
    return [manifest, alias_file, project_dir / "xtask" / "Cargo.toml"]


def create_project(
    working_dir: Path,
    name: str,
    full_name: Optional[str],
    lib: bool = False,
    xtask: bool = False,
    no_license: bool = False,
    no_ci: bool = False,
    no_windows: bool = False,
    no_osx: bool = False,
) -> ScaffoldResult:
    """Create `<working_dir>/<name>` with cargo and add the defaults.

    Args:
        working_dir: Parent directory of the new project
        name: Crate and directory name
        full_name: License holder, required unless no_license
        lib: Create a library instead of a binary

    Raises:
        ValidationError: If the destination already exists
        CommandError: If cargo fails
    """
    project_dir = working_dir / name
    if project_dir.exists():
        raise ValidationError(f"destination {project_dir} already exists")
    if not no_license and not full_name:
        raise ValidationError("a full name is required for the licenses")

    cmd = ["cargo", "new", "--lib", name] if lib else ["cargo", "new", name]
    ce.run_local(cmd, cwd=working_dir)
    logger.info(f"Created {project_dir}")

    result = ScaffoldResult(project_dir=project_dir, files=[project_dir / "Cargo.toml"])

    if xtask:
        result.files.extend(add_xtask(project_dir))

    if not no_license:
        result.files.extend(add_licenses(project_dir, full_name))

    if not no_ci:
        if lib:
            result.files.extend(add_lib_ci(project_dir, no_windows, no_osx))
        else:
            result.files.extend(add_bin_ci(project_dir, name, no_windows, no_osx))

    return result


def add_to_project(
    project_dir: Path,
    licenses: bool,
    ci: bool,
    full_name: Optional[str] = None,
    name: Optional[str] = None,
    lib: bool = False,
    no_windows: bool = False,
    no_osx: bool = False,
) -> ScaffoldResult:
    """Add licenses and/or CI workflows to an existing project."""
    if not licenses and not ci:
        raise ValidationError("Please select something to add (--licenses and/or --ci)")
    if licenses and not full_name:
        raise ValidationError("a full name is required for the licenses")

    result = ScaffoldResult(project_dir=project_dir)

    if licenses:
        result.files.extend(add_licenses(project_dir, full_name))

    if ci:
        if lib:
            result.files.extend(add_lib_ci(project_dir, no_windows, no_osx))
        else:
            result.files.extend(add_bin_ci(project_dir, name or project_dir.name, no_windows, no_osx))

    return result
