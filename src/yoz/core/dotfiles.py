# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/dotfiles.py

"""
Generate application config files from a dotfiles repository.

The repository holds one directory per application; its files are copied
into the application's config directory, keeping their relative layout.
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from yoz.system.exceptions import CommandError
from yoz.system.execution import CommandExecutor as ce

# application -> destination relative to the target directory
DOTFILE_TARGETS: dict[str, str] = {
    "cargo-temp": "cargo-temp",
    "i3": "i3",
    "i3status": "i3status",
    "nvim": "nvim",
    "starship": ".",
}


@dataclass
class GeneratedConfig:
    """Files generated for one application."""
    name: str
    source: Path
    destination: Path
    files: list[Path] = field(default_factory=list)
    skipped: bool = False

    @property
    def total_size(self) -> int:
        """Size of the source files, so dry runs report it too."""
        return sum(
            (self.source / path.relative_to(self.destination)).stat().st_size
            for path in self.files
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "source": str(self.source),
            "destination": str(self.destination),
            "files": [str(path) for path in self.files],
            "skipped": self.skipped,
        }


class ConfigFiles:
    """Location of every application directory inside the dotfiles checkout."""

    def __init__(self, config_files_path: Path):
        self.config_files_path = config_files_path
        self.sources = {name: config_files_path / name for name in DOTFILE_TARGETS}

    @classmethod
    def get_or_download(
        cls,
        config_files_path: Path,
        config_repository_url: str,
        repository_path: Path,
        dry_run: bool = False,
    ) -> "ConfigFiles":
        """Clone the dotfiles repository unless it is already checked out.

        Raises:
            CommandError: If git clone fails
        """
        if not config_files_path.exists():
            if dry_run:
                logger.info(f"Would download config files from {config_repository_url}")
                return cls(config_files_path)
            logger.info("Downloading config files")
            repository_path.mkdir(parents=True, exist_ok=True)
            result = ce.run_local(
                ["git", "clone", config_repository_url],
                cwd=repository_path,
                check=False,
            )
            if not result.success:
                raise CommandError(
                    "cannot download config files",
                    command=["git", "clone", config_repository_url],
                    returncode=result.returncode,
                )
        return cls(config_files_path)

    def generate(self, name: str, target_dir: Path, dry_run: bool = False) -> GeneratedConfig:
        """Copy one application's files into its config directory."""
        source = self.sources[name]
        destination = (target_dir / DOTFILE_TARGETS[name]).resolve()
        generated = GeneratedConfig(name=name, source=source, destination=destination)

        if not source.is_dir():
            logger.warning(f"No {name} config in {self.config_files_path}, skipping")
            generated.skipped = True
            return generated

        for path in sorted(source.rglob("*")):
            if not path.is_file():
                continue
            dest_file = destination / path.relative_to(source)
            if not dry_run:
                dest_file.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(path, dest_file)
            generated.files.append(dest_file)

        logger.info(f"Generated {name} config ({len(generated.files)} files) in {destination}")
        return generated

    def generate_all(self, target_dir: Path, dry_run: bool = False) -> list[GeneratedConfig]:
        return [self.generate(name, target_dir, dry_run=dry_run) for name in DOTFILE_TARGETS]


def resolve_config_files_path(repository_path: Path, config_files_dir: Path) -> Path:
    return Path(repository_path).expanduser() / config_files_dir


def generate_dotfiles(
    repository_path: Path,
    config_files_dir: Path,
    config_repository_url: str,
    target_dir: Path,
    dry_run: bool = False,
) -> list[GeneratedConfig]:
    """Download the dotfiles if needed and generate every application config."""
    repository_path = Path(repository_path).expanduser()
    config_files = ConfigFiles.get_or_download(
        resolve_config_files_path(repository_path, config_files_dir),
        config_repository_url,
        repository_path,
        dry_run=dry_run,
    )
    return config_files.generate_all(Path(target_dir).expanduser(), dry_run=dry_run)
