# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/config/manager.py

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Final, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from yoz.system.exceptions import ConfigError, MissingSettingError, ValidationError


# ---- Constants ----

APP_NAME: Final = "yoz"
CONFIG_FILE: Final = "config.toml"

DEFAULT_BUILDS_DIR: Final = Path("~/.builds")

DEFAULT_CARGO_PRELUDE: Final[tuple[str, ...]] = (
    "alacritty",
    "bat",
    "cargo-rdme",
    "cargo-release",
    "cargo-temp",
    "cargo-update",
    "cargo-watch",
    "mdbook",
    "starship",
)
DEFAULT_PACMAN_PRELUDE: Final[tuple[str, ...]] = (
    "discord",
    "feh",
    "flameshot",
    "neovim",
)
DEFAULT_AUR_PRELUDE: Final[dict[str, str]] = {
    "spotify": "https://aur.archlinux.org/spotify.git",
}

DEFAULT_CONFIG_TEMPLATE: Final = """\
# yoz configuration file.
#
# Every key is optional: command-line flags always win over the values below,
# and commands that need a missing value will tell you which key to set.

# full_name = "Jane Doe"              # license holder for `yoz new` / `yoz add`
# projects_path = "~/projects"        # where `yoz new` creates projects
# launch_command = ["nvim", "."]      # `yoz launch` main program
# terminal_command = ["alacritty"]    # `yoz launch` terminal
# builds_dir = "~/.builds"            # AUR build directories
# local_log = "~/.local/state/yoz"    # enable debug log files

# [background]
# file_path = "~/Pictures/wallpaper.png"
# position = "fill"                   # center, fill, max, scale, tile

# [main_monitor]
# name = "eDP-1"
# width = 1920
# height = 1080
# rate = 60

# [external_monitor]
# name = "HDMI-1"
# width = 2560
# height = 1440
# rate = 144

# [dotfiles]
# repository_path = "~/repos"
# config_files_dir = "dotfiles"
# config_repository_url = "https://github.com/you/dotfiles.git"
# target_dir = "~/.config"

# [prelude]
# cargo = ["bat", "starship"]
# pacman = ["feh", "flameshot"]
# [prelude.aur]
# spotify = "https://aur.archlinux.org/spotify.git"
"""

T = TypeVar("T")


def _config_search_paths() -> tuple[Path, ...]:
    """Config file candidates, highest priority first.

    Evaluated at call time so tests can redirect the environment.
    """
    candidates = []
    override = os.getenv("YOZ_CONFIG_HOME")
    if override:
        candidates.append(Path(override) / CONFIG_FILE)
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        candidates.append(Path(xdg) / APP_NAME / CONFIG_FILE)
    candidates.append(Path.home() / ".config" / APP_NAME / CONFIG_FILE)
    return tuple(candidates)


def find_config_path() -> Path:
    """Return the first existing config file, or where a new one belongs."""
    candidates = _config_search_paths()
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]


def config_home() -> Path:
    """XDG config home, where application configs are generated."""
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def _expand(path: Optional[Path]) -> Optional[Path]:
    return path.expanduser() if path is not None else None


# ---- Models ----

class Position(str, Enum):
    """How feh places the background image."""
    CENTER = "center"
    FILL = "fill"
    MAX = "max"
    SCALE = "scale"
    TILE = "tile"

    @classmethod
    def parse(cls, value: str) -> "Position":
        """Case-insensitive parse used by both the CLI and the config file."""
        if isinstance(value, cls):
            return value
        lowered = str(value).lower()
        for position in cls:
            if position.value == lowered:
                return position
        raise ValidationError(f"Cannot parse position from {lowered}")

    def __str__(self) -> str:
        return self.value


class MonitorConfig(BaseModel):
    """A physical display as xrandr should drive it."""
    name: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    rate: int = Field(default=60, gt=0)


class BackgroundConfig(BaseModel):
    file_path: Optional[Path] = None
    position: Optional[Position] = None

    @field_validator("position", mode="before")
    @classmethod
    def parse_position(cls, value: Any) -> Optional[Position]:
        if value is None:
            return None
        try:
            return Position.parse(value)
        except ValidationError as e:
            raise ValueError(str(e)) from e

    @field_validator("file_path")
    @classmethod
    def expand_path(cls, value: Optional[Path]) -> Optional[Path]:
        return _expand(value)


class DotfilesConfig(BaseModel):
    repository_path: Optional[Path] = None
    config_files_dir: Optional[Path] = None
    config_repository_url: Optional[str] = None
    target_dir: Optional[Path] = None

    @field_validator("repository_path", "target_dir")
    @classmethod
    def expand_path(cls, value: Optional[Path]) -> Optional[Path]:
        return _expand(value)


class PreludeConfig(BaseModel):
    """Programs installed by `yoz install --prelude`."""
    cargo: list[str] = Field(default_factory=lambda: list(DEFAULT_CARGO_PRELUDE))
    pacman: list[str] = Field(default_factory=lambda: list(DEFAULT_PACMAN_PRELUDE))
    aur: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_AUR_PRELUDE))


class YozConfig(BaseModel):
    """Defaults for every yoz subcommand."""
    full_name: Optional[str] = None
    projects_path: Optional[Path] = None
    launch_command: list[str] = Field(default_factory=list)
    terminal_command: list[str] = Field(default_factory=list)
    builds_dir: Path = Field(default=DEFAULT_BUILDS_DIR, validate_default=True)
    local_log: Optional[Path] = None

    background: BackgroundConfig = Field(default_factory=BackgroundConfig)
    main_monitor: Optional[MonitorConfig] = None
    external_monitor: Optional[MonitorConfig] = None
    dotfiles: DotfilesConfig = Field(default_factory=DotfilesConfig)
    prelude: PreludeConfig = Field(default_factory=PreludeConfig)

    @field_validator("projects_path", "builds_dir", "local_log")
    @classmethod
    def expand_path(cls, value: Optional[Path]) -> Optional[Path]:
        return _expand(value)

    @classmethod
    def load(cls, config_path: Path) -> "YozConfig":
        """Load and validate a config file.

        Raises:
            ConfigError: If the file is not valid TOML or has invalid values
        """
        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        try:
            config = cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid config in {config_path}: {e}") from e

        logger.debug(f"Loaded config from {config_path}")
        return config

    @classmethod
    def get_or_create(cls, config_path: Optional[Path] = None) -> "YozConfig":
        """Load the config file, writing a commented template if it is missing."""
        config_path = config_path or find_config_path()

        if config_path.exists():
            return cls.load(config_path)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot create config file {config_path}: {e}") from e

        print(f"Config file created at: {config_path}")
        logger.info(f"Config file created at: {config_path}")
        return cls()


# ---- Default resolution ----

def resolve_setting(flag: Optional[T], configured: Optional[T], key: str) -> T:
    """Pick the command-line value, then the configured one, else fail.

    Empty lists count as missing, so list settings follow the same chain.

    Raises:
        MissingSettingError: If neither source provides a value
    """
    if flag is not None and flag != []:
        return flag
    if configured is not None and configured != []:
        return configured
    raise MissingSettingError(key)
