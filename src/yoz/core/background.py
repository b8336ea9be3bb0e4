# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/background.py

from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.config.manager import Position
from yoz.system.exceptions import CommandError, ValidationError
from yoz.system.execution import CommandExecutor as ce


def background_command(file_path: Path, position: Position) -> list[str]:
    return ["feh", "--no-fehbg", f"--bg-{position.value}", str(file_path)]


def set_background(
    file_path: Optional[Path],
    position: Optional[Position],
    default_file_path: Optional[Path] = None,
    default_position: Optional[Position] = None,
) -> list[str]:
    """Set the desktop background with feh.

    The image falls back to the configured one; the position falls back to
    the configured one, then to fill.

    Returns:
        The feh command that was run

    Raises:
        ValidationError: If no image is given or configured
        CommandError: If feh fails
    """
    image = file_path or default_file_path
    if image is None:
        raise ValidationError("no file has been provided for the background")

    position = position or default_position or Position.FILL

    cmd = background_command(Path(image).expanduser(), position)
    result = ce.run_local(cmd, check=False)
    if not result.success:
        raise CommandError("cannot set the background", command=cmd, returncode=result.returncode)

    logger.info(f"Background set to {image} ({position})")
    return cmd
