# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/paths.py

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from yoz.system.exceptions import ValidationError


def set_working_dir(path: Optional[Union[str, Path]] = None) -> Path:
    """Return the absolute working directory for a command.

    Args:
        path: Directory given on the command line; defaults to the current one

    Raises:
        ValidationError: If the path does not exist or is not a directory
    """
    working_dir = Path(path).expanduser() if path is not None else Path.cwd()

    if not working_dir.exists():
        raise ValidationError(f"{working_dir} does not exist")
    if not working_dir.is_dir():
        raise ValidationError(f"{working_dir} is not a directory")

    working_dir = working_dir.resolve()
    logger.debug(f"Working directory: {working_dir}")
    return working_dir
