# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from yoz.config.manager import YozConfig, find_config_path


def _load_local_log() -> Optional[Path]:
    """Read local_log from the config file without creating it."""
    config_path = find_config_path()
    if not config_path.exists():
        return None
    return YozConfig.load(config_path).local_log


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup loguru logging for the entire application.

    Configures:
    - Console output: WARNING+ (INFO+ with verbose, DEBUG+ with debug)
    - File output: DEBUG+ if local_log is configured
    """
    logger.remove()

    if debug:
        console_level = "DEBUG"
    elif verbose:
        console_level = "INFO"
    else:
        console_level = "WARNING"

    logger.add(
        sys.stderr,
        level=console_level,
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    try:
        local_log = _load_local_log()
        if local_log:
            log_dir = Path(local_log)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / "yoz.log"

            logger.add(
                log_file,
                level="DEBUG",
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
                rotation="10 MB",
                retention="30 days",
                compression="gz"
            )
            logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # Logging problems must never stop a command
        logger.warning(f"Failed to setup file logging: {e}")
