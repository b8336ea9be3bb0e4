# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/system/exceptions.py

"""
yoz-specific exception classes.

Every command failure that the CLI should report cleanly derives from
YozError; anything else is treated as an unexpected error.
"""

from typing import Optional, Sequence


class YozError(Exception):
    """Base exception for all yoz-specific errors."""
    pass


class ConfigError(YozError):
    """Raised when the config file cannot be loaded or is invalid."""
    pass


class MissingSettingError(ConfigError):
    """Raised when neither a flag nor the config file provides a value."""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Please configure `{key}` in your config file")


class ValidationError(YozError):
    """Raised when user-provided paths or values are unusable."""
    pass


class CommandError(YozError):
    """Raised when an external program fails or cannot be launched."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ):
        self.command = list(command) if command is not None else None
        self.returncode = returncode
        super().__init__(message)


class DisplayError(YozError):
    """Raised when monitors cannot be detected or are missing."""
    pass


class PartialFailureError(YozError):
    """Raised when a command ran every step but some of them failed."""

    def __init__(self, message: str, result: object = None):
        self.result = result
        super().__init__(message)
