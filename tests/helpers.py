# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/helpers.py

"""Small builders for faked process results."""

from unittest.mock import MagicMock

from yoz.system.execution import CommandResult


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
    """Stand-in for subprocess.CompletedProcess."""
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(returncode=0, stdout=stdout)


def failed(returncode: int = 1, stderr: str = "") -> CommandResult:
    return CommandResult(returncode=returncode, stderr=stderr)
