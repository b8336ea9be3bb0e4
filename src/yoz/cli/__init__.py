# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/__init__.py

"""Command Line Interface package for yoz."""

from .main import cli_main as main, app

__all__ = ['main', 'app']
