# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/cli/commands/__init__.py

"""Command handlers called by the CLI dispatcher."""
