# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/__init__.py

"""yoz - personal toolbox for Rust development on an Arch Linux desktop."""
