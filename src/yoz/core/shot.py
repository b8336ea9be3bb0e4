# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/shot.py

from pathlib import Path
from typing import Optional

from yoz.system.exceptions import CommandError, ValidationError
from yoz.system.execution import CommandExecutor as ce


def shot_command(
    text: Optional[Path] = None,
    screen: bool = False,
    desktop: bool = False,
    clipboard: bool = False,
) -> list[str]:
    """Build the capture command; flameshot's GUI mode when nothing is selected."""
    if sum([text is not None, screen, desktop]) > 1:
        raise ValidationError("--text, --screen and --desktop are mutually exclusive")

    if text is not None:
        return ["bat", str(text), "--style", "plain"]

    if screen or desktop:
        cmd = ["flameshot", "screen" if screen else "full"]
        if clipboard:
            cmd.append("--clipboard")
        return cmd

    return ["flameshot", "gui"]


def take_shot(cmd: list[str]) -> None:
    result = ce.run_local(cmd, check=False, capture=False)
    if not result.success:
        if cmd[0] == "bat":
            message = f"cannot open {cmd[1]} with bat"
        else:
            message = f"`{' '.join(cmd[:2])}` failed"
        raise CommandError(message, command=cmd, returncode=result.returncode)
