# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/core/screen.py

"""
Monitor arrangement through xrandr.

Aimed at a laptop with, optionally, one external screen. The laptop screen
is xrandr monitor 0 and the external one monitor 1, unless `main_monitor` /
`external_monitor` are described in the config file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from yoz.config.manager import MonitorConfig
from yoz.system.exceptions import CommandError, DisplayError
from yoz.system.execution import CommandExecutor as ce

DEFAULT_RATE = 60


class Direction(str, Enum):
    """Where the external screen sits relative to the laptop screen."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def xrandr_flag(self) -> str:
        return f"--{self.value}-of"


class ScreenMode(str, Enum):
    LAPTOP = "laptop"
    EXTERNAL = "external"
    ALL = "all"


@dataclass
class Monitor:
    id: int
    name: str
    width: int
    height: int
    rate: int = DEFAULT_RATE

    @property
    def mode(self) -> str:
        return f"{self.width}x{self.height}"

    def __str__(self) -> str:
        return f"{self.id}: {self.name} {self.mode} {self.rate}Hz"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "rate": self.rate,
        }

    @classmethod
    def from_config(cls, monitor_id: int, config: MonitorConfig) -> "Monitor":
        return cls(
            id=monitor_id,
            name=config.name,
            width=config.width,
            height=config.height,
            rate=config.rate,
        )

    @classmethod
    def from_xrandr_line(cls, line: str) -> "Monitor":
        """Parse one monitor line of `xrandr --listmonitors`.

        Example line: ` 0: +*eDP-1 1920/344x1080/194+0+0  eDP-1`
        """
        try:
            id_part, _, rest = line.strip().partition(":")
            tokens = rest.split()
            name = tokens[-1]
            geometry = tokens[-2].split("+")[0]
            width_part, height_part = geometry.split("x")
            return cls(
                id=int(id_part),
                name=name,
                width=int(width_part.split("/")[0]),
                height=int(height_part.split("/")[0]),
            )
        except (ValueError, IndexError) as e:
            raise DisplayError(f"cannot parse xrandr monitor line {line!r}") from e


def parse_listmonitors(output: str) -> dict[int, Monitor]:
    """Parse the full `xrandr --listmonitors` output into monitors by id.

    Raises:
        DisplayError: If the output is malformed or lists no monitor
    """
    lines = [line for line in output.splitlines() if line.strip()]
    if not lines or not lines[0].startswith("Monitors:"):
        raise DisplayError("`xrandr --listmonitors` output does not start with `Monitors:`")

    try:
        count = int(lines[0].removeprefix("Monitors:").strip())
    except ValueError as e:
        raise DisplayError(f"cannot read the number of monitors from {lines[0]!r}") from e

    logger.info(f"numbers of monitors: {count}")
    if count == 0:
        raise DisplayError("no monitor detected")

    monitors = {}
    for line in lines[1:count + 1]:
        monitor = Monitor.from_xrandr_line(line)
        monitors[monitor.id] = monitor
    return monitors


def fetch_monitors() -> dict[int, Monitor]:
    """Detect monitors with `xrandr --listmonitors`."""
    result = ce.run_local(["xrandr", "--listmonitors"])
    logger.debug(f"stdout:\n{result.stdout}")
    return parse_listmonitors(result.stdout)


def enable_command(
    monitor: Monitor,
    direction: Optional[Direction] = None,
    relative_to: Optional[Monitor] = None,
) -> list[str]:
    cmd = ["xrandr", "--output", monitor.name]
    if direction is not None and relative_to is not None:
        cmd.extend([direction.xrandr_flag, relative_to.name])
    cmd.extend(["--mode", monitor.mode, "--rate", str(monitor.rate)])
    return cmd


def disable_command(monitor: Monitor) -> list[str]:
    return ["xrandr", "--output", monitor.name, "--off"]


def resolve_monitors(
    detected: dict[int, Monitor],
    main_monitor: Optional[MonitorConfig] = None,
    external_monitor: Optional[MonitorConfig] = None,
) -> tuple[Optional[Monitor], Optional[Monitor]]:
    """Pick the laptop and external monitors, configured ones first."""
    laptop = Monitor.from_config(0, main_monitor) if main_monitor else detected.get(0)
    external = Monitor.from_config(1, external_monitor) if external_monitor else detected.get(1)
    return laptop, external


def plan_screen_commands(
    mode: ScreenMode,
    laptop: Optional[Monitor],
    external: Optional[Monitor],
    rate: Optional[int] = None,
    direction: Direction = Direction.RIGHT,
) -> list[list[str]]:
    """Build the xrandr invocations for a screen layout.

    Args:
        rate: Refresh rate of the external screen; keeps its own rate if None

    Raises:
        DisplayError: If a monitor needed by the layout is missing
    """
    if mode in (ScreenMode.LAPTOP, ScreenMode.ALL) and laptop is None:
        raise DisplayError("laptop screen not detected")
    if mode in (ScreenMode.EXTERNAL, ScreenMode.ALL) and external is None:
        raise DisplayError("external screen not detected")

    if external is not None and rate is not None:
        external = Monitor(external.id, external.name, external.width, external.height, rate)

    if mode is ScreenMode.LAPTOP:
        commands = [enable_command(laptop)]
        if external is not None:
            commands.append(disable_command(external))
    elif mode is ScreenMode.EXTERNAL:
        commands = [enable_command(external)]
        if laptop is not None:
            commands.append(disable_command(laptop))
    else:
        commands = [
            enable_command(laptop),
            enable_command(external, direction=direction, relative_to=laptop),
        ]
    return commands


def configure_screens(commands: list[list[str]]) -> None:
    """Run xrandr invocations in order, stopping at the first failure."""
    for cmd in commands:
        result = ce.run_local(cmd, check=False)
        if not result.success:
            raise CommandError(
                f"cannot configure `{cmd[2]}`: {result.stderr.strip() or 'xrandr failed'}",
                command=cmd,
                returncode=result.returncode,
            )
        logger.info(f"Configured {cmd[2]}")
