"""idle controller

The idle controller never turns the robot. The robot keeps moving (or
bumping into a wall) in its starting heading.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..execution import Robot


class IdleController:
    """A controller that never changes the robot's facing."""

    def control_robot(self, robot: Robot) -> None:
        _ = robot

    def reset(self) -> None:
        pass
