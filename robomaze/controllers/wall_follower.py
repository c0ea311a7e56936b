"""wall follower controller

Uses the "classic" follow the right/left wall to leave a maze.
This controller will be unable to find goals that are not next to a wall
connected to the start's wall (floaters).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..directions import Facing

if TYPE_CHECKING:
    from typing import Literal

    from ..execution import Robot


class WallFollowerController:
    """A controller that keeps a wall on one side of the robot."""

    def __init__(self, follow: Literal[Facing.LEFT, Facing.RIGHT] = Facing.RIGHT) -> None:
        """Create a wall follower.

        Args:
            follow (Literal[Facing.LEFT, Facing.RIGHT], optional): The side of the wall. Defaults to Facing.RIGHT.

        Raises:
            ValueError: ``follow`` is not LEFT or RIGHT.
            TypeError: ``follow`` is not a ``Facing``.
        """
        match follow:
            case Facing.LEFT | Facing.RIGHT: pass
            case Facing(): raise ValueError(f"invalid follow direction: {follow}")
            case _: raise TypeError(f"invalid follow type: {type(follow)}")
        self._follow = follow

    @property
    def follow(self) -> Facing:
        return self._follow

    def control_robot(self, robot: Robot) -> None:
        for facing in (self._follow, Facing.AHEAD, self._follow.invert()):
            if robot.look(facing).can_walk():
                robot.face(facing)
                return
        robot.face(Facing.BEHIND)

    def reset(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._follow})"
