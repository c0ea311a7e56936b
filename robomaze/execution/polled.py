"""An engine that runs on the caller's thread."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .engine import EngineBase
from .robot import DefaultRobot

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..maze import Maze
    from .utils import Controller, RobotInternals, RobotProgress

type PollCallback = Callable[[RobotProgress], None]


class PolledEngine(EngineBase):
    """Runs the tick loop synchronously.

    ``start()`` only returns once the robot reaches the goal or ``reset()`` is
    called (e.g. from the poll callback). Progress is reported to the poll callback.
    """

    def __init__(self, controller: Controller, maze: Maze | None = None, *, robot: RobotInternals | None = None) -> None:
        super().__init__(controller, robot if robot is not None else DefaultRobot())
        self._poll_callback: PollCallback | None = None
        if maze is not None:
            self.set_maze(maze)

    def set_poll_callback(self, callback: PollCallback | None) -> None:
        """Set a function that receives the robot's progress after each tick (``None`` to remove it)."""
        self._poll_callback = callback

    def _emit(self, progress: RobotProgress) -> None:
        if self._poll_callback is not None:
            self._poll_callback(progress)

    def start(self) -> None:
        """Run until the robot reaches the goal or the engine is reset.

        Exceptions raised by the controller (or the poll callback) stop the engine and propagate.
        """
        if self._begin():
            self._run()
