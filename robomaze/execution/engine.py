"""The tick loop shared by the polled and the threaded engines."""

from __future__ import annotations

import logging
import threading
import time

from abc import ABC, abstractmethod

from typing import TYPE_CHECKING

from .robot import RobotHandle
from .utils import EngineStatus, RobotProgress

if TYPE_CHECKING:
    from ..directions import Heading
    from ..maze import Maze, Point
    from .utils import Controller, RobotInternals

_logger = logging.getLogger(__name__)


class EngineBase(ABC):  # pylint: disable=too-many-instance-attributes
    """Drives a controller and a robot, one tick at a time.

    A tick lets the controller decide the robot's facing, advances the robot,
    emits a ``RobotProgress`` and optionally sleeps.

    The active flag, the delay and the status are each guarded by their own lock,
    so they may be read and changed from other threads.
    """

    def __init__(self, controller: Controller, robot: RobotInternals) -> None:
        self._controller = controller
        self._robot = robot
        self._handle = RobotHandle(robot)
        self._active = False
        self._active_lock = threading.Lock()
        self._delay = 0.0
        self._delay_lock = threading.Lock()
        self._status = EngineStatus.IDLE
        self._status_lock = threading.Lock()
        self.snapshots = False

    @property
    def controller(self) -> Controller:
        return self._controller

    @property
    def robot(self) -> RobotHandle:
        """A read-only view of the robot."""
        return self._handle

    @property
    def status(self) -> EngineStatus:
        with self._status_lock:
            return self._status

    def _set_status(self, status: EngineStatus) -> None:
        with self._status_lock:
            self._status = status

    @property
    def active(self) -> bool:
        with self._active_lock:
            return self._active

    def _set_active(self, active: bool) -> None:
        with self._active_lock:
            self._active = active

    @property
    def delay(self) -> float:
        """Seconds to sleep after each tick."""
        with self._delay_lock:
            return self._delay

    @delay.setter
    def delay(self, seconds: float) -> None:
        with self._delay_lock:
            self._delay = max(0.0, float(seconds))

    def _configurable(self, what: str) -> bool:
        if self.status is EngineStatus.RUNNING:
            _logger.warning("engine: cannot change the %s while running, ignoring", what)
            return False
        return True

    def set_maze(self, maze: Maze) -> None:
        """Bind a maze to the robot: the robot moves to its start and the goal becomes its finish."""
        if self._configurable('maze'):
            self._robot.set_maze(maze)

    def set_heading(self, heading: Heading) -> None:
        if self._configurable('heading'):
            self._robot.set_heading(heading)

    def set_location(self, location: Point) -> None:
        if self._configurable('location'):
            self._robot.set_location(location)

    def set_goal_location(self, goal: Point) -> None:
        if self._configurable('goal'):
            self._robot.set_goal_location(goal)

    def _begin(self) -> bool:
        """Move to RUNNING. Returns False if the engine is already running."""
        with self._status_lock:
            if self._status is EngineStatus.RUNNING:
                _logger.warning("engine: already running")
                return False
            if self._status.is_done():
                self._robot.reset()
            self._set_active(True)
            self._status = EngineStatus.RUNNING
        _logger.info("engine: starting run %d from %s towards %s",
                     self._robot.runs, self._robot.location, self._robot.goal_location)
        return True

    def reset(self) -> None:
        """Stop the engine. The current tick completes before the loop stops.

        Does nothing if the engine is idle or already reached the goal.
        """
        if self.status in (EngineStatus.IDLE, EngineStatus.FINISHED):
            return
        self._set_active(False)
        self._controller.reset()

    def _progress(self, finished: bool) -> RobotProgress:
        return RobotProgress(
            finished=finished,
            position=self._robot.location,
            goal=self._robot.goal_location,
            heading=self._robot.heading,
            maze=self._robot.snapshot() if self.snapshots else None,
        )

    @abstractmethod
    def _emit(self, progress: RobotProgress) -> None:
        """Report the robot's progress after a tick."""
        raise NotImplementedError

    @abstractmethod
    def start(self) -> None:
        """Begin a run (see ``_begin()``) and drive the tick loop (see ``_run()``)."""
        raise NotImplementedError

    def _at_goal(self) -> bool:
        return self._robot.location == self._robot.goal_location

    def _run(self) -> None:
        status = EngineStatus.STOPPED
        try:
            while not self._at_goal() and self.active:
                self._controller.control_robot(self._handle)
                self._robot.advance()
                _logger.debug("engine: robot at %s heading %s", self._robot.location, self._robot.heading)
                self._emit(self._progress(finished=False))
                if (delay := self.delay) > 0:
                    time.sleep(delay)
            if self._at_goal():
                self._emit(self._progress(finished=True))
                status = EngineStatus.FINISHED
        finally:
            self._set_active(False)
            self._set_status(status)
            _logger.info("engine: %s after %d steps and %d collisions",
                         status.name.lower(), self._robot.steps, self._robot.collisions)
