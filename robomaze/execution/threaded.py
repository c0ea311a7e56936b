"""An engine that runs on a worker thread and streams its progress."""

from __future__ import annotations

import logging
import threading

from typing import TYPE_CHECKING

from .engine import EngineBase
from .threaded_robot import ThreadedRobot
from .utils import ThreadedController

if TYPE_CHECKING:
    import queue

    from ..maze import Maze
    from .utils import Controller, Robot, RobotInternals, RobotProgress

_logger = logging.getLogger(__name__)


class ThreadedControllerAdapter:
    """Lets a single threaded controller run in the threaded engine. Every call is forwarded as is."""
    supports_threads = True

    def __init__(self, controller: Controller) -> None:
        self._controller = controller

    @property
    def controller(self) -> Controller:
        """The wrapped controller."""
        return self._controller

    def control_robot(self, robot: Robot) -> None:
        self._controller.control_robot(robot)

    def reset(self) -> None:
        self._controller.reset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._controller!r})"


def as_threaded(controller: Controller) -> ThreadedController:
    """Wrap ``controller`` with a ``ThreadedControllerAdapter`` unless it already supports threads."""
    if isinstance(controller, ThreadedController):
        return controller
    return ThreadedControllerAdapter(controller)


class ThreadedEngine(EngineBase):
    """Runs the tick loop on a dedicated worker thread.

    After every tick a ``RobotProgress`` is put in the progress queue (if one
    is set) and stored as ``latest_progress``. A final record with
    ``finished=True`` is sent only when the robot reaches the goal.

    The fields are guarded separately, so ``latest_progress`` may not agree
    with ``status`` at any given moment. Use the queue for a consistent view.
    """

    def __init__(self, controller: Controller, maze: Maze | None = None, *, robot: RobotInternals | None = None) -> None:
        super().__init__(as_threaded(controller), robot if robot is not None else ThreadedRobot())
        self._progress_queue: queue.Queue[RobotProgress] | None = None
        self._latest: RobotProgress | None = None
        self._latest_lock = threading.Lock()
        self._worker: threading.Thread | None = None
        self._error: Exception | None = None
        if maze is not None:
            self.set_maze(maze)

    def set_progress_queue(self, progress_queue: queue.Queue[RobotProgress] | None) -> None:
        """Set the queue that receives the robot's progress (``None`` to stop sending)."""
        if self._configurable('progress queue'):
            self._progress_queue = progress_queue

    @property
    def latest_progress(self) -> RobotProgress | None:
        """The last progress record, ``None`` before the first tick."""
        with self._latest_lock:
            return self._latest

    def _emit(self, progress: RobotProgress) -> None:
        if self._progress_queue is not None:
            self._progress_queue.put(progress)
        with self._latest_lock:
            self._latest = progress

    def start(self) -> None:
        """Start the worker thread. Returns immediately."""
        if not self._begin():
            return
        self._error = None
        self._worker = threading.Thread(target=self._work, name='robomaze-engine', daemon=True)
        self._worker.start()

    def _work(self) -> None:
        try:
            self._run()
        except Exception as err:
            _logger.error("engine: worker failed: %s: %s", type(err).__name__, err)
            self._error = err

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the worker thread.

        Args:
            timeout (float | None, optional): Seconds to wait. Defaults to None (wait forever).

        Raises:
            Exception: Whatever the controller raised in the worker thread.

        Returns:
            bool: True if the worker is done (or was never started), False on timeout.
        """
        if self._worker is None:
            return True
        self._worker.join(timeout)
        if self._worker.is_alive():
            return False
        if (err := self._error) is not None:
            self._error = None
            raise err
        return True
