"""Command line helpers.

Classes:
* ConsoleRenderer - draws a running engine in the terminal using ``rich``.

Functions:
* size - ``argparse`` type for parsing a {width}x{height} size.
* heading - ``argparse`` type for parsing a north/east/south/west heading.
* log_level - ``argparse`` type for parsing a ``logging`` level name.
"""
from __future__ import annotations

import logging
import queue
import re

from contextlib import nullcontext
from typing import TYPE_CHECKING

import rich

from rich.console import Group
from rich.live import Live
from rich.text import Text

from .directions import Heading
from .execution import ThreadedEngine
from .generators import GeneratorOptions

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from .execution import EngineStatus, PolledEngine, RobotProgress

_QUEUE_POLL_INTERVAL = 0.05


def size(arg: str) -> GeneratorOptions:
    """Size type for argparse.

    Format:
        A "size" is a "{width}x{height}" pair of positive integers.

    Args:
        arg (str): The command-line argument.

    Raises:
        ValueError: The argument is not in a {number}x{number} format.

    Returns:
        GeneratorOptions: The requested size.
    """
    if m := re.fullmatch(r'(?P<width>\d+)x(?P<height>\d+)', arg.strip()):
        return GeneratorOptions(width=int(m['width']), height=int(m['height']))
    raise ValueError(f"invalid size: {arg!r}")


def heading(arg: str) -> Heading:
    """Heading type for argparse.

    Format:
        A case insensitive name or abbreviation of a cardinal direction.
        (See ``Heading.from_str(s)``).

    Args:
        arg (str): The command-line argument.

    Raises:
        ValueError: The argument is in an incorrect format.

    Returns:
        Heading: A cardinal direction.
    """
    return Heading.from_str(arg)


def log_level(arg: str) -> int:
    """Log level type for argparse (a case insensitive ``logging`` level name).

    Raises:
        ValueError: Unknown level name.
    """
    levels = logging.getLevelNamesMapping()
    if (level := levels.get(arg.strip().upper())) is None:
        raise ValueError(f"unknown log level: {arg!r}")
    return level


class ConsoleRenderer:
    """Runs an engine and draws the robot's progress in the terminal."""

    def __init__(self, engine: PolledEngine | ThreadedEngine, *, live: bool = True, console: Console | None = None) -> None:
        """Prepare an engine for rendering.

        Args:
            engine (PolledEngine | ThreadedEngine): The engine to run. Maze snapshots are enabled on it.
            live (bool, optional): Redraw after every tick, otherwise only draw the end result. Defaults to True.
            console (Console | None, optional): The console to draw on. Defaults to rich's global console.
        """
        self.engine = engine
        self.live = live
        self.console = console if console is not None else rich.get_console()
        self.last_progress: RobotProgress | None = None
        engine.snapshots = True

    def frame(self, progress: RobotProgress) -> Group:
        """Build the drawing of a single progress record."""
        robot = self.engine.robot
        maze = progress.maze.render(pos=progress.position, heading=progress.heading) if progress.maze is not None else ""
        summary = (
            f"at {progress.position} heading {progress.heading}, goal {progress.goal} | "
            f"steps: {robot.steps} collisions: {robot.collisions} runs: {robot.runs}"
        )
        return Group(Text(maze), Text(summary, style='bold green' if progress.finished else 'bold'))

    def run(self) -> EngineStatus:
        """Run the engine to completion.

        Raises:
            Exception: Whatever the controller raised.

        Returns:
            EngineStatus: The engine's final status.
        """
        context = Live(console=self.console, auto_refresh=False) if self.live else nullcontext()
        with context as live:
            def show(progress: RobotProgress) -> None:
                self.last_progress = progress
                if live is not None:
                    live.update(self.frame(progress), refresh=True)

            match self.engine:
                case ThreadedEngine() as engine:
                    self._run_threaded(engine, show)
                case engine:
                    engine.set_poll_callback(show)
                    engine.start()

        if not self.live and self.last_progress is not None:
            self.console.print(self.frame(self.last_progress))
        return self.engine.status

    @staticmethod
    def _run_threaded(engine: ThreadedEngine, show: Callable[[RobotProgress], None]) -> None:
        progress_queue: queue.Queue[RobotProgress] = queue.Queue()
        engine.set_progress_queue(progress_queue)
        engine.start()
        try:
            while True:
                try:
                    show(progress_queue.get(timeout=_QUEUE_POLL_INTERVAL))
                except queue.Empty:
                    # the final record is queued before the status changes
                    if engine.status.is_done():
                        break
            while True:
                try:
                    show(progress_queue.get_nowait())
                except queue.Empty:
                    break
        except KeyboardInterrupt:
            engine.reset()
            raise
        finally:
            engine.join()
