"""A robot whose maze may be read from other threads while it runs."""

from __future__ import annotations

import threading

from contextlib import contextmanager
from typing import TYPE_CHECKING

from ..directions import Heading
from ..maze import Maze, Point, Tile
from .robot import look_ahead

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..directions import Facing


class ReadWriteLock:
    """A lock that allows many readers or a single writer. Not reentrant."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class SharedMaze:
    """A maze behind a read-write lock.

    Readers must not modify the maze they get from ``read()``. Other threads
    should work on a ``snapshot()`` rather than keep a reference to the maze.
    """

    def __init__(self, maze: Maze) -> None:
        self._maze = maze
        self._lock = ReadWriteLock()

    @contextmanager
    def read(self) -> Iterator[Maze]:
        with self._lock.read():
            yield self._maze

    @contextmanager
    def write(self) -> Iterator[Maze]:
        with self._lock.write():
            yield self._maze

    def replace(self, maze: Maze) -> None:
        """Swap the shared maze for another one."""
        with self._lock.write():
            self._maze = maze

    def snapshot(self) -> Maze:
        """Clone the maze under the read lock."""
        with self.read() as maze:
            return maze.copy()


class ThreadedRobot:  # pylint: disable=too-many-instance-attributes
    """A robot that keeps its maze in a ``SharedMaze``.

    Looking and checking moves take the read lock, marking cells as visited takes the write lock.
    The goal is the shared maze's finish.
    """

    def __init__(self, maze: Maze | None = None, heading: Heading = Heading.SOUTH) -> None:
        self._maze = SharedMaze(Maze(0, 0))
        self._location = Point(1, 1)
        self._heading = heading
        self._steps = 0
        self._collisions = 0
        self._runs = 0
        if maze is not None:
            self.set_maze(maze)

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def location(self) -> Point:
        return self._location

    @property
    def goal_location(self) -> Point:
        with self._maze.read() as maze:
            return maze.finish

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def collisions(self) -> int:
        return self._collisions

    @property
    def runs(self) -> int:
        return self._runs

    def look(self, facing: Facing) -> Tile:
        with self._maze.read() as maze:
            return look_ahead(maze, self._location, self._heading.turn(facing))

    def face(self, facing: Facing) -> None:
        self._heading = self._heading.turn(facing)

    def advance(self) -> None:
        """Move one step in the current heading, or collide if the way is blocked.

        The cell the robot was in is marked as visited in both cases.
        """
        target = self._location.moved(self._heading)
        with self._maze.read() as maze:
            can_move = target is not None and maze.can_move(target)
        with self._maze.write() as maze:
            maze.set_cell(self._location, Tile.VISITED)
        if can_move:
            self._location = target
            self._steps += 1
        else:
            self._collisions += 1

    def reset(self) -> None:
        with self._maze.read() as maze:
            self._location = maze.start
        self._steps = 0
        self._collisions = 0
        self._runs += 1

    def set_maze(self, maze: Maze) -> None:
        self._maze.replace(maze)
        self._location = maze.start

    def set_location(self, location: Point) -> None:
        self._location = Point(*location)

    def set_heading(self, heading: Heading) -> None:
        self._heading = heading

    def set_goal_location(self, goal: Point) -> None:
        with self._maze.write() as maze:
            maze.finish = goal

    def snapshot(self) -> Maze:
        return self._maze.snapshot()
