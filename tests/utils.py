"""Utilities for robomaze testing."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from robomaze.directions import Facing, Heading

if TYPE_CHECKING:
    from collections.abc import Iterable

    from robomaze.execution import Robot
    from robomaze.maze import Maze, Point


def reachable(maze: Maze, begin: Point) -> set[Point]:
    """Find all walkable cells reachable from ``begin`` (BFS, 4-connected).

    Independent of ``Maze.connectivity`` so that tests can check it.
    """
    if not maze.can_move(begin):
        return set()
    seen = {begin}
    todo = deque([begin])
    while todo:
        cell = todo.popleft()
        for heading in Heading:
            if (nxt := cell.moved(heading)) is not None and nxt not in seen and maze.can_move(nxt):
                seen.add(nxt)
                todo.append(nxt)
    return seen


class AlwaysAhead:
    """A controller that never turns, and counts its calls."""

    def __init__(self) -> None:
        self.calls = 0
        self.resets = 0

    def control_robot(self, robot: Robot) -> None:
        self.calls += 1
        robot.face(Facing.AHEAD)

    def reset(self) -> None:
        self.resets += 1


class Failing:
    """A controller that raises on its n-th call."""

    def __init__(self, after: int = 1) -> None:
        self.after = after
        self.calls = 0

    def control_robot(self, robot: Robot) -> None:
        self.calls += 1
        if self.calls >= self.after:
            raise RuntimeError(f"failed at {robot.location}")

    def reset(self) -> None:
        pass


class ScriptedRandom:
    """A stand-in for ``random.Random`` whose ``randrange(n)`` returns scripted picks.

    Once the script runs out every call picks ``n - 1``, the most recently pushed item.
    """

    def __init__(self, picks: Iterable[int] = ()) -> None:
        self.picks = deque(picks)

    def randrange(self, stop: int) -> int:
        pick = self.picks.popleft() if self.picks else stop - 1
        assert 0 <= pick < stop, f"scripted pick {pick} is not in range({stop})"
        return pick


# randrange picks that make PrimGenerator(GeneratorOptions(5, 5)) carve CONNECTED_MAZE
CONNECTED_PICKS = [0, 1, 2, 3, 4, 5, 0, 6, 7, 7, 0]
CONNECTED_MAZE = """\
######
#S   #
## # #
# ## #
#   G#
######"""
