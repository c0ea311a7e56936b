"""Randomized Prim's algorithm on a double resolution grid.

Rooms sit at odd coordinates and the cells between two rooms (at an even
coordinate on the axis they differ) are connectors. Carving a room also
carves one connector towards an already carved room, so all corridors are
one cell wide and the border stays a wall.
"""

from __future__ import annotations

import logging
import random

from typing import TYPE_CHECKING

import numpy as np

from ..maze import Maze, Point, Tile
from .utils import GeneratorOptions, neighbours, swap_remove

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt

_logger = logging.getLogger(__name__)

GAP = 2


def point_between(a: Point, b: Point) -> Point:
    """Get the connector cell between two rooms.

    Args:
        a (Point): A room.
        b (Point): Another room, exactly 2 cells away from ``a`` on exactly one axis.

    Raises:
        ValueError: ``a`` and ``b`` are not 2-gapped neighbours.

    Returns:
        Point: The cell between ``a`` and ``b``.

    >>> point_between(Point(1, 1), Point(3, 1))
    Point(x=2, y=1)
    """
    dx, dy = abs(a.x - b.x), abs(a.y - b.y)
    if (dx, dy) not in ((GAP, 0), (0, GAP)):
        raise ValueError(f"{a} and {b} are not {GAP} cells apart on exactly one axis")
    return Point((a.x + b.x) // 2, (a.y + b.y) // 2)


class GappedGrid:
    """The working grid of the gapped generator (True is a passage)."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: npt.NDArray[np.bool_] = np.zeros((height, width), dtype=np.bool_)

    def is_passage(self, point: Point) -> bool:
        return bool(self.cells[point.y, point.x])

    def carve(self, point: Point) -> None:
        self.cells[point.y, point.x] = True

    def is_point_legal(self, point: Point) -> bool:
        """Whether ``point`` is inside the grid and not on its border."""
        return 0 < point.x < self.width - 1 and 0 < point.y < self.height - 1

    def two_gapped_cells(self, point: Point) -> Iterator[Point]:
        """Yield the legal points 2 cells away from ``point`` on exactly one axis."""
        return (n for n in neighbours(point, self.width, self.height, GAP) if self.is_point_legal(n))

    def frontier_around(self, point: Point) -> list[Point]:
        """The 2-gapped neighbours of ``point`` that are still walls."""
        return [n for n in self.two_gapped_cells(point) if not self.is_passage(n)]

    def neighbours_around(self, point: Point) -> list[Point]:
        """The 2-gapped neighbours of ``point`` that are already passages."""
        return [n for n in self.two_gapped_cells(point) if self.is_passage(n)]

    def connect_random_neighbour(self, point: Point, rng: random.Random) -> Point | None:
        """Carve the connector between ``point`` and a random carved 2-gapped neighbour.

        Returns:
            Point | None: The neighbour ``point`` was connected to, ``None`` if it has no carved neighbours.
        """
        candidates = self.neighbours_around(point)
        if not candidates:
            return None
        neighbour = rng.choice(candidates)
        self.carve(point_between(point, neighbour))
        return neighbour


class GappedPrimGenerator:
    """Double resolution randomized Prim generator.

    The maze is ``(2 * width + 1) x (2 * height + 1)``, the start is (1, 1)
    and the finish is the room in the opposite corner. Callers may move both.
    """

    def __init__(self, options: GeneratorOptions | None = None, *, rng: random.Random | None = None) -> None:
        self._options = GeneratorOptions()
        self._rng = rng if rng is not None else random.Random()
        if options is not None:
            self.set_options(options)

    @property
    def name(self) -> str:
        return 'gapped-prim'

    @property
    def description(self) -> str:
        return "randomized Prim's algorithm with one cell wide corridors"

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    def set_options(self, options: GeneratorOptions) -> None:
        """Update the number of rooms per axis. Non-positive sizes are ignored."""
        if options.width < 1 or options.height < 1:
            _logger.debug("gapped-prim: ignoring options %s", options)
            return
        self._options = options

    def generate_maze(self) -> Maze:
        width, height = self._options.width, self._options.height
        grid = GappedGrid(GAP * width + 1, GAP * height + 1)
        _logger.debug("gapped-prim: generating %dx%d maze", grid.width, grid.height)

        first = Point(1, 1)
        grid.carve(first)
        frontier = [first]
        while frontier:
            cell = swap_remove(frontier, self._rng.randrange(len(frontier)))
            grid.carve(cell)
            frontier.extend(grid.frontier_around(cell))
            grid.connect_random_neighbour(cell, self._rng)

        maze = Maze(grid.width, grid.height)
        for (y, x), passage in np.ndenumerate(grid.cells):
            maze.set_cell(Point(x, y), Tile.PASSAGE if passage else Tile.WALL)
        maze.start = first
        maze.finish = Point(grid.width - 2, grid.height - 2)
        return maze
