"""Randomized Prim's algorithm, one maze cell per grid cell.

The maze grows from the finish. A frontier wall cell is carved only when
exactly one of its neighbours is already a passage, so the passages never
form loops. Every cell is resolved once (carved or left as a wall) and the
frontier keeps duplicate entries, which biases the growth towards cells
that were pushed more than once.

This variant does not guarantee that the start is connected to the finish.
The start is grid cell (0, 0), which is only pushed when (1, 0) or (0, 1) is
carved. If both of them already see two passages when they are popped, both
stay walls and the start is walled off. The start is swapped with its east
neighbour when it is a wall next to a passage, which does not help here.
"""

from __future__ import annotations

import logging
import random

from typing import TYPE_CHECKING

import numpy as np

from ..maze import Maze, Point, Tile
from .utils import GeneratorOptions, neighbours, swap_remove

if TYPE_CHECKING:
    import numpy.typing as npt

_logger = logging.getLogger(__name__)

MIN_SIZE = 3


class PrimGenerator:
    """Full resolution randomized Prim generator."""

    def __init__(self, options: GeneratorOptions | None = None, *, rng: random.Random | None = None) -> None:
        self._options = GeneratorOptions()
        self._rng = rng if rng is not None else random.Random()
        if options is not None:
            self.set_options(options)

    @property
    def name(self) -> str:
        return 'prim'

    @property
    def description(self) -> str:
        return "randomized Prim's algorithm, full resolution"

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    def set_options(self, options: GeneratorOptions) -> None:
        """Update the maze size. Sizes smaller than 3x3 are ignored."""
        if options.width < MIN_SIZE or options.height < MIN_SIZE:
            _logger.debug("prim: ignoring options %s (minimum is %dx%d)", options, MIN_SIZE, MIN_SIZE)
            return
        self._options = options

    def generate_maze(self) -> Maze:
        """Generate a ``(width + 1) x (height + 1)`` maze.

        The start is (1, 1) and the finish is (width - 1, height - 1).
        Everything outside of the carved passages is a wall, including the border.

        Returns:
            Maze: A new maze.
        """
        width, height = self._options.width, self._options.height
        _logger.debug("prim: generating %dx%d maze", width + 1, height + 1)

        maze = Maze(width + 1, height + 1)
        maze.fill(Tile.WALL)
        maze.start = Point(1, 1)
        maze.finish = Point(width - 1, height - 1)

        # grid point (x, y) is maze point (x + 1, y + 1)
        grid_width, grid_height = width - 1, height - 1
        grid: npt.NDArray[np.bool_] = np.zeros((grid_height, grid_width), dtype=np.bool_)
        visited: set[Point] = set()
        frontier: list[Point] = []

        def carve(cell: Point) -> None:
            grid[cell.y, cell.x] = True
            maze.set_cell(Point(cell.x + 1, cell.y + 1), Tile.PASSAGE)
            frontier.extend(
                n for n in neighbours(cell, grid_width, grid_height)
                if not grid[n.y, n.x] and n not in visited
            )

        seed = Point(grid_width - 1, grid_height - 1)
        visited.add(seed)
        carve(seed)

        while frontier:
            cell = swap_remove(frontier, self._rng.randrange(len(frontier)))
            if cell in visited:
                continue
            passages = sum(1 for n in neighbours(cell, grid_width, grid_height) if grid[n.y, n.x])
            visited.add(cell)
            if passages == 1:
                carve(cell)

        # the start can be left walled in next to a passage
        beside_start = Point(maze.start.x + 1, maze.start.y)
        if maze.get_cell(maze.start) is Tile.WALL and maze.get_cell(beside_start) is Tile.PASSAGE:
            maze.set_cell(maze.start, Tile.PASSAGE)
            maze.set_cell(beside_start, Tile.WALL)

        return maze
