"""An empty room with a wall around it."""

from __future__ import annotations

import logging
import random

from ..maze import Maze, Point, Tile
from .utils import GeneratorOptions

_logger = logging.getLogger(__name__)

BLANK_SIZE = 20


class BlankGenerator:
    """Generates a fixed 20x20 room: walls on the border, passages inside."""

    def __init__(self, options: GeneratorOptions | None = None, *, rng: random.Random | None = None) -> None:
        _ = rng
        if options is not None:
            self.set_options(options)

    @property
    def name(self) -> str:
        return 'blank'

    @property
    def description(self) -> str:
        return f"an empty {BLANK_SIZE}x{BLANK_SIZE} room"

    @property
    def options(self) -> GeneratorOptions:
        return GeneratorOptions(BLANK_SIZE, BLANK_SIZE)

    def set_options(self, options: GeneratorOptions) -> None:
        _logger.debug("blank: ignoring options %s", options)

    def generate_maze(self) -> Maze:
        maze = Maze(BLANK_SIZE, BLANK_SIZE)
        for i in range(BLANK_SIZE):
            maze.set_cell(Point(i, 0), Tile.WALL)
            maze.set_cell(Point(i, BLANK_SIZE - 1), Tile.WALL)
            maze.set_cell(Point(0, i), Tile.WALL)
            maze.set_cell(Point(BLANK_SIZE - 1, i), Tile.WALL)
        maze.start = Point(1, 1)
        maze.finish = Point(BLANK_SIZE - 2, BLANK_SIZE - 2)
        return maze
