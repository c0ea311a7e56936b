"""Maze representation and utils

This module contains the tile grid the robot moves through, the ``Point``
coordinates used to index it and a plain-text renderer.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, TYPE_CHECKING

import numpy as np

from .directions import Heading
from .unionfind import UnionFind

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Self

    import numpy.typing as npt

type MazeSize = tuple[int, int]


class Point(NamedTuple):
    """A (x, y) coordinate in the maze. Coordinates are never negative."""
    x: int
    y: int

    def moved(self, heading: Heading) -> Point | None:
        """Calculate the point one step away in ``heading``.

        Args:
            heading (Heading): The direction to step in.

        Returns:
            Point | None: The neighbouring point, or ``None`` if the step would leave the
                non-negative quadrant (stepping north of y = 0 or west of x = 0).
        """
        dx, dy = heading.offset
        x, y = self.x + dx, self.y + dy
        if x < 0 or y < 0:
            return None
        return Point(x, y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Tile(Enum):
    """The state of a single maze cell."""
    PASSAGE = 0
    VISITED = 1
    WALL = 2

    def is_wall(self) -> bool:
        """Whether the tile blocks movement."""
        return self is Tile.WALL

    def can_walk(self) -> bool:
        """Whether the robot may step on the tile."""
        return not self.is_wall()

    def __str__(self) -> str:
        return self.name


_TILE_CHARS: dict[Tile, str] = {
    Tile.PASSAGE: ' ',
    Tile.VISITED: '░',
    Tile.WALL: '█',
}

_CHAR_TILES: dict[str, Tile] = {
    ' ': Tile.PASSAGE,
    '.': Tile.PASSAGE,
    'S': Tile.PASSAGE,
    'G': Tile.PASSAGE,
    '#': Tile.WALL,
    '█': Tile.WALL,
    '+': Tile.VISITED,
    '░': Tile.VISITED,
}

_ROBOT_MARKERS: dict[Heading, str] = {
    Heading.NORTH: '^',
    Heading.EAST: '>',
    Heading.SOUTH: 'v',
    Heading.WEST: '<',
}


class Maze:
    """A rectangular grid of tiles with a start and a finish point.

    Lookups outside of the grid never fail: ``get_cell`` returns ``None``,
    ``set_cell`` does nothing and ``can_move`` returns ``False``.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a maze of the provided size, filled with ``Tile.PASSAGE``.

        Args:
            width (int): The width of the maze (x axis).
            height (int): The height of the maze (y axis).
        """
        self._width = width
        self._height = height
        self._cells: npt.NDArray[np.uint8] = np.full((height, width), Tile.PASSAGE.value, dtype=np.uint8)
        self._start = Point(0, 0)
        self._finish = Point(0, 0)
        self._connectivity: UnionFind[Point] | None = None

    @classmethod
    def from_maze(cls, maze: Maze) -> Self:
        """Create a new maze from the provided maze. (Clone the maze)

        Args:
            maze (Maze): The maze to clone.

        Returns:
            Self: A new maze with the same tiles, start and finish.
        """
        self = cls(maze.width, maze.height)
        self._cells[...] = maze._cells  # pylint: disable=protected-access
        self._start = maze.start
        self._finish = maze.finish
        return self

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Load a maze from a text drawing.

        Format:
            One line per row. ``#`` (or a full block) is a wall, ``+`` (or a light shade) is a
            visited cell, a space or ``.`` is a passage. ``S`` and ``G`` are passages that also
            mark the start and the finish.

        Args:
            text (str): The drawing.

        Raises:
            ValueError: The maze is empty.
            ValueError: The maze is not a rectangle.
            ValueError: The drawing contains an unknown character.

        Returns:
            Self: A maze that matches the drawing.
        """
        lines = text.splitlines(keepends=False)
        if not lines:
            raise ValueError("maze is empty")
        if not all(len(line) == len(lines[0]) for line in lines):
            raise ValueError("maze is not a rectangle")

        self = cls(len(lines[0]), len(lines))
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if char not in _CHAR_TILES:
                    raise ValueError(f"unknown tile character {char!r} at ({x}, {y})")
                self.set_cell(Point(x, y), _CHAR_TILES[char])
                if char == 'S':
                    self.start = Point(x, y)
                elif char == 'G':
                    self.finish = Point(x, y)
        return self

    @property
    def size(self) -> MazeSize:
        """The size of the maze (width, height)."""
        return (self._width, self._height)

    @property
    def width(self) -> int:
        """The width of the maze."""
        return self._width

    @property
    def height(self) -> int:
        """The height of the maze."""
        return self._height

    @property
    def start(self) -> Point:
        """The start point of the maze (not validated against the tiles)."""
        return self._start

    @start.setter
    def start(self, point: tuple[int, int]) -> None:
        self._start = Point(*point)

    @property
    def finish(self) -> Point:
        """The finish point of the maze (not validated against the tiles)."""
        return self._finish

    @finish.setter
    def finish(self, point: tuple[int, int]) -> None:
        self._finish = Point(*point)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether ``(x, y)`` is inside the maze."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get[T](self, x: int, y: int, default: T = None) -> Tile | T:
        """Get a tile from the maze, or ``default`` if it doesn't exist.

        Args:
            x (int): The cell's column index.
            y (int): The cell's row index.
            default (T, optional): A default value to return if ``(x, y)`` is out-of-bounds. Defaults to None.

        Returns:
            Tile | T: The tile, or ``default``.
        """
        if not self.in_bounds(x, y):
            return default
        return Tile(int(self._cells[y, x]))

    def get_cell(self, point: tuple[int, int]) -> Tile | None:
        """Get the tile at ``point``, ``None`` if it is out of range."""
        return self.get(*point)

    def set_cell(self, point: tuple[int, int], tile: Tile) -> None:
        """Set the tile at ``point``. Out of range points are ignored."""
        x, y = point
        if not self.in_bounds(x, y):
            return
        self._cells[y, x] = tile.value
        self._connectivity = None

    def can_move(self, point: tuple[int, int]) -> bool:
        """Check whether the robot may stand on ``point``.

        Returns:
            bool: False if ``point`` is out of range or a wall, otherwise True.
        """
        tile = self.get_cell(point)
        return tile is not None and tile.can_walk()

    def fill(self, tile: Tile) -> None:
        """Set every cell in the maze to ``tile``."""
        self._cells.fill(tile.value)
        self._connectivity = None

    def copy(self) -> Self:
        """Clone the maze."""
        return type(self).from_maze(self)

    def __getitem__(self, idx: tuple[int, int]) -> Tile:
        if not isinstance(idx, tuple) or len(idx) != 2 or not all(isinstance(i, int) for i in idx):
            raise TypeError(f"expected 2 ints: (x, y), got {idx!r}")
        tile = self.get(*idx)
        if tile is None:
            raise IndexError("maze index out of range")
        return tile

    def __iter__(self) -> Iterator[tuple[int, int, Tile]]:
        """Iterate over the cells in the maze, row by row.

        Yields:
            (int, int, Tile): A (x, y, tile) tuple.
        """
        for (y, x), value in np.ndenumerate(self._cells):
            yield x, y, Tile(int(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (
            self.size == other.size
            and self.start == other.start
            and self.finish == other.finish
            and np.array_equal(self._cells, other._cells)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._width}x{self._height} start={self._start} finish={self._finish}>"

    @property
    def connectivity(self) -> UnionFind[Point]:
        """Calculate connected groups of walkable cells (4-connected).

        Returns:
            UnionFind[Point]: All connected groups of walkable cells.
        """
        if self._connectivity is None:
            self._connectivity = UnionFind()
            walkable = self._cells != Tile.WALL.value
            for y, x in zip(*np.nonzero(walkable)):
                cell = Point(int(x), int(y))
                self._connectivity.find(cell)
                if x + 1 < self._width and walkable[y, x + 1]:
                    self._connectivity.union(cell, Point(int(x) + 1, int(y)))
                if y + 1 < self._height and walkable[y + 1, x]:
                    self._connectivity.union(cell, Point(int(x), int(y) + 1))
        return self._connectivity

    def connected(self, a: tuple[int, int], b: tuple[int, int]) -> bool:
        """Check whether two cells are connected through walkable cells.

        Args:
            a (tuple[int, int]): The first cell.
            b (tuple[int, int]): The second cell.

        Returns:
            bool: True if both cells are walkable and there is a 4-connected walkable path between them.
        """
        if not self.can_move(a) or not self.can_move(b):
            return False
        return self.connectivity.connected(Point(*a), Point(*b))

    def render(self, *, pos: tuple[int, int] | None = None, heading: Heading | None = None) -> str:
        """Render the maze as text.

        Args:
            pos (tuple[int, int] | None, optional): The robot's position. Defaults to None.
            heading (Heading | None, optional): The robot's heading, drawn as an arrow at ``pos``.
                Defaults to None (drawn as 'R').

        Returns:
            str: A string representing the maze, one line per row.
        """
        rows = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                tile = Tile(int(self._cells[y, x]))
                if pos is not None and (x, y) == tuple(pos):
                    row.append(_ROBOT_MARKERS.get(heading, 'R') if heading is not None else 'R')
                elif (x, y) == self._finish:
                    row.append('G' if tile.can_walk() else 'X')
                else:
                    row.append(_TILE_CHARS[tile])
            rows.append(''.join(row))
        return '\n'.join(rows)

    def __str__(self) -> str:
        return self.render()
