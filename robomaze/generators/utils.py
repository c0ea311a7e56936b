"""Common generator types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TYPE_CHECKING

from ..directions import Heading
from ..maze import Point

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..maze import Maze


def swap_remove[T](items: list[T], index: int) -> T:
    """Remove the item at ``index`` by swapping the last item into its place. O(1), does not keep order.

    >>> items = ['a', 'b', 'c', 'd']
    >>> swap_remove(items, 1)
    'b'
    >>> items
    ['a', 'd', 'c']
    """
    last = items.pop()
    if index == len(items):
        return last
    item, items[index] = items[index], last
    return item


def neighbours(point: Point, width: int, height: int, distance: int = 1) -> Iterator[Point]:
    """Yield the points ``distance`` cells away from ``point`` on exactly one axis, within a width x height grid.

    Points that would have a negative coordinate are skipped.

    >>> list(neighbours(Point(0, 0), 3, 3))
    [Point(x=1, y=0), Point(x=0, y=1)]
    """
    for heading in Heading:
        dx, dy = heading.offset
        x, y = point.x + dx * distance, point.y + dy * distance
        if 0 <= x < width and 0 <= y < height:
            yield Point(x, y)


@dataclass(frozen=True)
class GeneratorOptions:
    """The requested maze size. Each generator decides how to interpret it."""
    width: int = 15
    height: int = 15

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Generator(Protocol):
    """A maze generator."""

    @property
    def name(self) -> str:
        """A short name for the generator."""

    @property
    def description(self) -> str:
        """A one-line description of the generator."""

    @property
    def options(self) -> GeneratorOptions:
        """The options the next maze will be generated with."""

    def set_options(self, options: GeneratorOptions) -> None:
        """Update the generator's options. Invalid options are ignored."""

    def generate_maze(self) -> Maze:
        """Generate a new maze. Every call returns a new, independent maze."""
