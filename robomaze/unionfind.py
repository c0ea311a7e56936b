"""implements a Union-Find data structure

Union-by-size with path halving, used to answer "are these two cells
connected" questions about a maze.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator


__all__ = ['UnionFind']


class UnionFind[T]:
    """
    A union-find (disjoint-set) data structure.

    Unknown elements are added lazily as singleton sets.
    """

    def __init__(self) -> None:
        self._parents: dict[T, T] = {}
        self._sizes: dict[T, int] = {}

    def __contains__(self, item: T) -> bool:
        return item in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(str(s) for s in self.iter_sets())})"

    def iter_sets(self) -> Iterator[set[T]]:
        """
        Yield sets of connected components.

        >>> uf = UnionFind()
        >>> uf.union(1, 2)
        >>> list(uf.iter_sets())
        [{1, 2}]
        """
        element_classes: dict[T, set[T]] = defaultdict(set)
        for element in list(self._parents):
            element_classes[self.find(element)].add(element)
        yield from element_classes.values()

    def find(self, x: T) -> T:
        """
        Return the canonical element of a given item.

        In case the element was not present in the data structure, it is added
        and is its own canonical element.
        >>> uf = UnionFind()
        >>> uf.find(2)
        2
        >>> uf.union(1, 2)
        >>> uf.find(2)
        1
        """
        if x not in self._parents:
            self._parents[x] = x
            self._sizes[x] = 1
            return x
        while x != self._parents[x]:
            self._parents[x] = self._parents[self._parents[x]]
            x = self._parents[x]
        return x

    def union(self, x: T, y: T) -> None:
        """
        Attach the roots of x and y trees together if they are not the same already.
        The smaller tree is attached below the larger one (ties keep ``x``'s root).
        """
        parent_x, parent_y = self.find(x), self.find(y)
        if parent_x == parent_y:
            return
        if self._sizes[parent_x] < self._sizes[parent_y]:
            parent_x, parent_y = parent_y, parent_x
        self._parents[parent_y] = parent_x
        self._sizes[parent_x] += self._sizes.pop(parent_y)

    def connected(self, x: T, y: T) -> bool:
        """
        Return True if x and y belong to the same set (i.e. they have the same canonical element).

        >>> uf = UnionFind()
        >>> uf.connected(1, 2)
        False
        >>> uf.union(1, 2)
        >>> uf.connected(1, 2)
        True
        """
        return self.find(x) == self.find(y)
