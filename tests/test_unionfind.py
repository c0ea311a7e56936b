# pylint: disable=missing-function-docstring,missing-module-docstring
from __future__ import annotations

from robomaze.unionfind import UnionFind


def test_find_adds_singletons():
    uf = UnionFind[int]()
    assert 1 not in uf
    assert uf.find(1) == 1
    assert 1 in uf
    assert len(uf) == 1


def test_union_and_connected():
    uf = UnionFind[str]()
    uf.union('a', 'b')
    uf.union('c', 'd')
    assert uf.connected('a', 'b')
    assert uf.connected('c', 'd')
    assert not uf.connected('a', 'c')
    uf.union('b', 'd')
    assert uf.connected('a', 'c')
    assert sorted(map(sorted, uf.iter_sets())) == [['a', 'b', 'c', 'd']]


def test_union_by_size():
    uf = UnionFind[int]()
    uf.union(1, 2)
    uf.union(1, 3)
    uf.union(4, 1)
    assert uf.find(4) == 1, "the smaller tree should be attached below the larger one"


def test_iter_sets():
    uf = UnionFind[int]()
    for i in range(6):
        uf.union(i, i % 2)
    assert sorted(map(sorted, uf.iter_sets())) == [[0, 2, 4], [1, 3, 5]]
