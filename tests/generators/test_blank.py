# pylint: disable=missing-function-docstring,missing-module-docstring
from __future__ import annotations

import pytest

from robomaze.generators import BlankGenerator, GENERATORS, GeneratorOptions
from robomaze.maze import Tile


def test_blank_maze():
    maze = BlankGenerator().generate_maze()
    assert maze.size == (20, 20)
    assert maze.start == (1, 1)
    assert maze.finish == (18, 18)
    for x, y, tile in maze:
        expected = Tile.WALL if x in (0, 19) or y in (0, 19) else Tile.PASSAGE
        assert tile is expected, f"{(x, y)} is {tile}"


def test_blank_ignores_options():
    generator = BlankGenerator()
    generator.set_options(GeneratorOptions(5, 5))
    assert generator.options == GeneratorOptions(20, 20)
    assert generator.generate_maze().size == (20, 20)


@pytest.mark.parametrize("name", ['blank', 'prim', 'gapped-prim'])
def test_registry(name: str):
    generator = GENERATORS[name]()
    assert generator.name == name
    assert generator.description
    assert generator.generate_maze().get_cell(generator.generate_maze().finish) is Tile.PASSAGE
