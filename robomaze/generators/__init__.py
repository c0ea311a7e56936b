"""Maze generators.

+ Blank - an empty room
+ Prim - randomized Prim's algorithm, one maze cell per grid cell
+ Gapped Prim - randomized Prim's algorithm on a room/connector grid

More generators can be installed as entry points in the ``robomaze.generator`` group,
they are registered under their entry point name.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from . import blank, gapped_prim, prim, utils
from .blank import BlankGenerator
from .gapped_prim import GappedPrimGenerator, point_between
from .prim import PrimGenerator
from .utils import Generator, GeneratorOptions

from ..registry import implements, Registry

if TYPE_CHECKING:
    from collections.abc import Callable

    type GeneratorFactory = Callable[..., Generator]

GENERATORS: Registry[GeneratorFactory] = Registry(
    'robomaze.generator',
    {
        'blank': BlankGenerator,
        'prim': PrimGenerator,
        'gapped-prim': GappedPrimGenerator,
    },
    check=implements('set_options', 'generate_maze'),
    naming=lambda entry: entry.name,
)

register_generator = GENERATORS.register


def load_generators() -> list[str]:
    """Register the generators installed as ``robomaze.generator`` entry points.

    Returns:
        list[str]: The names of the newly registered generators (empty after the first call).
    """
    return GENERATORS.load_entry_points()


del annotations, TYPE_CHECKING
