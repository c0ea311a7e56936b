"""Various robot controllers.

+ Idle
+ Random
+ Wall Follower (left/right)

More controllers can be installed as entry points in the ``robomaze.controller`` group.
"""
from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from . import idle, random, wall_follower
from .idle import IdleController
from .random import RandomController
from .wall_follower import WallFollowerController

from ..directions import Facing
from ..registry import implements, Registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..execution import Controller

    type ControllerFactory = Callable[[], Controller]

CONTROLLERS: Registry[ControllerFactory] = Registry(
    'robomaze.controller',
    {
        'Idle': IdleController,
        'Random': RandomController,
        'Left Wall Follower': partial(WallFollowerController, Facing.LEFT),
        'Right Wall Follower': partial(WallFollowerController, Facing.RIGHT),
    },
    check=implements('control_robot', 'reset'),
)

register_controller = CONTROLLERS.register


def load_controllers() -> list[str]:
    """Register the controllers installed as ``robomaze.controller`` entry points.

    Returns:
        list[str]: The names of the newly registered controllers (empty after the first call).
    """
    return CONTROLLERS.load_entry_points()


del Facing, annotations, partial, TYPE_CHECKING
