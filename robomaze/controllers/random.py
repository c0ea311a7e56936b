"""random controller

Face a random open direction at every tick.
"""

from __future__ import annotations

import logging
import random

from typing import TYPE_CHECKING

from ..directions import Facing

if TYPE_CHECKING:
    from ..execution import Robot

_logger = logging.getLogger(__name__)


class RandomController:
    """A controller with random movements.

    Picks uniformly among the facings that do not lead into a wall. A robot
    that is walled in on all sides gets a random facing (and collides).
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def control_robot(self, robot: Robot) -> None:
        choices = [facing for facing in Facing if robot.look(facing).can_walk()]
        facing = self._rng.choice(choices or list(Facing))
        _logger.debug("random: at %s facing %s, chose %s", robot.location, robot.heading, facing)
        robot.face(facing)

    def reset(self) -> None:
        pass
