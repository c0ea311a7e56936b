"""Robot movement and the controller facing handle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..directions import Heading
from ..maze import Maze, Point, Tile

if TYPE_CHECKING:
    from ..directions import Facing
    from .utils import RobotInternals


class RobotHandle:
    """The part of a robot a controller is allowed to use.

    Wraps a robot and only forwards the read-only accessors, ``look`` and ``face``.
    """

    def __init__(self, robot: RobotInternals) -> None:
        self.__robot = robot

    @property
    def heading(self) -> Heading:
        """The robot's current heading."""
        return self.__robot.heading

    @property
    def location(self) -> Point:
        """The robot's current location."""
        return self.__robot.location

    @property
    def goal_location(self) -> Point:
        """The location the robot is trying to reach."""
        return self.__robot.goal_location

    @property
    def steps(self) -> int:
        """Successful moves in the current run."""
        return self.__robot.steps

    @property
    def collisions(self) -> int:
        """Moves into a wall in the current run."""
        return self.__robot.collisions

    @property
    def runs(self) -> int:
        """The number of times the robot was reset."""
        return self.__robot.runs

    def look(self, facing: Facing) -> Tile:
        """Get the tile next to the robot in the ``facing`` direction (WALL outside of the maze)."""
        return self.__robot.look(facing)

    def face(self, facing: Facing) -> None:
        """Turn the robot. The robot moves in its new heading when the engine advances it."""
        self.__robot.face(facing)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {self.location} heading {self.heading}>"


def look_ahead(maze: Maze, location: Point, heading: Heading) -> Tile:
    """Get the tile one step away from ``location`` in ``heading``.

    Args:
        maze (Maze): The maze to look in.
        location (Point): The point to look from.
        heading (Heading): The direction to look in.

    Returns:
        Tile: The tile, ``Tile.WALL`` if the point is outside of the maze.
    """
    target = location.moved(heading)
    if target is None:
        return Tile.WALL
    tile = maze.get_cell(target)
    return Tile.WALL if tile is None else tile


class DefaultRobot:  # pylint: disable=too-many-instance-attributes
    """A single threaded robot that owns its maze."""

    def __init__(self, maze: Maze | None = None, heading: Heading = Heading.SOUTH) -> None:
        self._maze = Maze(0, 0)
        self._location = Point(1, 1)
        self._goal = Point(0, 0)
        self._heading = heading
        self._steps = 0
        self._collisions = 0
        self._runs = 0
        if maze is not None:
            self.set_maze(maze)

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def location(self) -> Point:
        return self._location

    @property
    def goal_location(self) -> Point:
        return self._goal

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def collisions(self) -> int:
        return self._collisions

    @property
    def runs(self) -> int:
        return self._runs

    @property
    def maze(self) -> Maze:
        """The robot's maze, including the cells it visited."""
        return self._maze

    def look(self, facing: Facing) -> Tile:
        return look_ahead(self._maze, self._location, self._heading.turn(facing))

    def face(self, facing: Facing) -> None:
        self._heading = self._heading.turn(facing)

    def advance(self) -> None:
        """Move one step in the current heading, or collide if the way is blocked.

        The cell the robot was in is marked as visited in both cases.
        """
        target = self._location.moved(self._heading)
        self._maze.set_cell(self._location, Tile.VISITED)
        if target is not None and self._maze.can_move(target):
            self._location = target
            self._steps += 1
        else:
            self._collisions += 1

    def reset(self) -> None:
        """Go back to the maze's start and begin a new run."""
        self._location = self._maze.start
        self._steps = 0
        self._collisions = 0
        self._runs += 1

    def set_maze(self, maze: Maze) -> None:
        """Move the robot to a new maze, placing it at its start with the goal at its finish."""
        self._maze = maze
        self._location = maze.start
        self._goal = maze.finish

    def set_location(self, location: Point) -> None:
        self._location = Point(*location)

    def set_heading(self, heading: Heading) -> None:
        self._heading = heading

    def set_goal_location(self, goal: Point) -> None:
        self._goal = Point(*goal)

    def snapshot(self) -> Maze:
        """Clone the robot's maze."""
        return self._maze.copy()
