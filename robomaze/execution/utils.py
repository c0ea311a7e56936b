"""Types shared by the robots, the engines and the controllers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import auto, Enum
from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..directions import Facing, Heading
    from ..maze import Maze, Point, Tile


class Robot(Protocol):
    """What a controller may do with a robot: look around and turn."""

    @property
    def heading(self) -> Heading: ...
    @property
    def location(self) -> Point: ...
    @property
    def goal_location(self) -> Point: ...
    @property
    def steps(self) -> int: ...
    @property
    def collisions(self) -> int: ...
    @property
    def runs(self) -> int: ...

    def look(self, facing: Facing) -> Tile: ...
    def face(self, facing: Facing) -> None: ...


class RobotInternals(Robot, Protocol):
    """The engine's view of a robot. Controllers never get this."""

    def advance(self) -> None: ...
    def reset(self) -> None: ...
    def set_maze(self, maze: Maze) -> None: ...
    def set_location(self, location: Point) -> None: ...
    def set_heading(self, heading: Heading) -> None: ...
    def set_goal_location(self, goal: Point) -> None: ...
    def snapshot(self) -> Maze: ...


class Controller(Protocol):
    """A navigation strategy. Decides the robot's facing once per tick."""

    def control_robot(self, robot: Robot) -> None:
        """Look around and call ``robot.face()``. Called once per tick, before the robot advances."""

    def reset(self) -> None:
        """Forget any state kept between ticks."""


@runtime_checkable
class ThreadedController(Controller, Protocol):
    """A controller that may be driven from the threaded engine's worker thread."""
    supports_threads: bool


class EngineStatus(Enum):
    """Represents the engine's status."""
    IDLE = auto()
    RUNNING = auto()
    FINISHED = auto()
    STOPPED = auto()

    def is_done(self) -> bool:
        """Whether the engine stopped running (either reached the goal or was stopped)."""
        return self in (EngineStatus.FINISHED, EngineStatus.STOPPED)


@dataclass(frozen=True)
class RobotProgress:
    """A snapshot of the robot, sent to observers after each tick."""
    finished: bool
    position: Point
    goal: Point
    heading: Heading
    maze: Maze | None = None
