"""Absolute and relative directions in the maze

This module contains classes for representing the robot's heading and the
relative facing instructions controllers use to turn it.
"""

from __future__ import annotations

from enum import auto, Enum
from typing import overload, TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Literal


class Facing(Enum):
    """Facing instructions, relative to the current heading."""
    AHEAD = auto()
    RIGHT = auto()
    BEHIND = auto()
    LEFT = auto()

    @overload
    def invert(self: Literal[Facing.AHEAD]) -> Literal[Facing.BEHIND]: ...
    @overload
    def invert(self: Literal[Facing.BEHIND]) -> Literal[Facing.AHEAD]: ...
    @overload
    def invert(self: Literal[Facing.LEFT]) -> Literal[Facing.RIGHT]: ...
    @overload
    def invert(self: Literal[Facing.RIGHT]) -> Literal[Facing.LEFT]: ...
    @overload
    def invert(self) -> Facing: ...

    def invert(self) -> Facing:
        """Invert the facing (left <-> right; ahead <-> behind)

        Returns:
            Facing: The inverted facing.
        """
        match self:
            case Facing.AHEAD: return Facing.BEHIND
            case Facing.BEHIND: return Facing.AHEAD
            case Facing.LEFT: return Facing.RIGHT
            case Facing.RIGHT: return Facing.LEFT

    @staticmethod
    def from_str(facing: str) -> Facing:
        """Create from a facing name (case insensitive, full name or first letter).

        Args:
            facing (str): A string representing a facing instruction.

        Raises:
            ValueError: The ``facing`` string is invalid.

        Returns:
            Facing: The facing represented by the string.
        """
        match facing.strip().casefold():
            case 'ahead' | 'a' | 'front' | 'forward':
                return Facing.AHEAD
            case 'right' | 'r':
                return Facing.RIGHT
            case 'behind' | 'b' | 'back':
                return Facing.BEHIND
            case 'left' | 'l':
                return Facing.LEFT
        raise ValueError(f"{facing!r} is not a valid Facing")

    def __str__(self) -> str:
        return self.name


class Heading(Enum):
    """The robot's absolute compass heading."""
    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()

    def turn_left(self) -> Heading:
        """Return the heading that is the result of turning left (90 degrees counter-clockwise).

        Returns:
            Heading: The result of turning left.
        """
        match self:
            case Heading.NORTH: return Heading.WEST
            case Heading.WEST: return Heading.SOUTH
            case Heading.SOUTH: return Heading.EAST
            case Heading.EAST: return Heading.NORTH

    def turn_right(self) -> Heading:
        """Calculate the heading that is the result of turning right (90 degrees clockwise).

        Returns:
            Heading: The result of turning right.
        """
        match self:
            case Heading.NORTH: return Heading.EAST
            case Heading.EAST: return Heading.SOUTH
            case Heading.SOUTH: return Heading.WEST
            case Heading.WEST: return Heading.NORTH

    def turn_back(self) -> Heading:
        """Calculate the heading that is the result of turning back (180 degrees).

        Returns:
            Heading: The result of turning back.
        """
        match self:
            case Heading.NORTH: return Heading.SOUTH
            case Heading.SOUTH: return Heading.NORTH
            case Heading.EAST: return Heading.WEST
            case Heading.WEST: return Heading.EAST

    def turn(self, facing: Facing) -> Heading:
        """Calculate the heading that is the result of following a facing instruction.

        Args:
            facing (Facing): The instruction to follow.

        Returns:
            Heading: The result of the turn.
        """
        match facing:
            case Facing.AHEAD: return self
            case Facing.BEHIND: return self.turn_back()
            case Facing.LEFT: return self.turn_left()
            case Facing.RIGHT: return self.turn_right()

    @property
    def offset(self) -> tuple[int, int]:
        """The (dx, dy) of a single step in this heading. North is towards y = 0."""
        match self:
            case Heading.NORTH: return (0, -1)
            case Heading.EAST: return (1, 0)
            case Heading.SOUTH: return (0, 1)
            case Heading.WEST: return (-1, 0)

    @staticmethod
    def from_str(heading: str) -> Heading:
        """Create from a heading name.
        The name is case insensitive and can be either a full name or an abbreviation.

        Args:
            heading (str): A string representing a cardinal direction.

        Raises:
            ValueError: The ``heading`` string is invalid.

        Returns:
            Heading: The heading represented by the string.
        """
        match heading.strip().casefold():
            case 'north' | 'n':
                return Heading.NORTH
            case 'east' | 'e':
                return Heading.EAST
            case 'south' | 's':
                return Heading.SOUTH
            case 'west' | 'w':
                return Heading.WEST
        raise ValueError(f"{heading!r} is not a valid Heading")

    def __str__(self) -> str:
        return self.name
