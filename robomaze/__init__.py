"""A robot in a procedurally generated maze

Maze generators, a robot movement model and the engines that drive
pluggable controllers through the maze.
"""

from . import controllers, directions, execution, generators, maze, registry, unionfind

__version__ = (0, 1, 0)
