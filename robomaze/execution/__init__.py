"""Robots and the engines that drive them.

+ Polled - runs the tick loop on the caller's thread
+ Threaded - runs the tick loop on a worker thread and streams the progress
"""
from __future__ import annotations

from . import engine, polled, robot, threaded, threaded_robot, utils
from .polled import PolledEngine
from .robot import DefaultRobot, RobotHandle
from .threaded import as_threaded, ThreadedControllerAdapter, ThreadedEngine
from .threaded_robot import ReadWriteLock, SharedMaze, ThreadedRobot
from .utils import Controller, EngineStatus, Robot, RobotInternals, RobotProgress, ThreadedController

del annotations
