# pylint: disable=missing-function-docstring,missing-module-docstring
from __future__ import annotations

import logging
import random

import pytest

from robomaze.controllers import WallFollowerController
from robomaze.directions import Facing, Heading
from robomaze.execution import DefaultRobot, EngineStatus, PolledEngine
from robomaze.execution.engine import EngineBase
from robomaze.generators import BlankGenerator, GappedPrimGenerator, GeneratorOptions
from robomaze.maze import Maze, Point, Tile

from tests.utils import AlwaysAhead, Failing

MAX_TICKS = 10_000


def _run(engine: PolledEngine, max_ticks: int = MAX_TICKS) -> list:
    records = []

    def collect(progress):
        records.append(progress)
        if len(records) >= max_ticks:
            engine.reset()

    engine.set_poll_callback(collect)
    engine.start()
    return records


@pytest.mark.parametrize("follow", [Facing.RIGHT, Facing.LEFT])
def test_wall_follower_on_blank(follow: Facing):
    engine = PolledEngine(WallFollowerController(follow), BlankGenerator().generate_maze())
    records = _run(engine)
    assert engine.status is EngineStatus.FINISHED
    assert engine.robot.location == (18, 18)
    assert engine.robot.steps == 34
    assert engine.robot.collisions == 0
    assert [r.finished for r in records] == [False] * 34 + [True]
    assert records[-1].position == (18, 18)
    assert records[-1].goal == (18, 18)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("follow", [Facing.RIGHT, Facing.LEFT])
def test_wall_follower_on_gapped_prim(seed: int, follow: Facing):
    maze = GappedPrimGenerator(GeneratorOptions(8, 6), rng=random.Random(seed)).generate_maze()
    engine = PolledEngine(WallFollowerController(follow), maze)
    records = _run(engine)
    assert engine.status is EngineStatus.FINISHED
    assert engine.robot.location == maze.finish
    assert records[-1].finished


def test_reset_stops_without_finished_record():
    engine = PolledEngine(AlwaysAhead(), BlankGenerator().generate_maze())
    records = _run(engine, max_ticks=5)
    assert engine.status is EngineStatus.STOPPED
    assert len(records) == 5
    assert not any(r.finished for r in records)
    assert engine.controller.resets == 1


def test_start_after_stop_begins_a_new_run():
    maze = BlankGenerator().generate_maze()
    engine = PolledEngine(WallFollowerController(), maze)
    _run(engine, max_ticks=3)
    assert engine.status is EngineStatus.STOPPED
    assert engine.robot.location == (1, 4)

    records = _run(engine)
    assert engine.status is EngineStatus.FINISHED
    assert engine.robot.runs == 1
    assert engine.robot.steps == 34
    assert records[0].position == (1, 2), "the new run did not begin at the start"


def test_reset_while_idle_or_finished_is_a_noop():
    controller = AlwaysAhead()
    maze = Maze.from_text("""\
###
#S#
#G#
###""")
    engine = PolledEngine(controller, maze)
    engine.reset()
    assert engine.status is EngineStatus.IDLE
    engine.start()
    assert engine.status is EngineStatus.FINISHED
    engine.reset()
    assert engine.status is EngineStatus.FINISHED
    assert controller.resets == 0


def test_start_at_goal_finishes_immediately():
    maze = Maze(3, 3)
    maze.start = maze.finish = Point(1, 1)
    controller = AlwaysAhead()
    engine = PolledEngine(controller, maze)
    records = _run(engine)
    assert engine.status is EngineStatus.FINISHED
    assert controller.calls == 0
    assert [r.finished for r in records] == [True]


def test_controller_error_propagates():
    engine = PolledEngine(Failing(after=3), BlankGenerator().generate_maze())
    with pytest.raises(RuntimeError):
        engine.start()
    assert engine.status is EngineStatus.STOPPED
    assert engine.robot.steps == 2


def test_snapshots():
    engine = PolledEngine(AlwaysAhead(), BlankGenerator().generate_maze())
    engine.snapshots = True
    records = _run(engine, max_ticks=3)
    assert all(r.maze is not None for r in records)
    assert records[0].maze is not records[1].maze
    assert records[0].maze[1, 2] is Tile.PASSAGE
    assert records[1].maze[1, 2] is Tile.VISITED


def test_no_snapshots_by_default():
    engine = PolledEngine(AlwaysAhead(), BlankGenerator().generate_maze())
    records = _run(engine, max_ticks=2)
    assert all(r.maze is None for r in records)


def test_set_maze_while_running_is_ignored(caplog: pytest.LogCaptureFixture):
    engine = PolledEngine(AlwaysAhead(), BlankGenerator().generate_maze())
    other = Maze(5, 5)
    other.finish = Point(3, 3)

    def callback(progress):
        engine.set_maze(other)
        engine.reset()

    engine.set_poll_callback(callback)
    with caplog.at_level(logging.WARNING):
        engine.start()
    assert engine.robot.goal_location == (18, 18)
    assert "while running" in caplog.text

    engine.set_maze(other)
    assert engine.robot.goal_location == (3, 3)
    assert engine.robot.location == (0, 0)


def test_delay(monkeypatch: pytest.MonkeyPatch):
    sleeps = []
    monkeypatch.setattr('robomaze.execution.engine.time.sleep', sleeps.append)
    engine = PolledEngine(WallFollowerController(), BlankGenerator().generate_maze())
    engine.delay = 0.25
    engine.start()
    assert sleeps == [0.25] * 34

    sleeps.clear()
    engine.delay = 0
    engine.start()
    assert not sleeps


def test_negative_delay_is_no_delay():
    engine = PolledEngine(AlwaysAhead())
    engine.delay = -1
    assert engine.delay == 0


def test_heading():
    engine = PolledEngine(AlwaysAhead(), BlankGenerator().generate_maze())
    engine.set_heading(Heading.EAST)
    records = _run(engine, max_ticks=1)
    assert records[0].position == (2, 1)
    assert records[0].heading is Heading.EAST


def test_engine_base_is_abstract():
    with pytest.raises(TypeError):
        EngineBase(AlwaysAhead(), DefaultRobot(BlankGenerator().generate_maze()))  # pylint: disable=abstract-class-instantiated

    class HalfEngine(EngineBase):
        def _emit(self, progress):
            pass

    with pytest.raises(TypeError):
        HalfEngine(AlwaysAhead(), DefaultRobot())  # pylint: disable=abstract-class-instantiated
