# pylint: disable=missing-function-docstring,missing-module-docstring
from __future__ import annotations

import logging

from importlib.metadata import EntryPoint

import pytest

from robomaze import registry
from robomaze.controllers import CONTROLLERS, IdleController
from robomaze.generators import BlankGenerator, GENERATORS
from robomaze.registry import implements, pretty_name, Registry

from tests.utils import AlwaysAhead


def _entry(name: str, value: str) -> EntryPoint:
    return EntryPoint(name, value, 'robomaze.test')


def _controllers(monkeypatch: pytest.MonkeyPatch, *entries: EntryPoint) -> Registry:
    monkeypatch.setattr(registry, 'entry_points', lambda group: list(entries))
    return Registry('robomaze.test', {'Idle': IdleController}, check=implements('control_robot', 'reset'))


def test_register_replaces():
    names = Registry[type]('robomaze.test', {'a': int})
    assert names.register('a', str) is str
    assert names['a'] is str


def test_register_decorator():
    names = Registry[type]('robomaze.test')

    @names.register('thing')
    class Thing:
        pass

    assert names == {'thing': Thing}


@pytest.mark.parametrize("factory,usable", [
    pytest.param(AlwaysAhead, True, id="controller class"),
    pytest.param(lambda: AlwaysAhead(), True, id="function"),  # pylint: disable=unnecessary-lambda
    pytest.param(BlankGenerator, False, id="class without the methods"),
    pytest.param(registry, False, id="module"),
    pytest.param([1, 2], False, id="not callable"),
])
def test_implements(factory: object, usable: bool):
    assert implements('control_robot', 'reset')(factory) is usable


def test_pretty_name():
    assert pretty_name(_entry('left_hand_v2', 'mazebots.hands:LeftHand')) == "Left Hand V2 (mazebots)"
    assert pretty_name(_entry('solo', 'solo')) == "Solo (solo)"


def test_load_entry_points(monkeypatch: pytest.MonkeyPatch):
    controllers = _controllers(monkeypatch, _entry('always_ahead', 'tests.utils:AlwaysAhead'))
    assert controllers.load_entry_points() == ["Always Ahead (tests)"]
    assert controllers["Always Ahead (tests)"] is AlwaysAhead
    assert controllers["Idle"] is IdleController


def test_load_entry_points_only_once(monkeypatch: pytest.MonkeyPatch):
    controllers = _controllers(monkeypatch, _entry('always_ahead', 'tests.utils:AlwaysAhead'))
    controllers.load_entry_points()
    del controllers["Always Ahead (tests)"]
    assert controllers.load_entry_points() == []
    assert "Always Ahead (tests)" not in controllers


@pytest.mark.parametrize("value", [
    pytest.param('tests.utils:ScriptedRandom', id="not a controller"),
    pytest.param('tests.utils', id="module"),
    pytest.param('tests.utils:CONNECTED_PICKS', id="not callable"),
    pytest.param('tests.utils:NoSuchController', id="missing attribute"),
    pytest.param('tests.no_such_module:Controller', id="missing module"),
])
def test_load_entry_points_skips_bad_entries(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, value: str):
    controllers = _controllers(monkeypatch, _entry('bad', value), _entry('good', 'tests.utils:AlwaysAhead'))
    with caplog.at_level(logging.WARNING, logger='robomaze.registry'):
        assert controllers.load_entry_points() == ["Good (tests)"]
    assert "bad" in caplog.text
    assert set(controllers) == {"Idle", "Good (tests)"}


def test_builtin_registries():
    assert CONTROLLERS.group == 'robomaze.controller'
    assert GENERATORS.group == 'robomaze.generator'
    assert GENERATORS['blank'] is BlankGenerator
