# pylint: disable=missing-function-docstring,missing-module-docstring
from __future__ import annotations

from typing import Callable

import pytest

from robomaze.directions import Facing, Heading


__FACING_PAIRS: frozenset[tuple[Facing, Facing]] = frozenset({
    (Facing.AHEAD, Facing.BEHIND),
    (Facing.LEFT, Facing.RIGHT),
})

__INVERTED_FACINGS = dict(__FACING_PAIRS) | {
    b: a for a, b in __FACING_PAIRS
}


@pytest.mark.parametrize("facing", Facing)
def test_invert_facing(facing: Facing):
    inverted = facing.invert()
    assert inverted != facing, "invert() did not change facing"
    assert inverted == __INVERTED_FACINGS[facing], "invert() returned the wrong facing"
    assert inverted.invert() == facing, "invert() twice did not return to the original facing"


@pytest.mark.parametrize("steps,facing", [
    pytest.param(2, Facing.BEHIND, id="behind"),
    pytest.param(4, Facing.LEFT, id="left"),
    pytest.param(4, Facing.RIGHT, id="right"),
])
@pytest.mark.parametrize("heading", Heading)
def test_heading_turn_cycle(steps: int, facing: Facing, heading: Heading):
    seen = set()
    curr = heading
    for i in range(steps):
        assert curr not in seen, f"cycle ended too quickly (after {i} steps, stepped twice in {curr}, {seen=})"
        seen.add(curr)
        curr = curr.turn(facing)
    assert heading == curr, f"cycle didn't end after {steps} steps (started at {heading}, got to {curr}, {seen=})"
    assert len(seen) == steps, f"not enough unique steps: expected {steps}, actual {len(seen)}, {seen=}"


@pytest.mark.parametrize("heading", Heading)
def test_heading_turn_ahead(heading: Heading):
    assert heading.turn(Facing.AHEAD) is heading


@pytest.mark.parametrize("facing,expected", [
    pytest.param(Facing.BEHIND, Heading.turn_back, id="behind"),
    pytest.param(Facing.LEFT, Heading.turn_left, id="left"),
    pytest.param(Facing.RIGHT, Heading.turn_right, id="right"),
])
@pytest.mark.parametrize("heading", Heading)
def test_heading_turn_facing(facing: Facing, expected: Callable[[Heading], Heading], heading: Heading):
    assert heading.turn(facing) == expected(heading)


@pytest.mark.parametrize("heading,expected", [
    (Heading.NORTH, Heading.EAST),
    (Heading.EAST, Heading.SOUTH),
    (Heading.SOUTH, Heading.WEST),
    (Heading.WEST, Heading.NORTH),
])
def test_heading_turn_right_is_clockwise(heading: Heading, expected: Heading):
    assert heading.turn_right() == expected


@pytest.mark.parametrize("heading,offset", [
    (Heading.NORTH, (0, -1)),
    (Heading.EAST, (1, 0)),
    (Heading.SOUTH, (0, 1)),
    (Heading.WEST, (-1, 0)),
])
def test_heading_offset(heading: Heading, offset: tuple[int, int]):
    assert heading.offset == offset


@pytest.mark.parametrize("heading", Heading)
def test_heading_offset_back_cancels(heading: Heading):
    dx, dy = heading.offset
    back_dx, back_dy = heading.turn_back().offset
    assert (dx + back_dx, dy + back_dy) == (0, 0)


@pytest.mark.parametrize("heading", Heading)
def test_heading_from_str(heading: Heading):
    assert Heading.from_str(heading.name) == heading
    assert Heading.from_str(heading.name.lower()) == heading
    assert Heading.from_str(heading.name.upper()) == heading
    assert Heading.from_str(heading.name[0].lower()) == heading
    assert Heading.from_str(f"  {heading.name[0]} ") == heading


@pytest.mark.parametrize("heading", [
    '',
    'x',
    'q',
    'north east', 'ne',
    'south_west', 'sw',
    'northh',
])
def test_heading_from_bad_str(heading: str):
    with pytest.raises(ValueError):
        Heading.from_str(heading)


@pytest.mark.parametrize("facing,names", [
    pytest.param(Facing.AHEAD, ['ahead', 'a', 'front', 'Forward'], id="ahead"),
    pytest.param(Facing.RIGHT, ['right', 'R'], id="right"),
    pytest.param(Facing.BEHIND, ['behind', 'b', 'BACK'], id="behind"),
    pytest.param(Facing.LEFT, ['left', 'l'], id="left"),
])
def test_facing_from_str(facing: Facing, names: list[str]):
    for name in names:
        assert Facing.from_str(name) == facing


@pytest.mark.parametrize("facing", ['', 'up', 'down', 'fl'])
def test_facing_from_bad_str(facing: str):
    with pytest.raises(ValueError):
        Facing.from_str(facing)
