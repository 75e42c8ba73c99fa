from brickgame.board.collisions import can_move, collisions, conflict_diff
from brickgame.board.fragment import DOWN, LEFT, RIGHT, STILL, Fragment, Vector
from brickgame.board.grid import Grid
from brickgame.errors import Axis, BoundsViolation, Limit
from brickgame.events.bus import EVENT_OUT_OF_BOUNDS, EventBus
from tests.helpers import record


SQUARE = ("##", "##")


def test_conflict_diff_lists_shared_cells():
    first = Grid.from_rows(("##", ".."))
    second = Grid.from_rows(("#.", "#."))
    assert conflict_diff(first, second) == [(0, 0)]


def test_fragment_fits_on_empty_stage():
    stage = Grid(4, 4)
    fragment = Fragment(1, 2, Grid.from_rows(SQUARE))
    assert can_move(fragment, stage, STILL)
    assert can_move(fragment, stage, LEFT)
    assert not can_move(fragment, stage, DOWN)


def test_collisions_are_reported_in_stage_coordinates():
    stage = Grid.from_rows(("....", "....", "..#.", "...."))
    fragment = Fragment(1, 0, Grid.from_rows(SQUARE))
    assert collisions(fragment, stage, STILL) == []
    assert collisions(fragment, stage, DOWN) == [(2, 2)]
    assert not can_move(fragment, stage, DOWN)
    assert can_move(fragment, stage, Vector(-1, 1))


def test_floor_publishes_out_of_bounds_reasons():
    bus = EventBus()
    events = record(bus, EVENT_OUT_OF_BOUNDS)
    stage = Grid(4, 4)
    fragment = Fragment(0, 2, Grid.from_rows(SQUARE))

    assert not can_move(fragment, stage, DOWN, bus)
    assert len(events) == 1
    assert events[0].data["errors"] == {BoundsViolation(Axis.Y, Limit.MAX_VALUE_EXCEEDED)}

    assert not can_move(fragment, stage, LEFT, bus)
    assert events[1].data["errors"] == {BoundsViolation(Axis.X, Limit.MIN_VALUE_EXCEEDED)}


def test_blocked_by_cells_does_not_publish():
    bus = EventBus()
    events = record(bus, EVENT_OUT_OF_BOUNDS)
    stage = Grid.from_rows(("...#", "...."))
    fragment = Fragment(1, 0, Grid.from_rows(SQUARE))
    assert not can_move(fragment, stage, RIGHT, bus)
    assert events == []
