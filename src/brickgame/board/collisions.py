"""Decides whether a falling brick may occupy a candidate position on the stage."""
from __future__ import annotations

from logging import getLogger
from typing import List, Tuple

import numpy as np

from brickgame.board.fragment import STILL, Fragment, Vector
from brickgame.board.grid import Grid
from brickgame.board.ops import extract_region
from brickgame.errors import OutOfBoundsError
from brickgame.events.bus import EVENT_OUT_OF_BOUNDS, EventBus

LOGGER = getLogger(__name__)


def conflict_diff(first: Grid, second: Grid) -> List[Tuple[int, int]]:
    """Coordinates occupied in both equally sized grids."""
    both = np.logical_and(first.occupancy(), second.occupancy())
    return [(int(x), int(y)) for x, y in zip(*np.nonzero(both))]


def collisions(fragment: Fragment, stage: Grid, vector: Vector = STILL) -> List[Tuple[int, int]]:
    """Stage coordinates the fragment would overlap after moving by ``vector``.

    Raises OutOfBoundsError when the candidate position leaves the stage.
    """
    region = fragment.region(vector)
    under = extract_region(stage, region)
    return [
        (region.offset_x + x, region.offset_y + y)
        for x, y in conflict_diff(under, fragment.grid)
    ]


def can_move(
    fragment: Fragment,
    stage: Grid,
    vector: Vector = STILL,
    event_bus: EventBus | None = None,
) -> bool:
    """Return True when ``fragment`` moved by ``vector`` fits the stage without overlap.

    A candidate outside the stage is reported as not movable; when ``event_bus``
    is given an out-of-bounds event carrying the violated edges is published so
    listeners can tell a sideways block from hitting the floor.
    """
    try:
        overlaps = collisions(fragment, stage, vector)
    except OutOfBoundsError as error:
        LOGGER.debug("Move %s leaves the stage (%d violated edges)", vector, len(error.reasons))
        if event_bus is not None:
            event_bus.emit(EVENT_OUT_OF_BOUNDS, errors=error.reasons)
        return False
    return not overlaps
