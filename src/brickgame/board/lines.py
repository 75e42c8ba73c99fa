"""Full-row detection and compaction."""
from __future__ import annotations

from logging import getLogger
from typing import List

import numpy as np

from brickgame.board.grid import Grid
from brickgame.events.bus import EVENT_ROWS_CLEARED, EventBus

LOGGER = getLogger(__name__)


def detect_full_rows(grid: Grid) -> List[int]:
    """Indices of rows whose every cell is occupied, top to bottom."""
    full = np.all(grid.occupancy(), axis=0)
    return [int(y) for y in np.nonzero(full)[0]]


def _collapse_row(grid: Grid, row: int) -> None:
    for y in range(row, 0, -1):
        for x in range(grid.width):
            grid.set(x, y, grid.get(x, y - 1))
            grid.set_tag(x, y, grid.get_tag(x, y - 1) or None)
    for x in range(grid.width):
        grid.set(x, 0, False)
        grid.set_tag(x, 0, None)


def update_grid(grid: Grid, event_bus: EventBus | None = None) -> List[int]:
    """Remove full rows in place, shifting the rows above each one down.

    Rows are removed in the order detected, using the indices found before any
    shift. Publishes a rows-cleared event when at least one row was removed.
    """
    full_rows = detect_full_rows(grid)
    if not full_rows:
        return full_rows
    for row in full_rows:
        _collapse_row(grid, row)
    LOGGER.info("Cleared %d row(s): %s", len(full_rows), full_rows)
    if event_bus is not None:
        event_bus.emit(EVENT_ROWS_CLEARED, count=len(full_rows), rows=tuple(full_rows))
    return full_rows
