"""Region algebra over grids: extraction, combination and centring."""
from __future__ import annotations

from typing import List, Tuple

from brickgame.board.grid import Grid, Region
from brickgame.errors import Axis, BoundsViolation, Limit, OutOfBoundsError

Offset = Tuple[int, int]


def region_violations(grid: Grid, region: Region) -> List[BoundsViolation]:
    """Return every edge of ``region`` that falls outside ``grid``."""
    violations: List[BoundsViolation] = []
    if region.offset_x < 0:
        violations.append(BoundsViolation(Axis.X, Limit.MIN_VALUE_EXCEEDED))
    if region.offset_y < 0:
        violations.append(BoundsViolation(Axis.Y, Limit.MIN_VALUE_EXCEEDED))
    if region.offset_x + region.width > grid.width:
        violations.append(BoundsViolation(Axis.X, Limit.MAX_VALUE_EXCEEDED))
    if region.offset_y + region.height > grid.height:
        violations.append(BoundsViolation(Axis.Y, Limit.MAX_VALUE_EXCEEDED))
    return violations


def extract_region(grid: Grid, region: Region) -> Grid:
    """Copy the cells under ``region`` (tags included) into a new grid.

    Raises OutOfBoundsError listing all violated edges when the region does not
    fit inside ``grid``.
    """
    violations = region_violations(grid, region)
    if violations:
        raise OutOfBoundsError("Given region exceeds the bounds of the grid", violations)
    x0, y0 = region.offset_x, region.offset_y
    x1, y1 = x0 + region.width, y0 + region.height
    return Grid.from_arrays(grid.occupancy()[x0:x1, y0:y1], grid.tags()[x0:x1, y0:y1])


def combine(base: Grid, overlay: Grid, offset: Offset) -> Grid:
    """Lay ``overlay`` over a copy of ``base`` at ``offset`` using logical OR.

    Overlay cells that land outside ``base`` are skipped. Occupied overlay cells
    carry their tag onto the result.
    """
    offset_x, offset_y = offset
    result = base.copy()
    for x in range(overlay.width):
        dx = offset_x + x
        if not 0 <= dx < base.width:
            continue
        for y in range(overlay.height):
            dy = offset_y + y
            if not 0 <= dy < base.height:
                continue
            if overlay.get(x, y):
                result.set(dx, dy, True)
                tag = overlay.get_tag(x, y)
                if tag:
                    result.set_tag(dx, dy, tag)
    return result


def center_in(grid: Grid, width: int, height: int) -> Grid:
    """Place ``grid`` centred inside an empty ``width x height`` grid."""
    offset_x = (width - grid.width) // 2
    offset_y = (height - grid.height) // 2
    return combine(Grid(width, height), grid, (offset_x, offset_y))
