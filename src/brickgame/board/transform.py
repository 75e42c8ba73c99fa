"""Rotate and flip transforms. Every function returns a new grid."""
from __future__ import annotations

from brickgame.board.grid import Grid


def rotate_right(grid: Grid) -> Grid:
    """Rotate 90 degrees clockwise: reverse each column, then transpose."""
    return Grid.from_arrays(grid.occupancy()[:, ::-1].T, grid.tags()[:, ::-1].T)


def rotate_left(grid: Grid) -> Grid:
    """Rotate 90 degrees counterclockwise: reverse column order, then transpose."""
    return Grid.from_arrays(grid.occupancy()[::-1, :].T, grid.tags()[::-1, :].T)


def flip_vertical(grid: Grid) -> Grid:
    return Grid.from_arrays(grid.occupancy()[:, ::-1], grid.tags()[:, ::-1])


def flip_horizontal(grid: Grid) -> Grid:
    return Grid.from_arrays(grid.occupancy()[::-1, :], grid.tags()[::-1, :])
