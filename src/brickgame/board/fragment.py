from __future__ import annotations

from dataclasses import dataclass

from brickgame.board.grid import Grid, Region


@dataclass(frozen=True, slots=True)
class Vector:
    dx: int = 0
    dy: int = 0


DOWN = Vector(0, 1)
LEFT = Vector(-1, 0)
RIGHT = Vector(1, 0)
STILL = Vector(0, 0)


@dataclass(frozen=True, slots=True, eq=False)
class Fragment:
    """A brick grid anchored at an offset on the stage.

    Fragments are never mutated; every accepted move or rotation produces a new one.
    """

    offset_x: int
    offset_y: int
    grid: Grid

    @property
    def position(self) -> tuple[int, int]:
        return self.offset_x, self.offset_y

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def region(self, vector: Vector = STILL) -> Region:
        return Region(
            offset_x=self.offset_x + vector.dx,
            offset_y=self.offset_y + vector.dy,
            width=self.grid.width,
            height=self.grid.height,
        )

    def moved(self, vector: Vector) -> "Fragment":
        return Fragment(self.offset_x + vector.dx, self.offset_y + vector.dy, self.grid)

    def with_grid(self, grid: Grid) -> "Fragment":
        return Fragment(self.offset_x, self.offset_y, grid)
