from dataclasses import dataclass

from brickgame.board.grid import Grid


@dataclass(slots=True)
class Stage:
    """The persistent grid that accumulates locked bricks."""
    grid: Grid
