"""Game state resource holding the brick lifecycle as explicit phases.

Each phase carries exactly the data valid in it: there is a falling fragment
only while it falls or locks, and nothing moves once the game is over.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Optional, Union

from brickgame.board.fragment import Fragment
from brickgame.board.grid import Grid


class GameMode(Enum):
    IDLE = auto()
    FALLING_FREE = auto()
    LOCKING = auto()
    ROWS_CLEARING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class Idle:
    mode: ClassVar[GameMode] = GameMode.IDLE


@dataclass(frozen=True, slots=True)
class FallingFree:
    fragment: Fragment
    mode: ClassVar[GameMode] = GameMode.FALLING_FREE


@dataclass(frozen=True, slots=True)
class Locking:
    fragment: Fragment
    mode: ClassVar[GameMode] = GameMode.LOCKING


@dataclass(frozen=True, slots=True)
class RowsClearing:
    grid: Grid
    mode: ClassVar[GameMode] = GameMode.ROWS_CLEARING


@dataclass(frozen=True, slots=True)
class GameOver:
    fragment: Fragment
    mode: ClassVar[GameMode] = GameMode.GAME_OVER


Phase = Union[Idle, FallingFree, Locking, RowsClearing, GameOver]


@dataclass
class GameState:
    """Singleton component storing the current phase and the upcoming brick."""
    phase: Phase = field(default_factory=Idle)
    next_grid: Optional[Grid] = None

    @property
    def mode(self) -> GameMode:
        return self.phase.mode

    @property
    def fragment(self) -> Optional[Fragment]:
        if isinstance(self.phase, (FallingFree, Locking, GameOver)):
            return self.phase.fragment
        return None
