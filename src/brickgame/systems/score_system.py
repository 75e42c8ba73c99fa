from __future__ import annotations

from typing import Any

from esper import World

from brickgame.constants import MULTI_ROW_BONUS, ROW_SCORE
from brickgame.events.bus import EVENT_ROWS_CLEARED, EVENT_SCORE_CHANGED, Event, EventBus
from brickgame.utils.game_state import get_score_board


def score_for_rows(count: int) -> int:
    """Score for clearing ``count`` rows in one pass: ``10*count + (count - 1)*5``."""
    return ROW_SCORE * count + (count - 1) * MULTI_ROW_BONUS


class ScoreSystem:
    """Accumulates score from cleared rows and republishes the running total."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_ROWS_CLEARED, self.on_rows_cleared)

    @property
    def score(self) -> int:
        return get_score_board(self.world).score

    def on_rows_cleared(self, sender: Any, event: Event) -> None:
        count = event.data.get("count")
        if not count:
            return
        board = get_score_board(self.world)
        board.add(score_for_rows(int(count)))
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=board.score,
            score_history=tuple(board.history),
        )
