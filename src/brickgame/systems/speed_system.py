from __future__ import annotations

from logging import getLogger
from typing import Any, Sequence

from esper import World

from brickgame.components.speed import SpeedLevel
from brickgame.events.bus import EVENT_LEVEL_UPDATED, EVENT_SCORE_CHANGED, EVENT_SPEED_CHANGED, Event, EventBus
from brickgame.utils.game_state import get_speed_state

LOGGER = getLogger(__name__)


def level_for_score(table: Sequence[SpeedLevel], score: int) -> SpeedLevel | None:
    for entry in table:
        if entry.matches_score(score):
            return entry
    return None


class SpeedSystem:
    """Looks the score up in the speed table and announces level changes.

    Every score change that matches a table entry publishes ``level_updated``;
    ``speed_changed`` follows only when the level actually differs.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        table: Sequence[SpeedLevel] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        config = getattr(world, "config", None)
        if table is None:
            table = config.speed_table if config is not None else ()
        self.table: tuple[SpeedLevel, ...] = tuple(table)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)

    def on_score_changed(self, sender: Any, event: Event) -> None:
        score = event.data.get("score")
        if score is None:
            return
        entry = level_for_score(self.table, int(score))
        if entry is None:
            return
        payload = {"speed": entry.speed, "level": entry.level, "score": int(score)}
        self.event_bus.emit(EVENT_LEVEL_UPDATED, **payload)
        state = get_speed_state(self.world)
        if state.level == entry.level:
            return
        state.level = entry.level
        state.speed = entry.speed
        LOGGER.info("Level %d reached at score %d (gravity %dms)", entry.level, score, entry.speed)
        self.event_bus.emit(EVENT_SPEED_CHANGED, **payload)
