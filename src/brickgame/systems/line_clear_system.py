from typing import Any

from esper import World

from brickgame.board.grid import Grid
from brickgame.board.lines import update_grid
from brickgame.events.bus import EVENT_BEFORE_CLEAR, Event, EventBus


class LineClearSystem:
    """Compacts full rows out of the stage grid handed over before it is stored."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BEFORE_CLEAR, self.on_before_clear)

    def on_before_clear(self, sender: Any, event: Event) -> None:
        grid = event.data.get("grid")
        if not isinstance(grid, Grid):
            return
        update_grid(grid, self.event_bus)
