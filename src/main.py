"""Entry point for the brick game.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
from arcade import Window, run, set_background_color, color
from brickgame.config import GameConfig
from brickgame.constants import CELL_SIZE, SIDE_PANEL_WIDTH, WINDOW_MARGIN
from brickgame.events.bus import EVENT_KEY_PRESS, EVENT_TICK, EventBus
from brickgame.logger import configure_logging
from brickgame.shapes.factory import create_default_catalog
from brickgame.systems.input import InputSystem
from brickgame.systems.line_clear_system import LineClearSystem
from brickgame.systems.position import PositionSystem
from brickgame.systems.render import RenderSystem
from brickgame.systems.score_system import ScoreSystem
from brickgame.systems.speed_system import SpeedSystem
from brickgame.world import create_world


class BrickGameWindow(Window):
    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        width = self.config.width * CELL_SIZE + SIDE_PANEL_WIDTH + WINDOW_MARGIN * 3
        height = max(self.config.height, self.config.preview_height + 8) * CELL_SIZE + WINDOW_MARGIN * 2
        super().__init__(width, height, "Brick Game")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.config)
        self.catalog = create_default_catalog()

        # Rules
        self.line_clear_system = LineClearSystem(self.world, self.event_bus)
        self.score_system = ScoreSystem(self.world, self.event_bus)
        self.speed_system = SpeedSystem(self.world, self.event_bus)
        self.position_system = PositionSystem(self.world, self.event_bus, self.catalog, config=self.config)

        # Interface
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(
            self.event_bus,
            self,
            preview_size=(self.config.preview_width, self.config.preview_height),
        )
        set_background_color(color.BLACK)
        self.position_system.start()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    configure_logging()
    window = BrickGameWindow()
    run()

if __name__ == "__main__":
    main()
