from __future__ import annotations

from typing import Any, Dict, Tuple

from brickgame.board.grid import Grid
from brickgame.board.ops import center_in
from brickgame.constants import CELL_SIZE, PREVIEW_HEIGHT, PREVIEW_WIDTH, WINDOW_MARGIN
from brickgame.events.bus import (
    EVENT_BEFORE_RENDER,
    EVENT_GAME_OVER,
    EVENT_LEVEL_UPDATED,
    EVENT_NEW_FRAGMENT,
    EVENT_SCORE_CHANGED,
    Event,
    EventBus,
)

Color = Tuple[int, int, int]

SHAPE_COLORS: Dict[str, Color] = {
    "long_line": (70, 170, 170),
    "l_shape_left": (70, 90, 180),
    "l_shape_right": (200, 130, 60),
    "zigzag_shape_z": (180, 60, 60),
    "zigzag_shape_s": (80, 170, 80),
    "four_by_four": (200, 190, 80),
    "t_shape": (170, 80, 160),
}
DEFAULT_CELL_COLOR: Color = (200, 200, 200)
EMPTY_CELL_COLOR: Color = (30, 30, 40)
GRID_LINE_COLOR: Color = (50, 50, 60)


class RenderSystem:
    """Draws the latest stage preview, the next brick and the score panel."""

    def __init__(self, event_bus: EventBus, window, *, preview_size: Tuple[int, int] = (PREVIEW_WIDTH, PREVIEW_HEIGHT)):
        self.event_bus = event_bus
        self.window = window
        self.preview_size = preview_size
        self.stage_grid: Grid | None = None
        self.next_grid: Grid | None = None
        self.score = 0
        self.level = 1
        self.game_over = False
        self.event_bus.subscribe(EVENT_BEFORE_RENDER, self.on_before_render)
        self.event_bus.subscribe(EVENT_NEW_FRAGMENT, self.on_new_fragment)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_LEVEL_UPDATED, self.on_level_updated)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    def on_before_render(self, sender: Any, event: Event) -> None:
        self.stage_grid = event.data.get("grid")

    def on_new_fragment(self, sender: Any, event: Event) -> None:
        next_grid = event.data.get("next_grid")
        if next_grid is None:
            return
        width, height = self.preview_size
        if next_grid.width <= width and next_grid.height <= height:
            next_grid = center_in(next_grid, width, height)
        self.next_grid = next_grid

    def on_score_changed(self, sender: Any, event: Event) -> None:
        self.score = int(event.data.get("score", self.score))

    def on_level_updated(self, sender: Any, event: Event) -> None:
        self.level = int(event.data.get("level", self.level))

    def on_game_over(self, sender: Any, event: Event) -> None:
        self.game_over = True

    @staticmethod
    def cell_color(grid: Grid, x: int, y: int) -> Color:
        if not grid.get(x, y):
            return EMPTY_CELL_COLOR
        shape = grid.get_tag(x, y).get("shape")
        return SHAPE_COLORS.get(shape, DEFAULT_CELL_COLOR)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        if self.stage_grid is not None:
            self._draw_grid(arcade, self.stage_grid, WINDOW_MARGIN, self.window.height - WINDOW_MARGIN)
        panel_left = WINDOW_MARGIN * 2 + (self.stage_grid.width if self.stage_grid else 0) * CELL_SIZE
        top = self.window.height - WINDOW_MARGIN
        arcade.draw_text("Next", panel_left, top - 14, arcade.color.WHITE, 12)
        if self.next_grid is not None:
            self._draw_grid(arcade, self.next_grid, panel_left, top - 24)
        text_y = top - 24 - self.preview_size[1] * CELL_SIZE - 30
        arcade.draw_text(f"Score: {self.score}", panel_left, text_y, arcade.color.WHITE, 14)
        arcade.draw_text(f"Level: {self.level}", panel_left, text_y - 24, arcade.color.WHITE, 14)
        if self.game_over:
            arcade.draw_text("GAME OVER", panel_left, text_y - 60, arcade.color.RED, 18)

    def _draw_grid(self, arcade, grid: Grid, left: float, top: float) -> None:
        # Row 0 is the top of the grid; arcade's y axis grows upwards.
        for x in range(grid.width):
            for y in range(grid.height):
                cell_left = left + x * CELL_SIZE
                cell_top = top - y * CELL_SIZE
                arcade.draw_lrbt_rectangle_filled(
                    cell_left, cell_left + CELL_SIZE, cell_top - CELL_SIZE, cell_top,
                    self.cell_color(grid, x, y),
                )
                arcade.draw_lrbt_rectangle_outline(
                    cell_left, cell_left + CELL_SIZE, cell_top - CELL_SIZE, cell_top,
                    GRID_LINE_COLOR, 1,
                )
