from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from brickgame.components.speed import SpeedLevel, speed_table_from_rows
from brickgame.constants import (
    DEFAULT_SPEED,
    DEFAULT_SPEED_TABLE,
    PREVIEW_HEIGHT,
    PREVIEW_WIDTH,
    SPAWN_ROW,
    STAGE_HEIGHT,
    STAGE_WIDTH,
)


@dataclass
class GameConfig:
    width: int = STAGE_WIDTH
    height: int = STAGE_HEIGHT
    speed: int = DEFAULT_SPEED
    spawn_row: int = SPAWN_ROW
    preview_width: int = PREVIEW_WIDTH
    preview_height: int = PREVIEW_HEIGHT
    random_seed: Optional[int] = None
    speed_table: Tuple[SpeedLevel, ...] = field(
        default_factory=lambda: speed_table_from_rows(DEFAULT_SPEED_TABLE)
    )

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Stage must be at least 1x1 in size")
        if self.speed <= 0:
            raise ValueError("Speed must be a positive delay in milliseconds")
