import random

from esper import World

from brickgame.board.grid import Grid
from brickgame.components.game_state import GameState
from brickgame.components.score_board import ScoreBoard
from brickgame.components.speed import SpeedState
from brickgame.components.stage import Stage
from brickgame.config import GameConfig


def create_world(
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    """Build the world with the single game entity (stage, state, score, speed)."""
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random(config.random_seed))
    setattr(world, "config", config)

    first_level = config.speed_table[0].level if config.speed_table else 1
    world.create_entity(
        GameState(),
        Stage(grid=Grid(config.width, config.height)),
        ScoreBoard(),
        SpeedState(level=first_level, speed=config.speed),
    )
    return world
