import pytest

from brickgame.components.game_state import GameMode
from brickgame.config import GameConfig
from brickgame.utils.game_state import get_game_state, get_score_board, get_speed_state, get_stage
from brickgame.world import create_world


def test_create_world_builds_the_game_entity():
    world = create_world(GameConfig(width=10, height=20, speed=700))
    assert get_stage(world).grid.dimensions == (10, 20)
    assert get_game_state(world).mode == GameMode.IDLE
    assert get_game_state(world).fragment is None
    assert get_score_board(world).score == 0
    speed = get_speed_state(world)
    assert speed.level == 1
    assert speed.speed == 700


def test_default_config_matches_classic_stage():
    config = GameConfig()
    assert (config.width, config.height) == (16, 30)
    assert config.speed == 1000
    assert len(config.speed_table) == 9


@pytest.mark.parametrize("kwargs", [{"width": 0}, {"height": -1}, {"speed": 0}])
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
