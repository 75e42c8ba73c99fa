import random

from brickgame.board.grid import Grid
from brickgame.components.game_state import GameMode
from brickgame.components.speed import SpeedLevel
from brickgame.config import GameConfig
from brickgame.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_GAME_OVER,
    EVENT_NEW_FRAGMENT,
    EVENT_ROWS_CLEARED,
    EVENT_SCORE_CHANGED,
    EVENT_SPEED_CHANGED,
    EventBus,
)
from brickgame.shapes.factory import create_default_catalog
from brickgame.systems.line_clear_system import LineClearSystem
from brickgame.systems.position import PositionSystem
from brickgame.systems.score_system import ScoreSystem
from brickgame.systems.speed_system import SpeedSystem
from brickgame.utils.game_state import get_score_board, get_speed_state
from brickgame.world import create_world
from tests.helpers import build_game, drive_ticks, record


def test_full_row_is_cleared_and_scored():
    game = build_game()
    cleared = record(game.bus, EVENT_ROWS_CLEARED)
    scores = record(game.bus, EVENT_SCORE_CHANGED)

    game.position.spawn(Grid.from_rows(("####",)), offset_x=0)
    drive_ticks(game.bus, count=3)
    assert game.position.fragment.position == (0, 3)
    assert cleared == []

    drive_ticks(game.bus)

    assert [event.data["rows"] for event in cleared] == [(3,)]
    assert [event.data["score"] for event in scores] == [10]
    assert game.score.score == 10
    assert game.position.stage.is_empty()
    assert game.position.fragment.grid.to_rows() == ["##", "##"]
    assert game.position.fragment.position == (1, 0)
    assert game.position.mode == GameMode.FALLING_FREE


def test_level_up_speeds_up_gravity():
    table = (SpeedLevel(1, 1000, 0, 9), SpeedLevel(2, 200, 10))
    config = GameConfig(width=4, height=4, speed=1000, random_seed=3, speed_table=table)
    bus = EventBus()
    world = create_world(config, rng=random.Random(3))
    LineClearSystem(world, bus)
    ScoreSystem(world, bus)
    SpeedSystem(world, bus)
    catalog = create_default_catalog()
    position = PositionSystem(world, bus, catalog)
    speeds = record(bus, EVENT_SPEED_CHANGED)

    position.spawn(Grid.from_rows(("####",)), offset_x=0, offset_y=3)
    drive_ticks(bus)

    assert len(speeds) == 1
    assert get_speed_state(world).level == 2
    assert position.gravity.period == 200
    assert position.gravity.remaining == 200


def test_stack_reaching_the_top_ends_the_game():
    game = build_game(3, 4)
    modes = record(game.bus, EVENT_GAME_MODE_CHANGED)
    overs = record(game.bus, EVENT_GAME_OVER)
    game.position.start()

    drive_ticks(game.bus, count=3)
    assert game.position.stage.to_rows() == ["...", "...", "##.", "##."]

    drive_ticks(game.bus)
    assert game.position.mode == GameMode.GAME_OVER
    assert game.position.stage.to_rows() == ["##.", "##.", "##.", "##."]
    assert len(overs) == 1
    assert modes[-1].data["new_mode"] == GameMode.GAME_OVER
    assert get_score_board(game.world).score == 0

    drive_ticks(game.bus, count=5)
    assert len(overs) == 1


def test_vertical_line_from_catalog_locks_on_the_floor():
    game = build_game(shapes=("long_line",))
    spawned = record(game.bus, EVENT_NEW_FRAGMENT)

    assert game.position.spawn(offset_x=0)
    assert game.position.fragment.grid.dimensions == (1, 4)

    drive_ticks(game.bus)

    assert game.position.stage.to_rows() == ["#...", "#...", "#...", "#..."]
    assert len(spawned) == 2
    assert game.position.mode == GameMode.FALLING_FREE
    assert game.score.score == 0
