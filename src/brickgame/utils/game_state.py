from __future__ import annotations

from esper import World

from brickgame.components.game_state import GameState, Phase
from brickgame.components.score_board import ScoreBoard
from brickgame.components.speed import SpeedState
from brickgame.components.stage import Stage
from brickgame.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState component not found")


def get_stage(world: World) -> Stage:
    for _, stage in world.get_component(Stage):
        return stage
    raise RuntimeError("Stage component not found")


def get_score_board(world: World) -> ScoreBoard:
    for _, board in world.get_component(ScoreBoard):
        return board
    raise RuntimeError("ScoreBoard component not found")


def get_speed_state(world: World) -> SpeedState:
    for _, speed in world.get_component(SpeedState):
        return speed
    raise RuntimeError("SpeedState component not found")


def set_phase(world: World, event_bus: EventBus, phase: Phase) -> None:
    """Replace the current phase and emit a change event when the mode differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    state.phase = phase
    if previous_mode != phase.mode:
        event_bus.emit(
            EVENT_GAME_MODE_CHANGED,
            previous_mode=previous_mode,
            new_mode=phase.mode,
        )
