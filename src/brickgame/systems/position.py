"""Game loop: owns the falling brick, gravity and the lock/spawn cycle."""
from __future__ import annotations

import random
from logging import getLogger
from typing import Any, Mapping

from esper import World

from brickgame.board.collisions import can_move
from brickgame.board.fragment import DOWN, STILL, Fragment, Vector
from brickgame.board.grid import Grid
from brickgame.board.ops import combine
from brickgame.board.transform import rotate_right
from brickgame.components.game_state import (
    FallingFree,
    GameMode,
    GameOver,
    Locking,
    RowsClearing,
)
from brickgame.config import GameConfig
from brickgame.constants import ACTION_MOVE, ACTION_ROTATE_RIGHT
from brickgame.errors import Axis, Limit
from brickgame.events.bus import (
    EVENT_BEFORE_CLEAR,
    EVENT_BEFORE_RENDER,
    EVENT_CONTROLS,
    EVENT_CYCLE_ENDED,
    EVENT_GAME_OVER,
    EVENT_NEW_FRAGMENT,
    EVENT_OUT_OF_BOUNDS,
    EVENT_POSITION_CHANGED,
    EVENT_SPEED_CHANGED,
    EVENT_TICK,
    Event,
    EventBus,
)
from brickgame.shapes.registry import ShapeCatalog
from brickgame.utils.game_state import get_game_state, get_score_board, get_stage, set_phase
from brickgame.utils.gravity_timer import GravityTimer

LOGGER = getLogger(__name__)


def spawn_column(stage_width: int) -> int:
    """Horizontal midpoint of the stage, shifted one column left when non-zero."""
    offset_x = stage_width // 2
    return offset_x - 1 if offset_x else 0


class PositionSystem:
    """Moves the falling brick on intents and runs the lock, clear and spawn cycle.

    Intents arrive as ``controls_event``s, either from the input adapter or from
    the gravity timer (``auto=True``). Only the gravity path and a downward
    move against the stage floor lock the brick; a blocked sideways move or a
    rotation that does not fit is ignored.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        catalog: ShapeCatalog,
        *,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.catalog = catalog
        self.config = config or getattr(world, "config", None) or GameConfig()
        self._rng = rng or getattr(world, "random", None) or random.Random(self.config.random_seed)
        self.gravity = GravityTimer(self.config.speed, self._on_gravity)
        self.event_bus.subscribe(EVENT_CONTROLS, self.on_controls)
        self.event_bus.subscribe(EVENT_CYCLE_ENDED, self.on_cycle_ended)
        self.event_bus.subscribe(EVENT_SPEED_CHANGED, self.on_speed_changed)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    # -- state ----------------------------------------------------------

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    @property
    def fragment(self) -> Fragment | None:
        return get_game_state(self.world).fragment

    @property
    def stage(self) -> Grid:
        return get_stage(self.world).grid

    # -- lifecycle ------------------------------------------------------

    def start(self) -> None:
        """Spawn the first brick and start gravity."""
        if self.mode != GameMode.IDLE:
            raise RuntimeError(f"Game already started (mode={self.mode.name})")
        self.spawn()

    def spawn(self, grid: Grid | None = None, *, offset_x: int | None = None, offset_y: int | None = None) -> bool:
        """Place a new falling brick; returns False when it ends the game.

        Without ``grid`` the queued next brick (or a random one) is used and a
        new next brick is drawn from the catalog.
        """
        state = get_game_state(self.world)
        if state.mode in (GameMode.GAME_OVER, GameMode.LOCKING):
            raise RuntimeError(f"Cannot spawn a brick in mode {state.mode.name}")
        if grid is None:
            grid = state.next_grid if state.next_grid is not None else self.catalog.random_shape(self._rng)
            state.next_grid = self.catalog.random_shape(self._rng)
        elif state.next_grid is None:
            state.next_grid = self.catalog.random_shape(self._rng)
        stage = self.stage
        fragment = Fragment(
            offset_x=spawn_column(stage.width) if offset_x is None else offset_x,
            offset_y=self.config.spawn_row if offset_y is None else offset_y,
            grid=grid,
        )
        if not can_move(fragment, stage, STILL):
            self._game_over(fragment)
            return False
        set_phase(self.world, self.event_bus, FallingFree(fragment))
        LOGGER.debug("Spawned %dx%d brick at %s", grid.width, grid.height, fragment.position)
        self.event_bus.emit(
            EVENT_NEW_FRAGMENT,
            fragment=fragment,
            grid=grid,
            next_grid=state.next_grid,
        )
        self.render()
        self.gravity.arm()
        return True

    def render(self) -> Grid:
        """Publish the stage combined with the falling brick."""
        fragment = self.fragment
        if fragment is None:
            preview = self.stage.copy()
        else:
            preview = combine(self.stage, fragment.grid, fragment.position)
        self.event_bus.emit(EVENT_BEFORE_RENDER, grid=preview)
        return preview

    def _game_over(self, fragment: Fragment) -> None:
        self.gravity.cancel()
        set_phase(self.world, self.event_bus, GameOver(fragment))
        score = get_score_board(self.world).score
        LOGGER.info("Game over at score %d", score)
        self.event_bus.emit(EVENT_GAME_OVER, fragment=fragment, score=score)

    # -- gravity --------------------------------------------------------

    def _on_gravity(self) -> None:
        self.event_bus.emit(
            EVENT_CONTROLS,
            coords={"action": ACTION_MOVE, "offset_x": DOWN.dx, "offset_y": DOWN.dy},
            auto=True,
        )

    def on_tick(self, sender: Any, event: Event) -> None:
        if self.mode != GameMode.FALLING_FREE:
            return
        dt = event.data.get("dt", 1 / 60)
        self.gravity.advance(float(dt) * 1000.0)

    def on_speed_changed(self, sender: Any, event: Event) -> None:
        speed = event.data.get("speed")
        if speed is None:
            return
        self.config.speed = int(speed)
        self.gravity.set_period(speed)
        LOGGER.debug("Gravity delay set to %sms", speed)

    # -- intents --------------------------------------------------------

    def on_controls(self, sender: Any, event: Event) -> None:
        state = get_game_state(self.world)
        if not isinstance(state.phase, FallingFree):
            return
        coords: Mapping[str, Any] = event.data.get("coords") or {}
        auto = bool(event.data.get("auto"))
        action = coords.get("action")
        if action == ACTION_MOVE:
            vector = Vector(int(coords.get("offset_x") or 0), int(coords.get("offset_y") or 0))
            self._move(state.phase.fragment, vector, auto)
        elif action == ACTION_ROTATE_RIGHT:
            self._rotate(state.phase.fragment)
        else:
            LOGGER.warning("Ignoring controls event with unknown action %r", action)

    def _move(self, fragment: Fragment, vector: Vector, auto: bool) -> None:
        hit_floor = False

        def on_out_of_bounds(sender: Any, event: Event) -> None:
            nonlocal hit_floor
            errors = event.data.get("errors") or ()
            hit_floor = any(
                error.axis == Axis.Y and error.limit == Limit.MAX_VALUE_EXCEEDED for error in errors
            )

        self.event_bus.subscribe_once(EVENT_OUT_OF_BOUNDS, on_out_of_bounds)
        try:
            movable = can_move(fragment, self.stage, vector, self.event_bus)
        finally:
            self.event_bus.unsubscribe(EVENT_OUT_OF_BOUNDS, on_out_of_bounds)

        if movable:
            self._commit(fragment, fragment.moved(vector))
            if auto:
                self.gravity.arm()
        elif auto or (hit_floor and vector.dy > 0):
            self.event_bus.emit(EVENT_CYCLE_ENDED, fragment=fragment)

    def _rotate(self, fragment: Fragment) -> None:
        candidate = fragment.with_grid(rotate_right(fragment.grid))
        if can_move(candidate, self.stage, STILL):
            self._commit(fragment, candidate)

    def _commit(self, old: Fragment, new: Fragment) -> None:
        self.event_bus.emit(EVENT_POSITION_CHANGED, old_position=old, new_position=new)
        set_phase(self.world, self.event_bus, FallingFree(new))
        self.render()

    # -- locking --------------------------------------------------------

    def on_cycle_ended(self, sender: Any, event: Event) -> None:
        state = get_game_state(self.world)
        if not isinstance(state.phase, FallingFree):
            return
        self.lock()

    def lock(self) -> None:
        """Merge the falling brick into the stage, clear rows and spawn the next brick."""
        state = get_game_state(self.world)
        if not isinstance(state.phase, FallingFree):
            raise RuntimeError(f"No falling brick to lock (mode={state.mode.name})")
        fragment = state.phase.fragment
        self.gravity.cancel()
        set_phase(self.world, self.event_bus, Locking(fragment))
        merged = combine(self.stage, fragment.grid, fragment.position)
        LOGGER.info("Locked %dx%d brick at %s", fragment.width, fragment.height, fragment.position)

        set_phase(self.world, self.event_bus, RowsClearing(merged))
        self.event_bus.emit(EVENT_BEFORE_CLEAR, grid=merged)
        get_stage(self.world).grid = merged
        self.spawn()
