from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List

from esper import World

from brickgame.config import GameConfig
from brickgame.events.bus import EVENT_TICK, Event, EventBus
from brickgame.shapes.factory import DEFAULT_SHAPES
from brickgame.shapes.registry import ShapeCatalog
from brickgame.systems.line_clear_system import LineClearSystem
from brickgame.systems.position import PositionSystem
from brickgame.systems.score_system import ScoreSystem
from brickgame.systems.speed_system import SpeedSystem
from brickgame.world import create_world


@dataclass
class Game:
    bus: EventBus
    world: World
    position: PositionSystem
    score: ScoreSystem
    speed: SpeedSystem


def build_game(
    width: int = 4,
    height: int = 4,
    *,
    shapes: Iterable[str] = ("four_by_four",),
    speed: int = 1000,
    seed: int = 0,
) -> Game:
    """Wire a small world with every rule system and a catalog limited to ``shapes``."""

    wanted = set(shapes)
    catalog = ShapeCatalog(d for d in DEFAULT_SHAPES if d.name in wanted)
    config = GameConfig(width=width, height=height, speed=speed, random_seed=seed)
    bus = EventBus()
    world = create_world(config, rng=random.Random(seed))
    LineClearSystem(world, bus)
    score = ScoreSystem(world, bus)
    speed_system = SpeedSystem(world, bus)
    position = PositionSystem(world, bus, catalog)
    return Game(bus=bus, world=world, position=position, score=score, speed=speed_system)


def drive_ticks(bus: EventBus, count: int = 1, dt: float = 1.0) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def record(bus: EventBus, name: str) -> List[Event]:
    """Subscribe a recorder to ``name`` and return the list it appends to."""

    received: List[Event] = []
    bus.subscribe(name, lambda sender, event: received.append(event))
    return received
