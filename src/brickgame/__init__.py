"""Simulation core of a falling-block puzzle game.

Exports the grid algebra, the shape catalog and the world/system wiring:
- Grid, Region: cell field and rectangular addresses into it
- Fragment, Vector: a brick anchored on the stage, and a move
- ShapeCatalog, ShapeDefinition: named brick footprints
- EventBus, Event: synchronous publish/subscribe
- create_world, GameConfig: world construction
"""

from .board.fragment import Fragment, Vector
from .board.grid import Grid, Region
from .config import GameConfig
from .events.bus import Event, EventBus
from .shapes.factory import create_default_catalog
from .shapes.registry import ShapeCatalog, ShapeDefinition
from .world import create_world

__all__ = [
    "Event",
    "EventBus",
    "Fragment",
    "GameConfig",
    "Grid",
    "Region",
    "ShapeCatalog",
    "ShapeDefinition",
    "Vector",
    "create_default_catalog",
    "create_world",
]
