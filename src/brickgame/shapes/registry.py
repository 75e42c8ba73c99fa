from __future__ import annotations

import random
from dataclasses import dataclass
from logging import getLogger
from typing import Iterable, Tuple

from brickgame.board.grid import Grid
from brickgame.errors import DuplicateShapeError, EmptyCatalogError, MalformedShapeError, UnknownShapeError

LOGGER = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShapeDefinition:
    """Static footprint of a brick, drawn as rows of ``#`` (filled) and ``.`` (empty).

    Top-left origin. The definition never changes; ``grid()`` hands out a fresh
    grid each time.
    """

    name: str
    rows: Tuple[str, ...]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise MalformedShapeError("Shape name must be provided")
        # Validates the footprint once, at definition time.
        Grid.from_rows(self.rows)

    def grid(self) -> Grid:
        grid = Grid.from_rows(self.rows)
        tag = {"shape": self.name}
        for x, y in grid.occupied_cells():
            grid.set_tag(x, y, tag)
        return grid


class ShapeCatalog:
    """Named collection of shape definitions, the source of new bricks."""

    def __init__(self, definitions: Iterable[ShapeDefinition] = ()) -> None:
        self._definitions: dict[str, ShapeDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ShapeDefinition) -> None:
        if definition.name in self._definitions:
            raise DuplicateShapeError(definition.name)
        self._definitions[definition.name] = definition
        LOGGER.debug("Registered shape '%s'", definition.name)

    def definition(self, name: str) -> ShapeDefinition:
        try:
            return self._definitions[name]
        except KeyError as exc:
            raise UnknownShapeError(name) from exc

    def get(self, name: str) -> Grid:
        return self.definition(name).grid()

    def has(self, name: str) -> bool:
        return name in self._definitions

    def names(self) -> Tuple[str, ...]:
        return tuple(self._definitions)

    def all(self) -> Tuple[ShapeDefinition, ...]:
        return tuple(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def random_name(self, rng: random.Random | None = None) -> str:
        if not self._definitions:
            raise EmptyCatalogError("No shapes registered")
        return (rng or random).choice(self.names())

    def random_shape(self, rng: random.Random | None = None) -> Grid:
        return self.get(self.random_name(rng))
