"""Exception types raised by the brick game core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class BrickGameError(Exception):
    """Base class for every error raised by the core."""


class OutOfRangeError(BrickGameError, IndexError):
    """Single-cell addressing outside the grid dimensions."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Cell ({x}, {y}) exceeds the {width}x{height} grid boundaries")
        self.x = x
        self.y = y


class Axis(Enum):
    X = "X"
    Y = "Y"


class Limit(Enum):
    MIN_VALUE_EXCEEDED = "min_value_exceeded"
    MAX_VALUE_EXCEEDED = "max_value_exceeded"


@dataclass(frozen=True, slots=True)
class BoundsViolation:
    """One violated edge of a region: the axis and which limit was crossed."""

    axis: Axis
    limit: Limit


class OutOfBoundsError(BrickGameError):
    """A region does not fit entirely inside the grid it addresses.

    ``reasons`` holds every violated edge, not only the first one found.
    """

    def __init__(self, message: str, reasons: Iterable[BoundsViolation]) -> None:
        super().__init__(message)
        self.reasons: frozenset[BoundsViolation] = frozenset(reasons)

    def violates(self, axis: Axis, limit: Limit) -> bool:
        return BoundsViolation(axis, limit) in self.reasons


class MalformedShapeError(BrickGameError, ValueError):
    """Empty or non-rectangular source matrix."""


class DuplicateShapeError(BrickGameError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Shape '{name}' already registered")
        self.name = name


class UnknownShapeError(BrickGameError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Shape '{name}' is not registered")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class EmptyCatalogError(BrickGameError, LookupError):
    """Random selection requested from a catalog with no shapes."""
