"""Boolean cell field with per-cell tags.

Cells are addressed as ``(x, y)``: ``x`` is the column, ``y`` the row, with the
origin in the top-left corner. Raw matrices are column-major, so ``raw[x][y]``
is the cell at column ``x`` and row ``y``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Sequence

import numpy as np

from brickgame.errors import MalformedShapeError, OutOfRangeError

FILLED_CHAR = "#"
EMPTY_CHAR = "."

Tag = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Region:
    """Rectangular address into a grid. May describe out-of-range areas."""

    offset_x: int
    offset_y: int
    width: int
    height: int


class Grid:
    """Fixed-size ``width x height`` field of occupied flags plus opaque tags."""

    __slots__ = ("_cells", "_tags")

    def __init__(self, width: int, height: int) -> None:
        width = int(width)
        height = int(height)
        if width < 1 or height < 1:
            raise MalformedShapeError("The grid must be at least 1x1 in size")
        self._cells = np.zeros((width, height), dtype=bool)
        self._tags = np.full((width, height), None, dtype=object)

    @classmethod
    def from_arrays(cls, cells: np.ndarray, tags: np.ndarray | None = None) -> "Grid":
        """Build a grid from a (width, height) occupancy array and optional tag array."""
        cells = np.array(cells, dtype=bool, copy=True)
        if cells.ndim != 2 or 0 in cells.shape:
            raise MalformedShapeError("The matrix must be a non-empty 2-D array")
        grid = cls.__new__(cls)
        grid._cells = cells
        if tags is None:
            grid._tags = np.full(cells.shape, None, dtype=object)
        else:
            grid._tags = np.array(tags, dtype=object, copy=True)
        return grid

    @classmethod
    def from_matrix(cls, raw: Sequence[Sequence[Any]]) -> "Grid":
        """Build a grid from a column-major matrix.

        Values may be booleans/ints or mappings with ``occupied`` and ``tag`` keys.
        """
        if len(raw) == 0 or len(raw[0]) == 0:
            raise MalformedShapeError("The matrix must be at least 1x1 in size")
        height = len(raw[0])
        for column in raw:
            if len(column) != height:
                raise MalformedShapeError("The matrix provided has various column lengths")
        grid = cls(len(raw), height)
        for x, column in enumerate(raw):
            for y, value in enumerate(column):
                if isinstance(value, Mapping):
                    grid._cells[x, y] = bool(value.get("occupied", False))
                    if value.get("tag") is not None:
                        grid._tags[x, y] = value["tag"]
                else:
                    grid._cells[x, y] = bool(value)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[str], *, filled: str = FILLED_CHAR) -> "Grid":
        """Build a grid from row strings, e.g. ``("##.", ".##")``."""
        if len(rows) == 0 or len(rows[0]) == 0:
            raise MalformedShapeError("The matrix must be at least 1x1 in size")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MalformedShapeError("The rows provided have various lengths")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                grid._cells[x, y] = char == filled
        return grid

    # -- dimensions -----------------------------------------------------

    @property
    def width(self) -> int:
        return int(self._cells.shape[0])

    @property
    def height(self) -> int:
        return int(self._cells.shape[1])

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeError(x, y, self.width, self.height)

    # -- cell access ----------------------------------------------------

    def get(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self._cells[x, y])

    def set(self, x: int, y: int, value: bool) -> "Grid":
        self._check(x, y)
        self._cells[x, y] = bool(value)
        return self

    def toggle(self, x: int, y: int) -> "Grid":
        return self.set(x, y, not self.get(x, y))

    def get_tag(self, x: int, y: int) -> Tag:
        self._check(x, y)
        tag = self._tags[x, y]
        return tag if tag is not None else {}

    def set_tag(self, x: int, y: int, tag: Tag | None) -> "Grid":
        self._check(x, y)
        self._tags[x, y] = tag
        return self

    def clear(self) -> "Grid":
        """Mark every cell unoccupied. Tags are left untouched."""
        self._cells[:, :] = False
        return self

    def copy(self) -> "Grid":
        return Grid.from_arrays(self._cells, self._tags)

    # -- views ----------------------------------------------------------

    def occupancy(self) -> np.ndarray:
        """Read-only ``(width, height)`` boolean view of the cells."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def tags(self) -> np.ndarray:
        view = self._tags.view()
        view.flags.writeable = False
        return view

    def to_matrix(self) -> list[list[bool]]:
        return [[bool(value) for value in column] for column in self._cells]

    def occupied_cells(self) -> Iterator[tuple[int, int]]:
        for x, y in zip(*np.nonzero(self._cells)):
            yield int(x), int(y)

    def count_occupied(self) -> int:
        return int(np.count_nonzero(self._cells))

    def is_empty(self) -> bool:
        return not self._cells.any()

    def to_rows(self) -> list[str]:
        return [
            "".join(FILLED_CHAR if self._cells[x, y] else EMPTY_CHAR for x in range(self.width))
            for y in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        if self.dimensions != other.dimensions:
            return False
        if not np.array_equal(self._cells, other._cells):
            return False
        return all(
            self.get_tag(x, y) == other.get_tag(x, y)
            for x in range(self.width)
            for y in range(self.height)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, occupied={self.count_occupied()})"

    def __str__(self) -> str:
        return "\n".join(self.to_rows())
