"""Grid model for the Sokoban puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Callable, Sequence


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` step; y grows downward."""
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Tile(IntEnum):
    """Contents of a single cell.

    The integer values match the codes used in level tables.
    """

    EMPTY = 0
    WALL = 1
    TARGET = 2
    BOX = 3
    BOX_ON_TARGET = 4

    @property
    def has_box(self) -> bool:
        return self in (Tile.BOX, Tile.BOX_ON_TARGET)

    @property
    def is_target(self) -> bool:
        return self in (Tile.TARGET, Tile.BOX_ON_TARGET)

    def with_box(self) -> Tile:
        """Tile after a box lands here (``Target -> BoxOnTarget``, else ``Box``)."""
        return Tile.BOX_ON_TARGET if self is Tile.TARGET else Tile.BOX

    def without_box(self) -> Tile:
        """Tile after a box leaves (``BoxOnTarget -> Target``, else ``Empty``)."""
        return Tile.TARGET if self is Tile.BOX_ON_TARGET else Tile.EMPTY


@dataclass(frozen=True)
class Player:
    """Player pose.  ``direction`` is only carried for renderers."""

    x: int
    y: int
    direction: Direction = Direction.DOWN


@dataclass
class Grid:
    """Rectangular tile array addressed as ``(x, y)`` = (column, row).

    The shape is fixed once built; only cell contents change.  Layouts
    are trusted: rows are not checked for equal length.
    """

    rows: list[list[Tile]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Build a grid from nested ints or tiles.

        Example::

            Grid.from_rows([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
        """
        return cls(rows=[[Tile(v) for v in row] for row in rows])

    # -- queries --------------------------------------------------------------

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def tile_at(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self.rows[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        return self.tile_at(x, y) is Tile.WALL

    def is_box(self, x: int, y: int) -> bool:
        return self.tile_at(x, y).has_box

    def count_tiles(self, predicate: Tile | Callable[[Tile], bool]) -> int:
        """Count cells equal to a tile, or matching a ``Tile -> bool`` callable."""
        if isinstance(predicate, Tile):
            tile = predicate
            return sum(row.count(tile) for row in self.rows)
        return sum(1 for row in self.rows for t in row if predicate(t))

    # -- mutation -------------------------------------------------------------

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._check(x, y)
        self.rows[y][x] = tile

    def copy(self) -> Grid:
        return Grid(rows=[row[:] for row in self.rows])

    # -- helpers --------------------------------------------------------------

    def _check(self, x: int, y: int) -> None:
        # Negative indices would silently wrap on a plain list.
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.width}×{self.height} grid."
            )
