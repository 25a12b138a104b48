"""Level definitions and the ordered level catalog."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from backend.models.board import Direction, Grid, Player


@dataclass(frozen=True)
class LevelDefinition:
    """Static description of a level; never mutated by a session."""

    layout: tuple[tuple[int, ...], ...]
    player_start: tuple[int, int]
    player_direction: Direction = Direction.DOWN
    name: str = ""

    def build_grid(self) -> Grid:
        """Return a fresh, independently mutable grid for this layout."""
        return Grid.from_rows(self.layout)

    def build_player(self) -> Player:
        x, y = self.player_start
        return Player(x=x, y=y, direction=self.player_direction)

    @classmethod
    def from_dict(cls, data: dict) -> LevelDefinition:
        start = data["playerStart"]
        return cls(
            layout=tuple(tuple(int(v) for v in row) for row in data["layout"]),
            player_start=(int(start["x"]), int(start["y"])),
            player_direction=Direction(data.get("playerDirection", "down")),
            name=data.get("name", ""),
        )


# 0 = Empty, 1 = Wall, 2 = Target, 3 = Box, 4 = Box on Target
MICROBAN_01 = LevelDefinition(
    layout=(
        (1, 1, 1, 1, 1, 1),
        (1, 0, 2, 1, 1, 1),
        (1, 0, 0, 1, 1, 1),
        (1, 4, 0, 0, 0, 1),
        (1, 0, 0, 3, 0, 1),
        (1, 0, 0, 1, 1, 1),
        (1, 1, 1, 1, 1, 1),
    ),
    player_start=(4, 3),
    player_direction=Direction.LEFT,
    name="Microban 01",
)

MICROBAN_02 = LevelDefinition(
    layout=(
        (1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 0, 1),
        (1, 0, 3, 4, 0, 1),
        (1, 0, 2, 4, 0, 1),
        (1, 0, 0, 0, 0, 1),
        (1, 1, 1, 1, 1, 1),
    ),
    player_start=(3, 2),
    player_direction=Direction.RIGHT,
    name="Microban 02",
)


class LevelCatalog:
    """Ordered, read-only sequence of levels.  Lookups wrap to index 0."""

    def __init__(self, levels: list[LevelDefinition]) -> None:
        if not levels:
            raise ValueError("A level catalog needs at least one level.")
        self._levels = list(levels)

    @classmethod
    def builtin(cls) -> LevelCatalog:
        return cls([MICROBAN_01, MICROBAN_02])

    @classmethod
    def from_json(cls, filepath: Path) -> LevelCatalog:
        """Load a JSON list of ``{layout, playerStart, playerDirection}`` objects."""
        data = json.loads(Path(filepath).read_text())
        if not isinstance(data, list):
            raise ValueError(f"{filepath}: expected a JSON list of levels.")
        try:
            levels = [LevelDefinition.from_dict(entry) for entry in data]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"{filepath}: malformed level entry ({exc}).") from exc
        return cls(levels)

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self):
        return iter(self._levels)

    def has_level(self, index: int) -> bool:
        return 0 <= index < len(self._levels)

    def get(self, index: int) -> LevelDefinition:
        if not self.has_level(index):
            index = 0
        return self._levels[index]
