"""Tracks the mutable state of a level in progress."""

from __future__ import annotations

from backend.engine.gamehistory import Snapshot
from backend.engine.moveresolver import MoveEffect
from backend.models.board import Grid, Player, Tile
from backend.models.level import LevelDefinition


class GameState:
    """Holds the live grid, player pose, and count of uncovered targets."""

    def __init__(self, grid: Grid, player: Player) -> None:
        self.grid = grid
        self.player = player
        self.pending_targets: int = self.recount_pending_targets()

    @classmethod
    def from_level(cls, level: LevelDefinition) -> GameState:
        return cls(level.build_grid(), level.build_player())

    # -- targets --------------------------------------------------------------

    def recount_pending_targets(self) -> int:
        """Count uncovered targets from scratch (``BoxOnTarget`` excluded)."""
        return self.grid.count_tiles(Tile.TARGET)

    @property
    def is_solved(self) -> bool:
        return self.pending_targets == 0

    # -- transitions ----------------------------------------------------------

    def apply(self, effect: MoveEffect) -> None:
        self.grid = effect.grid
        self.player = effect.player
        self.pending_targets += effect.pending_targets_delta

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the live state with a copy of *snapshot* and resync targets."""
        self.grid = snapshot.grid.copy()
        self.player = snapshot.player
        self.pending_targets = self.recount_pending_targets()
