"""Undo/redo history built from full state snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.models.board import Grid, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """A copy of the player pose and grid at one point in time."""

    player: Player
    grid: Grid


class HistoryManager:
    """Two snapshot stacks.  A newly committed move invalidates redo."""

    def __init__(self) -> None:
        self.undo_stack: list[Snapshot] = []
        self.redo_stack: list[Snapshot] = []

    @staticmethod
    def snapshot(player: Player, grid: Grid) -> Snapshot:
        # Player is frozen; only the grid needs copying.
        return Snapshot(player=player, grid=grid.copy())

    # -- recording ------------------------------------------------------------

    def commit_move(self, player: Player, grid: Grid) -> None:
        """Record the state *before* an accepted move."""
        self.undo_stack.append(self.snapshot(player, grid))
        self.redo_stack.clear()

    def reset(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    # -- traversal ------------------------------------------------------------

    def undo(self, player: Player, grid: Grid) -> Snapshot | None:
        """Return the previous state, or ``None`` if there is nothing to undo."""
        if not self.undo_stack:
            return None
        previous = self.undo_stack.pop()
        self.redo_stack.append(self.snapshot(player, grid))
        logger.debug("undo: %d left, %d redoable", len(self.undo_stack), len(self.redo_stack))
        return previous

    def redo(self, player: Player, grid: Grid) -> Snapshot | None:
        """Return the next state, or ``None`` if there is nothing to redo."""
        if not self.redo_stack:
            return None
        following = self.redo_stack.pop()
        self.undo_stack.append(self.snapshot(player, grid))
        logger.debug("redo: %d undoable, %d left", len(self.undo_stack), len(self.redo_stack))
        return following

    # -- queries --------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)
