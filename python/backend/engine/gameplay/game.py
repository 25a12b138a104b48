"""Core gameplay logic — processes intents, checks wins, advances levels."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gamehistory import HistoryManager
from backend.engine.gamestate import GameState
from backend.engine.moveresolver import MoveResolver
from backend.models.board import Direction, Grid, Player
from backend.models.level import LevelCatalog

logger = logging.getLogger(__name__)


class Intent(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UNDO = "undo"
    REDO = "redo"
    RESET = "reset"


class SessionEvent(enum.Enum):
    """What the last handled intent did, for the presentation layer."""

    STARTED = "started"
    MOVED = "moved"
    PUSHED = "pushed"
    BLOCKED = "blocked"
    UNDONE = "undone"
    REDONE = "redone"
    NOTHING = "nothing"
    LEVEL_COMPLETE = "level_complete"
    ALL_LEVELS_COMPLETE = "all_levels_complete"


@dataclass(frozen=True)
class SessionView:
    """Read-only picture of a session.  Renderers must not mutate ``grid``."""

    grid: Grid
    player: Player
    level_index: int
    level_name: str
    level_count: int
    pending_targets: int
    event: SessionEvent
    can_undo: bool
    can_redo: bool


_DIRECTION_INTENTS: dict[Intent, Direction] = {
    Intent.UP: Direction.UP,
    Intent.DOWN: Direction.DOWN,
    Intent.LEFT: Direction.LEFT,
    Intent.RIGHT: Direction.RIGHT,
}


class LevelSession:
    """Orchestrates play across the levels of a catalog.

    Owns the live state and its history exclusively.  The session never
    ends: after the last level it wraps back to the first.
    """

    def __init__(self, catalog: LevelCatalog, level_index: int = 0) -> None:
        self.catalog = catalog
        self.level_index = 0
        self.history = HistoryManager()
        self.state: GameState
        self.last_event = SessionEvent.STARTED
        self.start(level_index)

    # -- lifecycle ------------------------------------------------------------

    def start(self, level_index: int | None = None) -> SessionEvent:
        """(Re)load a level from the catalog and clear history.

        Out-of-range indices wrap to the first level.
        """
        if level_index is not None:
            self.level_index = level_index if self.catalog.has_level(level_index) else 0
        level = self.catalog.get(self.level_index)
        self.state = GameState.from_level(level)
        self.history.reset()
        logger.info(
            "Started level %d (%s): %d pending target(s)",
            self.level_index,
            level.name or "unnamed",
            self.state.pending_targets,
        )
        self.last_event = SessionEvent.STARTED
        return self.last_event

    def reset(self) -> SessionEvent:
        return self.start()

    # -- movement -------------------------------------------------------------

    def handle_direction(self, direction: Direction) -> SessionEvent:
        """Attempt a one-cell step.  Blocked moves change nothing."""
        state = self.state
        if not MoveResolver.can_move(state.grid, state.player, direction):
            logger.debug("Blocked %s at (%d, %d)", direction.value, state.player.x, state.player.y)
            self.last_event = SessionEvent.BLOCKED
            return self.last_event

        self.history.commit_move(state.player, state.grid)
        effect = MoveResolver.apply_move(state.grid, state.player, direction)
        state.apply(effect)
        logger.debug(
            "Moved %s to (%d, %d), pending=%d",
            direction.value,
            state.player.x,
            state.player.y,
            state.pending_targets,
        )

        if state.is_solved:
            self.last_event = self._advance()
        else:
            self.last_event = SessionEvent.PUSHED if effect.pushed else SessionEvent.MOVED
        return self.last_event

    # -- history --------------------------------------------------------------

    def undo(self) -> SessionEvent:
        snapshot = self.history.undo(self.state.player, self.state.grid)
        if snapshot is None:
            self.last_event = SessionEvent.NOTHING
        else:
            self.state.restore(snapshot)
            self.last_event = SessionEvent.UNDONE
        return self.last_event

    def redo(self) -> SessionEvent:
        snapshot = self.history.redo(self.state.player, self.state.grid)
        if snapshot is None:
            self.last_event = SessionEvent.NOTHING
        else:
            self.state.restore(snapshot)
            self.last_event = SessionEvent.REDONE
        return self.last_event

    # -- dispatch -------------------------------------------------------------

    def handle_intent(self, intent: Intent) -> SessionView:
        intent = Intent(intent)
        if intent in _DIRECTION_INTENTS:
            self.handle_direction(_DIRECTION_INTENTS[intent])
        elif intent is Intent.UNDO:
            self.undo()
        elif intent is Intent.REDO:
            self.redo()
        elif intent is Intent.RESET:
            self.reset()
        return self.view()

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def pending_targets(self) -> int:
        return self.state.pending_targets

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    def recount_pending_targets(self) -> int:
        return self.state.recount_pending_targets()

    def view(self) -> SessionView:
        return SessionView(
            grid=self.state.grid,
            player=self.state.player,
            level_index=self.level_index,
            level_name=self.catalog.get(self.level_index).name,
            level_count=len(self.catalog),
            pending_targets=self.state.pending_targets,
            event=self.last_event,
            can_undo=self.history.can_undo,
            can_redo=self.history.can_redo,
        )

    # -- helpers --------------------------------------------------------------

    def _advance(self) -> SessionEvent:
        finished = self.level_index
        next_index = finished + 1
        if self.catalog.has_level(next_index):
            logger.info("Level %d complete", finished)
            self.start(next_index)
            return SessionEvent.LEVEL_COMPLETE

        logger.info("Level %d complete; all %d levels done, wrapping", finished, len(self.catalog))
        self.start(0)
        return SessionEvent.ALL_LEVELS_COMPLETE


def handle_intent(session: LevelSession, intent: Intent) -> SessionView:
    """Apply one input command to *session* and return the updated view."""
    return session.handle_intent(intent)
