"""Level session: move dispatch, history, win detection and level advance.

The Microban 01 solution below is replayed through the real session to
exercise pushes on and off targets, undo/redo over a long history, and
the final level transition.
"""

from __future__ import annotations

import pytest

from backend.engine.gameplay import Intent, LevelSession, SessionEvent, handle_intent
from backend.models.board import Direction, Grid, Player, Tile
from backend.models.level import LevelCatalog, LevelDefinition

_LETTERS = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}

MICROBAN_01_SOLUTION = "LLDLURRRDLULLDDRULURUULDRDDRRULDLUU"

# One push to the right solves each of these.
_PUSH_RIGHT = LevelDefinition(
    layout=((1, 1, 1, 1, 1, 1), (1, 0, 3, 2, 0, 1), (1, 1, 1, 1, 1, 1)),
    player_start=(1, 1),
    name="push right",
)
_PUSH_RIGHT_SHORT = LevelDefinition(
    layout=((1, 1, 1, 1, 1), (1, 0, 3, 2, 1), (1, 1, 1, 1, 1)),
    player_start=(1, 1),
    name="push right (short)",
)


# -- helpers ------------------------------------------------------------------


def _session(*levels: LevelDefinition) -> LevelSession:
    catalog = LevelCatalog(list(levels)) if levels else LevelCatalog.builtin()
    return LevelSession(catalog)


def _play(session: LevelSession, moves: str) -> list[SessionEvent]:
    return [session.handle_direction(_LETTERS[m]) for m in moves]


def _state(session: LevelSession) -> tuple[Grid, Player, int]:
    return session.grid.copy(), session.player, session.pending_targets


# -- start --------------------------------------------------------------------


def test_start_loads_first_level() -> None:
    session = _session()
    assert session.level_index == 0
    assert session.player == Player(4, 3, Direction.LEFT)
    assert session.pending_targets == 1
    assert not session.is_won
    assert not session.history.can_undo


def test_start_index_out_of_range_wraps() -> None:
    session = LevelSession(LevelCatalog.builtin(), level_index=7)
    assert session.level_index == 0


def test_session_grid_is_not_the_catalog_layout() -> None:
    first = _session()
    _play(first, "DL")
    second = _session()
    assert second.grid.tile_at(3, 4) is Tile.BOX


# -- rejected input -----------------------------------------------------------


def test_blocked_move_changes_nothing() -> None:
    session = _session()
    _play(session, "D")
    session.undo()
    grid, player, pending = _state(session)
    undo_stack = list(session.history.undo_stack)
    redo_stack = list(session.history.redo_stack)

    # Wall above (4, 3) and to its right.
    assert session.handle_direction(Direction.UP) is SessionEvent.BLOCKED
    assert session.handle_direction(Direction.RIGHT) is SessionEvent.BLOCKED

    assert session.grid == grid
    assert session.player == player
    assert session.player.direction is Direction.LEFT
    assert session.pending_targets == pending
    assert session.history.undo_stack == undo_stack
    assert session.history.redo_stack == redo_stack


def test_undo_and_redo_on_empty_history_are_no_ops() -> None:
    session = _session()
    grid, player, _ = _state(session)
    assert session.undo() is SessionEvent.NOTHING
    assert session.redo() is SessionEvent.NOTHING
    assert session.grid == grid
    assert session.player == player


# -- target counter -----------------------------------------------------------


def test_pending_targets_stays_in_sync_through_solution() -> None:
    session = _session()
    seen = set()
    for move in MICROBAN_01_SOLUTION[:-1]:
        event = session.handle_direction(_LETTERS[move])
        assert event in (SessionEvent.MOVED, SessionEvent.PUSHED)
        assert session.pending_targets == session.recount_pending_targets()
        seen.add(session.pending_targets)
    # The box on target is pushed off and back on along the way.
    assert seen == {1, 2}
    assert session.pending_targets == 1


def test_push_onto_empty_cell_leaves_pending_targets() -> None:
    session = _session()
    events = _play(session, "DL")
    assert events == [SessionEvent.MOVED, SessionEvent.PUSHED]
    assert session.grid.tile_at(2, 4) is Tile.BOX
    assert session.pending_targets == 1


# -- undo / redo --------------------------------------------------------------


def test_undo_redo_duality() -> None:
    session = _session()
    moves = MICROBAN_01_SOLUTION[:-1]
    initial = _state(session)
    _play(session, moves)
    final = _state(session)

    for _ in moves:
        assert session.undo() is SessionEvent.UNDONE
    assert _state(session) == initial
    assert session.undo() is SessionEvent.NOTHING

    for _ in moves:
        assert session.redo() is SessionEvent.REDONE
    assert _state(session) == final
    assert session.redo() is SessionEvent.NOTHING


def test_undo_restores_facing() -> None:
    session = _session()
    _play(session, "D")
    assert session.player.direction is Direction.DOWN
    session.undo()
    assert session.player == Player(4, 3, Direction.LEFT)


def test_new_move_invalidates_redo() -> None:
    session = _session()
    _play(session, "LL")
    session.undo()
    assert session.history.can_redo

    _play(session, "R")

    assert not session.history.can_redo
    assert session.redo() is SessionEvent.NOTHING


def test_restored_grid_does_not_alias_history() -> None:
    session = _session()
    _play(session, "DL")
    session.undo()
    session.redo()
    session.undo()
    _play(session, "L")
    session.undo()
    assert session.grid.tile_at(3, 4) is Tile.BOX
    assert session.grid.tile_at(2, 4) is Tile.EMPTY


# -- win detection ------------------------------------------------------------


def test_layout_without_uncovered_targets_is_already_won() -> None:
    covered = LevelDefinition(
        layout=((1, 1, 1, 1, 1), (1, 0, 0, 4, 1), (1, 1, 1, 1, 1)),
        player_start=(1, 1),
    )
    session = _session(covered, _PUSH_RIGHT)
    assert session.pending_targets == 0
    assert session.is_won

    assert session.handle_direction(Direction.RIGHT) is SessionEvent.LEVEL_COMPLETE
    assert session.level_index == 1


def test_last_push_advances_to_next_level() -> None:
    session = _session(_PUSH_RIGHT, _PUSH_RIGHT_SHORT)
    assert session.pending_targets == 1

    assert session.handle_direction(Direction.RIGHT) is SessionEvent.LEVEL_COMPLETE

    assert session.level_index == 1
    assert session.grid == _PUSH_RIGHT_SHORT.build_grid()
    assert session.player == Player(1, 1)
    assert session.pending_targets == 1
    assert not session.history.can_undo


def test_last_level_wraps_and_signals_all_complete() -> None:
    session = _session(_PUSH_RIGHT, _PUSH_RIGHT_SHORT)
    session.handle_direction(Direction.RIGHT)

    assert session.handle_direction(Direction.RIGHT) is SessionEvent.ALL_LEVELS_COMPLETE

    assert session.level_index == 0
    assert session.grid == _PUSH_RIGHT.build_grid()
    assert session.undo() is SessionEvent.NOTHING


def test_microban_01_solution_loads_microban_02() -> None:
    session = _session()
    events = _play(session, MICROBAN_01_SOLUTION)
    assert events[-1] is SessionEvent.LEVEL_COMPLETE
    assert session.level_index == 1
    assert session.player == Player(3, 2, Direction.RIGHT)
    assert session.pending_targets == 1


# -- intent dispatch ----------------------------------------------------------


@pytest.mark.parametrize(
    "intent, expected",
    [
        (Intent.DOWN, Player(4, 4, Direction.DOWN)),
        (Intent.LEFT, Player(3, 3, Direction.LEFT)),
        ("left", Player(3, 3, Direction.LEFT)),
    ],
)
def test_direction_intents(intent: Intent, expected: Player) -> None:
    session = _session()
    view = handle_intent(session, intent)
    assert view.player == expected
    assert view.event is SessionEvent.MOVED
    assert view.can_undo


def test_reset_intent_restores_level_and_clears_history() -> None:
    session = _session()
    handle_intent(session, Intent.DOWN)
    handle_intent(session, Intent.LEFT)
    handle_intent(session, Intent.UNDO)

    view = handle_intent(session, Intent.RESET)

    assert view.event is SessionEvent.STARTED
    assert view.grid == LevelCatalog.builtin().get(0).build_grid()
    assert view.player == Player(4, 3, Direction.LEFT)
    assert not view.can_undo
    assert not view.can_redo


def test_view_describes_current_level() -> None:
    session = _session()
    view = handle_intent(session, Intent.UP)
    assert view.event is SessionEvent.BLOCKED
    assert view.level_index == 0
    assert view.level_name == "Microban 01"
    assert view.level_count == 2
    assert view.pending_targets == 1
    assert view.grid is session.grid


def test_sessions_are_independent() -> None:
    catalog = LevelCatalog.builtin()
    first = LevelSession(catalog)
    second = LevelSession(catalog)
    handle_intent(first, Intent.DOWN)
    assert second.player == Player(4, 3, Direction.LEFT)
    assert not second.history.can_undo
