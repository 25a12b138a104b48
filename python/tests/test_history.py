"""Undo/redo snapshot stacks."""

from __future__ import annotations

from backend.engine.gamehistory import HistoryManager
from backend.models.board import Direction, Grid, Player, Tile


def _grid() -> Grid:
    return Grid.from_rows([[1, 1, 1, 1], [1, 0, 3, 1], [1, 1, 1, 1]])


def test_snapshot_is_a_deep_copy() -> None:
    grid = _grid()
    snap = HistoryManager.snapshot(Player(1, 1), grid)
    grid.set_tile(1, 1, Tile.BOX)
    assert snap.grid.tile_at(1, 1) is Tile.EMPTY
    assert snap.grid is not grid


def test_empty_stacks_are_no_ops() -> None:
    history = HistoryManager()
    assert history.undo(Player(1, 1), _grid()) is None
    assert history.redo(Player(1, 1), _grid()) is None
    assert history.undo_stack == []
    assert history.redo_stack == []


def test_undo_returns_previous_and_enables_redo() -> None:
    history = HistoryManager()
    before = Player(1, 1, Direction.LEFT)
    after = Player(2, 1, Direction.RIGHT)
    history.commit_move(before, _grid())

    snap = history.undo(after, _grid())

    assert snap is not None
    assert snap.player == before
    assert history.can_redo
    assert not history.can_undo

    again = history.redo(before, _grid())
    assert again is not None
    assert again.player == after
    assert history.can_undo
    assert not history.can_redo


def test_commit_clears_redo() -> None:
    history = HistoryManager()
    history.commit_move(Player(1, 1), _grid())
    history.undo(Player(2, 1), _grid())
    assert history.can_redo

    history.commit_move(Player(1, 1), _grid())

    assert not history.can_redo
    assert history.redo(Player(2, 1), _grid()) is None


def test_undo_and_redo_do_not_clear_each_other() -> None:
    history = HistoryManager()
    for x in range(3):
        history.commit_move(Player(x, 0), _grid())
    history.undo(Player(3, 0), _grid())
    history.undo(Player(2, 0), _grid())
    history.redo(Player(1, 0), _grid())
    assert len(history.undo_stack) == 2
    assert len(history.redo_stack) == 1


def test_reset_clears_both_stacks() -> None:
    history = HistoryManager()
    history.commit_move(Player(1, 1), _grid())
    history.commit_move(Player(1, 1), _grid())
    history.undo(Player(1, 1), _grid())
    history.reset()
    assert not history.can_undo
    assert not history.can_redo
