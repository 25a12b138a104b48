"""Grid and tile model tests."""

from __future__ import annotations

import pytest

from backend.models.board import Direction, Grid, Tile


def _grid() -> Grid:
    return Grid.from_rows(
        [
            [1, 1, 1, 1, 1],
            [1, 0, 2, 3, 1],
            [1, 4, 0, 0, 1],
            [1, 1, 1, 1, 1],
        ]
    )


# -- tiles --------------------------------------------------------------------


def test_tile_codes_match_level_tables() -> None:
    assert [t.value for t in Tile] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize(
    "tile, with_box, without_box",
    [
        (Tile.EMPTY, Tile.BOX, Tile.EMPTY),
        (Tile.TARGET, Tile.BOX_ON_TARGET, Tile.EMPTY),
        (Tile.BOX, Tile.BOX, Tile.EMPTY),
        (Tile.BOX_ON_TARGET, Tile.BOX, Tile.TARGET),
    ],
)
def test_tile_box_pairing(tile: Tile, with_box: Tile, without_box: Tile) -> None:
    assert tile.with_box() is with_box
    assert tile.without_box() is without_box


def test_direction_deltas_are_unit_steps() -> None:
    assert Direction.UP.delta == (0, -1)
    assert Direction.DOWN.delta == (0, 1)
    assert Direction.LEFT.delta == (-1, 0)
    assert Direction.RIGHT.delta == (1, 0)


# -- grid queries -------------------------------------------------------------


def test_shape_is_derived_from_rows() -> None:
    grid = _grid()
    assert grid.width == 5
    assert grid.height == 4


def test_tile_predicates() -> None:
    grid = _grid()
    assert grid.tile_at(2, 1) is Tile.TARGET
    assert grid.is_wall(0, 0)
    assert not grid.is_wall(1, 1)
    assert grid.is_box(3, 1)
    assert grid.is_box(1, 2)
    assert not grid.is_box(2, 1)


@pytest.mark.parametrize(
    "x, y, inside",
    [(0, 0, True), (4, 3, True), (5, 0, False), (0, 4, False), (-1, 0, False), (0, -1, False)],
)
def test_in_bounds(x: int, y: int, inside: bool) -> None:
    assert _grid().in_bounds(x, y) is inside


def test_count_tiles_by_tile_and_predicate() -> None:
    grid = _grid()
    assert grid.count_tiles(Tile.TARGET) == 1
    assert grid.count_tiles(Tile.BOX_ON_TARGET) == 1
    assert grid.count_tiles(lambda t: t.has_box) == 2
    assert grid.count_tiles(lambda t: t.is_target) == 2


def test_out_of_bounds_access_raises() -> None:
    grid = _grid()
    with pytest.raises(IndexError):
        grid.tile_at(-1, 0)
    with pytest.raises(IndexError):
        grid.set_tile(5, 1, Tile.BOX)


# -- mutation -----------------------------------------------------------------


def test_set_tile_changes_only_that_cell() -> None:
    grid = _grid()
    before = grid.copy()
    grid.set_tile(2, 2, Tile.BOX)
    assert grid.tile_at(2, 2) is Tile.BOX
    changed = [
        (x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if grid.tile_at(x, y) is not before.tile_at(x, y)
    ]
    assert changed == [(2, 2)]


def test_copy_does_not_alias_rows() -> None:
    grid = _grid()
    clone = grid.copy()
    clone.set_tile(1, 1, Tile.BOX)
    assert grid.tile_at(1, 1) is Tile.EMPTY
    assert clone == Grid.from_rows(
        [
            [1, 1, 1, 1, 1],
            [1, 3, 2, 3, 1],
            [1, 4, 0, 0, 1],
            [1, 1, 1, 1, 1],
        ]
    )
