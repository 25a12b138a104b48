"""Level definitions and catalog loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.models.board import Direction, Player, Tile
from backend.models.level import MICROBAN_01, LevelCatalog, LevelDefinition


def test_builtin_catalog_has_both_microban_levels() -> None:
    catalog = LevelCatalog.builtin()
    assert len(catalog) == 2
    assert [level.name for level in catalog] == ["Microban 01", "Microban 02"]


def test_out_of_range_index_wraps_to_first_level() -> None:
    catalog = LevelCatalog.builtin()
    assert catalog.get(2) is catalog.get(0)
    assert catalog.get(-1) is catalog.get(0)
    assert not catalog.has_level(2)


def test_empty_catalog_is_rejected() -> None:
    with pytest.raises(ValueError):
        LevelCatalog([])


def test_build_grid_returns_independent_copies() -> None:
    first = MICROBAN_01.build_grid()
    second = MICROBAN_01.build_grid()
    first.set_tile(1, 1, Tile.BOX)
    assert second.tile_at(1, 1) is Tile.EMPTY
    assert MICROBAN_01.layout[1][1] == 0


def test_build_player_uses_start_pose() -> None:
    assert MICROBAN_01.build_player() == Player(4, 3, Direction.LEFT)


def test_from_json_reads_level_table_shape(tmp_path: Path) -> None:
    path = tmp_path / "levels.json"
    path.write_text(
        json.dumps(
            [
                {
                    "name": "Corridor",
                    "layout": [[1, 1, 1, 1], [1, 0, 3, 2], [1, 1, 1, 1]],
                    "playerStart": {"x": 1, "y": 1},
                    "playerDirection": "right",
                },
                {
                    "layout": [[0, 4]],
                    "playerStart": {"x": 0, "y": 0},
                },
            ]
        )
    )

    catalog = LevelCatalog.from_json(path)

    assert len(catalog) == 2
    first = catalog.get(0)
    assert first == LevelDefinition(
        layout=((1, 1, 1, 1), (1, 0, 3, 2), (1, 1, 1, 1)),
        player_start=(1, 1),
        player_direction=Direction.RIGHT,
        name="Corridor",
    )
    assert catalog.get(1).player_direction is Direction.DOWN
    assert catalog.get(1).name == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"layout": [[0]]},
        [{"layout": [[0]]}],
        [],
    ],
)
def test_from_json_rejects_malformed_catalogs(tmp_path: Path, payload: object) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(ValueError):
        LevelCatalog.from_json(path)
