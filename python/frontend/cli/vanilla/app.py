"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for level selection and play.
"""

from __future__ import annotations

import sys

from backend.engine.gameplay import LevelSession, SessionEvent, SessionView, handle_intent
from backend.models.board import Direction, Tile
from backend.models.level import LevelCatalog
from frontend.cli.input_handler import get_key, to_intent


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected level)


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- grid rendering -----------------------------------------------------------

_GLYPHS: dict[Tile, str] = {
    Tile.EMPTY: f"{_DIM}·{_R}",
    Tile.WALL: f"{_DIM}█{_R}",
    Tile.TARGET: f"{_Y}○{_R}",
    Tile.BOX: f"{_C}■{_R}",
    Tile.BOX_ON_TARGET: f"{_G}■{_R}",
}

_PLAYER: dict[Direction, str] = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
    Direction.LEFT: "◀",
    Direction.RIGHT: "▶",
}


def _render_grid(view: SessionView) -> str:
    """Return an ANSI-coloured text representation of the grid."""
    player = view.player
    lines: list[str] = []
    for y, row in enumerate(view.grid.rows):
        cells: list[str] = []
        for x, tile in enumerate(row):
            if (x, y) == (player.x, player.y):
                cells.append(f"{_BOLD}{_PLAYER[player.direction]}{_R}")
            else:
                cells.append(_GLYPHS[tile])
        lines.append("  " + " ".join(cells))
    return "\n".join(lines)


def _status_for(event: SessionEvent) -> str:
    if event is SessionEvent.LEVEL_COMPLETE:
        return f"{_G}★ Level complete!{_R}"
    if event is SessionEvent.ALL_LEVELS_COMPLETE:
        return f"{_G}★ You completed all levels! ★{_R}"
    if event is SessionEvent.UNDONE:
        return f"{_DIM}Undone.{_R}"
    if event is SessionEvent.REDONE:
        return f"{_DIM}Redone.{_R}"
    return ""


# -- menu screen --------------------------------------------------------------


def _show_menu(catalog: LevelCatalog, sel_level: int) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}           S O K O B A N              {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    for i, level in enumerate(catalog):
        label = level.name or f"Level {i + 1}"
        if i == sel_level:
            print(f"    {_BG_SEL} {label} {_R}")
        else:
            print(f"    {_DIM}{label}{_R}")
    print(f"    {_DIM}↑ ↓ to change{_R}")
    print()

    print(f"    {_C}1{_R}  Play")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


# -- game screens -------------------------------------------------------------


def _show_game(view: SessionView, status: str = "") -> None:
    _clear()
    title = view.level_name or f"Level {view.level_index + 1}"
    print(f"  {_C}=== {title}  ({view.level_index + 1}/{view.level_count}) ==={_R}")
    print()
    print(_render_grid(view))
    print()
    print(f"  Targets left: {_Y}{view.pending_targets}{_R}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}Z{_R}: undo  |  "
        f"{_C}Y{_R}: redo  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"\n  {status}")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play_game(catalog: LevelCatalog, level_index: int) -> None:
    session = LevelSession(catalog, level_index)
    view = session.view()
    status = ""

    while True:
        _show_game(view, status)
        key = get_key()
        if key == "quit":
            return

        intent = to_intent(key)
        if intent is None:
            status = ""
            continue
        view = handle_intent(session, intent)
        status = _status_for(view.event)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(catalog: LevelCatalog, level_index: int) -> None:
    sel_level = level_index if catalog.has_level(level_index) else 0

    while True:
        _show_menu(catalog, sel_level)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in ("up", "left"):
            sel_level = max(0, sel_level - 1)
        elif key in ("down", "right"):
            sel_level = min(len(catalog) - 1, sel_level + 1)
        elif key in ("1", "enter"):
            _play_game(catalog, sel_level)


# -- public entry point -------------------------------------------------------


def run(catalog: LevelCatalog, level_index: int = 0) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(catalog, level_index)
