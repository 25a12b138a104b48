"""Rich terminal frontend — styled grid, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  Includes a built-in
menu for level selection and play.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import LevelSession, SessionEvent, SessionView, handle_intent
from backend.models.board import Direction, Tile
from backend.models.level import LevelCatalog
from frontend.cli.input_handler import get_key, to_intent

console = Console()


# -- grid rendering -----------------------------------------------------------

_CELLS: dict[Tile, str] = {
    Tile.EMPTY: "[dim]·[/dim]",
    Tile.WALL: "[grey50]██[/grey50]",
    Tile.TARGET: "[bold yellow]○[/bold yellow]",
    Tile.BOX: "[bold #fab387]■[/bold #fab387]",
    Tile.BOX_ON_TARGET: "[bold green]■[/bold green]",
}

_PLAYER: dict[Direction, str] = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
    Direction.LEFT: "◀",
    Direction.RIGHT: "▶",
}


def _render_grid(view: SessionView) -> Table:
    """Return a Rich Table representing the level grid."""
    table = Table(
        show_header=False,
        show_edge=False,
        box=None,
        padding=(0, 0),
        collapse_padding=True,
    )
    for _ in range(view.grid.width):
        table.add_column(width=2, justify="center")

    player = view.player
    for y, row in enumerate(view.grid.rows):
        cells: list[str] = []
        for x, tile in enumerate(row):
            if (x, y) == (player.x, player.y):
                cells.append(f"[bold cyan]{_PLAYER[player.direction]}[/bold cyan]")
            else:
                cells.append(_CELLS[tile])
        table.add_row(*cells)

    return table


def _status_for(event: SessionEvent) -> str:
    if event is SessionEvent.LEVEL_COMPLETE:
        return "[bold green]★ Level complete![/bold green]"
    if event is SessionEvent.ALL_LEVELS_COMPLETE:
        return "[bold green]★ You completed all levels! ★[/bold green]"
    if event is SessionEvent.UNDONE:
        return "[dim]Undone.[/dim]"
    if event is SessionEvent.REDONE:
        return "[dim]Redone.[/dim]"
    return ""


# -- menu screen --------------------------------------------------------------


def _draw_menu(catalog: LevelCatalog, sel_level: int) -> None:
    """Draw the main menu."""
    console.clear()

    levels = Text()
    for i, level in enumerate(catalog):
        if i:
            levels.append("\n")
        label = level.name or f"Level {i + 1}"
        if i == sel_level:
            levels.append(f" {label} ", style="bold green on #313244")
        else:
            levels.append(f" {label} ", style="dim")

    nav = Text("  ↑ ↓  change level", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(levels),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]S O K O B A N[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screen --------------------------------------------------------------


def _draw_game(view: SessionView, status: str = "") -> None:
    console.clear()

    title = view.level_name or f"Level {view.level_index + 1}"
    grid_table = _render_grid(view)

    stats = Text()
    stats.append("  Level: ", style="dim")
    stats.append(f"{view.level_index + 1}/{view.level_count}", style="bold yellow")
    stats.append("    Targets left: ", style="dim")
    stats.append(str(view.pending_targets), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Z", style="bold cyan" if view.can_undo else "dim")
    controls.append("  undo   ", style="dim")
    controls.append("Y", style="bold cyan" if view.can_redo else "dim")
    controls.append("  redo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    won = view.event in (SessionEvent.LEVEL_COMPLETE, SessionEvent.ALL_LEVELS_COMPLETE)
    panel = Panel(
        Align.center(grid_table),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bold green" if won else "bright_blue",
        box=rich.box.HEAVY,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play_game(catalog: LevelCatalog, level_index: int) -> None:
    session = LevelSession(catalog, level_index)
    view = session.view()
    status = ""

    while True:
        _draw_game(view, status)
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
        _draw_menu(catalog, sel_level)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key in ("up", "left"):
            sel_level = max(0, sel_level - 1)
        elif key in ("down", "right"):
            sel_level = min(len(catalog) - 1, sel_level + 1)
        elif key in ("1", "enter"):
            _play_game(catalog, sel_level)


# -- public entry point -------------------------------------------------------


def run(catalog: LevelCatalog, level_index: int = 0) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(catalog, level_index)
