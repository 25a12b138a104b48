#!/usr/bin/env python3
"""Sokoban.

Usage::

    python main.py                       # interactive menu
    python main.py -f rich -l 1          # Rich terminal, second level
    python main.py -f pygame             # Pygame GUI (has its own menu)
    python main.py --levels my.json -v   # custom catalog, debug logging
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # sokoban/
ASSETS_DIR = PROJECT_ROOT / "assets"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.level import LevelCatalog  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_catalog(levels: Optional[Path]) -> LevelCatalog:
    if levels is None:
        return LevelCatalog.builtin()
    try:
        return LevelCatalog.from_json(levels)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--levels") from exc


def _launch(frontend: Frontend, catalog: LevelCatalog, level: int) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.pygame:
        mod.run(catalog=catalog, level_index=level, assets_dir=ASSETS_DIR)
    else:
        mod.run(catalog=catalog, level_index=level)


def _menu_loop(catalog: LevelCatalog, level: int) -> None:
    while True:
        print()
        print("  ====================================")
        print("            S O K O B A N             ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        frontend = {
            "1": Frontend.vanilla,
            "2": Frontend.rich,
            "3": Frontend.pygame,
            "4": Frontend.pyqt,
        }.get(choice)
        if frontend is None:
            print("  Unknown option.")
            continue
        _launch(frontend, catalog, level)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    level: int = typer.Option(
        0, "-l", "--level",
        min=0,
        help="Starting level (0-based; out-of-range wraps to 0).",
    ),
    levels: Optional[Path] = typer.Option(
        None, "--levels",
        exists=True, dir_okay=False,
        help="JSON level catalog. Defaults to the built-in levels.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log game events at DEBUG level.",
    ),
) -> None:
    """Sokoban."""
    _configure_logging(verbose)
    catalog = _load_catalog(levels)

    if frontend is None:
        _menu_loop(catalog, level)
        return

    _launch(frontend, catalog, level)


if __name__ == "__main__":
    app()
