"""PyQt6 GUI frontend — fully self-contained.

Includes a level-select menu and gameplay.  No terminal interaction
required.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import Intent, LevelSession, SessionEvent, SessionView
from backend.models.board import Direction, Tile
from backend.models.level import LevelCatalog

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PEACH = "#fab387"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_HINT = "Arrows / WASD  move     Z  undo     Y  redo     R  restart     Esc  menu"

# (background, foreground, glyph) per tile
_CELL_STYLE: dict[Tile, tuple[str, str, str]] = {
    Tile.EMPTY: (_MANTLE, _TEXT, ""),
    Tile.WALL: (_SURFACE1, _TEXT, ""),
    Tile.TARGET: (_MANTLE, _YELLOW, "○"),
    Tile.BOX: (_PEACH, _BASE, "■"),
    Tile.BOX_ON_TARGET: (_GREEN, _BASE, "■"),
}

_PLAYER_GLYPH: dict[Direction, str] = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
    Direction.LEFT: "◀",
    Direction.RIGHT: "▶",
}

_KEY_INTENTS: dict[Qt.Key, Intent] = {
    Qt.Key.Key_Up: Intent.UP,
    Qt.Key.Key_W: Intent.UP,
    Qt.Key.Key_Down: Intent.DOWN,
    Qt.Key.Key_S: Intent.DOWN,
    Qt.Key.Key_Left: Intent.LEFT,
    Qt.Key.Key_A: Intent.LEFT,
    Qt.Key.Key_Right: Intent.RIGHT,
    Qt.Key.Key_D: Intent.RIGHT,
    Qt.Key.Key_Z: Intent.UNDO,
    Qt.Key.Key_U: Intent.UNDO,
    Qt.Key.Key_Y: Intent.REDO,
    Qt.Key.Key_R: Intent.RESET,
}


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Main menu with level selection, play, quit."""

    def __init__(self, catalog: LevelCatalog, default_level: int = 0) -> None:
        super().__init__()
        self.setObjectName("page")
        self.selected_level = default_level

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        title = QLabel("S O K O B A N")
        title.setFont(QFont("Helvetica", 34, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        root.addSpacerItem(QSpacerItem(0, 24))

        sub = QLabel("Select level")
        sub.setFont(QFont("Helvetica", 15))
        sub.setStyleSheet(f"color:{_SUBTEXT};")
        sub.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(sub)

        self._level_btns: list[QPushButton] = []
        for i, level in enumerate(catalog):
            btn = _styled_btn(level.name or f"Level {i + 1}", min_w=240, font_size=13)
            btn.clicked.connect(lambda _, idx=i: self._pick_level(idx))
            root.addWidget(btn, alignment=Qt.AlignmentFlag.AlignCenter)
            self._level_btns.append(btn)

        root.addSpacerItem(QSpacerItem(0, 18))

        self.play_btn = _styled_btn(
            "P L A Y", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=16, min_w=240, min_h=52,
        )
        root.addWidget(self.play_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 4))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._refresh_highlight()

    def _pick_level(self, index: int) -> None:
        self.selected_level = index
        self._refresh_highlight()

    def step(self, offset: int) -> None:
        self._pick_level(max(0, min(len(self._level_btns) - 1, self.selected_level + offset)))

    def _refresh_highlight(self) -> None:
        for i, btn in enumerate(self._level_btns):
            if i == self.selected_level:
                bg, fg, hv = _GREEN, _BASE, _GREEN_H
            else:
                bg, fg, hv = _SURFACE0, _TEXT, _SURFACE1
            btn.setStyleSheet(
                f"QPushButton {{ background:{bg}; color:{fg};"
                f" border:none; border-radius:8px; padding:6px 18px; font-weight:bold; }}"
                f" QPushButton:hover {{ background:{hv}; }}"
            )


class _GamePage(QWidget):
    """The level grid, target counter and status line."""

    def __init__(self, catalog: LevelCatalog, level_index: int) -> None:
        super().__init__()
        self.setObjectName("page")
        self.session = LevelSession(catalog, level_index)

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        self._title = QLabel()
        self._title.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_YELLOW};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(frame)
        self._grid.setSpacing(0)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)
        self._cells: list[list[QLabel]] = []

        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        self._status.setStyleSheet(f"color:{_GREEN};")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        hint = QLabel(_HINT)
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._sync(self.session.view())

    # -- helpers --

    def _rebuild_cells(self, view: SessionView) -> None:
        while self._grid.count():
            item = self._grid.takeAt(0)
            if item is not None and item.widget() is not None:
                item.widget().deleteLater()

        tile_px = max(28, min(56, 420 // max(view.grid.width, view.grid.height)))
        self._cells = []
        for y in range(view.grid.height):
            row: list[QLabel] = []
            for x in range(view.grid.width):
                cell = QLabel()
                cell.setFixedSize(tile_px, tile_px)
                cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
                cell.setFont(QFont("Helvetica", max(12, tile_px // 2), QFont.Weight.Bold))
                self._grid.addWidget(cell, y, x)
                row.append(cell)
            self._cells.append(row)

    def _sync(self, view: SessionView) -> None:
        # Levels may differ in size, so cells are rebuilt on shape change.
        if len(self._cells) != view.grid.height or (
            self._cells and len(self._cells[0]) != view.grid.width
        ):
            self._rebuild_cells(view)

        title = view.level_name or f"Level {view.level_index + 1}"
        self._title.setText(f"{title}  ({view.level_index + 1}/{view.level_count})")
        self._stats.setText(f"Targets left: {view.pending_targets}")

        player = view.player
        for y, row in enumerate(view.grid.rows):
            for x, tile in enumerate(row):
                bg, fg, glyph = _CELL_STYLE[tile]
                if (x, y) == (player.x, player.y):
                    fg, glyph = _BLUE, _PLAYER_GLYPH[player.direction]
                cell = self._cells[y][x]
                cell.setText(glyph)
                cell.setStyleSheet(f"background:{bg}; color:{fg};")

    def apply(self, intent: Intent) -> None:
        view = self.session.handle_intent(intent)
        if view.event is SessionEvent.LEVEL_COMPLETE:
            self._status.setText("★  Level complete!  ★")
        elif view.event is SessionEvent.ALL_LEVELS_COMPLETE:
            self._status.setText("★  You completed all levels!  ★")
        elif view.event is not SessionEvent.BLOCKED:
            self._status.setText("")
        self._sync(view)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_MENU = 0
_IDX_GAME = 1


class _MainWindow(QMainWindow):
    def __init__(self, catalog: LevelCatalog, level_index: int) -> None:
        super().__init__()
        self._catalog = catalog

        self.setWindowTitle("Sokoban")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(520, 600)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        start = level_index if catalog.has_level(level_index) else 0
        self._menu = _MenuPage(catalog, start)
        self._menu.play_btn.clicked.connect(self._on_play)
        self._menu.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # placeholder (replaced on play)
        self._game_page: _GamePage | None = None
        self._stack.addWidget(QWidget())  # 1

        self._stack.setCurrentIndex(_IDX_MENU)

    # -- navigation ---

    def _show_menu(self) -> None:
        self._stack.setCurrentIndex(_IDX_MENU)

    def _on_play(self) -> None:
        page = _GamePage(self._catalog, self._menu.selected_level)
        self._game_page = page

        old = self._stack.widget(_IDX_GAME)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(_IDX_GAME, page)
        self._stack.setCurrentIndex(_IDX_GAME)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key == Qt.Key.Key_Return:
                self._on_play()
            elif key in (Qt.Key.Key_Up, Qt.Key.Key_W):
                self._menu.step(-1)
            elif key in (Qt.Key.Key_Down, Qt.Key.Key_S):
                self._menu.step(1)
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_GAME and self._game_page is not None:
            if key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()
            elif key in _KEY_INTENTS:
                self._game_page.apply(_KEY_INTENTS[key])

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(catalog: LevelCatalog, level_index: int = 0) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(catalog, level_index)
    window.show()
    qapp.exec()
