"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, and command keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.engine.gameplay import Intent


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "z": "undo",
    "Z": "undo",
    "u": "undo",
    "U": "undo",
    "y": "redo",
    "Y": "redo",
    "r": "reset",
    "R": "reset",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "h": "help",
    "?": "help",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def to_intent(action: str) -> Intent | None:
    """Return the game intent for an action string, or ``None`` if it has none."""
    try:
        return Intent(action)
    except ValueError:
        return None


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "undo"                         — z / u
        "redo"                         — y
        "reset"                        — r (restart the level)
        "quit"                         — q / Ctrl-C / Escape
        "help"                         — h / ?
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return _resolve(ch)
