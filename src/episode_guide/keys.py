"""Keyboard input helpers.

Keys arrive as the strings returned by ``readchar.readkey()``. These
helpers replace repeated inline comparisons with readable predicates.
"""

from __future__ import annotations

import readchar

QUIT_KEY = "q"
HELP_KEY = "h"
SEARCH_KEY = "s"
SORT_KEY_KEY = "m"
SORT_DIRECTION_KEY = "o"


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C (raw mode delivers it as a character)."""
    return key in (readchar.key.CTRL_C, "\x03")


def is_quit(key: str) -> bool:
    """Check if key is a quit key (q/Q or Ctrl+C)."""
    return key.lower() == QUIT_KEY or is_interrupt(key)


def is_help(key: str) -> bool:
    return key.lower() == HELP_KEY


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key.lower() == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key.lower() == "j" or key == readchar.key.DOWN


def is_arrow_up(key: str) -> bool:
    """Up arrow only, for text-entry contexts where 'k' is a character."""
    return key == readchar.key.UP


def is_arrow_down(key: str) -> bool:
    return key == readchar.key.DOWN


def is_left(key: str) -> bool:
    return key == readchar.key.LEFT


def is_right(key: str) -> bool:
    return key == readchar.key.RIGHT


def is_tab(key: str) -> bool:
    return key in (readchar.key.TAB, "\t")


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_printable(key: str) -> bool:
    """Single printable character suitable for a text buffer."""
    return len(key) == 1 and key.isprintable()
