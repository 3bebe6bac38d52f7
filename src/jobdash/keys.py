"""Key classification for the dashboard.

The input thread hands every raw key from ``readchar`` to ``classify``.
Only quit, up and down move the dashboard; every other key maps to
``Key.OTHER`` and still triggers a redraw.
"""

from __future__ import annotations

import readchar

from .types import Key

_QUIT_KEYS = {"q", "Q", readchar.key.CTRL_C, "\x03"}
_UP_KEYS = {readchar.key.UP, "k", "K"}
_DOWN_KEYS = {readchar.key.DOWN, "j", "J"}


def is_exit(key: str) -> bool:
    """True for q or Ctrl+C."""
    return key in _QUIT_KEYS


def is_up(key: str) -> bool:
    """True for keys that move the highlight towards the top (↑, k)."""
    return key in _UP_KEYS


def is_down(key: str) -> bool:
    """True for keys that move the highlight towards the bottom (↓, j)."""
    return key in _DOWN_KEYS


def classify(key: str) -> Key:
    """Map a raw key string to a navigation Key."""
    if is_exit(key):
        return Key.QUIT
    if is_up(key):
        return Key.UP
    if is_down(key):
        return Key.DOWN
    return Key.OTHER
