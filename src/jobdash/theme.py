"""Palettes for the dashboard panels."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardTheme:
    """Rich style tokens and icons used by the renderer."""

    name: str
    accent: str = "color(130)"
    highlight: str = "bold on green3"
    item: str = "black on white"
    muted: str = "grey50"
    warning: str = "color(136)"
    border: str = "color(24)"
    highlight_symbol: str = ">> "


_BASE_THEME = DashboardTheme(name="default")

_THEMES: dict[str, DashboardTheme] = {
    "default": _BASE_THEME,
    "plain": DashboardTheme(
        name="plain",
        accent="bold",
        highlight="reverse bold",
        item="",
        muted="dim",
        warning="bold",
        border="",
    ),
    "dusk": DashboardTheme(
        name="dusk",
        accent="color(60)",  # indigo
        highlight="bold on color(60)",
        item="",
        muted="grey50",
        warning="color(101)",
        border="color(60)",
    ),
}

_current_theme: DashboardTheme = _BASE_THEME


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def available_themes() -> list[str]:
    return sorted(_THEMES)


def set_theme(name: str | None, override: str | None = None) -> DashboardTheme:
    """Select the active theme.

    Precedence: ``override`` (the --theme flag), then JOBDASH_THEME, then
    ``name`` from the config file. Unknown names fall back to the default.
    """
    global _current_theme

    key = override or os.environ.get("JOBDASH_THEME") or name
    _current_theme = _THEMES.get(_normalize_theme_key(key), _BASE_THEME) if key else _BASE_THEME
    return _current_theme


def get_theme() -> DashboardTheme:
    """Return current active theme."""
    return _current_theme
