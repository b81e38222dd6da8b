"""Semantic style helpers and named palettes for the browser screens."""

from __future__ import annotations

import os
from dataclasses import dataclass

SEPARATOR_WIDTH = 50


@dataclass(frozen=True)
class TuiTheme:
    """Semantic palette tokens for Rich markup."""

    name: str
    accent_rich: str
    info_rich: str
    success_rich: str
    warning_rich: str
    error_rich: str
    muted_rich: str
    highlight_rich: str


_BASE_THEME = TuiTheme(
    name="default",
    accent_rich="color(130)",  # warm rust
    info_rich="color(24)",     # deep blue
    success_rich="color(28)",  # dark green
    warning_rich="color(136)",  # ochre
    error_rich="color(124)",   # brick red
    muted_rich="grey50",
    highlight_rich="black on color(136)",
)


_THEMES: dict[str, TuiTheme] = {
    "default": _BASE_THEME,
    "saiyan": TuiTheme(
        name="saiyan",
        accent_rich="color(208)",   # gi orange
        info_rich="color(25)",
        success_rich="color(29)",
        warning_rich="color(220)",
        error_rich="color(124)",
        muted_rich="grey50",
        highlight_rich="black on color(220)",
    ),
    "capsule": TuiTheme(
        name="capsule",
        accent_rich="color(31)",    # capsule corp blue
        info_rich="color(67)",
        success_rich="color(29)",
        warning_rich="color(179)",
        error_rich="color(124)",
        muted_rich="grey50",
        highlight_rich="white on color(31)",
    ),
}


_current_theme: TuiTheme = _BASE_THEME


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def set_theme(name: str | None) -> TuiTheme:
    """Select the active theme by name (EPISODE_GUIDE_THEME env wins)."""
    global _current_theme

    env_theme = os.environ.get("EPISODE_GUIDE_THEME")
    if not isinstance(name, str):
        name = ""
    key = env_theme or name
    _current_theme = _THEMES.get(_normalize_theme_key(key), _BASE_THEME)
    return _current_theme


def get_theme() -> TuiTheme:
    """Return current active theme."""
    return _current_theme


def theme_names() -> list[str]:
    return sorted(_THEMES)


def dim_separator(width: int = SEPARATOR_WIDTH) -> str:
    """Return a standard muted separator line."""
    theme = get_theme()
    return f"[{theme.muted_rich}]{'─' * width}[/{theme.muted_rich}]"


def cursor_prefix(is_current: bool) -> str:
    """Return the standard row cursor prefix."""
    if not is_current:
        return "  "
    theme = get_theme()
    return f"[{theme.accent_rich}]❯[/{theme.accent_rich}] "


def row_style(is_current: bool) -> tuple[str, str]:
    """Return base row style tags."""
    if not is_current:
        return "", ""
    theme = get_theme()
    return f"[{theme.highlight_rich}]", f"[/{theme.highlight_rich}]"


def label(text: str) -> str:
    """Field label used in detail views."""
    theme = get_theme()
    return f"[{theme.warning_rich}]{text}[/{theme.warning_rich}]"


def tab_bar(titles: list[str], selected: int) -> str:
    """Render a one-line tab strip with the selected tab highlighted."""
    theme = get_theme()
    parts = []
    for i, title in enumerate(titles):
        if i == selected:
            parts.append(f"[bold {theme.accent_rich} reverse] {title} [/bold {theme.accent_rich} reverse]")
        else:
            parts.append(f" {title} ")
    return f"[{theme.muted_rich}]|[/{theme.muted_rich}]".join(parts)


def keybinding_hint(actions: list[str], *, include_nav: bool = False) -> str:
    """Return a standardized dim keybinding hint line."""
    parts = list(actions)
    if include_nav:
        parts.insert(0, "↑↓/jk nav")
    theme = get_theme()
    joined = " · ".join(parts)
    return f"[{theme.muted_rich}]{joined}[/{theme.muted_rich}]"
