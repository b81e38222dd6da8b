"""Build Rich frames from the navigation state.

Rendering only reads state. Each screen is assembled as Rich markup and
converted with ``Text.from_markup``; catalog text is escaped first.
"""

from __future__ import annotations

from rich.markup import escape
from rich.text import Text

from .catalog import CatalogStore
from .navigation import (
    BrowsingCategoryPlaceholder,
    BrowsingEpisodes,
    BrowsingStandalone,
    EntryDetail,
    Help,
    NavigationState,
    Searching,
    StandaloneDetail,
)
from .theme import (
    cursor_prefix,
    dim_separator,
    get_theme,
    keybinding_hint,
    label,
    row_style,
    tab_bar,
)
from .types import SortDirection, SortKey, Tab

# Rows used by tab bars, headers and footer around a list.
CHROME_LINES = 9
MIN_VISIBLE_ROWS = 3

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("Tab", "Switch between main tabs"),
            ("Left/Right", "Navigate series tabs (in Episodes tab)"),
            ("Up/Down", "Navigate lists"),
            ("Enter", "View details of selected item"),
            ("Esc", "Go back / Exit search"),
        ],
    ),
    (
        "Actions",
        [
            ("Q/q", "Quit the application"),
            ("H/h", "Toggle this help screen"),
            ("S/s", "Enter search mode"),
        ],
    ),
    (
        "Sorting",
        [
            ("M/m", "Change sort method"),
            ("O/o", "Toggle sort order"),
        ],
    ),
]


def _calculate_visible_range(cursor: int, total: int, max_visible: int) -> tuple[int, int]:
    """Window [start, end) of rows that keeps the cursor on screen."""
    if total == 0:
        return 0, 0
    cursor = max(0, min(cursor, total - 1))
    start = 0
    if cursor >= max_visible:
        start = cursor - max_visible + 1
    end = min(start + max_visible, total)
    return start, end


def _sort_badge(key: SortKey, direction: SortDirection) -> str:
    theme = get_theme()
    badge = escape(f"[{key.label} {direction.arrow}]")
    return f"[{theme.warning_rich}]{badge}[/{theme.warning_rich}]"


def _render_rows(rows: list[str], cursor: int | None, height: int) -> list[str]:
    theme = get_theme()
    if not rows:
        return [f"  [{theme.muted_rich}](empty)[/{theme.muted_rich}]"]

    max_visible = max(MIN_VISIBLE_ROWS, height - CHROME_LINES)
    start, end = _calculate_visible_range(cursor or 0, len(rows), max_visible)

    lines: list[str] = []
    if start > 0:
        lines.append(f"  [{theme.muted_rich}]↑ {start} more above[/{theme.muted_rich}]")
    for i in range(start, end):
        is_current = i == cursor
        style, end_style = row_style(is_current)
        lines.append(f"{cursor_prefix(is_current)}{style}{rows[i]}{end_style}")
    below = len(rows) - end
    if below > 0:
        lines.append(f"  [{theme.muted_rich}]↓ {below} more below[/{theme.muted_rich}]")
    return lines


# ── screens ───────────────────────────────────────────────────────────────


def _episode_list(state: NavigationState, catalog: CatalogStore, series_index: int, height: int) -> list[str]:
    theme = get_theme()
    lines = [
        f"[{theme.info_rich}]Episodes[/{theme.info_rich}] "
        f"{_sort_badge(state.episode_sort_key, state.episode_sort_direction)}"
    ]
    if not 0 <= series_index < len(catalog.series):
        lines.append(f"  [{theme.muted_rich}](no series loaded)[/{theme.muted_rich}]")
        return lines
    rows = [f"{e.ordinal}: {escape(e.title)}" for e in catalog.series[series_index].entries]
    lines.extend(_render_rows(rows, state.cursor, height))
    return lines


def _standalone_list(state: NavigationState, catalog: CatalogStore, height: int) -> list[str]:
    theme = get_theme()
    lines = [
        f"[{theme.info_rich}]Movies[/{theme.info_rich}] "
        f"{_sort_badge(state.standalone_sort_key, state.standalone_sort_direction)}"
    ]
    rows = [f"{e.ordinal}: {escape(e.title)}" for e in catalog.standalone]
    lines.extend(_render_rows(rows, state.cursor, height))
    return lines


def _episode_detail(catalog: CatalogStore, series_index: int, entry_index: int) -> list[str]:
    try:
        entry = catalog.series[series_index].entries[entry_index]
    except IndexError:
        return []
    theme = get_theme()
    return [
        f"[bold {theme.accent_rich}]Episode Details: {escape(entry.title)}[/bold {theme.accent_rich}]",
        "",
        f"{label('Episode Number:')} {entry.ordinal}",
        f"{label('Release Date:')} {escape(entry.release_date)}",
        f"{label('Duration:')} {escape(entry.duration)}",
        f"{label('Saga:')} {escape(entry.arc)}",
        "",
        label("Description:"),
        escape(entry.description),
    ]


def _standalone_detail(catalog: CatalogStore, entry_index: int) -> list[str]:
    try:
        entry = catalog.standalone[entry_index]
    except IndexError:
        return []
    theme = get_theme()
    return [
        f"[bold {theme.accent_rich}]Movie Details: {escape(entry.title)}[/bold {theme.accent_rich}]",
        "",
        f"{label('Number:')} {entry.ordinal}",
        f"{label('Release Date:')} {escape(entry.release_date)}",
        f"{label('Runtime:')} {escape(entry.runtime)}",
        f"{label('Director:')} {escape(entry.attribution)}",
        f"{label('Genres:')} {escape(', '.join(entry.categories))}",
        "",
        label("Description:"),
        escape(entry.description),
        "",
        label("Trivia:"),
        escape(entry.trivia),
        "",
        f"{label('Plot Keywords:')} {escape(', '.join(entry.keywords))}",
    ]


def _search_screen(state: NavigationState, height: int) -> list[str]:
    theme = get_theme()
    lines = [
        f"[bold]Search:[/bold] [{theme.info_rich}]{escape(state.query)}[/{theme.info_rich}]▏",
        dim_separator(),
    ]
    if state.query and not state.results:
        lines.append(f"  [{theme.muted_rich}]No matches.[/{theme.muted_rich}]")
        return lines
    if not state.query:
        return lines
    rows = [
        f"[{theme.success_rich}]{escape('[' + result.kind + ']')}[/{theme.success_rich}] "
        f"{escape(result.title)}"
        for result in state.results
    ]
    lines.extend(_render_rows(rows, state.cursor, height))
    return lines


def _help_screen() -> list[str]:
    theme = get_theme()
    lines = [f"[bold {theme.accent_rich}]Help[/bold {theme.accent_rich}]", ""]
    for section, items in HELP_SECTIONS:
        lines.append(f"[bold {theme.warning_rich}]{section}[/bold {theme.warning_rich}]")
        for key, description in items:
            lines.append(f"  [{theme.success_rich}]{key:<12}[/{theme.success_rich}]{description}")
        lines.append("")
    return lines


def _category_placeholder() -> list[str]:
    theme = get_theme()
    return [
        f"[{theme.info_rich}]Categories[/{theme.info_rich}]",
        "",
        f"  [{theme.muted_rich}]Category details go here.[/{theme.muted_rich}]",
    ]


def _footer(state: NavigationState) -> str:
    mode = state.mode
    if isinstance(mode, Searching):
        return keybinding_hint(["type to search", "↑↓ select", "↵ open", "esc back"])
    if isinstance(mode, Help):
        return keybinding_hint(["h/esc close", "q quit"])
    if isinstance(mode, (EntryDetail, StandaloneDetail)):
        return keybinding_hint(["esc back", "h help", "q quit"])
    actions = ["tab switch", "↵ open", "s search", "m sort key", "o order", "h help", "q quit"]
    if state.tab == Tab.EPISODES:
        actions.insert(1, "←→ series")
    return keybinding_hint(actions, include_nav=True)


def build_lines(state: NavigationState, catalog: CatalogStore, height: int = 24) -> list[str]:
    """Return the frame as a list of Rich markup lines."""
    lines = [tab_bar([t.label for t in Tab], int(state.tab)), dim_separator()]
    mode = state.mode

    if isinstance(mode, Help):
        lines.extend(_help_screen())
    elif isinstance(mode, Searching):
        lines.extend(_search_screen(state, height))
    else:
        if state.tab == Tab.EPISODES and catalog.series:
            names = [escape(group.name) for group in catalog.series]
            lines.append(tab_bar(names, state.series_index))
            lines.append(dim_separator())

        if isinstance(mode, BrowsingEpisodes):
            lines.extend(_episode_list(state, catalog, mode.series_index, height))
        elif isinstance(mode, EntryDetail):
            lines.extend(_episode_detail(catalog, mode.series_index, mode.entry_index))
        elif isinstance(mode, BrowsingStandalone):
            lines.extend(_standalone_list(state, catalog, height))
        elif isinstance(mode, StandaloneDetail):
            lines.extend(_standalone_detail(catalog, mode.entry_index))
        elif isinstance(mode, BrowsingCategoryPlaceholder):
            lines.extend(_category_placeholder())

    lines.append("")
    lines.append(_footer(state))
    return lines


def build_frame(state: NavigationState, catalog: CatalogStore, height: int = 24) -> Text:
    """Render the current state as a Rich Text renderable."""
    return Text.from_markup("\n".join(build_lines(state, catalog, height)))
