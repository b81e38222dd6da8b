"""Navigation state machine for the browser.

The mode is a tagged union: one frozen dataclass per variant, each
carrying exactly the indices it needs. All state changes go through the
methods on ``NavigationState``; the dispatcher decides which to call.

The cursor is ``None`` exactly when the list it points into is empty.
Sort settings belong to the session and survive tab switches; only the
explicit toggles re-sort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from . import search, sorting
from .catalog import CatalogStore
from .search import EpisodeRef, SearchResult
from .types import SortDirection, SortKey, Tab

logger = logging.getLogger(__name__)


# ── modes ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BrowsingEpisodes:
    series_index: int


@dataclass(frozen=True)
class BrowsingStandalone:
    pass


@dataclass(frozen=True)
class BrowsingCategoryPlaceholder:
    pass


@dataclass(frozen=True)
class EntryDetail:
    series_index: int
    entry_index: int


@dataclass(frozen=True)
class StandaloneDetail:
    entry_index: int


@dataclass(frozen=True)
class Searching:
    pass


@dataclass(frozen=True)
class Help:
    pass


Mode = Union[
    BrowsingEpisodes,
    BrowsingStandalone,
    BrowsingCategoryPlaceholder,
    EntryDetail,
    StandaloneDetail,
    Searching,
    Help,
]

BROWSING_MODES = (BrowsingEpisodes, BrowsingStandalone, BrowsingCategoryPlaceholder)
DETAIL_MODES = (EntryDetail, StandaloneDetail)


def is_browsing(mode: Mode) -> bool:
    return isinstance(mode, BROWSING_MODES)


def is_detail(mode: Mode) -> bool:
    return isinstance(mode, DETAIL_MODES)


def _clamp(index: int, count: int) -> int | None:
    if count <= 0:
        return None
    return max(0, min(index, count - 1))


# ── state ─────────────────────────────────────────────────────────────────


@dataclass
class NavigationState:
    """Everything the dispatcher mutates and the renderer reads."""

    tab: Tab = Tab.EPISODES
    series_index: int = 0
    mode: Mode = field(default_factory=lambda: BrowsingEpisodes(0))
    cursor: int | None = None
    query: str = ""
    results: list[SearchResult] = field(default_factory=list)
    saved_mode: Mode | None = None  # single slot, restored when Help closes
    episode_sort_key: SortKey = SortKey.ORDINAL
    episode_sort_direction: SortDirection = SortDirection.ASCENDING
    standalone_sort_key: SortKey = SortKey.ORDINAL
    standalone_sort_direction: SortDirection = SortDirection.ASCENDING

    @classmethod
    def initial(cls, catalog: CatalogStore) -> "NavigationState":
        """Episodes tab, first series, cursor on the first row if any."""
        state = cls()
        state._reset_cursor(catalog)
        return state

    # ── list bookkeeping ──────────────────────────────────────────────────

    def browsing_mode(self) -> Mode:
        """Browsing mode implied by the current tab/series context."""
        if self.tab == Tab.EPISODES:
            return BrowsingEpisodes(self.series_index)
        if self.tab == Tab.STANDALONE:
            return BrowsingStandalone()
        return BrowsingCategoryPlaceholder()

    def _list_length(self, mode: Mode, catalog: CatalogStore) -> int:
        if isinstance(mode, (BrowsingEpisodes, EntryDetail)):
            if 0 <= mode.series_index < len(catalog.series):
                return len(catalog.series[mode.series_index].entries)
            return 0
        if isinstance(mode, (BrowsingStandalone, StandaloneDetail)):
            return len(catalog.standalone)
        if isinstance(mode, Searching):
            return len(self.results)
        if isinstance(mode, Help) and self.saved_mode is not None:
            return self._list_length(self.saved_mode, catalog)
        return 0

    def visible_count(self, catalog: CatalogStore) -> int:
        """Length of the list the cursor indexes into."""
        return self._list_length(self.mode, catalog)

    def _reset_cursor(self, catalog: CatalogStore) -> None:
        self.cursor = 0 if self.visible_count(catalog) > 0 else None

    def _clamp_cursor(self, catalog: CatalogStore) -> None:
        self.cursor = _clamp(self.cursor or 0, self.visible_count(catalog))

    # ── tabs ──────────────────────────────────────────────────────────────

    def switch_tab(self, catalog: CatalogStore) -> None:
        self.tab = self.tab.next()
        self.mode = self.browsing_mode()
        self._reset_cursor(catalog)

    def cycle_series(self, delta: int, catalog: CatalogStore) -> None:
        """Move to the previous/next series, wrapping around."""
        if self.tab != Tab.EPISODES or not isinstance(self.mode, BrowsingEpisodes):
            return
        count = len(catalog.series)
        if count == 0:
            return
        self.series_index = (self.series_index + delta) % count
        self.mode = BrowsingEpisodes(self.series_index)
        self._reset_cursor(catalog)

    # ── cursor ────────────────────────────────────────────────────────────

    def move_cursor(self, delta: int, catalog: CatalogStore) -> None:
        """Move the cursor by ``delta``, clamped to the list bounds."""
        count = self.visible_count(catalog)
        if count == 0:
            self.cursor = None
            return
        if self.cursor is None:
            self.cursor = 0
            return
        self.cursor = _clamp(self.cursor + delta, count)

    # ── detail ────────────────────────────────────────────────────────────

    def open_detail(self, catalog: CatalogStore) -> None:
        if self.cursor is None or self.cursor >= self.visible_count(catalog):
            return
        if isinstance(self.mode, BrowsingEpisodes):
            self.mode = EntryDetail(self.mode.series_index, self.cursor)
        elif isinstance(self.mode, BrowsingStandalone):
            self.mode = StandaloneDetail(self.cursor)

    def close_detail(self, catalog: CatalogStore) -> None:
        """Return to the list the detail was opened from."""
        mode = self.mode
        if isinstance(mode, EntryDetail):
            self.tab = Tab.EPISODES
            self.series_index = mode.series_index
            self.mode = BrowsingEpisodes(mode.series_index)
            self.cursor = mode.entry_index
        elif isinstance(mode, StandaloneDetail):
            self.tab = Tab.STANDALONE
            self.mode = BrowsingStandalone()
            self.cursor = mode.entry_index
        else:
            return
        self._clamp_cursor(catalog)

    # ── help overlay ──────────────────────────────────────────────────────

    def enter_help(self) -> None:
        if isinstance(self.mode, Help):
            return
        self.saved_mode = self.mode
        self.mode = Help()

    def exit_help(self, catalog: CatalogStore) -> None:
        if not isinstance(self.mode, Help):
            return
        self.mode = self.saved_mode if self.saved_mode is not None else self.browsing_mode()
        self.saved_mode = None
        self._clamp_cursor(catalog)

    def toggle_help(self, catalog: CatalogStore) -> None:
        if isinstance(self.mode, Help):
            self.exit_help(catalog)
        else:
            self.enter_help()

    # ── search ────────────────────────────────────────────────────────────

    def enter_search(self) -> None:
        self.mode = Searching()
        self.query = ""
        self.results = []
        self.cursor = None

    def _rerun_search(self, catalog: CatalogStore) -> None:
        self.results = search.execute(self.query, catalog)
        self._reset_cursor(catalog)
        logger.debug("Search %r -> %d results", self.query, len(self.results))

    def search_insert(self, char: str, catalog: CatalogStore) -> None:
        self.query += char
        self._rerun_search(catalog)

    def search_backspace(self, catalog: CatalogStore) -> None:
        self.query = self.query[:-1]
        self._rerun_search(catalog)

    def accept_search(self, catalog: CatalogStore) -> None:
        """Open the selected result's detail view."""
        if self.cursor is None or self.cursor >= len(self.results):
            return
        target = self.results[self.cursor].target
        if isinstance(target, EpisodeRef):
            self.tab = Tab.EPISODES
            self.series_index = target.series_index
            self.mode = EntryDetail(target.series_index, target.entry_index)
        else:
            self.tab = Tab.STANDALONE
            self.mode = StandaloneDetail(target.entry_index)
        self.cursor = target.entry_index
        self.query = ""
        self.results = []
        self._clamp_cursor(catalog)

    def cancel_search(self, catalog: CatalogStore) -> None:
        self.mode = self.browsing_mode()
        self.query = ""
        self.results = []
        self._reset_cursor(catalog)

    # ── sorting ───────────────────────────────────────────────────────────

    def resort(self, catalog: CatalogStore) -> None:
        """Re-apply the active tab's sort settings to its collection."""
        if self.tab == Tab.EPISODES:
            sorting.sort_all_series(
                catalog.series, self.episode_sort_key, self.episode_sort_direction
            )
        elif self.tab == Tab.STANDALONE:
            sorting.sort_standalone(
                catalog.standalone, self.standalone_sort_key, self.standalone_sort_direction
            )
        self._clamp_cursor(catalog)

    def toggle_sort_key(self, catalog: CatalogStore) -> None:
        if self.tab == Tab.EPISODES:
            self.episode_sort_key = self.episode_sort_key.next()
        elif self.tab == Tab.STANDALONE:
            self.standalone_sort_key = self.standalone_sort_key.next()
        else:
            return
        self.resort(catalog)

    def toggle_sort_direction(self, catalog: CatalogStore) -> None:
        if self.tab == Tab.EPISODES:
            self.episode_sort_direction = self.episode_sort_direction.toggled()
        elif self.tab == Tab.STANDALONE:
            self.standalone_sort_direction = self.standalone_sort_direction.toggled()
        else:
            return
        self.resort(catalog)
