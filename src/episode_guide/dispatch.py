"""Key dispatch: one key event in, one state mutation out.

``handle_event`` returns ``False`` when the host loop should stop.
"""

from __future__ import annotations

import logging

from . import keys
from .catalog import CatalogStore
from .navigation import Help, NavigationState, Searching, is_browsing, is_detail

logger = logging.getLogger(__name__)


def _handle_search_key(key: str, state: NavigationState, catalog: CatalogStore) -> None:
    if keys.is_escape(key):
        state.cancel_search(catalog)
    elif keys.is_enter(key):
        state.accept_search(catalog)
    elif keys.is_backspace(key):
        state.search_backspace(catalog)
    elif keys.is_arrow_up(key):
        state.move_cursor(-1, catalog)
    elif keys.is_arrow_down(key):
        state.move_cursor(+1, catalog)
    elif keys.is_printable(key):
        state.search_insert(key, catalog)


def _handle_browse_key(key: str, state: NavigationState, catalog: CatalogStore) -> None:
    if keys.is_tab(key):
        state.switch_tab(catalog)
    elif keys.is_left(key):
        state.cycle_series(-1, catalog)
    elif keys.is_right(key):
        state.cycle_series(+1, catalog)
    elif keys.is_up(key):
        state.move_cursor(-1, catalog)
    elif keys.is_down(key):
        state.move_cursor(+1, catalog)
    elif keys.is_enter(key):
        state.open_detail(catalog)
    elif key.lower() == keys.SEARCH_KEY:
        state.enter_search()
    elif key.lower() == keys.SORT_KEY_KEY:
        state.toggle_sort_key(catalog)
    elif key.lower() == keys.SORT_DIRECTION_KEY:
        state.toggle_sort_direction(catalog)


def handle_event(key: str, state: NavigationState, catalog: CatalogStore) -> bool:
    """Apply one key press. Returns False to request exit."""
    mode = state.mode

    # Text entry owns every printable key, including q and h.
    if isinstance(mode, Searching):
        if keys.is_interrupt(key):
            return False
        _handle_search_key(key, state, catalog)
        return True

    if keys.is_quit(key):
        return False

    if isinstance(mode, Help):
        if keys.is_help(key) or keys.is_escape(key):
            state.exit_help(catalog)
        return True

    if keys.is_help(key):
        state.enter_help()
    elif is_detail(mode):
        if keys.is_escape(key):
            state.close_detail(catalog)
    elif is_browsing(mode):
        _handle_browse_key(key, state, catalog)
    return True


class Dispatcher:
    """Binds a navigation state and catalog to ``handle_event``."""

    def __init__(self, state: NavigationState, catalog: CatalogStore):
        self.state = state
        self.catalog = catalog

    def handle_event(self, key: str) -> bool:
        keep_running = handle_event(key, self.state, self.catalog)
        if not keep_running:
            logger.debug("Quit requested from %s", type(self.state.mode).__name__)
        return keep_running
