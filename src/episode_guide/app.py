"""Interactive browser loop: Rich Live screen driven by readchar keys."""

from __future__ import annotations

import logging

import readchar
from rich.console import Console
from rich.live import Live

from .catalog import CatalogStore
from .dispatch import Dispatcher
from .navigation import NavigationState
from .render import build_frame

logger = logging.getLogger(__name__)

_console = Console(highlight=False)


def run_browser(catalog: CatalogStore, *, console: Console | None = None) -> NavigationState:
    """Run the browser until the user quits. Returns the final state."""
    console = console or _console
    state = NavigationState.initial(catalog)
    dispatcher = Dispatcher(state, catalog)

    logger.debug(
        "Starting browser with %d series and %d standalone entries",
        len(catalog.series),
        len(catalog.standalone),
    )

    with Live(
        build_frame(state, catalog, console.height),
        console=console,
        refresh_per_second=15,
        transient=True,
        screen=True,
    ) as live:
        while True:
            try:
                key = readchar.readkey()
            except (KeyboardInterrupt, EOFError):
                break

            if not dispatcher.handle_event(key):
                break

            live.update(build_frame(state, catalog, console.height))

    return state
