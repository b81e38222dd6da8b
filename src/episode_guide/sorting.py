"""In-place sorting of catalog collections.

Descending order is the exact reverse of the stable ascending order, so
entries with equal keys come out in reverse of their ascending order.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .types import EpisodicEntry, SeriesGroup, SortDirection, SortKey, StandaloneEntry

logger = logging.getLogger(__name__)

T = TypeVar("T", EpisodicEntry, StandaloneEntry)


def _key_func(key: SortKey) -> Callable[[EpisodicEntry | StandaloneEntry], int | str]:
    if key == SortKey.ORDINAL:
        return lambda entry: entry.ordinal
    if key == SortKey.TITLE:
        return lambda entry: entry.title
    return lambda entry: entry.release_date


def _sort_in_place(items: list[T], key: SortKey, direction: SortDirection) -> None:
    items.sort(key=_key_func(key))
    if direction == SortDirection.DESCENDING:
        items.reverse()


def sort_episodes(group: SeriesGroup, key: SortKey, direction: SortDirection) -> None:
    """Reorder one series' entries."""
    _sort_in_place(group.entries, key, direction)


def sort_standalone(
    entries: list[StandaloneEntry], key: SortKey, direction: SortDirection
) -> None:
    """Reorder the standalone list."""
    _sort_in_place(entries, key, direction)
    logger.debug("Sorted %d standalone entries by %s %s", len(entries), key, direction)


def sort_all_series(
    groups: list[SeriesGroup], key: SortKey, direction: SortDirection
) -> None:
    """Sort every series on its own entries with the same key and direction."""
    for group in groups:
        sort_episodes(group, key, direction)
    logger.debug("Sorted %d series by %s %s", len(groups), key, direction)
