"""Substring search across both catalog collections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .catalog import CatalogStore


@dataclass(frozen=True)
class EpisodeRef:
    series_index: int
    entry_index: int


@dataclass(frozen=True)
class StandaloneRef:
    entry_index: int


SearchTarget = Union[EpisodeRef, StandaloneRef]


@dataclass(frozen=True)
class SearchResult:
    """One match: where it lives plus the title shown in the results list."""

    target: SearchTarget
    title: str

    @property
    def kind(self) -> str:
        return "Episode" if isinstance(self.target, EpisodeRef) else "Movie"


def _matches(needle: str, title: str, description: str) -> bool:
    return needle in title.lower() or needle in description.lower()


def execute(query: str, catalog: CatalogStore) -> list[SearchResult]:
    """Return every entry whose title or description contains ``query``.

    Matching is case-insensitive. An empty query matches nothing. Episodes
    come first in series then entry order, followed by standalone entries
    in catalog order.
    """
    if not query:
        return []

    needle = query.lower()
    results: list[SearchResult] = []

    for series_index, group in enumerate(catalog.series):
        for entry_index, entry in enumerate(group.entries):
            if _matches(needle, entry.title, entry.description):
                results.append(
                    SearchResult(
                        target=EpisodeRef(series_index, entry_index),
                        title=f"{group.name} - {entry.title}",
                    )
                )

    for entry_index, entry in enumerate(catalog.standalone):
        if _matches(needle, entry.title, entry.description):
            results.append(SearchResult(target=StandaloneRef(entry_index), title=entry.title))

    return results
