"""Type definitions for episode-guide.

Shared dataclasses and enums used by the catalog, sort, search and
navigation layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


# ── catalog records ───────────────────────────────────────────────────────


@dataclass
class EpisodicEntry:
    """A single episode inside a series."""

    ordinal: int
    title: str
    description: str = ""
    release_date: str = ""
    duration: str = ""
    arc: str = ""  # saga / story arc label


@dataclass
class SeriesGroup:
    """A named, ordered collection of episodes."""

    name: str
    entries: list[EpisodicEntry] = field(default_factory=list)


@dataclass
class StandaloneEntry:
    """A standalone catalog item (a movie or special)."""

    ordinal: int
    title: str
    release_date: str = ""
    runtime: str = ""
    description: str = ""
    attribution: str = ""  # director / studio credit
    categories: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    trivia: str = ""


# ── sort settings ─────────────────────────────────────────────────────────


class SortKey(str, Enum):
    """Field a collection is ordered by. Cycles in declaration order."""

    ORDINAL = "ordinal"
    TITLE = "title"
    RELEASE_DATE = "release_date"

    def __str__(self) -> str:
        return self.value

    def next(self) -> "SortKey":
        members = list(SortKey)
        return members[(members.index(self) + 1) % len(members)]

    @property
    def label(self) -> str:
        """Short label for list headers."""
        return {
            SortKey.ORDINAL: "#",
            SortKey.TITLE: "Title",
            SortKey.RELEASE_DATE: "Date",
        }[self]


class SortDirection(str, Enum):
    """Ascending or descending order."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    def __str__(self) -> str:
        return self.value

    def toggled(self) -> "SortDirection":
        if self == SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING

    @property
    def arrow(self) -> str:
        return "↑" if self == SortDirection.ASCENDING else "↓"


class Tab(IntEnum):
    """Top-level tabs, in cycling order."""

    EPISODES = 0
    STANDALONE = 1
    CATEGORIES = 2

    def next(self) -> "Tab":
        return Tab((self.value + 1) % len(Tab))

    @property
    def label(self) -> str:
        return {
            Tab.EPISODES: "Episodes",
            Tab.STANDALONE: "Movies",
            Tab.CATEGORIES: "Categories",
        }[self]
