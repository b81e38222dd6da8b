"""Catalog storage: the two collections plus JSON load/save.

Episodes live in one file as a list of series groups, standalone entries
in another as a flat list. Older catalog files used different field names
(``series``/``episodes``/``episode_number``/``saga`` ...); those are
accepted on load and rewritten with the current names on save.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .types import EpisodicEntry, SeriesGroup, StandaloneEntry

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Base error for catalog load/save operations."""


class CatalogNotFoundError(CatalogError):
    """Raised when a catalog file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Catalog file not found: {path}")


class CatalogFormatError(CatalogError):
    """Raised when a catalog file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed catalog file {path}: {reason}")


# canonical name -> accepted legacy names
_SERIES_ALIASES = {"name": ("series",), "entries": ("episodes",)}
_EPISODE_ALIASES = {"ordinal": ("episode_number", "number"), "arc": ("saga",)}
_STANDALONE_ALIASES = {
    "ordinal": ("number",),
    "attribution": ("director",),
    "categories": ("genres",),
    "keywords": ("plot_keywords",),
}


@dataclass
class CatalogStore:
    """In-memory catalog. Shape is fixed after load; only order changes."""

    series: list[SeriesGroup] = field(default_factory=list)
    standalone: list[StandaloneEntry] = field(default_factory=list)

    @classmethod
    def load(cls, episodes_path: Path, standalone_path: Path) -> "CatalogStore":
        return load(episodes_path, standalone_path)

    def save(self, episodes_path: Path, standalone_path: Path) -> None:
        save(self, episodes_path, standalone_path)

    @property
    def episode_count(self) -> int:
        return sum(len(group.entries) for group in self.series)


def default_series() -> list[SeriesGroup]:
    """Series used when no episodes file exists yet."""
    return [
        SeriesGroup(
            name="Dragon Ball",
            entries=[
                EpisodicEntry(
                    ordinal=1,
                    title="The Secret of the Dragon Balls",
                    description=(
                        "Bulma's search for six more Dragon Balls leads her "
                        "to a remote valley..."
                    ),
                    release_date="February 26, 1986",
                    duration="25m",
                    arc="Emperor Pilaf Saga (1986)",
                )
            ],
        )
    ]


def default_standalone() -> list[StandaloneEntry]:
    """Standalone entries used when no standalone file exists yet."""
    return [
        StandaloneEntry(
            ordinal=1,
            title="Curse of the Blood Rubies",
            release_date="December 20, 1986",
            runtime="50m",
            description=(
                "Goku and Bulma help a village whose people are forced to dig "
                "for rubies by the greedy King Gurumes."
            ),
            attribution="Daisuke Nishio",
            categories=["Action", "Adventure"],
            keywords=["dragon balls", "rubies", "king gurumes"],
            trivia="The first Dragon Ball film.",
        )
    ]


def default_catalog() -> CatalogStore:
    return CatalogStore(series=default_series(), standalone=default_standalone())


# ── parsing ───────────────────────────────────────────────────────────────


def _pick(raw: dict[str, Any], name: str, aliases: dict[str, tuple[str, ...]]) -> Any:
    """Return raw[name] or the first legacy alias present. KeyError if none."""
    if name in raw:
        return raw[name]
    for alias in aliases.get(name, ()):
        if alias in raw:
            return raw[alias]
    raise KeyError(name)


def _field(raw, name, kind, aliases, path: Path, where: str, default: Any = ...):
    try:
        value = _pick(raw, name, aliases)
    except KeyError:
        if default is not ...:
            return default
        raise CatalogFormatError(path, f"{where}: missing field '{name}'") from None

    if kind is int:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise CatalogFormatError(path, f"{where}: '{name}' must be an integer")
    elif kind is list:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise CatalogFormatError(path, f"{where}: '{name}' must be a list of strings")
        value = list(value)
    elif not isinstance(value, kind):
        raise CatalogFormatError(path, f"{where}: '{name}' must be a {kind.__name__}")
    return value


def _read_json_list(path: Path) -> list[Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CatalogNotFoundError(path) from None
    except json.JSONDecodeError as e:
        raise CatalogFormatError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogFormatError(path, str(e)) from e

    if not isinstance(data, list):
        raise CatalogFormatError(path, "top level must be a list")
    return data


def _parse_episode(raw: Any, path: Path, where: str) -> EpisodicEntry:
    if not isinstance(raw, dict):
        raise CatalogFormatError(path, f"{where}: expected an object")
    a = _EPISODE_ALIASES
    return EpisodicEntry(
        ordinal=_field(raw, "ordinal", int, a, path, where),
        title=_field(raw, "title", str, a, path, where),
        description=_field(raw, "description", str, a, path, where),
        release_date=_field(raw, "release_date", str, a, path, where),
        duration=_field(raw, "duration", str, a, path, where),
        arc=_field(raw, "arc", str, a, path, where),
    )


def parse_series(data: list[Any], path: Path) -> list[SeriesGroup]:
    """Validate and convert decoded episodes JSON."""
    groups: list[SeriesGroup] = []
    for i, raw in enumerate(data):
        where = f"series[{i}]"
        if not isinstance(raw, dict):
            raise CatalogFormatError(path, f"{where}: expected an object")
        name = _field(raw, "name", str, _SERIES_ALIASES, path, where)
        raw_entries = _field(raw, "entries", object, _SERIES_ALIASES, path, where)
        if not isinstance(raw_entries, list):
            raise CatalogFormatError(path, f"{where}: 'entries' must be a list")
        entries = [
            _parse_episode(entry, path, f"{where}.entries[{j}]")
            for j, entry in enumerate(raw_entries)
        ]
        groups.append(SeriesGroup(name=name, entries=entries))
    return groups


def parse_standalone(data: list[Any], path: Path) -> list[StandaloneEntry]:
    """Validate and convert decoded standalone JSON."""
    entries: list[StandaloneEntry] = []
    a = _STANDALONE_ALIASES
    for i, raw in enumerate(data):
        where = f"standalone[{i}]"
        if not isinstance(raw, dict):
            raise CatalogFormatError(path, f"{where}: expected an object")
        entries.append(
            StandaloneEntry(
                ordinal=_field(raw, "ordinal", int, a, path, where),
                title=_field(raw, "title", str, a, path, where),
                release_date=_field(raw, "release_date", str, a, path, where),
                runtime=_field(raw, "runtime", str, a, path, where),
                description=_field(raw, "description", str, a, path, where),
                attribution=_field(raw, "attribution", str, a, path, where),
                categories=_field(raw, "categories", list, a, path, where),
                keywords=_field(raw, "keywords", list, a, path, where),
                trivia=_field(raw, "trivia", str, a, path, where, default=""),
            )
        )
    return entries


# ── public API ────────────────────────────────────────────────────────────


def load_series(path: Path) -> list[SeriesGroup]:
    path = Path(path)
    return parse_series(_read_json_list(path), path)


def load_standalone(path: Path) -> list[StandaloneEntry]:
    path = Path(path)
    return parse_standalone(_read_json_list(path), path)


def load(episodes_path: Path, standalone_path: Path) -> CatalogStore:
    """Load both collections.

    Raises:
        CatalogNotFoundError: If either file is missing.
        CatalogFormatError: If either file is malformed.
    """
    catalog = CatalogStore(
        series=load_series(episodes_path),
        standalone=load_standalone(standalone_path),
    )
    logger.debug(
        "Loaded %d series (%d episodes) and %d standalone entries",
        len(catalog.series),
        catalog.episode_count,
        len(catalog.standalone),
    )
    return catalog


def load_or_default(
    episodes_path: Path,
    standalone_path: Path,
    *,
    write_defaults: bool = False,
) -> CatalogStore:
    """Load the catalog, substituting built-in defaults for missing files.

    Format errors are not recovered; they propagate to the caller.
    """
    episodes_path = Path(episodes_path)
    standalone_path = Path(standalone_path)

    pending: list[tuple[Path, Any]] = []

    try:
        series = load_series(episodes_path)
    except CatalogNotFoundError:
        logger.warning("Episodes file %s not found, using default catalog", episodes_path)
        series = default_series()
        pending.append((episodes_path, [_series_to_dict(g) for g in series]))

    try:
        standalone = load_standalone(standalone_path)
    except CatalogNotFoundError:
        logger.warning("Standalone file %s not found, using default catalog", standalone_path)
        standalone = default_standalone()
        pending.append((standalone_path, [asdict(e) for e in standalone]))

    # Nothing is written until both files have parsed.
    if write_defaults:
        for path, data in pending:
            _write_json(path, data)

    return CatalogStore(series=series, standalone=standalone)


def _series_to_dict(group: SeriesGroup) -> dict[str, Any]:
    return {"name": group.name, "entries": [asdict(e) for e in group.entries]}


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    logger.debug("Wrote %s", path)


def save(catalog: CatalogStore, episodes_path: Path, standalone_path: Path) -> None:
    """Write both collections in their current order."""
    _write_json(Path(episodes_path), [_series_to_dict(g) for g in catalog.series])
    _write_json(Path(standalone_path), [asdict(e) for e in catalog.standalone])
