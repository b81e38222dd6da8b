"""Pytest fixtures for episode-guide tests."""

import json

import pytest

from episode_guide import config
from episode_guide.catalog import CatalogStore
from episode_guide.types import EpisodicEntry, SeriesGroup, StandaloneEntry


def _episode(ordinal, title, description="", release_date="", arc="") -> EpisodicEntry:
    return EpisodicEntry(
        ordinal=ordinal,
        title=title,
        description=description,
        release_date=release_date,
        duration="25m",
        arc=arc,
    )


@pytest.fixture
def sample_catalog() -> CatalogStore:
    """Three series of different lengths plus three movies."""
    return CatalogStore(
        series=[
            SeriesGroup(
                name="Dragon Ball",
                entries=[
                    _episode(
                        1,
                        "The Secret of the Dragon Balls",
                        "Bulma's search for six more Dragon Balls leads her to a remote valley...",
                        "1986-02-26",
                        "Emperor Pilaf Saga",
                    ),
                    _episode(2, "The Emperor's Quest", "Pilaf wants the balls.", "1986-03-05"),
                    _episode(3, "The Nimbus Cloud of Roshi", "Goku meets Master Roshi.", "1986-03-12"),
                ],
            ),
            SeriesGroup(
                name="Z",
                entries=[
                    _episode(1, "The New Threat", "Raditz arrives on Earth.", "1989-04-26"),
                    _episode(2, "Reunions", "Old friends gather at Kame House.", "1989-05-03"),
                ],
            ),
            SeriesGroup(
                name="GT",
                entries=[
                    _episode(1, "A Grand Parade", "The black star balls are gathered.", "1996-02-07"),
                ],
            ),
        ],
        standalone=[
            StandaloneEntry(
                ordinal=1,
                title="Curse of the Blood Rubies",
                release_date="1986-12-20",
                runtime="50m",
                description="Goku and Bulma help a village.",
                attribution="Daisuke Nishio",
                categories=["Action"],
                keywords=["rubies"],
            ),
            StandaloneEntry(
                ordinal=2,
                title="Sleeping Princess in Devil's Castle",
                release_date="1987-07-18",
                runtime="45m",
                description="Goku trains with Krillin.",
                attribution="Daisuke Nishio",
            ),
            StandaloneEntry(
                ordinal=3,
                title="Mystical Adventure",
                release_date="1988-07-09",
                runtime="46m",
                description="A tournament in Mifan.",
                attribution="Kazuhisa Takenouchi",
            ),
        ],
    )


@pytest.fixture
def empty_catalog() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """Point the config directory at a temp dir."""
    config_dir = tmp_path / "episode-guide"
    config_dir.mkdir()
    monkeypatch.setattr(config, "get_config_dir", lambda: config_dir)
    monkeypatch.delenv("EPISODE_GUIDE_THEME", raising=False)
    return config_dir


@pytest.fixture
def catalog_files(tmp_path):
    """Write a small episodes/standalone pair and return their paths."""
    def _write(episodes=None, standalone=None):
        episodes_path = tmp_path / "episodes.json"
        standalone_path = tmp_path / "movies.json"
        if episodes is not None:
            episodes_path.write_text(
                episodes if isinstance(episodes, str) else json.dumps(episodes)
            )
        if standalone is not None:
            standalone_path.write_text(
                standalone if isinstance(standalone, str) else json.dumps(standalone)
            )
        return episodes_path, standalone_path

    return _write
