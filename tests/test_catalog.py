"""Tests for catalog loading, saving and default substitution."""

import json

import pytest

from episode_guide import catalog
from episode_guide.catalog import CatalogFormatError, CatalogNotFoundError, CatalogStore

EPISODES = [
    {
        "name": "Dragon Ball",
        "entries": [
            {
                "ordinal": 1,
                "title": "The Secret of the Dragon Balls",
                "description": "Bulma's search...",
                "release_date": "February 26, 1986",
                "duration": "25m",
                "arc": "Emperor Pilaf Saga (1986)",
            }
        ],
    }
]

STANDALONE = [
    {
        "ordinal": 1,
        "title": "Curse of the Blood Rubies",
        "release_date": "December 20, 1986",
        "runtime": "50m",
        "description": "Rubies.",
        "attribution": "Daisuke Nishio",
        "categories": ["Action"],
        "keywords": ["rubies"],
    }
]


class TestLoad:
    def test_loads_both_files(self, catalog_files):
        episodes_path, standalone_path = catalog_files(EPISODES, STANDALONE)
        store = catalog.load(episodes_path, standalone_path)

        assert [g.name for g in store.series] == ["Dragon Ball"]
        entry = store.series[0].entries[0]
        assert entry.ordinal == 1
        assert entry.arc == "Emperor Pilaf Saga (1986)"
        assert store.standalone[0].categories == ["Action"]
        assert store.standalone[0].trivia == ""

    def test_classmethod_delegates(self, catalog_files):
        episodes_path, standalone_path = catalog_files(EPISODES, STANDALONE)
        store = CatalogStore.load(episodes_path, standalone_path)
        assert store.episode_count == 1

    def test_missing_episodes_file(self, catalog_files):
        episodes_path, standalone_path = catalog_files(None, STANDALONE)
        with pytest.raises(CatalogNotFoundError) as exc:
            catalog.load(episodes_path, standalone_path)
        assert exc.value.path == episodes_path

    def test_missing_standalone_file(self, catalog_files):
        episodes_path, standalone_path = catalog_files(EPISODES, None)
        with pytest.raises(CatalogNotFoundError):
            catalog.load(episodes_path, standalone_path)

    def test_invalid_json(self, catalog_files):
        episodes_path, standalone_path = catalog_files("{not json", STANDALONE)
        with pytest.raises(CatalogFormatError, match="invalid JSON"):
            catalog.load(episodes_path, standalone_path)

    def test_top_level_must_be_list(self, catalog_files):
        episodes_path, standalone_path = catalog_files({"name": "x"}, STANDALONE)
        with pytest.raises(CatalogFormatError, match="top level must be a list"):
            catalog.load(episodes_path, standalone_path)

    def test_missing_required_field(self, catalog_files):
        broken = json.loads(json.dumps(EPISODES))
        del broken[0]["entries"][0]["title"]
        episodes_path, standalone_path = catalog_files(broken, STANDALONE)
        with pytest.raises(CatalogFormatError, match="missing field 'title'"):
            catalog.load(episodes_path, standalone_path)

    def test_wrong_ordinal_type(self, catalog_files):
        broken = json.loads(json.dumps(STANDALONE))
        broken[0]["ordinal"] = "one"
        episodes_path, standalone_path = catalog_files(EPISODES, broken)
        with pytest.raises(CatalogFormatError, match="must be an integer"):
            catalog.load(episodes_path, standalone_path)

    def test_bool_is_not_an_ordinal(self, catalog_files):
        broken = json.loads(json.dumps(STANDALONE))
        broken[0]["ordinal"] = True
        episodes_path, standalone_path = catalog_files(EPISODES, broken)
        with pytest.raises(CatalogFormatError):
            catalog.load(episodes_path, standalone_path)

    def test_categories_must_be_strings(self, catalog_files):
        broken = json.loads(json.dumps(STANDALONE))
        broken[0]["categories"] = [1, 2]
        episodes_path, standalone_path = catalog_files(EPISODES, broken)
        with pytest.raises(CatalogFormatError, match="list of strings"):
            catalog.load(episodes_path, standalone_path)

    def test_accepts_legacy_field_names(self, catalog_files):
        legacy_episodes = [
            {
                "series": "Dragon Ball",
                "episodes": [
                    {
                        "episode_number": 7,
                        "title": "Bulma's Bikini",
                        "description": "",
                        "release_date": "",
                        "duration": "",
                        "saga": "Pilaf",
                    }
                ],
            }
        ]
        legacy_movies = [
            {
                "number": 2,
                "title": "Sleeping Princess",
                "release_date": "",
                "runtime": "",
                "description": "",
                "director": "Nishio",
                "genres": ["Fantasy"],
                "plot_keywords": ["castle"],
                "trivia": "Second film.",
            }
        ]
        episodes_path, standalone_path = catalog_files(legacy_episodes, legacy_movies)
        store = catalog.load(episodes_path, standalone_path)

        assert store.series[0].name == "Dragon Ball"
        assert store.series[0].entries[0].ordinal == 7
        assert store.series[0].entries[0].arc == "Pilaf"
        movie = store.standalone[0]
        assert movie.ordinal == 2
        assert movie.attribution == "Nishio"
        assert movie.categories == ["Fantasy"]
        assert movie.keywords == ["castle"]
        assert movie.trivia == "Second film."


class TestLoadOrDefault:
    def test_substitutes_defaults_for_missing_files(self, tmp_path):
        store = catalog.load_or_default(tmp_path / "e.json", tmp_path / "m.json")
        assert store.series[0].name == "Dragon Ball"
        assert store.series[0].entries[0].title == "The Secret of the Dragon Balls"
        assert len(store.standalone) == 1
        assert not (tmp_path / "e.json").exists()

    def test_writes_defaults_when_requested(self, tmp_path):
        episodes_path = tmp_path / "data" / "e.json"
        standalone_path = tmp_path / "data" / "m.json"
        catalog.load_or_default(episodes_path, standalone_path, write_defaults=True)

        assert episodes_path.exists()
        assert standalone_path.exists()
        reloaded = catalog.load(episodes_path, standalone_path)
        assert reloaded.series[0].entries[0].ordinal == 1

    def test_only_missing_file_is_substituted(self, catalog_files):
        episodes_path, standalone_path = catalog_files(EPISODES, None)
        store = catalog.load_or_default(episodes_path, standalone_path)
        assert store.series[0].entries[0].description == "Bulma's search..."
        assert store.standalone[0].title == "Curse of the Blood Rubies"

    def test_format_errors_propagate(self, catalog_files):
        episodes_path, standalone_path = catalog_files("[1, 2", None)
        with pytest.raises(CatalogFormatError):
            catalog.load_or_default(episodes_path, standalone_path)

    def test_malformed_file_blocks_default_writes(self, catalog_files):
        episodes_path, standalone_path = catalog_files(None, "{broken")
        with pytest.raises(CatalogFormatError):
            catalog.load_or_default(episodes_path, standalone_path, write_defaults=True)
        assert not episodes_path.exists()

    def test_logs_substitution(self, tmp_path, caplog):
        with caplog.at_level("WARNING", logger="episode_guide.catalog"):
            catalog.load_or_default(tmp_path / "e.json", tmp_path / "m.json")
        assert "not found" in caplog.text


class TestSave:
    def test_save_preserves_current_order(self, tmp_path, sample_catalog):
        sample_catalog.standalone.reverse()
        episodes_path = tmp_path / "out" / "e.json"
        standalone_path = tmp_path / "out" / "m.json"
        sample_catalog.save(episodes_path, standalone_path)

        reloaded = catalog.load(episodes_path, standalone_path)
        assert [m.title for m in reloaded.standalone] == [
            m.title for m in sample_catalog.standalone
        ]
        assert reloaded.series == sample_catalog.series

    def test_save_writes_canonical_names(self, tmp_path, sample_catalog):
        episodes_path = tmp_path / "e.json"
        standalone_path = tmp_path / "m.json"
        catalog.save(sample_catalog, episodes_path, standalone_path)

        raw = json.loads(episodes_path.read_text())
        assert set(raw[0]) == {"name", "entries"}
        assert "ordinal" in raw[0]["entries"][0]
        raw_movies = json.loads(standalone_path.read_text())
        assert "attribution" in raw_movies[0]
