# ABOUTME: Unit tests for the plugin configuration store.
# ABOUTME: Tests defaults, JSON loading, environment override, and saving.

import json
from pathlib import Path

import pytest

from bookshelf.config import (
    COMICVINE_API_KEY_ENV,
    ConfigurationError,
    PluginConfiguration,
    load_configuration,
    save_configuration,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(COMICVINE_API_KEY_ENV, raising=False)


class TestLoadConfiguration:
    """Tests for load_configuration."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_configuration(tmp_path / "absent.json")
        assert config == PluginConfiguration()
        assert not config.has_comicvine_api_key

    def test_reads_camel_case_key(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"comicVineApiKey": "abc123"}))
        assert load_configuration(path).comicvine_api_key == "abc123"

    def test_environment_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"comicVineApiKey": "from-file"}))
        monkeypatch.setenv(COMICVINE_API_KEY_ENV, "from-env")
        assert load_configuration(path).comicvine_api_key == "from-env"

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_configuration(path)

    def test_non_object_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[]")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_configuration(path)

    def test_non_string_key(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"comicVineApiKey": 42}))
        with pytest.raises(ConfigurationError, match="comicVineApiKey"):
            load_configuration(path)

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"comicVineApiKey": "abc", "theme": "dark"}))
        assert load_configuration(path).comicvine_api_key == "abc"

    def test_empty_environment_variable_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"comicVineApiKey": "from-file"}))
        monkeypatch.setenv(COMICVINE_API_KEY_ENV, "")
        assert load_configuration(path).comicvine_api_key == "from-file"

    def test_environment_without_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(COMICVINE_API_KEY_ENV, "from-env")
        config = load_configuration(tmp_path / "absent.json")
        assert config.has_comicvine_api_key
        assert config.comicvine_api_key == "from-env"


class TestSaveConfiguration:
    """Tests for save_configuration."""

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.json"
        written = save_configuration(PluginConfiguration(comicvine_api_key="k"), path)
        assert written == path
        assert json.loads(path.read_text()) == {"comicVineApiKey": "k"}
        assert load_configuration(path).has_comicvine_api_key

    def test_blank_key_is_not_set(self) -> None:
        assert not PluginConfiguration(comicvine_api_key="   ").has_comicvine_api_key
