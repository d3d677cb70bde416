"""Tests for configuration loading."""

import os

import pytest

from filmcollab.config import (
    DEFAULT_STORE_PATH,
    FilmCollabConfig,
    _parse_bool,
    get_config,
    load_config,
    reset_config,
)

CONFIG_YAML = """
tmdb:
  access_token: file-token
  timeout_seconds: 3
  max_results: 5
store:
  path: ~/movies/shared.db
embed:
  auto_load: true
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    return path


class TestLoadConfig:
    """Test configuration precedence."""

    def test_defaults(self, tmp_path):
        config = load_config([tmp_path / "missing.yaml"])
        assert isinstance(config, FilmCollabConfig)
        assert config.tmdb.access_token is None
        assert config.tmdb.base_url == "https://api.themoviedb.org/3"
        assert config.tmdb.timeout_seconds == 10.0
        assert config.tmdb.max_results == 10
        assert config.store.path == DEFAULT_STORE_PATH
        assert config.embed.auto_load is False

    def test_file_values(self, config_file):
        config = load_config([config_file])
        assert config.tmdb.access_token == "file-token"
        assert config.tmdb.timeout_seconds == 3.0
        assert config.tmdb.max_results == 5
        assert config.store.path == os.path.expanduser("~/movies/shared.db")
        assert config.embed.auto_load is True

    def test_env_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("FILMCOLLAB_TMDB_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("FILMCOLLAB_TMDB_MAX_RESULTS", "7")
        monkeypatch.setenv("FILMCOLLAB_EMBED_AUTO_LOAD", "no")
        config = load_config([config_file])
        assert config.tmdb.access_token == "env-token"
        assert config.tmdb.max_results == 7
        assert config.embed.auto_load is False
        # Untouched keys still come from the file
        assert config.tmdb.timeout_seconds == 3.0

    def test_plain_tmdb_token_env(self, config_file, monkeypatch):
        monkeypatch.setenv("TMDB_ACCESS_TOKEN", "plain-token")
        assert load_config([config_file]).tmdb.access_token == "plain-token"

        monkeypatch.setenv("FILMCOLLAB_TMDB_ACCESS_TOKEN", "prefixed-token")
        assert load_config([config_file]).tmdb.access_token == "prefixed-token"

    def test_first_existing_file_wins(self, tmp_path, config_file):
        config = load_config([tmp_path / "missing.yaml", config_file])
        assert config.tmdb.access_token == "file-token"

    def test_invalid_yaml_is_ignored(self, tmp_path, caplog):
        bad = tmp_path / "bad.yaml"
        bad.write_text("tmdb: [unclosed")
        config = load_config([bad])
        assert config.tmdb.access_token is None
        assert "Ignoring unreadable config file" in caplog.text

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- just\n- a list\n")
        assert load_config([path]).tmdb.max_results == 10


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("true", True),
        ("1", True),
        ("YES", True),
        ("on", True),
        ("false", False),
        ("0", False),
        ("off", False),
        (None, None),
    ],
)
def test_parse_bool(value, expected):
    assert _parse_bool(value) is expected


def test_get_config_is_cached(monkeypatch):
    first = get_config()
    monkeypatch.setenv("FILMCOLLAB_TMDB_ACCESS_TOKEN", "later")
    assert get_config() is first
    assert first.tmdb.access_token is None

    reset_config()
    assert get_config().tmdb.access_token == "later"
