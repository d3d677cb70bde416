"""Pytest configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

from filmcollab.catalog import TMDBClient
from filmcollab.config import TMDBConfig, reset_config
from filmcollab.models import SearchResult
from filmcollab.store import SQLiteListStore

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
    """Isolate every test from the user's environment and config files."""
    for key in (
        "TMDB_ACCESS_TOKEN",
        "FILMCOLLAB_TMDB_ACCESS_TOKEN",
        "FILMCOLLAB_TMDB_BASE_URL",
        "FILMCOLLAB_TMDB_TIMEOUT",
        "FILMCOLLAB_TMDB_MAX_RESULTS",
        "FILMCOLLAB_STORE_PATH",
        "FILMCOLLAB_EMBED_AUTO_LOAD",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("filmcollab.config.CONFIG_LOCATIONS", [tmp_path / "missing.yaml"])
    reset_config()
    yield
    reset_config()


@pytest.fixture
def store():
    """Connected in-memory watchlist store."""
    s = SQLiteListStore(":memory:")
    s.connect()
    yield s
    s.close()


@pytest.fixture
def make_tmdb_client() -> Callable[..., TMDBClient]:
    """Build a TMDBClient whose HTTP calls go to a handler function."""
    clients: list[TMDBClient] = []

    def factory(handler: Handler, access_token: str | None = "test-token", **kwargs) -> TMDBClient:
        config = TMDBConfig(access_token=access_token, **kwargs)
        client = TMDBClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def batman() -> SearchResult:
    return SearchResult(
        id="272",
        title="Batman Begins",
        year="2005",
        poster_url="https://image.tmdb.org/t/p/w500/sPX89Td70IDDjVr85jdSBb4rWGr.jpg",
    )


@pytest.fixture
def godfather() -> SearchResult:
    return SearchResult(
        id="238",
        title="The Godfather",
        year="1972",
        poster_url="https://image.tmdb.org/t/p/w500/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
    )
