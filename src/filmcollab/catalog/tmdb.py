"""TMDB movie catalog client.

Requirements:
- TMDB API read access token (set via FILMCOLLAB_TMDB_ACCESS_TOKEN,
  TMDB_ACCESS_TOKEN or config)

Reference:
https://developer.themoviedb.org/reference/search-movie

Catalog failures never propagate to callers: search and trending degrade
to an empty list, lookups to None, and the cause is logged.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from filmcollab.config import TMDBConfig, get_config
from filmcollab.models import (
    SearchResult,
    TrendingMovie,
    poster_url_for,
    year_from_release_date,
)

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Error talking to the movie catalog."""

    pass


def _text(result: dict[str, Any], key: str) -> str | None:
    value = result.get(key)
    return value if isinstance(value, str) else None


def _vote_average(value: Any) -> float:
    """Rating as a float, 0.0 (unrated) when missing or not numeric."""
    try:
        return float(value or 0.0)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric TMDB vote_average: %r", value)
        return 0.0


def format_search_result(result: dict[str, Any]) -> SearchResult:
    """Convert a raw TMDB movie into a SearchResult."""
    return SearchResult(
        id=str(result["id"]),
        title=result["title"],
        year=year_from_release_date(_text(result, "release_date")),
        poster_url=poster_url_for(_text(result, "poster_path")),
    )


def format_trending_movie(result: dict[str, Any]) -> TrendingMovie:
    """Convert a raw TMDB movie into a TrendingMovie."""
    return TrendingMovie(
        id=str(result["id"]),
        title=result["title"],
        year=year_from_release_date(_text(result, "release_date"), default=""),
        poster_url=poster_url_for(_text(result, "poster_path")),
        vote_average=_vote_average(result.get("vote_average")),
    )


class TMDBClient:
    """Thin synchronous client for the TMDB v3 API.

    Args:
        config: TMDB settings (defaults to the global config)
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        config: TMDBConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or get_config().tmdb
        headers = {"accept": "application/json"}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        self._client = httpx.Client(
            base_url=self.config.base_url,
            headers=headers,
            timeout=self.config.timeout_seconds,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.config.access_token)

    def _request(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET a TMDB endpoint and return the decoded JSON object.

        Raises:
            CatalogError: On missing credentials, transport or HTTP errors,
                or a non-object response body
        """
        if not self.is_configured:
            raise CatalogError("TMDB access token is not configured.")

        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise CatalogError(f"Failed to fetch from TMDB: {e}") from e

        if response.is_error:
            raise CatalogError(
                f"TMDB API error: {response.status_code} {response.reason_phrase}: {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogError(f"TMDB returned invalid JSON for {path}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"TMDB returned unexpected payload for {path}")
        return data

    def _fetch(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any] | None:
        try:
            return self._request(path, params)
        except CatalogError as e:
            logger.error("%s", e)
            return None

    def _results(self, data: dict[str, Any] | None) -> list[dict[str, Any]]:
        if not data:
            return []
        results = data.get("results")
        if not isinstance(results, list):
            return []
        valid = []
        for item in results[: self.config.max_results]:
            if isinstance(item, dict) and "id" in item and _text(item, "title"):
                valid.append(item)
            else:
                logger.debug("Skipping malformed TMDB result: %r", item)
        return valid

    def search_movies(self, query: str) -> list[SearchResult]:
        """Search the catalog by title.

        Args:
            query: Free-text query

        Returns:
            Up to ``max_results`` candidates in catalog order; empty on
            blank query or any failure
        """
        if not query or not query.strip():
            return []

        data = self._fetch(
            "search/movie",
            {
                "query": query.strip(),
                "include_adult": "false",
                "language": "en-US",
                "page": "1",
            },
        )
        return [format_search_result(r) for r in self._results(data)]

    def trending_movies(self) -> list[TrendingMovie]:
        """This week's trending movies (up to ``max_results``)."""
        data = self._fetch("trending/movie/week")
        return [format_trending_movie(r) for r in self._results(data)]

    def get_movie(self, movie_id: str) -> SearchResult | None:
        """Look a movie up by catalog ID.

        Returns:
            SearchResult, or None if it cannot be fetched
        """
        data = self._fetch(f"movie/{movie_id}", {"language": "en-US"})
        if not data or "id" not in data or not _text(data, "title"):
            return None
        return format_search_result(data)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> TMDBClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def search_movies(query: str) -> list[SearchResult]:
    """Search the catalog with the globally configured client."""
    with TMDBClient() as client:
        return client.search_movies(query)
