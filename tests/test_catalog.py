"""Tests for the TMDB catalog client."""

import logging

import httpx
import pytest

from filmcollab.catalog import CatalogError, format_search_result, format_trending_movie
from filmcollab.models import PLACEHOLDER_POSTER_URL


def tmdb_movie(movie_id, title, release_date="2005-06-10", poster_path="/poster.jpg", **extra):
    return {
        "id": movie_id,
        "title": title,
        "release_date": release_date,
        "poster_path": poster_path,
        **extra,
    }


class TestFormatting:
    """Test TMDB payload conversion."""

    def test_search_result(self):
        result = format_search_result(tmdb_movie(272, "Batman Begins"))
        assert result.id == "272"
        assert result.title == "Batman Begins"
        assert result.year == "2005"
        assert result.poster_url == "https://image.tmdb.org/t/p/w500/poster.jpg"
        assert result.poster_hint == "movie poster"

    def test_missing_date_and_poster(self):
        """Test fallbacks for missing release date and poster."""
        result = format_search_result(tmdb_movie(1, "Untitled", release_date="", poster_path=None))
        assert result.year == "N/A"
        assert result.poster_url == PLACEHOLDER_POSTER_URL

    def test_trending_movie(self):
        movie = format_trending_movie(tmdb_movie(5, "Hit", vote_average=7.456))
        assert movie.year == "2005"
        assert movie.rating_label == "7.5"

    def test_trending_without_date(self):
        movie = format_trending_movie(tmdb_movie(5, "Hit", release_date=None))
        assert movie.year == ""
        assert movie.rating_label is None

    @pytest.mark.parametrize("vote_average", ["high", {"avg": 7}, [7.0], None])
    def test_non_numeric_rating_is_unrated(self, vote_average):
        movie = format_trending_movie(tmdb_movie(5, "Hit", vote_average=vote_average))
        assert movie.vote_average == 0.0
        assert movie.rating_label is None

    def test_non_string_fields_fall_back(self):
        result = format_search_result(tmdb_movie(1, "Odd", release_date=2005, poster_path=42))
        assert result.year == "N/A"
        assert result.poster_url == PLACEHOLDER_POSTER_URL


class TestSearch:
    """Test search requests."""

    def test_search_request(self, make_tmdb_client):
        """Test query parameters, auth header and result order."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"results": [tmdb_movie(272, "Batman Begins"), tmdb_movie(364, "Batman Returns")]},
            )

        client = make_tmdb_client(handler)
        results = client.search_movies("batman")

        assert [r.id for r in results] == ["272", "364"]
        request = seen[0]
        assert request.url.path == "/3/search/movie"
        assert request.url.params["query"] == "batman"
        assert request.url.params["include_adult"] == "false"
        assert request.url.params["language"] == "en-US"
        assert request.url.params["page"] == "1"
        assert request.headers["Authorization"] == "Bearer test-token"

    def test_limited_to_ten(self, make_tmdb_client):
        """Test at most ten candidates are returned."""
        payload = {"results": [tmdb_movie(i, f"Movie {i}") for i in range(25)]}
        client = make_tmdb_client(lambda request: httpx.Response(200, json=payload))
        results = client.search_movies("movie")
        assert len(results) == 10
        assert results[0].id == "0"
        assert results[-1].id == "9"

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_skips_request(self, make_tmdb_client, query):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"results": []})

        client = make_tmdb_client(handler)
        assert client.search_movies(query) == []
        assert calls == []

    def test_skips_malformed_results(self, make_tmdb_client):
        payload = {"results": [{"id": 1}, "junk", tmdb_movie(2, "Good")]}
        client = make_tmdb_client(lambda request: httpx.Response(200, json=payload))
        assert [r.id for r in client.search_movies("x")] == ["2"]


class TestDegradation:
    """Test catalog failures become empty results."""

    def test_missing_token(self, make_tmdb_client, caplog):
        """Test an unconfigured client logs and returns nothing."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"results": []})

        client = make_tmdb_client(handler, access_token=None)
        with caplog.at_level(logging.ERROR, logger="filmcollab.catalog.tmdb"):
            assert client.search_movies("batman") == []
        assert calls == []
        assert "not configured" in caplog.text

    def test_http_error(self, make_tmdb_client, caplog):
        """Test an error status is logged with its body."""
        client = make_tmdb_client(
            lambda request: httpx.Response(401, json={"status_message": "Invalid API key"})
        )
        with caplog.at_level(logging.ERROR, logger="filmcollab.catalog.tmdb"):
            assert client.search_movies("batman") == []
        assert "401" in caplog.text
        assert "Invalid API key" in caplog.text

    def test_transport_error(self, make_tmdb_client):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_tmdb_client(handler)
        assert client.search_movies("batman") == []
        assert client.trending_movies() == []
        assert client.get_movie("272") is None

    def test_invalid_json(self, make_tmdb_client):
        client = make_tmdb_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        assert client.search_movies("batman") == []

    def test_request_raises(self, make_tmdb_client):
        """Test the low-level request surfaces CatalogError."""
        client = make_tmdb_client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(CatalogError):
            client._request("search/movie")


class TestTrendingAndLookup:
    """Test trending list and lookup by ID."""

    def test_trending(self, make_tmdb_client):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"results": [tmdb_movie(1, "Hit", vote_average=8.0)]})

        client = make_tmdb_client(handler)
        movies = client.trending_movies()
        assert seen[0].url.path == "/3/trending/movie/week"
        assert movies[0].title == "Hit"
        assert movies[0].rating_label == "8.0"

    def test_get_movie(self, make_tmdb_client):
        def handler(request):
            assert request.url.path == "/3/movie/272"
            return httpx.Response(200, json=tmdb_movie(272, "Batman Begins"))

        client = make_tmdb_client(handler)
        result = client.get_movie("272")
        assert result.title == "Batman Begins"

    def test_get_movie_not_found(self, make_tmdb_client):
        client = make_tmdb_client(lambda request: httpx.Response(404, json={"success": False}))
        assert client.get_movie("0") is None

    def test_trending_with_malformed_fields(self, make_tmdb_client):
        """Test bad field values in one result do not fail the whole list."""
        payload = {
            "results": [
                tmdb_movie(1, "Bad Rating", vote_average="N/A"),
                tmdb_movie(2, 12345),
                tmdb_movie(3, "Good", vote_average=6.5),
            ]
        }
        client = make_tmdb_client(lambda request: httpx.Response(200, json=payload))
        movies = client.trending_movies()
        assert [m.id for m in movies] == ["1", "3"]
        assert movies[0].rating_label is None
        assert movies[1].rating_label == "6.5"
