"""Pydantic models for filmcollab."""

from .change import ChangeAction, ListChange
from .movie import (
    DEFAULT_POSTER_HINT,
    PLACEHOLDER_POSTER_URL,
    POSTER_BASE_URL,
    Movie,
    SearchResult,
    TrendingMovie,
    WatchStatus,
    poster_url_for,
    year_from_release_date,
)

__all__ = [
    # Watchlist
    "Movie",
    "WatchStatus",
    # Catalog
    "SearchResult",
    "TrendingMovie",
    "poster_url_for",
    "year_from_release_date",
    "POSTER_BASE_URL",
    "PLACEHOLDER_POSTER_URL",
    "DEFAULT_POSTER_HINT",
    # Change feed
    "ListChange",
    "ChangeAction",
]
