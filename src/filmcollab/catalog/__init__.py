"""Movie catalog (TMDB) access."""

from .tmdb import (
    CatalogError,
    TMDBClient,
    format_search_result,
    format_trending_movie,
    search_movies,
)

__all__ = [
    "TMDBClient",
    "CatalogError",
    "search_movies",
    "format_search_result",
    "format_trending_movie",
]
