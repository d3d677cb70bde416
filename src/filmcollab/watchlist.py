"""Shared watchlist service.

Ties the movie catalog to a list store. Views returned by ``movies()`` are
cached per filter and dropped whenever the store reports a change, so
every ``Watchlist`` sharing a store sees the others' mutations.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from filmcollab.catalog import TMDBClient
from filmcollab.models import ListChange, Movie, SearchResult, WatchStatus
from filmcollab.store import BaseListStore

logger = logging.getLogger(__name__)

ViewKey = tuple[WatchStatus | None, str | None]


class Watchlist:
    """Add, remove and toggle movies on a shared list.

    Args:
        store: Connected list store
        catalog: Catalog client used for search and lookups (optional)
    """

    def __init__(self, store: BaseListStore, catalog: TMDBClient | None = None) -> None:
        self.store = store
        self.catalog = catalog
        self._views: dict[ViewKey, list[Movie]] = {}
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, change: ListChange) -> None:
        logger.debug("Watchlist change: %s %s (%s)", change.action.value, change.movie_id, change.added_by)
        self.revalidate()

    def revalidate(self) -> None:
        """Drop cached views."""
        self._views.clear()

    def movies(self, status: WatchStatus | None = None, added_by: str | None = None) -> list[Movie]:
        """Entries for a tab (and optionally one user), newest first."""
        key: ViewKey = (WatchStatus(status) if status else None, added_by)
        if key not in self._views:
            self._views[key] = self.store.list_movies(added_by=added_by, status=key[0])
        return list(self._views[key])

    def search(self, query: str) -> list[SearchResult]:
        if self.catalog is None:
            logger.warning("No movie catalog configured; search skipped")
            return []
        return self.catalog.search_movies(query)

    def add(
        self,
        movie_data: SearchResult | dict[str, Any] | str | None,
        added_by: str | None,
        social_link: str | None = None,
    ) -> bool:
        """Add a catalog result to a user's list.

        ``movie_data`` may be a SearchResult, a dict, or its JSON encoding
        (as posted by a form). Missing or malformed data is logged and
        ignored; adding a movie the user already listed is a no-op.

        Returns:
            True if a new entry was stored
        """
        try:
            result = _coerce_search_result(movie_data)
            if result is None or not added_by:
                raise ValueError("Missing movie data or user.")
            movie = Movie.from_search_result(result, added_by=added_by, social_link=social_link)
        except (ValueError, ValidationError) as e:
            logger.error("Failed to add movie: %s", e)
            return False

        added = self.store.add(movie)
        self.revalidate()
        return added

    def add_by_id(self, movie_id: str, added_by: str, social_link: str | None = None) -> bool:
        """Look a movie up in the catalog and add it."""
        if self.catalog is None:
            logger.error("Failed to add movie %s: no movie catalog configured", movie_id)
            return False
        result = self.catalog.get_movie(movie_id)
        if result is None:
            logger.error("Failed to add movie %s: not found in catalog", movie_id)
            return False
        return self.add(result, added_by, social_link=social_link)

    def remove(self, movie_id: str, added_by: str) -> bool:
        removed = self.store.remove(movie_id, added_by)
        self.revalidate()
        return removed

    def toggle(self, movie_id: str, added_by: str) -> Movie | None:
        """Flip a movie between "To Watch" and "Watched"."""
        movie = self.store.toggle_status(movie_id, added_by)
        self.revalidate()
        return movie

    def close(self) -> None:
        """Stop listening to the store (the store itself stays open)."""
        self._unsubscribe()
        self.revalidate()


def _coerce_search_result(data: SearchResult | dict[str, Any] | str | None) -> SearchResult | None:
    if data is None or isinstance(data, SearchResult):
        return data
    if isinstance(data, str):
        if not data.strip():
            return None
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected movie data: {data!r}")
    return SearchResult.model_validate(data)
