"""Base list store class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from filmcollab.models import ChangeAction, ListChange, Movie, WatchStatus

logger = logging.getLogger(__name__)

Subscriber = Callable[[ListChange], None]


class ListStoreError(Exception):
    """Error in the watchlist store."""

    pass


class StoreClosedError(ListStoreError):
    """Operation on a store that has been closed."""

    pass


class BaseListStore(ABC):
    """Abstract base class for watchlist stores.

    Entries are keyed by (movie ID, owning user). Lifecycle is explicit:
    ``connect()``, query and mutate, ``close()``. Every mutation that
    changes stored data is pushed to subscribers as a ``ListChange``.

    Subclasses should implement:
    - connect() / close(): Open and release the backing storage
    - list_movies() / get(): Queries
    - _insert() / _delete() / _toggle(): Raw mutations
    """

    name: ClassVar[str] = "base"

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    @abstractmethod
    def connect(self) -> None:
        """Open the backing storage (idempotent)."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the backing storage. Further use raises StoreClosedError."""
        pass

    @abstractmethod
    def list_movies(
        self,
        added_by: str | None = None,
        status: WatchStatus | None = None,
    ) -> list[Movie]:
        """List entries, newest first.

        Args:
            added_by: Only entries owned by this user
            status: Only entries with this status
        """
        pass

    @abstractmethod
    def get(self, movie_id: str, added_by: str) -> Movie | None:
        pass

    @abstractmethod
    def _insert(self, movie: Movie) -> bool:
        """Insert unless the key exists. Returns True if inserted."""
        pass

    @abstractmethod
    def _delete(self, movie_id: str, added_by: str) -> bool:
        pass

    @abstractmethod
    def _toggle(self, movie_id: str, added_by: str) -> Movie | None:
        pass

    def add(self, movie: Movie) -> bool:
        """Add an entry; adding an existing (ID, user) pair is a no-op.

        Returns:
            True if the entry was added
        """
        added = self._insert(movie)
        if added:
            self._notify(
                ListChange(
                    action=ChangeAction.ADDED,
                    movie_id=movie.id,
                    added_by=movie.added_by,
                    movie=movie,
                )
            )
        else:
            logger.debug("Movie %s already listed for %s", movie.id, movie.added_by)
        return added

    def remove(self, movie_id: str, added_by: str) -> bool:
        """Remove an entry.

        Returns:
            True if an entry was removed
        """
        removed = self._delete(movie_id, added_by)
        if removed:
            self._notify(ListChange(action=ChangeAction.REMOVED, movie_id=movie_id, added_by=added_by))
        return removed

    def toggle_status(self, movie_id: str, added_by: str) -> Movie | None:
        """Flip an entry between "To Watch" and "Watched".

        Returns:
            The updated entry, or None if it does not exist
        """
        movie = self._toggle(movie_id, added_by)
        if movie is not None:
            self._notify(
                ListChange(
                    action=ChangeAction.TOGGLED,
                    movie_id=movie_id,
                    added_by=added_by,
                    movie=movie,
                )
            )
        return movie

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Function that unregisters the listener
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, change: ListChange) -> None:
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                logger.exception("Watchlist subscriber failed on %s change", change.action.value)

    def __enter__(self) -> BaseListStore:
        self.connect()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
