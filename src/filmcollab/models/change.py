"""List change notifications."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .movie import Movie


class ChangeAction(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    TOGGLED = "toggled"


class ListChange(BaseModel):
    """A mutation applied to a watchlist, as seen by subscribers."""

    action: ChangeAction
    movie_id: str
    added_by: str
    # State after the mutation; None for removals
    movie: Movie | None = None
