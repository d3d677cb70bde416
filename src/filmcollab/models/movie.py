"""Movie and catalog result models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from filmcollab.utils.url_parser import ParsedVideo, parse_video_url

# TMDB image and fallback poster
POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
PLACEHOLDER_POSTER_URL = "https://picsum.photos/seed/placeholder/500/750"
DEFAULT_POSTER_HINT = "movie poster"


class WatchStatus(str, Enum):
    """Which tab a movie is listed under."""

    TO_WATCH = "To Watch"
    WATCHED = "Watched"

    def toggled(self) -> WatchStatus:
        return WatchStatus.WATCHED if self == WatchStatus.TO_WATCH else WatchStatus.TO_WATCH


def poster_url_for(poster_path: str | None) -> str:
    """Full poster URL for a TMDB poster path, or the placeholder image."""
    if not poster_path:
        return PLACEHOLDER_POSTER_URL
    return f"{POSTER_BASE_URL}{poster_path}"


def year_from_release_date(release_date: str | None, default: str = "N/A") -> str:
    """Year part of a ``YYYY-MM-DD`` release date."""
    if not release_date:
        return default
    return release_date.split("-")[0]


class SearchResult(BaseModel):
    """A catalog search candidate."""

    id: str
    title: str
    year: str = "N/A"
    poster_url: str = PLACEHOLDER_POSTER_URL
    poster_hint: str = DEFAULT_POSTER_HINT


class Movie(BaseModel):
    """A title on someone's watchlist.

    Identified by the catalog ID together with the user who added it, so
    two users can each list the same movie.
    """

    id: str
    title: str
    year: str = "N/A"
    poster_url: str = PLACEHOLDER_POSTER_URL
    poster_hint: str = DEFAULT_POSTER_HINT
    added_by: str
    status: WatchStatus = WatchStatus.TO_WATCH
    social_link: str | None = None
    added_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> tuple[str, str]:
        """(movie ID, owning user) pair."""
        return (self.id, self.added_by)

    @property
    def is_watched(self) -> bool:
        return self.status == WatchStatus.WATCHED

    @property
    def video(self) -> ParsedVideo | None:
        """Classification of the attached social link."""
        return parse_video_url(self.social_link)

    @classmethod
    def from_search_result(
        cls,
        result: SearchResult,
        added_by: str,
        social_link: str | None = None,
    ) -> Movie:
        """Create a new "To Watch" entry from a search candidate."""
        return cls(
            id=result.id,
            title=result.title,
            year=result.year,
            poster_url=result.poster_url,
            poster_hint=result.poster_hint,
            added_by=added_by,
            social_link=social_link or None,
        )


class TrendingMovie(BaseModel):
    """A movie from the weekly trending list."""

    id: str
    title: str
    year: str = ""
    poster_url: str = PLACEHOLDER_POSTER_URL
    vote_average: float = 0.0

    @property
    def rating_label(self) -> str | None:
        """Rating badge text, only for rated movies."""
        if self.vote_average <= 0:
            return None
        return f"{self.vote_average:.1f}"
