"""HTML output formatter - watchlist page, movie cards and trending strip."""

from __future__ import annotations

from html import escape

from filmcollab.embeds import ScriptLoader, VideoEmbed, VideoPreview
from filmcollab.models import Movie, TrendingMovie, WatchStatus

APP_TITLE = "Film Collab"
APP_TAGLINE = (
    "A shared movie watchlist for you and a friend. Search for a movie, add a social link, "
    "and keep track of what to watch and what you've watched."
)


def format_tabs(active: WatchStatus) -> str:
    """Render the "To Watch" / "Watched" tab bar."""
    tabs = []
    for status in WatchStatus:
        state = "active" if status == active else "inactive"
        tabs.append(
            f'<a class="tab" data-state="{state}" href="?status={escape(status.value)}">'
            f"{escape(status.value)}</a>"
        )
    return f'<nav class="tabs" role="tablist">{"".join(tabs)}</nav>'


def format_movie_card(
    movie: Movie,
    script_loader: ScriptLoader | None = None,
    compact: bool = False,
    auto_load: bool = False,
) -> str:
    """Render one movie card.

    Args:
        movie: Watchlist entry
        script_loader: Page-level loader shared by all embeds on the page
        compact: Show only a provider preview button for the social link
        auto_load: Skip the load gate for the social link embed
    """
    toggle_label = "Mark as To Watch" if movie.is_watched else "Mark as Watched"
    if compact:
        video = VideoPreview(movie.social_link).render()
    else:
        video = VideoEmbed(movie.social_link, auto_load=auto_load, script_loader=script_loader).render()

    return (
        f'<article class="movie-card" data-movie-id="{escape(movie.id)}" '
        f'data-added-by="{escape(movie.added_by)}" data-status="{escape(movie.status.value)}">'
        f'<img class="movie-card__poster" src="{escape(movie.poster_url)}" '
        f'alt="{escape(movie.title)}" data-ai-hint="{escape(movie.poster_hint)}">'
        '<div class="movie-card__body">'
        f'<h3 class="movie-card__title">{escape(movie.title)}</h3>'
        f'<p class="movie-card__year">{escape(movie.year)}</p>'
        f'<p class="movie-card__added-by">Added by {escape(movie.added_by)}</p>'
        f"{video}"
        '<div class="movie-card__actions">'
        f'<button type="button" data-action="toggle-status">{toggle_label}</button>'
        '<button type="button" data-action="remove">Remove</button>'
        "</div>"
        "</div>"
        "</article>"
    )


def format_empty_state(status: WatchStatus) -> str:
    return (
        '<div class="empty-state">'
        '<i class="icon icon-film" aria-hidden="true"></i>'
        "<h3>All clear!</h3>"
        f"<p>There are no movies in the &#x27;{escape(status.value)}&#x27; list.</p>"
        "</div>"
    )


def format_movie_list(
    movies: list[Movie],
    status: WatchStatus = WatchStatus.TO_WATCH,
    script_loader: ScriptLoader | None = None,
    compact: bool = False,
    auto_load: bool = False,
) -> str:
    """Render the tabbed movie list, showing only entries with ``status``."""
    status = WatchStatus(status)
    loader = script_loader if script_loader is not None else ScriptLoader()
    visible = [m for m in movies if m.status == status]

    if visible:
        cards = "".join(
            format_movie_card(m, script_loader=loader, compact=compact, auto_load=auto_load)
            for m in visible
        )
        body = f'<div class="movie-grid">{cards}</div>'
    else:
        body = format_empty_state(status)

    return f'<section class="movie-list">{format_tabs(status)}{body}</section>'


def format_trending(movies: list[TrendingMovie]) -> str:
    """Render the trending strip, or nothing when there are no movies."""
    if not movies:
        return ""

    cards = []
    for movie in movies:
        badge = ""
        if movie.rating_label:
            badge = f'<span class="rating-badge">&#11088; {escape(movie.rating_label)}</span>'
        cards.append(
            f'<div class="trending-card" data-movie-id="{escape(movie.id)}">'
            f'<img src="{escape(movie.poster_url)}" alt="{escape(movie.title)}" data-ai-hint="movie poster">'
            f"{badge}"
            f"<h3>{escape(movie.title)}</h3>"
            f"<p>{escape(movie.year)}</p>"
            "</div>"
        )
    return (
        '<section class="trending">'
        '<h2><i class="icon icon-trending-up" aria-hidden="true"></i>Trending This Week</h2>'
        f'<div class="trending-strip">{"".join(cards)}</div>'
        "</section>"
    )


def format_page(
    movies: list[Movie],
    status: WatchStatus = WatchStatus.TO_WATCH,
    trending: list[TrendingMovie] | None = None,
    compact: bool = False,
    auto_load: bool = False,
) -> str:
    """Render a complete watchlist page.

    All embeds on the page share one script loader, so a third-party
    script appears at most once.
    """
    loader = ScriptLoader()
    try:
        listing = format_movie_list(
            movies, status=status, script_loader=loader, compact=compact, auto_load=auto_load
        )
    finally:
        loader.close()

    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        f'<head><meta charset="utf-8"><title>{APP_TITLE}</title></head>'
        "<body><main>"
        f'<header><h1>{APP_TITLE}</h1><p class="tagline">{escape(APP_TAGLINE)}</p></header>'
        f"{format_trending(trending or [])}"
        f"{listing}"
        "</main></body></html>"
    )
