"""Output formatters for filmcollab."""

from .html import (
    format_empty_state,
    format_movie_card,
    format_page,
    format_tabs,
    format_trending,
)
from .html import format_movie_list as format_movie_list_html
from .text import (
    format_movie,
    format_movie_list,
    format_parsed_video,
    format_search_results,
    format_trending_list,
)

__all__ = [
    # HTML
    "format_page",
    "format_movie_list_html",
    "format_movie_card",
    "format_tabs",
    "format_empty_state",
    "format_trending",
    # Text
    "format_movie",
    "format_movie_list",
    "format_search_results",
    "format_trending_list",
    "format_parsed_video",
]
