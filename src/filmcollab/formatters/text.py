"""Plain-text output formatter for the command line."""

from filmcollab.models import Movie, SearchResult, TrendingMovie
from filmcollab.utils.url_parser import ParsedVideo


def format_search_results(results: list[SearchResult]) -> str:
    """Format search candidates, one per line."""
    if not results:
        return "No movies found."
    lines = []
    for result in results:
        lines.append(f"  {result.id:>10}  {result.title} ({result.year})")
    return "\n".join(lines)


def format_trending_list(movies: list[TrendingMovie]) -> str:
    if not movies:
        return "No trending movies."
    lines = []
    for movie in movies:
        rating = f"  [{movie.rating_label}]" if movie.rating_label else ""
        year = f" ({movie.year})" if movie.year else ""
        lines.append(f"  {movie.id:>10}  {movie.title}{year}{rating}")
    return "\n".join(lines)


def format_movie(movie: Movie) -> str:
    """Format one watchlist entry on a single line."""
    line = f"  {movie.id:>10}  {movie.title} ({movie.year})  [{movie.status.value}]  by {movie.added_by}"
    video = movie.video
    if video is not None:
        line += f"  <{video.display_name}: {video.url}>"
    return line


def format_movie_list(movies: list[Movie], title: str = "Watchlist") -> str:
    """Format a watchlist with a heading."""
    lines = []
    lines.append("=" * 70)
    lines.append(f"{title} ({len(movies)})")
    lines.append("=" * 70)
    if not movies:
        lines.append("  All clear!")
    for movie in movies:
        lines.append(format_movie(movie))
    return "\n".join(lines)


def format_parsed_video(parsed: ParsedVideo | None) -> dict[str, str | None] | None:
    """Convert a classification to a JSON-ready dict."""
    if parsed is None:
        return None
    return {
        "provider": parsed.provider.value,
        "video_id": parsed.video_id,
        "url": parsed.url,
        "display_name": parsed.display_name,
    }
