"""
Command-line interface for filmcollab.

Usage:
  filmcollab search "batman begins"                 # Search the movie catalog
  filmcollab trending                               # This week's trending movies
  filmcollab add 272 --user alice --link URL        # Add a movie with a social link
  filmcollab toggle 272 --user alice                # To Watch <-> Watched
  filmcollab remove 272 --user alice                # Remove from the list
  filmcollab list --status Watched                  # Show a tab of the list
  filmcollab render -o watchlist.html               # Render the list as HTML
  filmcollab parse "https://youtu.be/dQw4w9WgXcQ"   # Classify a social link
  filmcollab embed "https://youtu.be/..." --auto-load
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from filmcollab._version import __version__
from filmcollab.catalog import TMDBClient
from filmcollab.config import get_config
from filmcollab.embeds import VideoEmbed, VideoPreview
from filmcollab.formatters import (
    format_movie,
    format_movie_list,
    format_page,
    format_parsed_video,
    format_search_results,
    format_trending_list,
)
from filmcollab.models import WatchStatus
from filmcollab.store import ListStoreError, open_store
from filmcollab.utils.url_parser import parse_video_url
from filmcollab.watchlist import Watchlist

logger = logging.getLogger("filmcollab")

STATUS_CHOICES = [s.value for s in WatchStatus]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filmcollab",
        description="Shared movie watchlist - search, add, and track movies with social video links.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration:
  TMDB access token   FILMCOLLAB_TMDB_ACCESS_TOKEN / TMDB_ACCESS_TOKEN
  Store location      FILMCOLLAB_STORE_PATH (or --db)
  Config file         ~/.filmcollab/config.yaml
        """,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--db", metavar="PATH", help="Watchlist database path")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search", help="Search the movie catalog")
    p.add_argument("query", help="Movie title")

    sub.add_parser("trending", help="Show this week's trending movies")

    p = sub.add_parser("add", help="Add a movie to a user's list")
    p.add_argument("movie_id", help="Catalog movie ID (see 'search')")
    p.add_argument("--user", "-u", required=True, help="User adding the movie")
    p.add_argument("--link", "-l", metavar="URL", help="Social video link (YouTube, TikTok, Instagram)")

    for name, help_text in (
        ("remove", "Remove a movie from a user's list"),
        ("toggle", "Toggle a movie between To Watch and Watched"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("movie_id", help="Catalog movie ID")
        p.add_argument("--user", "-u", required=True, help="User who added the movie")

    p = sub.add_parser("list", help="Show the watchlist")
    p.add_argument("--status", "-s", choices=STATUS_CHOICES, help="Only show one tab")
    p.add_argument("--user", "-u", help="Only show one user's movies")

    p = sub.add_parser("render", help="Render the watchlist as an HTML page")
    p.add_argument("--status", "-s", choices=STATUS_CHOICES, default=WatchStatus.TO_WATCH.value)
    p.add_argument("--compact", action="store_true", help="Preview buttons instead of embeds")
    p.add_argument("--trending", action="store_true", help="Include the trending strip")
    p.add_argument("-o", "--output", help="Write HTML to file instead of stdout")

    p = sub.add_parser("parse", help="Classify a social video link")
    p.add_argument("url", help="Social video link")

    p = sub.add_parser("embed", help="Render the embed markup for a social video link")
    p.add_argument("url", help="Social video link")
    mode_group = p.add_mutually_exclusive_group()
    mode_group.add_argument("--auto-load", action="store_true", help="Skip the click-to-load gate")
    mode_group.add_argument("--preview", action="store_true", help="Compact preview button only")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for filmcollab CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Link-only commands need neither catalog nor store
    if args.command == "parse":
        print(json.dumps(format_parsed_video(parse_video_url(args.url)), indent=2))
        return 0

    if args.command == "embed":
        if args.preview:
            print(VideoPreview(args.url).render())
        else:
            auto_load = args.auto_load or get_config().embed.auto_load
            print(VideoEmbed(args.url, auto_load=auto_load).render())
        return 0

    if args.command == "search":
        with TMDBClient() as catalog:
            print(format_search_results(catalog.search_movies(args.query)))
        return 0

    if args.command == "trending":
        with TMDBClient() as catalog:
            print(format_trending_list(catalog.trending_movies()))
        return 0

    try:
        return run_list_command(args)
    except ListStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run_list_command(args: argparse.Namespace) -> int:
    """Run a command that reads or mutates the watchlist.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    store = open_store(args.db)
    catalog = TMDBClient()
    watchlist = Watchlist(store, catalog=catalog)
    try:
        if args.command == "add":
            if not watchlist.add_by_id(args.movie_id, args.user, social_link=args.link):
                existing = store.get(args.movie_id, args.user)
                if existing is None:
                    print(f"Error: could not add movie {args.movie_id}", file=sys.stderr)
                    return 1
                print(f"Already listed: {existing.title}")
                return 0
            print(f"Added: {format_movie(store.get(args.movie_id, args.user))}")
            return 0

        if args.command == "remove":
            if not watchlist.remove(args.movie_id, args.user):
                print(f"Error: movie {args.movie_id} not on {args.user}'s list", file=sys.stderr)
                return 1
            print(f"Removed movie {args.movie_id}")
            return 0

        if args.command == "toggle":
            movie = watchlist.toggle(args.movie_id, args.user)
            if movie is None:
                print(f"Error: movie {args.movie_id} not on {args.user}'s list", file=sys.stderr)
                return 1
            print(format_movie(movie))
            return 0

        if args.command == "list":
            status = WatchStatus(args.status) if args.status else None
            title = status.value if status else "Watchlist"
            print(format_movie_list(watchlist.movies(status=status, added_by=args.user), title=title))
            return 0

        if args.command == "render":
            trending = catalog.trending_movies() if args.trending else None
            html = format_page(
                watchlist.movies(),
                status=WatchStatus(args.status),
                trending=trending,
                compact=args.compact,
                auto_load=get_config().embed.auto_load,
            )
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(html)
                print(f"Page saved to: {args.output}")
            else:
                print(html)
            return 0
    finally:
        watchlist.close()
        catalog.close()
        store.close()

    logger.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    sys.exit(main())
