"""filmcollab - Shared movie watchlist with social video embeds.

Search a movie catalog, add titles to a shared list with an optional
social video link, and track what to watch and what you've watched.

Usage:
    from filmcollab import parse_video_url, VideoEmbed

    # Classify a social link
    parsed = parse_video_url("https://www.tiktok.com/@moviebuff/video/7123456789")
    print(parsed.provider, parsed.video_id)

    # Render it behind a click-to-load gate
    embed = VideoEmbed(parsed.url)
    placeholder = embed.render()
    embed.load()
    player = embed.render()
"""

from filmcollab._version import __version__
from filmcollab.catalog import CatalogError, TMDBClient, search_movies
from filmcollab.config import get_config, load_config, reset_config
from filmcollab.embeds import (
    EmbedState,
    ScriptLoader,
    VideoEmbed,
    VideoPreview,
    get_embed_for_provider,
)
from filmcollab.models import (
    ListChange,
    Movie,
    SearchResult,
    TrendingMovie,
    WatchStatus,
)
from filmcollab.store import (
    BaseListStore,
    ListStoreError,
    SQLiteListStore,
    StoreClosedError,
    open_store,
)
from filmcollab.utils import (
    ParsedVideo,
    Provider,
    get_provider_display_name,
    parse_video_url,
)
from filmcollab.watchlist import Watchlist

__all__ = [
    # Version
    "__version__",
    # Link classification
    "Provider",
    "ParsedVideo",
    "parse_video_url",
    "get_provider_display_name",
    # Embeds
    "VideoEmbed",
    "VideoPreview",
    "EmbedState",
    "ScriptLoader",
    "get_embed_for_provider",
    # Models
    "Movie",
    "SearchResult",
    "TrendingMovie",
    "WatchStatus",
    "ListChange",
    # Catalog
    "TMDBClient",
    "CatalogError",
    "search_movies",
    # Store
    "BaseListStore",
    "SQLiteListStore",
    "ListStoreError",
    "StoreClosedError",
    "open_store",
    # Service
    "Watchlist",
    # Config
    "get_config",
    "load_config",
    "reset_config",
]
