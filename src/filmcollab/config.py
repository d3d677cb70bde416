"""Configuration management for filmcollab.

Supports loading configuration from:
1. Environment variables (FILMCOLLAB_*, plus TMDB_ACCESS_TOKEN)
2. Config file (~/.filmcollab/config.yaml)
3. Default values

Example config file (~/.filmcollab/config.yaml):
    tmdb:
      access_token: "YOUR_READ_ACCESS_TOKEN"
      timeout_seconds: 10
    store:
      path: "~/.filmcollab/watchlist.db"
    embed:
      auto_load: false
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".filmcollab" / "config.yaml",
    Path.home() / ".config" / "filmcollab" / "config.yaml",
    Path(".filmcollab.yaml"),
]

DEFAULT_STORE_PATH = str(Path.home() / ".filmcollab" / "watchlist.db")


@dataclass
class TMDBConfig:
    """Movie catalog (TMDB) configuration."""

    access_token: str | None = None
    base_url: str = "https://api.themoviedb.org/3"
    timeout_seconds: float = 10.0
    max_results: int = 10


@dataclass
class StoreConfig:
    """Watchlist store configuration."""

    path: str = DEFAULT_STORE_PATH


@dataclass
class EmbedConfig:
    """Video embed configuration."""

    auto_load: bool = False


@dataclass
class FilmCollabConfig:
    """Main configuration for filmcollab."""

    tmdb: TMDBConfig = field(default_factory=TMDBConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    embed: EmbedConfig = field(default_factory=EmbedConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations or CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    return data if isinstance(data, dict) else {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", config_path, e)
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with FILMCOLLAB_ prefix."""
    return os.environ.get(f"FILMCOLLAB_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def load_config(locations: list[Path] | None = None) -> FilmCollabConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (FILMCOLLAB_*)
    2. Config file (~/.filmcollab/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config(locations)

    # Catalog
    tmdb_config = file_config.get("tmdb") or {}
    tmdb = TMDBConfig(
        access_token=_get_env("TMDB_ACCESS_TOKEN")
        or os.environ.get("TMDB_ACCESS_TOKEN")
        or tmdb_config.get("access_token"),
        base_url=_get_env("TMDB_BASE_URL")
        or tmdb_config.get("base_url", "https://api.themoviedb.org/3"),
        timeout_seconds=float(
            _get_env("TMDB_TIMEOUT") or tmdb_config.get("timeout_seconds", 10.0)
        ),
        max_results=int(_get_env("TMDB_MAX_RESULTS") or tmdb_config.get("max_results", 10)),
    )

    # Store
    store_config = file_config.get("store") or {}
    store = StoreConfig(
        path=os.path.expanduser(
            _get_env("STORE_PATH") or store_config.get("path", DEFAULT_STORE_PATH)
        ),
    )

    # Embeds
    embed_config = file_config.get("embed") or {}
    embed = EmbedConfig(
        auto_load=(
            bool(_parse_bool(_get_env("EMBED_AUTO_LOAD")))
            if _get_env("EMBED_AUTO_LOAD")
            else bool(embed_config.get("auto_load", False))
        ),
    )

    return FilmCollabConfig(tmdb=tmdb, store=store, embed=embed)


# Global config instance (lazy loaded)
_config: FilmCollabConfig | None = None


def get_config() -> FilmCollabConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
