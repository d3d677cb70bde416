"""Watchlist stores."""

from __future__ import annotations

from filmcollab.config import get_config

from .base import BaseListStore, ListStoreError, StoreClosedError, Subscriber
from .sqlite import SQLiteListStore


def open_store(path: str | None = None) -> BaseListStore:
    """Open the configured watchlist store.

    Args:
        path: Database path (default: ``store.path`` from config)

    Returns:
        Connected store
    """
    store = SQLiteListStore(path or get_config().store.path)
    store.connect()
    return store


__all__ = [
    "BaseListStore",
    "SQLiteListStore",
    "ListStoreError",
    "StoreClosedError",
    "Subscriber",
    "open_store",
]
