"""SQLite-backed watchlist store.

Data written to a file path survives process restarts. Use ":memory:"
for throwaway stores.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import ClassVar

from filmcollab.models import Movie, WatchStatus

from .base import BaseListStore, StoreClosedError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS movies (
    movie_id    TEXT NOT NULL,
    added_by    TEXT NOT NULL,
    title       TEXT NOT NULL,
    year        TEXT NOT NULL,
    poster_url  TEXT NOT NULL,
    poster_hint TEXT NOT NULL,
    status      TEXT NOT NULL CHECK (status IN ('To Watch', 'Watched')),
    social_link TEXT,
    added_at    TEXT NOT NULL,
    PRIMARY KEY (movie_id, added_by)
);
CREATE INDEX IF NOT EXISTS idx_movies_added_by ON movies (added_by);
"""


def _row_to_movie(row: sqlite3.Row) -> Movie:
    return Movie(
        id=row["movie_id"],
        title=row["title"],
        year=row["year"],
        poster_url=row["poster_url"],
        poster_hint=row["poster_hint"],
        added_by=row["added_by"],
        status=WatchStatus(row["status"]),
        social_link=row["social_link"],
        added_at=row["added_at"],
    )


class SQLiteListStore(BaseListStore):
    """Watchlist store on a single SQLite database.

    Args:
        db_path: Database file, or ":memory:" for in-memory
    """

    name: ClassVar[str] = "sqlite"

    def __init__(self, db_path: str | Path = ":memory:") -> None:
        super().__init__()
        self.db_path = str(db_path)
        self._conn: sqlite3.Connection | None = None
        self._closed = False

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the open connection, connecting on first use."""
        if self._closed:
            raise StoreClosedError("Watchlist store is closed")
        if self._conn is None:
            self.connect()
        assert self._conn is not None
        return self._conn

    def connect(self) -> None:
        if self._closed:
            raise StoreClosedError("Watchlist store is closed")
        if self._conn is not None:
            return
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA busy_timeout = 5000")
        if self.db_path != ":memory:":
            conn.execute("PRAGMA journal_mode = WAL")
        conn.executescript(SCHEMA)
        self._conn = conn
        logger.debug("Opened watchlist store at %s", self.db_path)

    def close(self) -> None:
        self._closed = True
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def list_movies(
        self,
        added_by: str | None = None,
        status: WatchStatus | None = None,
    ) -> list[Movie]:
        clauses = []
        params: list[str] = []
        if added_by is not None:
            clauses.append("added_by = ?")
            params.append(added_by)
        if status is not None:
            clauses.append("status = ?")
            params.append(WatchStatus(status).value)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        rows = self.connection.execute(
            f"SELECT * FROM movies {where} ORDER BY added_at DESC, rowid DESC",
            params,
        ).fetchall()
        return [_row_to_movie(row) for row in rows]

    def get(self, movie_id: str, added_by: str) -> Movie | None:
        row = self.connection.execute(
            "SELECT * FROM movies WHERE movie_id = ? AND added_by = ?",
            (movie_id, added_by),
        ).fetchone()
        return _row_to_movie(row) if row else None

    def _insert(self, movie: Movie) -> bool:
        with self.connection as conn:
            cursor = conn.execute(
                """
                INSERT OR IGNORE INTO movies (
                    movie_id, added_by, title, year, poster_url,
                    poster_hint, status, social_link, added_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    movie.id,
                    movie.added_by,
                    movie.title,
                    movie.year,
                    movie.poster_url,
                    movie.poster_hint,
                    movie.status.value,
                    movie.social_link,
                    movie.added_at.isoformat(),
                ),
            )
        return cursor.rowcount == 1

    def _delete(self, movie_id: str, added_by: str) -> bool:
        with self.connection as conn:
            cursor = conn.execute(
                "DELETE FROM movies WHERE movie_id = ? AND added_by = ?",
                (movie_id, added_by),
            )
        return cursor.rowcount > 0

    def _toggle(self, movie_id: str, added_by: str) -> Movie | None:
        with self.connection as conn:
            cursor = conn.execute(
                """
                UPDATE movies
                SET status = CASE status WHEN 'To Watch' THEN 'Watched' ELSE 'To Watch' END
                WHERE movie_id = ? AND added_by = ?
                """,
                (movie_id, added_by),
            )
        if cursor.rowcount == 0:
            return None
        return self.get(movie_id, added_by)
