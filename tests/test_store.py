"""Tests for the SQLite watchlist store."""

import logging
from datetime import datetime, timedelta

import pytest

from filmcollab.models import ChangeAction, Movie, WatchStatus
from filmcollab.store import SQLiteListStore, StoreClosedError, open_store

BASE_TIME = datetime(2026, 1, 1, 20, 0, 0)


def make_movie(movie_id="272", added_by="alice", minutes=0, **kwargs) -> Movie:
    return Movie(
        id=movie_id,
        title=kwargs.pop("title", f"Movie {movie_id}"),
        year=kwargs.pop("year", "2005"),
        added_by=added_by,
        added_at=BASE_TIME + timedelta(minutes=minutes),
        **kwargs,
    )


class TestMutations:
    """Test add, remove and toggle."""

    def test_add_and_get(self, store):
        movie = make_movie(social_link="https://youtu.be/dQw4w9WgXcQ")
        assert store.add(movie) is True
        stored = store.get("272", "alice")
        assert stored == movie
        assert stored.status == WatchStatus.TO_WATCH

    def test_add_is_idempotent_per_user(self, store):
        """Test re-adding the same (movie, user) pair is a no-op."""
        assert store.add(make_movie(title="First")) is True
        assert store.add(make_movie(title="Second")) is False
        movies = store.list_movies()
        assert len(movies) == 1
        assert movies[0].title == "First"

    def test_same_movie_different_users(self, store):
        """Test two users can each list the same movie."""
        assert store.add(make_movie(added_by="alice")) is True
        assert store.add(make_movie(added_by="bob")) is True
        assert len(store.list_movies()) == 2

    def test_toggle_round_trip(self, store):
        store.add(make_movie())
        assert store.toggle_status("272", "alice").status == WatchStatus.WATCHED
        assert store.toggle_status("272", "alice").status == WatchStatus.TO_WATCH

    def test_toggle_only_affects_owner(self, store):
        store.add(make_movie(added_by="alice"))
        store.add(make_movie(added_by="bob"))
        store.toggle_status("272", "alice")
        assert store.get("272", "alice").status == WatchStatus.WATCHED
        assert store.get("272", "bob").status == WatchStatus.TO_WATCH

    def test_toggle_missing(self, store):
        assert store.toggle_status("999", "alice") is None

    def test_remove(self, store):
        store.add(make_movie())
        assert store.remove("272", "alice") is True
        assert store.get("272", "alice") is None
        assert store.remove("272", "alice") is False


class TestQueries:
    """Test listing and filters."""

    def test_newest_first(self, store):
        store.add(make_movie("1", minutes=0))
        store.add(make_movie("2", minutes=5))
        store.add(make_movie("3", minutes=10))
        assert [m.id for m in store.list_movies()] == ["3", "2", "1"]

    def test_filters(self, store):
        store.add(make_movie("1", added_by="alice"))
        store.add(make_movie("2", added_by="bob"))
        store.add(make_movie("3", added_by="alice", status=WatchStatus.WATCHED))

        assert {m.id for m in store.list_movies(added_by="alice")} == {"1", "3"}
        assert [m.id for m in store.list_movies(status=WatchStatus.WATCHED)] == ["3"]
        assert [m.id for m in store.list_movies(added_by="alice", status="To Watch")] == ["1"]


class TestLifecycle:
    """Test connect, close and durability."""

    def test_durable_across_reopen(self, tmp_path):
        """Test entries survive closing and reopening the database."""
        db_path = tmp_path / "nested" / "watchlist.db"
        with SQLiteListStore(db_path) as first:
            first.add(make_movie(social_link="https://vm.tiktok.com/ZMabc123/"))
            first.toggle_status("272", "alice")

        with SQLiteListStore(db_path) as second:
            movie = second.get("272", "alice")
        assert movie is not None
        assert movie.status == WatchStatus.WATCHED
        assert movie.social_link == "https://vm.tiktok.com/ZMabc123/"

    def test_closed_store_raises(self):
        s = SQLiteListStore()
        s.connect()
        s.close()
        with pytest.raises(StoreClosedError):
            s.add(make_movie())
        with pytest.raises(StoreClosedError):
            s.list_movies()
        with pytest.raises(StoreClosedError):
            s.connect()

    def test_connect_is_idempotent(self, store):
        store.connect()
        store.add(make_movie())
        store.connect()
        assert len(store.list_movies()) == 1

    def test_open_store_uses_config(self, tmp_path, monkeypatch):
        db_path = tmp_path / "configured.db"
        monkeypatch.setenv("FILMCOLLAB_STORE_PATH", str(db_path))
        s = open_store()
        try:
            s.add(make_movie())
        finally:
            s.close()
        assert db_path.exists()


class TestSubscriptions:
    """Test change propagation to subscribers."""

    def test_notified_on_effective_mutations(self, store):
        changes = []
        store.subscribe(changes.append)

        store.add(make_movie())
        store.add(make_movie())  # duplicate, no change
        store.toggle_status("272", "alice")
        store.toggle_status("999", "alice")  # missing, no change
        store.remove("272", "alice")

        assert [c.action for c in changes] == [
            ChangeAction.ADDED,
            ChangeAction.TOGGLED,
            ChangeAction.REMOVED,
        ]
        assert changes[1].movie.status == WatchStatus.WATCHED
        assert changes[2].movie is None

    def test_unsubscribe(self, store):
        changes = []
        unsubscribe = store.subscribe(changes.append)
        unsubscribe()
        unsubscribe()
        store.add(make_movie())
        assert changes == []

    def test_failing_subscriber_is_isolated(self, store, caplog):
        """Test one failing listener does not block the others."""
        changes = []

        def broken(change):
            raise RuntimeError("listener bug")

        store.subscribe(broken)
        store.subscribe(changes.append)
        with caplog.at_level(logging.ERROR, logger="filmcollab.store.base"):
            assert store.add(make_movie()) is True
        assert len(changes) == 1
        assert "subscriber failed" in caplog.text
