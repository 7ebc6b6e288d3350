"""Unit tests for src/db/database.py"""

from pathlib import Path

from sqlalchemy import inspect

from src.core.models import MovieModel
from src.db.database import build_session_factory
from src.db.sql_repository import SQLMovieStore


def test_session_factory_creates_tables(tmp_path: Path) -> None:
    session_factory = build_session_factory(f"sqlite:///{tmp_path / 'movies.db'}")
    with session_factory() as session:
        assert "movies" in inspect(session.get_bind()).get_table_names()


def test_cache_survives_new_sessions(tmp_path: Path) -> None:
    """The local cache is persistent: a second factory on the same file sees earlier movies."""
    url = f"sqlite:///{tmp_path / 'movies.db'}"
    with build_session_factory(url)() as session:
        SQLMovieStore(session).add_movie(MovieModel(movie_id=1, title="Heat", year=1995))

    with build_session_factory(url)() as session:
        found = SQLMovieStore(session).get_movie("heat")
    assert found is not None
    assert found.year == 1995
