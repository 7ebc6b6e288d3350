"""
The movie lookup used by the game.

Combines, from cheap to expensive:
1. movies already loaded in memory (the same Movie instance is handed out every time, connection history included;
   a title shared by several movies resolves to the most recent one)
2. the local SQL cache
3. the remote provider (TMDB)

It also feeds the titles it knows to the autocomplete engine.
"""

import random
from typing import Optional

from loguru import logger

from src.autocomplete.autocomplete import Autocomplete
from src.core.exceptions import RepositoryError
from src.core.models import MovieModel
from src.db.repository import MovieStore
from src.db.snapshot import MovieSnapshot
from src.db.sql_repository import title_key
from src.db.tmdb_client import TMDBClient
from src.game.movie import Movie

DEFAULT_PRELOAD_PAGES = 25


class MovieDatabase:
    def __init__(
        self,
        store: MovieStore,
        client: Optional[TMDBClient] = None,
        snapshot: Optional[MovieSnapshot] = None,
        autocomplete: Optional[Autocomplete] = None,
        preload_pages: int = DEFAULT_PRELOAD_PAGES,
    ) -> None:
        self.store = store
        self.client = client
        self.snapshot = snapshot
        self._autocomplete = autocomplete if autocomplete is not None else Autocomplete()
        self.preload_pages = preload_pages
        # one instance per (title, year); the title index points at the most recent year
        self._movies: dict[tuple[str, int], Movie] = {}
        self._by_title: dict[str, Movie] = {}

    @property
    def autocomplete(self) -> Autocomplete:
        return self._autocomplete

    def __len__(self) -> int:
        return len(self._movies)

    def find_by_title(self, title: str) -> Movie | None:
        key = title_key(title)
        if not key:
            return None

        if key in self._by_title:
            return self._by_title[key]

        stored = self.store.get_movie(key)
        if stored is not None:
            logger.debug(f"[MovieDB] {title!r} found in local cache")
            return self._remember(stored)

        if self.client is None:
            return None
        fetched = self.client.fetch_movie_by_title(title)
        if fetched is None:
            logger.debug(f"[MovieDB] {title!r} not found")
            return None

        movie = self._remember(self.store.add_movie(fetched))
        # typed "dark knight" but found "The Dark Knight"? Remember the typed version as well.
        self._by_title[key] = movie
        logger.info(f"[MovieDB] {title!r} fetched from TMDB as {movie}")
        return movie

    def random_movie(self) -> Movie | None:
        if not self._movies:
            self.preload_popular_movies()
        if not self._movies:
            return None
        return random.choice(sorted(self._movies.values(), key=str))

    def preload_popular_movies(self) -> int:
        """
        Fill memory (and autocomplete) with a set of well-known movies.
        ----

        1. snapshot file on disk, if there is one
        2. otherwise whatever the local SQL cache holds
        3. otherwise fetch popular movies from TMDB, and write them to the cache + snapshot for next time

        Returns the number of movies known afterwards.
        """
        models = self._load_snapshot()
        source = "snapshot"

        if not models and self.store.count() > 0:
            models = self.store.list_movies()
            source = "local cache"

        if not models and self.client is not None:
            models = [
                self.store.add_movie(model)
                for model in self.client.fetch_popular_movies(self.preload_pages)
            ]
            source = "TMDB"
            self._save_snapshot(models)

        for model in models:
            self._remember(model)
        logger.info(f"[MovieDB] Preloaded {len(models)} movies from {source}")
        return len(self)

    def _remember(self, model: MovieModel) -> Movie:
        """Keep one Movie instance per title and year. New movies become available to autocomplete (weight 0)."""
        key = title_key(model.title)
        if (key, model.year) in self._movies:
            return self._movies[(key, model.year)]
        movie = Movie.from_model(model)
        self._movies[(key, model.year)] = movie
        known = self._by_title.get(key)
        if known is None or movie.year > known.year:
            self._by_title[key] = movie
        self._autocomplete.insert(movie.title, 0)
        return movie

    def _load_snapshot(self) -> list[MovieModel]:
        if self.snapshot is None or not self.snapshot.exists():
            return []
        try:
            return self.snapshot.load()
        except RepositoryError as e:
            logger.warning(f"[MovieDB] Ignoring unusable snapshot: {e}")
            return []

    def _save_snapshot(self, models: list[MovieModel]) -> None:
        if self.snapshot is None or not models:
            return
        try:
            self.snapshot.save(models)
        except RepositoryError as e:
            logger.warning(f"[MovieDB] Could not write snapshot: {e}")
