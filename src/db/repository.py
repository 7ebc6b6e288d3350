"""Protocols for the collaborators the game depends on (implemented with SQLAlchemy / TMDB for now, but anything will do)"""

from typing import Protocol

from src.core.models import MovieModel
from src.game.movie import Movie


class MovieLookup(Protocol):
    """What the Service needs to resolve guesses and pick a starting movie."""

    def find_by_title(self, title: str) -> Movie | None:
        """Movie matching the title, if any. Normalising the input is the lookup's job."""
        ...

    def random_movie(self) -> Movie | None:
        """Any movie to start a game from. None if nothing is available."""
        ...


class MovieStore(Protocol):
    """Persistence layer orchestration for the local movie cache"""

    def get_movie(self, title: str) -> MovieModel | None:
        """Get movie by (case-insensitive) title, if record exists."""
        ...

    def add_movie(self, movie: MovieModel) -> MovieModel:
        """Store a movie (or refresh the record of the same title + year)."""
        ...

    def list_movies(self) -> list[MovieModel]:
        """All stored movies."""
        ...

    def count(self) -> int:
        """Number of stored movies."""
        ...
