"""The two entities a game is played with: movies and the players guessing them."""

from dataclasses import dataclass, field
from typing import Iterable, Self

from src.core.models import MovieModel
from src.core.shared_types import ConnectionType
from src.game.connection import Connection, find_connections


@dataclass(eq=False)
class Movie:
    """
    A movie and the people credited on it.

    Two movies are the same movie if title (ignoring case) and release year match.
    Apart from the append-only connection history, a Movie does not change after construction.
    """

    title: str
    year: int
    movie_id: int = 0
    genres: frozenset[str] = frozenset()
    actors: frozenset[str] = frozenset()
    directors: frozenset[str] = frozenset()
    writers: frozenset[str] = frozenset()
    composers: frozenset[str] = frozenset()
    cinematographers: frozenset[str] = frozenset()
    connection_history: list[list[Connection]] = field(default_factory=list)

    def __post_init__(self) -> None:
        # accept any iterable of names, but store them as immutable sets
        for attribute in (
            "genres",
            "actors",
            "directors",
            "writers",
            "composers",
            "cinematographers",
        ):
            setattr(self, attribute, frozenset(getattr(self, attribute)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return self.year == other.year and self.title.lower() == other.title.lower()

    def __hash__(self) -> int:
        return hash((self.title.lower(), self.year))

    def __str__(self) -> str:
        return f"{self.title} ({self.year})"

    @classmethod
    def from_model(cls, model: MovieModel) -> Self:
        """Define how to construct a Movie from the information the provider / cache layers have"""
        return cls(
            title=model.title,
            year=model.year,
            movie_id=model.movie_id,
            genres=frozenset(model.genres),
            actors=frozenset(model.actors),
            directors=frozenset(model.directors),
            writers=frozenset(model.writers),
            composers=frozenset(model.composers),
            cinematographers=frozenset(model.cinematographers),
        )

    def to_model(self) -> MovieModel:
        """Encode back into a format the cache / snapshot layers use. Sorted for stable output."""
        return MovieModel(
            movie_id=self.movie_id,
            title=self.title,
            year=self.year,
            genres=sorted(self.genres),
            actors=sorted(self.actors),
            directors=sorted(self.directors),
            writers=sorted(self.writers),
            composers=sorted(self.composers),
            cinematographers=sorted(self.cinematographers),
        )

    def credits(self, connection_type: ConnectionType) -> frozenset[str]:
        """The people credited on this movie in the given role"""
        match connection_type:
            case ConnectionType.ACTOR:
                return self.actors
            case ConnectionType.DIRECTOR:
                return self.directors
            case ConnectionType.WRITER:
                return self.writers
            case ConnectionType.COMPOSER:
                return self.composers
            case ConnectionType.CINEMATOGRAPHER:
                return self.cinematographers

    def find_connections(self, other: "Movie") -> list[Connection]:
        return find_connections(self, other)

    def add_connection_history(self, connections: Iterable[Connection]) -> None:
        """Record the batch of connections that justified playing this movie. Never pruned."""
        self.connection_history.append(list(connections))

    @property
    def latest_connections(self) -> list[Connection]:
        """The batch appended most recently (empty if the movie was never connected to)"""
        if not self.connection_history:
            return []
        return self.connection_history[-1]


@dataclass(eq=False)
class Player:
    """Players are compared by identity: two players may well share a name."""

    name: str
    _movies_guessed: set[Movie] = field(default_factory=set, init=False, repr=False)
    progress: int = 0

    @property
    def movies_guessed(self) -> frozenset[Movie]:
        return frozenset(self._movies_guessed)

    @property
    def num_movies_guessed(self) -> int:
        return len(self._movies_guessed)

    def add_guessed_movie(self, movie: Movie) -> None:
        self._movies_guessed.add(movie)

    def update_progress(self) -> None:
        """Progress only means something in combination with the active win condition."""
        self.progress += 1
