"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The remote provider, the local cache, the snapshot file and the domain layer all exchange movies as a MovieModel,
and the Service reports the outcome of a turn as a TurnResult.
"""

from dataclasses import dataclass, field

# Type aliases to make MovieModel easier to read
PersonName = str
GenreName = str


@dataclass
class MovieModel:
    """Transport-safe representation of a movie used between provider, cache, snapshot and Game layers."""

    movie_id: int
    title: str
    year: int
    genres: list[GenreName] = field(default_factory=list)
    actors: list[PersonName] = field(default_factory=list)
    directors: list[PersonName] = field(default_factory=list)
    writers: list[PersonName] = field(default_factory=list)
    composers: list[PersonName] = field(default_factory=list)
    cinematographers: list[PersonName] = field(default_factory=list)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of processing a single guess."""

    accepted: bool
    message: str
    game_over: bool = False
