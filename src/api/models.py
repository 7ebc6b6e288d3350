"""Requests, Response and Record models (validation happens here, at the boundary)"""

from typing import Optional, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import MovieModel
from src.core.shared_types import Status, WinConditionKind

# The first feature film is from 1878 or so. Anything earlier is a data error.
EARLIEST_YEAR = 1870


# --- RECORD MODELS ---
class MovieRecord(BaseModel):
    """One movie as written to / read from the snapshot file."""

    movie_id: int = 0
    title: str
    year: int
    genres: list[str] = Field(default_factory=list)
    actors: list[str] = Field(default_factory=list)
    directors: list[str] = Field(default_factory=list)
    writers: list[str] = Field(default_factory=list)
    composers: list[str] = Field(default_factory=list)
    cinematographers: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Movie title cannot be empty.")
        return value.strip()

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: int) -> int:
        if value < EARLIEST_YEAR:
            raise ValueError(f"Release year {value} is before {EARLIEST_YEAR}.")
        return value

    @classmethod
    def from_model(cls, model: MovieModel) -> Self:
        return cls(
            movie_id=model.movie_id,
            title=model.title,
            year=model.year,
            genres=model.genres,
            actors=model.actors,
            directors=model.directors,
            writers=model.writers,
            composers=model.composers,
            cinematographers=model.cinematographers,
        )

    def to_model(self) -> MovieModel:
        return MovieModel(**self.model_dump())


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    player1_name: str
    player2_name: str
    win_condition: WinConditionKind
    target: Optional[str] = None

    @field_validator("player1_name", "player2_name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value.strip()

    @model_validator(mode="after")
    def validate_distinct_names(self) -> Self:
        if self.player1_name.lower() == self.player2_name.lower():
            raise InvalidRequestError(
                f"Both players are called {self.player1_name!r}. Pick different names."
            )
        return self


class TurnRequest(BaseModel):
    guess: str

    @field_validator("guess")
    @classmethod
    def validate_guess(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Movie title cannot be empty.")
        return value.strip()


# --- RESPONSE MODELS ---
class TurnResponse(BaseModel):
    accepted: bool
    game_over: bool
    message: str
    current_player: str
    round: int


class SuggestionsResponse(BaseModel):
    prefix: str
    suggestions: list[str]


class PlayerSummary(BaseModel):
    name: str
    progress: str
    movies_guessed: list[str]


class GameSummaryResponse(BaseModel):
    status: Status
    round: int
    current_player: str
    current_movie: str
    win_condition: str
    players: list[PlayerSummary]
    recent_history: list[str]
    winner: Optional[str] = None
