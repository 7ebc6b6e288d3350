"""
Victory rules a game can be played with.

The set of rules is small and closed: a WinCondition is a tagged variant (kind + target + required count).
All behaviour that differs between the variants is dispatched on the kind in one place (`_carries_target`).
"""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import InvalidInputError
from src.core.shared_types import WinConditionKind
from src.game.movie import Movie, Player

DEFAULT_REQUIRED_COUNT = 2
DEFAULT_GENRE = "Horror"
DEFAULT_DIRECTOR = "Christopher Nolan"


@dataclass(frozen=True)
class WinCondition:
    kind: WinConditionKind
    target: str
    required_count: int = DEFAULT_REQUIRED_COUNT

    def __post_init__(self) -> None:
        if not self.target:
            raise InvalidInputError("A win condition needs a target genre / director.")
        if self.required_count < 1:
            raise InvalidInputError(
                f"Required count must be a positive integer, got {self.required_count}."
            )

    @property
    def description(self) -> str:
        match self.kind:
            case WinConditionKind.TWO_GENRE_MOVIES:
                return f"Win by guessing {self.required_count} {self.target.lower()} movies!"
            case WinConditionKind.TWO_DIRECTOR_MOVIES:
                return f"Win by guessing {self.required_count} movies directed by {self.target}!"

    def check_victory(self, player: Player) -> bool:
        """Pure check, does not touch the player."""
        return player.progress >= self.required_count

    def update_player_progress(self, player: Player, movie: Movie) -> None:
        """
        Called exactly once per accepted turn.
        Calling it twice for the same movie counts the movie twice.
        """
        if self._carries_target(movie):
            player.update_progress()

    def player_progress(self, player: Player) -> str:
        return f"{player.progress}/{self.required_count}"

    def _carries_target(self, movie: Movie) -> bool:
        match self.kind:
            case WinConditionKind.TWO_GENRE_MOVIES:
                return self.target in movie.genres
            case WinConditionKind.TWO_DIRECTOR_MOVIES:
                return self.target in movie.directors


def two_genre_movies_win(genre: str = DEFAULT_GENRE) -> WinCondition:
    return WinCondition(WinConditionKind.TWO_GENRE_MOVIES, genre)


def two_director_movies_win(director: str = DEFAULT_DIRECTOR) -> WinCondition:
    return WinCondition(WinConditionKind.TWO_DIRECTOR_MOVIES, director)


def win_condition_from_kind(
    kind: WinConditionKind, target: Optional[str] = None
) -> WinCondition:
    """Build a win condition from what a request supplies. No target? Use the classic one for that kind."""
    match kind:
        case WinConditionKind.TWO_GENRE_MOVIES:
            return two_genre_movies_win(target or DEFAULT_GENRE)
        case WinConditionKind.TWO_DIRECTOR_MOVIES:
            return two_director_movies_win(target or DEFAULT_DIRECTOR)


# The menu offered when starting a new game
DEFAULT_WIN_CONDITIONS: list[WinCondition] = [
    two_genre_movies_win(),
    two_director_movies_win(),
]
