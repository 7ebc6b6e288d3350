"""
The GameState keeps track of everything that happened in a single game.
It knows whose turn it is, which round is played, which movies were played and how often a person's connection was spent.

It does NOT validate a guess. The service layer checks a guess first and only then commits it here.
"""

from collections import deque
from typing import Iterable

from loguru import logger

from src.game.connection import Connection
from src.game.movie import Movie, Player
from src.game.win_conditions import WinCondition

# Only the most recent movies are shown to the players. Duplicate detection uses the full record.
RECENT_HISTORY_SIZE = 5
# A person can justify this many accepted turns per game. After that, their connection is spent.
MAX_CONNECTION_USES = 3


class GameState:
    def __init__(
        self,
        player1: Player,
        player2: Player,
        win_condition: WinCondition,
        starting_movie: Movie,
    ) -> None:
        self._players = (player1, player2)
        self._current_player = player1
        self._round_starter = player1
        self._current_round = 1
        self._win_condition = win_condition
        self._starting_movie = starting_movie

        # the starting movie can never be played again either
        self._used_movies: set[Movie] = {starting_movie}
        self._recent_history: deque[Movie] = deque(
            [starting_movie], maxlen=RECENT_HISTORY_SIZE
        )
        self._connection_usage: dict[str, int] = {}

        logger.info(
            f"[State] New game: {player1.name} vs {player2.name}, starting from {starting_movie}"
        )

    # --- ACCESSORS ---
    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def other_player(self) -> Player:
        player1, player2 = self._players
        return player2 if self._current_player is player1 else player1

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def current_round(self) -> int:
        return self._current_round

    @property
    def starting_movie(self) -> Movie:
        return self._starting_movie

    @property
    def current_movie(self) -> Movie:
        """The movie the next guess has to connect to (the one committed last)"""
        return self._recent_history[-1]

    @property
    def recent_history(self) -> tuple[Movie, ...]:
        """Oldest first. Read-only view."""
        return tuple(self._recent_history)

    @property
    def win_condition(self) -> WinCondition:
        return self._win_condition

    @property
    def used_movies_count(self) -> int:
        return len(self._used_movies)

    # --- HISTORY ---
    def is_movie_used(self, movie: Movie) -> bool:
        """Checks the full record of the game, not just the recent history."""
        return movie in self._used_movies

    def add_movie_to_history(self, movie: Movie) -> None:
        """
        Commit a movie to the game.
        ----

        1. add it to the record of used movies (callers check `is_movie_used` first, this does not reject duplicates)
        2. append it to the recent history (the oldest entry drops off once there are more than RECENT_HISTORY_SIZE)
        3. spend the connections of the batch the caller attached to the movie just before this call
        """
        self._used_movies.add(movie)
        self._recent_history.append(movie)
        for connection in movie.latest_connections:
            self.increment_connection_usage(connection.person_name)
        logger.debug(
            f"[State] Committed {movie}. Used movies: {len(self._used_movies)}"
        )

    # --- CONNECTION USAGE ---
    def increment_connection_usage(self, person_name: str) -> None:
        """Counters only go up. They are shared across all roles of that person."""
        self._connection_usage[person_name] = self.connection_usage(person_name) + 1

    def connection_usage(self, person_name: str) -> int:
        return self._connection_usage.get(person_name, 0)

    def filter_connections(self, candidates: Iterable[Connection]) -> list[Connection]:
        """Keep the connections that are not spent yet. Order of the candidates is preserved."""
        return [
            connection
            for connection in candidates
            if self.connection_usage(connection.person_name) < MAX_CONNECTION_USES
        ]

    # --- TURNS ---
    def switch_player(self) -> None:
        """Hand the turn to the other player. Back at the player who started the round? Then a new round starts."""
        self._current_player = self.other_player
        if self._current_player is self._round_starter:
            self._current_round += 1
            logger.debug(f"[State] Round {self._current_round} starts")

    def has_current_player_won(self) -> bool:
        return self._win_condition.check_victory(self._current_player)
