"""Orchestration of a game: binds a guess to lookup -> connection check -> usage caps -> state update -> victory check."""

from typing import Optional

from loguru import logger

from src.api.models import (
    GameSummaryResponse,
    PlayerSummary,
    SuggestionsResponse,
    TurnRequest,
    TurnResponse,
)
from src.autocomplete.autocomplete import Autocomplete
from src.core.exceptions import GameStateError
from src.core.models import TurnResult
from src.core.shared_types import Status
from src.db.repository import MovieLookup
from src.game.connection import Connection
from src.game.movie import Movie, Player
from src.game.state import MAX_CONNECTION_USES, GameState
from src.game.win_conditions import WinCondition


class GameService:
    """Runs one game at a time. The lookup and autocomplete engine are handed in, never global."""

    def __init__(self, lookup: MovieLookup, autocomplete: Autocomplete) -> None:
        self.lookup = lookup
        self.autocomplete = autocomplete
        self._state: Optional[GameState] = None
        self._status = Status.WAITING_FOR_FIRST_TURN
        self._winner: Optional[Player] = None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise GameStateError("No game has been started yet.")
        return self._state

    @property
    def status(self) -> Status:
        return self._status

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    # -- GAME LIFECYCLE ---
    def start_game(
        self, player1_name: str, player2_name: str, win_condition: WinCondition
    ) -> Movie:
        """Start a new game (replacing any previous one) from a random movie. Player 1 moves first."""
        starting_movie = self.lookup.random_movie()
        if starting_movie is None:
            raise GameStateError("No movie available to start the game from.")

        self._state = GameState(
            Player(player1_name), Player(player2_name), win_condition, starting_movie
        )
        self._status = Status.WAITING_FOR_FIRST_TURN
        self._winner = None
        logger.info(f"[Service] Game started: {win_condition.description}")
        return starting_movie

    def process_turn(self, raw_input: str) -> TurnResult:
        """
        The current player guesses a movie.
        ----

        Every check happens before anything changes. Rejections are ordinary outcomes, not exceptions:
        1. empty input
        2. movie not found
        3. movie already played in this game
        4. no person shared with the current movie
        5. every shared person already spent MAX_CONNECTION_USES times

        Passed them all? Commit the turn, then either declare the winner or pass the turn on.
        """
        state = self.state
        self._assert_game_running()

        guess = (raw_input or "").strip()
        if not guess:
            return TurnResult(False, "Movie title cannot be empty.")

        guessed_movie = self.lookup.find_by_title(guess)
        if guessed_movie is None:
            return TurnResult(False, f"Oops, {guess} is not found in the database.")

        if state.is_movie_used(guessed_movie):
            return TurnResult(False, f"Nice try! However {guessed_movie.title} was already used.")

        last_movie = state.current_movie
        connections = last_movie.find_connections(guessed_movie)
        if not connections:
            return TurnResult(
                False,
                f"Oops, no valid connection found between {last_movie.title} and {guessed_movie.title}.",
            )

        valid_connections = state.filter_connections(connections)
        if not valid_connections:
            spent = ", ".join(sorted({c.person_name for c in connections}))
            return TurnResult(
                False,
                f"Nice try! However {spent} has already been used {MAX_CONNECTION_USES} times.",
            )

        current_player = state.current_player
        self._commit_turn(current_player, guessed_movie, valid_connections)

        if state.has_current_player_won():
            self._status = Status.CONCLUDED
            self._winner = current_player
            logger.info(f"[Service] {current_player.name} won in round {state.current_round}")
            return TurnResult(True, f"Congrats {current_player.name}, you won!", game_over=True)

        state.switch_player()
        return TurnResult(
            True,
            f"Nice! {last_movie.title} and {guessed_movie.title} connected via "
            + ", ".join(str(connection) for connection in valid_connections),
        )

    def timeout(self) -> Player:
        """The current player ran out of time: the other player wins."""
        state = self.state
        self._assert_game_running()
        self._status = Status.CONCLUDED
        self._winner = state.other_player
        logger.info(f"[Service] {state.current_player.name} ran out of time")
        return self._winner

    def submit_guess(self, request: TurnRequest) -> TurnResponse:
        """process_turn for a validated request, reporting whose turn it is afterwards."""
        result = self.process_turn(request.guess)
        state = self.state
        return TurnResponse(
            accepted=result.accepted,
            game_over=result.game_over,
            message=result.message,
            current_player=state.current_player.name,
            round=state.current_round,
        )

    # -- QUERIES ---
    def suggestions(self, prefix: str) -> SuggestionsResponse:
        """Titles to offer while the player is typing."""
        return SuggestionsResponse(prefix=prefix, suggestions=self.autocomplete.suggest(prefix))

    def summary(self) -> GameSummaryResponse:
        state = self.state
        return GameSummaryResponse(
            status=self._status,
            round=state.current_round,
            current_player=state.current_player.name,
            current_movie=str(state.current_movie),
            win_condition=state.win_condition.description,
            players=[
                PlayerSummary(
                    name=player.name,
                    progress=state.win_condition.player_progress(player),
                    movies_guessed=sorted(str(movie) for movie in player.movies_guessed),
                )
                for player in state.players
            ],
            recent_history=[str(movie) for movie in state.recent_history],
            winner=self._winner.name if self._winner else None,
        )

    # -- Internal helpers --
    def _commit_turn(
        self, player: Player, movie: Movie, connections: list[Connection]
    ) -> None:
        """
        Apply an accepted guess in one go.

        NOTE the connections get attached to the movie BEFORE it is added to the history:
        adding it to the history is what spends them.
        """
        movie.add_connection_history(connections)
        self.state.add_movie_to_history(movie)
        player.add_guessed_movie(movie)
        self.state.win_condition.update_player_progress(player, movie)
        self._status = Status.IN_PROGRESS
        logger.debug(
            f"[Service] {player.name} played {movie} "
            f"({self.state.win_condition.player_progress(player)})"
        )

    def _assert_game_running(self) -> None:
        if self._status == Status.CONCLUDED:
            raise GameStateError("The game is over. Start a new game to keep playing.")
