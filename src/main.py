"""
Terminal shell around the GameService.

Type a movie title to guess, `?<prefix>` for suggestions, an empty line for the game status and `quit` to stop.
A guess submitted after the turn time limit ends the game: the other player wins.
"""

import argparse
import sys
import time
from typing import Callable, Optional

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.orm import Session

from src.api.models import StartGameRequest, TurnRequest
from src.autocomplete.autocomplete import Autocomplete
from src.core.config import Settings, get_settings
from src.core.exceptions import GameError, InvalidRequestError
from src.db.database import build_session_factory
from src.db.movie_database import MovieDatabase
from src.db.snapshot import MovieSnapshot
from src.db.sql_repository import SQLMovieStore
from src.db.tmdb_client import TMDBClient
from src.game.win_conditions import (
    DEFAULT_WIN_CONDITIONS,
    WinCondition,
    win_condition_from_kind,
)
from src.services.game_service import GameService

SUGGEST_PREFIX = "?"
QUIT_COMMANDS = {"quit", "exit"}

InputFn = Callable[[str], str]
ClockFn = Callable[[], float]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player movie connection game")
    parser.add_argument("--cache", help="path of the movie snapshot (JSON)")
    parser.add_argument("--limit", type=int, help="maximum number of suggestions")
    parser.add_argument("--time-limit", type=int, help="seconds per turn")
    return parser.parse_args(argv)


def build_service(settings: Settings, session: Session) -> GameService:
    """Wire the collaborators together. Every object is created here and passed on explicitly."""
    autocomplete = Autocomplete(settings.suggestion_limit)
    database = MovieDatabase(
        store=SQLMovieStore(session),
        client=TMDBClient(settings.tmdb_api_key, settings.tmdb_base_url),
        snapshot=MovieSnapshot(settings.movie_cache_path),
        autocomplete=autocomplete,
        preload_pages=settings.preload_pages,
    )
    database.preload_popular_movies()
    return GameService(database, autocomplete)


def choose_win_condition(read: InputFn) -> WinCondition:
    for index, condition in enumerate(DEFAULT_WIN_CONDITIONS, start=1):
        print(f"  {index}. {condition.description}")
    while True:
        answer = read(f"Pick a win condition (1-{len(DEFAULT_WIN_CONDITIONS)}): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(DEFAULT_WIN_CONDITIONS):
            return DEFAULT_WIN_CONDITIONS[int(answer) - 1]
        print(f"Please enter a number from 1 to {len(DEFAULT_WIN_CONDITIONS)}")


def read_players(read: InputFn) -> StartGameRequest:
    while True:
        player1 = read("Player 1 name: ")
        player2 = read("Player 2 name: ")
        condition = choose_win_condition(read)
        try:
            return StartGameRequest(
                player1_name=player1,
                player2_name=player2,
                win_condition=condition.kind,
                target=condition.target,
            )
        except (GameError, ValidationError) as e:
            print(e)


def play(
    service: GameService,
    request: StartGameRequest,
    time_limit: int,
    read: InputFn = input,
    clock: ClockFn = time.monotonic,
) -> None:
    """The game loop. Returns once the game is decided or a player quits."""
    win_condition = win_condition_from_kind(request.win_condition, request.target)
    starting_movie = service.start_game(
        request.player1_name, request.player2_name, win_condition
    )
    print(f"Starting movie: {starting_movie}")
    print(win_condition.description)

    turn_started = clock()
    while True:
        state = service.state
        line = read(
            f"[Round {state.current_round}] {state.current_player.name}, connect to {state.current_movie}: "
        ).strip()

        if line.lower() in QUIT_COMMANDS:
            return
        if not line:
            print(service.summary().model_dump_json(indent=2))
            continue
        if line.startswith(SUGGEST_PREFIX):
            for suggestion in service.suggestions(line[len(SUGGEST_PREFIX) :]).suggestions:
                print(f"  {suggestion}")
            continue

        if clock() - turn_started > time_limit:
            winner = service.timeout()
            print(f"Time's up! {winner.name} wins!")
            return

        response = service.submit_guess(TurnRequest(guess=line))
        print(response.message)
        if response.game_over:
            return
        if response.accepted:
            turn_started = clock()


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line values win over the environment. The suggestion limit is checked by the autocomplete engine."""
    if args.cache:
        settings.movie_cache_path = args.cache
    if args.limit is not None:
        settings.suggestion_limit = args.limit
    if args.time_limit is not None:
        settings.turn_time_limit = args.time_limit
    if settings.turn_time_limit < 1:
        raise InvalidRequestError(
            f"Turn time limit must be a positive number of seconds, got {settings.turn_time_limit}"
        )
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = apply_args(get_settings(), args)
    except GameError as e:
        print(e)
        return 1

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    session = build_session_factory(settings.database_url)()
    try:
        service = build_service(settings, session)
        request = read_players(input)
        play(service, request, settings.turn_time_limit)
    except GameError as e:
        print(e)
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
