"""Unit tests for src/game/state.py"""

import pytest

from src.core.shared_types import ConnectionType
from src.game.connection import Connection
from src.game.movie import Movie, Player
from src.game.state import MAX_CONNECTION_USES, RECENT_HISTORY_SIZE, GameState
from src.game.win_conditions import WinCondition, two_genre_movies_win

PACINO = Connection("Al Pacino", ConnectionType.ACTOR)
DE_NIRO = Connection("Robert De Niro", ConnectionType.ACTOR)


@pytest.fixture
def players() -> tuple[Player, Player]:
    return Player("Alice"), Player("Bob")


@pytest.fixture
def win_condition() -> WinCondition:
    return two_genre_movies_win()


@pytest.fixture
def game_state(
    players: tuple[Player, Player], win_condition: WinCondition, godfather: Movie
) -> GameState:
    player1, player2 = players
    return GameState(player1, player2, win_condition, godfather)


def numbered_movie(i: int) -> Movie:
    return Movie(f"Movie {i}", 2000 + i, actors={f"Actor {i}"})


# -- INITIALISATION --
def test_initial_state(
    game_state: GameState,
    players: tuple[Player, Player],
    win_condition: WinCondition,
    godfather: Movie,
) -> None:
    player1, player2 = players
    assert game_state.current_player is player1
    assert game_state.other_player is player2
    assert game_state.current_round == 1
    assert game_state.starting_movie == godfather
    assert game_state.current_movie == godfather
    assert game_state.win_condition == win_condition
    assert game_state.is_movie_used(godfather)
    assert game_state.recent_history == (godfather,)
    assert game_state.used_movies_count == 1


# -- HISTORY --
def test_add_movie_to_history(game_state: GameState, heat: Movie) -> None:
    game_state.add_movie_to_history(heat)

    assert game_state.is_movie_used(heat)
    assert game_state.recent_history[-1] == heat
    assert len(game_state.recent_history) == 2
    assert game_state.current_movie == heat


def test_is_movie_used_ignores_title_case(game_state: GameState, heat: Movie) -> None:
    game_state.add_movie_to_history(heat)
    assert game_state.is_movie_used(Movie("HEAT", 1995))
    assert not game_state.is_movie_used(Movie("Heat", 1986))


def test_recent_history_keeps_the_last_five(game_state: GameState) -> None:
    """Starting movie + M2..M7 committed: only M3..M7 remain visible, oldest first."""
    for i in range(2, 8):
        game_state.add_movie_to_history(numbered_movie(i))

    recent = game_state.recent_history
    assert len(recent) == RECENT_HISTORY_SIZE
    assert [movie.title for movie in recent] == [f"Movie {i}" for i in range(3, 8)]


def test_evicted_movies_stay_used(game_state: GameState, godfather: Movie) -> None:
    movies = [numbered_movie(i) for i in range(1, 8)]
    for movie in movies:
        game_state.add_movie_to_history(movie)

    assert godfather not in game_state.recent_history
    assert game_state.is_movie_used(godfather)
    assert all(game_state.is_movie_used(movie) for movie in movies)
    assert game_state.used_movies_count == 8


def test_recent_history_cannot_be_modified(game_state: GameState, heat: Movie) -> None:
    history = game_state.recent_history
    with pytest.raises(AttributeError):
        history.append(heat)  # type: ignore[attr-defined]


# -- CONNECTION USAGE --
def test_committing_a_movie_spends_its_latest_connections(
    game_state: GameState, heat: Movie
) -> None:
    heat.add_connection_history([PACINO, DE_NIRO])
    game_state.add_movie_to_history(heat)

    assert game_state.connection_usage("Al Pacino") == 1
    assert game_state.connection_usage("Robert De Niro") == 1
    assert game_state.connection_usage("Val Kilmer") == 0


def test_only_latest_batch_is_spent(game_state: GameState, heat: Movie) -> None:
    """A movie played in an earlier game keeps its old batches. Only the newest one counts."""
    heat.add_connection_history([DE_NIRO])
    heat.add_connection_history([PACINO])
    game_state.add_movie_to_history(heat)

    assert game_state.connection_usage("Al Pacino") == 1
    assert game_state.connection_usage("Robert De Niro") == 0


def test_movie_without_connections_spends_nothing(game_state: GameState, heat: Movie) -> None:
    game_state.add_movie_to_history(heat)
    assert game_state.connection_usage("Al Pacino") == 0


def test_increment_connection_usage(game_state: GameState) -> None:
    game_state.increment_connection_usage("Al Pacino")
    game_state.increment_connection_usage("Al Pacino")
    assert game_state.filter_connections([PACINO]) == [PACINO]

    game_state.increment_connection_usage("Al Pacino")
    assert game_state.filter_connections([PACINO]) == []


def test_filter_connections(game_state: GameState) -> None:
    connections = [PACINO, DE_NIRO]
    assert game_state.filter_connections(connections) == connections

    for _ in range(MAX_CONNECTION_USES):
        game_state.increment_connection_usage("Al Pacino")

    assert game_state.filter_connections(connections) == [DE_NIRO]


def test_spent_person_is_spent_in_every_role(game_state: GameState) -> None:
    as_director = Connection("Clint Eastwood", ConnectionType.DIRECTOR)
    as_actor = Connection("Clint Eastwood", ConnectionType.ACTOR)
    for _ in range(MAX_CONNECTION_USES):
        game_state.increment_connection_usage("Clint Eastwood")

    assert game_state.filter_connections([as_director, as_actor, DE_NIRO]) == [DE_NIRO]


def test_person_in_two_shared_roles_spends_two_uses(game_state: GameState, heat: Movie) -> None:
    """Every connection of the batch is spent, so one person credited twice pays twice in one turn."""
    as_director = Connection("Clint Eastwood", ConnectionType.DIRECTOR)
    as_actor = Connection("Clint Eastwood", ConnectionType.ACTOR)
    heat.add_connection_history([as_actor, as_director])
    game_state.add_movie_to_history(heat)

    assert game_state.connection_usage("Clint Eastwood") == 2
    assert game_state.filter_connections([as_actor]) == [as_actor]


def test_filter_preserves_order(game_state: GameState) -> None:
    keaton = Connection("Diane Keaton", ConnectionType.ACTOR)
    rota = Connection("Nino Rota", ConnectionType.COMPOSER)
    assert game_state.filter_connections([rota, PACINO, keaton]) == [rota, PACINO, keaton]


def test_usage_spent_across_movies(game_state: GameState) -> None:
    """Three different movies, each justified by the same person: that person is spent."""
    for i in range(1, 4):
        movie = numbered_movie(i)
        movie.add_connection_history([PACINO])
        game_state.add_movie_to_history(movie)

    assert game_state.connection_usage("Al Pacino") == MAX_CONNECTION_USES
    assert game_state.filter_connections([PACINO, DE_NIRO]) == [DE_NIRO]


# -- TURNS --
def test_switch_player(game_state: GameState, players: tuple[Player, Player]) -> None:
    player1, player2 = players
    game_state.switch_player()
    assert game_state.current_player is player2
    assert game_state.other_player is player1
    game_state.switch_player()
    assert game_state.current_player is player1
    assert game_state.other_player is player2


def test_round_increments_after_full_cycle(game_state: GameState) -> None:
    game_state.switch_player()
    assert game_state.current_round == 1
    game_state.switch_player()
    assert game_state.current_round == 2
    game_state.switch_player()
    assert game_state.current_round == 2
    game_state.switch_player()
    assert game_state.current_round == 3


def test_current_player_is_always_one_of_the_two(
    game_state: GameState, players: tuple[Player, Player]
) -> None:
    for _ in range(7):
        game_state.switch_player()
        assert any(game_state.current_player is player for player in players)


def test_has_current_player_won(game_state: GameState) -> None:
    assert not game_state.has_current_player_won()
    game_state.current_player.update_progress()
    game_state.current_player.update_progress()
    assert game_state.has_current_player_won()
    # only the current player is checked
    game_state.switch_player()
    assert not game_state.has_current_player_won()
