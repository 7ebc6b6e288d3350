"""Unit tests for src/game/win_conditions.py"""

import pytest

from src.core.exceptions import InvalidInputError
from src.core.shared_types import WinConditionKind
from src.game.movie import Movie, Player
from src.game.win_conditions import (
    DEFAULT_WIN_CONDITIONS,
    WinCondition,
    two_director_movies_win,
    two_genre_movies_win,
    win_condition_from_kind,
)

HORROR_MOVIE = Movie("The Shining", 1980, genres={"Horror"}, directors={"Stanley Kubrick"})
NOLAN_MOVIE = Movie("Inception", 2010, genres={"Action"}, directors={"Christopher Nolan"})
COMEDY = Movie("Airplane!", 1980, genres={"Comedy"}, directors={"Jim Abrahams"})


@pytest.mark.parametrize(
    "win_condition",
    [two_genre_movies_win(), two_director_movies_win()],
)
@pytest.mark.parametrize(
    "progress, expected",
    [(0, False), (1, False), (2, True), (3, True)],
)
def test_check_victory(win_condition: WinCondition, progress: int, expected: bool) -> None:
    player = Player("Alice")
    player.progress = progress
    assert win_condition.check_victory(player) is expected
    # pure predicate
    assert player.progress == progress


@pytest.mark.parametrize(
    "win_condition",
    [two_genre_movies_win(), two_director_movies_win()],
)
@pytest.mark.parametrize("progress", [0, 1, 2])
def test_player_progress_string(win_condition: WinCondition, progress: int) -> None:
    player = Player("Bob")
    player.progress = progress
    assert win_condition.player_progress(player) == f"{progress}/2"


def test_genre_progress_only_counts_target_genre() -> None:
    win_condition = two_genre_movies_win()
    player = Player("Alice")

    win_condition.update_player_progress(player, COMEDY)
    assert player.progress == 0
    win_condition.update_player_progress(player, NOLAN_MOVIE)
    assert player.progress == 0
    win_condition.update_player_progress(player, HORROR_MOVIE)
    assert player.progress == 1


def test_director_progress_only_counts_target_director() -> None:
    win_condition = two_director_movies_win()
    player = Player("Alice")

    win_condition.update_player_progress(player, HORROR_MOVIE)
    assert player.progress == 0
    win_condition.update_player_progress(player, NOLAN_MOVIE)
    assert player.progress == 1


def test_updating_twice_counts_twice() -> None:
    """Callers must update exactly once per turn: the rule itself does not remember movies."""
    win_condition = two_genre_movies_win()
    player = Player("Alice")
    win_condition.update_player_progress(player, HORROR_MOVIE)
    win_condition.update_player_progress(player, HORROR_MOVIE)
    assert player.progress == 2
    assert win_condition.check_victory(player)


def test_custom_target_and_threshold() -> None:
    win_condition = WinCondition(WinConditionKind.TWO_GENRE_MOVIES, "Comedy", required_count=3)
    player = Player("Alice")
    for _ in range(2):
        win_condition.update_player_progress(player, COMEDY)
    assert not win_condition.check_victory(player)
    assert win_condition.player_progress(player) == "2/3"
    win_condition.update_player_progress(player, COMEDY)
    assert win_condition.check_victory(player)


@pytest.mark.parametrize("required_count", [0, -1])
def test_required_count_must_be_positive(required_count: int) -> None:
    with pytest.raises(InvalidInputError):
        WinCondition(WinConditionKind.TWO_GENRE_MOVIES, "Horror", required_count)


def test_target_cannot_be_empty() -> None:
    with pytest.raises(InvalidInputError):
        WinCondition(WinConditionKind.TWO_DIRECTOR_MOVIES, "")


def test_descriptions() -> None:
    assert two_genre_movies_win().description == "Win by guessing 2 horror movies!"
    assert (
        two_director_movies_win().description
        == "Win by guessing 2 movies directed by Christopher Nolan!"
    )


def test_win_condition_from_kind() -> None:
    assert win_condition_from_kind(WinConditionKind.TWO_GENRE_MOVIES) == two_genre_movies_win()
    assert win_condition_from_kind(
        WinConditionKind.TWO_DIRECTOR_MOVIES, "Greta Gerwig"
    ) == WinCondition(WinConditionKind.TWO_DIRECTOR_MOVIES, "Greta Gerwig")


def test_default_menu_offers_both_variants() -> None:
    assert [condition.kind for condition in DEFAULT_WIN_CONDITIONS] == [
        WinConditionKind.TWO_GENRE_MOVIES,
        WinConditionKind.TWO_DIRECTOR_MOVIES,
    ]
