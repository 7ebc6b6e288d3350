"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_FIRST_TURN = "waiting for first turn"
    IN_PROGRESS = "in progress"
    CONCLUDED = "concluded"


# NOTE: the order of the members is also the order in which connections are reported.
class ConnectionType(StrEnum):
    ACTOR = "actor"
    DIRECTOR = "director"
    WRITER = "writer"
    COMPOSER = "composer"
    CINEMATOGRAPHER = "cinematographer"


class WinConditionKind(StrEnum):
    TWO_GENRE_MOVIES = "two genre movies"
    TWO_DIRECTOR_MOVIES = "two director movies"
