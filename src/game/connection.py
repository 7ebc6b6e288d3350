"""A shared-credit link between two movies, and the rule to derive such links from two credit sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.core.shared_types import ConnectionType

if TYPE_CHECKING:
    from src.game.movie import Movie


@dataclass(frozen=True)
class Connection:
    person_name: str
    type: ConnectionType

    def __str__(self) -> str:
        return f"{self.person_name} ({self.type.name})"


def find_connections(movie_a: Movie, movie_b: Movie) -> list[Connection]:
    """
    All people credited in the same role on both movies.
    ----

    Connections are grouped per role, in the order the roles are listed in ConnectionType.
    The order of names within one role is not defined (credits are sets).
    No shared credit? Then the list is simply empty.
    """
    connections: list[Connection] = []
    for connection_type in ConnectionType:
        shared_names = movie_a.credits(connection_type) & movie_b.credits(connection_type)
        connections.extend(Connection(name, connection_type) for name in shared_names)
    return connections
