"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.game.movie import Movie

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


# --- MOVIES ---
# A small, made up, but recognisable set of movies. Only the credits that matter for the tests are filled in.
@pytest.fixture
def godfather() -> Movie:
    return Movie(
        title="The Godfather",
        year=1972,
        movie_id=238,
        genres={"Crime", "Drama"},
        actors={"Al Pacino", "Marlon Brando", "Diane Keaton"},
        directors={"Francis Ford Coppola"},
        writers={"Mario Puzo", "Francis Ford Coppola"},
        composers={"Nino Rota"},
        cinematographers={"Gordon Willis"},
    )


@pytest.fixture
def heat() -> Movie:
    return Movie(
        title="Heat",
        year=1995,
        movie_id=949,
        genres={"Crime", "Thriller"},
        actors={"Al Pacino", "Robert De Niro", "Val Kilmer"},
        directors={"Michael Mann"},
        writers={"Michael Mann"},
        composers={"Elliot Goldenthal"},
        cinematographers={"Dante Spinotti"},
    )


@pytest.fixture
def godfather_part_two() -> Movie:
    return Movie(
        title="The Godfather Part II",
        year=1974,
        movie_id=240,
        genres={"Crime", "Drama"},
        actors={"Al Pacino", "Robert De Niro", "Diane Keaton"},
        directors={"Francis Ford Coppola"},
        writers={"Mario Puzo", "Francis Ford Coppola"},
        composers={"Nino Rota", "Carmine Coppola"},
        cinematographers={"Gordon Willis"},
    )
