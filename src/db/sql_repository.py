"""Implementation of MovieStore using SQLAlchemy"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.core.models import MovieModel
from src.db.schema import DBMovie


def title_key(title: str) -> str:
    """Case and whitespace insensitive key of a title."""
    return " ".join(title.split()).lower()


class SQLMovieStore:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_movie(self, title: str) -> MovieModel | None:
        """Get movie by title, if record exists. Several years with that title? The most recent one wins."""
        query = (
            select(DBMovie)
            .where(DBMovie.title_key == title_key(title))
            .order_by(DBMovie.year.desc())
        )
        movie_db = self.db.scalars(query).first()
        if movie_db:
            return self._to_model(movie_db)
        return None

    def add_movie(self, movie: MovieModel) -> MovieModel:
        """Store a new movie, or overwrite the credits of an existing record with same title and year."""
        movie_db = self._fetch_movie(title_key(movie.title), movie.year)
        if movie_db is None:
            movie_db = DBMovie(title_key=title_key(movie.title), year=movie.year)
            self.db.add(movie_db)
        movie_db.movie_id = movie.movie_id
        movie_db.title = movie.title
        movie_db.genres = list(movie.genres)
        movie_db.actors = list(movie.actors)
        movie_db.directors = list(movie.directors)
        movie_db.writers = list(movie.writers)
        movie_db.composers = list(movie.composers)
        movie_db.cinematographers = list(movie.cinematographers)
        self.db.commit()
        self.db.refresh(movie_db)
        return self._to_model(movie_db)

    def list_movies(self) -> list[MovieModel]:
        query = select(DBMovie).order_by(DBMovie.id)
        return [self._to_model(movie_db) for movie_db in self.db.scalars(query)]

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(DBMovie)) or 0

    def _fetch_movie(self, key: str, year: int) -> DBMovie | None:
        query = select(DBMovie).where(DBMovie.title_key == key, DBMovie.year == year)
        return self.db.scalar(query)

    def _to_model(self, movie_db: DBMovie) -> MovieModel:
        """Convert SQLAlchemy model to data transfer model."""
        return MovieModel(
            movie_id=movie_db.movie_id,
            title=movie_db.title,
            year=movie_db.year,
            genres=list(movie_db.genres),
            actors=list(movie_db.actors),
            directors=list(movie_db.directors),
            writers=list(movie_db.writers),
            composers=list(movie_db.composers),
            cinematographers=list(movie_db.cinematographers),
        )
