"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import JSON, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBMovie(Base):
    __tablename__ = "movies"
    __table_args__ = (UniqueConstraint("title_key", "year"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    movie_id: Mapped[int]
    title: Mapped[str]
    title_key: Mapped[str] = mapped_column(index=True)  # lower-cased title, used for lookups
    year: Mapped[int]
    genres: Mapped[list[str]] = mapped_column(JSON, default=list)
    actors: Mapped[list[str]] = mapped_column(JSON, default=list)
    directors: Mapped[list[str]] = mapped_column(JSON, default=list)
    writers: Mapped[list[str]] = mapped_column(JSON, default=list)
    composers: Mapped[list[str]] = mapped_column(JSON, default=list)
    cinematographers: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
