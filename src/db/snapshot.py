"""
Snapshot of the preloaded movies on disk (indented JSON, one record per movie).

Fetching a few hundred movies with full credits takes a while. The first run writes them here,
every later run reads them back instead of calling the provider.
"""

from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from src.api.models import MovieRecord
from src.core.exceptions import RepositoryError
from src.core.models import MovieModel

_RECORDS = TypeAdapter(list[MovieRecord])


class MovieSnapshot:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> list[MovieModel]:
        """Read all records. A file that cannot be read or does not validate is an error, not an empty snapshot."""
        try:
            records = _RECORDS.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as e:
            raise RepositoryError(f"Cannot read movie snapshot {self.path}: {e}") from e
        logger.info(f"[Snapshot] Loaded {len(records)} movies from {self.path}")
        return [record.to_model() for record in records]

    def save(self, movies: list[MovieModel]) -> None:
        records = [MovieRecord.from_model(movie) for movie in movies]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_RECORDS.dump_json(records, indent=2))
        except OSError as e:
            raise RepositoryError(f"Cannot write movie snapshot {self.path}: {e}") from e
        logger.info(f"[Snapshot] Wrote {len(records)} movies to {self.path}")
