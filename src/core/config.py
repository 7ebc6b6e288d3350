"""Environment-level configuration.

Isolates things that depend on the deployment environment (API key, file locations, limits)
from the game logic. Every value can be overridden with an environment variable.
"""

import os
from dataclasses import dataclass

DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"


@dataclass
class Settings:
    """Environment / deployment settings."""

    tmdb_api_key: str | None = None
    tmdb_base_url: str = DEFAULT_TMDB_BASE_URL
    movie_cache_path: str = "movie_cache.json"
    database_url: str = "sqlite:///movie_game.db"
    suggestion_limit: int = 5
    turn_time_limit: int = 60
    preload_pages: int = 25
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            tmdb_api_key=os.getenv("TMDB_API_KEY"),
            tmdb_base_url=os.getenv("TMDB_BASE_URL", DEFAULT_TMDB_BASE_URL),
            movie_cache_path=os.getenv("MOVIE_CACHE_PATH", "movie_cache.json"),
            database_url=os.getenv("DATABASE_URL", "sqlite:///movie_game.db"),
            suggestion_limit=int(os.getenv("SUGGESTION_LIMIT", "5")),
            turn_time_limit=int(os.getenv("TURN_TIME_LIMIT", "60")),
            preload_pages=int(os.getenv("PRELOAD_PAGES", "25")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def get_settings() -> Settings:
    """Convenience accessor for environment settings."""
    return Settings.from_env()
