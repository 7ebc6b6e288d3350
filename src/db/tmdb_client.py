"""
Thin client for the TMDB API (https://developer.themoviedb.org/reference).

Only the boundary matters to the game: a movie with its credits, or nothing.
Network errors, unexpected payloads and a missing API key are all reported as "nothing" (and logged).
"""

from typing import Any, Optional

import requests
from loguru import logger

from src.core.config import DEFAULT_TMDB_BASE_URL
from src.core.models import MovieModel

REQUEST_TIMEOUT = 10  # seconds
# Only the top-billed part of the cast counts as a connection
MAX_CAST = 15

# TMDB crew job -> attribute of MovieModel
CREW_JOBS: dict[str, str] = {
    "Director": "directors",
    "Screenplay": "writers",
    "Writer": "writers",
    "Original Music Composer": "composers",
    "Music": "composers",
    "Director of Photography": "cinematographers",
}


class TMDBClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_TMDB_BASE_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def fetch_movie_by_title(self, title: str) -> MovieModel | None:
        """Best search hit for the title, with full credits."""
        payload = self._get("/search/movie", query=title, include_adult="false")
        results = payload.get("results") if payload else None
        if not results:
            logger.debug(f"[TMDB] No search results for {title!r}")
            return None
        return self.fetch_movie(results[0]["id"])

    def fetch_movie(self, tmdb_id: int) -> MovieModel | None:
        payload = self._get(f"/movie/{tmdb_id}", append_to_response="credits")
        if not payload:
            return None
        return parse_movie(payload)

    def fetch_popular_movies(self, max_pages: int) -> list[MovieModel]:
        """Credits are only in the detail endpoint, so this costs one request per movie (plus one per page)."""
        movies: list[MovieModel] = []
        for page in range(1, max_pages + 1):
            payload = self._get("/movie/popular", page=page)
            if not payload:
                break
            for result in payload.get("results", []):
                movie = self.fetch_movie(result["id"])
                if movie is not None:
                    movies.append(movie)
            if page >= payload.get("total_pages", max_pages):
                break
        logger.info(f"[TMDB] Fetched {len(movies)} popular movies")
        return movies

    def _get(self, path: str, **params: Any) -> dict[str, Any] | None:
        if not self.enabled:
            logger.warning("[TMDB] No API key configured, remote lookups are disabled")
            return None
        try:
            response = self.session.get(
                f"{self.base_url}{path}",
                params={"api_key": self.api_key, **params},
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"[TMDB] Request to {path} failed: {e}")
            return None


def parse_movie(payload: dict[str, Any]) -> MovieModel | None:
    """Movie details (with appended credits) -> MovieModel. Movies without a release date cannot be played."""
    release_date = payload.get("release_date") or ""
    if not payload.get("title") or not release_date[:4].isdigit():
        return None

    credits = payload.get("credits", {})
    cast = sorted(credits.get("cast", []), key=lambda member: member.get("order", 0))
    model = MovieModel(
        movie_id=payload.get("id", 0),
        title=payload["title"],
        year=int(release_date[:4]),
        genres=[genre["name"] for genre in payload.get("genres", [])],
        actors=[member["name"] for member in cast[:MAX_CAST]],
    )
    for member in credits.get("crew", []):
        attribute = CREW_JOBS.get(member.get("job", ""))
        if attribute is None:
            continue
        names: list[str] = getattr(model, attribute)
        if member["name"] not in names:
            names.append(member["name"])
    return model
