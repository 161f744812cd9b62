import asyncio
from typing import List, Optional, Type, TypeVar

import httpx
import orjson
from injector import NoInject, inject
from pydantic import BaseModel, ValidationError
from structlog.stdlib import BoundLogger

from core.settings import Settings
from domain.entities import CatalogMovie, CatalogShow
from domain.interfaces import IMovieApiService

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

T = TypeVar("T", bound=BaseModel)


def get_poster_url(poster_path: Optional[str]) -> Optional[str]:
    if not poster_path:
        return None
    return f"{TMDB_IMAGE_BASE_URL}{poster_path}"


def get_year(date_string: Optional[str]) -> str:
    """Year part of a YYYY-MM-DD date, or "N/A"."""
    if not date_string:
        return "N/A"
    return date_string.split("-")[0] or "N/A"


def format_rating(rating: float) -> str:
    return f"{rating:.1f}"


class TMDBApiService(IMovieApiService):
    @inject
    def __init__(
        self,
        settings: Settings,
        logger: BoundLogger,
        transport: NoInject[Optional[httpx.AsyncBaseTransport]] = None,
    ):
        self.api_key = settings.tmdb_api_key
        self.base_url = TMDB_BASE_URL
        self.logger = logger
        self.transport = transport

    async def _fetch_details(self, kind: str, media_id: int, model: Type[T]) -> Optional[T]:
        if not self.api_key:
            self.logger.error("TMDB_API_KEY is not set in environment variables")
            return None

        url = f"{self.base_url}/{kind}/{media_id}"
        try:
            async with httpx.AsyncClient(timeout=10.0, transport=self.transport) as client:
                response = await client.get(url, params={"api_key": self.api_key})
                response.raise_for_status()
                return model.model_validate(orjson.loads(response.content))
        except httpx.HTTPStatusError as e:
            self.logger.error(
                "Failed to fetch from TMDB",
                kind=kind,
                media_id=media_id,
                status_code=e.response.status_code,
                reason=e.response.reason_phrase,
            )
            return None
        except (httpx.HTTPError, orjson.JSONDecodeError, ValidationError) as e:
            self.logger.error("Error fetching from TMDB", kind=kind, media_id=media_id, error=str(e))
            return None

    async def fetch_movie(self, movie_id: int) -> Optional[CatalogMovie]:
        return await self._fetch_details("movie", movie_id, CatalogMovie)

    async def fetch_tv_show(self, show_id: int) -> Optional[CatalogShow]:
        return await self._fetch_details("tv", show_id, CatalogShow)

    async def get_movies(self, movie_ids: List[int]) -> List[CatalogMovie]:
        movies = await asyncio.gather(*(self.fetch_movie(movie_id) for movie_id in movie_ids))
        found = [m for m in movies if m is not None]
        self.logger.info("Fetched TMDB movies", requested=len(movie_ids), found=len(found))
        return found

    async def get_tv_shows(self, show_ids: List[int]) -> List[CatalogShow]:
        shows = await asyncio.gather(*(self.fetch_tv_show(show_id) for show_id in show_ids))
        found = [s for s in shows if s is not None]
        self.logger.info("Fetched TMDB shows", requested=len(show_ids), found=len(found))
        return found
