from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import orjson
from injector import NoInject, inject
from pydantic import TypeAdapter, ValidationError
from structlog.stdlib import BoundLogger

from domain.entities import MediaType, TimestampedEntry, TraktConfig, WatchEntry
from domain.exceptions import WatchTrackingError
from domain.interfaces import IWatchTrackingService
from schemas.trakt import TraktMovieItem, TraktShowItem
from utils.episode_range import format_episode_range
from utils.ratings import map_trakt_rating

TRAKT_BASE_URL = "https://api.trakt.tv"
TRAKT_API_VERSION = "2"

_movie_items = TypeAdapter(List[TraktMovieItem])
_show_items = TypeAdapter(List[TraktShowItem])


class TraktApiService(IWatchTrackingService):
    @inject
    def __init__(
        self,
        config: TraktConfig,
        logger: BoundLogger,
        transport: NoInject[Optional[httpx.AsyncBaseTransport]] = None,
    ):
        self.config = config
        self.logger = logger
        self.base_url = TRAKT_BASE_URL
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "trakt-api-version": TRAKT_API_VERSION,
            "trakt-api-key": self.config.client_id,
            "Authorization": f"Bearer {self.config.access_token}",
        }

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=10.0, transport=self.transport) as client:
                response = await client.get(url, headers=self._headers())
                response.raise_for_status()
                return orjson.loads(response.content)
        except httpx.HTTPStatusError as e:
            raise WatchTrackingError(
                path, f"{e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise WatchTrackingError(path, str(e) or type(e).__name__) from e
        except orjson.JSONDecodeError as e:
            raise WatchTrackingError(path, f"malformed JSON: {e}") from e

    async def fetch_watched_movies(self) -> List[TimestampedEntry]:
        if not self.config.is_configured:
            self.logger.info("Trakt credentials not configured, skipping movie fetch")
            return []

        path = "/sync/watched/movies"
        payload = await self._get_json(path)
        try:
            items = _movie_items.validate_python(payload)
        except ValidationError as e:
            raise WatchTrackingError(path, f"unexpected payload: {e.error_count()} errors") from e

        entries = []
        for item in items:
            tmdb_id = item.movie.ids.tmdb
            if tmdb_id is None or item.watched_at is None:
                self.logger.warning(
                    "Skipping Trakt movie without TMDB id or watch date",
                    title=item.movie.title,
                    tmdb_id=tmdb_id,
                )
                continue
            entry = WatchEntry(
                media_id=tmdb_id,
                media_type=MediaType.MOVIE,
                notes=item.movie.title,
                rating=map_trakt_rating(item.rating),
            )
            entries.append(TimestampedEntry(entry=entry, watched_at=item.watched_at))

        self.logger.info("Fetched Trakt movies", records=len(items), entries=len(entries))
        return entries

    async def fetch_watched_shows(self) -> List[TimestampedEntry]:
        if not self.config.is_configured:
            self.logger.info("Trakt credentials not configured, skipping TV show fetch")
            return []

        path = "/sync/watched/shows"
        payload = await self._get_json(path)
        try:
            items = _show_items.validate_python(payload)
        except ValidationError as e:
            raise WatchTrackingError(path, f"unexpected payload: {e.error_count()} errors") from e

        entries = []
        for item in items:
            tmdb_id = item.show.ids.tmdb
            if tmdb_id is None:
                self.logger.warning("Skipping Trakt show without TMDB id", title=item.show.title)
                continue
            for season in item.seasons:
                if not season.episodes:
                    continue
                episode_range = format_episode_range(ep.number for ep in season.episodes)
                watch_dates = [ep.watched_at for ep in season.episodes if ep.watched_at]
                entry = WatchEntry(
                    media_id=tmdb_id,
                    media_type=MediaType.SHOW,
                    notes=f"S{season.number}{episode_range}",
                    rating=map_trakt_rating(season.episodes[0].rating),
                )
                entries.append(
                    TimestampedEntry(
                        entry=entry,
                        watched_at=max(watch_dates) if watch_dates else datetime.now(timezone.utc),
                    )
                )

        self.logger.info("Fetched Trakt shows", records=len(items), entries=len(entries))
        return entries
