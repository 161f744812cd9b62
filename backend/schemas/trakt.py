from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import AliasChoices, AfterValidator, BaseModel, Field


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class TraktIds(BaseModel):
    trakt: Optional[int] = None
    slug: Optional[str] = None
    imdb: Optional[str] = None
    tmdb: Optional[int] = None


class TraktMedia(BaseModel):
    title: str
    year: Optional[int] = None
    ids: TraktIds


class TraktMovieItem(BaseModel):
    movie: TraktMedia
    # /sync/watched returns last_watched_at, /sync/history returns watched_at
    watched_at: Optional[UtcDatetime] = Field(
        default=None, validation_alias=AliasChoices("watched_at", "last_watched_at")
    )
    rating: Optional[float] = None


class TraktEpisode(BaseModel):
    number: int
    watched_at: Optional[UtcDatetime] = Field(
        default=None, validation_alias=AliasChoices("watched_at", "last_watched_at")
    )
    rating: Optional[float] = None


class TraktSeason(BaseModel):
    number: int
    episodes: List[TraktEpisode] = []


class TraktShowItem(BaseModel):
    show: TraktMedia
    seasons: List[TraktSeason] = []
