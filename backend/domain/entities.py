from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel


class MediaType(str, Enum):
    MOVIE = "movie"
    SHOW = "tv"


class Rating(str, Enum):
    UP = "up"
    DOWN = "down"
    MEH = "meh"


class HistorySource(str, Enum):
    TRAKT = "trakt"
    MANUAL = "manual"


@dataclass(frozen=True)
class WatchEntry:
    media_id: int
    media_type: MediaType
    notes: Optional[str] = None
    rating: Optional[Rating] = None


@dataclass(frozen=True)
class YearGroup:
    year: int
    entries: Tuple[WatchEntry, ...] = ()


# Descending by year, one group per year.
History = List[YearGroup]


@dataclass(frozen=True)
class TimestampedEntry:
    """A watch entry paired with the moment it was watched, used only for year bucketing."""

    entry: WatchEntry
    watched_at: datetime


@dataclass(frozen=True)
class TraktConfig:
    client_id: str = ""
    access_token: str = field(default="", repr=False)

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.access_token)


@dataclass(frozen=True)
class ResolvedHistory:
    history: History
    source: HistorySource


class CatalogMovie(BaseModel):
    id: int
    title: str
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: float = 0.0
    overview: Optional[str] = None


class CatalogShow(BaseModel):
    id: int
    name: str
    poster_path: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: float = 0.0
    overview: Optional[str] = None
    number_of_seasons: int = 0
    number_of_episodes: int = 0
