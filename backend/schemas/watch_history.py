from typing import List, Optional

from pydantic import BaseModel

from domain.entities import HistorySource, MediaType, Rating


class WatchEntryView(BaseModel):
    tmdb_id: int
    type: MediaType
    notes: Optional[str] = None
    rating: Optional[Rating] = None
    title: Optional[str] = None
    poster_url: Optional[str] = None
    release_year: Optional[str] = None
    vote_average: Optional[str] = None
    overview: Optional[str] = None


class YearGroupView(BaseModel):
    year: int
    entries: List[WatchEntryView]


class WatchHistoryResponse(BaseModel):
    source: HistorySource
    years: List[YearGroupView]
