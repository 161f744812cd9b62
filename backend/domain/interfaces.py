from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import (
    CatalogMovie,
    CatalogShow,
    History,
    ResolvedHistory,
    TimestampedEntry,
)


class IWatchTrackingService(ABC):
    @abstractmethod
    async def fetch_watched_movies(self) -> List[TimestampedEntry]:
        pass

    @abstractmethod
    async def fetch_watched_shows(self) -> List[TimestampedEntry]:
        pass


class IMovieApiService(ABC):
    @abstractmethod
    async def fetch_movie(self, movie_id: int) -> Optional[CatalogMovie]:
        pass

    @abstractmethod
    async def fetch_tv_show(self, show_id: int) -> Optional[CatalogShow]:
        pass

    @abstractmethod
    async def get_movies(self, movie_ids: List[int]) -> List[CatalogMovie]:
        pass

    @abstractmethod
    async def get_tv_shows(self, show_ids: List[int]) -> List[CatalogShow]:
        pass


class IHistoryResolver(ABC):
    @abstractmethod
    async def resolve(self) -> History:
        pass

    @abstractmethod
    async def resolve_with_source(self) -> ResolvedHistory:
        pass
