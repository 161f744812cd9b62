import asyncio
from typing import Dict, List, Optional

from structlog.stdlib import BoundLogger

from domain.entities import CatalogMovie, CatalogShow, History, MediaType, WatchEntry, YearGroup
from domain.interfaces import IHistoryResolver, IMovieApiService
from schemas.watch_history import WatchEntryView, WatchHistoryResponse, YearGroupView
from services.tmdb_service import format_rating, get_poster_url, get_year
from utils.history import (
    get_all_years,
    get_entries_by_year,
    get_movie_ids_by_year,
    get_tv_show_ids_by_year,
)


class WatchHistoryManager:
    def __init__(
        self,
        resolver: IHistoryResolver,
        tmdb: IMovieApiService,
        logger: BoundLogger,
    ):
        self.resolver = resolver
        self.tmdb = tmdb
        self.logger = logger

    async def get_watch_history(self) -> WatchHistoryResponse:
        """Resolve the watch history and attach TMDB metadata to every entry."""
        resolved = await self.resolver.resolve_with_source()
        self.logger.info(
            "Watch history resolved",
            source=resolved.source.value,
            years=len(resolved.history),
        )
        years = await self._enrich(resolved.history)
        return WatchHistoryResponse(source=resolved.source, years=years)

    async def get_year(self, year: int) -> Optional[YearGroupView]:
        """Enrich a single year; only ids watched in that year are looked up."""
        resolved = await self.resolver.resolve_with_source()
        history = resolved.history
        if year not in get_all_years(history):
            self.logger.info("Year not in watch history", year=year)
            return None
        group = YearGroup(year=year, entries=tuple(get_entries_by_year(history, year)))
        years = await self._enrich([group])
        return years[0]

    async def _enrich(self, history: History) -> List[YearGroupView]:
        # Only entries with notes are displayed, so only their ids are looked up
        movie_ids: Dict[int, None] = {}
        show_ids: Dict[int, None] = {}
        for year in get_all_years(history):
            movie_ids.update(dict.fromkeys(get_movie_ids_by_year(history, year)))
            show_ids.update(dict.fromkeys(get_tv_show_ids_by_year(history, year)))

        movies, shows = await asyncio.gather(
            self.tmdb.get_movies(list(movie_ids)), self.tmdb.get_tv_shows(list(show_ids))
        )
        movies_by_id = {m.id: m for m in movies}
        shows_by_id = {s.id: s for s in shows}
        self.logger.info(
            "Watch history enriched",
            years=len(history),
            movies_found=len(movies_by_id),
            shows_found=len(shows_by_id),
            missing=len(movie_ids) + len(show_ids) - len(movies_by_id) - len(shows_by_id),
        )

        return [
            YearGroupView(
                year=group.year,
                entries=[self._to_view(e, movies_by_id, shows_by_id) for e in group.entries],
            )
            for group in history
        ]

    def _to_view(
        self,
        entry: WatchEntry,
        movies_by_id: Dict[int, CatalogMovie],
        shows_by_id: Dict[int, CatalogShow],
    ) -> WatchEntryView:
        view = WatchEntryView(
            tmdb_id=entry.media_id,
            type=entry.media_type,
            notes=entry.notes,
            rating=entry.rating,
        )
        if entry.media_type == MediaType.MOVIE:
            movie = movies_by_id.get(entry.media_id)
            if movie:
                view.title = movie.title
                view.release_year = get_year(movie.release_date)
                view.poster_url = get_poster_url(movie.poster_path)
                view.vote_average = format_rating(movie.vote_average)
                view.overview = movie.overview
        else:
            show = shows_by_id.get(entry.media_id)
            if show:
                view.title = show.name
                view.release_year = get_year(show.first_air_date)
                view.poster_url = get_poster_url(show.poster_path)
                view.vote_average = format_rating(show.vote_average)
                view.overview = show.overview
        return view
