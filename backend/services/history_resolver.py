import asyncio
from dataclasses import dataclass, field
from datetime import timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional

from injector import NoInject, inject
from structlog.stdlib import BoundLogger

from data.watch_history import WATCH_HISTORY
from domain.entities import (
    History,
    HistorySource,
    ResolvedHistory,
    TimestampedEntry,
    TraktConfig,
    YearGroup,
)
from domain.interfaces import IHistoryResolver, IWatchTrackingService


class RemoteStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass(frozen=True)
class RemoteHistoryResult:
    status: RemoteStatus
    history: History = field(default_factory=list)
    error: Optional[str] = None


def group_by_year(entries: Iterable[TimestampedEntry]) -> History:
    """
    Bucket timestamped entries by the UTC calendar year they were watched in.

    Years are returned most recent first and, within a year, entries are
    ordered most recently watched first. Timestamps are dropped.
    """
    by_year: Dict[int, List[TimestampedEntry]] = {}
    for item in entries:
        year = item.watched_at.astimezone(timezone.utc).year
        by_year.setdefault(year, []).append(item)

    return [
        YearGroup(
            year=year,
            entries=tuple(
                item.entry
                for item in sorted(by_year[year], key=lambda i: i.watched_at, reverse=True)
            ),
        )
        for year in sorted(by_year, reverse=True)
    ]


class HistoryResolver(IHistoryResolver):
    @inject
    def __init__(
        self,
        tracker: IWatchTrackingService,
        config: TraktConfig,
        logger: BoundLogger,
        manual_history: NoInject[Optional[History]] = None,
    ):
        self.tracker = tracker
        self.config = config
        self.logger = logger
        self.manual_history: History = WATCH_HISTORY if manual_history is None else manual_history

    async def fetch_remote_history(self) -> RemoteHistoryResult:
        """Fetch movies and shows concurrently and group them by year. Never raises."""
        try:
            results = await asyncio.gather(
                self.tracker.fetch_watched_movies(),
                self.tracker.fetch_watched_shows(),
                return_exceptions=True,
            )
            entries: List[TimestampedEntry] = []
            errors = []
            for branch, result in zip(("movies", "shows"), results):
                if isinstance(result, Exception):
                    self.logger.error("Trakt fetch failed", branch=branch, error=str(result))
                    errors.append(f"{branch}: {result}")
                    continue
                if isinstance(result, BaseException):
                    raise result
                entries.extend(result)

            if len(errors) == len(results):
                return RemoteHistoryResult(RemoteStatus.FAILURE, error="; ".join(errors))

            history = group_by_year(entries)
        except Exception as e:
            self.logger.exception("Unexpected error building Trakt history")
            return RemoteHistoryResult(RemoteStatus.FAILURE, error=str(e))

        if not history:
            return RemoteHistoryResult(RemoteStatus.EMPTY)
        return RemoteHistoryResult(RemoteStatus.SUCCESS, history=history)

    async def resolve_with_source(self) -> ResolvedHistory:
        if not self.config.is_configured:
            self.logger.info("Trakt not configured, using manual watch history")
            return ResolvedHistory(history=self.manual_history, source=HistorySource.MANUAL)

        self.logger.info("Loading watch history from Trakt")
        result = await self.fetch_remote_history()

        if result.status is RemoteStatus.SUCCESS:
            self.logger.info("Loaded watch history from Trakt", years=len(result.history))
            return ResolvedHistory(history=result.history, source=HistorySource.TRAKT)

        if result.status is RemoteStatus.EMPTY:
            self.logger.info("Trakt returned no data, falling back to manual data")
        else:
            self.logger.error("Error loading from Trakt, falling back to manual data", error=result.error)
        return ResolvedHistory(history=self.manual_history, source=HistorySource.MANUAL)

    async def resolve(self) -> History:
        resolved = await self.resolve_with_source()
        return resolved.history
