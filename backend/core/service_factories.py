from fastapi_injector import Injected
from structlog.stdlib import BoundLogger

from domain.interfaces import IHistoryResolver, IMovieApiService
from managers.watch_history_manager import WatchHistoryManager


def get_watch_history_manager(
    resolver: IHistoryResolver = Injected(IHistoryResolver),
    tmdb: IMovieApiService = Injected(IMovieApiService),
    logger: BoundLogger = Injected(BoundLogger),
) -> WatchHistoryManager:
    return WatchHistoryManager(resolver=resolver, tmdb=tmdb, logger=logger)
