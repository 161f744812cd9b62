import structlog
from injector import Injector, singleton
from structlog.stdlib import BoundLogger

from core.settings import Settings, settings
from domain.entities import TraktConfig
from domain.interfaces import IHistoryResolver, IMovieApiService, IWatchTrackingService
from services.history_resolver import HistoryResolver
from services.tmdb_service import TMDBApiService
from services.trakt_service import TraktApiService


def create_injector(app_settings: Settings = settings) -> Injector:
    injector = Injector()
    injector.binder.bind(Settings, to=app_settings, scope=singleton)
    injector.binder.bind(TraktConfig, to=app_settings.trakt_config(), scope=singleton)
    injector.binder.bind(IMovieApiService, to=TMDBApiService, scope=singleton)
    injector.binder.bind(IWatchTrackingService, to=TraktApiService, scope=singleton)
    injector.binder.bind(IHistoryResolver, to=HistoryResolver, scope=singleton)
    injector.binder.bind(
        BoundLogger, to=structlog.get_logger("watchlog"), scope=singleton
    )
    return injector
