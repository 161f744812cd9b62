from typing import Callable, List
from unittest.mock import AsyncMock, MagicMock

import httpx
import orjson
import pytest
from structlog.stdlib import BoundLogger

from core.settings import Settings
from domain.entities import (
    CatalogMovie,
    CatalogShow,
    MediaType,
    Rating,
    TraktConfig,
    WatchEntry,
    YearGroup,
)
from domain.interfaces import IMovieApiService, IWatchTrackingService
from services.history_resolver import HistoryResolver


def _json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=orjson.dumps(payload),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build a JSON httpx response for MockTransport handlers."""
    return _json_response


@pytest.fixture
def mock_logger() -> BoundLogger:
    """Create a mock logger for testing."""
    logger = MagicMock(spec=BoundLogger)
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger


@pytest.fixture
def trakt_config() -> TraktConfig:
    return TraktConfig(client_id="client-id", access_token="access-token")


@pytest.fixture
def unconfigured_trakt() -> TraktConfig:
    return TraktConfig()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        TMDB_API_KEY="tmdb-key",
        TRAKT_CLIENT_ID="client-id",
        TRAKT_ACCESS_TOKEN="access-token",
    )


@pytest.fixture
def manual_history() -> List[YearGroup]:
    """A small hand-written history standing in for the curated log."""
    return [
        YearGroup(
            year=2025,
            entries=(
                WatchEntry(864, MediaType.MOVIE, "Cool Runnings"),
                WatchEntry(95396, MediaType.SHOW, "Severance S2E1"),
                WatchEntry(864, MediaType.MOVIE, "Cool Runnings (rewatch)", Rating.UP),
            ),
        ),
        YearGroup(
            year=2024,
            entries=(WatchEntry(1438, MediaType.SHOW, "The Wire S1E9-11"),),
        ),
    ]


@pytest.fixture
def mock_tracker() -> IWatchTrackingService:
    """Create a mock watch-tracking service returning nothing."""
    tracker = AsyncMock(spec=IWatchTrackingService)
    tracker.fetch_watched_movies = AsyncMock(return_value=[])
    tracker.fetch_watched_shows = AsyncMock(return_value=[])
    return tracker


@pytest.fixture
def mock_tmdb_service() -> IMovieApiService:
    """Create a mock TMDB service that knows one movie and one show."""
    service = AsyncMock(spec=IMovieApiService)
    service.get_movies = AsyncMock(
        return_value=[
            CatalogMovie(
                id=864,
                title="Cool Runnings",
                poster_path="/cool.jpg",
                release_date="1993-10-01",
                vote_average=7.24,
                overview="Jamaican bobsled team.",
            )
        ]
    )
    service.get_tv_shows = AsyncMock(
        return_value=[
            CatalogShow(
                id=95396,
                name="Severance",
                poster_path="/sev.jpg",
                first_air_date="2022-02-17",
                vote_average=8.4,
                overview="Work-life balance, surgically.",
                number_of_seasons=2,
                number_of_episodes=19,
            )
        ]
    )
    return service


@pytest.fixture
def make_resolver(
    mock_tracker, mock_logger, manual_history
) -> Callable[[TraktConfig], HistoryResolver]:
    def _make(config: TraktConfig) -> HistoryResolver:
        return HistoryResolver(
            tracker=mock_tracker,
            config=config,
            logger=mock_logger,
            manual_history=manual_history,
        )

    return _make
