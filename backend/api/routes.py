from fastapi import APIRouter, Depends, HTTPException

from core.service_factories import get_watch_history_manager
from managers.watch_history_manager import WatchHistoryManager
from schemas.watch_history import WatchHistoryResponse, YearGroupView

router = APIRouter()


@router.get("/watch-history", response_model=WatchHistoryResponse)
async def get_watch_history(
    manager: WatchHistoryManager = Depends(get_watch_history_manager),
):
    return await manager.get_watch_history()


@router.get("/watch-history/{year}", response_model=YearGroupView)
async def get_watch_history_year(
    year: int,
    manager: WatchHistoryManager = Depends(get_watch_history_manager),
):
    group = await manager.get_year(year)
    if group is None:
        raise HTTPException(status_code=404, detail=f"No watch history for {year}")
    return group
