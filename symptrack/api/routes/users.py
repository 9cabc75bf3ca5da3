"""
SympTrack — Users Routes

Щоденна перевірка та статистика користувача.
"""

from fastapi import APIRouter, Depends, HTTPException

from ...exceptions import UnknownUserError
from ...schemas import CheckinSummary, UserStats
from ...tracker import SymptomTracker
from ..dependencies import get_tracker

router = APIRouter(tags=["Users"])


@router.get("/daily_checkin/{user_id}", response_model=CheckinSummary)
async def daily_checkin(
    user_id: str,
    tracker: SymptomTracker = Depends(get_tracker)
) -> CheckinSummary:
    """Останній запис історії та попередження про тривалі симптоми"""
    return tracker.checkin(user_id)


@router.get("/user_stats/{user_id}", response_model=UserStats)
async def user_stats(
    user_id: str,
    tracker: SymptomTracker = Depends(get_tracker)
) -> UserStats:
    try:
        return tracker.stats(user_id)
    except UnknownUserError:
        raise HTTPException(status_code=404, detail="User not found")
