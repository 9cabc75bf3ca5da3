"""
SympTrack — Health Routes
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..dependencies import get_state, AppState
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(state: AppState = Depends(get_state)) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає кількість захворювань у каталозі та чи доступна AI-нормалізація.
    """
    return HealthResponse(
        status="OK",
        time=datetime.now(timezone.utc).isoformat(),
        diseases=len(state.catalog_loader.load()),
        ai_enabled=state.tracker.normalizer.ai_enabled,
    )
