"""
SympTrack — Assistant Routes

Допоміжні endpoints поверх зовнішніх сервісів:
- Чат з генеративною моделлю
- Пошук лікарень поруч
- Інструкція до препарату
"""

import logging
from typing import Any, Dict

import requests
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_state, AppState
from ..models import (
    ChatRequest,
    ChatResponse,
    DoctorLocatorRequest,
    DoctorLocatorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Assistant"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    state: AppState = Depends(get_state)
) -> ChatResponse:
    if not request.message:
        return ChatResponse(response="Please enter a message.")
    if state.ai is None:
        return ChatResponse(response="AI unavailable.")

    try:
        reply = (await state.ai.chat(request.message) or "").strip()
    except Exception as e:
        logger.warning("Chat failed: %s", e)
        return ChatResponse(response="AI error.")

    return ChatResponse(response=reply or "AI returned no response.")


@router.post("/doctor_locator", response_model=DoctorLocatorResponse)
def doctor_locator(
    request: DoctorLocatorRequest,
    state: AppState = Depends(get_state)
) -> DoctorLocatorResponse:
    """Лікарні в радіусі 5 км (або заглушка, якщо координат/ключа немає)"""
    hospitals = state.locator.nearby(request.latitude, request.longitude, request.city)
    return DoctorLocatorResponse(hospitals=hospitals)


@router.get("/medicine_info")
def medicine_info(
    drug_name: str = Query(default=""),
    state: AppState = Depends(get_state)
) -> Dict[str, Any]:
    if not drug_name:
        raise HTTPException(status_code=400, detail="drug_name required")

    try:
        info = state.drugs.lookup(drug_name)
    except (requests.RequestException, ValueError) as e:
        logger.warning("Medicine lookup failed: %s", e)
        return {"error": "Could not fetch medicine info"}

    if info is None:
        return {"info": None}
    return {"drug_info": info}
