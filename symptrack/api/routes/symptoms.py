"""
SympTrack — Symptoms Routes

Endpoints для роботи з симптомами:
- Подання симптомів (нормалізація + запис в історію)
- Підбір захворювань
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ...schemas import MatchResult
from ...tracker import SymptomTracker
from ..dependencies import get_tracker
from ..models import (
    SubmitSymptomsRequest,
    SubmitSymptomsResponse,
    MatchDiseasesRequest,
)

router = APIRouter(tags=["Symptoms"])

MISSING_FIELDS = "user_id and symptoms required"


@router.post("/submit_symptoms", response_model=SubmitSymptomsResponse)
async def submit_symptoms(
    request: SubmitSymptomsRequest,
    tracker: SymptomTracker = Depends(get_tracker)
) -> SubmitSymptomsResponse:
    """
    Записати симптоми користувача.

    Кожен елемент списку нормалізується окремо, результати об'єднуються.
    За кожне подання нараховується 10 балів.

    Приклад:
    ```json
    {
        "user_id": "u1",
        "symptoms": "fever and dry cough",
        "city": "Delhi"
    }
    ```
    """
    if not request.user_id or not request.symptoms:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    result = await tracker.submit(
        request.user_id,
        request.symptoms,
        language=request.language,
        gender=request.gender,
        city=request.city,
    )

    return SubmitSymptomsResponse(normalized_symptoms=result.symptoms)


@router.post("/match_diseases", response_model=List[MatchResult])
async def match_diseases(
    request: MatchDiseasesRequest,
    tracker: SymptomTracker = Depends(get_tracker)
) -> List[MatchResult]:
    """
    Підібрати захворювання за симптомами.

    Враховує стать, мову та місто користувача (якщо профіль існує).
    Результат відсортовано за спаданням match_score.
    """
    if not request.user_id or not request.symptoms:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    return await tracker.match(request.user_id, request.symptoms)
