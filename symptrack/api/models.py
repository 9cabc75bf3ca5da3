"""
SympTrack — API Models

Pydantic моделі для запитів та відповідей API.
Обов'язковість user_id/symptoms перевіряється в роутах (400, а не 422).
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union


# ============================================================
# Symptom Models
# ============================================================

class SubmitSymptomsRequest(BaseModel):
    """Подання симптомів"""
    user_id: Optional[str] = None
    symptoms: Union[str, List[str], None] = None
    language: str = "en"
    gender: Optional[str] = "other"
    city: str = ""


class SubmitSymptomsResponse(BaseModel):
    message: str = "Symptoms recorded."
    normalized_symptoms: List[str]


class MatchDiseasesRequest(BaseModel):
    """Запит на підбір захворювань"""
    user_id: Optional[str] = None
    symptoms: Union[str, List[str], None] = None


# ============================================================
# Assistant Models
# ============================================================

class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    response: str


class DoctorLocatorRequest(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    city: Optional[str] = None


class DoctorLocatorResponse(BaseModel):
    hospitals: List[Dict[str, Any]]


# ============================================================
# Health Models
# ============================================================

class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "OK"
    time: str
    diseases: int
    ai_enabled: bool
