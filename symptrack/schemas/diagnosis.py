"""
SympTrack — Схеми результатів підбору захворювань
"""

from typing import Optional
from pydantic import BaseModel, Field


class EnvironmentalFactors(BaseModel):
    """Фактори середовища для міста"""
    aqi: float = Field(default=100, ge=0, description="Індекс якості повітря")
    water_quality: str = Field(default="good", description="Категорія якості води")


class MatchResult(BaseModel):
    """
    Результат співставлення захворювання.

    Не зберігається — будується на кожен запит.
    """
    name: str
    severity: str = "unknown"
    match_score: int = Field(..., ge=1)
    requires_doctor: bool = False
    verified_info_url: str
    advice: Optional[str] = None
    prevention: Optional[str] = None
