"""
SympTrack — Схеми даних користувача

Pydantic моделі для:
- HistoryRecord: одне подання симптомів
- UserProfile: профіль з історією та балами
- UserStats: агрегована статистика
- CheckinSummary: щоденна перевірка стану
"""

import datetime as dt
from typing import List, Optional
from pydantic import BaseModel, Field


class HistoryRecord(BaseModel):
    """
    Запис історії: дата подання + нормалізовані симптоми.

    Приклад:
        record = HistoryRecord(date="2026-10-17", symptoms=["fever", "cough"])
    """
    date: str = Field(default_factory=lambda: dt.date.today().isoformat())
    symptoms: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "date": "2026-10-17",
                "symptoms": ["fever", "cough"]
            }
        }


class UserProfile(BaseModel):
    """
    Профіль користувача.

    Історія лише доповнюється, у порядку подання (дати можуть повторюватися).
    """
    user_id: str
    language: str = "en"
    gender: Optional[str] = "other"
    city: str = ""
    points: int = 0
    badges: List[str] = Field(default_factory=list)
    history: List[HistoryRecord] = Field(default_factory=list)

    @property
    def last_record(self) -> Optional[HistoryRecord]:
        return self.history[-1] if self.history else None

    @classmethod
    def anonymous(cls, user_id: str) -> "UserProfile":
        """Нейтральний профіль для невідомого користувача (без статі)"""
        return cls(user_id=user_id, gender=None)


class UserStats(BaseModel):
    """Статистика користувача"""
    points: int
    badges: List[str]
    history_length: int


class CheckinSummary(BaseModel):
    """Результат щоденної перевірки"""
    message: str
    last_symptoms: Optional[HistoryRecord] = None
    alerts: List[str] = Field(default_factory=list)
