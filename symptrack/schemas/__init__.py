"""
SympTrack — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- user.py: HistoryRecord, UserProfile, UserStats, CheckinSummary
- diagnosis.py: EnvironmentalFactors, MatchResult

Приклад використання:
    from symptrack.schemas import UserProfile, HistoryRecord

    profile = UserProfile(user_id="u1", city="Delhi")
    profile.history.append(HistoryRecord(symptoms=["fever"]))

    json_data = profile.model_dump_json()
    profile_loaded = UserProfile.model_validate_json(json_data)
"""

from .user import (
    HistoryRecord,
    UserProfile,
    UserStats,
    CheckinSummary,
)

from .diagnosis import (
    EnvironmentalFactors,
    MatchResult,
)


__all__ = [
    "HistoryRecord",
    "UserProfile",
    "UserStats",
    "CheckinSummary",
    "EnvironmentalFactors",
    "MatchResult",
]
