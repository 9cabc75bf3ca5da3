"""
SympTrack — Історія користувача

Компоненти:
- ProlongedSymptomDetector: Виявлення симптомів, що тримаються N подань поспіль
- UserStore: Інтерфейс сховища профілів (get/put за user_id)
- InMemoryUserStore, JsonFileUserStore: Реалізації сховища
"""

from .prolonged import ProlongedSymptomDetector
from .store import UserStore, InMemoryUserStore, JsonFileUserStore


__all__ = [
    "ProlongedSymptomDetector",
    "UserStore",
    "InMemoryUserStore",
    "JsonFileUserStore",
]
