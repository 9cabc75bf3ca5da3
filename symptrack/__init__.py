"""
SympTrack — Трекер симптомів та підбір захворювань

Архітектура: нормалізація симптомів (AI + fuzzy fallback) + зважений скоринг

Модулі:
- config: Конфігурація системи
- catalog: Каталог захворювань та словник симптомів
- nlp: Нормалізація вільного тексту до словника
- scoring: Скоринг захворювань та фактори середовища
- history: Історія користувача, детектор тривалих симптомів
- schemas: Pydantic моделі
- integrations: Зовнішні довідкові сервіси
- api: Backend API
"""

__version__ = "0.1.0"

from .config import SympTrackConfig, get_default_config
