"""
SympTrack — Винятки

Ієрархія помилок ядра. AIExtractionError ніколи не виходить за межі
нормалізатора: стратегія AI перехоплює її і передає керування fallback.
"""


class SympTrackError(Exception):
    """Базова помилка SympTrack"""


class CatalogError(SympTrackError):
    """Каталог захворювань неможливо прочитати або він має невірну структуру"""


class AIExtractionError(SympTrackError):
    """Збій виклику генеративної моделі (транспорт, HTTP, порожня відповідь)"""


class UnknownUserError(SympTrackError):
    """Користувача немає у сховищі"""

    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id
