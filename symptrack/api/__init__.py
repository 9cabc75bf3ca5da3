"""
SympTrack — REST API модуль

FastAPI REST API для трекера симптомів.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Залежності та стан

Запуск:
    uvicorn symptrack.api.app:app --reload --port 5000

Endpoints:
    GET  /health                     - Health check
    POST /submit_symptoms            - Записати симптоми
    POST /match_diseases             - Підібрати захворювання
    GET  /daily_checkin/{user_id}    - Щоденна перевірка
    GET  /user_stats/{user_id}       - Статистика користувача
    POST /chat                       - Чат з AI
    POST /doctor_locator             - Лікарні поруч
    GET  /medicine_info?drug_name=   - Інструкція до препарату
"""

from .app import app
from .dependencies import app_state, get_state, get_tracker


__all__ = [
    "app",
    "app_state",
    "get_state",
    "get_tracker",
]
