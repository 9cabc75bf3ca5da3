"""
SympTrack — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .symptoms import router as symptoms_router
from .users import router as users_router
from .assistant import router as assistant_router

__all__ = [
    'health_router',
    'symptoms_router',
    'users_router',
    'assistant_router',
]
