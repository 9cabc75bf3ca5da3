"""
SympTrack — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn symptrack.api.app:app --reload --host 0.0.0.0 --port 5000

    або:

    python scripts/run_api.py
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .dependencies import app_state
from .routes import (
    health_router,
    symptoms_router,
    users_router,
    assistant_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — збирання компонентів при старті.
    Якщо стан уже ініціалізовано (наприклад, у тестах), він не змінюється.
    """
    print("=" * 60)
    print("🩺 SympTrack API Starting...")
    print("=" * 60)

    if not app_state.is_loaded:
        app_state.initialize()

    config = app_state.config
    print(f"📄 Diseases loaded: {len(app_state.catalog_loader.load())}")
    if app_state.ai is not None:
        print(f"🤖 AI normalization: {app_state.ai!r}")
    else:
        print("⚠️ No GEMINI_API_KEY found → Using fallback only")

    print("=" * 60)
    print(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
    print("=" * 60)

    yield

    print("🛑 SympTrack API Stopping...")


# Створюємо додаток
app = FastAPI(
    title="SympTrack API",
    description="Трекер симптомів: нормалізація, історія, підбір захворювань",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    print(f"📨 {request.method} {request.url.path} → {response.status_code} ({process_time*1000:.1f}ms)")

    return response


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Server error"}
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(symptoms_router)
app.include_router(users_router)
app.include_router(assistant_router)


# Для запуску напряму
if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "symptrack.api.app:app",
        host="0.0.0.0",
        port=app_state.config.port if app_state.config else 5000,
        reload=True
    )
