"""
SympTrack — API Dependencies

Dependency Injection для FastAPI.
Завантаження каталогу, створення трекера та зовнішніх клієнтів.
"""

import threading
from typing import Optional

from fastapi import HTTPException

from ..catalog import DiseaseCatalogLoader
from ..config import SympTrackConfig
from ..history import JsonFileUserStore, UserStore
from ..integrations import DrugLabelClient, HospitalLocator
from ..nlp import GeminiExtractor, SymptomNormalizer
from ..scoring import EnvironmentProvider, StaticEnvironmentProvider
from ..tracker import SymptomTracker


class AppState:
    """
    Стан застосунку — створюється один раз при старті.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.config: Optional[SympTrackConfig] = None
        self.catalog_loader: Optional[DiseaseCatalogLoader] = None
        self.ai = None
        self.tracker: Optional[SymptomTracker] = None
        self.locator: Optional[HospitalLocator] = None
        self.drugs: Optional[DrugLabelClient] = None

    def initialize(
        self,
        config: Optional[SympTrackConfig] = None,
        ai_adapter=None,
        store: Optional[UserStore] = None,
        environment: Optional[EnvironmentProvider] = None,
        locator: Optional[HospitalLocator] = None,
        drugs: Optional[DrugLabelClient] = None,
    ) -> None:
        """
        Зібрати всі компоненти.

        Args:
            config: Конфігурація (за замовчуванням з environment variables)
            ai_adapter: AI-екстрактор (за замовчуванням Gemini, якщо є ключ)
            store: Сховище профілів (за замовчуванням JSON-файл)
            environment: Провайдер факторів середовища
            locator: Клієнт пошуку лікарень
            drugs: Клієнт інструкцій до препаратів
        """
        config = config or SympTrackConfig.from_env()

        if ai_adapter is None:
            ai_adapter = GeminiExtractor.from_config(config.ai)

        self.config = config
        self.catalog_loader = DiseaseCatalogLoader(config.catalog_path)
        self.ai = ai_adapter
        self.tracker = SymptomTracker(
            catalog=self.catalog_loader.load,
            normalizer=SymptomNormalizer.from_config(config, adapter=ai_adapter),
            store=store if store is not None else JsonFileUserStore(config.user_store_path),
            environment=environment or StaticEnvironmentProvider(),
            config=config,
        )
        self.locator = locator or HospitalLocator(config.integrations)
        self.drugs = drugs or DrugLabelClient(config.integrations)
        self.is_loaded = True

    def reset(self) -> None:
        self._initialized = False
        self.__init__()


# Глобальний стан
app_state = AppState()


# Dependency functions для FastAPI
def get_state() -> AppState:
    """Dependency: стан застосунку"""
    if not app_state.is_loaded:
        app_state.initialize()
    return app_state


def get_tracker() -> SymptomTracker:
    """Dependency: трекер симптомів"""
    state = get_state()
    if state.tracker is None:
        raise HTTPException(status_code=503, detail="Tracker not available")
    return state.tracker
