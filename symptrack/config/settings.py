"""
SympTrack — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.scoring.respiratory_aqi_threshold
- Серіалізації в YAML/JSON
"""

import os
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Optional


# =============================================================================
# NORMALIZATION CONFIGURATION
# =============================================================================

@dataclass
class NormalizationConfig:
    """Параметри нормалізації симптомів"""

    # Мінімальна оцінка rapidfuzz (0-100) для fuzzy fallback
    fuzzy_score_cutoff: float = 85.0

    # Розділювачі для точного токен-матчингу
    token_pattern: str = r"[\s,]+"

    # Використовувати AI на першому етапі (якщо є ключ)
    use_ai: bool = True


# =============================================================================
# SCORING CONFIGURATION
# =============================================================================

@dataclass
class ScoringConfig:
    """Ваги та пороги скорингу захворювань"""

    # Ваги (асиметрію water-borne +2 збережено навмисно)
    symptom_weight: int = 1
    gender_weight: int = 1
    respiratory_weight: int = 1
    water_borne_weight: int = 2

    # Пороги середовища
    respiratory_aqi_threshold: float = 150
    poor_water_label: str = "poor"

    # Теги категорій
    respiratory_tag: str = "respiratory"
    water_borne_tag: str = "water-borne"

    # Значення за замовчуванням для MatchResult
    default_severity: str = "unknown"
    fallback_language: str = "en"

    verification_url_template: str = "https://medlineplus.gov/search/?query={query}"


# =============================================================================
# HISTORY CONFIGURATION
# =============================================================================

@dataclass
class HistoryConfig:
    """Параметри історії користувача"""

    # Кількість останніх записів для детектора
    prolonged_window: int = 3

    # Бали за кожне подання симптомів
    submission_points: int = 10

    alert_template: str = (
        "The symptom '{symptom}' has persisted for {days} days. Please consult a doctor."
    )


# =============================================================================
# AI CONFIGURATION
# =============================================================================

@dataclass
class AIConfig:
    """Параметри генеративної моделі"""
    api_key: str = ""
    model: str = "gemini-2.0-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_s: float = 30.0

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


# =============================================================================
# INTEGRATIONS CONFIGURATION
# =============================================================================

@dataclass
class IntegrationsConfig:
    """Зовнішні довідкові сервіси"""
    google_maps_api_key: str = ""
    places_url: str = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
    places_radius_m: int = 5000
    fda_label_url: str = "https://api.fda.gov/drug/label.json"
    timeout_s: float = 10.0


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class SympTrackConfig:
    """
    Головна конфігурація SympTrack

    Об'єднує всі параметри системи в одному місці.

    Приклад використання:
        config = SympTrackConfig()
        print(config.scoring.water_borne_weight)  # 2
        print(config.history.prolonged_window)    # 3
    """

    # Метадані
    version: str = "0.1.0"
    project_name: str = "SympTrack"

    # Сервер
    host: str = "0.0.0.0"
    port: int = 5000

    # Компоненти
    normalization: NormalizationConfig = field(default_factory=NormalizationConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    integrations: IntegrationsConfig = field(default_factory=IntegrationsConfig)

    # Шляхи (відносні)
    catalog_path: str = "data/disease_dataset.json"
    user_store_path: str = "data/user_symptoms.json"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SympTrackConfig":
        """Створити конфігурацію зі словника (наприклад, з YAML)"""
        config = cls()
        config.update(data)
        return config

    def update(self, data: Optional[Dict[str, Any]]) -> None:
        """Накласти значення зі словника, секція за секцією"""
        _merge_into(self, data or {})

    @classmethod
    def from_env(cls) -> "SympTrackConfig":
        """Створити конфігурацію з environment variables"""
        config = cls()

        overlay = os.getenv("SYMPTRACK_CONFIG")
        if overlay:
            from .loader import load_yaml
            config.update(load_yaml(overlay))

        config.port = int(os.getenv("PORT", str(config.port)))
        config.catalog_path = os.getenv("DISEASE_CATALOG_PATH", config.catalog_path)
        config.user_store_path = os.getenv("USER_STORE_PATH", config.user_store_path)
        config.ai.api_key = os.getenv("GEMINI_API_KEY", config.ai.api_key)
        config.ai.model = os.getenv("GEMINI_MODEL", config.ai.model)
        config.integrations.google_maps_api_key = os.getenv(
            "GOOGLE_MAPS_API_KEY", config.integrations.google_maps_api_key
        )
        return config


def _merge_into(target: Any, data: Dict[str, Any]) -> None:
    known = {f.name for f in fields(target)}
    for key, value in data.items():
        if key not in known:
            continue
        current = getattr(target, key)
        if is_dataclass(current) and isinstance(value, dict):
            _merge_into(current, value)
        else:
            setattr(target, key, value)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> SympTrackConfig:
    """Отримати конфігурацію за замовчуванням"""
    return SympTrackConfig()
