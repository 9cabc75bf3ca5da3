"""SympTrack — Модуль конфігурації"""
from .settings import (
    SympTrackConfig,
    get_default_config,
    NormalizationConfig,
    ScoringConfig,
    HistoryConfig,
    AIConfig,
    IntegrationsConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "SympTrackConfig",
    "get_default_config",
    "NormalizationConfig",
    "ScoringConfig",
    "HistoryConfig",
    "AIConfig",
    "IntegrationsConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
