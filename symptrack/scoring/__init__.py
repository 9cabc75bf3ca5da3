"""
SympTrack — Модуль скорингу

Компоненти:
- DiseaseScorer: Зважений скоринг захворювань
- EnvironmentProvider / StaticEnvironmentProvider: Фактори середовища міста

Приклад використання:
    from symptrack.scoring import DiseaseScorer, StaticEnvironmentProvider

    env = StaticEnvironmentProvider().lookup(profile.city)
    results = DiseaseScorer().score(catalog, ["fever", "cough"], profile, env)
"""

from .environment import (
    EnvironmentProvider,
    StaticEnvironmentProvider,
    DEFAULT_CITY_FACTORS,
    BASELINE,
)

from .scorer import (
    DiseaseScorer,
    localized_text,
    build_verification_url,
)


__all__ = [
    "EnvironmentProvider",
    "StaticEnvironmentProvider",
    "DEFAULT_CITY_FACTORS",
    "BASELINE",
    "DiseaseScorer",
    "localized_text",
    "build_verification_url",
]
