"""
SympTrack — Disease Scorer

Цілочисельний скоринг захворювань за нормалізованими симптомами,
атрибутами користувача та факторами середовища.

Правило (акумулятор з 0):
    +1 за кожен спільний симптом
    +1 якщо higher_risk_gender збігається зі статтю користувача
    +1 якщо тег "respiratory" і AQI > 150
    +2 якщо тег "water-borne" і якість води "poor"

До результату потрапляють лише захворювання з оцінкою > 0.
Сортування за спаданням оцінки, стабільне: при рівності лишається
порядок каталогу.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence
from urllib.parse import quote

from ..catalog import DiseaseRecord
from ..config import ScoringConfig
from ..schemas import EnvironmentalFactors, MatchResult, UserProfile

logger = logging.getLogger(__name__)


def localized_text(texts: Dict[str, str], language: Optional[str], fallback: str = "en") -> Optional[str]:
    """Текст мовою користувача, інакше англійською, інакше None"""
    if not texts:
        return None
    return (language and texts.get(language)) or texts.get(fallback) or None


def build_verification_url(name: str, template: str = ScoringConfig.verification_url_template) -> str:
    """Посилання на перевірену довідку (encodeURIComponent-сумісне кодування)"""
    return template.format(query=quote(name, safe="!'()*-._~"))


class DiseaseScorer:
    """
    Скоринг захворювань.

    Приклад:
        scorer = DiseaseScorer()
        results = scorer.score(catalog, ["fever"], profile, provider.lookup(profile.city))
        results[0].name, results[0].match_score
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def disease_score(
        self,
        disease: DiseaseRecord,
        symptoms: Iterable[str],
        gender: Optional[str],
        environment: EnvironmentalFactors,
    ) -> int:
        """Оцінка одного захворювання"""
        cfg = self.config
        disease_symptoms = set(disease.symptoms)

        score = cfg.symptom_weight * len(set(symptoms) & disease_symptoms)

        if disease.higher_risk_gender is not None and disease.higher_risk_gender == gender:
            score += cfg.gender_weight

        if disease.has_tag(cfg.respiratory_tag) and environment.aqi > cfg.respiratory_aqi_threshold:
            score += cfg.respiratory_weight

        if disease.has_tag(cfg.water_borne_tag) and environment.water_quality == cfg.poor_water_label:
            score += cfg.water_borne_weight

        return score

    def score(
        self,
        catalog: Sequence[DiseaseRecord],
        symptoms: Sequence[str],
        user: UserProfile,
        environment: Optional[EnvironmentalFactors] = None,
    ) -> List[MatchResult]:
        """
        Оцінити всі захворювання каталогу.

        Args:
            catalog: Впорядкований каталог (лише читання)
            symptoms: Нормалізовані симптоми
            user: Профіль (використовуються gender та language)
            environment: Фактори середовища міста користувача

        Returns:
            MatchResult з оцінкою > 0, за спаданням оцінки
        """
        cfg = self.config
        environment = environment or EnvironmentalFactors()
        normalized = set(symptoms)

        results = []
        for disease in catalog:
            points = self.disease_score(disease, normalized, user.gender, environment)
            if points <= 0:
                continue

            results.append(MatchResult(
                name=disease.name,
                severity=disease.severity or cfg.default_severity,
                match_score=points,
                requires_doctor=disease.requires_doctor,
                verified_info_url=build_verification_url(disease.name, cfg.verification_url_template),
                advice=localized_text(disease.advice, user.language, cfg.fallback_language),
                prevention=localized_text(disease.prevention, user.language, cfg.fallback_language),
            ))

        # sorted() стабільний
        results = sorted(results, key=lambda r: r.match_score, reverse=True)
        logger.debug("Scored %d/%d diseases", len(results), len(catalog))
        return results
