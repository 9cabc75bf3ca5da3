"""
SympTrack — Symptom Normalizer

Зведення вільного тексту до канонічних симптомів словника.

Послідовність стратегій (ordered fallback):
1. AIExtractionStrategy — генеративна модель обирає терміни зі словника,
   галюцинації поза словником відкидаються
2. FuzzyFallbackStrategy — rapidfuzz + точні токени, ніколи не падає

Кожна стратегія повертає список симптомів; порожній список означає
"нічого/збій", і оркестратор переходить до наступної стратегії.

Приклад:
    normalizer = SymptomNormalizer.from_config(config, adapter=GeminiExtractor(...))
    symptoms = await normalizer.normalize("fever and a bad cough", vocab)
    # ['fever', 'cough']
"""

import logging
from typing import Iterable, List, Optional, Protocol, Sequence, Union

from ..catalog import SymptomVocabulary
from ..config import SympTrackConfig
from .ai_extractor import AIExtractionAdapter, parse_candidates
from .fuzzy_matcher import FuzzyMatcher

logger = logging.getLogger(__name__)


SymptomInput = Union[None, str, Sequence[str]]


class ExtractionStrategy(Protocol):
    """Один етап нормалізації"""
    name: str

    async def extract(self, text: str, vocabulary: SymptomVocabulary) -> List[str]:
        ...


class AIExtractionStrategy:
    """Етап 1: генеративна модель + перетин зі словником"""

    name = "ai"

    def __init__(self, adapter: AIExtractionAdapter):
        self.adapter = adapter

    async def extract(self, text: str, vocabulary: SymptomVocabulary) -> List[str]:
        try:
            raw = await self.adapter.extract(vocabulary.symptoms, text)
        except Exception as e:
            # будь-який збій моделі переводить на fallback
            logger.warning("AI normalization failed, using fallback: %s", e)
            return []

        if not isinstance(raw, str):
            logger.info("AI returned non-text output, using fallback")
            return []

        matched = vocabulary.filter_known(parse_candidates(raw))
        if matched:
            logger.info("AI normalized: %s", matched)
        return matched


class FuzzyFallbackStrategy:
    """Етап 2: нечітке співставлення + точні токени"""

    name = "fuzzy"

    def __init__(self, score_cutoff: float = 85.0, token_pattern: str = r"[\s,]+"):
        self.score_cutoff = score_cutoff
        self.token_pattern = token_pattern

    async def extract(self, text: str, vocabulary: SymptomVocabulary) -> List[str]:
        matcher = FuzzyMatcher(
            vocabulary,
            score_cutoff=self.score_cutoff,
            token_pattern=self.token_pattern,
        )
        matched = matcher.symptoms(text)
        logger.debug("Fuzzy fallback matched: %s", matched)
        return matched


class SymptomNormalizer:
    """
    Оркестратор стратегій нормалізації.

    Чиста функція від входу (крім виклику моделі): не змінює словник,
    не має спільного стану між викликами.
    """

    def __init__(self, strategies: Sequence[ExtractionStrategy]):
        if not strategies:
            raise ValueError("At least one extraction strategy is required")
        self.strategies = list(strategies)

    @classmethod
    def from_config(
        cls,
        config: Optional[SympTrackConfig] = None,
        adapter: Optional[AIExtractionAdapter] = None,
    ) -> "SymptomNormalizer":
        """AI-етап додається лише якщо є адаптер і він увімкнений у конфігурації"""
        config = config or SympTrackConfig()
        strategies: List[ExtractionStrategy] = []

        if adapter is not None and config.normalization.use_ai:
            strategies.append(AIExtractionStrategy(adapter))

        strategies.append(FuzzyFallbackStrategy(
            score_cutoff=config.normalization.fuzzy_score_cutoff,
            token_pattern=config.normalization.token_pattern,
        ))
        return cls(strategies)

    @property
    def ai_enabled(self) -> bool:
        return any(isinstance(s, AIExtractionStrategy) for s in self.strategies)

    async def normalize(
        self,
        text: SymptomInput,
        vocabulary: Union[SymptomVocabulary, Iterable[str]],
    ) -> List[str]:
        """
        Нормалізувати текст або список текстів.

        Args:
            text: Рядок або послідовність рядків (кожен обробляється
                  окремо, результати об'єднуються). None/порожнє → [].
            vocabulary: Словник або перелік відомих симптомів

        Returns:
            Канонічні симптоми без дублікатів (підмножина словника)
        """
        if not isinstance(vocabulary, SymptomVocabulary):
            vocabulary = SymptomVocabulary.from_symptoms(vocabulary)

        if not text or not vocabulary.size:
            return []

        texts = [text] if isinstance(text, str) else list(text)

        result: List[str] = []
        for item in texts:
            if not isinstance(item, str) or not item.strip():
                continue
            for symptom in await self._normalize_one(item, vocabulary):
                if symptom not in result:
                    result.append(symptom)
        return result

    async def _normalize_one(self, text: str, vocabulary: SymptomVocabulary) -> List[str]:
        known = set(vocabulary.symptoms)
        for strategy in self.strategies:
            found = await strategy.extract(text, vocabulary)
            matched = _dedupe(s for s in found if s in known)
            if matched:
                return matched
            logger.info("Stage '%s' produced no matches", strategy.name)
        return []


def _dedupe(symptoms: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for s in symptoms:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out
