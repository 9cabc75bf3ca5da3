"""
SympTrack — NLP модуль

Нормалізація вільного тексту до канонічного словника симптомів.

Компоненти:
- GeminiExtractor: AI-екстрактор (зовнішній оракул)
- FuzzyMatcher: Нечітке співставлення зі словником
- SymptomNormalizer: Оркестратор AI → fuzzy fallback

Приклад використання:
    from symptrack.nlp import SymptomNormalizer

    normalizer = SymptomNormalizer.from_config()
    symptoms = asyncio.run(normalizer.normalize("fever, cough", ["fever", "cough", "nausea"]))
    # ['fever', 'cough']
"""

from .ai_extractor import (
    AIExtractionAdapter,
    GeminiExtractor,
    build_extraction_prompt,
    parse_candidates,
    extract_text,
)

from .fuzzy_matcher import (
    FuzzyMatcher,
    SymptomMatch,
)

from .normalizer import (
    ExtractionStrategy,
    AIExtractionStrategy,
    FuzzyFallbackStrategy,
    SymptomNormalizer,
)


__all__ = [
    # AI
    'AIExtractionAdapter',
    'GeminiExtractor',
    'build_extraction_prompt',
    'parse_candidates',
    'extract_text',

    # Matcher
    'FuzzyMatcher',
    'SymptomMatch',

    # Normalizer
    'ExtractionStrategy',
    'AIExtractionStrategy',
    'FuzzyFallbackStrategy',
    'SymptomNormalizer',
]
