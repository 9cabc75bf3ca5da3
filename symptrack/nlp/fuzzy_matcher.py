"""
SympTrack — Fuzzy Matcher

Нечітке співставлення тексту з симптомами словника.

Методи:
- Fuzzy (rapidfuzz): ratio терміна з кожним вікном тексту такої ж
  кількості слів у межах фрагмента між комами (найкраще вікно)
- Token match: точне співпадіння терміна з цілим токеном тексту

Не кидає винятків: відсутність співпадінь — порожній список.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from rapidfuzz import fuzz, utils

from ..catalog import SymptomVocabulary

# вікна не перетинають межі фрагментів "a, b"
_SEGMENT_RE = re.compile(r"[,;\n]+")


@dataclass
class SymptomMatch:
    """Результат співставлення"""
    symptom: str           # Канонічний симптом зі словника
    score: float           # Оцінка співпадіння (0-100)
    method: str            # 'fuzzy' або 'token'


class FuzzyMatcher:
    """
    Нечіткий пошук симптомів.

    Приклад:
        matcher = FuzzyMatcher(vocab)
        matcher.symptoms("fever, cough")
        # ['fever', 'cough']
    """

    def __init__(
        self,
        vocabulary: SymptomVocabulary,
        score_cutoff: float = 85.0,
        token_pattern: str = r"[\s,]+",
    ):
        """
        Args:
            vocabulary: Словник канонічних симптомів
            score_cutoff: Мінімальна оцінка rapidfuzz (0-100)
            token_pattern: Регулярний вираз-розділювач токенів
        """
        self.vocabulary = vocabulary
        self.score_cutoff = score_cutoff
        self._token_re = re.compile(token_pattern)

    def match(self, text: str) -> List[SymptomMatch]:
        """
        Знайти всі симптоми в тексті.

        Спершу fuzzy-співпадіння за спаданням оцінки, далі — точні
        токени, яких ще немає. Потім терміни, що містяться в уже
        знайдених ('chest pain' → 'pain'), доки список не перестане
        рости. Кожен симптом один раз.
        """
        if not text or not text.strip():
            return []

        results = self._match_text(text)
        found = {r.symptom for r in results}

        i = 0
        while i < len(results):
            for result in self._match_text(results[i].symptom):
                if result.symptom not in found:
                    results.append(result)
                    found.add(result.symptom)
            i += 1

        return results

    def _match_text(self, text: str) -> List[SymptomMatch]:
        results = self.match_fuzzy(text)
        found = {r.symptom for r in results}

        for result in self.match_tokens(text):
            if result.symptom not in found:
                results.append(result)
                found.add(result.symptom)

        return results

    def symptoms(self, text: str) -> List[str]:
        return [r.symptom for r in self.match(text)]

    def match_fuzzy(self, text: str) -> List[SymptomMatch]:
        """Нечіткі співпадіння, відсортовані за спаданням оцінки"""
        segments = [utils.default_process(s).split() for s in _SEGMENT_RE.split(text)]
        segments = [tokens for tokens in segments if tokens]
        if not segments:
            return []

        results = []
        for symptom in self.vocabulary:
            term = utils.default_process(symptom)
            score = max(self._similarity(tokens, term) for tokens in segments)
            if score >= self.score_cutoff:
                results.append(SymptomMatch(symptom=symptom, score=score, method="fuzzy"))

        # sort стабільний: при рівних оцінках лишається порядок словника
        results.sort(key=lambda r: r.score, reverse=True)
        return results

    def match_tokens(self, text: str) -> List[SymptomMatch]:
        """Симптоми, що збігаються з цілим токеном тексту"""
        tokens = {t for t in self._token_re.split(text.lower()) if t}
        return [
            SymptomMatch(symptom=symptom, score=100.0, method="token")
            for symptom in self.vocabulary
            if symptom.lower() in tokens
        ]

    def best_match(self, text: str) -> Optional[SymptomMatch]:
        results = self.match(text)
        return results[0] if results else None

    @staticmethod
    def _similarity(query_tokens: List[str], term: str) -> float:
        """Найкраща ratio терміна серед вікон з тією ж кількістю слів"""
        size = len(term.split())
        if not size:
            return 0.0
        if len(query_tokens) <= size:
            return fuzz.ratio(" ".join(query_tokens), term)
        return max(
            fuzz.ratio(" ".join(query_tokens[i:i + size]), term)
            for i in range(len(query_tokens) - size + 1)
        )
