"""
SympTrack — Словник симптомів

Множина відомих симптомів, зібрана з каталогу захворювань.
Канонічна форма симптому — рядок рівно у тому вигляді, в якому він
записаний у каталозі. Пошук нечутливий до регістру.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .data_loader import DiseaseRecord


class SymptomVocabulary:
    """
    Словник симптомів (порядок першої появи в каталозі, без дублікатів).

    Приклад використання:
        vocab = SymptomVocabulary.from_catalog(catalog)

        vocab.canonical("Fever")         # 'fever'
        "COUGH" in vocab                 # True
        vocab.filter_known(["fever", "unicorn pox"])  # ['fever']
    """

    def __init__(self, symptoms: Iterable[str] = ()):
        self._symptoms: List[str] = []
        self._seen = set()
        self._by_lower: Dict[str, str] = {}

        for symptom in symptoms:
            self.add_symptom(symptom)

    @classmethod
    def from_catalog(cls, catalog: Sequence[DiseaseRecord]) -> "SymptomVocabulary":
        """
        Зібрати словник з каталогу.

        Будується заново при кожному виклику: каталог може змінитися
        між запитами.
        """
        return cls(symptom for disease in catalog for symptom in disease.symptoms)

    @classmethod
    def from_symptoms(cls, symptoms: Iterable[str]) -> "SymptomVocabulary":
        return cls(symptoms)

    def add_symptom(self, symptom: str) -> None:
        if not isinstance(symptom, str) or not symptom or symptom in self._seen:
            return
        self._seen.add(symptom)
        self._symptoms.append(symptom)
        self._by_lower.setdefault(symptom.lower(), symptom)

    def canonical(self, term: str) -> Optional[str]:
        """Канонічна форма терміна або None, якщо його немає у словнику"""
        return self._by_lower.get(term.strip().lower())

    def filter_known(self, candidates: Iterable[str]) -> List[str]:
        """
        Перетин кандидатів зі словником (без урахування регістру).

        Терміни поза словником відкидаються. Результат у порядку словника.
        """
        wanted = {c.strip().lower() for c in candidates if isinstance(c, str)}
        return [s for s in self._symptoms if s.lower() in wanted]

    @property
    def size(self) -> int:
        return len(self._symptoms)

    @property
    def symptoms(self) -> List[str]:
        """Список симптомів (копія)"""
        return list(self._symptoms)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[str]:
        return iter(self._symptoms)

    def __contains__(self, symptom: object) -> bool:
        return isinstance(symptom, str) and symptom.strip().lower() in self._by_lower

    def __repr__(self) -> str:
        return f"SymptomVocabulary(size={self.size})"
