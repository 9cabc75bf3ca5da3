"""
SympTrack — Детектор тривалих симптомів

Симптом вважається тривалим, якщо він присутній у кожному з останніх
N записів історії (N=3 за замовчуванням). Враховується позиція запису,
а не значення дати.
"""

from typing import Any, Iterable, List, Optional, Sequence

from ..config import HistoryConfig


def _record_symptoms(record: Any) -> Iterable[str]:
    if isinstance(record, dict):
        symptoms = record.get("symptoms") or []
    else:
        symptoms = getattr(record, "symptoms", None) or []
    return [s for s in symptoms if isinstance(s, str)]


class ProlongedSymptomDetector:
    """
    Приклад:
        detector = ProlongedSymptomDetector()
        detector.detect(profile.history)
        # ["The symptom 'fever' has persisted for 3 days. Please consult a doctor."]
    """

    def __init__(self, config: Optional[HistoryConfig] = None):
        self.config = config or HistoryConfig()

    @property
    def window(self) -> int:
        return self.config.prolonged_window

    def prolonged_symptoms(self, history: Sequence[Any]) -> List[str]:
        """Симптоми, присутні в усіх записах вікна (порядок першої появи)"""
        if self.window <= 0 or len(history) < self.window:
            return []

        counts = {}
        for record in history[-self.window:]:
            # запис рахується один раз, навіть якщо симптом повторюється
            for symptom in dict.fromkeys(_record_symptoms(record)):
                counts[symptom] = counts.get(symptom, 0) + 1

        return [s for s, n in counts.items() if n >= self.window]

    def detect(self, history: Sequence[Any]) -> List[str]:
        """Повідомлення-попередження для кожного тривалого симптому"""
        return [
            self.config.alert_template.format(symptom=symptom, days=self.window)
            for symptom in self.prolonged_symptoms(history)
        ]
