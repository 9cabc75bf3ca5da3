"""
SympTrack — Завантаження каталогу захворювань

Каталог — це впорядкований JSON-масив записів:
[
  {
    "name": "Typhoid",
    "symptoms": ["fever", "abdominal pain", ...],
    "severity": "high",
    "requires_doctor": true,
    "higher_risk_gender": "male",
    "tags": ["water-borne"],
    "advice": {"en": "...", "hi": "..."},
    "prevention": {"en": "...", "hi": "..."}
  },
  ...
]

Всі поля крім name необов'язкові. Відсутні поля вважаються нейтральними.
"""

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import CatalogError

logger = logging.getLogger(__name__)


def _str_tuple(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(v.strip() for v in value if isinstance(v, str) and v.strip())


def _text_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): v for k, v in value.items() if isinstance(v, str)}


@dataclass(frozen=True)
class DiseaseRecord:
    """Запис про захворювання"""
    name: str
    symptoms: Tuple[str, ...] = ()
    severity: Optional[str] = None
    requires_doctor: bool = False
    higher_risk_gender: Optional[str] = None
    tags: Tuple[str, ...] = ()
    advice: Dict[str, str] = field(default_factory=dict, compare=False)
    prevention: Dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiseaseRecord":
        """Створити запис з сирого словника каталогу"""
        gender = data.get("higher_risk_gender")
        severity = data.get("severity")
        return cls(
            name=str(data.get("name", "")),
            symptoms=_str_tuple(data.get("symptoms")),
            severity=severity if isinstance(severity, str) and severity else None,
            requires_doctor=bool(data.get("requires_doctor", False)),
            higher_risk_gender=gender if isinstance(gender, str) and gender else None,
            tags=_str_tuple(data.get("tags")),
            advice=_text_map(data.get("advice")),
            prevention=_text_map(data.get("prevention")),
        )

    @property
    def symptom_count(self) -> int:
        return len(self.symptoms)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


class DiseaseCatalogLoader:
    """
    Завантажувач каталогу захворювань.

    Файл перечитується, якщо змінився його час модифікації, тому кожен
    запит отримує актуальний знімок каталогу.

    Приклад використання:
        loader = DiseaseCatalogLoader("disease_dataset.json")
        catalog = loader.load()
        print(f"Захворювань: {len(catalog)}")
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._mtime: Optional[float] = None
        self._records: Tuple[DiseaseRecord, ...] = ()
        self._missing_reported = False

    def load(self) -> Tuple[DiseaseRecord, ...]:
        """
        Отримати поточний знімок каталогу.

        Returns:
            Кортеж DiseaseRecord у порядку файлу. Порожній, якщо файлу немає.

        Raises:
            CatalogError: файл існує, але не є JSON-масивом
        """
        with self._lock:
            try:
                mtime = os.path.getmtime(self.path)
            except OSError:
                if not self._missing_reported:
                    logger.warning("Disease catalog not found: %s", self.path)
                    self._missing_reported = True
                self._mtime = None
                self._records = ()
                return self._records

            self._missing_reported = False
            if mtime != self._mtime:
                self._records = tuple(self._read())
                self._mtime = mtime
                logger.info("Diseases loaded: %d", len(self._records))

            return self._records

    def _read(self) -> List[DiseaseRecord]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read disease catalog {self.path}: {e}") from e

        if not isinstance(raw, list):
            raise CatalogError(f"Disease catalog must be a JSON array: {self.path}")

        records = []
        for entry in raw:
            if not isinstance(entry, dict) or not entry.get("name"):
                logger.debug("Skipping catalog entry without name: %r", entry)
                continue
            records.append(DiseaseRecord.from_dict(entry))
        return records

    @staticmethod
    def from_entries(entries: List[Dict[str, Any]]) -> Tuple[DiseaseRecord, ...]:
        """Побудувати каталог зі списку словників (без файлу)"""
        return tuple(DiseaseRecord.from_dict(e) for e in entries if isinstance(e, dict) and e.get("name"))

    def __repr__(self) -> str:
        return f"DiseaseCatalogLoader(path={str(self.path)!r})"
