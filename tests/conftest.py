"""
Спільні фікстури для тестів SympTrack
"""

import json

import pytest


CATALOG_ENTRIES = [
    {
        "name": "Flu",
        "symptoms": ["fever", "cough"],
        "severity": "medium",
        "tags": ["respiratory"],
        "advice": {"en": "Rest and drink fluids.", "hi": "आराम करें।"},
        "prevention": {"en": "Get vaccinated."},
    },
    {
        "name": "Typhoid",
        "symptoms": ["fever", "abdominal pain"],
        "severity": "high",
        "requires_doctor": True,
        "higher_risk_gender": "male",
        "tags": ["water-borne"],
        "advice": {"en": "See a doctor."},
    },
    {
        "name": "Common Cold",
        "symptoms": ["cough", "runny nose"],
        "tags": ["respiratory"],
    },
    {
        "name": "Migraine",
        "symptoms": ["headache", "nausea"],
        "higher_risk_gender": "female",
    },
]


class FakeAIAdapter:
    """AI-адаптер без мережі: повертає заданий текст або кидає виняток"""

    def __init__(self, reply=None, error=None, chat_reply="Hello!"):
        self.reply = reply
        self.error = error
        self.chat_reply = chat_reply
        self.calls = []

    async def extract(self, vocabulary, text):
        self.calls.append((list(vocabulary), text))
        if self.error is not None:
            raise self.error
        return self.reply

    async def chat(self, message):
        if self.error is not None:
            raise self.error
        return self.chat_reply


@pytest.fixture
def catalog_entries():
    return [dict(e) for e in CATALOG_ENTRIES]


@pytest.fixture
def catalog(catalog_entries):
    from symptrack.catalog import DiseaseCatalogLoader
    return DiseaseCatalogLoader.from_entries(catalog_entries)


@pytest.fixture
def vocab(catalog):
    from symptrack.catalog import SymptomVocabulary
    return SymptomVocabulary.from_catalog(catalog)


@pytest.fixture
def catalog_file(tmp_path, catalog_entries):
    path = tmp_path / "disease_dataset.json"
    path.write_text(json.dumps(catalog_entries), encoding="utf-8")
    return path


@pytest.fixture
def fake_ai():
    """Фабрика FakeAIAdapter"""
    return FakeAIAdapter
