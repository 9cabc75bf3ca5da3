"""
SympTrack — Каталог захворювань

Компоненти:
- DiseaseCatalogLoader: Завантаження каталогу з JSON
- DiseaseRecord: Запис про захворювання (незмінний)
- SymptomVocabulary: Словник відомих симптомів (Vocabulary Extractor)

Приклад використання:
    from symptrack.catalog import DiseaseCatalogLoader, SymptomVocabulary

    loader = DiseaseCatalogLoader("disease_dataset.json")
    catalog = loader.load()

    vocab = SymptomVocabulary.from_catalog(catalog)
    print(vocab.size)
    print(vocab.canonical("FEVER"))  # 'fever'
"""

from .data_loader import DiseaseCatalogLoader, DiseaseRecord
from .vocabulary import SymptomVocabulary


__all__ = [
    "DiseaseCatalogLoader",
    "DiseaseRecord",
    "SymptomVocabulary",
]
