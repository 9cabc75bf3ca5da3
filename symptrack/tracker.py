"""
SympTrack — Symptom Tracker

Сервіс, що поєднує нормалізацію, історію та скоринг.

Ядро не змінює стан напряму: prepare_submission повертає значення
(запис історії + приріст балів), а apply_submission застосовує його
через injected UserStore. Подання для одного користувача серіалізуються
одним із фіксованого набору локів (за hash(user_id)).

Приклад:
    tracker = SymptomTracker(
        catalog=loader.load,
        normalizer=SymptomNormalizer.from_config(config),
        store=InMemoryUserStore(),
    )
    result = await tracker.submit("u1", "fever and cough", city="Delhi")
    matches = await tracker.match("u1", "fever")
    summary = tracker.checkin("u1")
"""

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .catalog import DiseaseRecord, SymptomVocabulary
from .config import SympTrackConfig
from .exceptions import UnknownUserError
from .history import ProlongedSymptomDetector, UserStore
from .nlp import SymptomNormalizer
from .nlp.normalizer import SymptomInput
from .schemas import CheckinSummary, HistoryRecord, MatchResult, UserProfile, UserStats
from .scoring import DiseaseScorer, EnvironmentProvider, StaticEnvironmentProvider

logger = logging.getLogger(__name__)


CHECKIN_START_MESSAGE = "Start by submitting symptoms."
CHECKIN_MESSAGE = "How are you feeling today?"

# кількість локів; користувачі з однаковим hash % N ділять лок
LOCK_STRIPES = 64


@dataclass
class SubmissionResult:
    """Мутація, яку треба застосувати до профілю після подання"""
    user_id: str
    symptoms: List[str]
    record: HistoryRecord
    points_delta: int

    # Атрибути нового профілю (ігноруються, якщо профіль уже існує)
    language: str = "en"
    gender: Optional[str] = "other"
    city: str = ""

    def apply_to(self, profile: Optional[UserProfile]) -> UserProfile:
        """Новий профіль з доданим записом і балами (вхідний не змінюється)"""
        if profile is None:
            profile = UserProfile(
                user_id=self.user_id,
                language=self.language,
                gender=self.gender,
                city=self.city,
            )
        else:
            profile = profile.model_copy(deep=True)

        profile.history.append(self.record.model_copy())
        profile.points += self.points_delta
        return profile


class SymptomTracker:
    """Головний сервіс SympTrack"""

    def __init__(
        self,
        catalog: Callable[[], Sequence[DiseaseRecord]],
        normalizer: SymptomNormalizer,
        store: UserStore,
        scorer: Optional[DiseaseScorer] = None,
        environment: Optional[EnvironmentProvider] = None,
        detector: Optional[ProlongedSymptomDetector] = None,
        config: Optional[SympTrackConfig] = None,
    ):
        """
        Args:
            catalog: Функція, що повертає поточний знімок каталогу
            normalizer: Нормалізатор симптомів
            store: Сховище профілів
            scorer: Скоринг (за замовчуванням з config.scoring)
            environment: Провайдер факторів середовища
            detector: Детектор тривалих симптомів
            config: Конфігурація
        """
        self.config = config or SympTrackConfig()
        self.catalog = catalog
        self.normalizer = normalizer
        self.store = store
        self.scorer = scorer or DiseaseScorer(self.config.scoring)
        self.environment = environment or StaticEnvironmentProvider()
        self.detector = detector or ProlongedSymptomDetector(self.config.history)

        self._locks = [threading.Lock() for _ in range(LOCK_STRIPES)]

    def vocabulary(self) -> SymptomVocabulary:
        """Словник зі свіжого знімка каталогу"""
        return SymptomVocabulary.from_catalog(self.catalog())

    # ------------------------------------------------------------------
    # Подання симптомів
    # ------------------------------------------------------------------

    async def prepare_submission(
        self,
        user_id: str,
        symptoms: SymptomInput,
        language: str = "en",
        gender: Optional[str] = "other",
        city: str = "",
    ) -> SubmissionResult:
        normalized = await self.normalizer.normalize(symptoms, self.vocabulary())
        return SubmissionResult(
            user_id=user_id,
            symptoms=normalized,
            record=HistoryRecord(symptoms=normalized),
            points_delta=self.config.history.submission_points,
            language=language,
            gender=gender,
            city=city,
        )

    def apply_submission(self, result: SubmissionResult) -> UserProfile:
        with self._user_lock(result.user_id):
            profile = result.apply_to(self.store.get(result.user_id))
            self.store.put(profile)

        logger.info(
            "Recorded %d symptom(s) for user %s (points=%d)",
            len(result.symptoms), result.user_id, profile.points,
        )
        return profile

    async def submit(
        self,
        user_id: str,
        symptoms: SymptomInput,
        language: str = "en",
        gender: Optional[str] = "other",
        city: str = "",
    ) -> SubmissionResult:
        result = await self.prepare_submission(user_id, symptoms, language, gender, city)
        # запис у сховище може блокувати (файл), тому поза event loop
        await asyncio.to_thread(self.apply_submission, result)
        return result

    # ------------------------------------------------------------------
    # Підбір захворювань
    # ------------------------------------------------------------------

    async def match(self, user_id: str, symptoms: SymptomInput) -> List[MatchResult]:
        """
        Підібрати захворювання.

        Невідомий користувач отримує нейтральний профіль (без статі,
        англійська, місто не задане).
        """
        profile = self.store.get(user_id) or UserProfile.anonymous(user_id)
        environment = self.environment.lookup(profile.city)

        catalog = self.catalog()
        vocabulary = SymptomVocabulary.from_catalog(catalog)
        normalized = await self.normalizer.normalize(symptoms, vocabulary)

        return self.scorer.score(catalog, normalized, profile, environment)

    # ------------------------------------------------------------------
    # Історія
    # ------------------------------------------------------------------

    def checkin(self, user_id: str) -> CheckinSummary:
        profile = self.store.get(user_id)
        if profile is None or not profile.history:
            return CheckinSummary(message=CHECKIN_START_MESSAGE)

        return CheckinSummary(
            message=CHECKIN_MESSAGE,
            last_symptoms=profile.last_record,
            alerts=self.detector.detect(profile.history),
        )

    def stats(self, user_id: str) -> UserStats:
        profile = self.store.get(user_id)
        if profile is None:
            raise UnknownUserError(user_id)

        return UserStats(
            points=profile.points,
            badges=list(profile.badges),
            history_length=len(profile.history),
        )

    def _user_lock(self, user_id: str) -> threading.Lock:
        return self._locks[hash(user_id) % len(self._locks)]
