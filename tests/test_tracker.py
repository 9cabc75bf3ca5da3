"""
Тести для SymptomTracker

Запуск: pytest tests/test_tracker.py -v
"""

import asyncio

import pytest


@pytest.fixture
def tracker(catalog):
    from symptrack.history import InMemoryUserStore
    from symptrack.nlp import SymptomNormalizer
    from symptrack.tracker import SymptomTracker

    return SymptomTracker(
        catalog=lambda: catalog,
        normalizer=SymptomNormalizer.from_config(),
        store=InMemoryUserStore(),
    )


def test_submit_creates_profile(tracker):
    result = asyncio.run(tracker.submit("u1", "fever, cough", gender="male", city="Delhi"))

    assert result.symptoms == ["fever", "cough"]
    assert result.points_delta == 10

    profile = tracker.store.get("u1")
    assert profile.points == 10
    assert profile.gender == "male"
    assert profile.city == "Delhi"
    assert [r.symptoms for r in profile.history] == [["fever", "cough"]]


def test_submit_appends_and_keeps_profile(tracker):
    """Повторне подання не перезаписує атрибути профілю"""
    asyncio.run(tracker.submit("u1", "fever", city="Delhi"))
    asyncio.run(tracker.submit("u1", ["cough", "nausea"], city="Paris"))

    profile = tracker.store.get("u1")
    assert profile.points == 20
    assert profile.city == "Delhi"
    assert [r.symptoms for r in profile.history] == [["fever"], ["cough", "nausea"]]


def test_submit_with_no_matches_still_records(tracker):
    asyncio.run(tracker.submit("u1", "feeling blue"))

    profile = tracker.store.get("u1")
    assert profile.history[-1].symptoms == []
    assert profile.points == 10


def test_prepare_does_not_touch_store(tracker):
    result = asyncio.run(tracker.prepare_submission("u1", "fever"))

    assert tracker.store.get("u1") is None
    profile = tracker.apply_submission(result)
    assert profile.points == 10


def test_submission_result_apply_to_is_pure():
    from symptrack.schemas import HistoryRecord, UserProfile
    from symptrack.tracker import SubmissionResult

    original = UserProfile(user_id="u1", points=5)
    result = SubmissionResult(
        user_id="u1", symptoms=["fever"],
        record=HistoryRecord(symptoms=["fever"]), points_delta=10,
    )

    updated = result.apply_to(original)

    assert updated.points == 15
    assert original.points == 5
    assert original.history == []


def test_match_unknown_user_is_neutral(tracker):
    matches = asyncio.run(tracker.match("ghost", "fever"))

    assert [(m.name, m.match_score) for m in matches] == [("Flu", 1), ("Typhoid", 1)]
    assert tracker.store.get("ghost") is None


def test_match_uses_profile(tracker):
    asyncio.run(tracker.submit("u1", "cough", gender="male", city="Delhi"))

    matches = asyncio.run(tracker.match("u1", "fever"))

    assert [(m.name, m.match_score) for m in matches] == [
        ("Typhoid", 4),
        ("Flu", 2),
        ("Common Cold", 1),
    ]


def test_catalog_snapshot_per_call(catalog_entries):
    """Зміни каталогу видно наступному запиту"""
    from symptrack.catalog import DiseaseCatalogLoader
    from symptrack.history import InMemoryUserStore
    from symptrack.nlp import SymptomNormalizer
    from symptrack.tracker import SymptomTracker

    current = {"catalog": DiseaseCatalogLoader.from_entries(catalog_entries[:1])}
    tracker = SymptomTracker(
        catalog=lambda: current["catalog"],
        normalizer=SymptomNormalizer.from_config(),
        store=InMemoryUserStore(),
    )

    assert tracker.vocabulary().symptoms == ["fever", "cough"]
    assert asyncio.run(tracker.match("u1", "headache")) == []

    current["catalog"] = DiseaseCatalogLoader.from_entries(catalog_entries)
    assert [m.name for m in asyncio.run(tracker.match("u1", "headache"))] == ["Migraine"]


def test_checkin_without_history(tracker):
    from symptrack.tracker import CHECKIN_START_MESSAGE

    summary = tracker.checkin("nobody")

    assert summary.message == CHECKIN_START_MESSAGE
    assert summary.last_symptoms is None
    assert summary.alerts == []


def test_checkin_alerts_after_three_days(tracker):
    from symptrack.tracker import CHECKIN_MESSAGE

    for text in ("fever", "fever and cough", "FEVER"):
        asyncio.run(tracker.submit("u1", text))

    summary = tracker.checkin("u1")

    assert summary.message == CHECKIN_MESSAGE
    assert summary.last_symptoms.symptoms == ["fever"]
    assert summary.alerts == ["The symptom 'fever' has persisted for 3 days. Please consult a doctor."]


def test_stats(tracker):
    from symptrack.exceptions import UnknownUserError

    with pytest.raises(UnknownUserError):
        tracker.stats("ghost")

    asyncio.run(tracker.submit("u1", "fever"))
    asyncio.run(tracker.submit("u1", "cough"))
    stats = tracker.stats("u1")

    assert stats.points == 20
    assert stats.badges == []
    assert stats.history_length == 2


def test_ai_stage_used_by_tracker(catalog, fake_ai):
    from symptrack.history import InMemoryUserStore
    from symptrack.nlp import SymptomNormalizer
    from symptrack.tracker import SymptomTracker

    adapter = fake_ai(reply="headache")
    tracker = SymptomTracker(
        catalog=lambda: catalog,
        normalizer=SymptomNormalizer.from_config(adapter=adapter),
        store=InMemoryUserStore(),
    )

    result = asyncio.run(tracker.submit("u1", "my head is pounding"))

    assert result.symptoms == ["headache"]
    assert adapter.calls[0][0] == ["fever", "cough", "abdominal pain", "runny nose", "headache", "nausea"]


def test_submit_applies_outside_event_loop_thread(tracker, monkeypatch):
    """Запис у сховище виконується в окремому потоці"""
    import threading

    loop_thread = threading.get_ident()
    seen = []
    original = tracker.apply_submission

    def recording_apply(result):
        seen.append(threading.get_ident())
        return original(result)

    monkeypatch.setattr(tracker, "apply_submission", recording_apply)
    asyncio.run(tracker.submit("u1", "fever"))

    assert len(seen) == 1
    assert seen[0] != loop_thread
    assert tracker.store.get("u1").points == 10


def test_user_locks_are_bounded(tracker):
    from symptrack.tracker import LOCK_STRIPES

    locks = {id(tracker._user_lock(f"user-{i}")) for i in range(LOCK_STRIPES * 10)}

    assert len(tracker._locks) == LOCK_STRIPES
    assert len(locks) <= LOCK_STRIPES
    assert tracker._user_lock("u1") is tracker._user_lock("u1")


def test_concurrent_submissions_keep_every_record(tracker):
    """Паралельні подання одного користувача не губляться"""
    async def submit_many():
        await asyncio.gather(*(tracker.submit("u1", "fever") for _ in range(20)))

    asyncio.run(submit_many())

    profile = tracker.store.get("u1")
    assert len(profile.history) == 20
    assert profile.points == 200
