"""
Тести для модуля scoring

Запуск: pytest tests/test_scoring.py -v
"""

import pytest


DELHI = {"aqi": 200, "water_quality": "poor"}


def make_user(**kwargs):
    from symptrack.schemas import UserProfile
    kwargs.setdefault("user_id", "u1")
    return UserProfile(**kwargs)


def env(aqi=100, water_quality="good"):
    from symptrack.schemas import EnvironmentalFactors
    return EnvironmentalFactors(aqi=aqi, water_quality=water_quality)


# ============================================================
# DiseaseScorer
# ============================================================

def test_symptom_overlap_only(catalog):
    """Без бонусів: +1 за кожен спільний симптом, порядок каталогу при рівності"""
    from symptrack.schemas import UserProfile
    from symptrack.scoring import DiseaseScorer

    results = DiseaseScorer().score(catalog, ["fever"], UserProfile.anonymous("ghost"), env())

    assert [(r.name, r.match_score) for r in results] == [("Flu", 1), ("Typhoid", 1)]


def test_environment_and_gender_bonuses(catalog):
    """Delhi + male: Typhoid 1+1+2, Flu 1+1, Common Cold 0+1"""
    from symptrack.scoring import DiseaseScorer

    results = DiseaseScorer().score(catalog, ["fever"], make_user(gender="male"), env(**DELHI))

    assert [(r.name, r.match_score) for r in results] == [
        ("Typhoid", 4),
        ("Flu", 2),
        ("Common Cold", 1),
    ]


def test_results_sorted_and_positive(catalog):
    from symptrack.scoring import DiseaseScorer

    results = DiseaseScorer().score(
        catalog, ["cough", "runny nose", "headache"], make_user(gender="female"), env(**DELHI)
    )
    scores = [r.match_score for r in results]

    assert scores == sorted(scores, reverse=True)
    assert all(s > 0 for s in scores)
    assert results[0].name == "Common Cold"   # 2 симптоми + respiratory


def test_no_overlap_and_baseline_gives_empty(catalog):
    from symptrack.scoring import DiseaseScorer

    assert DiseaseScorer().score(catalog, [], make_user(), env()) == []
    assert DiseaseScorer().score(catalog, ["sneezing"], make_user(), env()) == []


def test_gender_bonus_requires_tag():
    """Захворювання без higher_risk_gender не отримує бонусу навіть при gender=None"""
    from symptrack.catalog import DiseaseRecord
    from symptrack.scoring import DiseaseScorer

    disease = DiseaseRecord.from_dict({"name": "Anemia", "symptoms": ["fatigue"]})
    scorer = DiseaseScorer()

    assert scorer.disease_score(disease, ["fatigue"], None, env()) == 1
    assert scorer.disease_score(disease, [], None, env()) == 0


def test_gender_bonus(catalog):
    from symptrack.scoring import DiseaseScorer

    migraine = catalog[3]
    scorer = DiseaseScorer()

    assert scorer.disease_score(migraine, ["headache"], "female", env()) == 2
    assert scorer.disease_score(migraine, ["headache"], "male", env()) == 1
    assert scorer.disease_score(migraine, ["headache"], "other", env()) == 1


@pytest.mark.parametrize("aqi, bonus", [(150, 0), (151, 1), (300, 1), (0, 0)])
def test_respiratory_threshold_is_strict(catalog, aqi, bonus):
    from symptrack.scoring import DiseaseScorer

    flu = catalog[0]
    assert DiseaseScorer().disease_score(flu, ["fever"], "other", env(aqi=aqi)) == 1 + bonus


@pytest.mark.parametrize("water, bonus", [("poor", 2), ("good", 0), ("Poor", 0), ("moderate", 0)])
def test_water_borne_bonus(catalog, water, bonus):
    from symptrack.scoring import DiseaseScorer

    typhoid = catalog[1]
    assert DiseaseScorer().disease_score(typhoid, [], "other", env(water_quality=water)) == bonus


def test_water_borne_boost_without_symptoms(catalog):
    """Бонус води сам по собі вводить захворювання в результат"""
    from symptrack.scoring import DiseaseScorer

    results = DiseaseScorer().score(catalog, [], make_user(), env(water_quality="poor"))

    assert [(r.name, r.match_score) for r in results] == [("Typhoid", 2)]


SYMPTOM_SETS = [
    [],
    ["fever"],
    ["cough", "runny nose"],
    ["fever", "abdominal pain", "headache"],
]


@pytest.mark.parametrize("disease_index", range(4))
@pytest.mark.parametrize("symptoms", SYMPTOM_SETS)
@pytest.mark.parametrize("extra", ["fever", "cough", "abdominal pain", "runny nose", "headache", "nausea"])
def test_adding_symptom_never_lowers_score(catalog, disease_index, symptoms, extra):
    from symptrack.scoring import DiseaseScorer

    scorer = DiseaseScorer()
    disease = catalog[disease_index]

    for gender, factors in (("male", env(**DELHI)), ("female", env()), (None, env())):
        before = scorer.disease_score(disease, symptoms, gender, factors)
        after = scorer.disease_score(disease, symptoms + [extra], gender, factors)
        assert after >= before


@pytest.mark.parametrize("symptoms", SYMPTOM_SETS)
def test_score_results_monotonic(catalog, symptoms):
    """Додатковий симптом не прибирає захворювань і не знижує оцінок"""
    from symptrack.scoring import DiseaseScorer

    scorer = DiseaseScorer()
    user = make_user(gender="male")
    before = {r.name: r.match_score for r in scorer.score(catalog, symptoms, user, env(**DELHI))}

    for extra in ("fever", "runny nose", "nausea"):
        after = {r.name: r.match_score for r in scorer.score(catalog, symptoms + [extra], user, env(**DELHI))}
        assert set(before) <= set(after)
        assert all(after[name] >= score for name, score in before.items())


def test_custom_weights(catalog):
    from symptrack.config import ScoringConfig
    from symptrack.scoring import DiseaseScorer

    scorer = DiseaseScorer(ScoringConfig(water_borne_weight=5, symptom_weight=2))
    typhoid = catalog[1]

    assert scorer.disease_score(typhoid, ["fever"], "other", env(water_quality="poor")) == 7


def test_match_result_fields(catalog):
    """severity за замовчуванням 'unknown', requires_doctor, URL"""
    from symptrack.scoring import DiseaseScorer

    results = {r.name: r for r in DiseaseScorer().score(
        catalog, ["fever", "cough"], make_user(), env()
    )}

    assert results["Flu"].severity == "medium"
    assert results["Common Cold"].severity == "unknown"
    assert results["Typhoid"].requires_doctor is True
    assert results["Flu"].requires_doctor is False
    assert results["Common Cold"].verified_info_url == "https://medlineplus.gov/search/?query=Common%20Cold"


def test_localized_advice(catalog):
    """Мова користувача → англійська → None"""
    from symptrack.scoring import DiseaseScorer

    results = {r.name: r for r in DiseaseScorer().score(
        catalog, ["fever", "cough"], make_user(language="hi"), env()
    )}

    assert results["Flu"].advice == "आराम करें।"
    assert results["Flu"].prevention == "Get vaccinated."
    assert results["Typhoid"].advice == "See a doctor."
    assert results["Typhoid"].prevention is None
    assert results["Common Cold"].advice is None


def test_scoring_does_not_mutate_catalog(catalog):
    from symptrack.scoring import DiseaseScorer

    snapshot = list(catalog)
    DiseaseScorer().score(catalog, ["fever"], make_user(gender="male"), env(**DELHI))
    assert list(catalog) == snapshot


# ============================================================
# Helpers
# ============================================================

@pytest.mark.parametrize("texts, language, expected", [
    ({"en": "A", "hi": "B"}, "hi", "B"),
    ({"en": "A", "hi": "B"}, "fr", "A"),
    ({"en": "A"}, None, "A"),
    ({"hi": "B"}, "fr", None),
    ({}, "en", None),
    ({"en": "A", "hi": ""}, "hi", "A"),
])
def test_localized_text(texts, language, expected):
    from symptrack.scoring import localized_text
    assert localized_text(texts, language) == expected


@pytest.mark.parametrize("name, query", [
    ("Flu", "Flu"),
    ("Common Cold", "Common%20Cold"),
    ("Crohn's disease (adult)", "Crohn's%20disease%20(adult)"),
    ("Hand, foot & mouth", "Hand%2C%20foot%20%26%20mouth"),
])
def test_verification_url(name, query):
    from symptrack.scoring import build_verification_url
    assert build_verification_url(name) == "https://medlineplus.gov/search/?query=" + query


# ============================================================
# Environment provider
# ============================================================

def test_known_cities_case_insensitive():
    from symptrack.scoring import StaticEnvironmentProvider

    provider = StaticEnvironmentProvider()

    for city in ("Delhi", "delhi", " KANPUR "):
        factors = provider.lookup(city)
        assert factors.aqi == 200
        assert factors.water_quality == "poor"


@pytest.mark.parametrize("city", [None, "", "Paris", "Pune"])
def test_unknown_city_gets_baseline(city):
    from symptrack.scoring import StaticEnvironmentProvider

    factors = StaticEnvironmentProvider().lookup(city)
    assert factors.aqi == 100
    assert factors.water_quality == "good"


def test_custom_city_table():
    from symptrack.schemas import EnvironmentalFactors
    from symptrack.scoring import StaticEnvironmentProvider

    provider = StaticEnvironmentProvider({"Lagos": EnvironmentalFactors(aqi=160, water_quality="poor")})

    assert provider.lookup("lagos").aqi == 160
    assert provider.lookup("Delhi").aqi == 100
