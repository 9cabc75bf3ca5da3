"""
SympTrack — Фактори середовища

Провайдер факторів середовища — чистий, синхронний і тотальний пошук
за містом. Невідоме місто отримує "нормальний" базовий рівень.
"""

from typing import Dict, Optional, Protocol

from ..schemas import EnvironmentalFactors


BASELINE = EnvironmentalFactors(aqi=100, water_quality="good")

DEFAULT_CITY_FACTORS: Dict[str, EnvironmentalFactors] = {
    "delhi": EnvironmentalFactors(aqi=200, water_quality="poor"),
    "kanpur": EnvironmentalFactors(aqi=200, water_quality="poor"),
}


class EnvironmentProvider(Protocol):
    def lookup(self, city: Optional[str]) -> EnvironmentalFactors:
        ...


class StaticEnvironmentProvider:
    """
    Таблиця міст у пам'яті (пошук без урахування регістру).

    Приклад:
        provider = StaticEnvironmentProvider()
        provider.lookup("Delhi")   # EnvironmentalFactors(aqi=200, water_quality='poor')
        provider.lookup("Paris")   # EnvironmentalFactors(aqi=100, water_quality='good')
    """

    def __init__(
        self,
        cities: Optional[Dict[str, EnvironmentalFactors]] = None,
        baseline: EnvironmentalFactors = BASELINE,
    ):
        table = DEFAULT_CITY_FACTORS if cities is None else cities
        self.cities = {name.strip().lower(): factors for name, factors in table.items()}
        self.baseline = baseline

    def lookup(self, city: Optional[str]) -> EnvironmentalFactors:
        if not city:
            return self.baseline
        return self.cities.get(city.strip().lower(), self.baseline)
