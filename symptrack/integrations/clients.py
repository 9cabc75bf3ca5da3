"""
SympTrack — Зовнішні довідкові сервіси

Тонкі обгортки над requests:
- HospitalLocator: лікарні поруч (Google Places nearby search)
- DrugLabelClient: інструкція до препарату (openFDA drug label)

Без повторних спроб. Збій HospitalLocator повертає список-заглушку;
DrugLabelClient кидає requests.RequestException, а роут перетворює її
на повідомлення про помилку.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import IntegrationsConfig

logger = logging.getLogger(__name__)


class HospitalLocator:
    """
    Приклад:
        locator = HospitalLocator(api_key="...")
        locator.nearby(28.61, 77.20, city="Delhi")
        # [{'name': 'AIIMS', 'address': '...', 'rating': 4.3}, ...]
    """

    def __init__(
        self,
        config: Optional[IntegrationsConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or IntegrationsConfig()
        self.session = session or requests.Session()

    @staticmethod
    def placeholder(city: Optional[str]) -> List[Dict[str, Any]]:
        return [{"name": "City Hospital", "address": city or "Unknown"}]

    def nearby(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        city: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        if latitude is None or longitude is None or not self.config.google_maps_api_key:
            return self.placeholder(city)

        try:
            r = self.session.get(
                self.config.places_url,
                params={
                    "location": f"{latitude},{longitude}",
                    "radius": self.config.places_radius_m,
                    "type": "hospital",
                    "key": self.config.google_maps_api_key,
                },
                timeout=self.config.timeout_s,
            )
            r.raise_for_status()
            results = r.json().get("results", [])
        except (requests.RequestException, ValueError) as e:
            logger.warning("Hospital lookup failed: %s", e)
            return self.placeholder(city)

        hospitals = [
            {
                "name": h.get("name"),
                "address": h.get("vicinity"),
                "rating": h.get("rating") or "N/A",
            }
            for h in results
            if isinstance(h, dict)
        ]
        return hospitals or self.placeholder(city)


class DrugLabelClient:
    """Пошук інструкції до препарату за брендовою назвою"""

    def __init__(
        self,
        config: Optional[IntegrationsConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or IntegrationsConfig()
        self.session = session or requests.Session()

    def lookup(self, drug_name: str) -> Optional[Dict[str, Any]]:
        """
        Returns:
            Словник з полями інструкції або None, якщо нічого не знайдено

        Raises:
            requests.RequestException: мережа або HTTP-помилка
        """
        r = self.session.get(
            self.config.fda_label_url,
            params={"search": f'openfda.brand_name:"{drug_name}"', "limit": 1},
            timeout=self.config.timeout_s,
        )
        if r.status_code == 404:
            # openFDA відповідає 404, коли збігів немає
            return None
        r.raise_for_status()

        results = r.json().get("results") or []
        if not results:
            return None

        label = results[0]
        openfda = label.get("openfda") or {}
        return {
            "brand_name": openfda.get("brand_name"),
            "generic_name": openfda.get("generic_name"),
            "indications": label.get("indications_and_usage"),
            "dosage": label.get("dosage_and_administration"),
            "warnings": label.get("warnings"),
        }
