"""
SympTrack — AI Extraction Adapter

Звертання до генеративної моделі (Google Generative Language API) для
вибору симптомів зі словника. Модель розглядається як зовнішній оракул:
відповідь — сирий текст, який розбирає нормалізатор.

Виклик синхронний (requests), тому в async-коді він виконується у
окремому потоці через asyncio.to_thread. Повторних спроб немає.
"""

import asyncio
import json
import re
from typing import Any, Dict, List, Optional, Protocol, Sequence

import requests

from ..config import AIConfig
from ..exceptions import AIExtractionError


EXTRACTION_PROMPT = """
Given this list of valid symptoms:
{vocabulary}

Extract ONLY the symptoms from the list that match the user input.
Return them as a comma-separated list, no explanations.
User input: "{text}"
"""

_SPLIT_RE = re.compile(r"[,;\n]+")
_STRIP_CHARS = " \t\r\"'`*-•.[]"


class AIExtractionAdapter(Protocol):
    """Будь-який екстрактор: (словник, текст) → сирий текст відповіді"""

    async def extract(self, vocabulary: Sequence[str], text: str) -> str:
        ...


def build_extraction_prompt(vocabulary: Sequence[str], text: str) -> str:
    return EXTRACTION_PROMPT.format(
        vocabulary=json.dumps(list(vocabulary), ensure_ascii=False),
        text=text,
    )


def parse_candidates(raw: Optional[str]) -> List[str]:
    """
    Розібрати відповідь моделі на кандидатів.

    Приймає список через кому (або рядки/крапки з комою), прибирає
    markdown-огорожі, маркери списку та лапки. Повертає терміни у
    нижньому регістрі. Порожня або нерозбірлива відповідь → [].
    """
    if not raw or not isinstance(raw, str):
        return []

    text = raw.strip()
    if text.startswith("```"):
        text = text.strip("`")
        # прибираємо мітку мови після огорожі
        first_line, _, rest = text.partition("\n")
        text = rest if rest else first_line

    candidates = []
    for part in _SPLIT_RE.split(text):
        term = part.strip(_STRIP_CHARS).lower()
        if term:
            candidates.append(term)
    return candidates


def extract_text(payload: Any) -> str:
    """Текст першого кандидата з відповіді generateContent ("" якщо немає)"""
    if not isinstance(payload, dict):
        return ""
    try:
        parts = payload["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


class GeminiExtractor:
    """
    Клієнт Gemini через REST.

    Приклад:
        extractor = GeminiExtractor(api_key="...")
        raw = await extractor.extract(["fever", "cough"], "I have a temperature")
        # 'fever'
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_s: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        if not api_key:
            raise ValueError("api_key is required for GeminiExtractor")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: AIConfig) -> Optional["GeminiExtractor"]:
        """None, якщо ключ не задано (працюємо лише з fallback)"""
        if not config.enabled:
            return None
        return cls(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout_s=config.timeout_s,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        """Синхронний виклик моделі. Повертає текст відповіді."""
        body: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            r = self.session.post(
                self.endpoint,
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise AIExtractionError(f"Could not reach Gemini: {e}") from e

        if r.status_code != 200:
            raise AIExtractionError(f"Gemini error {r.status_code}: {r.text[:200]}")

        try:
            payload = r.json()
        except ValueError as e:
            raise AIExtractionError(f"Gemini returned invalid JSON: {e}") from e

        return extract_text(payload).strip()

    async def agenerate(self, prompt: str) -> str:
        return await asyncio.to_thread(self.generate, prompt)

    async def extract(self, vocabulary: Sequence[str], text: str) -> str:
        return await self.agenerate(build_extraction_prompt(vocabulary, text))

    async def chat(self, message: str) -> str:
        return await self.agenerate(f"User: {message}\nAssistant:")

    def __repr__(self) -> str:
        return f"GeminiExtractor(model={self.model!r})"
