"""
SympTrack — Сховище користувачів

Явний інтерфейс get/put за ідентифікатором користувача замість
глобального стану процесу. Ядро отримує сховище через конструктор.

Реалізації:
- InMemoryUserStore: словник у пам'яті (тести, короткоживучі процеси)
- JsonFileUserStore: один JSON-файл {user_id: profile}
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol

from pydantic import ValidationError

from ..schemas import UserProfile

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    def get(self, user_id: str) -> Optional[UserProfile]:
        ...

    def put(self, profile: UserProfile) -> None:
        ...

    def exists(self, user_id: str) -> bool:
        ...


class InMemoryUserStore:
    """Сховище в пам'яті. Повертає копії, щоб виклики не ділили стан."""

    def __init__(self):
        self._profiles: Dict[str, UserProfile] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[UserProfile]:
        with self._lock:
            profile = self._profiles.get(user_id)
            return profile.model_copy(deep=True) if profile else None

    def put(self, profile: UserProfile) -> None:
        with self._lock:
            self._profiles[profile.user_id] = profile.model_copy(deep=True)

    def exists(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


class JsonFileUserStore(InMemoryUserStore):
    """
    Сховище у JSON-файлі.

    Формат файлу:
        {"<user_id>": {"language": "en", "gender": "other", "city": "",
                       "points": 0, "badges": [], "history": [...]}}

    Файл перезаписується повністю після кожного put (через тимчасовий
    файл і os.replace).
    """

    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Error loading %s: %s", self.path, e)
            return

        if not isinstance(raw, dict):
            logger.warning("User store %s is not a JSON object, ignoring", self.path)
            return

        for user_id, data in raw.items():
            try:
                self._profiles[user_id] = UserProfile.model_validate({**data, "user_id": user_id})
            except (ValidationError, TypeError) as e:
                logger.warning("Skipping malformed profile %r: %s", user_id, e)

        logger.info("Users loaded: %d", len(self._profiles))

    def put(self, profile: UserProfile) -> None:
        """Записати профіль. У пам'яті він з'являється лише після успішного запису файлу."""
        with self._lock:
            profiles = dict(self._profiles)
            profiles[profile.user_id] = profile.model_copy(deep=True)
            self._save(profiles)
            self._profiles = profiles

    def _save(self, profiles: Dict[str, UserProfile]) -> None:
        data = {
            user_id: profile.model_dump(exclude={"user_id"})
            for user_id, profile in profiles.items()
        }

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
