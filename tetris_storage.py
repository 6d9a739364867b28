"""High-score persistence over a small key-value contract"""
import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

KEY_SCORE = "high_score"
KEY_NAME = "high_score_name"
KEY_COUNTRY = "high_score_country"

DEFAULT_NAME = "Anonymous"


class MemoryStore:
    """In-process key-value store."""
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Key-value store kept as one JSON object on disk.

    Errors (unreadable file, bad JSON, read-only directory) propagate; the
    caller decides whether they matter.
    """
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)


@dataclass(frozen=True)
class HighScore:
    score: int = 0
    name: Optional[str] = None
    country: Optional[str] = None


class HighScoreStore:
    """Best-effort access to the stored record. Store faults are logged and ignored."""
    def __init__(self, store):
        self.store = store

    def _get(self, key: str) -> Optional[str]:
        try:
            return self.store.get(key)
        except Exception as exc:
            logger.warning("could not read %s: %s", key, exc)
            return None

    def _set(self, key: str, value: str) -> bool:
        try:
            self.store.set(key, value)
            return True
        except Exception as exc:
            logger.warning("could not write %s: %s", key, exc)
            return False

    def load(self) -> HighScore:
        raw = self._get(KEY_SCORE)
        score = 0
        if raw:
            try:
                score = int(raw, 10)
            except ValueError:
                logger.warning("ignoring malformed stored high score %r", raw)
        return HighScore(score, self._get(KEY_NAME) or None, self._get(KEY_COUNTRY) or None)

    def save_score(self, score: int) -> bool:
        return self._set(KEY_SCORE, str(score))

    def save_holder(self, name: str, country: str) -> Tuple[str, Optional[str]]:
        name = name.strip() or DEFAULT_NAME
        country = country.strip()
        self._set(KEY_NAME, name)
        self._set(KEY_COUNTRY, country)
        return name, country or None
