
"""Preference / high-score store (in-memory or JSON file)"""
import json
import logging
import os
from typing import Any, Dict, List, Optional

from tetris_config import CONFIG, HIGH_SCORES_KEY

logger = logging.getLogger(__name__)


class MemoryStore:
    """Flat key/value store. Subclasses only swap out _read/_write."""
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(data or {})

    def _read(self) -> Dict[str, Any]:
        return dict(self.data)

    def _write(self, data: Dict[str, Any]):
        self.data = dict(data)

    def load_preference(self, key: str, default=None):
        return self._read().get(key, default)

    def save_preference(self, key: str, value):
        data = self._read()
        data[key] = value
        self._write(data)

    def load_high_scores(self) -> List[int]:
        scores = self._read().get(HIGH_SCORES_KEY, [])
        if isinstance(scores, list) and all(isinstance(s, int) and not isinstance(s, bool) for s in scores):
            return scores
        logger.error("Ignoring malformed high-score list: %r", scores)
        return []

    def save_high_scores(self, scores: List[int]):
        self.save_preference(HIGH_SCORES_KEY, list(scores))


class JsonStore(MemoryStore):
    """
    Store backed by one JSON file, re-read on every access.

    Read or write failures are logged and treated as "use the default";
    nothing here raises into the game loop.
    """
    def __init__(self, path: Optional[str] = None):
        super().__init__()
        self.path = path or CONFIG["STORE_PATH"]

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.error("Could not read store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Store %s does not hold an object, ignoring it", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, Any]):
        tmp = self.path + ".tmp"
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            # the store file is only ever replaced whole
            os.replace(tmp, self.path)
        except (OSError, TypeError) as e:
            logger.error("Could not write store %s: %s", self.path, e)
            if os.path.isfile(tmp):
                os.remove(tmp)


class HighScoreTable:
    def __init__(self, store: MemoryStore, limit: Optional[int] = None):
        self.store = store
        self.limit = limit or CONFIG["MAX_HIGH_SCORES"]
        self._scores: List[int] = sorted(store.load_high_scores(), reverse=True)[:self.limit]

    @property
    def scores(self) -> List[int]:
        return list(self._scores)

    @property
    def best(self) -> int:
        return self._scores[0] if self._scores else 0

    def add(self, score: int) -> bool:
        """Insert and persist. True only if the list changed and still holds the score."""
        old = list(self._scores)
        self._scores = sorted(old + [score], reverse=True)[:self.limit]
        self.store.save_high_scores(self._scores)
        return self._scores != old and score in self._scores
