"""File-backed preference store."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FILTER_PREFERENCE_KEY = "currentFilter"


class JsonPreferenceStore:
    """Persist string preferences in a small JSON document.

    Read errors fall back to defaults; write errors are logged.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: str = "") -> str:
        value = self._read().get(key)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError:
            logger.warning("Failed writing preferences to %s", self._path, exc_info=True)

    def _read(self) -> dict[str, object]:
        if not self._path.is_file():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Ignoring unreadable preferences file %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}
