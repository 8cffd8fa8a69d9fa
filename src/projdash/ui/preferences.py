"""QSettings-backed preference store for the desktop app."""

from __future__ import annotations

from PySide6.QtCore import QSettings

SETTINGS_ORGANIZATION = "projdash"
SETTINGS_APPLICATION = "ProjectDashboard"


class QtPreferenceStore:
    """Preference store on top of the platform's native QSettings."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)

    @property
    def settings(self) -> QSettings:
        return self._settings

    def get(self, key: str, default: str = "") -> str:
        value = self._settings.value(key, default)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
