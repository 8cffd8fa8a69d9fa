"""Project record model and its presentation-only derivations."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ProjectStatus(StrEnum):
    """Known project status tokens."""

    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    PAUSED = "paused"


STATUS_LABELS: dict[str, str] = {
    ProjectStatus.IN_PROGRESS: "En Progreso",
    ProjectStatus.COMPLETED: "Completado",
    ProjectStatus.PAUSED: "Pausado",
}
STATUS_STYLE_KEYS: dict[str, str] = {
    ProjectStatus.IN_PROGRESS: "status-progress",
    ProjectStatus.COMPLETED: "status-completed",
    ProjectStatus.PAUSED: "status-paused",
}

# Tokens used by the Spanish-language data files.
_STATUS_ALIASES: dict[str, str] = {
    "en-progreso": ProjectStatus.IN_PROGRESS,
    "completados": ProjectStatus.COMPLETED,
    "pausados": ProjectStatus.PAUSED,
}

_MONTHS_ES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


class ProjectRecord(BaseModel):
    """Immutable snapshot of one project."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    status: str
    last_updated: str = ""
    technologies: tuple[str, ...] = ()
    description: str = ""

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> ProjectRecord:
        """Build a record from one data-source entry.

        Accepts both the English field names and the Spanish ones
        (``nombre``, ``estado``, ``fechaActualizacion``, ``tecnologias``,
        ``descripcion``). No validation beyond best-effort coercion.
        """
        status = _first_str(raw, "status", "estado")
        technologies = raw.get("technologies", raw.get("tecnologias"))
        if isinstance(technologies, str):
            technologies = (technologies,)
        elif not isinstance(technologies, (list, tuple)):
            technologies = ()
        return cls(
            id=_to_int(raw.get("id")),
            name=_first_str(raw, "name", "nombre"),
            status=normalize_status(status),
            last_updated=_first_str(raw, "lastUpdated", "fechaActualizacion", "last_updated"),
            technologies=tuple(str(tech) for tech in technologies),
            description=_first_str(raw, "description", "descripcion"),
        )

    def updated_on(self) -> date | None:
        """Parse ``last_updated`` as a calendar date, or None if unparseable."""
        value = self.last_updated.strip()
        if not value:
            return None
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None

    def formatted_date(self) -> str:
        """Long-form es-ES date, e.g. ``20 de febrero de 2025``."""
        day = self.updated_on()
        if day is None:
            return ""
        return f"{day.day} de {_MONTHS_ES[day.month - 1]} de {day.year}"

    def status_style_key(self) -> str | None:
        return STATUS_STYLE_KEYS.get(self.status)

    def status_label(self) -> str | None:
        return STATUS_LABELS.get(self.status)


def normalize_status(token: str) -> str:
    """Map Spanish status tokens onto the canonical ones; others pass through."""
    cleaned = token.strip()
    return _STATUS_ALIASES.get(cleaned.lower(), cleaned)


def _first_str(raw: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return str(value)
    return ""


def _to_int(value: object) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0
