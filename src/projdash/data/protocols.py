"""Protocol definitions for data access."""

from __future__ import annotations

from typing import Any, Protocol


class ProjectSource(Protocol):
    """Somewhere the raw project list can be fetched from."""

    async def fetch(self) -> list[dict[str, Any]]: ...


class PreferenceStore(Protocol):
    """Key-value store that survives across sessions."""

    def get(self, key: str, default: str = "") -> str: ...

    def set(self, key: str, value: str) -> None: ...
