"""Shared fixtures for projdash tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from projdash.config import Config
from projdash.models.projects import ProjectRecord

DATA_DIR = Path(__file__).parent / "data"
SPANISH_PROJECTS_PATH = DATA_DIR / "projects_es.json"
ENGLISH_PROJECTS_PATH = DATA_DIR / "projects_en.json"


class FakePreferences:
    """In-memory PreferenceStore."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))


class FakeSource:
    """ProjectSource returning canned entries or raising."""

    def __init__(
        self, entries: list[dict[str, object]] | None = None, error: Exception | None = None
    ) -> None:
        self.entries = entries or []
        self.error = error
        self.calls = 0

    async def fetch(self) -> list[dict[str, object]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.entries


@pytest.fixture
def scenario_projects() -> list[ProjectRecord]:
    """The three-project collection used by the dashboard scenarios."""
    return [
        ProjectRecord(
            id=1,
            name="E-commerce Platform",
            status="in-progress",
            last_updated="2025-02-20",
            technologies=("React", "Node.js"),
        ),
        ProjectRecord(id=2, name="Blog Personal", status="completed", last_updated="2025-02-15"),
        ProjectRecord(id=3, name="App de Gestión", status="paused", last_updated="2025-02-10"),
    ]


@pytest.fixture
def many_projects() -> list[ProjectRecord]:
    """25 projects cycling through the three statuses, one per day of January."""
    statuses = ("in-progress", "completed", "paused")
    return [
        ProjectRecord(
            id=n,
            name=f"Project {n:02d}",
            status=statuses[n % 3],
            last_updated=f"2025-01-{n:02d}",
        )
        for n in range(1, 26)
    ]


@pytest.fixture
def preferences() -> FakePreferences:
    return FakePreferences()


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config pointing at the Spanish sample file and a temp cache dir."""
    return Config(data_source=str(SPANISH_PROJECTS_PATH), cache_dir=tmp_path / "cache")
