"""Tests for intent routing, loading and detail presentation."""

from __future__ import annotations

import json
import logging

import pytest
from result import Err, Ok

from projdash.config import Config
from projdash.data.preferences import FILTER_PREFERENCE_KEY, JsonPreferenceStore
from projdash.data.sources import JsonFileSource
from projdash.exceptions import DataSourceError
from projdash.models.views import DashboardView, ProjectDetailView
from projdash.services.container import ServiceContainer
from projdash.services.dashboard_service import DashboardService
from projdash.services.intents import (
    CardSelected,
    FilterSelected,
    IntentChannel,
    PageSelected,
    SearchChanged,
    SortChanged,
)
from projdash.services.query_engine import ProjectQueryEngine
from tests.conftest import FakePreferences, FakeSource

RAW_PROJECTS = [
    {
        "id": 1,
        "nombre": "E-commerce Platform",
        "estado": "en-progreso",
        "fechaActualizacion": "2025-02-20",
        "tecnologias": ["React"],
        "descripcion": "Tienda",
    },
    {
        "id": 2,
        "nombre": "Blog Personal",
        "estado": "completados",
        "fechaActualizacion": "2025-02-15",
        "tecnologias": [],
        "descripcion": "",
    },
    {
        "id": 3,
        "nombre": "App de Gestión",
        "estado": "pausados",
        "fechaActualizacion": "2025-02-10",
        "tecnologias": ["Angular"],
        "descripcion": "Inventario",
    },
]


def _service(
    source: FakeSource | None = None, prefs: FakePreferences | None = None
) -> DashboardService:
    engine = ProjectQueryEngine(preferences=prefs or FakePreferences())
    return DashboardService(engine, source or FakeSource(RAW_PROJECTS), channel=IntentChannel())


@pytest.mark.asyncio
async def test_load_installs_projects() -> None:
    service = _service()
    result = await service.load()
    assert isinstance(result, Ok)
    assert result.ok_value == 3
    view = service.current_view()
    assert view.total_count == 3
    assert [card.name for card in view.cards] == [
        "E-commerce Platform",
        "Blog Personal",
        "App de Gestión",
    ]


@pytest.mark.asyncio
async def test_load_failure_leaves_collection_empty(caplog: pytest.LogCaptureFixture) -> None:
    service = _service(FakeSource(error=DataSourceError("Could not read project file")))
    with caplog.at_level(logging.WARNING):
        result = await service.load()
    assert isinstance(result, Err)
    assert "Could not read project file" in result.err_value
    assert service.engine.projects == ()
    assert service.current_view().total_count == 0
    assert "Failed to load projects" in caplog.text


@pytest.mark.asyncio
async def test_load_unexpected_error_is_reported_not_raised() -> None:
    service = _service(FakeSource(error=RuntimeError("boom")))
    result = await service.load()
    assert isinstance(result, Err)
    assert "boom" in result.err_value
    assert service.engine.projects == ()


@pytest.mark.asyncio
async def test_load_tolerates_odd_field_values() -> None:
    entries = json.loads(
        '[{"id": 1e400, "nombre": "A", "estado": "pausados", "tecnologias": 5}]'
    )
    service = _service(FakeSource(entries))
    result = await service.load()
    assert isinstance(result, Ok)
    (project,) = service.engine.projects
    assert project.id == 0
    assert project.technologies == ()
    assert project.status == "paused"


@pytest.mark.asyncio
async def test_load_record_build_error_is_reported_not_raised(
    caplog: pytest.LogCaptureFixture,
) -> None:
    service = _service(FakeSource([5]))  # type: ignore[list-item]
    with caplog.at_level(logging.ERROR):
        result = await service.load()
    assert isinstance(result, Err)
    assert service.engine.projects == ()
    assert service.current_view().total_count == 0
    assert "Unexpected error while loading projects" in caplog.text


@pytest.mark.asyncio
async def test_intents_drive_the_engine() -> None:
    service = _service()
    await service.load()
    channel = service.channel

    channel.publish(FilterSelected("in-progress"))
    assert [c.name for c in service.current_view().cards] == ["E-commerce Platform"]

    channel.publish(FilterSelected("all"))
    channel.publish(SearchChanged("BLOG"))
    assert [c.name for c in service.current_view().cards] == ["Blog Personal"]

    channel.publish(SearchChanged(""))
    channel.publish(SortChanged("name"))
    view = service.current_view()
    assert [c.name for c in view.cards][0] == "App de Gestión"
    assert next(o for o in view.sort_options if o.active).key == "name"

    channel.publish(PageSelected(5))
    assert service.engine.state.page == 1


@pytest.mark.asyncio
async def test_unknown_sort_key_is_ignored() -> None:
    service = _service()
    await service.load()
    service.dispatch(SortChanged("size"))
    assert service.engine.state.sort_key.value == "last-updated"


@pytest.mark.asyncio
async def test_filter_intent_persists_preference() -> None:
    prefs = FakePreferences()
    service = _service(prefs=prefs)
    await service.load()
    service.dispatch(FilterSelected("paused"))
    assert prefs.values[FILTER_PREFERENCE_KEY] == "paused"


@pytest.mark.asyncio
async def test_views_published_on_every_change() -> None:
    service = _service()
    views: list[DashboardView] = []
    service.on_view(views.append)
    await service.load()
    service.dispatch(FilterSelected("completed"))
    assert len(views) == 2
    assert views[-1].summary == "1 proyecto"
    assert next(chip for chip in views[-1].filters if chip.active).key == "completed"


@pytest.mark.asyncio
async def test_card_selected_presents_detail() -> None:
    shown: list[ProjectDetailView] = []
    service = _service()
    service.set_detail_presenter(shown.append)
    await service.load()

    service.channel.publish(CardSelected(3))
    assert len(shown) == 1
    detail = shown[0]
    assert detail.name == "App de Gestión"
    assert detail.status_label == "Pausado"
    assert detail.formatted_date == "10 de febrero de 2025"
    assert detail.technologies_text == "Angular"
    assert detail.description == "Inventario"


@pytest.mark.asyncio
async def test_card_selected_unknown_id_is_silent_noop() -> None:
    shown: list[ProjectDetailView] = []
    service = _service()
    service.set_detail_presenter(shown.append)
    await service.load()
    service.channel.publish(CardSelected(42))
    assert shown == []
    assert service.select_project(42) is None


@pytest.mark.asyncio
async def test_duplicate_ids_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    entries = [*RAW_PROJECTS, {**RAW_PROJECTS[0], "nombre": "Copy"}]
    service = _service(FakeSource(entries))
    with caplog.at_level(logging.WARNING):
        await service.load()
    assert "Duplicate project id 1" in caplog.text
    found = service.engine.find_project(1)
    assert isinstance(found, Ok)
    assert found.ok_value.name == "E-commerce Platform"


def test_intent_channel_unsubscribe() -> None:
    channel = IntentChannel()
    received: list[object] = []
    unsubscribe = channel.subscribe(received.append)
    channel.publish(PageSelected(2))
    unsubscribe()
    channel.publish(PageSelected(3))
    assert received == [PageSelected(2)]


@pytest.mark.asyncio
async def test_container_wires_file_source_and_json_preferences(test_config: Config) -> None:
    container = ServiceContainer.create(test_config)
    assert isinstance(container.source, JsonFileSource)
    assert isinstance(container.preferences, JsonPreferenceStore)
    assert container.engine.page_size == test_config.page_size

    loaded = await container.dashboard.load()
    assert isinstance(loaded, Ok)
    container.channel.publish(FilterSelected("completed"))
    assert [c.name for c in container.dashboard.current_view().cards] == ["Blog Personal"]
    assert test_config.preferences_path.is_file()

    restored = ServiceContainer.create(test_config)
    assert restored.engine.state.status_filter == "completed"
