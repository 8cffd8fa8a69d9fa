"""Protocol definitions for services."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from result import Result

from projdash.models.projects import ProjectRecord
from projdash.models.query import QueryState, SortKey, VisibleResult
from projdash.models.views import DashboardView, ProjectDetailView
from projdash.services.intents import Intent


class QueryEngineProtocol(Protocol):
    """Interface for the in-memory query pipeline."""

    @property
    def state(self) -> QueryState: ...

    def set_projects(self, projects: list[ProjectRecord]) -> VisibleResult: ...

    def set_filter(self, category: str) -> VisibleResult: ...

    def set_search_text(self, text: str) -> VisibleResult: ...

    def set_sort_key(self, key: SortKey | str) -> VisibleResult: ...

    def set_page(self, page: int) -> VisibleResult: ...

    def recompute(self) -> VisibleResult: ...

    def find_project(self, project_id: int) -> Result[ProjectRecord, str]: ...


class DashboardServiceProtocol(Protocol):
    """Interface rendering surfaces depend on."""

    async def load(self) -> Result[int, str]: ...

    def dispatch(self, intent: Intent) -> None: ...

    def current_view(self) -> DashboardView: ...

    def on_view(self, listener: Callable[[DashboardView], None]) -> Callable[[], None]: ...

    def set_detail_presenter(
        self, presenter: Callable[[ProjectDetailView], None] | None
    ) -> None: ...
