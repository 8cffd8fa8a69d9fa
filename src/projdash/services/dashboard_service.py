"""Dashboard service: loads projects and routes user intents to the engine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from projdash.exceptions import DataSourceError
from projdash.models.projects import ProjectRecord
from projdash.models.query import SortKey
from projdash.models.views import DashboardView, ProjectDetailView
from projdash.services.intents import (
    CardSelected,
    FilterSelected,
    Intent,
    IntentChannel,
    PageSelected,
    SearchChanged,
    SortChanged,
)
from projdash.services.rendering import render, render_detail

if TYPE_CHECKING:
    from projdash.data.protocols import ProjectSource
    from projdash.models.query import VisibleResult
    from projdash.services.query_engine import ProjectQueryEngine

logger = logging.getLogger(__name__)

DetailPresenter = Callable[[ProjectDetailView], None]
ViewListener = Callable[[DashboardView], None]


class DashboardService:
    """Glue between a rendering surface, the data source and the query engine."""

    def __init__(
        self,
        engine: ProjectQueryEngine,
        source: ProjectSource,
        *,
        channel: IntentChannel | None = None,
        detail_presenter: DetailPresenter | None = None,
    ) -> None:
        self._engine = engine
        self._source = source
        self._channel = channel or IntentChannel()
        self._detail_presenter = detail_presenter
        self._view_listeners: list[ViewListener] = []
        self._channel.subscribe(self.dispatch)
        self._engine.subscribe(self._on_result)

    @property
    def engine(self) -> ProjectQueryEngine:
        return self._engine

    @property
    def channel(self) -> IntentChannel:
        return self._channel

    def set_detail_presenter(self, presenter: DetailPresenter | None) -> None:
        self._detail_presenter = presenter

    def on_view(self, listener: ViewListener) -> Callable[[], None]:
        """Register a listener for re-rendered views; returns an unsubscribe hook."""
        self._view_listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._view_listeners:
                self._view_listeners.remove(listener)

        return _unsubscribe

    async def load(self) -> Result[int, str]:
        """Fetch projects from the source and install them in the engine.

        Returns:
            Ok with the number of loaded projects, or Err with a message.
            On failure the collection is left empty.
        """
        try:
            entries = await self._source.fetch()
            projects = [ProjectRecord.from_raw(entry) for entry in entries]
        except DataSourceError as exc:
            logger.warning("Failed to load projects: %s", exc)
            self._engine.set_projects(())
            return Err(f"Failed to load projects: {exc}")
        except Exception as exc:
            logger.exception("Unexpected error while loading projects")
            self._engine.set_projects(())
            return Err(f"Failed to load projects: {exc}")

        _warn_duplicate_ids(projects)
        self._engine.set_projects(projects)
        logger.info("Loaded %d projects", len(projects))
        return Ok(len(projects))

    def dispatch(self, intent: Intent) -> None:
        """Apply one intent raised by a rendering surface."""
        if isinstance(intent, FilterSelected):
            self._engine.set_filter(intent.category)
        elif isinstance(intent, SearchChanged):
            self._engine.set_search_text(intent.text)
        elif isinstance(intent, SortChanged):
            try:
                key = SortKey(intent.key)
            except ValueError:
                logger.warning("Ignoring unknown sort key %r", intent.key)
                return
            self._engine.set_sort_key(key)
        elif isinstance(intent, PageSelected):
            self._engine.set_page(intent.page)
        elif isinstance(intent, CardSelected):
            self.select_project(intent.project_id)

    def select_project(self, project_id: int) -> ProjectDetailView | None:
        """Hand the detail view for ``project_id`` to the presenter, if it exists."""
        found = self._engine.find_project(project_id)
        if isinstance(found, Err):
            logger.debug("%s; ignoring card selection", found.err_value)
            return None
        detail = render_detail(found.ok_value)
        if self._detail_presenter is not None:
            self._detail_presenter(detail)
        return detail

    def current_view(self) -> DashboardView:
        result = self._engine.recompute()
        return render(result, self._engine.state)

    def _on_result(self, result: VisibleResult) -> None:
        view = render(result, self._engine.state)
        for listener in list(self._view_listeners):
            listener(view)


def _warn_duplicate_ids(projects: list[ProjectRecord]) -> None:
    seen: set[int] = set()
    for project in projects:
        if project.id in seen:
            logger.warning("Duplicate project id %d; lookups return the first match", project.id)
        seen.add(project.id)
