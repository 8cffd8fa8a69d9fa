"""Query pipeline: filter, search, sort and paginate the project collection."""

from __future__ import annotations

import logging
import math
import unicodedata
from collections.abc import Callable, Iterable, Sequence
from datetime import date

from result import Err, Ok, Result

from projdash.data.preferences import FILTER_PREFERENCE_KEY
from projdash.data.protocols import PreferenceStore
from projdash.models.projects import ProjectRecord, normalize_status
from projdash.models.query import (
    ALL_STATUSES,
    DEFAULT_PAGE_SIZE,
    STATUS_FILTER_KEYS,
    QueryState,
    SortKey,
    VisibleResult,
)

logger = logging.getLogger(__name__)

ResultListener = Callable[[VisibleResult], None]

# Legacy filter token written by the Spanish front end.
_LEGACY_ALL = "todos"


def normalize_filter(category: str) -> str:
    """Canonical filter key for ``category``; Spanish and legacy tokens are mapped."""
    cleaned = category.strip()
    if cleaned.lower() == _LEGACY_ALL:
        return ALL_STATUSES
    return normalize_status(cleaned)


def filter_projects(projects: Iterable[ProjectRecord], status_filter: str) -> list[ProjectRecord]:
    """Keep projects whose status equals the filter; ``all`` keeps everything."""
    if status_filter == ALL_STATUSES:
        return list(projects)
    return [project for project in projects if project.status == status_filter]


def search_projects(projects: Iterable[ProjectRecord], text: str) -> list[ProjectRecord]:
    """Keep projects whose name contains ``text``, ignoring case."""
    needle = text.casefold()
    if not needle:
        return list(projects)
    return [project for project in projects if needle in project.name.casefold()]


def sort_projects(projects: Iterable[ProjectRecord], sort_key: SortKey) -> list[ProjectRecord]:
    """Stable-sort projects by the given key."""
    match sort_key:
        case SortKey.NAME_ASC:
            return sorted(projects, key=lambda p: collation_key(p.name))
        case SortKey.STATUS_ASC:
            return sorted(projects, key=lambda p: p.status)
        case _:
            # Unparseable dates sort after every real date.
            return sorted(projects, key=lambda p: p.updated_on() or date.min, reverse=True)


def paginate(
    projects: Sequence[ProjectRecord], page: int, page_size: int
) -> tuple[list[ProjectRecord], int]:
    """Return the slice for ``page`` (1-based) and the total page count."""
    total_pages = math.ceil(len(projects) / page_size)
    start = (page - 1) * page_size
    return list(projects[start : start + page_size]), total_pages


def collation_key(text: str) -> tuple[str, str]:
    """Accent- and case-insensitive sort key with a case-sensitive tiebreak."""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, text


def run_query(
    projects: Sequence[ProjectRecord], state: QueryState, page_size: int = DEFAULT_PAGE_SIZE
) -> VisibleResult:
    """Pure filter → search → sort → paginate for the page stored in ``state``."""
    filtered = filter_projects(projects, state.status_filter)
    searched = search_projects(filtered, state.search_text)
    ordered = sort_projects(searched, state.sort_key)
    visible, total_pages = paginate(ordered, state.page, page_size)
    return VisibleResult(
        projects=tuple(visible),
        total_count=len(ordered),
        total_pages=total_pages,
        page=state.page,
        page_size=page_size,
    )


class ProjectQueryEngine:
    """Owns the project collection and the query state for one session.

    Every state-changing call recomputes the visible result and notifies
    subscribers. ``set_filter`` and ``set_search_text`` reset the page to 1;
    ``set_sort_key`` keeps it. ``recompute`` clamps the stored page into
    ``[1, max(total_pages, 1)]``.
    """

    def __init__(
        self,
        projects: Iterable[ProjectRecord] = (),
        *,
        preferences: PreferenceStore | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._projects: tuple[ProjectRecord, ...] = tuple(projects)
        self._preferences = preferences
        self._page_size = max(page_size, 1)
        self._state = QueryState(status_filter=self._restore_filter())
        self._listeners: list[ResultListener] = []

    @property
    def projects(self) -> tuple[ProjectRecord, ...]:
        return self._projects

    @property
    def state(self) -> QueryState:
        return self._state.model_copy()

    @property
    def page_size(self) -> int:
        return self._page_size

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Register a listener for recomputed results; returns an unsubscribe hook."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_projects(self, projects: Iterable[ProjectRecord]) -> VisibleResult:
        """Replace the collection (after a load) and recompute."""
        self._projects = tuple(projects)
        return self._changed()

    def set_filter(self, category: str) -> VisibleResult:
        category = normalize_filter(category)
        self._state.status_filter = category
        self._state.page = 1
        if self._preferences is not None:
            self._preferences.set(FILTER_PREFERENCE_KEY, category)
        return self._changed()

    def set_search_text(self, text: str) -> VisibleResult:
        self._state.search_text = text
        self._state.page = 1
        return self._changed()

    def set_sort_key(self, key: SortKey | str) -> VisibleResult:
        self._state.sort_key = SortKey(key)
        return self._changed()

    def set_page(self, page: int) -> VisibleResult:
        """Move to ``page`` if it exists in the current result; otherwise no-op."""
        current = self.recompute()
        if not 1 <= page <= current.total_pages:
            logger.debug("Ignoring page %d (total pages %d)", page, current.total_pages)
            return current
        self._state.page = page
        return self._changed()

    def recompute(self) -> VisibleResult:
        """Derive the visible page from the collection and current state."""
        result = run_query(self._projects, self._state, self._page_size)
        last_page = max(result.total_pages, 1)
        if self._state.page > last_page:
            self._state.page = last_page
            result = run_query(self._projects, self._state, self._page_size)
        return result

    def find_project(self, project_id: int) -> Result[ProjectRecord, str]:
        for project in self._projects:
            if project.id == project_id:
                return Ok(project)
        return Err(f"Project {project_id} not found")

    def _changed(self) -> VisibleResult:
        result = self.recompute()
        for listener in list(self._listeners):
            listener(result)
        return result

    def _restore_filter(self) -> str:
        if self._preferences is None:
            return ALL_STATUSES
        stored = normalize_filter(self._preferences.get(FILTER_PREFERENCE_KEY, ALL_STATUSES))
        if stored not in STATUS_FILTER_KEYS:
            logger.info("Ignoring unknown saved filter %r", stored)
            return ALL_STATUSES
        return stored
