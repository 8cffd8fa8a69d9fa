"""Query state and visible-result models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from projdash.models.projects import ProjectRecord, ProjectStatus

ALL_STATUSES = "all"
STATUS_FILTER_KEYS: tuple[str, ...] = (ALL_STATUSES, *(status.value for status in ProjectStatus))
DEFAULT_PAGE_SIZE = 10


class SortKey(StrEnum):
    """Supported orderings for the project list."""

    LAST_UPDATED_DESC = "last-updated"
    NAME_ASC = "name"
    STATUS_ASC = "status"


SORT_LABELS: dict[str, str] = {
    SortKey.LAST_UPDATED_DESC: "Última actualización",
    SortKey.NAME_ASC: "Nombre",
    SortKey.STATUS_ASC: "Estado",
}


class QueryState(BaseModel):
    """Transient filter/search/sort/page selections for one session."""

    model_config = ConfigDict(validate_assignment=True)

    status_filter: str = ALL_STATUSES
    search_text: str = ""
    sort_key: SortKey = SortKey.LAST_UPDATED_DESC
    page: int = Field(default=1, ge=1)


class VisibleResult(BaseModel):
    """One page of the query pipeline's output plus pagination metadata."""

    model_config = ConfigDict(frozen=True)

    projects: tuple[ProjectRecord, ...] = ()
    total_count: int = 0
    total_pages: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
