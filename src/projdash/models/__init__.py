"""Pydantic models for projdash."""

from projdash.models.projects import (
    STATUS_LABELS,
    STATUS_STYLE_KEYS,
    ProjectRecord,
    ProjectStatus,
    normalize_status,
)
from projdash.models.query import (
    ALL_STATUSES,
    DEFAULT_PAGE_SIZE,
    SORT_LABELS,
    STATUS_FILTER_KEYS,
    QueryState,
    SortKey,
    VisibleResult,
)
from projdash.models.views import (
    CardView,
    DashboardView,
    FilterChipView,
    PageButtonView,
    PaginationView,
    ProjectDetailView,
    SortOptionView,
)

__all__ = [
    "CardView",
    "DashboardView",
    "FilterChipView",
    "PageButtonView",
    "PaginationView",
    "ProjectDetailView",
    "ProjectRecord",
    "ProjectStatus",
    "QueryState",
    "SortKey",
    "SortOptionView",
    "VisibleResult",
    "ALL_STATUSES",
    "DEFAULT_PAGE_SIZE",
    "SORT_LABELS",
    "STATUS_FILTER_KEYS",
    "STATUS_LABELS",
    "STATUS_STYLE_KEYS",
    "normalize_status",
]
