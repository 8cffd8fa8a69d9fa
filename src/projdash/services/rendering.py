"""Pure rendering of query results into view models."""

from __future__ import annotations

from projdash.models.projects import ProjectRecord, ProjectStatus
from projdash.models.query import ALL_STATUSES, SORT_LABELS, QueryState, SortKey, VisibleResult
from projdash.models.views import (
    CardView,
    DashboardView,
    FilterChipView,
    PageButtonView,
    PaginationView,
    ProjectDetailView,
    SortOptionView,
)

FILTER_LABELS: dict[str, str] = {
    ALL_STATUSES: "Todos",
    ProjectStatus.IN_PROGRESS: "En progreso",
    ProjectStatus.COMPLETED: "Completados",
    ProjectStatus.PAUSED: "Pausados",
}


def render(result: VisibleResult, state: QueryState) -> DashboardView:
    """Build the dashboard view model for one visible result."""
    return DashboardView(
        cards=tuple(render_card(project) for project in result.projects),
        filters=tuple(
            FilterChipView(key=str(key), label=label, active=key == state.status_filter)
            for key, label in FILTER_LABELS.items()
        ),
        sort_options=tuple(
            SortOptionView(key=key.value, label=SORT_LABELS[key], active=key == state.sort_key)
            for key in SortKey
        ),
        search_text=state.search_text,
        pagination=render_pagination(result),
        total_count=result.total_count,
        summary=_summary(result.total_count),
    )


def render_card(project: ProjectRecord) -> CardView:
    return CardView(
        project_id=project.id,
        name=project.name,
        status_label=project.status_label(),
        status_style_key=project.status_style_key(),
        formatted_date=project.formatted_date(),
        technologies=project.technologies,
    )


def render_pagination(result: VisibleResult) -> PaginationView:
    return PaginationView(
        current_page=result.page,
        total_pages=result.total_pages,
        previous_enabled=result.has_previous,
        next_enabled=result.has_next,
        pages=tuple(
            PageButtonView(page=page, active=page == result.page)
            for page in range(1, result.total_pages + 1)
        ),
    )


def render_detail(project: ProjectRecord) -> ProjectDetailView:
    """Every field of ``project``; unknown statuses show their raw token."""
    return ProjectDetailView(
        project_id=project.id,
        name=project.name,
        status=project.status,
        status_label=project.status_label() or project.status,
        formatted_date=project.formatted_date(),
        technologies=project.technologies,
        description=project.description,
    )


def _summary(count: int) -> str:
    if count == 0:
        return "Sin proyectos"
    if count == 1:
        return "1 proyecto"
    return f"{count} proyectos"
