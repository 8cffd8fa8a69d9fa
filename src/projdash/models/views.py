"""Presentation-neutral view models produced from visible results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CardView(BaseModel):
    """One project card."""

    model_config = ConfigDict(frozen=True)

    project_id: int
    name: str
    status_label: str | None = None
    status_style_key: str | None = None
    formatted_date: str = ""
    technologies: tuple[str, ...] = ()


class FilterChipView(BaseModel):
    """A status filter button."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    active: bool = False


class SortOptionView(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    active: bool = False


class PageButtonView(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    active: bool = False


class PaginationView(BaseModel):
    """Previous/next affordances and numbered page buttons."""

    model_config = ConfigDict(frozen=True)

    current_page: int = 1
    total_pages: int = 0
    previous_enabled: bool = False
    next_enabled: bool = False
    pages: tuple[PageButtonView, ...] = ()

    @property
    def previous_page(self) -> int:
        return max(self.current_page - 1, 1)

    @property
    def next_page(self) -> int:
        return min(self.current_page + 1, max(self.total_pages, 1))


class DashboardView(BaseModel):
    """Everything a rendering surface needs to draw the dashboard."""

    model_config = ConfigDict(frozen=True)

    cards: tuple[CardView, ...] = ()
    filters: tuple[FilterChipView, ...] = ()
    sort_options: tuple[SortOptionView, ...] = ()
    search_text: str = ""
    pagination: PaginationView = PaginationView()
    total_count: int = 0
    summary: str = ""


class ProjectDetailView(BaseModel):
    """All fields of one project, formatted for the detail presenter."""

    model_config = ConfigDict(frozen=True)

    project_id: int
    name: str
    status: str
    status_label: str
    formatted_date: str = ""
    technologies: tuple[str, ...] = ()
    description: str = ""

    @property
    def technologies_text(self) -> str:
        return ", ".join(self.technologies)
