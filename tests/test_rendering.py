"""Tests for the pure view-model renderer."""

from __future__ import annotations

from projdash.models.projects import ProjectRecord
from projdash.models.query import QueryState, SortKey
from projdash.services.query_engine import ProjectQueryEngine
from projdash.services.rendering import render, render_card, render_detail, render_pagination


def test_render_cards_and_filters(scenario_projects: list[ProjectRecord]) -> None:
    engine = ProjectQueryEngine(scenario_projects)
    engine.set_filter("in-progress")
    view = render(engine.recompute(), engine.state)

    assert [card.project_id for card in view.cards] == [1]
    card = view.cards[0]
    assert card.status_label == "En Progreso"
    assert card.status_style_key == "status-progress"
    assert card.formatted_date == "20 de febrero de 2025"
    assert card.technologies == ("React", "Node.js")

    assert [chip.key for chip in view.filters] == ["all", "in-progress", "completed", "paused"]
    assert [chip.key for chip in view.filters if chip.active] == ["in-progress"]
    assert view.summary == "1 proyecto"


def test_render_sort_options_mark_active() -> None:
    engine = ProjectQueryEngine()
    engine.set_sort_key(SortKey.STATUS_ASC)
    view = render(engine.recompute(), engine.state)
    assert [o.key for o in view.sort_options] == ["last-updated", "name", "status"]
    assert [o.key for o in view.sort_options if o.active] == ["status"]


def test_render_empty_result() -> None:
    engine = ProjectQueryEngine()
    view = render(engine.recompute(), QueryState())
    assert view.cards == ()
    assert view.summary == "Sin proyectos"
    assert view.pagination.total_pages == 0
    assert view.pagination.pages == ()
    assert not view.pagination.previous_enabled
    assert not view.pagination.next_enabled


def test_render_pagination_edges(many_projects: list[ProjectRecord]) -> None:
    engine = ProjectQueryEngine(many_projects)

    first = render_pagination(engine.recompute())
    assert not first.previous_enabled and first.next_enabled
    assert [(b.page, b.active) for b in first.pages] == [(1, True), (2, False), (3, False)]
    assert first.next_page == 2
    assert first.previous_page == 1

    last = render_pagination(engine.set_page(3))
    assert last.previous_enabled and not last.next_enabled
    assert last.previous_page == 2
    assert last.next_page == 3


def test_render_card_unknown_status_omits_marker() -> None:
    card = render_card(ProjectRecord(id=9, name="Legacy", status="archived", last_updated="x"))
    assert card.status_label is None
    assert card.status_style_key is None
    assert card.formatted_date == ""


def test_render_detail_falls_back_to_raw_status() -> None:
    detail = render_detail(
        ProjectRecord(
            id=9,
            name="Legacy",
            status="archived",
            last_updated="2024-06-30",
            technologies=("COBOL", "JCL"),
            description="Old system",
        )
    )
    assert detail.status_label == "archived"
    assert detail.formatted_date == "30 de junio de 2024"
    assert detail.technologies_text == "COBOL, JCL"
