"""Typer CLI for projdash: desktop app, list and show commands."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Err

from projdash.config import Config
from projdash.models.query import SortKey
from projdash.models.views import CardView, DashboardView, PaginationView, ProjectDetailView
from projdash.services.container import ServiceContainer
from projdash.services.intents import FilterSelected, PageSelected, SearchChanged, SortChanged

app = typer.Typer(
    name="projdash",
    help="Project dashboard: filter, search, sort and page through project records.",
    invoke_without_command=True,
)

DataOption = Annotated[
    str,
    typer.Option("--data", "-d", help="Path or URL of the projects JSON"),
]
CacheDirOption = Annotated[
    Path | None,
    typer.Option("--cache-dir", help="Directory for saved preferences"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _build_config(data: str, cache_dir: Path | None) -> Config:
    if cache_dir is None:
        return Config(data_source=data)
    return Config(data_source=data, cache_dir=cache_dir)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback(invoke_without_command=True)
def serve(
    ctx: typer.Context,
    data: DataOption = "projects.json",
    cache_dir: CacheDirOption = None,
) -> None:
    """Start the projdash desktop application."""
    if ctx.invoked_subcommand is not None:
        return
    from projdash.ui.app import run_app

    run_app(_build_config(data, cache_dir))


@app.command("list")
def list_projects(
    data: DataOption = "projects.json",
    status: Annotated[
        str | None,
        typer.Option("--status", "-s", help="all, in-progress, completed or paused (saved)"),
    ] = None,
    search: Annotated[str, typer.Option("--search", "-q", help="Name substring")] = "",
    sort: Annotated[SortKey, typer.Option("--sort", help="Sort order")] = SortKey.LAST_UPDATED_DESC,
    page: Annotated[int, typer.Option("--page", "-p", help="Page number")] = 1,
    cache_dir: CacheDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print one page of projects."""
    _configure_logging(verbose)
    container = ServiceContainer.create(_build_config(data, cache_dir))
    loaded = asyncio.run(container.dashboard.load())
    if isinstance(loaded, Err):
        typer.echo(loaded.err_value, err=True)
        raise typer.Exit(code=1)

    channel = container.channel
    if status is not None:
        channel.publish(FilterSelected(status))
    if search:
        channel.publish(SearchChanged(search))
    channel.publish(SortChanged(sort.value))
    if page != 1:
        channel.publish(PageSelected(page))

    typer.echo(format_dashboard(container.dashboard.current_view()))


@app.command()
def show(
    project_id: Annotated[int, typer.Argument(help="Project id")],
    data: DataOption = "projects.json",
    cache_dir: CacheDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print every field of one project."""
    _configure_logging(verbose)
    container = ServiceContainer.create(_build_config(data, cache_dir))
    loaded = asyncio.run(container.dashboard.load())
    if isinstance(loaded, Err):
        typer.echo(loaded.err_value, err=True)
        raise typer.Exit(code=1)

    detail = container.dashboard.select_project(project_id)
    if detail is None:
        typer.echo(f"Project {project_id} not found", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_detail(detail))


def format_dashboard(view: DashboardView) -> str:
    """Render a dashboard view as plain text."""
    active_filter = next((chip.label for chip in view.filters if chip.active), "")
    header = view.summary
    if active_filter:
        header += f" · {active_filter}"
    if view.search_text:
        header += f' · "{view.search_text}"'
    lines = [header, ""]
    lines.extend(format_card(card) for card in view.cards)
    if view.pagination.total_pages:
        lines.append(format_pagination(view.pagination))
    return "\n".join(lines).rstrip()


def format_card(card: CardView) -> str:
    status = f"[{card.status_label}] " if card.status_label else ""
    lines = [f"{status}{card.name} (#{card.project_id})"]
    if card.formatted_date:
        lines.append(f"    Última actualización: {card.formatted_date}")
    if card.technologies:
        lines.append(f"    Tecnologías: {', '.join(card.technologies)}")
    return "\n".join(lines) + "\n"


def format_pagination(pagination: PaginationView) -> str:
    previous = "‹" if pagination.previous_enabled else " "
    following = "›" if pagination.next_enabled else " "
    buttons = " ".join(
        f"[{button.page}]" if button.active else str(button.page) for button in pagination.pages
    )
    return (
        f"Página {pagination.current_page} de {pagination.total_pages}  "
        f"{previous} {buttons} {following}"
    ).rstrip()


def format_detail(detail: ProjectDetailView) -> str:
    return "\n".join(
        [
            f"Proyecto: {detail.name}",
            f"Estado: {detail.status_label}",
            f"Fecha de actualización: {detail.formatted_date}",
            f"Tecnologías: {detail.technologies_text}",
            f"Descripción: {detail.description}",
        ]
    )
