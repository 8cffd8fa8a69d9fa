"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from projdash.data.preferences import JsonPreferenceStore
from projdash.data.sources import source_for
from projdash.services.dashboard_service import DashboardService
from projdash.services.intents import IntentChannel
from projdash.services.query_engine import ProjectQueryEngine

if TYPE_CHECKING:
    from projdash.config import Config
    from projdash.data.protocols import PreferenceStore, ProjectSource


@dataclass
class ServiceContainer:
    """Holds all application services. Built once at startup."""

    source: ProjectSource
    preferences: PreferenceStore
    channel: IntentChannel
    engine: ProjectQueryEngine
    dashboard: DashboardService

    @classmethod
    def create(
        cls,
        config: Config,
        *,
        preferences: PreferenceStore | None = None,
        source: ProjectSource | None = None,
    ) -> ServiceContainer:
        """Wire all dependencies; nothing is loaded until ``dashboard.load()``."""
        source = source or source_for(config.data_source, timeout=config.http_timeout)
        preferences = preferences or JsonPreferenceStore(config.preferences_path)
        channel = IntentChannel()
        engine = ProjectQueryEngine(preferences=preferences, page_size=config.page_size)
        dashboard = DashboardService(engine, source, channel=channel)
        return cls(
            source=source,
            preferences=preferences,
            channel=channel,
            engine=engine,
            dashboard=dashboard,
        )
