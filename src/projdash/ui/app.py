"""PySide6 application bootstrap: dashboard window, service wiring, run_app()."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from PySide6.QtCore import QSettings
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)
from result import Err

from projdash.models.views import DashboardView, ProjectDetailView
from projdash.services.container import ServiceContainer
from projdash.services.intents import (
    CardSelected,
    FilterSelected,
    PageSelected,
    SearchChanged,
    SortChanged,
)
from projdash.ui.async_bridge import cancel_pending, create_event_loop, schedule
from projdash.ui.detail_dialog import ProjectDetailDialog
from projdash.ui.preferences import SETTINGS_APPLICATION, SETTINGS_ORGANIZATION, QtPreferenceStore
from projdash.ui.theme import COLORS, build_stylesheet
from projdash.ui.widgets.filter_bar import StatusFilterBar
from projdash.ui.widgets.pagination_bar import PaginationBar
from projdash.ui.widgets.project_cards import ProjectCardList

if TYPE_CHECKING:
    from projdash.config import Config

logger = logging.getLogger(__name__)


class DashboardWindow(QMainWindow):
    """Single-page dashboard: filters, search, sort, cards and pagination."""

    def __init__(self, services: ServiceContainer) -> None:
        super().__init__()
        self._services = services
        self._dashboard = services.dashboard
        self._channel = services.channel

        self.setWindowTitle("Dashboard de Proyectos")
        self.setMinimumSize(760, 600)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 12, 16, 8)
        layout.setSpacing(8)

        header = QLabel("Proyectos")
        header.setStyleSheet("font-weight: 700; font-size: 20px;")
        layout.addWidget(header)

        # ── Search + sort ──
        controls = QHBoxLayout()
        self._search_input = QLineEdit()
        self._search_input.setPlaceholderText("Buscar proyectos...")
        self._search_input.setClearButtonEnabled(True)
        controls.addWidget(self._search_input, stretch=1)

        self._sort_combo = QComboBox()
        controls.addWidget(QLabel("Ordenar por:"))
        controls.addWidget(self._sort_combo)
        layout.addLayout(controls)

        # ── Filters, cards, pagination ──
        self._filter_bar = StatusFilterBar()
        layout.addWidget(self._filter_bar)

        self._cards = ProjectCardList()
        layout.addWidget(self._cards, stretch=1)

        self._empty_label = QLabel("No hay proyectos para mostrar")
        self._empty_label.setStyleSheet(f"color: {COLORS['text_muted']}; padding: 24px;")
        self._empty_label.setVisible(False)
        layout.addWidget(self._empty_label)

        self._pagination = PaginationBar()
        layout.addWidget(self._pagination)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel("Cargando...")
        self._status_bar.addWidget(self._status_label)

        # ── Wire intents ──
        self._filter_bar.filter_selected.connect(
            lambda key: self._channel.publish(FilterSelected(key))
        )
        self._search_input.textChanged.connect(
            lambda text: self._channel.publish(SearchChanged(text))
        )
        self._sort_combo.currentIndexChanged.connect(self._on_sort_changed)
        self._pagination.page_selected.connect(
            lambda page: self._channel.publish(PageSelected(page))
        )
        self._cards.card_selected.connect(
            lambda project_id: self._channel.publish(CardSelected(project_id))
        )

        self._dashboard.on_view(self.apply_view)
        self._dashboard.set_detail_presenter(self._show_detail)
        self.apply_view(self._dashboard.current_view())
        self._restore_state()

    def apply_view(self, view: DashboardView) -> None:
        """Sync every widget with a freshly rendered view."""
        self._filter_bar.set_filters(view.filters)
        self._sync_sort_options(view)
        if self._search_input.text() != view.search_text:
            self._search_input.blockSignals(True)
            self._search_input.setText(view.search_text)
            self._search_input.blockSignals(False)
        self._cards.set_cards(view.cards)
        self._empty_label.setVisible(not view.cards)
        self._pagination.set_pagination(view.pagination)
        self._status_label.setText(view.summary)

    async def initialize(self) -> None:
        """Load projects from the configured source."""
        result = await self._dashboard.load()
        if isinstance(result, Err):
            self._status_label.setText(result.err_value)

    def _sync_sort_options(self, view: DashboardView) -> None:
        self._sort_combo.blockSignals(True)
        if self._sort_combo.count() != len(view.sort_options):
            self._sort_combo.clear()
            for option in view.sort_options:
                self._sort_combo.addItem(option.label, userData=option.key)
        for row, option in enumerate(view.sort_options):
            if option.active:
                self._sort_combo.setCurrentIndex(row)
        self._sort_combo.blockSignals(False)

    def _on_sort_changed(self, _index: int) -> None:
        key = self._sort_combo.currentData()
        if key:
            self._channel.publish(SortChanged(str(key)))

    def _show_detail(self, detail: ProjectDetailView) -> None:
        ProjectDetailDialog(detail, self).exec()

    def _restore_state(self) -> None:
        settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        geometry = settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)  # type: ignore[arg-type]

    def closeEvent(self, event: QCloseEvent) -> None:
        settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        settings.setValue("geometry", self.saveGeometry())
        settings.sync()
        cancel_pending()
        event.accept()


def run_app(config: Config) -> None:
    """Entry point: create QApplication, event loop, main window, and run."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("Dashboard de Proyectos")
    app.setOrganizationName(SETTINGS_ORGANIZATION)
    app.setStyleSheet(build_stylesheet())

    loop = create_event_loop(app)

    services = ServiceContainer.create(config, preferences=QtPreferenceStore())
    window = DashboardWindow(services)
    window.show()

    schedule(window.initialize())

    with loop:
        loop.run_forever()
