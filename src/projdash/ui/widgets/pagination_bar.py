"""Pagination bar: previous/next arrows and numbered page buttons."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from projdash.models.views import PaginationView
from projdash.ui.theme import COLORS, chip_style


class PaginationBar(QWidget):
    """Rebuilt from a PaginationView after every recompute."""

    page_selected = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 6, 0, 6)
        layout.setSpacing(4)
        layout.addStretch()

        self._previous = QPushButton("‹")
        self._previous.setStyleSheet(chip_style(COLORS["primary"], active=False))
        layout.addWidget(self._previous)

        self._pages = QHBoxLayout()
        self._pages.setSpacing(4)
        layout.addLayout(self._pages)

        self._next = QPushButton("›")
        self._next.setStyleSheet(chip_style(COLORS["primary"], active=False))
        layout.addWidget(self._next)
        layout.addStretch()

        self._view = PaginationView()
        self._previous.clicked.connect(lambda: self.page_selected.emit(self._view.previous_page))
        self._next.clicked.connect(lambda: self.page_selected.emit(self._view.next_page))
        self.set_pagination(self._view)

    def set_pagination(self, view: PaginationView) -> None:
        self._view = view
        while self._pages.count():
            item = self._pages.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for button_view in view.pages:
            button = QPushButton(str(button_view.page))
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setStyleSheet(chip_style(COLORS["primary"], active=button_view.active))
            button.clicked.connect(
                lambda _checked, page=button_view.page: self.page_selected.emit(page)
            )
            self._pages.addWidget(button)

        self._previous.setEnabled(view.previous_enabled)
        self._next.setEnabled(view.next_enabled)
        self.setVisible(view.total_pages > 0)
