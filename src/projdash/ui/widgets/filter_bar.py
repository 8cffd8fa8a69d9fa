"""Status filter bar: exclusive chips for All / In progress / Completed / Paused."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from projdash.models.projects import STATUS_STYLE_KEYS
from projdash.models.views import FilterChipView
from projdash.ui.theme import COLORS, chip_style, status_color


class StatusFilterBar(QWidget):
    """Horizontal row of status chips; exactly one is active at a time."""

    filter_selected = Signal(str)  # status filter key

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 2, 0, 2)
        self._layout.setSpacing(6)
        self._layout.addStretch()
        self._buttons: dict[str, QPushButton] = {}
        self._active = ""

    @property
    def active_filter(self) -> str:
        return self._active

    def set_filters(self, chips: tuple[FilterChipView, ...]) -> None:
        """Create chips on first use, then sync labels and the active state."""
        for chip in chips:
            button = self._buttons.get(chip.key)
            if button is None:
                button = QPushButton(chip.label)
                button.setCursor(Qt.CursorShape.PointingHandCursor)
                button.clicked.connect(lambda _checked, key=chip.key: self._on_clicked(key))
                self._layout.insertWidget(len(self._buttons), button)
                self._buttons[chip.key] = button
            button.setText(chip.label)
            button.setStyleSheet(chip_style(_chip_color(chip.key), active=chip.active))
            if chip.active:
                self._active = chip.key

    def _on_clicked(self, key: str) -> None:
        self.filter_selected.emit(key)


def _chip_color(key: str) -> str:
    return status_color(STATUS_STYLE_KEYS.get(key)) or COLORS["primary"]
