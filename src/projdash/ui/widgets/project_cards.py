"""Project card list: Qt model over card views and the delegate that paints them."""

from __future__ import annotations

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    QPersistentModelIndex,
    QRect,
    QSize,
    Qt,
    Signal,
)
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import (
    QListView,
    QStyle,
    QStyledItemDelegate,
    QStyleOptionViewItem,
    QWidget,
)

from projdash.models.views import CardView
from projdash.ui.theme import COLORS, status_color

_CARD_BG = QColor(COLORS["card_bg"])
_HOVER_BG = QColor("#FFF8F0")
_SELECTED_BG = QColor(COLORS["primary_light"])
_BORDER_COLOR = QColor("#E8E8E8")


class CardRoles:
    """Named Qt UserRole offsets for CardView data."""

    ID = Qt.ItemDataRole.UserRole
    STATUS_LABEL = Qt.ItemDataRole.UserRole + 1
    STATUS_STYLE_KEY = Qt.ItemDataRole.UserRole + 2
    DATE = Qt.ItemDataRole.UserRole + 3
    TECHNOLOGIES = Qt.ItemDataRole.UserRole + 4


class ProjectCardModel(QAbstractListModel):
    """Model backing the project card list."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._cards: tuple[CardView, ...] = ()

    def set_cards(self, cards: tuple[CardView, ...]) -> None:
        self.beginResetModel()
        self._cards = cards
        self.endResetModel()

    def card_at(self, row: int) -> CardView | None:
        if 0 <= row < len(self._cards):
            return self._cards[row]
        return None

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self._cards)

    def data(
        self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole
    ) -> object:
        if not index.isValid() or index.row() >= len(self._cards):
            return None
        card = self._cards[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return card.name
        if role == CardRoles.ID:
            return card.project_id
        if role == CardRoles.STATUS_LABEL:
            return card.status_label
        if role == CardRoles.STATUS_STYLE_KEY:
            return card.status_style_key
        if role == CardRoles.DATE:
            return card.formatted_date
        if role == CardRoles.TECHNOLOGIES:
            return list(card.technologies)
        return None


class ProjectCardDelegate(QStyledItemDelegate):
    """Card: name, status badge, last-updated line and technology tags."""

    def sizeHint(
        self, option: QStyleOptionViewItem, index: QModelIndex | QPersistentModelIndex
    ) -> QSize:
        return QSize(option.rect.width(), 96)

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionViewItem,
        index: QModelIndex | QPersistentModelIndex,
    ) -> None:
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = option.rect.adjusted(12, 6, -12, -6)

        if option.state & QStyle.StateFlag.State_Selected:
            background = _SELECTED_BG
        elif option.state & QStyle.StateFlag.State_MouseOver:
            background = _HOVER_BG
        else:
            background = _CARD_BG
        painter.setPen(QPen(_BORDER_COLOR, 1))
        painter.setBrush(background)
        painter.drawRoundedRect(rect, 8, 8)

        name = str(index.data(Qt.ItemDataRole.DisplayRole) or "")
        label = index.data(CardRoles.STATUS_LABEL)
        color = status_color(index.data(CardRoles.STATUS_STYLE_KEY))
        formatted_date = str(index.data(CardRoles.DATE) or "")
        technologies = index.data(CardRoles.TECHNOLOGIES) or []

        left = rect.left() + 14
        right = rect.right() - 14
        name_right = right

        if label and color:
            painter.setFont(QFont(painter.font().family(), 9, QFont.Weight.DemiBold))
            badge_w = max(painter.fontMetrics().horizontalAdvance(label) + 16, 64)
            badge_rect = QRect(right - badge_w, rect.top() + 10, badge_w, 18)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(color))
            painter.drawRoundedRect(badge_rect, 9, 9)
            painter.setPen(QColor("#FFFFFF"))
            painter.drawText(badge_rect, Qt.AlignmentFlag.AlignCenter, label)
            name_right = badge_rect.left() - 10

        painter.setFont(QFont(painter.font().family(), 14, QFont.Weight.DemiBold))
        painter.setPen(QColor(COLORS["text"]))
        name_text = painter.fontMetrics().elidedText(
            name, Qt.TextElideMode.ElideRight, max(name_right - left, 0)
        )
        painter.drawText(
            QRect(left, rect.top() + 8, name_right - left, 22),
            Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
            name_text,
        )

        painter.setFont(QFont(painter.font().family(), 11))
        painter.setPen(QColor("#7A848C"))
        if formatted_date:
            painter.drawText(
                QRect(left, rect.top() + 34, right - left, 17),
                Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
                f"Última actualización: {formatted_date}",
            )

        tag_left = left
        painter.setFont(QFont(painter.font().family(), 10))
        fm = painter.fontMetrics()
        for tech in technologies:
            tag_w = fm.horizontalAdvance(tech) + 14
            if tag_left + tag_w > right:
                break
            tag_rect = QRect(tag_left, rect.top() + 58, tag_w, 18)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(COLORS["tag_bg"]))
            painter.drawRoundedRect(tag_rect, 9, 9)
            painter.setPen(QColor(COLORS["tag_text"]))
            painter.drawText(tag_rect, Qt.AlignmentFlag.AlignCenter, tech)
            tag_left += tag_w + 6

        painter.restore()


class ProjectCardList(QListView):
    """Card list that reports clicked project ids."""

    card_selected = Signal(int)  # project id

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = ProjectCardModel(self)
        self.setModel(self._model)
        self.setItemDelegate(ProjectCardDelegate(self))
        self.setMouseTracking(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.clicked.connect(self._on_item_clicked)

    def set_cards(self, cards: tuple[CardView, ...]) -> None:
        self._model.set_cards(cards)

    def _on_item_clicked(self, index: QModelIndex) -> None:
        card = self._model.card_at(index.row())
        if card is not None:
            self.card_selected.emit(card.project_id)
