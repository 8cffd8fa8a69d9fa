"""Project detail dialog; the description is rendered as markdown."""

from __future__ import annotations

from html import escape

import markdown
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QTextBrowser, QVBoxLayout, QWidget

from projdash.models.views import ProjectDetailView
from projdash.ui.theme import COLORS

_MD = markdown.Markdown(extensions=["fenced_code", "tables", "nl2br"])


def render_detail_html(detail: ProjectDetailView) -> str:
    """Build the HTML document shown in the detail dialog."""
    _MD.reset()
    description = _MD.convert(detail.description) if detail.description else ""
    rows = [
        ("Estado", escape(detail.status_label)),
        ("Fecha de actualización", escape(detail.formatted_date)),
        ("Tecnologías", escape(detail.technologies_text)),
    ]
    table = "".join(f"<tr><th>{label}</th><td>{value}</td></tr>" for label, value in rows)
    return f"""<!DOCTYPE html>
<html><head><style>
body {{ font-size: 13px; color: {COLORS["text"]}; line-height: 1.5; }}
h2 {{ margin: 0 0 8px 0; }}
th {{ text-align: left; padding: 2px 12px 2px 0; color: {COLORS["text_muted"]}; }}
</style></head>
<body>
<h2>{escape(detail.name)}</h2>
<table>{table}</table>
<div class="description">{description}</div>
</body></html>"""


class ProjectDetailDialog(QDialog):
    """Modal view of every field of one project."""

    def __init__(self, detail: ProjectDetailView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"Proyecto: {detail.name}")
        self.setMinimumSize(480, 360)

        layout = QVBoxLayout(self)
        browser = QTextBrowser(self)
        browser.setOpenExternalLinks(True)
        browser.setHtml(render_detail_html(detail))
        layout.addWidget(browser)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close, parent=self)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
