"""Theme, color definitions and QSS stylesheet."""

from __future__ import annotations

# ── Color palette: light theme with orange accents ──

COLORS = {
    "primary": "#E67E22",
    "primary_light": "#FFF3E0",
    "bg": "#FFFFFF",
    "panel_bg": "#FAFAFA",
    "card_bg": "#FFFFFF",
    "border": "#E0E0E0",
    "text": "#1A1A1A",
    "text_muted": "#999999",
    "tag_bg": "#EEF1F4",
    "tag_text": "#4A5560",
    "status_progress": "#2D7FF9",
    "status_completed": "#27AE60",
    "status_paused": "#F39C12",
    "error": "#E74C3C",
}

STATUS_COLORS = {
    "status-progress": COLORS["status_progress"],
    "status-completed": COLORS["status_completed"],
    "status-paused": COLORS["status_paused"],
}

# ── Fonts ──

FONT_FAMILY = "-apple-system, 'SF Pro Text', 'Helvetica Neue', 'Segoe UI', Roboto, sans-serif"


def status_color(style_key: str | None) -> str | None:
    """Map a status style key to its badge color; None for unknown keys."""
    if style_key is None:
        return None
    return STATUS_COLORS.get(style_key)


def chip_style(color: str, *, active: bool) -> str:
    """QSS for a rounded filter/page chip."""
    if active:
        return (
            "QPushButton { "
            f"background-color: {color}; color: white; "
            "border: none; border-radius: 12px; padding: 4px 12px; "
            "font-size: 12px; font-weight: 600; }"
        )
    return (
        "QPushButton { "
        f"background-color: transparent; color: {COLORS['text_muted']}; "
        f"border: 1px solid {COLORS['border']}; border-radius: 12px; "
        "padding: 4px 12px; font-size: 12px; font-weight: 500; }"
        "QPushButton:hover { "
        f"border-color: {color}; color: {color}; }}"
        "QPushButton:disabled { "
        f"color: {COLORS['border']}; border-color: {COLORS['border']}; }}"
    )


# ── QSS Stylesheet ──


def build_stylesheet() -> str:
    """Build the application-wide QSS stylesheet."""
    c = COLORS
    return f"""
/* ── Global ── */
QWidget {{
    font-family: {FONT_FAMILY};
    font-size: 13px;
    color: {c["text"]};
    background-color: {c["bg"]};
}}

QMainWindow {{
    background-color: {c["bg"]};
}}

QStatusBar {{
    background-color: {c["panel_bg"]};
    border-top: 1px solid {c["border"]};
    color: {c["text_muted"]};
    font-size: 12px;
}}

QListView {{
    background-color: {c["panel_bg"]};
    border: none;
    outline: none;
}}

QLineEdit {{
    border-radius: 8px;
    padding: 6px 10px;
    border: 1px solid {c["border"]};
    background-color: {c["bg"]};
}}

QLineEdit:focus {{
    border-color: {c["primary"]};
}}

QComboBox {{
    border-radius: 8px;
    padding: 5px 10px;
    border: 1px solid {c["border"]};
    background-color: {c["bg"]};
}}

QTextBrowser {{
    border: none;
    background-color: {c["bg"]};
}}

QDialog {{
    background-color: {c["bg"]};
}}
"""
