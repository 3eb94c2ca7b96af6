"""Visual theme constants and QSS styles for Checkie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and pieces."""

    light_square: QColor
    dark_square: QColor
    white_piece: QColor
    black_piece: QColor
    piece_outline: QColor
    king_marker: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # offered move targets

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 227, 171),  # cream
            dark_square=QColor(209, 140, 71),  # amber
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(60, 60, 60),
            king_marker=QColor(212, 175, 55),  # gold
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            white_piece=QColor(245, 240, 230),
            black_piece=QColor(40, 30, 25),
            piece_outline=QColor(20, 15, 10),
            king_marker=QColor(212, 175, 55),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(200, 40, 40),
            piece_outline=QColor(50, 50, 50),
            king_marker=QColor(212, 175, 55),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Look up a preset by name, case-insensitively, falling back to Classic.

        Accepts the menu names in ``THEME_NAMES`` and the factory names
        (``default``, ``walnut``, ``green``).
        """
        presets = {
            "classic": cls.default,
            "default": cls.default,
            "walnut": cls.walnut,
            "green": cls.green,
        }
        return presets.get(name.strip().lower(), cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Walnut", "Green")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
