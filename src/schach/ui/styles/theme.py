"""Board colour presets and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field

from PyQt6.QtGui import QColor

# Overlays are translucent so they read on any square colour.
_SELECTED = (255, 255, 0, 100)
_TARGET = (0, 0, 0, 40)
_CHECK = (255, 0, 0, 120)
_LAST_MOVE = (155, 199, 0, 105)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for squares, pieces and overlays.

    Coordinates are drawn in the opposite square colour, so a preset only
    needs its two square colours and optionally its piece fills.
    """

    light_square: QColor
    dark_square: QColor
    white_piece: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    black_piece: QColor = field(default_factory=lambda: QColor(20, 20, 20))
    highlight_from: QColor = field(default_factory=lambda: QColor(*_SELECTED))
    highlight_to: QColor = field(default_factory=lambda: QColor(*_TARGET))
    highlight_check: QColor = field(default_factory=lambda: QColor(*_CHECK))
    last_move: QColor = field(default_factory=lambda: QColor(*_LAST_MOVE))

    def square_color(self, is_dark: bool) -> QColor:
        return self.dark_square if is_dark else self.light_square

    def coord_color(self, is_dark: bool) -> QColor:
        """Coordinate label colour on a dark or light square."""
        return self.light_square if is_dark else self.dark_square

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(QColor(240, 217, 181), QColor(181, 136, 99))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(QColor(222, 227, 230), QColor(140, 162, 173))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(QColor(236, 238, 220), QColor(112, 149, 120))

    @classmethod
    def schach(cls) -> BoardTheme:
        """Near-white and near-black squares with tinted pieces."""
        return cls(
            light_square=QColor(230, 230, 230),
            dark_square=QColor(26, 26, 26),
            white_piece=QColor(255, 204, 204),
            black_piece=QColor(0, 51, 51),
            highlight_from=QColor(230, 26, 26, 140),
        )


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
    "Schach": BoardTheme.schach,
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a preset, falling back to the classic theme."""
    return THEMES.get(name, BoardTheme.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QWidget#central {
    background: #2b2b2b;
}

QLabel#statusLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
    font-size: 22px;
    font-weight: bold;
    padding: 4px;
}

QMenuBar, QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #264f78;
}
"""
