"""User-configurable settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from schach.ui.styles.theme import THEMES


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.board_theme not in THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())
