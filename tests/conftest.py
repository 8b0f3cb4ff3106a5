"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from schach.core.enums import Color
from schach.core.piece import Piece
from schach.core.position import Position
from schach.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

PositionFactory = Callable[..., Position]


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in request.node.path.parts


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from entries such as ``"Ke1"`` or ``"qd8"``.

    Uppercase letters are white pieces, lowercase black.
    """

    def factory(*pieces: str, to_move: Color = Color.WHITE) -> Position:
        placement = {parse_square(p[1:]): Piece.from_char(p[0]) for p in pieces}
        return Position.from_pieces(placement, to_move)

    return factory


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
