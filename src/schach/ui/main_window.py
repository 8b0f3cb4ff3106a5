"""MainWindow — top-level window assembling the board and the status line."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from schach.core.enums import Color, StatusKind
from schach.core.move import Move
from schach.core.rules import GameStatus
from schach.core.types import Square
from schach.game.selection import SelectionController
from schach.game.state import GameState
from schach.ui.board.board_view import BoardView
from schach.ui.settings import AppSettings
from schach.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)


def status_text(status: GameStatus, side_to_move: Color) -> str:
    """Banner text for the current game status."""
    if status.kind == StatusKind.CHECKMATE:
        return f"CHECKMATE!\n{status.winner} wins!"
    if status.kind == StatusKind.STALEMATE:
        return "STALEMATE"
    if status.kind == StatusKind.CHECK:
        return f"Check! {side_to_move} to move"
    return f"{side_to_move} to move"


class MainWindow(QMainWindow):
    """Main application window for Schach."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Schach!")
        self.setMinimumSize(480, 560)
        self.resize(800, 880)

        self._settings = settings if settings is not None else AppSettings()
        self._selection = SelectionController()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        central.setObjectName("central")
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status_label)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        events = self._selection.events
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_move.append(self._on_move)
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(theme_by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def game(self) -> GameState:
        return self._selection.state

    def new_game(self) -> None:
        """Discard the current game and start from the initial position."""
        _LOGGER.info("Starting a new game")
        self._selection.reset(GameState())
        self._refresh()

    def status_message(self) -> str:
        return self._status_label.text()

    # ── Handlers ─────────────────────────────────────────────────────────

    def _on_square_clicked(self, square: Square | None) -> None:
        self._selection.click(square)

    def _on_selection_changed(
        self, selected: Square | None, targets: frozenset[Square]
    ) -> None:
        self._board_view.board_scene.show_selection(selected, targets)

    def _on_move(self, move: Move, status: GameStatus) -> None:
        self._refresh()

    def _on_game_over(self, status: GameStatus) -> None:
        _LOGGER.info("Game finished: %s", status)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        self._settings.flipped = not scene.is_flipped()
        scene.set_flipped(self._settings.flipped)
        self._refresh()

    def _refresh(self) -> None:
        game = self.game
        status = game.status()
        scene = self._board_view.board_scene
        scene.set_position(game.current_position())
        scene.show_selection(self._selection.selected, self._selection.highlights)
        scene.highlight_last_move(game.last_move)
        scene.highlight_check(status)
        self._status_label.setText(status_text(status, game.side_to_move))
