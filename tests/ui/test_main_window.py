"""Tests for the main window, status banner and settings."""

import logging

import pytest

from schach.core.enums import Color
from schach.core.rules import GameStatus
from schach.core.types import D8, E1, E2, E4, E5, E7, F2, F3, G2, G4, H4, Square
from schach.ui.board.board_scene import Overlay
from schach.ui.main_window import MainWindow, status_text
from schach.ui.settings import AppSettings
from schach.ui.styles.theme import BoardTheme, theme_by_name


def _click(window: MainWindow, *squares: Square | None) -> None:
    for sq in squares:
        window._on_square_clicked(sq)


class TestStatusText:
    def test_in_progress(self) -> None:
        assert status_text(GameStatus.in_progress(), Color.WHITE) == "White to move"
        assert status_text(GameStatus.in_progress(), Color.BLACK) == "Black to move"

    def test_check(self) -> None:
        text = status_text(GameStatus.check(Color.BLACK), Color.BLACK)
        assert text == "Check! Black to move"

    def test_checkmate_names_winner(self) -> None:
        text = status_text(GameStatus.checkmate(Color.WHITE), Color.WHITE)
        assert text == "CHECKMATE!\nBlack wins!"

    def test_stalemate(self) -> None:
        assert status_text(GameStatus.stalemate(), Color.BLACK) == "STALEMATE"


class TestMainWindow:
    def test_title_and_initial_status(self) -> None:
        window = MainWindow()
        assert window.windowTitle() == "Schach!"
        assert window.status_message() == "White to move"

    def test_clicks_play_a_move(self) -> None:
        window = MainWindow()
        _click(window, E2, E4)
        assert window.game.side_to_move == Color.BLACK
        assert window.status_message() == "Black to move"
        scene = window._board_view.board_scene
        assert scene.glyph_at(E4) == "♙"
        assert scene.glyph_at(E2) is None
        assert scene.overlay_squares(Overlay.LAST_MOVE) == {E2, E4}

    def test_selection_is_highlighted(self) -> None:
        window = MainWindow()
        _click(window, E2)
        scene = window._board_view.board_scene
        assert scene.overlay_squares(Overlay.SELECTED) == {E2}
        assert len(scene.overlay_squares(Overlay.TARGETS)) == 2

    def test_checkmate_banner(self) -> None:
        window = MainWindow()
        _click(window, F2, F3, E7, E5, G2, G4, D8, H4)
        assert window.game.is_game_over
        assert window.status_message() == "CHECKMATE!\nBlack wins!"
        scene = window._board_view.board_scene
        assert scene.overlay_squares(Overlay.CHECK) == {E1}

    def test_new_game_resets(self) -> None:
        window = MainWindow()
        _click(window, E2, E4)
        window.new_game()
        assert window.game.ply_count == 0
        assert window.status_message() == "White to move"
        scene = window._board_view.board_scene
        assert scene.overlay_squares(Overlay.LAST_MOVE) == frozenset()

    def test_escape_cancels_selection(self) -> None:
        window = MainWindow()
        _click(window, E2)
        window._board_view.square_clicked.emit(None)
        scene = window._board_view.board_scene
        assert scene.overlay_squares(Overlay.SELECTED) == frozenset()
        assert window.game.side_to_move == Color.WHITE

    def test_flip_toggles_orientation(self) -> None:
        window = MainWindow()
        scene = window._board_view.board_scene
        window._on_flip()
        assert scene.is_flipped()
        window._on_flip()
        assert not scene.is_flipped()

    def test_settings_applied(self) -> None:
        settings = AppSettings(flipped=True, show_coordinates=False)
        window = MainWindow(settings)
        scene = window._board_view.board_scene
        assert scene.is_flipped()
        assert not any(label.isVisible() for label in scene._labels)


class TestSettings:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.board_theme == "Classic"
        assert s.log_level_value == logging.WARNING

    def test_log_level_case_insensitive(self) -> None:
        assert AppSettings(log_level="debug").log_level_value == logging.DEBUG

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            AppSettings(log_level="verbose")

    def test_unknown_theme(self) -> None:
        with pytest.raises(ValueError, match="theme"):
            AppSettings(board_theme="Neon")

    def test_theme_lookup_falls_back(self) -> None:
        assert theme_by_name("Blue") == BoardTheme.blue()
        assert theme_by_name("Neon") == BoardTheme.default()

    def test_schach_theme_registered(self) -> None:
        assert AppSettings(board_theme="Schach").board_theme == "Schach"
        theme = theme_by_name("Schach")
        assert theme.coord_color(True) == theme.light_square
        assert theme.square_color(True) == theme.dark_square
