"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from schach.core.enums import Color, PieceType, StatusKind
from schach.core.piece import Piece
from schach.core.types import ALL_SQUARES, Square, make_square
from schach.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from schach.core.move import Move
    from schach.core.position import Position
    from schach.core.rules import GameStatus


class Overlay(IntEnum):
    """Highlight layers, lowest first."""

    LAST_MOVE = 1
    SELECTED = 2
    TARGETS = 3
    CHECK = 4


# Stacking: squares < overlays < coordinates < pieces.
_Z_SQUARE = 0.0
_Z_OVERLAY_BASE = 0.1
_Z_COORD = 0.9
_Z_PIECE = 1.0


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, overlays and Unicode piece glyphs.

    The scene holds no game logic; clicks are reported as squares and the
    owner decides what they mean.

    Signals:
        square_clicked(object): A :class:`Square`, or ``None`` off the board.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        self._squares: dict[Square, QGraphicsRectItem] = {}
        self._labels: list[QGraphicsSimpleTextItem] = []
        self._glyphs: dict[Square, tuple[Piece, QGraphicsSimpleTextItem]] = {}
        self._overlays: dict[Overlay, dict[Square, QGraphicsRectItem]] = {
            layer: {} for layer in Overlay
        }
        self._overlay_colors: dict[Overlay, QColor] = {}

        self.setSceneRect(0, 0, 8 * self.TILE, 8 * self.TILE)
        self._rebuild()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Show *position*; only squares whose occupant changed are redrawn."""
        for sq in ALL_SQUARES:
            piece = position.board[sq]
            current = self._glyphs.get(sq)
            if current is not None and current[0] == piece:
                continue
            if current is not None:
                self.removeItem(current[1])
                del self._glyphs[sq]
            if piece is not None:
                self._glyphs[sq] = (piece, self._make_glyph(sq, piece))

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation; overlays are dropped."""
        if flipped == self._flipped:
            return
        self._flipped = flipped
        for layer in Overlay:
            self._set_overlay(layer, ())
        self._rebuild()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._rebuild()

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for label in self._labels:
            label.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        if not visible:
            self._set_overlay(Overlay.TARGETS, ())

    def show_selection(
        self, selected: Square | None, targets: Iterable[Square]
    ) -> None:
        """Mark the selected piece and, if enabled, its destinations."""
        if selected is None:
            self._set_overlay(Overlay.SELECTED, ())
            self._set_overlay(Overlay.TARGETS, ())
            return
        self._set_overlay(Overlay.SELECTED, (selected,))
        self._set_overlay(Overlay.TARGETS, targets if self._show_legal_moves else ())

    def highlight_last_move(self, move: Move | None) -> None:
        squares = () if move is None else (move.from_sq, move.to_sq)
        self._set_overlay(Overlay.LAST_MOVE, squares)

    def highlight_check(self, status: GameStatus) -> None:
        """Mark the attacked king on check or checkmate."""
        king_sq = None
        if status.kind in (StatusKind.CHECK, StatusKind.CHECKMATE):
            king_sq = self._king_square(status.color)
        self._set_overlay(Overlay.CHECK, () if king_sq is None else (king_sq,))

    def overlay_squares(self, layer: Overlay) -> frozenset[Square]:
        return frozenset(self._overlays[layer])

    def glyph_at(self, sq: Square) -> str | None:
        """The glyph drawn on *sq*, if any."""
        entry = self._glyphs.get(sq)
        return None if entry is None else entry[1].text()

    def square_at(self, pos: QPointF) -> Square | None:
        """Board square under scene point *pos*, or ``None`` off the board."""
        col = int(pos.x() // self.TILE)
        row = int(pos.y() // self.TILE)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return make_square(*self._board_coords(col, row))

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self.square_clicked.emit(self.square_at(event.scenePos()))
        super().mousePressEvent(event)

    # ── Drawing ──────────────────────────────────────────────────────────

    def _rebuild(self) -> None:
        """Redraw everything that depends on theme or orientation."""
        self._draw_squares()
        self._draw_labels()

        glyphs = self._glyphs
        self._glyphs = {}
        for sq, (piece, item) in glyphs.items():
            self.removeItem(item)
            self._glyphs[sq] = (piece, self._make_glyph(sq, piece))

        self._overlay_colors = {
            Overlay.LAST_MOVE: self._theme.last_move,
            Overlay.SELECTED: self._theme.highlight_from,
            Overlay.TARGETS: self._theme.highlight_to,
            Overlay.CHECK: self._theme.highlight_check,
        }
        for layer, items in self._overlays.items():
            self._set_overlay(layer, list(items))

    def _draw_squares(self) -> None:
        for item in self._squares.values():
            self.removeItem(item)
        self._squares = {}
        for sq in ALL_SQUARES:
            is_dark = (sq.file + sq.rank) % 2 == 0
            self._squares[sq] = self._make_rect(
                sq, self._theme.square_color(is_dark), _Z_SQUARE
            )

    def _draw_labels(self) -> None:
        """Rank digits down the left edge, file letters along the bottom."""
        for label in self._labels:
            self.removeItem(label)
        self._labels = []

        t = self.TILE
        font = QFont("Helvetica", max(9, t // 8))
        for i in range(8):
            left = make_square(*self._board_coords(0, i))
            bottom = make_square(*self._board_coords(i, 7))
            self._add_label(left.name[1], left, 2, 1, font)
            self._add_label(bottom.name[0], bottom, t - 12, t - 16, font)

    def _add_label(
        self, text: str, sq: Square, dx: float, dy: float, font: QFont
    ) -> None:
        col, row = self._view_coords(sq)
        is_dark = (sq.file + sq.rank) % 2 == 0
        label = QGraphicsSimpleTextItem(text)
        label.setFont(font)
        label.setBrush(QBrush(self._theme.coord_color(is_dark)))
        label.setPos(col * self.TILE + dx, row * self.TILE + dy)
        label.setZValue(_Z_COORD)
        label.setVisible(self._show_coordinates)
        self.addItem(label)
        self._labels.append(label)

    def _make_glyph(self, sq: Square, piece: Piece) -> QGraphicsSimpleTextItem:
        t = self.TILE
        item = QGraphicsSimpleTextItem(piece.symbol)
        item.setFont(QFont("DejaVu Sans", int(t * 0.6)))
        fill = (
            self._theme.white_piece
            if piece.color == Color.WHITE
            else self._theme.black_piece
        )
        item.setBrush(QBrush(fill))
        item.setPen(QPen(QColor(0, 0, 0), 1))
        col, row = self._view_coords(sq)
        bounds = item.boundingRect()
        item.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )
        item.setZValue(_Z_PIECE)
        self.addItem(item)
        return item

    def _set_overlay(self, layer: Overlay, squares: Iterable[Square]) -> None:
        """Replace the contents of one highlight layer."""
        items = self._overlays[layer]
        for item in items.values():
            self.removeItem(item)
        items.clear()
        color = self._overlay_colors.get(layer)
        if color is None:
            return
        z = _Z_OVERLAY_BASE + layer / 10
        for sq in squares:
            items[sq] = self._make_rect(sq, color, z)

    def _make_rect(self, sq: Square, color: QColor, z: float) -> QGraphicsRectItem:
        t = self.TILE
        col, row = self._view_coords(sq)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect

    # ── Lookups ──────────────────────────────────────────────────────────

    def _king_square(self, color: Color | None) -> Square | None:
        if color is None:
            return None
        king = Piece(color, PieceType.KING)
        for sq, (piece, _item) in self._glyphs.items():
            if piece == king:
                return sq
        return None

    def _view_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → (column, row) on screen, row 0 at the top."""
        if self._flipped:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def _board_coords(self, col: int, row: int) -> tuple[int, int]:
        """Screen (column, row) → board (file, rank)."""
        if self._flipped:
            return 7 - col, row
        return col, 7 - row
