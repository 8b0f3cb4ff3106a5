"""BoardView — square, self-scaling view onto a :class:`BoardScene`."""

from __future__ import annotations

from PyQt6.QtCore import QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QPainter, QResizeEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from schach.core.types import Square
from schach.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Keeps the whole board visible at any widget size.

    Escape reports an off-board click, which cancels a selection.

    Signals:
        square_clicked(object): A :class:`Square`, or ``None``.
    """

    square_clicked = pyqtSignal(object)

    MIN_TILE = 40  # px

    def __init__(
        self, scene: BoardScene | None = None, parent: QWidget | None = None
    ) -> None:
        self._scene = scene if scene is not None else BoardScene()
        super().__init__(self._scene, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing
        )
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        policy = QSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)
        self.setMinimumSize(8 * self.MIN_TILE, 8 * self.MIN_TILE)

        self._scene.square_clicked.connect(self.square_clicked)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def square_at(self, pos: QPoint) -> Square | None:
        """Board square under widget coordinate *pos*."""
        return self._scene.square_at(self.mapToScene(pos))

    # ── Qt overrides ─────────────────────────────────────────────────────

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return width

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() == Qt.Key.Key_Escape:
            self.square_clicked.emit(None)
            return
        super().keyPressEvent(event)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
