"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesslet.core.types import ALL_SQUARES, BOARD_SIZE, Square
from chesslet.game.state import GameState
from chesslet.ui.board.piece_item import PieceItem
from chesslet.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Clicks are forwarded to the :class:`GameState`; the scene only mirrors
    what the state says.

    Signals:
        move_made(MoveRecord): Emitted after a click completes a legal move.
    """

    move_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(
        self, state: GameState | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state = state if state is not None else GameState()
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    def set_state(self, state: GameState) -> None:
        """Display another game session (full redraw of pieces)."""
        self._state = state
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and selection from the current game state."""
        self._sync_pieces()
        self._sync_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self._sync_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for sq in ALL_SQUARES:
            row, col = sq
            vx, vy = self._visual_coords(sq)
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vx * t, vy * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_color = self._theme.coord_light if is_light else self._theme.coord_dark

            # Rank numbers (left edge)
            if vx == 0:
                self._add_coord(str(BOARD_SIZE - row), font, label_color).setPos(
                    vx * t + 2, vy * t + 1
                )

            # File letters (bottom edge)
            if vy == BOARD_SIZE - 1:
                self._add_coord(chr(ord("a") + col), font, label_color).setPos(
                    vx * t + t - 12, vy * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor
    ) -> QGraphicsSimpleTextItem:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)
        return txt

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        for sq, piece in self._state.position.board.occupied():
            item = PieceItem(
                piece, sq, t, self._theme.piece_light, self._theme.piece_dark
            )
            vx, vy = self._visual_coords(sq)
            item.place(vx * t, vy * t, t)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._state.clear_selection()
            self._sync_selection()
            return super().mousePressEvent(event)

        self.click_square(sq)
        super().mousePressEvent(event)

    def click_square(self, sq: Square) -> None:
        """Route a click on *sq* through the game state and redraw."""
        record = self._state.click(sq)
        if record is not None:
            self.refresh()
            self.move_made.emit(record)
            return
        self._sync_selection()

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        selected = self._state.selected
        if selected is None:
            return

        self._highlight_items.append(
            self._make_highlight(selected, self._theme.highlight_from)
        )
        if self._show_legal_moves:
            for sq in sorted(self._state.hints):
                self._legal_dot_items.append(
                    self._make_highlight(sq, self._theme.highlight_to)
                )

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a board square to visual (x, y) tile coordinates."""
        row, col = sq
        if self._flipped:
            return BOARD_SIZE - 1 - col, BOARD_SIZE - 1 - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        x = int(pos.x() // t)
        y = int(pos.y() // t)
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            return None
        if self._flipped:
            return (BOARD_SIZE - 1 - y, BOARD_SIZE - 1 - x)
        return (y, x)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vx, vy = self._visual_coords(sq)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
