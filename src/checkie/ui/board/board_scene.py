"""BoardScene — QGraphicsScene that draws the board and checkers."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSceneMouseEvent

from checkie.core.move import Move
from checkie.core.types import (
    BOARD_COLS,
    BOARD_ROWS,
    Square,
    all_squares,
    square_from_visual,
)
from checkie.game.controller import TurnController
from checkie.game.state import GameState, MoveRecord
from checkie.ui.board.piece_item import PieceItem
from checkie.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, pieces and selection highlights.

    Clicks are mapped to logical squares and handed to the
    :class:`TurnController`; the scene redraws from the controller's events
    and never mutates game state itself.
    """

    TILE = 80  # px per square

    def __init__(
        self,
        controller: TurnController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: TurnController | None = None
        self._interactive = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: list[QGraphicsRectItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}

        self._draw_board()
        if controller is not None:
            self.set_controller(controller)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController | None:
        return self._controller

    def set_controller(self, controller: TurnController) -> None:
        """Attach to *controller* and redraw from its state."""
        self._controller = controller
        controller.events.on_selection_changed.append(self._on_selection_changed)
        controller.events.on_move.append(self._on_move)
        controller.events.on_new_game.append(self._on_new_game)
        self.refresh()

    def refresh(self) -> None:
        """Full redraw of pieces and highlights from the controller."""
        self._sync_pieces()
        if self._controller is None:
            self._clear_highlights()
            return
        self._show_selection(
            self._controller.selected_piece(), self._controller.offered_moves()
        )

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click handling."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide offered-move highlights."""
        self._show_legal_moves = visible
        self.refresh()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        self._clear_items(self._square_items)

        t = self.TILE
        for row in range(BOARD_ROWS):
            for col in range(BOARD_COLS):
                is_dark = (row + col) % 2 == 0
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items.append(rect)

        self.setSceneRect(0, 0, BOARD_COLS * t, BOARD_ROWS * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._controller is None:
            return

        board = self._controller.state.board
        t = self.TILE
        for sq in all_squares():
            piece = board[sq]
            if piece is None:
                continue
            item = PieceItem(piece, sq, t, self._theme)
            item.setPos(sq.visual_col * t, sq.row * t)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Controller events ────────────────────────────────────────────────

    def _on_selection_changed(self, selected: Square | None, moves: list[Move]) -> None:
        self._show_selection(selected, moves)

    def _on_move(self, _record: MoveRecord, _state: GameState) -> None:
        self._sync_pieces()

    def _on_new_game(self, _state: GameState) -> None:
        self.refresh()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self.click_at(event.scenePos())
        super().mousePressEvent(event)

    def click_at(self, pos: QPointF) -> None:
        """Forward a click at scene *pos* to the controller as a logical square.

        Ignored while the scene is non-interactive.
        """
        if not self._interactive or self._controller is None:
            return
        sq = self._pos_to_square(pos)
        if sq is not None:
            self._controller.handle_click(sq.row, sq.col)

    # ── Selection / highlights ───────────────────────────────────────────

    def _show_selection(self, selected: Square | None, moves: list[Move]) -> None:
        self._clear_highlights()
        if selected is None:
            return

        rect = self._make_highlight(selected, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._show_legal_moves:
            for m in moves:
                dot = self._make_highlight(m.to_sq, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _clear_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → logical square, None off-board or on light squares."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_COLS and 0 <= row < BOARD_ROWS):
            return None
        return square_from_visual(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(sq.visual_col * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
