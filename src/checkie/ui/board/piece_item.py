"""PieceItem — a round checker on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QCursor, QPen
from PyQt6.QtWidgets import QGraphicsEllipseItem

from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.types import Square
from checkie.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsEllipseItem):
    """A single checker drawn as a disc, kings with an inner gold ring.

    Stores its logical *square*; the scene positions it by visual column.
    """

    RADIUS_RATIO = 0.8  # of half a tile, so the disc fits inside its square
    _KING_RING_RATIO = 0.55

    def __init__(
        self, piece: Piece, square: Square, tile_size: int, theme: BoardTheme
    ) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self._king_ring: QGraphicsEllipseItem | None = None

        fill = theme.white_piece if piece.color == Color.WHITE else theme.black_piece
        self.setBrush(QBrush(fill))
        outline = QPen(theme.piece_outline)
        outline.setWidthF(max(1.0, tile_size / 40))
        self.setPen(outline)

        if piece.is_king:
            self._king_ring = QGraphicsEllipseItem(self)
            ring_pen = QPen(theme.king_marker)
            ring_pen.setWidthF(max(2.0, tile_size / 16))
            self._king_ring.setPen(ring_pen)
            self._king_ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self.set_tile_size(tile_size)

    @property
    def radius(self) -> float:
        return self.rect().width() / 2

    @property
    def is_king(self) -> bool:
        return self._king_ring is not None

    def set_tile_size(self, size: int) -> None:
        """Resize the disc around the tile centre (item-local coordinates)."""
        r = size / 2 * self.RADIUS_RATIO
        centre = size / 2
        self.setRect(centre - r, centre - r, 2 * r, 2 * r)
        if self._king_ring is not None:
            kr = r * self._KING_RING_RATIO
            self._king_ring.setRect(centre - kr, centre - kr, 2 * kr, 2 * kr)
