"""Per-piece move generation: simple steps and single jumps."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import Square, diagonal_neighbor, directions_for


class MoveGenerator:
    """Generates moves for pieces on a :class:`Board`.

    Each direction yields at most one move, so targets never repeat.  Jumps
    are one level deep; chaining is left to the caller (see
    :class:`~checkie.core.rules.RuleOptions`).
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def moves_for(self, sq: Square, piece: Piece | None = None) -> list[Move]:
        """Simple moves and captures for the piece on *sq*.

        *piece* overrides what is on the board, which lets callers ask about
        a piece kind before it is placed.
        """
        if piece is None:
            piece = self._board[sq]
            if piece is None:
                return []

        board = self._board
        moves: list[Move] = []
        for direction in directions_for(piece.color, piece.piece_type):
            near = diagonal_neighbor(sq, direction)
            if near is None:
                continue
            occupant = board[near]
            if occupant is None:
                moves.append(Move(sq, near))
                continue
            if not occupant.is_opponent_of(piece):
                continue
            landing = diagonal_neighbor(sq, direction, 2)
            if landing is not None and board.is_empty(landing):
                moves.append(Move(sq, landing, captured=near))
        return moves

    def captures_for(self, sq: Square, piece: Piece | None = None) -> list[Move]:
        return [m for m in self.moves_for(sq, piece) if m.is_capture]

    def generate_moves(self, color: Color) -> list[Move]:
        """Every move available to *color*."""
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.moves_for(sq))
        return moves

    def has_any_capture(self, color: Color) -> bool:
        return any(self.captures_for(sq) for sq in self._board.pieces(color))

    def has_any_move(self, color: Color) -> bool:
        return any(self.moves_for(sq) for sq in self._board.pieces(color))
