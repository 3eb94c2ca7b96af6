"""High-level checkers rules: promotion, offered moves, game result."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.types import Square


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Optional rule variants.

    The defaults play the house rules: captures are optional and a jump ends
    the turn.
    """

    mandatory_capture: bool = False
    multi_jump: bool = False


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def promotes(piece: Piece, to_sq: Square) -> bool:
        """Whether *piece* becomes a king by landing on *to_sq*."""
        return not piece.is_king and to_sq.row == piece.color.promotion_row

    @staticmethod
    def resulting_piece(piece: Piece, to_sq: Square) -> Piece:
        return piece.promoted() if Rules.promotes(piece, to_sq) else piece

    @staticmethod
    def offered_moves(
        board: Board, sq: Square, options: RuleOptions = RuleOptions()
    ) -> list[Move]:
        """Moves offered to the player for the piece on *sq*."""
        piece = board[sq]
        if piece is None:
            return []
        gen = MoveGenerator(board)
        if options.mandatory_capture and gen.has_any_capture(piece.color):
            return gen.captures_for(sq)
        return gen.moves_for(sq)

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        # Mandatory capture only narrows the set; it never empties a non-empty one.
        return MoveGenerator(board).has_any_move(color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """The side to move loses when it has no pieces or no legal move."""
        if board.count(side_to_move) and Rules.has_legal_move(board, side_to_move):
            return GameResult.IN_PROGRESS
        if side_to_move == Color.WHITE:
            return GameResult.BLACK_WINS
        return GameResult.WHITE_WINS
