"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, MoveGenerator, Square

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.moves_for(Square(5, 0)):
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import Cell, Color, Direction, GameResult, PieceType
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import STARTING_LAYOUT, board_from_text, board_to_text
from checkie.core.piece import Piece
from checkie.core.rules import RuleOptions, Rules
from checkie.core.types import (
    OutOfRangeError,
    Square,
    all_squares,
    diagonal_neighbor,
    directions_for,
    square_from_visual,
    visual_col,
)

__all__ = [
    # Enums
    "Cell",
    "Color",
    "Direction",
    "GameResult",
    "PieceType",
    # Types / helpers
    "OutOfRangeError",
    "Square",
    "all_squares",
    "diagonal_neighbor",
    "directions_for",
    "square_from_visual",
    "visual_col",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "RuleOptions",
    "Rules",
    # Notation
    "STARTING_LAYOUT",
    "board_from_text",
    "board_to_text",
]
