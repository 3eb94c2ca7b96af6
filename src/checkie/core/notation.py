"""Compact layout text for checkers positions.

Format: eight ``/``-separated rows (row 0 first), each four characters wide
with one character per dark square, then a space and the side to move::

    bbbb/bbbb/bbbb/..../..../wwww/wwww/wwww w

``b``/``w`` are men, ``B``/``W`` kings and ``.`` an empty square.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.types import BOARD_ROWS, ROW_SQUARES, Square

STARTING_LAYOUT = "bbbb/bbbb/bbbb/..../..../wwww/wwww/wwww w"

_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def board_from_text(text: str) -> tuple[Board, Color]:
    """Parse layout text into a board and the side to move."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Layout must have 2 fields, got {len(parts)}: {text!r}")
    placement, side = parts

    if side not in _SIDE_CHARS:
        raise ValueError(f"Invalid side to move: {side!r}")

    rows = placement.split("/")
    if len(rows) != BOARD_ROWS:
        raise ValueError(f"Layout must have {BOARD_ROWS} rows, got {len(rows)}")

    board = Board()
    for r, row in enumerate(rows):
        if len(row) != ROW_SQUARES:
            raise ValueError(f"Row {r} must have {ROW_SQUARES} squares: {row!r}")
        for c, ch in enumerate(row):
            if ch != ".":
                board[Square(r, c)] = Piece.from_char(ch)
    return board, _SIDE_CHARS[side]


def board_to_text(board: Board, side_to_move: Color) -> str:
    rows = []
    for r in range(BOARD_ROWS):
        row = ""
        for c in range(ROW_SQUARES):
            p = board[Square(r, c)]
            row += str(p) if p is not None else "."
        rows.append(row)
    side = "w" if side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side}"
