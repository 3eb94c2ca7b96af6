"""Board - piece placement on the 32 dark squares."""

from __future__ import annotations

from collections.abc import Iterable

from checkie.core.enums import Cell, Color, PieceType
from checkie.core.piece import Piece
from checkie.core.types import BOARD_ROWS, ROW_SQUARES, Square, all_squares

_SQUARE_COUNT = BOARD_ROWS * ROW_SQUARES


def _index(sq: Square) -> int:
    return sq.row * ROW_SQUARES + sq.col


class Board:
    """Mutable 8x4 board of checkers.

    Indexing takes a :class:`Square`, whose constructor already rejects
    coordinates outside the board, so nothing here clamps or wraps.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[_index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[_index(sq)] = piece

    def get(self, sq: Square) -> Piece | None:
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[_index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row by row."""
        return [
            sq
            for sq in all_squares()
            if (p := self[sq]) is not None and p.color == color
        ]

    def count(self, color: Color, piece_type: PieceType | None = None) -> int:
        """Number of *color*'s pieces, optionally of one *piece_type*."""
        return sum(
            1
            for p in self._squares
            if p is not None
            and p.color == color
            and (piece_type is None or p.piece_type == piece_type)
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT

    # -- Integer encoding ---------------------------------------------------

    def to_cells(self) -> list[list[Cell]]:
        """Rows of :class:`Cell` values (row 0 first)."""
        return [
            [
                p.to_cell() if (p := self[Square(r, c)]) is not None else Cell.EMPTY
                for c in range(ROW_SQUARES)
            ]
            for r in range(BOARD_ROWS)
        ]

    @classmethod
    def from_cells(cls, rows: Iterable[Iterable[int]]) -> Board:
        grid = [list(row) for row in rows]
        if len(grid) != BOARD_ROWS or any(len(row) != ROW_SQUARES for row in grid):
            raise ValueError(
                f"Expected {BOARD_ROWS} rows of {ROW_SQUARES} cells, got {grid!r}"
            )
        b = cls()
        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                b[Square(r, c)] = Piece.from_cell(cell)
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: Black on rows 0-2, White on rows 5-7."""
        b = cls()
        for sq in all_squares():
            if sq.row <= 2:
                b[sq] = Piece(Color.BLACK, PieceType.MAN)
            elif sq.row >= 5:
                b[sq] = Piece(Color.WHITE, PieceType.MAN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for r in range(BOARD_ROWS):
            cells = [" "] * (2 * ROW_SQUARES)
            for c in range(ROW_SQUARES):
                sq = Square(r, c)
                p = self[sq]
                cells[sq.visual_col] = str(p) if p else "."
            rows.append(f"{r} {' '.join(cells)}")
        rows.append("  " + " ".join(str(v) for v in range(2 * ROW_SQUARES)))
        return "\n".join(rows)
