"""Square type and coordinate helpers.

Only the 32 dark squares are playable, so each row stores four logical
columns.  The visual column on the 8x8 board depends on row parity::

    visual_col = 2 * col + row % 2

    row 0:  X . X . X . X .      logical cols 0 1 2 3 at visual 0 2 4 6
    row 1:  . X . X . X . X      logical cols 0 1 2 3 at visual 1 3 5 7

Diagonal neighbors are therefore a same-column step on one side and a
column +/- 1 step on the other, flipping with the row parity.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, Direction, PieceType

BOARD_ROWS = 8
ROW_SQUARES = 4
BOARD_COLS = 2 * ROW_SQUARES

_MAN_DIRECTIONS: dict[Color, tuple[Direction, ...]] = {
    Color.WHITE: (Direction.UP_LEFT, Direction.UP_RIGHT),
    Color.BLACK: (Direction.DOWN_LEFT, Direction.DOWN_RIGHT),
}
_ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class OutOfRangeError(ValueError):
    """A coordinate outside the 8x4 logical board."""


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Logical board coordinate (row 0-7, col 0-3)."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < BOARD_ROWS and 0 <= self.col < ROW_SQUARES):
            raise OutOfRangeError(
                f"Square out of range: row={self.row}, col={self.col}"
            )

    @property
    def visual_col(self) -> int:
        return visual_col(self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def visual_col(row: int, col: int) -> int:
    """Logical column → column on the full 8x8 board."""
    return 2 * col + row % 2


def square_from_visual(row: int, vis_col: int) -> Square | None:
    """Full-board coordinate → logical square, None on light squares.

    Raises :class:`OutOfRangeError` when the coordinate is off the board.
    """
    if not (0 <= row < BOARD_ROWS and 0 <= vis_col < BOARD_COLS):
        raise OutOfRangeError(f"Board cell out of range: row={row}, col={vis_col}")
    offset = vis_col - row % 2
    if offset % 2:
        return None
    return Square(row, offset // 2)


def all_squares() -> list[Square]:
    """Every playable square, row by row."""
    return [Square(r, c) for r in range(BOARD_ROWS) for c in range(ROW_SQUARES)]


def diagonal_neighbor(
    sq: Square, direction: Direction, distance: int = 1
) -> Square | None:
    """Square *distance* diagonal steps from *sq*, or None if off the board.

    Stepping is done in visual coordinates, so the row-parity column shift
    falls out of the conversion and never wraps around an edge.
    """
    row = sq.row + direction.row_delta * distance
    vis = sq.visual_col + direction.visual_delta * distance
    if not (0 <= row < BOARD_ROWS and 0 <= vis < BOARD_COLS):
        return None
    return square_from_visual(row, vis)


def directions_for(color: Color, piece_type: PieceType) -> tuple[Direction, ...]:
    """Directions a piece may travel: men forward only, kings both ways."""
    if piece_type == PieceType.KING:
        return _ALL_DIRECTIONS
    return _MAN_DIRECTIONS[color]
