"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's move: White climbs toward row 0, Black descends."""
        return -1 if self is Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Farthest row from this side's start."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece rank."""

    MAN = 1
    KING = 2


class Cell(IntEnum):
    """Integer cell encoding.

    Odd values belong to Black, even non-empty values to White.
    """

    EMPTY = 0
    BLACK_MAN = 1
    WHITE_MAN = 2
    BLACK_KING = 3
    WHITE_KING = 4

    @property
    def color(self) -> Color | None:
        if self is Cell.EMPTY:
            return None
        return Color.BLACK if self.value % 2 else Color.WHITE


class Direction(IntEnum):
    """Diagonal directions in board terms (row 0 is the top edge)."""

    UP_LEFT = 0
    UP_RIGHT = 1
    DOWN_LEFT = 2
    DOWN_RIGHT = 3

    @property
    def row_delta(self) -> int:
        return -1 if self in (Direction.UP_LEFT, Direction.UP_RIGHT) else 1

    @property
    def visual_delta(self) -> int:
        return -1 if self in (Direction.UP_LEFT, Direction.DOWN_LEFT) else 1


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
