"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Cell, Color, PieceType

_CELL_MAP: dict[Cell, tuple[Color, PieceType]] = {
    Cell.BLACK_MAN: (Color.BLACK, PieceType.MAN),
    Cell.WHITE_MAN: (Color.WHITE, PieceType.MAN),
    Cell.BLACK_KING: (Color.BLACK, PieceType.KING),
    Cell.WHITE_KING: (Color.WHITE, PieceType.KING),
}
_CELLS: dict[tuple[Color, PieceType], Cell] = {v: k for k, v in _CELL_MAP.items()}

# Layout-text character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "b": (Color.BLACK, PieceType.MAN),
    "w": (Color.WHITE, PieceType.MAN),
    "B": (Color.BLACK, PieceType.KING),
    "W": (Color.WHITE, PieceType.KING),
}
_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checker."""

    color: Color
    piece_type: PieceType

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def promoted(self) -> Piece:
        """The king of the same color (kings stay kings)."""
        if self.is_king:
            return self
        return Piece(self.color, PieceType.KING)

    def is_opponent_of(self, other: Piece) -> bool:
        return self.color != other.color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (lowercase = man, uppercase = king)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    def to_cell(self) -> Cell:
        return _CELLS[(self.color, self.piece_type)]

    @classmethod
    def from_cell(cls, cell: int) -> Piece | None:
        """Decode an integer cell; ``Cell.EMPTY`` gives None."""
        try:
            cell = Cell(cell)
        except ValueError:
            raise ValueError(f"Invalid cell value: {cell!r}") from None
        if cell is Cell.EMPTY:
            return None
        color, ptype = _CELL_MAP[cell]
        return cls(color, ptype)
