"""Tests for Piece and its integer cell encoding."""

import pytest

from checkie.core.enums import Cell, Color, PieceType
from checkie.core.piece import Piece

WHITE_MAN = Piece(Color.WHITE, PieceType.MAN)
BLACK_MAN = Piece(Color.BLACK, PieceType.MAN)
WHITE_KING = Piece(Color.WHITE, PieceType.KING)
BLACK_KING = Piece(Color.BLACK, PieceType.KING)


class TestPromotion:
    def test_man_becomes_king(self) -> None:
        assert WHITE_MAN.promoted() == WHITE_KING
        assert BLACK_MAN.promoted() == BLACK_KING

    def test_king_stays_king(self) -> None:
        assert WHITE_KING.promoted() is WHITE_KING


class TestSides:
    def test_opponents(self) -> None:
        assert WHITE_MAN.is_opponent_of(BLACK_KING)
        assert not WHITE_MAN.is_opponent_of(WHITE_KING)


class TestCellEncoding:
    def test_parity_gives_side(self) -> None:
        assert Cell.BLACK_MAN.color == Color.BLACK
        assert Cell.BLACK_KING.color == Color.BLACK
        assert Cell.WHITE_MAN.color == Color.WHITE
        assert Cell.WHITE_KING.color == Color.WHITE
        assert Cell.EMPTY.color is None

    def test_to_cell(self) -> None:
        assert BLACK_MAN.to_cell() == Cell.BLACK_MAN
        assert WHITE_KING.to_cell() == Cell.WHITE_KING

    def test_from_cell(self) -> None:
        assert Piece.from_cell(1) == BLACK_MAN
        assert Piece.from_cell(4) == WHITE_KING
        assert Piece.from_cell(Cell.EMPTY) is None

    def test_from_cell_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid cell"):
            Piece.from_cell(9)


class TestChars:
    def test_str(self) -> None:
        assert str(WHITE_MAN) == "w"
        assert str(BLACK_KING) == "B"

    def test_from_char(self) -> None:
        assert Piece.from_char("W") == WHITE_KING

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")
