"""Tests for Square, visual columns and the diagonal neighbor rule."""

import pytest

from checkie.core.enums import Color, Direction, PieceType
from checkie.core.types import (
    OutOfRangeError,
    Square,
    all_squares,
    diagonal_neighbor,
    directions_for,
    square_from_visual,
    visual_col,
)


class TestSquare:
    def test_valid_corners(self) -> None:
        assert Square(0, 0).row == 0
        assert Square(7, 3).col == 3

    @pytest.mark.parametrize(("row", "col"), [(-1, 0), (8, 0), (0, -1), (0, 4)])
    def test_out_of_range_raises(self, row: int, col: int) -> None:
        with pytest.raises(OutOfRangeError):
            Square(row, col)

    def test_out_of_range_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square(9, 9)

    def test_all_squares_count(self) -> None:
        squares = all_squares()
        assert len(squares) == 32
        assert len(set(squares)) == 32


class TestVisualColumn:
    def test_even_rows_start_at_zero(self) -> None:
        assert [visual_col(0, c) for c in range(4)] == [0, 2, 4, 6]

    def test_odd_rows_are_shifted(self) -> None:
        assert [visual_col(1, c) for c in range(4)] == [1, 3, 5, 7]

    def test_square_property(self) -> None:
        assert Square(5, 0).visual_col == 1

    def test_inverse_on_dark_squares(self) -> None:
        for sq in all_squares():
            assert square_from_visual(sq.row, sq.visual_col) == sq

    def test_light_squares_map_to_none(self) -> None:
        assert square_from_visual(0, 1) is None
        assert square_from_visual(1, 0) is None
        assert square_from_visual(7, 6) is None

    @pytest.mark.parametrize(("row", "vis"), [(8, 0), (-1, 0), (0, 8), (0, -1)])
    def test_off_board_raises(self, row: int, vis: int) -> None:
        with pytest.raises(OutOfRangeError):
            square_from_visual(row, vis)


class TestDiagonalNeighbor:
    def test_even_row_right_keeps_column(self) -> None:
        assert diagonal_neighbor(Square(2, 1), Direction.DOWN_RIGHT) == Square(3, 1)
        assert diagonal_neighbor(Square(2, 1), Direction.UP_RIGHT) == Square(1, 1)

    def test_even_row_left_decrements_column(self) -> None:
        assert diagonal_neighbor(Square(2, 1), Direction.DOWN_LEFT) == Square(3, 0)
        assert diagonal_neighbor(Square(2, 1), Direction.UP_LEFT) == Square(1, 0)

    def test_odd_row_left_keeps_column(self) -> None:
        assert diagonal_neighbor(Square(3, 1), Direction.UP_LEFT) == Square(2, 1)
        assert diagonal_neighbor(Square(3, 1), Direction.DOWN_LEFT) == Square(4, 1)

    def test_odd_row_right_increments_column(self) -> None:
        assert diagonal_neighbor(Square(3, 1), Direction.UP_RIGHT) == Square(2, 2)
        assert diagonal_neighbor(Square(3, 1), Direction.DOWN_RIGHT) == Square(4, 2)

    def test_top_left_corner(self) -> None:
        sq = Square(0, 0)
        assert diagonal_neighbor(sq, Direction.UP_LEFT) is None
        assert diagonal_neighbor(sq, Direction.UP_RIGHT) is None
        assert diagonal_neighbor(sq, Direction.DOWN_LEFT) is None
        assert diagonal_neighbor(sq, Direction.DOWN_RIGHT) == Square(1, 0)

    def test_right_edge_does_not_wrap(self) -> None:
        sq = Square(1, 3)
        assert diagonal_neighbor(sq, Direction.UP_RIGHT) is None
        assert diagonal_neighbor(sq, Direction.DOWN_RIGHT) is None
        assert diagonal_neighbor(sq, Direction.UP_LEFT) == Square(0, 3)

    def test_bottom_row(self) -> None:
        sq = Square(7, 3)
        assert diagonal_neighbor(sq, Direction.DOWN_LEFT) is None
        assert diagonal_neighbor(sq, Direction.UP_LEFT) == Square(6, 3)

    def test_two_steps(self) -> None:
        assert diagonal_neighbor(Square(5, 0), Direction.UP_RIGHT, 2) == Square(3, 1)
        assert diagonal_neighbor(Square(5, 0), Direction.UP_LEFT, 2) is None

    def test_never_leaves_board(self) -> None:
        for sq in all_squares():
            for direction in Direction:
                for distance in (1, 2):
                    nb = diagonal_neighbor(sq, direction, distance)
                    if nb is not None:
                        assert 0 <= nb.row <= 7 and 0 <= nb.col <= 3
                        assert abs(nb.row - sq.row) == distance


class TestDirectionsFor:
    def test_white_man_moves_up(self) -> None:
        dirs = directions_for(Color.WHITE, PieceType.MAN)
        assert set(dirs) == {Direction.UP_LEFT, Direction.UP_RIGHT}

    def test_black_man_moves_down(self) -> None:
        dirs = directions_for(Color.BLACK, PieceType.MAN)
        assert set(dirs) == {Direction.DOWN_LEFT, Direction.DOWN_RIGHT}

    def test_kings_move_both_ways(self) -> None:
        assert len(directions_for(Color.WHITE, PieceType.KING)) == 4
        assert len(directions_for(Color.BLACK, PieceType.KING)) == 4
