"""Tests for Rules: promotion, offered moves and game results."""

from checkie.core.enums import Color, GameResult, PieceType
from checkie.core.notation import board_from_text
from checkie.core.piece import Piece
from checkie.core.rules import RuleOptions, Rules
from checkie.core.types import Square

WHITE_MAN = Piece(Color.WHITE, PieceType.MAN)
BLACK_MAN = Piece(Color.BLACK, PieceType.MAN)


class TestPromotion:
    def test_white_promotes_on_row_zero(self) -> None:
        assert Rules.promotes(WHITE_MAN, Square(0, 2))
        assert not Rules.promotes(WHITE_MAN, Square(7, 2))

    def test_black_promotes_on_row_seven(self) -> None:
        assert Rules.promotes(BLACK_MAN, Square(7, 0))
        assert not Rules.promotes(BLACK_MAN, Square(0, 0))

    def test_kings_do_not_promote_again(self) -> None:
        king = WHITE_MAN.promoted()
        assert not Rules.promotes(king, Square(0, 0))
        assert Rules.resulting_piece(king, Square(0, 0)) == king

    def test_resulting_piece(self) -> None:
        assert Rules.resulting_piece(BLACK_MAN, Square(7, 1)).is_king
        assert Rules.resulting_piece(BLACK_MAN, Square(6, 1)) == BLACK_MAN


CAPTURE_AVAILABLE = "b.../..../..../..../.b../.w../..../...w w"


class TestOfferedMoves:
    def test_default_offers_everything(self) -> None:
        board, _ = board_from_text(CAPTURE_AVAILABLE)
        assert len(Rules.offered_moves(board, Square(5, 1))) == 2
        assert len(Rules.offered_moves(board, Square(7, 3))) == 1

    def test_mandatory_capture_filters(self) -> None:
        board, _ = board_from_text(CAPTURE_AVAILABLE)
        options = RuleOptions(mandatory_capture=True)
        moves = Rules.offered_moves(board, Square(5, 1), options)
        assert [m.is_capture for m in moves] == [True]
        assert Rules.offered_moves(board, Square(7, 3), options) == []

    def test_mandatory_capture_without_captures(self) -> None:
        board, _ = board_from_text("b.../..../..../..../..../..../..../...w w")
        options = RuleOptions(mandatory_capture=True)
        assert len(Rules.offered_moves(board, Square(7, 3), options)) == 1

    def test_empty_square(self) -> None:
        board, _ = board_from_text(CAPTURE_AVAILABLE)
        assert Rules.offered_moves(board, Square(3, 3)) == []


class TestGameResult:
    def test_initial_in_progress(self) -> None:
        board, side = board_from_text(
            "bbbb/bbbb/bbbb/..../..../wwww/wwww/wwww w"
        )
        assert Rules.game_result(board, side) == GameResult.IN_PROGRESS

    def test_no_pieces_loses(self) -> None:
        board, _ = board_from_text("..../..../..../..../..../..../..../...w b")
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_no_moves_loses(self) -> None:
        # Black men on the last row cannot move.
        board, _ = board_from_text("..../..../..../..../..../..../w.../b... b")
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_white_blocked(self) -> None:
        board, _ = board_from_text("w.../b.../..../..../..../..../..../.... w")
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS
