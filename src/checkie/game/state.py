"""Game state — board, turn, selection and phase held in one object."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.notation import STARTING_LAYOUT, board_from_text
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import Square


class TurnPhase(IntEnum):
    """Finite-state-machine states of the selection/move cycle."""

    IDLE = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


@dataclass
class MoveRecord:
    """What happened when a move was applied."""

    move: Move
    piece: Piece  # piece as it stands after the move
    captured_piece: Piece | None = None
    promoted: bool = False


@dataclass
class GameState:
    """Mutable session state shared by the controller and the UI.

    Only :class:`~checkie.game.controller.TurnController` writes to it.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    phase: TurnPhase = TurnPhase.IDLE
    result: GameResult = GameResult.IN_PROGRESS
    selected: Square | None = None
    offered_moves: list[Move] = field(default_factory=list)
    # Square of a piece that must keep jumping (multi-jump variant only).
    chain_square: Square | None = None
    ply_count: int = 0
    start_layout: str = STARTING_LAYOUT

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, layout: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_layout = layout or STARTING_LAYOUT
        self.board, self.side_to_move = board_from_text(self.start_layout)
        self.phase = TurnPhase.IDLE
        self.result = GameResult.IN_PROGRESS
        self.chain_square = None
        self.ply_count = 0
        self.clear_selection()

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: Square, moves: list[Move]) -> None:
        self.selected = sq
        self.offered_moves = list(moves)
        self.phase = TurnPhase.PIECE_SELECTED

    def clear_selection(self) -> None:
        self.selected = None
        self.offered_moves = []
        if self.phase == TurnPhase.PIECE_SELECTED:
            self.phase = TurnPhase.IDLE

    def offered_move_to(self, sq: Square) -> Move | None:
        for move in self.offered_moves:
            if move.to_sq == sq:
                return move
        return None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Relocate the moving piece, remove the captured one, promote.

        Caller is responsible for legality check.  The turn is not flipped
        here; see :meth:`end_turn`.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured_piece = None
        if move.captured is not None:
            captured_piece = board[move.captured]
            board[move.captured] = None

        moved = Rules.resulting_piece(piece, move.to_sq)
        board[move.to_sq] = moved
        board[move.from_sq] = None

        return MoveRecord(
            move=move,
            piece=moved,
            captured_piece=captured_piece,
            promoted=moved != piece,
        )

    def continue_chain(self, sq: Square, captures: list[Move]) -> None:
        """Keep the same side on move with *sq* locked to its *captures*."""
        self.chain_square = sq
        self.select(sq, captures)

    def end_turn(self) -> None:
        self.chain_square = None
        self.clear_selection()
        self.side_to_move = self.side_to_move.opposite
        self.ply_count += 1

    def finish(self, result: GameResult) -> None:
        self.result = result
        self.clear_selection()
        self.phase = TurnPhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == TurnPhase.GAME_OVER

    @property
    def in_chain(self) -> bool:
        return self.chain_square is not None
