"""TurnController — the selection/move state machine.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.rules import RuleOptions, Rules
from checkie.core.types import Square
from checkie.game.state import GameState, MoveRecord, TurnPhase

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square | None, list[Move]], None]
MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
NewGameCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController:
    """Turns clicks on logical squares into selections and moves.

    Invalid user actions are ignored rather than reported.  Coordinates
    outside the board are a caller bug and raise
    :class:`~checkie.core.types.OutOfRangeError`.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_options", "events")

    def __init__(self, options: RuleOptions | None = None) -> None:
        self._state = GameState()
        self._options = options or RuleOptions()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def options(self) -> RuleOptions:
        return self._options

    @options.setter
    def options(self, options: RuleOptions) -> None:
        """Swap the rule options mid-game.

        A live selection is re-offered under the new options. Switching
        multi-jump off during a chain ends the turn, since the capture that
        started the chain has already been played.
        """
        self._options = options
        state = self._state
        if state.is_game_over or state.selected is None:
            return

        if state.in_chain:
            if options.multi_jump:
                return
            _LOGGER.debug("Multi-jump disabled, ending chain at %s", state.chain_square)
            state.end_turn()
            self._emit_selection()
            self._check_game_over()
            return

        moves = Rules.offered_moves(state.board, state.selected, options)
        state.select(state.selected, moves)
        self._emit_selection()

    @property
    def phase(self) -> TurnPhase:
        return self._state.phase

    @property
    def result(self) -> GameResult:
        return self._state.result

    # ── Read-only queries ────────────────────────────────────────────────

    def current_turn(self) -> Color:
        return self._state.side_to_move

    def piece_at(self, row: int, col: int) -> Piece | None:
        return self._state.board[Square(row, col)]

    def selected_piece(self) -> Square | None:
        return self._state.selected

    def offered_moves(self) -> list[Move]:
        return list(self._state.offered_moves)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, layout: str | None = None) -> None:
        self._state = GameState()
        self._state.setup(layout)
        _LOGGER.debug("New game, %s to move", self._state.side_to_move)
        for cb in self.events.on_new_game:
            cb(self._state)
        self._check_game_over()

    def handle_click(self, row: int, col: int) -> None:
        """Entry point for the presentation layer (logical coordinates)."""
        self.select_or_move(Square(row, col))

    def select_or_move(self, sq: Square) -> None:
        state = self._state
        if state.is_game_over:
            return

        if state.selected is not None and state.board.is_empty(sq):
            move = state.offered_move_to(sq)
            if move is not None:
                self._apply(move)
                return

        if state.in_chain:
            _LOGGER.debug("Ignoring %s: %s must keep jumping", sq, state.chain_square)
            return

        piece = state.board[sq]
        if piece is not None and piece.color == state.side_to_move:
            moves = Rules.offered_moves(state.board, sq, self._options)
            state.select(sq, moves)
            _LOGGER.debug("Selected %s with %d moves", sq, len(moves))
            self._emit_selection()
            return

        if state.selected is not None:
            _LOGGER.debug("Dropping selection on click at %s", sq)
            state.clear_selection()
            self._emit_selection()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, move: Move) -> None:
        state = self._state
        record = state.apply_move(move)
        _LOGGER.debug("%s played %s", state.side_to_move, move)

        if self._options.multi_jump and move.is_capture and not record.promoted:
            captures = MoveGenerator(state.board).captures_for(move.to_sq)
            if captures:
                state.continue_chain(move.to_sq, captures)
                self._emit_move(record)
                self._emit_selection()
                return

        state.end_turn()
        self._emit_move(record)
        self._emit_selection()
        self._check_game_over()

    def _check_game_over(self) -> None:
        state = self._state
        result = Rules.game_result(state.board, state.side_to_move)
        if result == GameResult.IN_PROGRESS:
            return
        state.finish(result)
        _LOGGER.info("Game over: %s", result.name)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state.selected, list(self._state.offered_moves))

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)
