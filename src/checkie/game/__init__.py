"""Game management layer — turn controller and session state.

Quick start::

    from checkie.game import TurnController

    ctrl = TurnController()
    ctrl.new_game()
    ctrl.handle_click(5, 0)  # select the White man
    ctrl.handle_click(4, 0)  # move it
"""

from checkie.game.controller import GameEvents, TurnController
from checkie.game.state import GameState, MoveRecord, TurnPhase

__all__ = [
    "GameEvents",
    "GameState",
    "MoveRecord",
    "TurnController",
    "TurnPhase",
]
