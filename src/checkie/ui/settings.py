"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.rules import RuleOptions


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True

    # Rules
    mandatory_capture: bool = False
    multi_jump: bool = False

    def rule_options(self) -> RuleOptions:
        return RuleOptions(
            mandatory_capture=self.mandatory_capture,
            multi_jump=self.multi_jump,
        )
