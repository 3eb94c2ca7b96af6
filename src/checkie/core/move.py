"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single step or jump."""

    from_sq: Square
    to_sq: Square
    captured: Square | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.from_sq}{sep}{self.to_sq}"
