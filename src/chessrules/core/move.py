"""Move record value object."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One executed move, as kept in the history.

    ``captured`` holds the piece taken on ``to_sq`` (it is off the board
    and lives only here); ``ply`` is the 1-based sequence number.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    ply: int = 0
    timestamp: float = field(default_factory=time.time, compare=False)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else ""
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
