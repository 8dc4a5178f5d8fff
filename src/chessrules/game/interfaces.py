"""Abstract interfaces for the game layer.

The presentation layer depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color, GameStatus
    from chessrules.core.move import MoveRecord
    from chessrules.core.types import Square


class DrawOffer(IntEnum):
    """Draw offer status between players."""

    NONE = 0
    OFFERED = auto()
    ACCEPTED = auto()
    DECLINED = auto()


class IGameController(ABC):
    """Interface for the game orchestrator.

    Every mutating call reports success as a bool; rule violations are
    never raised.
    """

    @abstractmethod
    def reset(self, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def select_or_move(self, row: int, col: int) -> bool:
        """Select a piece, or move the selected one to (row, col)."""

    @abstractmethod
    def select_piece(self, row: int, col: int) -> bool:
        """Select the side to move's piece on (row, col)."""

    @abstractmethod
    def move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        """Validate and play a move. Returns True if legal and applied."""

    @abstractmethod
    def possible_moves(self, row: int, col: int) -> list[Square]:
        """Legal destinations of the piece on (row, col), in board-scan order."""

    @property
    @abstractmethod
    def status(self) -> GameStatus: ...

    @property
    @abstractmethod
    def move_history(self) -> tuple[MoveRecord, ...]: ...

    @abstractmethod
    def undo_last_move(self) -> bool:
        """Undo the last move. Returns True on success."""

    @abstractmethod
    def offer_draw(self, color: Color) -> None:
        """Player offers a draw."""

    @abstractmethod
    def accept_draw(self, color: Color) -> bool:
        """Opponent accepts the draw offer."""
