"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: White advances toward row 0."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_row(self) -> int:
        """Row the pawns of this color start on."""
        return 6 if self is Color.WHITE else 1

    @property
    def back_row(self) -> int:
        return 7 if self is Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The six piece kinds, ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CastlingRights(IntFlag):
    """Bitmask for castling availability.

    Carried with the session and round-tripped through FEN, but not read by
    any movement rule: castling itself is not implemented.
    """

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class GameStatus(IntEnum):
    """Derived game state, evaluated for the side to move."""

    PLAYING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    DRAW = 4

    @property
    def is_terminal(self) -> bool:
        """No further moves are accepted once the game reaches this state."""
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.DRAW)

    def __str__(self) -> str:
        return self.name.lower()
