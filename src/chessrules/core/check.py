"""Attack detection: is a king (or any square) under fire?"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.patterns import attacks

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.enums import Color
    from chessrules.core.types import Square


class CheckDetector:
    """Stateless attack queries over a :class:`Board`.

    Each query scans the whole board for opposing pieces, so one call is
    O(64) pattern tests.  Good enough for interactive play, too slow for
    deep search.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A color without a king on the board is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return any(True for _ in self.attackers(sq, by_color))

    def attackers(self, sq: Square, by_color: Color) -> Iterator[Square]:
        """Yield the squares of *by_color*'s pieces attacking *sq*."""
        board = self._board
        for from_sq, piece in board.occupied():
            if piece.color == by_color and attacks(board, piece, from_sq, sq):
                yield from_sq
