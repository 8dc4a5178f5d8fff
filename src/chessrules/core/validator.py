"""Move legality: piece patterns, path clearance, self-check prevention."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.check import CheckDetector
from chessrules.core.patterns import can_move
from chessrules.core.types import Square, all_squares, is_on_board

if TYPE_CHECKING:
    from chessrules.core.board import Board


class MoveValidator:
    """Decides whether a single ``from → to`` move is legal on a :class:`Board`.

    Illegality is a normal outcome and is reported as ``False``; nothing is
    raised for a bad move.  The board is mutated while a candidate move is
    simulated but is always restored before a method returns.
    """

    __slots__ = ("_board", "_detector")

    def __init__(self, board: Board, detector: CheckDetector | None = None) -> None:
        self._board = board
        self._detector = detector if detector is not None else CheckDetector(board)

    # -- Public API ---------------------------------------------------------

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        if not (is_on_board(*from_sq) and is_on_board(*to_sq)):
            return False

        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False

        # No self-capture (also rules out the null move).
        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        if not can_move(board, piece, from_sq, to_sq):
            return False

        return not self.leaves_king_in_check(from_sq, to_sq)

    def leaves_king_in_check(self, from_sq: Square, to_sq: Square) -> bool:
        """Simulate the move and report whether the mover's king is attacked.

        The king cache follows the simulated piece, so king moves into an
        attacked square are caught too.
        """
        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False

        original_target = board[to_sq]
        board[to_sq] = piece
        board[from_sq] = None
        try:
            return self._detector.is_king_in_check(piece.color)
        finally:
            board[from_sq] = piece
            board[to_sq] = original_target

    def possible_moves(self, from_sq: Square) -> list[Square]:
        """Every legal destination from *from_sq*, in board-scan order."""
        if not is_on_board(*from_sq) or self._board[from_sq] is None:
            return []
        return [to_sq for to_sq in all_squares() if self.is_legal_move(from_sq, to_sq)]
