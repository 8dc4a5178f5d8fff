"""High-level rules: check, checkmate, stalemate classification."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.check import CheckDetector
from chessrules.core.enums import Color, GameStatus
from chessrules.core.types import Square, all_squares
from chessrules.core.validator import MoveValidator

if TYPE_CHECKING:
    from chessrules.core.board import Board


class GameStateClassifier:
    """Derives a :class:`GameStatus` for one side from a :class:`Board`.

    The classifier never produces ``DRAW``; agreed draws are recorded by the
    game layer.  It also does not enforce terminal states, the controller
    does.
    """

    __slots__ = ("_board", "_detector", "_validator")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._detector = CheckDetector(board)
        self._validator = MoveValidator(board, self._detector)

    def legal_moves(self, color: Color) -> Iterator[tuple[Square, Square]]:
        """Lazily yield every legal ``(from, to)`` pair for *color*.

        Sources and destinations are both visited in board-scan order.
        """
        is_legal = self._validator.is_legal_move
        for from_sq, _ in self._board.pieces(color):
            for to_sq in all_squares():
                if is_legal(from_sq, to_sq):
                    yield from_sq, to_sq

    def has_legal_moves(self, color: Color) -> bool:
        """True on the first legal move found; False once all are exhausted."""
        return next(self.legal_moves(color), None) is not None

    def is_in_check(self, color: Color) -> bool:
        return self._detector.is_king_in_check(color)

    def is_checkmate(self, color: Color) -> bool:
        return self.is_in_check(color) and not self.has_legal_moves(color)

    def is_stalemate(self, color: Color) -> bool:
        return not self.is_in_check(color) and not self.has_legal_moves(color)

    def classify(self, color: Color) -> GameStatus:
        """Status of the game for *color*, the side about to move."""
        in_check = self.is_in_check(color)
        has_moves = self.has_legal_moves(color)

        if in_check:
            return GameStatus.CHECK if has_moves else GameStatus.CHECKMATE
        if not has_moves:
            return GameStatus.STALEMATE
        return GameStatus.PLAYING
