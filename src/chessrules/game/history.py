"""Append-only move log with single-step LIFO undo."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.move import MoveRecord

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece
    from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


class MoveHistory:
    """Ordered record of executed moves.

    Only the most recent move can be reversed; there is no redo.
    """

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []

    def record(
        self,
        from_sq: Square,
        to_sq: Square,
        piece: Piece,
        captured: Piece | None = None,
    ) -> MoveRecord:
        """Append a move that has already been applied to the board."""
        entry = MoveRecord(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece,
            captured=captured,
            ply=len(self._records) + 1,
        )
        self._records.append(entry)
        return entry

    def undo(self, board: Board) -> MoveRecord | None:
        """Reverse the last move on *board*. Returns the record, or None if empty.

        The piece on ``to_sq`` goes back to ``from_sq``, the captured piece
        (or nothing) returns to ``to_sq`` and the king cache follows via the
        board.  ``has_moved`` is cleared unconditionally, even if the piece
        had moved before this move.
        """
        if not self._records:
            return None

        entry = self._records[-1]
        piece = board[entry.to_sq]
        if piece is None:
            raise RuntimeError(f"Board out of sync with history: {entry} has no piece")

        self._records.pop()
        board[entry.from_sq] = piece
        board[entry.to_sq] = entry.captured
        piece.has_moved = False
        _LOGGER.debug("Reverted %s", entry)
        return entry

    def clear(self) -> None:
        self._records.clear()

    @property
    def last(self) -> MoveRecord | None:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def as_tuple(self) -> tuple[MoveRecord, ...]:
        """Snapshot of the log; mutating it does not touch the history."""
        return tuple(self._records)
