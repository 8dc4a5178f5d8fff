"""Per-piece movement and capture patterns.

Every pattern answers one question for a piece standing on ``from_sq``:
can it reach ``to_sq`` on the current board?  Movement patterns are used
by :class:`~chessrules.core.validator.MoveValidator`; attack patterns by
:class:`~chessrules.core.check.CheckDetector`.  The two differ only for
pawns, which move straight ahead but capture diagonally.

Neither table looks at whose piece stands on ``to_sq``, nor at whether
the mover's own king ends up attacked; that is the validator's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TypeAlias

    from chessrules.core.board import Board
    from chessrules.core.piece import Piece
    from chessrules.core.types import Square

    PatternFn: TypeAlias = Callable[[Board, Piece, Square, Square], bool]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the two is empty.

    Only meaningful for squares on a common row, column or diagonal.
    """
    row_step = _sign(to_sq[0] - from_sq[0])
    col_step = _sign(to_sq[1] - from_sq[1])
    row, col = from_sq[0] + row_step, from_sq[1] + col_step
    while (row, col) != to_sq:
        if board[row, col] is not None:
            return False
        row += row_step
        col += col_step
    return True


# -- Geometry ---------------------------------------------------------------


def _is_straight(from_sq: Square, to_sq: Square) -> bool:
    return from_sq != to_sq and (from_sq[0] == to_sq[0] or from_sq[1] == to_sq[1])


def _is_diagonal(from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(to_sq[0] - from_sq[0])
    return d_row != 0 and d_row == abs(to_sq[1] - from_sq[1])


# -- Shared patterns ----------------------------------------------------------


def _rook(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return _is_straight(from_sq, to_sq) and is_path_clear(board, from_sq, to_sq)


def _bishop(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return _is_diagonal(from_sq, to_sq) and is_path_clear(board, from_sq, to_sq)


def _queen(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return (
        _is_straight(from_sq, to_sq) or _is_diagonal(from_sq, to_sq)
    ) and is_path_clear(board, from_sq, to_sq)


def _knight(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return (to_sq[0] - from_sq[0], to_sq[1] - from_sq[1]) in KNIGHT_OFFSETS


def _king(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return (to_sq[0] - from_sq[0], to_sq[1] - from_sq[1]) in KING_OFFSETS


# -- Pawns ------------------------------------------------------------------


def _pawn_capture(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """One step diagonally forward, regardless of what stands there."""
    return (
        to_sq[0] - from_sq[0] == piece.color.forward
        and abs(to_sq[1] - from_sq[1]) == 1
    )


def _pawn_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    forward = piece.color.forward
    d_row = to_sq[0] - from_sq[0]

    if to_sq[1] == from_sq[1]:
        if board[to_sq] is not None:
            return False
        if d_row == forward:
            return True
        return (
            d_row == 2 * forward
            and from_sq[0] == piece.color.pawn_row
            and board[from_sq[0] + forward, from_sq[1]] is None
        )

    # Diagonal steps only capture; no en passant.
    target = board[to_sq]
    return (
        _pawn_capture(board, piece, from_sq, to_sq)
        and target is not None
        and target.color != piece.color
    )


# -- Dispatch tables ----------------------------------------------------------

MOVE_PATTERNS: dict[PieceType, PatternFn] = {
    PieceType.PAWN: _pawn_move,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}

ATTACK_PATTERNS: dict[PieceType, PatternFn] = {
    **MOVE_PATTERNS,
    PieceType.PAWN: _pawn_capture,
}


def can_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Whether *piece*'s movement pattern takes it from *from_sq* to *to_sq*."""
    return MOVE_PATTERNS[piece.piece_type](board, piece, from_sq, to_sq)


def attacks(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Whether *piece* on *from_sq* could capture on *to_sq*."""
    return ATTACK_PATTERNS[piece.piece_type](board, piece, from_sq, to_sq)
