"""FEN parsing and serialization.

Only the fields this engine models are interpreted: piece placement, side
to move and the (inert) castling rights.  En-passant and clock fields are
accepted for compatibility and ignored.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def board_from_fen(placement: str) -> Board:
    """Parse the piece-placement field (or a whole FEN) into a :class:`Board`.

    FEN lists rank 8 first, which is row 0 here, so ranks map to rows in
    order.  All pieces start with ``has_moved`` cleared.
    """
    fields = placement.split()
    placement = fields[0] if fields else placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[row, col] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def parse_fen(fen: str) -> tuple[Board, Color, CastlingRights]:
    """Parse a FEN string into board, side to move and castling rights."""
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side_part = parts[1]
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = CastlingRights.NONE
    castling_part = parts[2] if len(parts) > 2 else "-"
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    if len(parts) > 3 and parts[3] != "-":
        parse_square(parts[3])  # validated, not used

    for clock in parts[4:]:
        if not clock.isdigit():
            raise ValueError(f"Invalid FEN clock field: {clock!r}")

    return board, side, castling


def board_to_fen(board: Board) -> str:
    """Serialise piece placement to the first FEN field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[row, col]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def to_fen(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights = CastlingRights.NONE,
    fullmove_number: int = 1,
) -> str:
    """Full six-field FEN; en-passant is always '-' and the halfmove clock 0."""
    castling_text = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if castling & right
    )
    side = "w" if side_to_move == Color.WHITE else "b"
    return (
        f"{board_to_fen(board)} {side} {castling_text or '-'} - 0 {fullmove_number}"
    )
