"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, all_squares, is_on_board

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid with an incremental king-position cache.

    Squares are ``(row, col)`` tuples, so ``board[6, 4]`` reads e2.  No
    movement logic lives here.
    """

    __slots__ = ("_grid", "_king_squares")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not is_on_board(row, col):
            raise IndexError(f"Square off board: {sq!r}")
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if not is_on_board(row, col):
            raise IndexError(f"Square off board: {sq!r}")

        old_piece = self._grid[row][col]
        if old_piece is piece:
            return

        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            color_idx = int(old_piece.color)
            if self._king_squares[color_idx] == (row, col):
                self._king_squares[color_idx] = None

        self._grid[row][col] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = (row, col)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every (square, piece) pair in board-scan order."""
        for sq in all_squares():
            piece = self._grid[sq[0]][sq[1]]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All of *color*'s pieces with their squares, in board-scan order."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def count(self, color: Color, piece_type: PieceType | None = None) -> int:
        return sum(
            1
            for _, p in self.occupied()
            if p.color == color and (piece_type is None or p.piece_type == piece_type)
        )

    def king_square(self, color: Color) -> Square | None:
        """Cached square of *color*'s king, or None if it is not on the board."""
        return self._king_squares[int(color)]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Shallow copy: the grid is new, the pieces are shared."""
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position with freshly created pieces."""
        b = cls()
        for color in Color:
            for col in range(BOARD_SIZE):
                b[color.pawn_row, col] = Piece(color, PieceType.PAWN)
            for col, pt in enumerate(_BACK_RANK):
                b[color.back_row, col] = Piece(color, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Boards are equal when every cell holds the same piece object."""
        if not isinstance(other, Board):
            return NotImplemented
        return all(
            a is b
            for mine, theirs in zip(self._grid, other._grid)
            for a, b in zip(mine, theirs)
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
