"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 at the top):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)

Row 0 is Black's back rank, row 7 is White's.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


def is_on_board(row: int, col: int) -> bool:
    """Bounds check for a (row, col) pair."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def make_square(row: int, col: int) -> Square:
    """Create a square, rejecting coordinates off the board."""
    if not is_on_board(row, col):
        raise ValueError(f"Square off board: ({row}, {col})")
    return (row, col)


def all_squares() -> Iterator[Square]:
    """Every square in board-scan order (row-major, then column)."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield (row, col)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. (7, 4) → 'e1', (0, 0) → 'a8'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
