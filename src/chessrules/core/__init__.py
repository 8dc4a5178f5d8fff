"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, GameStateClassifier, MoveValidator

    board = Board.initial()
    validator = MoveValidator(board)
    validator.is_legal_move((6, 4), (4, 4))   # e2-e4 → True
    GameStateClassifier(board).classify(Color.WHITE)
"""

from chessrules.core.board import Board
from chessrules.core.check import CheckDetector
from chessrules.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessrules.core.move import MoveRecord
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_fen,
    to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStateClassifier
from chessrules.core.types import (
    BOARD_SIZE,
    Square,
    is_on_board,
    make_square,
    parse_square,
    square_name,
)
from chessrules.core.validator import MoveValidator

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CheckDetector",
    "GameStateClassifier",
    "MoveRecord",
    "MoveValidator",
    "Piece",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "parse_fen",
    "to_fen",
]
