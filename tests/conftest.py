"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.controller import GameController


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def start_board() -> Board:
    return Board.initial()


@pytest.fixture
def controller() -> GameController:
    """Controller at the standard starting position."""
    return GameController()


@pytest.fixture
def place():
    """Helper: put a fresh piece on a board and return it."""

    def _place(board: Board, sq: Square, color: Color, piece_type: PieceType) -> Piece:
        piece = Piece(color, piece_type)
        board[sq] = piece
        return piece

    return _place
