"""Game session — one game's board, turn, status and history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GameStatus
from chessrules.core.move import MoveRecord
from chessrules.core.notation import STARTING_FEN, parse_fen, to_fen
from chessrules.core.rules import GameStateClassifier
from chessrules.core.types import Square
from chessrules.core.validator import MoveValidator
from chessrules.game.history import MoveHistory

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Owns all mutable state of a single game.

    This is a pure data/logic class — no selection, no events, no locking.
    Callers serialise access per session.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    status: GameStatus = field(default=GameStatus.PLAYING, init=False)
    castling_rights: CastlingRights = field(default=CastlingRights.ALL, init=False)
    history: MoveHistory = field(default_factory=MoveHistory, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game, standard layout unless *fen* is given."""
        self.start_fen = fen or STARTING_FEN
        if fen is None:
            self.board = Board.initial()
            self.side_to_move = Color.WHITE
            self.castling_rights = CastlingRights.ALL
        else:
            self.board, self.side_to_move, self.castling_rights = parse_fen(fen)
        self.history.clear()
        self.status = GameStateClassifier(self.board).classify(self.side_to_move)
        _LOGGER.info("Game set up from %s (%s)", self.start_fen, self.status)

    # ── Rule queries ─────────────────────────────────────────────────────

    @property
    def validator(self) -> MoveValidator:
        return MoveValidator(self.board)

    @property
    def classifier(self) -> GameStateClassifier:
        return GameStateClassifier(self.board)

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        return self.validator.is_legal_move(from_sq, to_sq)

    def legal_moves(self, color: Color | None = None) -> list[tuple[Square, Square]]:
        """Every legal ``(from, to)`` pair for *color* (default: side to move)."""
        side = self.side_to_move if color is None else color
        return list(self.classifier.legal_moves(side))

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Apply a validated move, record it and hand the turn over.

        Caller is responsible for the legality check.
        """
        board = self.board
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq!r}")

        captured = board[to_sq]
        board[to_sq] = piece
        board[from_sq] = None
        piece.has_moved = True

        record = self.history.record(from_sq, to_sq, piece, captured)

        mover = self.side_to_move
        self.status = self.classifier.classify(mover.opposite)
        self.side_to_move = mover.opposite
        if self.status.is_terminal:
            _LOGGER.info("Game over after %s: %s", record, self.status)

        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns the undone record, or None if empty."""
        record = self.history.undo(self.board)
        if record is None:
            return None

        self.side_to_move = record.piece.color
        self.status = self.classifier.classify(self.side_to_move)
        return record

    def declare_draw(self) -> None:
        self.status = GameStatus.DRAW

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def to_fen(self) -> str:
        return to_fen(
            self.board, self.side_to_move, self.castling_rights, self.fullmove_display
        )
