"""GameController — turns board interactions into validated moves.

Coordinates: GameSession, MoveValidator, MoveHistory, GameStateClassifier.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import CastlingRights, Color, GameStatus
from chessrules.core.move import MoveRecord
from chessrules.core.types import Square, is_on_board, square_name
from chessrules.game.interfaces import DrawOffer, IGameController
from chessrules.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameSession], None]
StatusCallback = Callable[[GameStatus], None]
UndoCallback = Callable[[MoveRecord], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a two-player game driven by square interactions.

    The first interaction selects one of the side to move's pieces; the
    next one tries to move it there.  Failures come back as ``False`` and
    leave board, history and turn untouched.

    Thread-safety: none.  A host serving several games concurrently must
    serialise calls per controller.
    """

    __slots__ = (
        "_session",
        "_selected",
        "_draw_offer",
        "_draw_offer_by",
        "events",
    )

    def __init__(self, fen: str | None = None) -> None:
        self._session = GameSession()
        self._selected: Square | None = None
        self._draw_offer = DrawOffer.NONE
        self._draw_offer_by: Color | None = None
        self.events = GameEvents()
        self._session.setup(fen)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def side_to_move(self) -> Color:
        return self._session.side_to_move

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def status(self) -> GameStatus:
        return self._session.status

    @property
    def move_history(self) -> tuple[MoveRecord, ...]:
        return self._session.history.as_tuple()

    @property
    def castling_rights(self) -> CastlingRights:
        return self._session.castling_rights

    @property
    def draw_offer(self) -> DrawOffer:
        return self._draw_offer

    # ── IGameController impl ─────────────────────────────────────────────

    def reset(self, fen: str | None = None) -> None:
        self._session.setup(fen)
        self._selected = None
        self._draw_offer = DrawOffer.NONE
        self._draw_offer_by = None
        self._emit_status()

    def select_or_move(self, row: int, col: int) -> bool:
        if not is_on_board(row, col):
            _LOGGER.debug("Ignoring off-board square (%d, %d)", row, col)
            return False
        if self._selected is None:
            return self.select_piece(row, col)
        return self.move_piece(self._selected, (row, col))

    def select_piece(self, row: int, col: int) -> bool:
        if not is_on_board(row, col):
            _LOGGER.debug("Ignoring off-board square (%d, %d)", row, col)
            return False
        if self._session.is_game_over:
            _LOGGER.debug("Game is over (%s); selection refused", self.status)
            return False

        piece = self._session.board[row, col]
        if piece is None:
            _LOGGER.debug("No piece on %s", square_name((row, col)))
            return False
        if piece.color != self._session.side_to_move:
            _LOGGER.debug("Cannot select opponent piece on %s", square_name((row, col)))
            return False

        self._selected = (row, col)
        _LOGGER.debug(
            "Selected %s %s on %s",
            piece.color,
            piece.piece_type,
            square_name((row, col)),
        )
        return True

    def move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        self._selected = None
        session = self._session

        if not (is_on_board(*from_sq) and is_on_board(*to_sq)):
            _LOGGER.debug("Ignoring off-board move %r -> %r", from_sq, to_sq)
            return False
        if session.is_game_over:
            _LOGGER.debug("Game is over (%s); move refused", session.status)
            return False

        piece = session.board[from_sq]
        if piece is None or piece.color != session.side_to_move:
            _LOGGER.debug(
                "No %s piece on %s", session.side_to_move, square_name(from_sq)
            )
            return False
        if not session.is_legal_move(from_sq, to_sq):
            _LOGGER.debug("Illegal move %s%s", square_name(from_sq), square_name(to_sq))
            return False

        previous = session.status
        record = session.apply_move(from_sq, to_sq)
        # Any move cancels a pending offer.
        self._draw_offer = DrawOffer.NONE
        self._draw_offer_by = None
        _LOGGER.info("%s played %s (%s)", piece.color, record, session.status)

        self._emit_move(record)
        if session.status != previous:
            self._emit_status()
        return True

    def possible_moves(self, row: int, col: int) -> list[Square]:
        if not is_on_board(row, col):
            return []
        return self._session.validator.possible_moves((row, col))

    def undo_last_move(self) -> bool:
        session = self._session
        if session.is_game_over:
            _LOGGER.debug("Game is over (%s); undo refused", session.status)
            return False

        previous = session.status
        record = session.undo_last_move()
        if record is None:
            _LOGGER.debug("Nothing to undo")
            return False

        self._selected = None
        _LOGGER.info("Undid %s", record)
        for cb in self.events.on_undo:
            cb(record)
        if session.status != previous:
            self._emit_status()
        return True

    def offer_draw(self, color: Color) -> None:
        if self._session.is_game_over:
            return
        if self._draw_offer == DrawOffer.OFFERED:
            return
        self._draw_offer = DrawOffer.OFFERED
        self._draw_offer_by = color

    def accept_draw(self, color: Color) -> bool:
        if self._draw_offer != DrawOffer.OFFERED:
            return False
        if self._draw_offer_by in (None, color):
            return False
        self._draw_offer = DrawOffer.ACCEPTED
        self._draw_offer_by = None
        self._selected = None
        self._session.declare_draw()
        _LOGGER.info("Draw agreed")
        self._emit_status()
        return True

    def decline_draw(self) -> None:
        self._draw_offer = DrawOffer.DECLINED
        self._draw_offer_by = None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._session)

    def _emit_status(self) -> None:
        status = self._session.status
        for cb in self.events.on_status_changed:
            cb(status)
