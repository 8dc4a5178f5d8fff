"""Game management layer — session, history, controller.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.select_or_move(6, 4)   # pick up the e2 pawn
    ctrl.select_or_move(4, 4)   # e2-e4
    ctrl.status                 # GameStatus.PLAYING
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.history import MoveHistory
from chessrules.game.interfaces import DrawOffer, IGameController
from chessrules.game.session import GameSession

__all__ = [
    # Interfaces
    "DrawOffer",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSession",
    "MoveHistory",
]
