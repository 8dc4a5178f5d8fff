"""Tests for GameController — the interaction orchestrator."""

import logging

import pytest

from chessrules.core.enums import Color, GameStatus
from chessrules.core.move import MoveRecord
from chessrules.core.types import D1, D7, D8, E1, E2, E4, E5, E7, F2, F3, G2, G4, H4
from chessrules.game.controller import GameController
from chessrules.game.interfaces import DrawOffer


def _click(ctrl: GameController, *squares: tuple[int, int]) -> list[bool]:
    """Helper: feed a sequence of square interactions."""
    return [ctrl.select_or_move(row, col) for row, col in squares]


def _fools_mate(ctrl: GameController) -> None:
    # 1.f3 e5 2.g4 Qh4#
    assert all(_click(ctrl, F2, F3, E7, E5, G2, G4, D8, H4))


class TestNewGame:
    def test_initial_state(self, controller: GameController) -> None:
        assert controller.side_to_move == Color.WHITE
        assert controller.status == GameStatus.PLAYING
        assert controller.move_history == ()
        assert controller.selected is None

    def test_custom_fen(self) -> None:
        ctrl = GameController("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert ctrl.side_to_move == Color.BLACK

    def test_reset_wipes_history(self, controller: GameController) -> None:
        _click(controller, E2, E4)
        controller.reset()
        assert controller.move_history == ()
        assert controller.side_to_move == Color.WHITE
        assert controller.session.board[E2] is not None


class TestSelection:
    def test_select_own_piece(self, controller: GameController) -> None:
        assert controller.select_or_move(*E2)
        assert controller.selected == E2

    def test_select_empty_square(self, controller: GameController) -> None:
        assert not controller.select_or_move(*E4)
        assert controller.selected is None

    def test_select_opponent_piece(self, controller: GameController) -> None:
        assert not controller.select_or_move(*E7)
        assert controller.selected is None

    @pytest.mark.parametrize(("row", "col"), [(-1, 0), (8, 0), (0, 8), (3, -2)])
    def test_off_board_ignored(
        self, controller: GameController, row: int, col: int
    ) -> None:
        assert not controller.select_or_move(row, col)
        controller.select_or_move(*E2)
        assert not controller.select_or_move(row, col)
        assert controller.selected == E2


class TestMoves:
    def test_double_step_opening(self, controller: GameController) -> None:
        assert _click(controller, E2, E4) == [True, True]
        assert controller.side_to_move == Color.BLACK
        assert len(controller.move_history) == 1
        assert controller.status == GameStatus.PLAYING
        assert controller.selected is None

    def test_illegal_move_rejected(self, controller: GameController) -> None:
        assert _click(controller, E2, E5) == [True, False]
        assert controller.side_to_move == Color.WHITE
        assert controller.move_history == ()
        assert controller.selected is None
        assert controller.session.board[E2] is not None

    def test_reselecting_own_piece_fails(self, controller: GameController) -> None:
        assert _click(controller, E2, D1) == [True, False]
        assert controller.selected is None
        assert controller.side_to_move == Color.WHITE

    def test_move_piece_requires_side_to_move(self, controller: GameController) -> None:
        assert not controller.move_piece(E7, E5)
        assert controller.side_to_move == Color.WHITE

    def test_check_status(self, controller: GameController) -> None:
        # 1.e4 f5 2.Qh5+
        assert all(_click(controller, E2, E4, (1, 5), (3, 5), D1, (3, 7)))
        assert controller.status == GameStatus.CHECK
        assert controller.side_to_move == Color.BLACK

    def test_escape_rook_check(self) -> None:
        ctrl = GameController("4r3/8/8/8/8/8/8/1N2K3 w - - 0 1")
        assert ctrl.status == GameStatus.CHECK
        assert _click(ctrl, (7, 1), (5, 2)) == [True, False]
        assert _click(ctrl, E1, (7, 3)) == [True, True]
        assert ctrl.side_to_move == Color.BLACK


class TestPossibleMoves:
    def test_lone_knight(self) -> None:
        ctrl = GameController("8/8/8/8/4N3/8/8/8 w - - 0 1")
        assert ctrl.possible_moves(4, 4) == [
            (2, 3), (2, 5), (3, 2), (3, 6), (5, 2), (5, 6), (6, 3), (6, 5),
        ]

    def test_empty_and_off_board(self, controller: GameController) -> None:
        assert controller.possible_moves(*E4) == []
        assert controller.possible_moves(9, 9) == []

    def test_pawn_at_start(self, controller: GameController) -> None:
        assert controller.possible_moves(*E2) == [E4, (5, 4)]


class TestTerminal:
    def test_fools_mate(self, controller: GameController) -> None:
        _fools_mate(controller)
        assert controller.status == GameStatus.CHECKMATE
        assert len(controller.move_history) == 4

    def test_no_moves_after_mate(self, controller: GameController) -> None:
        _fools_mate(controller)
        assert not controller.select_or_move(*E2)
        assert not controller.move_piece((6, 0), (5, 0))
        assert not controller.undo_last_move()
        assert len(controller.move_history) == 4

    def test_reset_after_mate(self, controller: GameController) -> None:
        _fools_mate(controller)
        controller.reset()
        assert controller.status == GameStatus.PLAYING
        assert controller.select_or_move(*E2)

    def test_stalemating_move(self) -> None:
        ctrl = GameController("7k/8/5K2/6Q1/8/8/8/8 w - - 0 1")
        assert _click(ctrl, (3, 6), (2, 6)) == [True, True]
        assert ctrl.status == GameStatus.STALEMATE
        assert not ctrl.select_or_move(0, 7)


class TestUndo:
    def test_undo_reverts(self, controller: GameController) -> None:
        board = controller.session.board
        before = board.copy()
        _click(controller, E2, E4)
        assert controller.undo_last_move()
        assert board == before
        assert controller.side_to_move == Color.WHITE
        assert controller.move_history == ()

    def test_undo_empty_fails(self, controller: GameController) -> None:
        assert not controller.undo_last_move()

    def test_undo_capture_restores_piece(self, controller: GameController) -> None:
        # 1.e4 d5 2.exd5
        _click(controller, E2, E4, D7, (3, 3), E4, (3, 3))
        victim = controller.move_history[-1].captured
        assert victim is not None
        assert controller.undo_last_move()
        assert controller.session.board[3, 3] is victim
        assert controller.side_to_move == Color.WHITE

    def test_undo_king_move_restores_cache(self) -> None:
        ctrl = GameController("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        _click(ctrl, E1, (6, 4))
        assert ctrl.undo_last_move()
        assert ctrl.session.board.king_square(Color.WHITE) == E1


class TestDraw:
    def test_draw_offer_accept(self, controller: GameController) -> None:
        controller.offer_draw(Color.WHITE)
        assert controller.draw_offer == DrawOffer.OFFERED
        assert controller.accept_draw(Color.BLACK)
        assert controller.status == GameStatus.DRAW
        assert not controller.select_or_move(*E2)

    def test_cannot_accept_own_draw_offer(self, controller: GameController) -> None:
        controller.offer_draw(Color.WHITE)
        assert not controller.accept_draw(Color.WHITE)
        assert controller.status == GameStatus.PLAYING
        assert controller.draw_offer == DrawOffer.OFFERED

    def test_draw_offer_decline(self, controller: GameController) -> None:
        controller.offer_draw(Color.WHITE)
        controller.decline_draw()
        assert controller.draw_offer == DrawOffer.DECLINED
        assert not controller.session.is_game_over

    def test_move_cancels_offer(self, controller: GameController) -> None:
        controller.offer_draw(Color.BLACK)
        _click(controller, E2, E4)
        assert controller.draw_offer == DrawOffer.NONE


class TestEvents:
    def test_move_event_fires(self, controller: GameController) -> None:
        seen: list[str] = []
        controller.events.on_move.append(lambda rec, _s: seen.append(str(rec)))
        _click(controller, E2, E4)
        assert seen == ["e2e4"]

    def test_no_event_for_rejected_move(self, controller: GameController) -> None:
        seen: list[MoveRecord] = []
        controller.events.on_move.append(lambda rec, _s: seen.append(rec))
        _click(controller, E2, E5)
        assert seen == []

    def test_status_event_on_mate(self, controller: GameController) -> None:
        statuses: list[GameStatus] = []
        controller.events.on_status_changed.append(statuses.append)
        _fools_mate(controller)
        assert statuses == [GameStatus.CHECKMATE]

    def test_undo_event(self, controller: GameController) -> None:
        undone: list[MoveRecord] = []
        controller.events.on_undo.append(undone.append)
        _click(controller, E2, E4)
        controller.undo_last_move()
        assert [str(r) for r in undone] == ["e2e4"]


class TestLogging:
    def test_rejection_logged(
        self, controller: GameController, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessrules.game.controller"):
            controller.select_or_move(*E7)
        assert "opponent" in caplog.text

    def test_move_logged(
        self, controller: GameController, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="chessrules.game.controller"):
            _click(controller, E2, E4)
        assert "white played e2e4" in caplog.text
