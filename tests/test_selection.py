from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from engine.game import CheckersGame, SelectionState, TapOutcome  # noqa: E402
from engine.pieces import Color  # noqa: E402
from engine.position import Position  # noqa: E402


class TapSelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = CheckersGame()

    def test_starts_waiting_for_selection(self) -> None:
        self.assertEqual(self.game.state, SelectionState.WAITING_FOR_SELECTION)

    def test_tap_own_piece_selects_it(self) -> None:
        outcome = self.game.tap(Position(1, 2))
        self.assertEqual(outcome, TapOutcome.SELECTED)
        self.assertEqual(self.game.state, SelectionState.PIECE_SELECTED)
        self.assertIs(self.game.selected_piece, self.game.board.getPiece(Position(1, 2)))

    def test_tap_opponent_or_empty_square_is_ignored(self) -> None:
        self.assertEqual(self.game.tap(Position(0, 5)), TapOutcome.IGNORED)
        self.assertEqual(self.game.tap(Position(3, 3)), TapOutcome.IGNORED)
        self.assertEqual(self.game.tap(Position(9, 9)), TapOutcome.IGNORED)
        self.assertIsNone(self.game.selected_piece)

    def test_second_tap_on_valid_square_moves(self) -> None:
        self.game.tap(Position(1, 2))
        outcome = self.game.tap(Position(2, 3))

        self.assertEqual(outcome, TapOutcome.MOVED)
        self.assertIsNone(self.game.selected_piece)
        self.assertIsNotNone(self.game.board.getPiece(Position(2, 3)))
        self.assertEqual(self.game.current_player, Color.BLACK)

    def test_second_tap_on_invalid_square_deselects_silently(self) -> None:
        before = self.game.board.to_state()
        self.game.tap(Position(1, 2))
        outcome = self.game.tap(Position(1, 4))

        self.assertEqual(outcome, TapOutcome.REJECTED)
        self.assertEqual(self.game.state, SelectionState.WAITING_FOR_SELECTION)
        self.assertEqual(self.game.board.to_state(), before)
        self.assertEqual(self.game.current_player, Color.RED)

    def test_second_tap_on_own_piece_does_not_reselect(self) -> None:
        self.game.tap(Position(1, 2))
        outcome = self.game.tap(Position(3, 2))
        self.assertEqual(outcome, TapOutcome.REJECTED)
        self.assertIsNone(self.game.selected_piece)

    def test_players_alternate_through_taps(self) -> None:
        self.game.tap(Position(1, 2))
        self.game.tap(Position(2, 3))
        self.assertEqual(self.game.tap(Position(2, 3)), TapOutcome.IGNORED)
        self.assertEqual(self.game.tap(Position(0, 5)), TapOutcome.SELECTED)
        self.assertEqual(self.game.tap(Position(1, 4)), TapOutcome.MOVED)
        self.assertEqual(self.game.current_player, Color.RED)

    def test_off_board_tap_with_selection_is_rejected(self) -> None:
        self.game.tap(Position(1, 2))
        outcome = self.game.tap(Position(-1, 3))

        self.assertEqual(outcome, TapOutcome.REJECTED)
        self.assertIsNone(self.game.selected_piece)
        self.assertEqual(self.game.current_player, Color.RED)

    def test_clear_selection(self) -> None:
        self.game.tap(Position(1, 2))
        self.game.clear_selection()
        self.assertEqual(self.game.state, SelectionState.WAITING_FOR_SELECTION)

    def test_reset_restores_initial_game(self) -> None:
        self.game.tap(Position(1, 2))
        self.game.tap(Position(2, 3))
        self.game.tap(Position(0, 5))

        self.game.reset()

        self.assertEqual(self.game.current_player, Color.RED)
        self.assertIsNone(self.game.selected_piece)
        self.assertIsNotNone(self.game.board.getPiece(Position(1, 2)))
        self.assertIsNone(self.game.board.getPiece(Position(2, 3)))
        self.assertEqual(len(self.game.board.getAllPieces()), 24)


if __name__ == "__main__":
    unittest.main()
