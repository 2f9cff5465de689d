from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from engine.game import CheckersGame, TapOutcome  # noqa: E402
from engine.position import Position  # noqa: E402
from ui.pygame_gui import CheckersGUI  # noqa: E402


class GuiClickTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        pygame.init()

    @classmethod
    def tearDownClass(cls) -> None:
        pygame.quit()

    def setUp(self) -> None:
        self.game = CheckersGame()
        self.gui = CheckersGUI(self.game, square_size=50)

    def _pixel_for(self, x: int, y: int) -> tuple[int, int]:
        size = self.gui.square_size
        return (self.gui.margin + x * size + size // 2, self.gui.margin + y * size + size // 2)

    def test_pixel_to_cell(self) -> None:
        self.assertEqual(self.gui._board_coords_from_pos(self._pixel_for(3, 6)), Position(3, 6))
        self.assertIsNone(self.gui._board_coords_from_pos((5, 5)))
        self.assertIsNone(self.gui._board_coords_from_pos((self.gui.window_width - 1, 60)))

    def test_click_select_then_move(self) -> None:
        outcome = self.gui._handle_click(self._pixel_for(1, 2))
        self.assertEqual(outcome, TapOutcome.SELECTED)
        self.assertEqual(self.gui.destinations, {Position(0, 3), Position(2, 3)})

        outcome = self.gui._handle_click(self._pixel_for(2, 3))
        self.assertEqual(outcome, TapOutcome.MOVED)
        self.assertEqual(self.gui.destinations, set())
        self.assertIsNotNone(self.game.board.getPiece(Position(2, 3)))

    def test_click_outside_board_keeps_selection(self) -> None:
        self.gui._handle_click(self._pixel_for(1, 2))
        self.assertIsNone(self.gui._handle_click((1, 1)))
        self.assertIsNotNone(self.game.selected_piece)

    def test_draw_runs_headless(self) -> None:
        self.gui._handle_click(self._pixel_for(1, 2))
        self.gui._draw()


if __name__ == "__main__":
    unittest.main()
