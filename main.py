from __future__ import annotations

import argparse
import logging

import pygame

from engine.game import CheckersGame
from ui.pygame_gui import CheckersGUI


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers in a pygame window.")
	parser.add_argument("--square-size", type=int, default=80, help="Board square size in pixels.")
	parser.add_argument("--log-level", default="info", help="Logging level.")
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logging.basicConfig(level=args.log_level.upper())
	pygame.init()
	try:
		game = CheckersGame()
		gui = CheckersGUI(game, square_size=args.square_size)
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
