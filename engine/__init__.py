"""Checkers rules engine package."""

from .board import Board
from .game import CheckersGame, SelectionState, TapOutcome
from .pieces import Color, Piece
from .position import BOARD_SIZE, Coordinate, Position

__all__ = [
	"BOARD_SIZE",
	"Board",
	"CheckersGame",
	"Color",
	"Coordinate",
	"Piece",
	"Position",
	"SelectionState",
	"TapOutcome",
]
