from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .board import Board
from .pieces import Color, Piece
from .position import Position

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    WAITING_FOR_SELECTION = "waiting_for_selection"
    PIECE_SELECTED = "piece_selected"


class TapOutcome(str, Enum):
    SELECTED = "selected"
    MOVED = "moved"
    REJECTED = "rejected"
    IGNORED = "ignored"


class CheckersGame:
    """Rules engine and session state for a single game.

    Red moves first and towards increasing ``y``. Men step one square
    diagonally forward; any piece, king or not, may jump an opposing piece
    in any diagonal direction. Kings are not given regular steps.
    """

    def __init__(self) -> None:
        self.board: Board
        self.current_player = Color.RED
        self.selected_piece: Optional[Piece] = None
        self.setup_initial_board()

    def setup_initial_board(self) -> None:
        self.board = Board.initial()

    def reset(self) -> None:
        self.current_player = Color.RED
        self.selected_piece = None
        self.setup_initial_board()

    @property
    def state(self) -> SelectionState:
        if self.selected_piece is None:
            return SelectionState.WAITING_FOR_SELECTION
        return SelectionState.PIECE_SELECTED

    def is_valid_move(self, start: Position, end: Position) -> bool:
        if not start.is_on_board() or not end.is_on_board():
            return False
        piece = self.board.getPiece(start)
        if piece is None:
            return False
        if not self.board.is_empty(end):
            return False

        dx, dy = start.offset(end)

        if not piece.is_king and abs(dx) == 1 and abs(dy) == 1 and piece.color.is_forward(dy):
            return True

        if abs(dx) == 2 and abs(dy) == 2:
            jumped = self.board.getPiece(start.midpoint(end))
            return jumped is not None and jumped.color != piece.color

        return False

    def apply_move(self, start: Position, end: Position) -> None:
        """Execute a move the caller has already checked with ``is_valid_move``.

        The turn passes to the other player on every call, including when
        ``start`` is empty or ``end`` is off the board and nothing moves.
        """
        piece = self.board.getPiece(start)
        if piece is None:
            logger.debug("No piece at %s; turn passes without a move.", start)
        elif not end.is_on_board():
            logger.debug("Destination %s is off the board; turn passes without a move.", end)
        else:
            dx, _ = start.offset(end)
            if abs(dx) == 2:
                captured = self.board.remove_piece(start.midpoint(end))
                if captured is not None:
                    logger.debug("%s captured %r", piece.color.label, captured)
            self.board.relocate(piece, end)
            if not piece.is_king and end.y == piece.color.promotion_row:
                piece.promote()
                logger.debug("%s piece promoted to king at %s", piece.color.label, end)
            logger.debug("%s moved %s -> %s", piece.color.label, start, end)
            logger.debug("Board after move:\n%s", self.board.render_text())

        self.current_player = self.current_player.opposite

    def select(self, position: Position) -> bool:
        piece = self.board.getPiece(position)
        if piece is None or piece.color != self.current_player:
            return False
        self.selected_piece = piece
        return True

    def clear_selection(self) -> None:
        self.selected_piece = None

    def tap(self, position: Position) -> TapOutcome:
        selected = self.selected_piece
        if selected is None:
            return TapOutcome.SELECTED if self.select(position) else TapOutcome.IGNORED

        start = selected.position
        self.clear_selection()
        if self.is_valid_move(start, position):
            self.apply_move(start, position)
            return TapOutcome.MOVED
        return TapOutcome.REJECTED
