from __future__ import annotations

from typing import Iterator, Optional

from .pieces import Color, Piece
from .position import BOARD_SIZE, Position


RED_START_ROWS = range(0, 3)
BLACK_START_ROWS = range(5, 8)

BoardStatePiece = tuple[int, int, str, bool, int]
BoardState = tuple[BoardStatePiece, ...]


class Board:
    """8x8 grid of optional pieces, indexed as ``grid[y][x]``."""

    def __init__(self) -> None:
        self.grid: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.boardSize = BOARD_SIZE

    @classmethod
    def initial(cls) -> "Board":
        board = cls()
        board.setup_initial_board()
        return board

    def setup_initial_board(self) -> None:
        for y in range(self.boardSize):
            for x in range(self.boardSize):
                position = Position(x, y)
                if not position.is_dark:
                    continue
                if y in RED_START_ROWS:
                    self.grid[y][x] = Piece(Color.RED, position)
                elif y in BLACK_START_ROWS:
                    self.grid[y][x] = Piece(Color.BLACK, position)

    def getPiece(self, position: Position) -> Optional[Piece]:
        if position.is_on_board():
            return self.grid[position.y][position.x]
        return None

    def is_empty(self, position: Position) -> bool:
        return self.getPiece(position) is None

    def getAllPieces(self) -> list[Piece]:
        return list(self._iter_pieces())

    def _iter_pieces(self) -> Iterator[Piece]:
        for row in self.grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def place_piece(self, piece: Piece) -> None:
        position = piece.position
        if not position.is_on_board():
            raise ValueError(f"Cannot place a piece off the board at {position}.")
        if self.grid[position.y][position.x] is not None:
            raise ValueError(f"Square {position} is already occupied.")
        self.grid[position.y][position.x] = piece

    def remove_piece(self, position: Position) -> Optional[Piece]:
        piece = self.getPiece(position)
        if piece is not None:
            self.grid[position.y][position.x] = None
        return piece

    def relocate(self, piece: Piece, end: Position) -> None:
        """Move ``piece`` to ``end``, keeping grid slot and piece position in step."""
        if not end.is_on_board():
            raise ValueError(f"Destination {end} is outside the board.")
        start = piece.position
        if self.getPiece(start) is piece:
            self.grid[start.y][start.x] = None
        self.grid[end.y][end.x] = piece
        piece.move(end)

    def count(self, color: Color) -> tuple[int, int]:
        total = kings = 0
        for piece in self._iter_pieces():
            if piece.color != color:
                continue
            total += 1
            kings += int(piece.is_king)
        return total, kings

    def to_state(self) -> BoardState:
        return tuple(
            (piece.position.x, piece.position.y, piece.color.value, piece.is_king, piece.id)
            for piece in self._iter_pieces()
        )

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board = cls()
        for x, y, color_value, is_king, identifier in state:
            color = Color(color_value)
            board.place_piece(Piece(color, Position(x, y), is_king=is_king, identifier=identifier))
        return board

    def render_text(self) -> str:
        lines = []
        for row in self.grid:
            lines.append(" ".join(piece.symbol if piece else "." for piece in row))
        return "\n".join(lines)
