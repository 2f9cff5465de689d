from __future__ import annotations

from enum import Enum
from itertools import count
from typing import Optional

from .position import Position


_PIECE_ID_COUNTER = count()


class Color(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self == Color.RED else Color.RED

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def promotion_row(self) -> int:
        return 7 if self == Color.RED else 0

    def is_forward(self, dy: int) -> bool:
        return dy > 0 if self == Color.RED else dy < 0


class Piece:
    def __init__(
        self,
        color: Color,
        position: Position,
        *,
        is_king: bool = False,
        identifier: Optional[int] = None,
    ) -> None:
        self.color = color
        self.position = position
        self.is_king = is_king
        self.id = identifier if identifier is not None else next(_PIECE_ID_COUNTER)

    def move(self, position: Position) -> None:
        self.position = position

    def promote(self) -> None:
        self.is_king = True

    @property
    def symbol(self) -> str:
        letter = "r" if self.color == Color.RED else "b"
        return letter.upper() if self.is_king else letter

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name},{self.position.x},{self.position.y})"
