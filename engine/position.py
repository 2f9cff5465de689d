from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int

    def is_on_board(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def offset(self, other: "Position") -> Coordinate:
        return (other.x - self.x, other.y - self.y)

    def midpoint(self, other: "Position") -> "Position":
        return Position((self.x + other.x) // 2, (self.y + other.y) // 2)

    @property
    def is_dark(self) -> bool:
        return (self.x + self.y) % 2 == 1

    def __str__(self) -> str:
        return f"{self.x},{self.y}"
