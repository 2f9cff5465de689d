from __future__ import annotations

from pydantic import BaseModel, Field

from engine.position import BOARD_SIZE, Position


class CoordinateModel(BaseModel):
    x: int = Field(..., ge=0, lt=BOARD_SIZE)
    y: int = Field(..., ge=0, lt=BOARD_SIZE)

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class MoveRequest(BaseModel):
    start: CoordinateModel
    end: CoordinateModel


class TapRequest(CoordinateModel):
    pass
