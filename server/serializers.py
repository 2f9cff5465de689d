from __future__ import annotations

from typing import Any, Optional

from engine.game import CheckersGame
from engine.pieces import Color, Piece
from engine.position import Position


def _position_to_dict(position: Position) -> dict[str, int]:
    return {"x": position.x, "y": position.y}


def serialize_piece(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "x": piece.position.x,
        "y": piece.position.y,
        "color": piece.color.value,
        "isKing": piece.is_king,
    }


def serialize_selection(piece: Optional[Piece]) -> Optional[dict[str, int]]:
    if piece is None:
        return None
    return _position_to_dict(piece.position)


def serialize_game(game: CheckersGame) -> dict[str, Any]:
    counts = {}
    for color in (Color.RED, Color.BLACK):
        total, kings = game.board.count(color)
        counts[color.value] = {"total": total, "kings": kings}

    return {
        "boardSize": game.board.boardSize,
        "currentPlayer": game.current_player.value,
        "state": game.state.value,
        "selection": serialize_selection(game.selected_piece),
        "pieces": [serialize_piece(piece) for piece in game.board.getAllPieces()],
        "pieceCounts": counts,
    }
