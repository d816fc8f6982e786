from __future__ import annotations

from collections import Counter
from typing import Any

from engine.board import Board
from engine.pieces import Piece, Player
from engine.position import Coordinate


def _coordinate_to_dict(coordinate: Coordinate) -> dict[str, int]:
    return {"row": coordinate.row, "col": coordinate.column}


def serialize_piece(coordinate: Coordinate, piece: Piece) -> dict[str, Any]:
    return {
        **_coordinate_to_dict(coordinate),
        "player": piece.owner.value,
        "isKing": piece.is_king,
    }


def serialize_board(board: Board) -> dict[str, Any]:
    pieces = [serialize_piece(coordinate, piece) for coordinate, piece in board.pieces()]
    total_counts = Counter(piece["player"] for piece in pieces)
    king_counts = Counter(piece["player"] for piece in pieces if piece["isKing"])
    return {
        "boardSize": board.boardSize,
        "pieces": pieces,
        "pieceCounts": {
            str(player.value): {
                "total": total_counts.get(player.value, 0),
                "kings": king_counts.get(player.value, 0),
            }
            for player in Player
        },
    }
