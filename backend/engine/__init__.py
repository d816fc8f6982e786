"""Checkers board, pieces and move validation."""

from .board import Board
from .errors import BlockedByPiece, FromPieceMissing, IsNotCattyCorner, MoveError, WrongDirection
from .pieces import Piece, Player
from .position import BOARD_SIZE, Coordinate

__all__ = [
	"BOARD_SIZE",
	"Board",
	"Coordinate",
	"Piece",
	"Player",
	"MoveError",
	"FromPieceMissing",
	"BlockedByPiece",
	"WrongDirection",
	"IsNotCattyCorner",
]
