"""Reasons a proposed move is rejected by `Board.validate_move`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .position import Coordinate


class MoveError(ValueError):
    reason = "Illegal move"

    def __init__(self, start: "Coordinate", end: "Coordinate") -> None:
        self.start = start
        self.end = end
        super().__init__(f"{self.reason}: {start} -> {end}.")


class FromPieceMissing(MoveError):
    reason = "No piece on the starting square"


class BlockedByPiece(MoveError):
    reason = "Destination square is occupied"


class WrongDirection(MoveError):
    reason = "Only kings may move backwards"


class IsNotCattyCorner(MoveError):
    reason = "Destination is not a diagonal step or jump"
