from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from engine.position import BOARD_SIZE, Coordinate

_MOVE_PATTERN = re.compile(r"^\s*(\d+)\s*,\s*(\d+)\s*(?:-|\s)\s*(\d+)\s*,\s*(\d+)\s*$")


class CoordinateModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)


class MoveRequest(BaseModel):
    start: CoordinateModel
    end: CoordinateModel

    @classmethod
    def parse(cls, text: str) -> "MoveRequest":
        """Build a request from console input such as ``2,0 3,1`` or ``2,0-3,1``."""
        match = _MOVE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Could not read a move from {text.strip()!r}; expected 'row,col row,col'.")
        start_row, start_col, end_row, end_col = (int(group) for group in match.groups())
        return cls(
            start=CoordinateModel(row=start_row, col=start_col),
            end=CoordinateModel(row=end_row, col=end_col),
        )
