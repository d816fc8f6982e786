from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A square on the board: `row` counts down from the top, `column` left to right."""

    row: int
    column: int

    def __post_init__(self) -> None:
        for name, value in (("row", self.row), ("column", self.column)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Coordinate {name} must be an int, got {value!r}.")
            if not 0 <= value < BOARD_SIZE:
                raise ValueError(f"Coordinate {name} {value} is outside the board.")

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        parts = text.strip().split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,col', got {text!r}.")
        try:
            row, column = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"Expected 'row,col', got {text!r}.") from exc
        return cls(row, column)

    def _delta(self, other: "Coordinate") -> tuple[int, int]:
        return other.row - self.row, other.column - self.column

    def is_diagonally_adjacent(self, other: "Coordinate") -> bool:
        dr, dc = self._delta(other)
        return abs(dr) == 1 and abs(dc) == 1

    is_catty_corner = is_diagonally_adjacent

    def is_double_catty_corner(self, other: "Coordinate") -> bool:
        dr, dc = self._delta(other)
        return abs(dr) == 2 and abs(dc) == 2

    def midpoint(self, other: "Coordinate") -> Optional["Coordinate"]:
        """Square jumped over when moving two diagonal steps to `other`."""
        if not self.is_double_catty_corner(other):
            return None
        return Coordinate((self.row + other.row) // 2, (self.column + other.column) // 2)

    def __str__(self) -> str:
        return f"{self.row},{self.column}"
