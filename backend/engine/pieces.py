from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def forward(self) -> int:
        # Player one starts on the bottom rows and plays toward row 0.
        return -1 if self is Player.ONE else 1


@dataclass(slots=True)
class Piece:
    owner: Player
    is_king: bool = False

    def __str__(self) -> str:
        return str(self.owner.value)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.owner.name})"
