from __future__ import annotations

from typing import Iterator, Optional

from loguru import logger

from .errors import BlockedByPiece, FromPieceMissing, IsNotCattyCorner, MoveError, WrongDirection
from .pieces import Piece, Player
from .position import BOARD_SIZE, Coordinate

BoardStatePiece = tuple[int, int, int, bool]
BoardState = tuple[BoardStatePiece, ...]

_START_ROWS = {Player.TWO: range(0, 3), Player.ONE: range(5, 8)}
_RULE = "   " + "-" * (4 * BOARD_SIZE + 1)


class Board:
    """An 8x8 grid of optional pieces plus the rules for moving them.

    The board does not know whose turn it is: any piece may be moved as long
    as the move itself is legal.
    """

    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]

    # setup -----------------------------------------------------------------

    def clear(self) -> None:
        for row in self.board:
            for col in range(BOARD_SIZE):
                row[col] = None

    def setup(self) -> None:
        self.clear()
        for col in range(BOARD_SIZE):
            for player, rows in _START_ROWS.items():
                for row in rows:
                    if (row + col) % 2 == 0:
                        self.board[row][col] = Piece(player)

    new_game = setup

    def place(self, coordinate: Coordinate, piece: Optional[Piece]) -> None:
        self.board[coordinate.row][coordinate.column] = piece

    # queries ---------------------------------------------------------------

    def get_piece(self, coordinate: Coordinate) -> Optional[Piece]:
        return self.board[coordinate.row][coordinate.column]

    def _iter_cells(self) -> Iterator[tuple[Coordinate, Optional[Piece]]]:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield Coordinate(row, col), self.board[row][col]

    def pieces(self, player: Optional[Player] = None) -> list[tuple[Coordinate, Piece]]:
        return [
            (coordinate, piece)
            for coordinate, piece in self._iter_cells()
            if piece is not None and (player is None or piece.owner is player)
        ]

    def count(self, player: Optional[Player] = None) -> int:
        return len(self.pieces(player))

    def to_state(self) -> BoardState:
        return tuple(
            (coordinate.row, coordinate.column, piece.owner.value, piece.is_king)
            for coordinate, piece in self.pieces()
        )

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board = cls()
        for row, col, owner, is_king in state:
            board.place(Coordinate(row, col), Piece(Player(owner), is_king=is_king))
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.to_state() == other.to_state()

    # rendering -------------------------------------------------------------

    def render(self) -> str:
        lines = [
            "            ---- Board ----",
            "    " + "".join(f" {col}  " for col in range(BOARD_SIZE)).rstrip(),
            _RULE,
        ]
        for row in range(BOARD_SIZE):
            cells = "".join(
                f" {piece} |" if piece is not None else "   |" for piece in self.board[row]
            )
            lines.append(f" {row} |{cells}")
            lines.append(_RULE)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    # rules -----------------------------------------------------------------

    def validate_move(self, start: Coordinate, end: Coordinate) -> None:
        """Raise a `MoveError` if moving from `start` to `end` is illegal.

        Checks, in order, that `start` holds a piece, that `end` is empty,
        that a non-king piece moves forward, and that `end` is either one
        diagonal step away or a jump over an opposing piece.
        """
        self._jumped_square(start, end)

    def is_valid_move(self, start: Coordinate, end: Coordinate) -> bool:
        try:
            self.validate_move(start, end)
        except MoveError:
            return False
        return True

    def _jumped_square(self, start: Coordinate, end: Coordinate) -> Optional[Coordinate]:
        piece = self.get_piece(start)
        if piece is None:
            raise FromPieceMissing(start, end)

        if self.get_piece(end) is not None:
            raise BlockedByPiece(start, end)

        if not piece.is_king and (end.row - start.row) * piece.owner.forward <= 0:
            raise WrongDirection(start, end)

        if start.is_diagonally_adjacent(end):
            return None

        middle = start.midpoint(end)
        if middle is not None:
            jumped = self.get_piece(middle)
            if jumped is not None and jumped.owner is piece.owner.opponent:
                return middle

        raise IsNotCattyCorner(start, end)

    def move_piece(self, start: Coordinate, end: Coordinate) -> Optional[Coordinate]:
        """Move the piece on `start` to `end`, returning the captured square if any.

        Nothing on the board changes when the move is rejected.
        """
        captured = self._jumped_square(start, end)
        piece = self.get_piece(start)
        self.place(end, piece)
        self.place(start, None)
        if captured is not None:
            self.place(captured, None)
            logger.debug("Player {} jumped {} -> {}, capturing {}", piece, start, end, captured)
        else:
            logger.debug("Player {} moved {} -> {}", piece, start, end)
        return captured
