from __future__ import annotations

from typing import Iterable, TextIO

from loguru import logger
from pydantic import ValidationError

from engine.board import Board
from engine.errors import MoveError

from .schemas import MoveRequest

PROMPT = "move> "
HELP = "Enter a move as 'row,col row,col'. Commands: board, reset, help, quit."
_QUIT = {"quit", "exit", "q"}


def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}")
    return "Invalid move: " + "; ".join(messages)


class ConsoleSession:
    """Reads moves from text, applies them to one board and reports the outcome.

    Turns are not enforced: either player's pieces may be moved at any time.
    """

    def __init__(self, board: Board | None = None) -> None:
        if board is None:
            board = Board()
            board.setup()
        self.board = board
        self.moves_played = 0

    def reset(self) -> str:
        self.board.setup()
        self.moves_played = 0
        logger.info("Board reset to the opening position")
        return "New game."

    def apply(self, text: str) -> str:
        try:
            request = MoveRequest.parse(text)
        except ValidationError as exc:
            logger.info("Rejected input {!r}: {}", text, exc.error_count())
            return _describe_validation_error(exc)
        except ValueError as exc:
            logger.info("Rejected input {!r}", text)
            return str(exc)

        start = request.start.to_coordinate()
        end = request.end.to_coordinate()
        try:
            captured = self.board.move_piece(start, end)
        except MoveError as exc:
            logger.info("Rejected move {} -> {}: {}", start, end, type(exc).__name__)
            return str(exc)

        self.moves_played += 1
        if captured is not None:
            return f"Moved {start} -> {end}, captured {captured}."
        return f"Moved {start} -> {end}."

    def handle(self, line: str) -> str | None:
        """Process one input line. Returns ``None`` when the session should stop."""
        command = line.strip().lower()
        if command in _QUIT:
            return None
        if not command:
            return ""
        if command == "help":
            return HELP
        if command == "board":
            return self.board.render()
        if command == "reset":
            return self.reset() + "\n" + self.board.render()
        outcome = self.apply(line)
        return outcome + "\n" + self.board.render()

    def run(self, lines: Iterable[str], out: TextIO, *, prompt: str = PROMPT) -> int:
        """Drive the session until a quit command or the end of input.

        Returns the number of moves that were played.
        """
        print(self.board.render(), file=out)
        print(HELP, file=out)
        print(prompt, end="", file=out, flush=True)
        for line in lines:
            response = self.handle(line)
            if response is None:
                break
            if response:
                print(response, file=out)
            print(prompt, end="", file=out, flush=True)
        return self.moves_played
