"""Board file parsing and serialization.

A board file holds eight lines of eight tokens (whitespace is ignored).
``_`` marks an empty square; ``R D A C T P`` are king, queen, bishop, knight,
rook and pawn, lowercase for white and uppercase for black. The token at
line *i*, column *j* lands on coordinate ``(i, j)``.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from chessduel.core.board import Board
from chessduel.core.enums import Outcome
from chessduel.core.piece import Piece
from chessduel.core.types import BOARD_SIZE

_LOGGER = logging.getLogger(__name__)

EMPTY_SQUARE = "_"

OUTCOME_CHARS: dict[Outcome, str] = {
    Outcome.WHITE_WINS: "B",
    Outcome.BLACK_WINS: "N",
    Outcome.DRAW: "E",
    Outcome.PENDING: "P",
}


class NotationError(ValueError):
    """Base class for malformed board files."""


class BoardFileNotFoundError(NotationError):
    def __init__(self) -> None:
        super().__init__("File not exists")


class EmptyBoardFileError(NotationError):
    def __init__(self) -> None:
        super().__init__("File is empty")


class InvalidBoardSizeError(NotationError):
    def __init__(self) -> None:
        super().__init__("Invalid board size")


class NotEnoughTokensError(NotationError):
    def __init__(self) -> None:
        super().__init__("Not enough tokens")


def _check_row_width(tokens: str) -> None:
    if len(tokens) > BOARD_SIZE:
        raise InvalidBoardSizeError()
    if len(tokens) < BOARD_SIZE:
        raise NotEnoughTokensError()


def board_from_text(text: str) -> Board:
    """Parse board-file contents into a :class:`Board` with white to move.

    Rows are validated in order, so the first offending row decides the
    error; the row count is checked only once every row has parsed.
    """
    if not text:
        raise EmptyBoardFileError()

    board = Board()
    lines = text.splitlines()
    for i, line in enumerate(lines):
        tokens = "".join(line.split())
        _check_row_width(tokens)
        for j, ch in enumerate(tokens):
            if ch == EMPTY_SQUARE:
                continue
            board.place_piece(Piece.from_char(ch, (i, j)))

    if len(lines) != BOARD_SIZE:
        raise InvalidBoardSizeError()
    return board


def board_from_path(path: str | PathLike[str]) -> Board:
    """Read and parse a board file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BoardFileNotFoundError() from None
    _LOGGER.debug("Parsing board file %s (%d bytes)", path, len(text))
    return board_from_text(text)


def board_to_text(board: Board) -> str:
    """Serialise the placement of *board* to board-file text."""
    rows: list[str] = []
    for i in range(BOARD_SIZE):
        row = []
        for j in range(BOARD_SIZE):
            piece = board[(i, j)]
            row.append(str(piece) if piece is not None else EMPTY_SQUARE)
        rows.append(" ".join(row))
    return "\n".join(rows) + "\n"


def outcome_char(outcome: Outcome) -> str:
    """Single-letter result: B(lancas), N(egras), E(mpate) or P(endiente)."""
    return OUTCOME_CHARS[outcome]
