"""Board - piece placement on an 8x8 board plus the side to move."""

from __future__ import annotations

from chessduel.core.enums import Color, Outcome
from chessduel.core.piece import Piece
from chessduel.core.rules import resolve
from chessduel.core.types import BOARD_SIZE, Coordinate, is_valid_coordinate


class BoardError(ValueError):
    """Base class for rejected board manipulations."""


class InvalidPositionError(BoardError):
    def __init__(self) -> None:
        super().__init__("Invalid position")


class PositionOccupiedError(BoardError):
    def __init__(self) -> None:
        super().__init__("Position occupied")


class Board:
    """Mutable board holding at most one piece per coordinate."""

    __slots__ = ("_squares", "_turn")

    def __init__(self) -> None:
        self._squares: dict[Coordinate, Piece] = {}
        self._turn = Color.WHITE

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._squares.get(coord)

    def piece_at(self, coord: Coordinate) -> Piece | None:
        return self[coord]

    def is_empty(self, coord: Coordinate) -> bool:
        return coord not in self._squares

    def place_piece(self, piece: Piece) -> None:
        """Put *piece* on its own coordinate."""
        if not is_valid_coordinate(piece.position):
            raise InvalidPositionError()
        if not self.is_empty(piece.position):
            raise PositionOccupiedError()
        self._squares[piece.position] = piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """All of *color*'s pieces, ordered by coordinate."""
        return sorted(
            (p for p in self._squares.values() if p.color == color),
            key=lambda p: p.position,
        )

    def piece_of(self, color: Color) -> Piece:
        """Return the single piece of *color*."""
        pieces = self.pieces(color)
        if len(pieces) != 1:
            raise BoardError(f"Expected one {color!s} piece, found {len(pieces)}")
        return pieces[0]

    # -- Turn tracking ------------------------------------------------------

    @property
    def turn(self) -> Color:
        return self._turn

    def next_turn(self) -> None:
        self._turn = self._turn.opposite

    # -- Outcome ------------------------------------------------------------

    def outcome(self) -> Outcome:
        """Resolve the side to move's piece against the opponent's."""
        mover = self.piece_of(self._turn)
        return resolve(mover, self.piece_of(self._turn.opposite), self._turn)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._turn == other._turn and self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for file in range(BOARD_SIZE):
            row = []
            for rank in range(BOARD_SIZE):
                p = self[(file, rank)]
                row.append(str(p) if p else "_")
            rows.append(" ".join(row))
        rows.append(f"({self._turn!s} to move)")
        return "\n".join(rows)
