"""Core enumerations for the two-piece capture puzzle."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds, each with its own capture geometry."""

    ROOK = 1
    KNIGHT = 2
    KING = 3
    BISHOP = 4
    QUEEN = 5
    PAWN = 6


class Outcome(IntEnum):
    """Result of a two-piece position at the current ply."""

    PENDING = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
