"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessduel.core.captures import can_capture
from chessduel.core.enums import Color, PieceKind
from chessduel.core.types import Coordinate

# Board-file letter (uppercase) -> kind. Lowercase letters are white pieces.
_KIND_BY_LETTER: dict[str, PieceKind] = {
    "R": PieceKind.KING,
    "D": PieceKind.QUEEN,
    "A": PieceKind.BISHOP,
    "C": PieceKind.KNIGHT,
    "T": PieceKind.ROOK,
    "P": PieceKind.PAWN,
}

_LETTER_BY_KIND: dict[PieceKind, str] = {v: k for k, v in _KIND_BY_LETTER.items()}


class InvalidPieceError(ValueError):
    """Raised for a character that names no piece kind."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid piece kind character: {char}")
        self.char = char


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece standing on a given coordinate."""

    color: Color
    kind: PieceKind
    position: Coordinate

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board-file letter (lowercase = white, uppercase = black)."""
        letter = _LETTER_BY_KIND[self.kind]
        return letter.lower() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str, position: Coordinate) -> Piece:
        """Create piece from a board-file letter, e.g. 't' → white rook."""
        try:
            kind = _KIND_BY_LETTER[char.upper()]
        except KeyError:
            raise InvalidPieceError(char) from None
        color = Color.WHITE if char.islower() else Color.BLACK
        return cls(color, kind, position)

    # ── Geometry ─────────────────────────────────────────────────────────

    def can_capture(self, target: Coordinate) -> bool:
        """Whether this piece reaches *target* in a single move."""
        return can_capture(self, target)
