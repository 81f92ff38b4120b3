"""Capture geometry for every piece kind.

Each predicate answers whether a piece standing on *origin* reaches *target*
in one move. Only two pieces ever share the board, so nothing can block a
line and no occupancy is consulted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from chessduel.core.enums import Color, PieceKind
from chessduel.core.types import Coordinate, distance

if TYPE_CHECKING:
    from chessduel.core.piece import Piece

CapturePredicate: TypeAlias = Callable[[Coordinate, Coordinate, Color], bool]


def rook_captures(origin: Coordinate, target: Coordinate, color: Color) -> bool:
    df, dr = distance(origin, target)
    return df == 0 or dr == 0


def knight_captures(origin: Coordinate, target: Coordinate, color: Color) -> bool:
    df, dr = distance(origin, target)
    return (df, dr) in ((1, 2), (2, 1))


def king_captures(origin: Coordinate, target: Coordinate, color: Color) -> bool:
    return max(distance(origin, target)) == 1


def bishop_captures(origin: Coordinate, target: Coordinate, color: Color) -> bool:
    df, dr = distance(origin, target)
    return df == dr


def queen_captures(origin: Coordinate, target: Coordinate, color: Color) -> bool:
    return rook_captures(origin, target, color) or bishop_captures(
        origin, target, color
    )


def pawn_captures(origin: Coordinate, target: Coordinate, color: Color) -> bool:
    """Single diagonal step, forward for *color* (white up, black down)."""
    if distance(origin, target) != (1, 1):
        return False
    if color == Color.WHITE:
        return target[1] > origin[1]
    return target[1] < origin[1]


_PREDICATES: dict[PieceKind, CapturePredicate] = {
    PieceKind.ROOK: rook_captures,
    PieceKind.KNIGHT: knight_captures,
    PieceKind.KING: king_captures,
    PieceKind.BISHOP: bishop_captures,
    PieceKind.QUEEN: queen_captures,
    PieceKind.PAWN: pawn_captures,
}


def can_capture(piece: Piece, target: Coordinate) -> bool:
    """Whether *piece* could capture an occupant of *target* this move."""
    return _PREDICATES[piece.kind](piece.position, target, piece.color)
