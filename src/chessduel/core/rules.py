"""Outcome resolution for a two-piece position."""

from __future__ import annotations

from chessduel.core.enums import Color, Outcome
from chessduel.core.piece import Piece


def _wins(color: Color) -> Outcome:
    return Outcome.WHITE_WINS if color == Color.WHITE else Outcome.BLACK_WINS


def resolve(piece_to_move: Piece, other_piece: Piece, turn: Color) -> Outcome:
    """Classify the position with *turn* to move.

    A capture available to both sides is a draw no matter who moves first;
    otherwise the side holding the only capture wins.
    """
    if piece_to_move.color != turn:
        raise ValueError(
            f"Piece to move is {piece_to_move.color!s}, but {turn!s} is to move"
        )
    if other_piece.color == turn:
        raise ValueError(f"Both pieces are {turn!s}")

    mover_captures = piece_to_move.can_capture(other_piece.position)
    other_captures = other_piece.can_capture(piece_to_move.position)

    match (mover_captures, other_captures):
        case (True, True):
            return Outcome.DRAW
        case (True, False):
            return _wins(turn)
        case (False, True):
            return _wins(turn.opposite)
        case _:
            return Outcome.PENDING
