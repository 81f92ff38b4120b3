"""Core domain layer: pure capture geometry and outcome resolution.

Quick start::

    from chessduel.core import Color, Piece, PieceKind, resolve

    rook = Piece(Color.WHITE, PieceKind.ROOK, (0, 0))
    king = Piece(Color.BLACK, PieceKind.KING, (0, 7))
    resolve(rook, king, Color.WHITE)  # Outcome.WHITE_WINS
"""

from chessduel.core.board import (
    Board,
    BoardError,
    InvalidPositionError,
    PositionOccupiedError,
)
from chessduel.core.captures import can_capture
from chessduel.core.enums import Color, Outcome, PieceKind
from chessduel.core.notation import (
    BoardFileNotFoundError,
    EmptyBoardFileError,
    InvalidBoardSizeError,
    NotationError,
    NotEnoughTokensError,
    board_from_path,
    board_from_text,
    board_to_text,
    outcome_char,
)
from chessduel.core.piece import InvalidPieceError, Piece
from chessduel.core.rules import resolve
from chessduel.core.types import Coordinate, distance, is_valid_coordinate

__all__ = [
    # Enums
    "Color",
    "Outcome",
    "PieceKind",
    # Types / helpers
    "Coordinate",
    "distance",
    "is_valid_coordinate",
    # Domain objects
    "Board",
    "Piece",
    # Rules
    "can_capture",
    "resolve",
    # Notation
    "board_from_path",
    "board_from_text",
    "board_to_text",
    "outcome_char",
    # Errors
    "BoardError",
    "BoardFileNotFoundError",
    "EmptyBoardFileError",
    "InvalidBoardSizeError",
    "InvalidPieceError",
    "InvalidPositionError",
    "NotationError",
    "NotEnoughTokensError",
    "PositionOccupiedError",
]
