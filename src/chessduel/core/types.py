"""Coordinate type alias and helpers.

A coordinate is a ``(file, rank)`` pair, both in ``0..7``.
"""

from __future__ import annotations

from typing import TypeAlias

Coordinate: TypeAlias = tuple[int, int]

BOARD_SIZE = 8


def is_valid_coordinate(coord: Coordinate) -> bool:
    """Whether both components fall on the 8x8 board."""
    file, rank = coord
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def distance(a: Coordinate, b: Coordinate) -> tuple[int, int]:
    """Absolute (file, rank) differences between two coordinates."""
    return abs(a[0] - b[0]), abs(a[1] - b[1])
