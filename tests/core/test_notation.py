"""Tests for board file parsing and serialization."""

from collections.abc import Callable
from pathlib import Path

import pytest

from chessduel.core.board import Board, InvalidPositionError, PositionOccupiedError
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

EMPTY_ROW = "_ _ _ _ _ _ _ _"


def _rows(*overrides: tuple[int, str], count: int = 8) -> str:
    rows = [EMPTY_ROW] * count
    for index, row in overrides:
        rows[index] = row
    return "\n".join(rows) + "\n"


class TestBoardFromText:
    def test_empty_board(self) -> None:
        assert board_from_text(_rows()) == Board()

    def test_piece_lands_on_line_and_column(self) -> None:
        board = board_from_text(_rows((7, "_ _ _ _ _ _ d _")))
        expected = Board()
        expected.place_piece(Piece(Color.WHITE, PieceKind.QUEEN, (7, 6)))
        assert board == expected

    def test_whitespace_is_ignored(self) -> None:
        board = board_from_text(_rows((0, "t______R"), (1, "_  _ _\t_ _ _ _ _")))
        assert board.piece_of(Color.WHITE).position == (0, 0)
        assert board.piece_of(Color.BLACK).position == (0, 7)

    def test_white_to_move(self) -> None:
        assert board_from_text(_rows()).turn == Color.WHITE

    def test_empty_text(self) -> None:
        with pytest.raises(EmptyBoardFileError, match="File is empty"):
            board_from_text("")

    def test_wide_row(self) -> None:
        text = _rows((0, EMPTY_ROW + " _"))
        with pytest.raises(InvalidBoardSizeError, match="Invalid board size"):
            board_from_text(text)

    def test_short_rows(self) -> None:
        text = "\n".join(["_ _ _ _"] * 9) + "\n"
        with pytest.raises(NotEnoughTokensError, match="Not enough tokens"):
            board_from_text(text)

    def test_blank_line_is_short(self) -> None:
        with pytest.raises(NotEnoughTokensError):
            board_from_text(_rows() + "\n")

    def test_too_few_rows(self) -> None:
        with pytest.raises(InvalidBoardSizeError):
            board_from_text(_rows(count=7))

    def test_too_many_empty_rows(self) -> None:
        with pytest.raises(InvalidBoardSizeError):
            board_from_text(_rows(count=9))

    def test_piece_on_ninth_row(self) -> None:
        with pytest.raises(InvalidPositionError, match="Invalid position"):
            board_from_text(_rows((8, "r _ _ _ _ _ _ _"), count=9))

    def test_invalid_piece(self) -> None:
        with pytest.raises(InvalidPieceError, match="Invalid piece kind character: W"):
            board_from_text(_rows((0, "_ _ _ W _ _ _ _")))

    def test_first_bad_row_wins(self) -> None:
        text = _rows((0, "_ _ _ _"), (1, "_ _ _ W _ _ _ _"))
        with pytest.raises(NotEnoughTokensError):
            board_from_text(text)

    def test_errors_share_base(self) -> None:
        for error in (
            BoardFileNotFoundError,
            EmptyBoardFileError,
            InvalidBoardSizeError,
            NotEnoughTokensError,
        ):
            assert issubclass(error, NotationError)
        assert issubclass(NotationError, ValueError)


class TestBoardFromPath:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BoardFileNotFoundError, match="File not exists"):
            board_from_path(tmp_path / "nope.txt")

    def test_empty_file(self, write_board: Callable[[str], Path]) -> None:
        with pytest.raises(EmptyBoardFileError):
            board_from_path(write_board(""))

    def test_parsed_board_rejects_occupied_square(
        self, write_board: Callable[[str], Path]
    ) -> None:
        board = board_from_path(write_board(_rows((3, "_ _ _ t R _ _ _"))))
        with pytest.raises(PositionOccupiedError):
            board.place_piece(Piece(Color.WHITE, PieceKind.PAWN, (3, 3)))

    @pytest.mark.parametrize(
        ("name", "outcome"),
        [
            ("white_wins.txt", Outcome.WHITE_WINS),
            ("black_wins.txt", Outcome.BLACK_WINS),
            ("draw.txt", Outcome.DRAW),
            ("pending.txt", Outcome.PENDING),
        ],
    )
    def test_fixture_outcomes(
        self, fixture_path: Callable[[str], Path], name: str, outcome: Outcome
    ) -> None:
        assert board_from_path(fixture_path(name)).outcome() == outcome


class TestBoardToText:
    def test_matches_fixture(self, fixture_path: Callable[[str], Path]) -> None:
        path = fixture_path("draw.txt")
        board = board_from_path(path)
        assert board_to_text(board) == path.read_text(encoding="utf-8")

    def test_reparses_to_same_board(self) -> None:
        board = Board()
        board.place_piece(Piece(Color.BLACK, PieceKind.KNIGHT, (6, 1)))
        board.place_piece(Piece(Color.WHITE, PieceKind.BISHOP, (2, 5)))
        assert board_from_text(board_to_text(board)) == board


class TestOutcomeChar:
    def test_letters(self) -> None:
        assert outcome_char(Outcome.WHITE_WINS) == "B"
        assert outcome_char(Outcome.BLACK_WINS) == "N"
        assert outcome_char(Outcome.DRAW) == "E"
        assert outcome_char(Outcome.PENDING) == "P"
