"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixture_path() -> Callable[[str], Path]:
    """Resolve a board file shipped under ``tests/fixtures``."""

    def _resolve(name: str) -> Path:
        return FIXTURES_DIR / name

    return _resolve


@pytest.fixture
def write_board(tmp_path: Path) -> Callable[[str], Path]:
    """Write board-file text to a temporary file and return its path."""

    def _write(text: str, name: str = "board.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's config file and env vars out of the tests."""
    monkeypatch.delenv("CHESSDUEL_LOG_LEVEL", raising=False)
    monkeypatch.setenv("CHESSDUEL_CONFIG", str(tmp_path / "missing.toml"))
