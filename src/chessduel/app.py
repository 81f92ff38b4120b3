"""Command-line entry point: print the outcome letter for a board file."""

from __future__ import annotations

import logging
import sys

from chessduel.config import AppSettings, load_settings
from chessduel.core.notation import board_from_path, outcome_char

_LOGGER = logging.getLogger(__name__)

_USAGE_ERROR = "Please provide a filename as an argument"


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)


def _fail(message: object) -> int:
    print(f"ERROR: [{message}]", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Resolve the board file named in *argv* and print B, N, E or P."""
    args = sys.argv[1:] if argv is None else argv
    try:
        _configure_logging(load_settings())
    except (ValueError, OSError) as exc:
        return _fail(exc)

    if not args:
        return _fail(_USAGE_ERROR)

    filename = args[0]
    try:
        board = board_from_path(filename)
        outcome = board.outcome()
    except (ValueError, OSError) as exc:
        _LOGGER.debug("Rejected board file %s", filename, exc_info=True)
        return _fail(exc)

    _LOGGER.info("%s: %s with %s to move", filename, outcome.name, board.turn)
    print(outcome_char(outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())
