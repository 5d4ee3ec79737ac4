"""Board-file parsing and the packaged default layout.

A board file holds the board size ``N`` on its first line followed by
exactly ``N`` rows of ``N`` tokens with no separators:

    .      standard square
    (v)    letter premium, v in -9..99
    {v}    word premium, v in -9..99
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from skrabbkle.board import MAX_SIZE, MIN_SIZE, Board, PremiumKind, Square
from skrabbkle.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_BOARD_PATH = DATA_DIR / "default_board.txt"

_SIZE_RE = re.compile(r"[0-9]+")
_TOKEN_RE = re.compile(r"\.|\((-?[0-9]{1,2})\)|\{(-?[0-9]{1,2})\}")
_MIN_PREMIUM = -9
_MAX_PREMIUM = 99


def parse_board(text: str, source: str = "<board>") -> Board:
    """Parse board-file text into a fresh Board.

    Raises ConfigurationError on any deviation from the format.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ConfigurationError(source, "file is empty")

    header = lines[0].strip()
    if not _SIZE_RE.fullmatch(header):
        raise ConfigurationError(source, f"first line must be the board size, got {header!r}")
    size = int(header)
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ConfigurationError(
            source, f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}"
        )

    rows = lines[1:]
    if len(rows) != size:
        raise ConfigurationError(source, f"expected {size} rows, found {len(rows)}")

    grid = [_parse_row(row, row_number, size, source) for row_number, row in enumerate(rows, start=1)]
    return Board(size, grid)


def _parse_row(line: str, row_number: int, size: int, source: str) -> list[Square]:
    squares: list[Square] = []
    pos = 0
    while pos < len(line):
        match = _TOKEN_RE.match(line, pos)
        if match is None:
            raise ConfigurationError(
                source, f"row {row_number}: unexpected text {line[pos:]!r}"
            )
        squares.append(_square_for(match, row_number, source))
        pos = match.end()

    if len(squares) != size:
        raise ConfigurationError(
            source, f"row {row_number}: expected {size} squares, found {len(squares)}"
        )
    return squares


def _square_for(match: re.Match, row_number: int, source: str) -> Square:
    letter_value, word_value = match.groups()
    if letter_value is None and word_value is None:
        return Square()

    kind = PremiumKind.LETTER if letter_value is not None else PremiumKind.WORD
    value = int(letter_value if letter_value is not None else word_value)
    if not _MIN_PREMIUM <= value <= _MAX_PREMIUM:
        raise ConfigurationError(
            source, f"row {row_number}: premium {value} outside {_MIN_PREMIUM}..{_MAX_PREMIUM}"
        )
    return Square(kind, value)


def load_board(path: str | Path) -> Board:
    """Load a board file from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(str(path), f"cannot read board file: {exc}") from exc
    board = parse_board(text, source=str(path))
    logger.info("Loaded %dx%d board from %s", board.size, board.size, path)
    return board


def default_board() -> Board:
    """The packaged 15x15 layout."""
    return load_board(DEFAULT_BOARD_PATH)
