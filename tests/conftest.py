"""Shared test fixtures for skrabbkle."""

import pytest

from skrabbkle.board import Board
from skrabbkle.move import parse_move
from skrabbkle.players import MoveSource, Player
from skrabbkle.rack import Rack
from skrabbkle.tiles import TILE_DISTRIBUTION, Tile


class ScriptedSource(MoveSource):
    """Move source replaying a fixed list of notations or Move objects."""

    def __init__(self, moves, interactive=False):
        self._moves = list(moves)
        self.interactive = interactive
        self.rejections = []
        self.seen_racks = []

    def take_turn(self, board, rack):
        self.seen_racks.append(str(rack))
        entry = self._moves.pop(0)
        return parse_move(entry) if isinstance(entry, str) else entry

    def reject(self, move, rack, reason):
        self.rejections.append((move.notation(), reason))


def make_tile(letter: str) -> Tile:
    """Plain tile with its standard value, or a wildcard for ``_``."""
    if letter == "_":
        return Tile.wildcard()
    return Tile(letter, TILE_DISTRIBUTION[letter.upper()][1])


@pytest.fixture
def tiles():
    """Factory: tiles("HI_") -> [H4, I1, _5]."""
    return lambda letters: [make_tile(c) for c in letters]


@pytest.fixture
def rack(tiles):
    """Factory: rack("HI_") -> Rack holding those tiles."""
    return lambda letters: Rack(tiles(letters))


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def player(rack):
    """Factory: player(name, source, letters="") -> Player."""
    return lambda name, source, letters="": Player(name, source, rack=rack(letters))


@pytest.fixture
def board():
    """Plain 15x15 board without premium squares."""
    return Board(15)


@pytest.fixture
def board_file(tmp_path):
    """Factory writing a board file of plain squares and returning its path."""
    def _write(size: int, name: str = "board.txt", body: str | None = None):
        if body is None:
            body = "\n".join("." * size for _ in range(size))
        path = tmp_path / name
        path.write_text(f"{size}\n{body}\n")
        return path
    return _write


@pytest.fixture
def word_list(tmp_path):
    """Factory writing a word list and returning its path."""
    def _write(*words: str, name: str = "words.txt"):
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n")
        return path
    return _write
