"""Moves and the move notation.

Notation is ``<word>,<square>``. A square written column-first (``f4``)
plays the word down the column; row-first (``4f``) plays it along the row.
A lone ``,`` passes. Uppercase letters in the word are plain tiles,
lowercase letters are wildcards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from skrabbkle.board import Axis, Position
from skrabbkle.core.errors import InputFormatError
from skrabbkle.tiles import Tile

PASS_NOTATION = ","

_MOVE_RE = re.compile(r"(?P<word>[A-Za-z]+),(?P<square>[A-Za-z][0-9]+|[0-9]+[A-Za-z])")


@dataclass
class Move:
    """A placement or a pass.

    ``tiles`` holds the tiles a placement puts down, in word order. It is
    filled from the player's rack once the move is validated.
    """

    word: str = ""
    anchor: Position | None = None
    axis: Axis | None = None
    tiles: list[Tile] = field(default_factory=list)

    @classmethod
    def pass_turn(cls) -> Move:
        return cls()

    @property
    def is_pass(self) -> bool:
        return self.anchor is None

    @property
    def tile_count(self) -> int:
        return len(self.tiles)

    def with_tiles(self, tiles: list[Tile]) -> Move:
        return Move(self.word, self.anchor, self.axis, list(tiles))

    def notation(self) -> str:
        if self.is_pass:
            return PASS_NOTATION
        if self.axis is Axis.VERTICAL:
            square = f"{self.anchor.column_letter}{self.anchor.row}"
        else:
            square = f"{self.anchor.row}{self.anchor.column_letter}"
        return f"{self.word},{square}"

    def __str__(self) -> str:
        if self.is_pass:
            return "Pass"
        return f"Word: {self.word} at position {self.anchor}"


def parse_move(text: str) -> Move:
    """Parse move notation.

    Raises InputFormatError when ``text`` does not follow the grammar.
    Whether the square lies on the board is checked by the game.
    """
    if text == PASS_NOTATION:
        return Move.pass_turn()

    match = _MOVE_RE.fullmatch(text)
    if match is None:
        raise InputFormatError(text, "expected WORD,square (e.g. HELLO,f4 or HELLO,4f) or ','")

    square = match.group("square")
    if square[0].isalpha():
        axis = Axis.VERTICAL
        column, row = square[0], square[1:]
    else:
        axis = Axis.HORIZONTAL
        column, row = square[-1], square[:-1]

    anchor = Position(int(row), ord(column.lower()) - ord("a"))
    return Move(match.group("word"), anchor, axis)
