"""Move scoring.

Scoring places the move's tiles on the board as it goes, so a move must be
scored exactly once.
"""

from __future__ import annotations

from skrabbkle.board import Board, PremiumKind
from skrabbkle.core.errors import IllegalMoveError
from skrabbkle.move import Move

BINGO_TILES = 7
BINGO_BONUS = 75


def score(board: Board, move: Move) -> int:
    """Place ``move``'s tiles on ``board`` and return the points earned.

    Tiles land on successive empty cells from the anchor; occupied cells are
    stepped over and contribute nothing. Letter premiums multiply the tile
    value, word premiums multiply the word total. Placing all seven tiles
    earns the bingo bonus.
    """
    if move.is_pass or not move.tiles:
        return 0

    cells = board.landing_cells(move.anchor, move.axis, len(move.tiles))
    if cells is None:
        raise IllegalMoveError(move.notation(), "tiles would fall off the board")

    word_total = 0
    word_multiplier = 1
    for cell, tile in zip(cells, move.tiles):
        square = board.square_at(cell)
        square.place_tile(tile)

        letter_multiplier = square.premium_value if square.premium_kind is PremiumKind.LETTER else 1
        word_total += tile.value * letter_multiplier
        if square.premium_kind is PremiumKind.WORD:
            word_multiplier *= square.premium_value

    points = word_total * word_multiplier
    if len(cells) == BINGO_TILES:
        points += BINGO_BONUS
    return points
