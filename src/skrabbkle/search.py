"""Exhaustive move search for the computer player.

The search is deterministic: it returns the first acceptable move in a
fixed priority order rather than the highest-scoring one.

- More tiles before fewer (7 down to 2 on an empty board, 7 down to 1
  otherwise).
- Within a tile count, rack subsets in rack-index order, then each subset's
  arrangements in index order. An arrangement already produced from the
  same subset is skipped.
- On an empty board, the word is laid through the center, horizontally
  first, at the first offset that keeps it on the board.
- Otherwise every square is tried row by row, column by column,
  horizontally before vertically.

The board and rack are only read, never changed.
"""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Iterator

from skrabbkle.board import Axis, Board, Position
from skrabbkle.dictionary import Dictionary
from skrabbkle.move import Move
from skrabbkle.rack import RACK_SIZE, Rack
from skrabbkle.tiles import Tile

logger = logging.getLogger(__name__)

_OPENING_MIN_TILES = 2
_MIN_TILES = 1
_AXES = (Axis.HORIZONTAL, Axis.VERTICAL)


def iter_candidate_words(tiles: list[Tile], k: int) -> Iterator[str]:
    """Yield the words spelled by ``k`` of ``tiles`` in priority order.

    Tiles contribute their current letter, so an unassigned wildcard
    spells ``_``.
    """
    for subset in itertools.combinations(tiles, k):
        seen: set[str] = set()
        for arrangement in itertools.permutations(subset):
            word = "".join(t.letter for t in arrangement)
            if word not in seen:
                seen.add(word)
                yield word


class _BudgetExceeded(Exception):
    pass


class MoveSearch:
    """First-found move search over a fixed dictionary.

    ``max_candidates`` caps the number of candidate words examined and
    ``time_limit_s`` the wall-clock time of one search. Either limit ends
    the search with a pass. Both default to unbounded.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_candidates: int | None = None,
        time_limit_s: float | None = None,
    ) -> None:
        self._dictionary = dictionary
        self._max_candidates = max_candidates
        self._time_limit_s = time_limit_s
        self._examined = 0
        self._deadline: float | None = None

    def find_move(self, board: Board, rack: Rack) -> Move:
        """Return the first acceptable placement, or a pass."""
        self._examined = 0
        self._deadline = (
            time.monotonic() + self._time_limit_s if self._time_limit_s is not None else None
        )

        tiles = rack.tiles
        try:
            if board.is_empty():
                move = self._search_opening(board, rack, tiles)
            else:
                move = self._search_connected(board, rack, tiles)
        except _BudgetExceeded:
            logger.warning(
                "Search budget exhausted after %d candidate words; passing", self._examined
            )
            return Move.pass_turn()

        if move.is_pass:
            logger.debug("No move found after %d candidate words", self._examined)
        else:
            logger.debug("Found %s after %d candidate words", move.notation(), self._examined)
        return move

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _search_opening(self, board: Board, rack: Rack, tiles: list[Tile]) -> Move:
        for k in range(min(RACK_SIZE, len(tiles)), _OPENING_MIN_TILES - 1, -1):
            for word in self._candidates(tiles, k):
                if not self._dictionary.is_valid(word):
                    continue
                for axis in _AXES:
                    anchor = self._opening_anchor(board, word, axis)
                    if anchor is None:
                        continue
                    played = rack.tiles_for(word)
                    if played is not None:
                        return Move(word, anchor, axis, played)
        return Move.pass_turn()

    def _search_connected(self, board: Board, rack: Rack, tiles: list[Tile]) -> Move:
        for k in range(min(RACK_SIZE, len(tiles)), _MIN_TILES - 1, -1):
            for word in self._candidates(tiles, k):
                if not self._dictionary.is_valid(word):
                    continue
                played = rack.tiles_for(word)
                if played is None:
                    continue
                for row in range(1, board.size + 1):
                    for column in range(board.size):
                        anchor = Position(row, column)
                        for axis in _AXES:
                            if self._fits(board, anchor, axis, word):
                                return Move(word, anchor, axis, played)
        return Move.pass_turn()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _candidates(self, tiles: list[Tile], k: int) -> Iterator[str]:
        for word in iter_candidate_words(tiles, k):
            self._examined += 1
            if self._max_candidates is not None and self._examined > self._max_candidates:
                raise _BudgetExceeded()
            if self._deadline is not None and time.monotonic() >= self._deadline:
                raise _BudgetExceeded()
            yield word

    @staticmethod
    def _opening_anchor(board: Board, word: str, axis: Axis) -> Position | None:
        """First anchor that puts ``word`` through the center and on the board."""
        center = board.center
        for offset in range(len(word)):
            if axis is Axis.HORIZONTAL:
                anchor = Position(center.row, center.column - offset)
            else:
                anchor = Position(center.row - offset, center.column)
            if board.landing_cells(anchor, axis, len(word)) is not None:
                return anchor
        return None

    @staticmethod
    def _fits(board: Board, anchor: Position, axis: Axis, word: str) -> bool:
        return (
            board.is_legal(anchor, axis, word)
            and board.landing_cells(anchor, axis, len(word)) is not None
        )
