"""Player rack and tile-to-letter matching."""

from __future__ import annotations

from skrabbkle.tiles import Tile, TileBag

RACK_SIZE = 7


class Rack:
    """Ordered multiset of at most ``RACK_SIZE`` tiles.

    Words are matched against the rack greedily, left to right, in rack
    order. An uppercase letter takes the first unused plain tile with that
    letter and falls back to an unused unassigned wildcard. A lowercase
    letter can only be supplied by a wildcard. Wildcards used in a match are
    handed out as new assigned tiles; the rack's own wildcard is untouched
    until ``remove_word_tiles`` takes it off the rack.
    """

    def __init__(self, tiles: list[Tile] | None = None) -> None:
        self._tiles: list[Tile] = []
        for tile in tiles or []:
            self.add_tile(tile)

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    @property
    def tiles(self) -> list[Tile]:
        """Copy of the rack's tile list."""
        return list(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def is_full(self) -> bool:
        return len(self._tiles) >= RACK_SIZE

    def add_tile(self, tile: Tile) -> bool:
        """Add a tile. Returns False when the rack is already full."""
        if self.is_full():
            return False
        self._tiles.append(tile)
        return True

    def fill_from(self, bag: TileBag) -> int:
        """Draw from ``bag`` until full or the bag runs out.

        Returns the number of tiles drawn.
        """
        drawn = 0
        while not self.is_full() and not bag.is_empty():
            self._tiles.append(bag.draw())
            drawn += 1
        return drawn

    def total_value(self) -> int:
        return sum(t.value for t in self._tiles)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def can_form(self, pattern: str) -> bool:
        return self._match(pattern) is not None

    def tiles_for(self, pattern: str) -> list[Tile] | None:
        """Tiles that would be played for ``pattern``, in pattern order.

        Wildcards come back as new tiles assigned to the matched letter.
        Returns None if any character cannot be supplied.
        """
        match = self._match(pattern)
        if match is None:
            return None
        return [tile for _, tile in match]

    def remove_word_tiles(self, pattern: str) -> list[Tile] | None:
        """Take the tiles for ``pattern`` off the rack.

        Exactly the slots consumed by the match are removed. Returns the
        played tiles (see ``tiles_for``) or None, leaving the rack unchanged,
        if the pattern cannot be supplied.
        """
        match = self._match(pattern)
        if match is None:
            return None
        used = {slot for slot, _ in match}
        self._tiles = [t for i, t in enumerate(self._tiles) if i not in used]
        return [tile for _, tile in match]

    def _match(self, pattern: str) -> list[tuple[int, Tile]] | None:
        """Return (rack slot, played tile) pairs, or None on failure."""
        used: set[int] = set()
        result: list[tuple[int, Tile]] = []

        for ch in pattern:
            if not (ch.isascii() and ch.isalpha()):
                return None

            slot = None
            if ch.isupper():
                slot = self._find_slot(used, lambda t, c=ch: not t.is_wildcard and t.letter == c)
            if slot is None:
                slot = self._find_slot(used, lambda t: t.is_unassigned_wildcard)
                if slot is None:
                    return None
                played = self._tiles[slot].copy()
                played.assign_wildcard(ch)
            else:
                played = self._tiles[slot]

            used.add(slot)
            result.append((slot, played))

        return result

    def _find_slot(self, used: set[int], predicate) -> int | None:
        for i, tile in enumerate(self._tiles):
            if i not in used and predicate(tile):
                return i
        return None

    def __str__(self) -> str:
        return ", ".join(str(t) for t in self._tiles)
