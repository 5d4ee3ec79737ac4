"""Tiles and the tile bag."""

from __future__ import annotations

import random
from dataclasses import dataclass

WILDCARD_LETTER = "_"
WILDCARD_VALUE = 5
WILDCARD_COUNT = 2

# letter -> (count, point_value)
TILE_DISTRIBUTION: dict[str, tuple[int, int]] = {
    "A": (8, 1), "B": (2, 3), "C": (2, 3), "D": (4, 2), "E": (10, 1),
    "F": (3, 4), "G": (4, 2), "H": (3, 4), "I": (8, 1), "J": (1, 9),
    "K": (1, 6), "L": (4, 1), "M": (2, 3), "N": (7, 1), "O": (7, 1),
    "P": (2, 3), "Q": (1, 12), "R": (6, 1), "S": (4, 1), "T": (6, 1),
    "U": (5, 1), "V": (2, 4), "W": (1, 4), "X": (1, 9), "Y": (2, 5),
    "Z": (1, 11),
}

TOTAL_TILES = sum(count for count, _ in TILE_DISTRIBUTION.values()) + WILDCARD_COUNT


@dataclass
class Tile:
    """A lettered tile or a wildcard.

    A wildcard shows ``_`` until it is assigned a letter, which happens at
    most once and is stored lowercase.
    """

    letter: str
    value: int
    is_wildcard: bool = False
    wildcard_assigned: bool = False

    def __post_init__(self) -> None:
        if not self.is_wildcard:
            self.letter = self.letter.upper()

    @classmethod
    def wildcard(cls, value: int = WILDCARD_VALUE) -> Tile:
        return cls(WILDCARD_LETTER, value, is_wildcard=True)

    @property
    def is_unassigned_wildcard(self) -> bool:
        return self.is_wildcard and not self.wildcard_assigned

    def assign_wildcard(self, letter: str) -> bool:
        """Assign ``letter`` to an unassigned wildcard.

        Returns False (and changes nothing) for plain tiles and for
        wildcards that already carry a letter.
        """
        if not self.is_unassigned_wildcard:
            return False
        self.letter = letter.lower()
        self.wildcard_assigned = True
        return True

    def copy(self) -> Tile:
        return Tile(self.letter, self.value, self.is_wildcard, self.wildcard_assigned)

    def __str__(self) -> str:
        return f"[{self.letter}{self.value}]"


def create_full_bag() -> list[Tile]:
    """Create the 100-tile set in distribution order (unshuffled)."""
    tiles: list[Tile] = []
    for letter, (count, value) in TILE_DISTRIBUTION.items():
        tiles.extend(Tile(letter, value) for _ in range(count))
    tiles.extend(Tile.wildcard() for _ in range(WILDCARD_COUNT))
    return tiles


class TileBag:
    """Shuffled bag of tiles. Tiles are drawn from the front."""

    def __init__(
        self,
        tiles: list[Tile] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if tiles is None:
            tiles = create_full_bag()
            (rng or random.Random()).shuffle(tiles)
        self._tiles: list[Tile] = list(tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def draw(self) -> Tile | None:
        """Draw one tile, or None if the bag is empty."""
        if not self._tiles:
            return None
        return self._tiles.pop(0)

    def __str__(self) -> str:
        return f"Tile bag: {len(self._tiles)} tiles remaining"
