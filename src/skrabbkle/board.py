"""SkraBBKle board: positions, premium squares, placement legality."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from skrabbkle.core.errors import ConfigurationError
from skrabbkle.tiles import Tile

MIN_SIZE = 11
MAX_SIZE = 26


class Axis(Enum):
    HORIZONTAL = "horizontal"  # column increments
    VERTICAL = "vertical"  # row increments

    @property
    def perpendicular(self) -> Axis:
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


class PremiumKind(Enum):
    NONE = "none"
    LETTER = "letter"
    WORD = "word"


@dataclass(frozen=True)
class Position:
    """Board coordinate. ``row`` is 1-based, ``column`` is 0-based (a=0)."""

    row: int
    column: int

    def next(self, axis: Axis) -> Position:
        if axis is Axis.HORIZONTAL:
            return Position(self.row, self.column + 1)
        return Position(self.row + 1, self.column)

    def neighbours(self, axis: Axis) -> tuple[Position, Position]:
        """The two cells either side of this one, perpendicular to ``axis``."""
        if axis is Axis.HORIZONTAL:
            return Position(self.row - 1, self.column), Position(self.row + 1, self.column)
        return Position(self.row, self.column - 1), Position(self.row, self.column + 1)

    @property
    def column_letter(self) -> str:
        return chr(ord("a") + self.column)

    def __str__(self) -> str:
        return f"{self.column_letter}{self.row}"


@dataclass
class Square:
    premium_kind: PremiumKind = PremiumKind.NONE
    premium_value: int = 1
    tile: Tile | None = None

    @property
    def is_occupied(self) -> bool:
        return self.tile is not None

    def place_tile(self, tile: Tile) -> bool:
        """Place ``tile`` on an empty square. Returns False if occupied."""
        if self.tile is not None:
            return False
        self.tile = tile
        return True

    def __str__(self) -> str:
        if self.tile is not None:
            return f"{self.tile.letter}{self.tile.value}"
        if self.premium_kind is PremiumKind.NONE:
            return " . "
        opener, closer = ("(", ")") if self.premium_kind is PremiumKind.LETTER else ("{", "}")
        if 0 <= self.premium_value < 10:
            return f"{opener}{self.premium_value}{closer}"
        return f"{opener}{self.premium_value}"


class Board:
    """Square ``size`` x ``size`` grid of squares.

    Positions outside the grid have no square. They read as unoccupied and
    never raise.
    """

    def __init__(self, size: int, squares: list[list[Square]] | None = None) -> None:
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ConfigurationError(
                "board", f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}"
            )
        if squares is None:
            squares = [[Square() for _ in range(size)] for _ in range(size)]
        elif len(squares) != size or any(len(row) != size for row in squares):
            raise ConfigurationError("board", f"grid does not match size {size}")

        self._size = size
        self._squares = squares
        half = size // 2
        if size % 2 == 0:
            self._center = Position(half, half - 1)
        else:
            self._center = Position(half + 1, half)

    @property
    def size(self) -> int:
        return self._size

    @property
    def center(self) -> Position:
        return self._center

    # ------------------------------------------------------------------
    # Squares
    # ------------------------------------------------------------------

    def contains(self, position: Position) -> bool:
        return 1 <= position.row <= self._size and 0 <= position.column < self._size

    def square_at(self, position: Position) -> Square | None:
        if not self.contains(position):
            return None
        return self._squares[position.row - 1][position.column]

    def has_tile_at(self, position: Position) -> bool:
        square = self.square_at(position)
        return square is not None and square.is_occupied

    def is_empty(self) -> bool:
        return not any(sq.is_occupied for row in self._squares for sq in row)

    def place_tile(self, position: Position, tile: Tile) -> bool:
        """Place a tile on an empty on-board square."""
        square = self.square_at(position)
        if square is None:
            return False
        return square.place_tile(tile)

    def set_premium(self, position: Position, kind: PremiumKind, value: int) -> None:
        self._squares[position.row - 1][position.column] = Square(kind, value)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def is_legal(self, anchor: Position, axis: Axis, word: str) -> bool:
        """Check that a placement touches the center or connects to tiles.

        On an empty board one of the ``len(word)`` cells walked from
        ``anchor`` must be the center. Otherwise one of those cells, or a
        cell directly beside one of them across the axis, must hold a tile.
        Formed cross words and letters under existing tiles are not checked.
        """
        if not word:
            return False

        cells = self._walk(anchor, axis, len(word))
        if self.is_empty():
            return self._center in cells

        for cell in cells:
            if self.has_tile_at(cell):
                return True
            if any(self.has_tile_at(n) for n in cell.neighbours(axis)):
                return True
        return False

    def landing_cells(self, anchor: Position, axis: Axis, count: int) -> list[Position] | None:
        """Cells where ``count`` new tiles land, skipping occupied cells.

        Returns None if the walk leaves the board first.
        """
        cells: list[Position] = []
        current = anchor
        while len(cells) < count:
            if not self.contains(current):
                return None
            if not self.has_tile_at(current):
                cells.append(current)
            current = current.next(axis)
        return cells

    @staticmethod
    def _walk(anchor: Position, axis: Axis, length: int) -> list[Position]:
        cells = [anchor]
        for _ in range(length - 1):
            cells.append(cells[-1].next(axis))
        return cells

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render the board with column letters and row numbers."""
        header = "    " + "".join(
            f"{Position(1, c).column_letter}  " for c in range(self._size)
        )
        lines = [header, ""]
        for r, row in enumerate(self._squares, start=1):
            cells = "".join(f"{str(sq):<3} " for sq in row)
            lines.append(f"{r:2d}  {cells} {r:2d}")
        lines.extend(["", header])
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
