"""Tests for the board model and the placement legality check."""

import pytest

from skrabbkle.board import Axis, Board, Position, PremiumKind, Square
from skrabbkle.core.errors import ConfigurationError
from skrabbkle.tiles import Tile


# ------------------------------------------------------------------
# Positions and squares
# ------------------------------------------------------------------

class TestPosition:
    def test_next_horizontal_moves_column(self):
        assert Position(4, 5).next(Axis.HORIZONTAL) == Position(4, 6)

    def test_next_vertical_moves_row(self):
        assert Position(4, 5).next(Axis.VERTICAL) == Position(5, 5)

    def test_string_form(self):
        assert str(Position(4, 5)) == "f4"
        assert str(Position(15, 0)) == "a15"

    def test_hashable(self):
        assert {Position(1, 1), Position(1, 1)} == {Position(1, 1)}


class TestSquare:
    def test_standard_square(self):
        sq = Square()
        assert sq.premium_kind is PremiumKind.NONE
        assert sq.premium_value == 1
        assert str(sq) == " . "

    def test_premium_rendering(self):
        assert str(Square(PremiumKind.LETTER, 2)) == "(2)"
        assert str(Square(PremiumKind.WORD, 3)) == "{3}"

    def test_wide_premium_drops_closing_bracket(self):
        assert str(Square(PremiumKind.LETTER, 12)) == "(12"
        assert str(Square(PremiumKind.WORD, -3)) == "{-3"

    def test_occupied_rendering(self):
        sq = Square(PremiumKind.WORD, 3)
        sq.place_tile(Tile("Q", 12))
        assert str(sq) == "Q12"

    def test_place_tile_once(self):
        sq = Square()
        assert sq.place_tile(Tile("A", 1)) is True
        assert sq.place_tile(Tile("B", 3)) is False
        assert sq.tile.letter == "A"


# ------------------------------------------------------------------
# Board geometry
# ------------------------------------------------------------------

class TestBoardGeometry:
    @pytest.mark.parametrize("size,center", [
        (15, Position(8, 7)),
        (16, Position(8, 7)),
        (11, Position(6, 5)),
        (26, Position(13, 12)),
    ])
    def test_center(self, size, center):
        assert Board(size).center == center

    @pytest.mark.parametrize("size", [10, 27, 0])
    def test_size_out_of_range(self, size):
        with pytest.raises(ConfigurationError):
            Board(size)

    def test_off_board_has_no_square(self, board):
        assert board.square_at(Position(0, 0)) is None
        assert board.square_at(Position(1, 15)) is None
        assert board.square_at(Position(16, 0)) is None
        assert board.has_tile_at(Position(0, -1)) is False

    def test_corners_on_board(self, board):
        assert board.square_at(Position(1, 0)) is not None
        assert board.square_at(Position(15, 14)) is not None

    def test_is_empty(self, board):
        assert board.is_empty()
        board.place_tile(Position(3, 3), Tile("A", 1))
        assert not board.is_empty()

    def test_place_tile_off_board(self, board):
        assert board.place_tile(Position(16, 0), Tile("A", 1)) is False

    def test_render_has_headers(self, board):
        board.place_tile(Position(8, 7), Tile("H", 4))
        text = board.render()
        lines = text.splitlines()
        assert lines[0].startswith("    a  b  c")
        assert "H4" in text
        assert lines[2].startswith(" 1  ")
        assert lines[2].endswith(" 1")


# ------------------------------------------------------------------
# Legality
# ------------------------------------------------------------------

class TestIsLegal:
    def test_empty_word_illegal(self, board):
        assert board.is_legal(board.center, Axis.HORIZONTAL, "") is False

    def test_first_word_must_cover_center(self, board):
        assert board.is_legal(Position(8, 6), Axis.HORIZONTAL, "HI") is True
        assert board.is_legal(Position(8, 7), Axis.VERTICAL, "HI") is True
        assert board.is_legal(Position(8, 8), Axis.HORIZONTAL, "HI") is False
        assert board.is_legal(Position(7, 7), Axis.HORIZONTAL, "HI") is False

    def test_first_word_running_off_board_is_not_an_error(self, board):
        assert board.is_legal(Position(8, 7), Axis.HORIZONTAL, "ABCDEFGHIJ") is True
        assert board.is_legal(Position(15, 0), Axis.VERTICAL, "ABC") is False

    def test_covering_existing_tile(self, board):
        board.place_tile(Position(8, 7), Tile("H", 4))
        assert board.is_legal(Position(8, 6), Axis.HORIZONTAL, "AB") is True

    def test_overlapping_letters_not_compared(self, board):
        board.place_tile(Position(8, 7), Tile("H", 4))
        assert board.is_legal(Position(8, 7), Axis.VERTICAL, "ZZ") is True

    def test_perpendicular_neighbour_connects(self, board):
        board.place_tile(Position(8, 7), Tile("H", 4))
        # horizontal word in the row above touches the tile below it
        assert board.is_legal(Position(7, 6), Axis.HORIZONTAL, "AT") is True
        # vertical word in the column to the right touches the tile beside it
        assert board.is_legal(Position(7, 8), Axis.VERTICAL, "AT") is True

    def test_in_line_neighbour_does_not_connect(self, board):
        board.place_tile(Position(8, 7), Tile("H", 4))
        assert board.is_legal(Position(8, 8), Axis.HORIZONTAL, "AT") is False
        assert board.is_legal(Position(6, 7), Axis.VERTICAL, "AT") is False

    def test_disconnected_word_illegal(self, board):
        board.place_tile(Position(8, 7), Tile("H", 4))
        assert board.is_legal(Position(1, 0), Axis.HORIZONTAL, "AT") is False

    def test_off_board_cells_are_unoccupied(self, board):
        board.place_tile(Position(1, 14), Tile("H", 4))
        assert board.is_legal(Position(2, 13), Axis.HORIZONTAL, "ATE") is True
        assert board.is_legal(Position(15, 13), Axis.VERTICAL, "AT") is False


class TestLandingCells:
    def test_straight_run(self, board):
        cells = board.landing_cells(Position(8, 7), Axis.HORIZONTAL, 2)
        assert cells == [Position(8, 7), Position(8, 8)]

    def test_skips_occupied(self, board):
        board.place_tile(Position(8, 8), Tile("H", 4))
        cells = board.landing_cells(Position(8, 7), Axis.HORIZONTAL, 2)
        assert cells == [Position(8, 7), Position(8, 9)]

    def test_off_board(self, board):
        assert board.landing_cells(Position(8, 14), Axis.HORIZONTAL, 2) is None
        assert board.landing_cells(Position(15, 0), Axis.VERTICAL, 2) is None

    def test_occupied_tail_pushes_off_board(self, board):
        board.place_tile(Position(8, 14), Tile("H", 4))
        assert board.landing_cells(Position(8, 13), Axis.HORIZONTAL, 2) is None
