"""Tests for rack matching and rack bookkeeping."""

from skrabbkle.rack import Rack
from skrabbkle.tiles import Tile, TileBag


class TestTilesFor:
    def test_plain_letters(self, rack):
        r = rack("HI_")
        played = r.tiles_for("HI")
        assert [str(t) for t in played] == ["[H4]", "[I1]"]
        assert played[0] is r.tiles[0]

    def test_length_matches_pattern(self, rack):
        r = rack("CAT_")
        for pattern in ("C", "CA", "CAT", "CATs", "TAC"):
            assert len(r.tiles_for(pattern)) == len(pattern)

    def test_uppercase_falls_back_to_wildcard(self, rack):
        r = rack("H_")
        played = r.tiles_for("HI")
        assert str(played[1]) == "[i5]"
        assert played[1].wildcard_assigned is True

    def test_rack_wildcard_untouched(self, rack):
        r = rack("H_")
        r.tiles_for("Hi")
        assert str(r.tiles[1]) == "[_5]"
        assert r.tiles[1].is_unassigned_wildcard

    def test_lowercase_needs_wildcard(self, rack):
        assert rack("A").tiles_for("a") is None
        assert str(rack("A_").tiles_for("a")[0]) == "[a5]"

    def test_no_double_consumption(self, rack):
        r = rack("A_")
        assert [str(t) for t in r.tiles_for("AA")] == ["[A1]", "[a5]"]
        assert r.tiles_for("AAA") is None

    def test_plain_tile_preferred_over_earlier_wildcard(self, rack):
        r = rack("_A")
        played = r.tiles_for("A")
        assert played[0] is r.tiles[1]

    def test_non_letters_fail(self, rack):
        r = rack("A__")
        assert r.tiles_for("A1") is None
        assert r.tiles_for("_") is None
        assert r.tiles_for("A-") is None

    def test_can_form(self, rack):
        r = rack("CAT")
        assert r.can_form("ACT")
        assert not r.can_form("CATS")


class TestRemoveWordTiles:
    def test_removes_consumed_slots(self, rack):
        r = rack("ABA")
        removed = r.remove_word_tiles("AA")
        assert [t.letter for t in removed] == ["A", "A"]
        assert [t.letter for t in r.tiles] == ["B"]

    def test_removes_wildcard_slot(self, rack):
        r = rack("H_I")
        r.remove_word_tiles("Hx")
        assert [str(t) for t in r.tiles] == ["[I1]"]

    def test_failure_leaves_rack_unchanged(self, rack):
        r = rack("AB")
        assert r.remove_word_tiles("ABC") is None
        assert len(r) == 2


class TestRackContents:
    def test_holds_at_most_seven_tiles(self, tiles):
        r = Rack(tiles("ABCDEFG"))
        assert r.is_full()
        assert r.add_tile(Tile("H", 4)) is False
        assert len(r) == 7

    def test_fill_from_bag(self, tiles):
        r = Rack(tiles("AB"))
        bag = TileBag(tiles=tiles("CDEFGHIJ"))
        assert r.fill_from(bag) == 5
        assert len(r) == 7
        assert len(bag) == 3

    def test_fill_from_short_bag(self, tiles):
        r = Rack()
        bag = TileBag(tiles=tiles("AB"))
        r.fill_from(bag)
        assert len(r) == 2
        assert bag.is_empty()

    def test_total_value(self, rack):
        assert rack("QZ_").total_value() == 12 + 11 + 5
        assert Rack().total_value() == 0

    def test_is_empty(self, rack):
        assert Rack().is_empty()
        assert not rack("A").is_empty()

    def test_string_form(self, rack):
        assert str(rack("A_")) == "[A1], [_5]"

    def test_tiles_is_a_copy(self, rack):
        r = rack("AB")
        r.tiles.clear()
        assert len(r) == 2
