"""Tests for console input sanitizing."""

from skrabbkle.core.sanitizer import sanitize_text


class TestSanitizeText:
    def test_passthrough_move(self):
        assert sanitize_text("HELLO,f4") == "HELLO,f4"

    def test_strip_null_bytes(self):
        assert sanitize_text("HI\x00,8h") == "HI,8h"

    def test_strip_control_characters(self):
        assert sanitize_text("HI\x01\x02,8h") == "HI,8h"
        assert sanitize_text("\x1b,") == ","

    def test_strip_zero_width_characters(self):
        assert sanitize_text("HI,\u200b8h") == "HI,8h"
        assert sanitize_text("\ufeffHI,8h") == "HI,8h"

    def test_strip_surrounding_whitespace(self):
        assert sanitize_text("  HI,8h\r\n") == "HI,8h"
        assert sanitize_text("\t,\n") == ","

    def test_empty_string(self):
        assert sanitize_text("") == ""
