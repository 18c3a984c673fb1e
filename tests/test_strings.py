"""
Tests for String Sanitation Utilities
"""

import pytest

from field_sanitizer.utils.strings import (
    blacklist,
    escape,
    ltrim,
    rtrim,
    strip_low,
    trim,
    whitelist,
)


class TestBlacklistWhitelist:
    """Test suite for character class filtering"""

    def test_blacklist_range(self):
        assert blacklist("abc123", "0-9") == "abc"

    def test_blacklist_escaped_brackets(self):
        """Test: regex characters must be escaped in the class"""
        assert blacklist("[a]b", "\\[\\]") == "ab"

    def test_blacklist_nothing_to_remove(self):
        assert blacklist("abc", "0-9") == "abc"

    def test_whitelist_range(self):
        assert whitelist("abc123", "a-z") == "abc"

    def test_whitelist_multiple_ranges(self):
        assert whitelist("a-B_c 9!", "a-zA-Z0-9") == "aBc9"

    def test_empty_blacklist_removes_nothing(self):
        """Test: an empty character set leaves the value unchanged"""
        assert blacklist("abc", "") == "abc"

    def test_empty_whitelist_keeps_nothing(self):
        """Test: an empty character set removes every character"""
        assert whitelist("abc", "") == ""


class TestEscape:
    """Test suite for HTML escaping"""

    def test_escape_tags(self):
        assert escape("<span>Text</span>") == "&lt;span&gt;Text&lt;&#x2F;span&gt;"

    def test_escape_quotes_and_ampersand(self):
        assert escape("\"Tom\" & 'Jerry'") == "&quot;Tom&quot; &amp; &#x27;Jerry&#x27;"

    def test_escape_reescapes_entities(self):
        """Test: escape is not idempotent, & of an entity is escaped again"""
        assert escape(escape("&")) == "&amp;amp;"

    def test_escape_plain_text(self):
        assert escape("plain text") == "plain text"


class TestTrim:
    """Test suite for trimming"""

    def test_ltrim_whitespace(self):
        assert ltrim("  x  ") == "x  "

    def test_rtrim_whitespace(self):
        assert rtrim("  x  ") == "  x"

    def test_trim_whitespace(self):
        assert trim(" \t x \n ") == "x"

    def test_trim_chars(self):
        assert trim("--x--", "-") == "x"

    def test_trim_chars_list(self):
        """Test: characters can be given as a list"""
        assert trim("_-x-_", ["-", "_"]) == "x"

    def test_ltrim_chars(self):
        assert ltrim("00120", "0") == "120"

    def test_rtrim_chars(self):
        assert rtrim("1.500", "0") == "1.5"

    @pytest.mark.parametrize("value", ["  a  ", "a", "", "\t\n"])
    def test_trim_idempotent(self, value):
        assert trim(trim(value)) == trim(value)


class TestStripLow:
    """Test suite for control character removal"""

    def test_strip_low(self):
        assert strip_low("a\x00b\nc\r\x7f") == "abc"

    def test_strip_low_keep_new_lines(self):
        assert strip_low("a\x00b\nc\r\x7f", keep_new_lines=True) == "ab\nc\r"

    def test_strip_low_tabs_removed(self):
        assert strip_low("a\tb", keep_new_lines=True) == "ab"

    def test_strip_low_keeps_unicode(self):
        assert strip_low("héllo wörld") == "héllo wörld"

    def test_strip_low_idempotent(self):
        value = "x\x01y\x1fz"
        assert strip_low(strip_low(value)) == strip_low(value)
