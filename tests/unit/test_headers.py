"""tests/unit/test_headers.py"""

import pytest

from reqform.exceptions import ParseFailure
from reqform.http.headers import Headers


class TestHeaders:
    """Tests for Headers class."""

    def test_init_empty(self):
        """Test Headers initialization with no arguments."""
        headers = Headers()
        assert headers._headers == {}
        assert len(headers) == 0

    def test_init_with_dict(self):
        """Test Headers initialization with string dictionary."""
        headers = Headers({"Content-Type": "application/json", "Accept": "text/html"})
        # Internal storage should be lists keyed by lowercase name
        assert headers._headers == {
            "content-type": ["application/json"],
            "accept": ["text/html"],
        }

    def test_init_with_lists(self):
        """Test Headers initialization with list dictionary."""
        headers = Headers(
            {
                "Cache-Control": ["no-cache", "no-store"],
                "Accept": ["text/html", "application/json"],
            }
        )
        assert headers._headers == {
            "cache-control": ["no-cache", "no-store"],
            "accept": ["text/html", "application/json"],
        }

    def test_init_with_pairs(self):
        """Test Headers initialization with (name, value) pairs."""
        headers = Headers([("X-Foo", "1"), ("Accept", "*/*"), ("x-foo", "2")])
        assert headers.get("X-Foo") == ["1", "2"]
        assert list(headers) == ["X-Foo", "Accept"]

    def test_init_from_headers_copies(self):
        """Test that building from another Headers does not share lists."""
        original = Headers({"A": "1"})
        copied = Headers(original)
        copied.add("A", "2")
        assert original.get("A") == ["1"]
        assert copied.get("A") == ["1", "2"]

    def test_non_string_values_coerced(self):
        """Test that values are stored as strings."""
        headers = Headers({"Content-Length": 5})
        assert headers["content-length"] == ["5"]

    @pytest.mark.parametrize("name", ["content-type", "CONTENT-TYPE", "CoNtEnT-tYpE"])
    def test_lookup_case_insensitive(self, name):
        """Test that any casing returns the same values."""
        headers = Headers({"Content-Type": "text/plain"})
        assert headers.get(name) == headers.get("Content-Type") == ["text/plain"]
        assert name in headers

    def test_name_casing_preserved(self):
        """Test that the first spelling of a name is kept for iteration."""
        headers = Headers()
        headers.add("X-Request-ID", "1")
        headers.add("x-request-id", "2")
        assert list(headers) == ["X-Request-ID"]

    def test_get_missing_returns_default(self):
        """Test get() for a missing header."""
        headers = Headers()
        assert headers.get("Missing") is None
        assert headers.get("Missing", []) == []

    def test_get_returns_copy(self):
        """Test that mutating the returned list leaves the headers intact."""
        headers = Headers({"A": "1"})
        headers.get("A").append("2")
        assert headers.get("A") == ["1"]

    def test_add_appends(self):
        """Test that add() keeps existing values in order."""
        headers = Headers({"Accept": "text/html"})
        headers.add("ACCEPT", "application/json")
        assert headers["accept"] == ["text/html", "application/json"]

    def test_setitem_replaces(self):
        """Test that item assignment replaces all values."""
        headers = Headers({"Accept": ["a", "b"]})
        headers["accept"] = "c"
        assert headers["Accept"] == ["c"]
        headers["Accept"] = ["d", "e"]
        assert headers["Accept"] == ["d", "e"]

    def test_delitem(self):
        """Test deleting a header by any casing."""
        headers = Headers({"Accept": "a", "Host": "h"})
        del headers["ACCEPT"]
        assert "Accept" not in headers
        assert list(headers) == ["Host"]

    def test_getitem_raises_keyerror(self):
        """Test __getitem__ raises KeyError for missing header."""
        headers = Headers()
        with pytest.raises(KeyError):
            _ = headers["Missing"]

    def test_get_line_joins_duplicates(self):
        """Test that get_line() joins duplicates with commas."""
        headers = Headers({"Accept": ["text/html", "application/json"]})
        assert headers.get_line("Accept") == "text/html, application/json"
        assert headers.get_line("Missing") is None
        assert headers.get_line("Missing", "x") == "x"

    def test_get_line_set_cookie_special_handling(self):
        """Test that get_line() for Set-Cookie returns only first value (no join)."""
        headers = Headers({"Set-Cookie": ["session=123", "user=alice"]})
        assert headers.get_line("Set-Cookie") == "session=123"

    def test_get_all(self):
        """Test get_all() returns all values."""
        headers = Headers({"Set-Cookie": ["session=123", "user=alice"]})
        assert headers.get_all("set-cookie") == ["session=123", "user=alice"]
        assert headers.get_all("Non-Existent") == []

    def test_items_flat_and_to_string(self):
        """Test ordered flat iteration and CRLF rendering."""
        headers = Headers([("Host", "h"), ("X-Foo", "1"), ("X-Foo", "2")])
        assert list(headers.items_flat()) == [
            ("Host", "h"),
            ("X-Foo", "1"),
            ("X-Foo", "2"),
        ]
        assert headers.to_string() == "Host: h\r\nX-Foo: 1\r\nX-Foo: 2\r\n"

    def test_equality_ignores_name_case(self):
        """Test that equality compares names case-insensitively."""
        assert Headers({"Accept": "a"}) == Headers({"accept": "a"})
        assert Headers({"Accept": "a"}) == {"ACCEPT": ["a"]}
        assert Headers({"Accept": ["a", "b"]}) != Headers({"Accept": ["b", "a"]})

    def test_len(self):
        """Test len() counts distinct names."""
        headers = Headers([("A", "1"), ("B", "2"), ("a", "3")])
        assert len(headers) == 2


class TestHeadersFromLines:
    """Tests for Headers.from_lines()."""

    def test_basic_lines(self):
        """Test parsing trimmed name/value lines."""
        headers = Headers.from_lines(["Host:   example.com  ", "Accept:text/html"])
        assert headers.get("host") == ["example.com"]
        assert headers.get("accept") == ["text/html"]

    def test_value_with_colons(self):
        """Test that only the first colon separates name from value."""
        headers = Headers.from_lines(["Referer: http://example.com:8080/x"])
        assert headers.get("Referer") == ["http://example.com:8080/x"]

    def test_duplicates_accumulate(self):
        """Test that repeated names append in order."""
        headers = Headers.from_lines(["X-Foo: a", "Host: h", "x-foo: b"])
        assert headers.get("X-Foo") == ["a", "b"]

    def test_empty_value(self):
        """Test that a header with an empty value is kept."""
        headers = Headers.from_lines(["X-Empty:"])
        assert headers.get("X-Empty") == [""]

    def test_blank_lines_skipped(self):
        """Test that empty lines are ignored."""
        headers = Headers.from_lines(["A: 1", "", "B: 2"])
        assert len(headers) == 2

    def test_folded_line(self):
        """Test that continuation lines extend the previous value."""
        headers = Headers.from_lines(["X-Long: part one", "   part two", "\tpart three"])
        assert headers.get("X-Long") == ["part one part two part three"]

    def test_folded_line_rejected_when_disabled(self):
        """Test folding rejection with allow_folding=False."""
        with pytest.raises(ParseFailure):
            Headers.from_lines(["X-Long: a", " b"], allow_folding=False)

    def test_leading_continuation_line(self):
        """Test that a continuation line with nothing to continue fails."""
        with pytest.raises(ParseFailure):
            Headers.from_lines([" orphan"])

    def test_missing_colon(self):
        """Test that a line without a colon fails and keeps the line."""
        with pytest.raises(ParseFailure) as exc_info:
            Headers.from_lines(["Host: h", "NoColonHere"])
        assert exc_info.value.line == "NoColonHere"

    @pytest.mark.parametrize("line", [": value", "Bad Name: value"])
    def test_invalid_name(self, line):
        """Test that empty names and names with spaces fail."""
        with pytest.raises(ParseFailure):
            Headers.from_lines([line])
