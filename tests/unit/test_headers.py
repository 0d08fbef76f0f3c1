"""tests/unit/test_headers.py"""

import pytest

from reqtarget.http.headers import Header, Headers


class TestHeaders:
    """Tests for Headers class."""

    def test_init_empty(self):
        """Test Headers initialization with no arguments."""
        headers = Headers()
        assert headers.headers() == []
        assert len(headers) == 0

    def test_init_with_dict(self):
        """Test Headers initialization with string dictionary."""
        headers = Headers({"Content-Type": "application/json", "Accept": "text/html"})
        assert headers.headers() == [
            Header("Content-Type", "application/json"),
            Header("Accept", "text/html"),
        ]

    def test_init_with_lists(self):
        """Test Headers initialization with list dictionary."""
        headers = Headers({"Cache-Control": ["no-cache", "no-store"]})
        assert headers.headers() == [
            Header("Cache-Control", "no-cache"),
            Header("Cache-Control", "no-store"),
        ]

    def test_get_case_insensitive(self):
        """Test getting a header value regardless of name casing."""
        headers = Headers({"Content-Type": "application/json"})
        assert headers.get("content-type") == "application/json"
        assert headers["CONTENT-TYPE"] == "application/json"
        assert "content-type" in headers

    def test_get_duplicate_headers_joined(self):
        """Test that get() joins duplicates with commas."""
        headers = Headers({"Accept": ["text/html", "application/json"]})
        assert headers.get("Accept") == "text/html, application/json"

    def test_get_set_cookie_special_handling(self):
        """Test that get() for Set-Cookie returns only first value (no join)."""
        headers = Headers({"Set-Cookie": ["session=123", "user=alice"]})
        assert headers.get("Set-Cookie") == "session=123"
        assert headers.get_all("Set-Cookie") == ["session=123", "user=alice"]

    def test_get_missing(self):
        """Test defaults and KeyError for a missing header."""
        headers = Headers()
        assert headers.get("Missing") is None
        assert headers.get("Missing", "x") == "x"
        assert headers.get_all("Missing") == []
        with pytest.raises(KeyError):
            _ = headers["Missing"]

    def test_iteration_and_len_count_names(self):
        """Test iteration yields each lower-cased name once."""
        headers = Headers({"A": ["1", "2"], "B": "3"})
        assert list(headers) == ["a", "b"]
        assert len(headers) == 2

    def test_add_keeps_existing(self):
        """Test add() appends next to existing fields."""
        headers = Headers({"Accept": "text/html"})
        headers.add(Header("accept", "text/plain"))
        assert headers.get_all("Accept") == ["text/html", "text/plain"]

    def test_set_replaces_first(self):
        """Test set() replaces only the first field of that name."""
        headers = Headers({"X": ["1", "2"], "Y": "3"})
        headers.set(Header("x", "new"))
        assert headers.headers() == [
            Header("x", "new"),
            Header("X", "2"),
            Header("Y", "3"),
        ]

    def test_set_appends_when_missing(self):
        """Test set() appends a field that is not present."""
        headers = Headers()
        headers.set(Header("Host", "example.com"))
        assert headers["host"] == "example.com"

    def test_first_last_contains(self):
        """Test first(), last() and contains()."""
        headers = Headers({"Via": ["a", "b", "c"]})
        assert headers.first("via") == Header("Via", "a")
        assert headers.last("VIA") == Header("Via", "c")
        assert headers.contains("via")
        assert headers.first("Missing") is None
        assert not headers.contains("Missing")

    def test_remove(self):
        """Test remove() drops every field of that name."""
        headers = Headers({"A": ["1", "2"], "B": "3"})
        assert headers.remove("a") is True
        assert headers.remove("a") is False
        assert headers.headers() == [Header("B", "3")]

    def test_clear(self):
        """Test clear() empties the collection."""
        headers = Headers({"A": "1"})
        headers.clear()
        assert len(headers) == 0

    def test_header_str(self):
        """Test header field rendering."""
        assert str(Header("Host", "example.com")) == "Host: example.com"
