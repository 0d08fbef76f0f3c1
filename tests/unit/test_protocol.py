"""tests/unit/test_protocol.py"""

from reqtarget.http.protocol import HTTP_1_0, HTTP_1_1, ProtocolVersion


def test_str():
    """Test version rendering."""
    assert str(HTTP_1_1) == "HTTP/1.1"
    assert str(HTTP_1_0) == "HTTP/1.0"


def test_equality():
    """Test versions compare by value."""
    assert ProtocolVersion("HTTP", 1, 1) == HTTP_1_1
    assert ProtocolVersion("HTTP", 2, 0) != HTTP_1_1
