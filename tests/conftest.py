import pytest

from reqtarget.http.host import HttpHost
from reqtarget.http.request import HttpRequest
from reqtarget.http.url import URIAuthority


@pytest.fixture
def host():
    """Plain HTTP host with an explicit port."""
    return HttpHost("example.com", 8080)


@pytest.fixture
def authority():
    """Authority without a port."""
    return URIAuthority("example.com")


@pytest.fixture
def parsed_request():
    """Request decomposed from an absolute URI with a repeated parameter."""
    return HttpRequest("GET", "http://example.com/a/b?x=1&x=2")
