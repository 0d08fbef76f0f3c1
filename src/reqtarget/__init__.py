"""src/reqtarget/__init__.py

Reqtarget - HTTP request messages with a structured, self-syncing target.

A request target is kept both as components (scheme, authority, path and
query parameters) and as a composed URL. The URL is built lazily from the
components, cached, and discarded whenever a component changes.

Key Features:
    - Zero external dependencies
    - Lazy, cached URL composition
    - Malformed request URIs degrade to an opaque path instead of failing
    - Ordered query parameters with duplicates preserved
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    From a request URI::

        from reqtarget import HttpRequest

        request = HttpRequest("GET", "http://example.com/a/b?x=1&x=2")
        request.query_parameters  # [('x', '1'), ('x', '2')]
        request.request_uri       # '/a/b?x=1&x=2'

    From a host and path::

        from reqtarget import HttpHost, HttpRequest

        request = HttpRequest.from_host(
            "POST", HttpHost("example.com", 8080), "upload", "name=a%20b"
        )
        str(request.get_uri())    # 'http://example.com:8080/upload?name=a+b'
"""

import logging

from reqtarget.exceptions import (
    InvalidArgumentError,
    InvalidURL,
    ReqtargetError,
    URLBuildError,
    URLError,
)
from reqtarget.http.headers import Header, Headers
from reqtarget.http.host import HttpHost
from reqtarget.http.protocol import HTTP_1_0, HTTP_1_1, ProtocolVersion
from reqtarget.http.request import HttpRequest
from reqtarget.http.url import URL, URIAuthority, URLBuilder
from reqtarget.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HttpRequest",
    "HttpHost",
    "URL",
    "URIAuthority",
    "URLBuilder",
    "Header",
    "Headers",
    "ProtocolVersion",
    "HTTP_1_0",
    "HTTP_1_1",
    "ReqtargetError",
    "InvalidArgumentError",
    "URLError",
    "InvalidURL",
    "URLBuildError",
]
