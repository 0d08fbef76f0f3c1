"""src/reqtarget/http/__init__.py"""

from .headers import Header, Headers
from .host import HttpHost
from .protocol import HTTP_1_0, HTTP_1_1, ProtocolVersion
from .query import format_query, parse_query
from .request import HttpRequest
from .url import URL, URIAuthority, URLBuilder

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
    "parse_query",
    "format_query",
]
