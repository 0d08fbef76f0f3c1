"""src/reqtarget/http/request.py

HTTP request message and its target.

The request target is held twice: as structured components (scheme,
authority, path, query parameters) and as a composed URL that is built
on demand and cached until one of the components changes.
"""

# pylint: disable=protected-access

import logging
from typing import Any, Iterable, Optional, Tuple, Union

from reqtarget.exceptions import InvalidArgumentError, InvalidURL, URLBuildError
from reqtarget.http.headers import Header, Headers
from reqtarget.http.host import DEFAULT_SCHEME, HttpHost
from reqtarget.http.protocol import ProtocolVersion
from reqtarget.http.query import DEFAULT_CHARSET, QueryParams, format_query, parse_query
from reqtarget.http.url import URL, URIAuthority, URLBuilder

__all__ = ["HttpRequest"]

logger = logging.getLogger(__name__)

QueryInput = Union[str, Iterable[Tuple[str, Optional[str]]], None]


class _URICache:
    """Cache cell for the composed URL. Dirty until a build is stored."""

    __slots__ = ("value", "dirty")

    def __init__(self) -> None:
        self.value: Optional[URL] = None
        self.dirty = True

    @property
    def current(self) -> Optional[URL]:
        return None if self.dirty else self.value

    def store(self, value: URL) -> None:
        self.value = value
        self.dirty = False

    def invalidate(self) -> None:
        self.value = None
        self.dirty = True


class HttpRequest:
    """
    HTTP request message with a mutable request target.

    Attributes:
        headers: Header fields of the message.
        charset: Charset used to encode and decode query parameters.
    """

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "_method",
        "_version",
        "_scheme",
        "_authority",
        "_path",
        "_query_parameters",
        "_uri_cache",
        "headers",
        "charset",
    )

    def __init__(
        self,
        method: str,
        uri: Union[str, URL, None] = None,
        *,
        charset: str = DEFAULT_CHARSET,
    ):
        """
        Create a request from a method and a request URI.

        Text that is not a valid URI reference is kept verbatim as the
        path, with no scheme, authority or query parameters.

        Args:
            method: Request method, e.g. ``GET``.
            uri: Request URI as text or as a parsed URL.
            charset: Charset for the query string codec.

        Raises:
            InvalidArgumentError: If method is None.
        """
        if method is None:
            raise InvalidArgumentError("Method name may not be None")

        self._method = method
        self._version: Optional[ProtocolVersion] = None
        self._scheme: Optional[str] = None
        self._authority: Optional[URIAuthority] = None
        self._path: Optional[str] = None
        self._query_parameters: Optional[QueryParams] = None
        self._uri_cache = _URICache()
        self.headers = Headers()
        self.charset = charset

        if isinstance(uri, URL):
            self._set_uri(uri)
        elif uri is not None:
            try:
                parsed = URL(uri)
            except InvalidURL:
                logger.debug(
                    "Request URI %r is not a valid URI, using it as path", uri
                )
                self._path = uri
            else:
                self._set_uri(parsed)

    @classmethod
    def from_host(
        cls,
        method: str,
        host: Optional[HttpHost],
        path: Optional[str] = None,
        query: QueryInput = None,
        *,
        charset: str = DEFAULT_CHARSET,
    ) -> "HttpRequest":
        """
        Create a request for a host and path.

        Args:
            method: Request method.
            host: Target host; scheme and authority are taken from it.
            path: Request path, stored as given.
            query: Query parameters, either as (name, value) pairs or as a
                raw query string.
            charset: Charset for the query string codec.
        """
        request = cls(method, charset=charset)
        if host is not None:
            request._scheme = host.scheme
            request._authority = URIAuthority.from_host(host)
        request._path = path
        if isinstance(query, str):
            request._query_parameters = parse_query(query, charset)
        elif query is not None:
            request._query_parameters = list(query)
        return request

    @classmethod
    def from_url(
        cls, method: str, url: URL, *, charset: str = DEFAULT_CHARSET
    ) -> "HttpRequest":
        """
        Create a request from a parsed URL.

        Raises:
            InvalidArgumentError: If method or url is None.
        """
        if method is None:
            raise InvalidArgumentError("Method name may not be None")
        if url is None:
            raise InvalidArgumentError("Request URI may not be None")
        return cls(method, url, charset=charset)

    @property
    def method(self) -> str:
        return self._method

    @property
    def version(self) -> Optional[ProtocolVersion]:
        return self._version

    @version.setter
    def version(self, version: Optional[ProtocolVersion]) -> None:
        self._version = version

    @property
    def scheme(self) -> Optional[str]:
        return self._scheme

    @scheme.setter
    def scheme(self, scheme: Optional[str]) -> None:
        self._scheme = scheme
        self._uri_cache.invalidate()

    @property
    def authority(self) -> Optional[URIAuthority]:
        return self._authority

    @authority.setter
    def authority(self, authority: Optional[URIAuthority]) -> None:
        self._authority = authority
        self._uri_cache.invalidate()

    @property
    def path(self) -> Optional[str]:
        return self._path

    @path.setter
    def path(self, path: Optional[str]) -> None:
        self._path = path
        self._uri_cache.invalidate()

    @property
    def query_parameters(self) -> Optional[QueryParams]:
        """Query parameters in order, or None if never set."""
        return self._query_parameters

    @query_parameters.setter
    def query_parameters(
        self, params: Optional[Iterable[Tuple[str, Optional[str]]]]
    ) -> None:
        self._query_parameters = list(params) if params is not None else None
        self._uri_cache.invalidate()

    @property
    def query_string(self) -> Optional[str]:
        """Encoded query parameters, or None if never set."""
        if self._query_parameters is None:
            return None
        return format_query(self._query_parameters, self.charset)

    @query_string.setter
    def query_string(self, raw: Optional[str]) -> None:
        self._query_parameters = (
            parse_query(raw, self.charset) if raw is not None else None
        )
        self._uri_cache.invalidate()

    @property
    def request_uri(self) -> Optional[str]:
        """Origin-form target: path plus query string, if there is one."""
        suffix = self._query_suffix()
        if not suffix:
            return self._path
        return f"{self._path}{suffix}"

    def _query_suffix(self) -> str:
        if self._query_parameters:
            return "?" + format_query(self._query_parameters, self.charset)
        return ""

    def add_header(self, name: str, value: Any) -> None:
        """Append a header field."""
        self.headers.add(self._make_header(name, value))

    def set_header(self, name: str, value: Any) -> None:
        """Replace the first header field of that name, or append it."""
        self.headers.set(self._make_header(name, value))

    @staticmethod
    def _make_header(name: str, value: Any) -> Header:
        if name is None:
            raise InvalidArgumentError("Header name may not be None")
        return Header(name, "" if value is None else str(value))

    def _set_uri(self, url: URL) -> None:
        self._scheme = url.scheme
        self._authority = (
            URIAuthority(url.host, url.port, url.user_info)
            if url.host is not None
            else None
        )
        if url.query is not None:
            self._query_parameters = parse_query(url.query, self.charset)
        self._path = url.path or "/"
        self._uri_cache.invalidate()

        try:
            self._uri_cache.store(self._build_uri())
        except URLBuildError as exc:
            logger.debug("Could not rebuild request URI from %r: %s", url, exc)

    def _build_uri(self) -> URL:
        builder = URLBuilder(self.charset)
        if self._authority is not None:
            builder.set_scheme(
                self._scheme if self._scheme is not None else DEFAULT_SCHEME
            )
            builder.set_host(self._authority.hostname)
            if self._authority.port >= 0:
                builder.set_port(self._authority.port)

        if self._path is None:
            builder.set_path("/")
        elif not self._path.startswith("/"):
            builder.set_path("/" + self._path)
        else:
            builder.set_path(self._path)

        if self._query_parameters is not None:
            builder.set_parameters(self._query_parameters)

        return builder.build()

    def get_uri(self) -> URL:
        """
        Composed URL of the request target.

        Built from the current components on first use and cached until
        scheme, authority, path or query parameters change. Without an
        authority the result is a relative reference. With an authority
        and no scheme, ``http`` is used.

        Raises:
            URLBuildError: If the components do not form a valid URI. The
                next call retries.
        """
        uri = self._uri_cache.current
        if uri is None:
            uri = self._build_uri()
            self._uri_cache.store(uri)
        return uri

    def __str__(self) -> str:
        return (
            f"{self._method} {self._scheme}://{self._authority}{self._path}"
            f"{self._query_suffix()}"
        )

    def __repr__(self) -> str:
        return f"<HttpRequest [{self._method} {self.request_uri}]>"
