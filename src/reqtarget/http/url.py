"""src/reqtarget/http/url.py

URL builder and parser for Reqtarget.
"""

import re
import urllib.parse
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from reqtarget.exceptions import InvalidArgumentError, InvalidURL, URLBuildError
from reqtarget.http.query import DEFAULT_CHARSET, QueryParams, format_query
from reqtarget.utils.validators import (
    is_uri_reference,
    is_valid_host,
    is_valid_scheme,
    split_authority,
)

if TYPE_CHECKING:  # pragma: no cover
    from reqtarget.http.host import HttpHost

__all__ = ["URL", "URIAuthority", "URLBuilder"]

# Characters left alone when encoding a path; '%' is handled separately.
_PATH_SAFE = "/:@!$&'()*+,;=~%"
_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _bracket(host: str) -> str:
    if ":" in host and not host.startswith("["):
        return f"[{host}]"
    return host


def _parse_port(port: Optional[str], text: str) -> int:
    if not port:
        return -1
    if not (port.isascii() and port.isdigit()):
        raise InvalidURL(f"Invalid port in {text!r}")
    return int(port)


class URL:
    """
    Parsed URI reference.

    Attributes:
        parsed: Result of :func:`urllib.parse.urlsplit`.
        scheme: Scheme name, or None for relative references.
        user_info: Raw user info, or None.
        host: Host name (IPv6 without brackets), or None.
        port: Port number, -1 when absent.
        path: Raw path, possibly empty.
        query: Raw query, or None when there is no ``?``.
        fragment: Raw fragment, or None when there is no ``#``.
    """

    __slots__ = (
        "raw",
        "parsed",
        "scheme",
        "user_info",
        "host",
        "port",
        "path",
        "query",
        "fragment",
    )

    def __init__(self, url: str):
        if not isinstance(url, str) or not is_uri_reference(url):
            raise InvalidURL(f"Invalid URI reference: {url!r}")
        try:
            self.parsed = urllib.parse.urlsplit(url)
        except ValueError as exc:
            raise InvalidURL(f"Invalid URI reference: {url!r}") from exc

        self.raw = url
        # urlsplit lower-cases the scheme; keep it as written.
        self.scheme: Optional[str] = (
            url[: len(self.parsed.scheme)] if self.parsed.scheme else None
        )

        self.user_info: Optional[str] = None
        self.host: Optional[str] = None
        self.port = -1
        if self.parsed.netloc:
            user_info, host, port = split_authority(self.parsed.netloc)
            self.user_info = user_info
            self.host = host or None
            self.port = _parse_port(port, url)

        self.path = self.parsed.path
        before_fragment, has_fragment, _ = url.partition("#")
        self.query: Optional[str] = (
            self.parsed.query if "?" in before_fragment else None
        )
        self.fragment: Optional[str] = self.parsed.fragment if has_fragment else None

    @property
    def is_absolute(self) -> bool:
        """True if the reference carries a scheme."""
        return self.scheme is not None

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"URL({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URL):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.raw)


@dataclass(frozen=True)
class URIAuthority:
    """
    Network location of a URI: optional user info, host name and port.

    A negative port means the port is not specified.
    """

    hostname: str
    port: int = -1
    user_info: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.hostname:
            raise InvalidArgumentError("Host name may not be empty")
        if self.port is None:
            object.__setattr__(self, "port", -1)
        elif isinstance(self.port, bool) or not isinstance(self.port, int):
            raise InvalidArgumentError(f"Invalid port: {self.port!r}")

    @classmethod
    def create(cls, text: str) -> "URIAuthority":
        """
        Parse ``[user_info@]host[:port]``.

        Raises:
            InvalidURL: If the port is not numeric.
        """
        user_info, host, port = split_authority(text)
        return cls(host, _parse_port(port, text), user_info)

    @classmethod
    def from_host(cls, host: "HttpHost") -> "URIAuthority":
        """Build an authority from the host name and port of an HttpHost."""
        return cls(host.hostname, host.port)

    def __str__(self) -> str:
        text = _bracket(self.hostname)
        if self.user_info is not None:
            text = f"{self.user_info}@{text}"
        if self.port >= 0:
            text = f"{text}:{self.port}"
        return text


class URLBuilder:
    """
    Composes a URL from individual components.

    Setters return the builder so calls can be chained. Nothing is
    validated until :meth:`build`.
    """

    __slots__ = ("_scheme", "_host", "_port", "_path", "_parameters", "charset")

    def __init__(self, charset: str = DEFAULT_CHARSET):
        self._scheme: Optional[str] = None
        self._host: Optional[str] = None
        self._port = -1
        self._path: Optional[str] = None
        self._parameters: Optional[QueryParams] = None
        self.charset = charset

    def set_scheme(self, scheme: Optional[str]) -> "URLBuilder":
        """Set the scheme name."""
        self._scheme = scheme
        return self

    def set_host(self, host: Optional[str]) -> "URLBuilder":
        """Set the host name. IPv6 addresses are bracketed on build."""
        self._host = host
        return self

    def set_port(self, port: int) -> "URLBuilder":
        """Set the port. Negative values leave the port out."""
        self._port = port
        return self

    def set_path(self, path: Optional[str]) -> "URLBuilder":
        """Set the path. Characters not allowed in a path are encoded on build."""
        self._path = path
        return self

    def set_parameters(
        self, parameters: Optional[Iterable[Tuple[str, Optional[str]]]]
    ) -> "URLBuilder":
        """Set the query parameters. An empty list produces no query."""
        self._parameters = list(parameters) if parameters is not None else None
        return self

    def _encode_path(self) -> str:
        path = self._path or ""
        if self._host is not None and path and not path.startswith("/"):
            path = "/" + path
        path = _STRAY_PERCENT.sub("%25", path)
        return urllib.parse.quote(path, safe=_PATH_SAFE, encoding=self.charset)

    def build(self) -> URL:
        """
        Compose and parse the URL.

        Raises:
            URLBuildError: If the components do not form a valid URI.
        """
        text = ""
        if self._scheme is not None:
            if not is_valid_scheme(self._scheme):
                raise URLBuildError(f"Invalid scheme: {self._scheme!r}")
            text += self._scheme + ":"

        if self._host is not None:
            if not self._host or not is_valid_host(self._host):
                raise URLBuildError(f"Invalid host: {self._host!r}")
            text += "//" + _bracket(self._host)
            if self._port >= 0:
                text += f":{self._port}"

        try:
            path = self._encode_path()
            query = (
                format_query(self._parameters, self.charset)
                if self._parameters
                else None
            )
        except UnicodeEncodeError as exc:
            raise URLBuildError(f"Cannot encode URI in {self.charset}") from exc

        # Without an authority, a leading "//" would be read back as a host.
        if self._host is None and path.startswith("//"):
            raise URLBuildError(
                f"Path may not start with '//' without a host: {path!r}"
            )

        text += path
        if query is not None:
            text += "?" + query

        try:
            return URL(text)
        except InvalidURL as exc:
            raise URLBuildError(f"Could not build URI from {text!r}") from exc
