"""src/reqtarget/http/host.py

Target host (scheme, host name and port) for Reqtarget.
"""

from dataclasses import dataclass

from reqtarget.exceptions import InvalidArgumentError, InvalidURL
from reqtarget.http.url import URIAuthority

__all__ = ["DEFAULT_SCHEME", "HttpHost"]

DEFAULT_SCHEME = "http"


@dataclass(frozen=True)
class HttpHost:
    """
    Host a request is sent to.

    Attributes:
        hostname: Host name or IP address.
        port: Port number, -1 when not specified.
        scheme: Lower-cased scheme name.
    """

    hostname: str
    port: int = -1
    scheme: str = DEFAULT_SCHEME

    def __post_init__(self) -> None:
        if not self.hostname:
            raise InvalidArgumentError("Host name may not be empty")
        if self.port is None:
            object.__setattr__(self, "port", -1)
        object.__setattr__(self, "scheme", (self.scheme or DEFAULT_SCHEME).lower())

    @classmethod
    def create(cls, text: str) -> "HttpHost":
        """
        Parse ``[scheme://]host[:port]``.

        Raises:
            InvalidURL: If the text carries user info or a non-numeric port.
        """
        scheme = DEFAULT_SCHEME
        if "://" in text:
            scheme, _, text = text.partition("://")
        authority = URIAuthority.create(text)
        if authority.user_info is not None:
            raise InvalidURL(f"User info is not allowed in a host: {text!r}")
        return cls(authority.hostname, authority.port, scheme)

    def to_uri(self) -> str:
        """Render as ``scheme://host[:port]``."""
        return f"{self.scheme}://{URIAuthority.from_host(self)}"

    def __str__(self) -> str:
        return self.to_uri()
