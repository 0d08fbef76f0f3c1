"""utils/validators.py

Validation utilities for Reqtarget.

Checks follow the generic URI grammar of RFC 3986. Non-ASCII characters
outside the control and space ranges are accepted in every component so
that internationalized references still parse.
"""

import ipaddress
import re
from typing import Optional, Tuple

__all__ = [
    "is_uri_reference",
    "is_valid_scheme",
    "is_valid_host",
    "split_authority",
]

_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_OTHER = "\u00a1-\ud7ff\ue000-\U0010ffff"
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

_PCHAR = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@{_OTHER}]|{_PCT_ENCODED})"

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_USER_INFO = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:{_OTHER}]|{_PCT_ENCODED})*")
_REG_NAME = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}{_OTHER}]|{_PCT_ENCODED})*")
_PORT = re.compile(r"[0-9]*")
_PATH = re.compile(rf"(?:{_PCHAR}|/)*")
_QUERY = re.compile(rf"(?:{_PCHAR}|[/?])*")

# RFC 3986, Appendix B
_REFERENCE = re.compile(
    r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$",
    re.DOTALL,
)


def split_authority(authority: str) -> Tuple[Optional[str], str, Optional[str]]:
    """
    Split an authority component into user info, host and port.

    IPv6 literals are returned without their brackets.

    Args:
        authority: Authority text, e.g. ``user@example.com:8080``.

    Returns:
        Tuple of (user_info or None, host, port text or None).
    """
    user_info: Optional[str] = None
    if "@" in authority:
        user_info, _, authority = authority.rpartition("@")

    if authority.startswith("["):
        close = authority.find("]")
        if close == -1:
            return user_info, authority, None
        host = authority[1:close]
        rest = authority[close + 1 :]
        if rest.startswith(":"):
            return user_info, host, rest[1:]
        if rest:
            # Garbage after the literal, keep it visible to the host check.
            return user_info, authority, None
        return user_info, host, None

    host, sep, port = authority.partition(":")
    return user_info, host, port if sep else None


def is_valid_scheme(scheme: str) -> bool:
    """Check a scheme name against the URI grammar."""
    return _SCHEME.fullmatch(scheme) is not None


def is_valid_host(host: str) -> bool:
    """
    Check a host against the URI grammar.

    Hosts containing a colon are treated as IPv6 literals, with or without
    surrounding brackets.
    """
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif host.startswith("[") or host.endswith("]"):
        return False

    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    return _REG_NAME.fullmatch(host) is not None


def _is_valid_authority(authority: str) -> bool:
    user_info, host, port = split_authority(authority)
    if user_info is not None and _USER_INFO.fullmatch(user_info) is None:
        return False
    if port is not None and _PORT.fullmatch(port) is None:
        return False
    if authority.rpartition("@")[2].startswith("["):
        # IP literals must hold an IPv6 address.
        return ":" in host and is_valid_host(host)
    return is_valid_host(host)


def is_uri_reference(text: str) -> bool:
    """
    Check whether text is a URI reference (absolute or relative).

    Args:
        text: Candidate URI text.

    Returns:
        True if every component matches the RFC 3986 grammar.
    """
    match = _REFERENCE.match(text)
    if match is None:  # pragma: no cover - the pattern matches any string
        return False

    scheme, authority, path, query, fragment = match.groups()

    if scheme is not None:
        if not is_valid_scheme(scheme):
            return False
        if authority is None and not path:
            return False

    if authority is not None:
        # "http://" and "//?x" name neither a host nor a path.
        if not authority and not path:
            return False
        if not _is_valid_authority(authority):
            return False

    if _PATH.fullmatch(path) is None:
        return False

    for part in (query, fragment):
        if part is not None and _QUERY.fullmatch(part) is None:
            return False

    return True
