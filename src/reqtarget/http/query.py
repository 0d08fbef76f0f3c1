"""src/reqtarget/http/query.py

Query string codec for Reqtarget.

Thin wrapper around :mod:`urllib.parse` that turns a raw query string into
an ordered list of name/value pairs and back.
"""

import urllib.parse
from typing import Iterable, List, Optional, Tuple

__all__ = ["DEFAULT_CHARSET", "QueryParams", "parse_query", "format_query"]

DEFAULT_CHARSET = "utf-8"

QueryParams = List[Tuple[str, Optional[str]]]


def _decode(text: str, charset: str) -> str:
    return urllib.parse.unquote_plus(text, encoding=charset, errors="replace")


def parse_query(raw: Optional[str], charset: str = DEFAULT_CHARSET) -> QueryParams:
    """
    Decode a raw query string.

    Order and duplicate names are preserved. A name without ``=`` decodes
    to a None value, so it formats back as the bare name; ``name=`` decodes
    to an empty string.

    Args:
        raw: Raw (percent-encoded) query string, without the leading ``?``.
        charset: Charset used to decode percent-encoded octets.

    Returns:
        List of (name, value) pairs, empty when ``raw`` is empty or None.
    """
    params: QueryParams = []
    if not raw:
        return params
    for piece in raw.split("&"):
        if not piece:
            continue
        name, sep, value = piece.partition("=")
        decoded = _decode(value, charset) if sep else None
        params.append((_decode(name, charset), decoded))
    return params


def format_query(
    params: Iterable[Tuple[str, Optional[str]]], charset: str = DEFAULT_CHARSET
) -> str:
    """
    Encode name/value pairs into a query string.

    Reserved characters are percent-encoded and spaces become ``+``.
    A pair whose value is None renders as the bare name.
    """
    pieces = []
    for name, value in params:
        encoded = urllib.parse.quote_plus(name, encoding=charset)
        if value is not None:
            encoded += "=" + urllib.parse.quote_plus(value, encoding=charset)
        pieces.append(encoded)
    return "&".join(pieces)
