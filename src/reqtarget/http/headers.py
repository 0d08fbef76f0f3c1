"""src/reqtarget/http/headers.py

Ordered HTTP header storage for Reqtarget.
"""

from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Union,
    cast,
)

__all__ = ["Header", "Headers"]


class Header(NamedTuple):
    """Single header field."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


class Headers(Mapping[str, str]):
    """
    Case-insensitive, ordered collection of header fields.

    Behaves like a read-only dictionary keyed by lower-cased name, where
    duplicate headers are joined by commas (except Set-Cookie). Individual
    fields keep their insertion order and original name casing and are
    available through headers(), get_all(), first() and last().
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[Dict[str, Union[str, List[str]]]] = None):
        self._headers: List[Header] = []
        if headers:
            for k, v in headers.items():
                # Support both single values and lists
                if isinstance(v, list):
                    self._headers.extend(Header(k, item) for item in v)
                else:
                    self._headers.append(Header(k, v))

    def __getitem__(self, key: str) -> str:
        """Get header value (comma-joined if multiple, except Set-Cookie)."""
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return cast(str, value)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(h.name.lower() for h in self._headers))

    def __len__(self) -> int:
        return len({h.name.lower() for h in self._headers})

    def __repr__(self) -> str:
        return f"Headers({[tuple(h) for h in self._headers]!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get header value.

        Args:
            key: Header name (case-insensitive).
            default: Default value if header not found.

        Returns:
            Comma-joined string for multiple values (except Set-Cookie
            which returns first), or default if not found.
        """
        values = self.get_all(key)
        if not values:
            return default

        if key.lower() == "set-cookie":
            return values[0]

        return ", ".join(values)

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a header.

        Args:
            key: Header name (case-insensitive).

        Returns:
            List of all values for the header, empty list if not found.
        """
        name = key.lower()
        return [h.value for h in self._headers if h.name.lower() == name]

    def headers(self, key: Optional[str] = None) -> List[Header]:
        """All header fields in insertion order, optionally only those named key."""
        if key is None:
            return list(self._headers)
        name = key.lower()
        return [h for h in self._headers if h.name.lower() == name]

    def first(self, key: str) -> Optional[Header]:
        """First field named key, or None."""
        matches = self.headers(key)
        return matches[0] if matches else None

    def last(self, key: str) -> Optional[Header]:
        """Last field named key, or None."""
        matches = self.headers(key)
        return matches[-1] if matches else None

    def contains(self, key: str) -> bool:
        """True if at least one field is named key."""
        return self.first(key) is not None

    def add(self, header: Header) -> None:
        """Append a field, keeping any existing fields of the same name."""
        self._headers.append(header)

    def set(self, header: Header) -> None:
        """
        Replace the first field with the same name.

        The field is appended if no field of that name exists yet.
        """
        name = header.name.lower()
        for i, existing in enumerate(self._headers):
            if existing.name.lower() == name:
                self._headers[i] = header
                return
        self._headers.append(header)

    def remove(self, key: str) -> bool:
        """
        Remove every field named key.

        Returns:
            True if anything was removed.
        """
        name = key.lower()
        kept = [h for h in self._headers if h.name.lower() != name]
        removed = len(kept) != len(self._headers)
        self._headers = kept
        return removed

    def clear(self) -> None:
        """Remove all fields."""
        self._headers = []
