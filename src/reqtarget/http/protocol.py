"""src/reqtarget/http/protocol.py

Protocol version of an HTTP message.
"""

from dataclasses import dataclass

__all__ = ["ProtocolVersion", "HTTP_1_0", "HTTP_1_1"]


@dataclass(frozen=True)
class ProtocolVersion:
    """Protocol name with major and minor version numbers."""

    protocol: str
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.protocol}/{self.major}.{self.minor}"


HTTP_1_0 = ProtocolVersion("HTTP", 1, 0)
HTTP_1_1 = ProtocolVersion("HTTP", 1, 1)
