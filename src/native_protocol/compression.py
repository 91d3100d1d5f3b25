"""
Payload compression algorithms of the native binary protocol.

The client offers one of these during the STARTUP options exchange.
The registry only records which algorithm is requested; the codecs and
the fallback when a server does not support the offer live in the
connection layer.
"""

from __future__ import annotations

from enum import Enum

from .exceptions import InvalidCompressionError


class Compression(Enum):
    """
    Compression supported by the native binary protocol.

    Each member's value is the name sent during negotiation.
    """

    NONE = ""
    """No compression. Nothing is offered to the server."""

    SNAPPY = "snappy"
    """Snappy block compression."""

    @property
    def protocol_name(self) -> str:
        """Name used for this algorithm in the options exchange."""
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_protocol_name(cls, name: str) -> Compression:
        """
        Look up a member by its negotiation name.

        Matching ignores case and surrounding whitespace. Both the empty
        string and "none" select NONE.

        Args:
            name: Negotiation name, e.g. from a configuration file.

        Returns:
            The matching member.

        Raises:
            InvalidCompressionError: If no member has that name.
        """
        if not isinstance(name, str):
            raise InvalidCompressionError(name)

        normalized = name.strip().lower()
        if normalized == "none":
            return cls.NONE
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidCompressionError(name)
