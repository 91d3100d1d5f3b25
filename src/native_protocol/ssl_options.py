"""
Transport security material for native protocol connections.

SSLOptions bundles the TLS context and the cipher suites to enable.
ProtocolOptions stores an instance as-is and never looks inside it;
the connection layer consumes it when wrapping a socket.
"""

from __future__ import annotations

import ssl
from dataclasses import dataclass
from typing import Final

DEFAULT_SSL_CIPHER_SUITES: Final[tuple[str, ...]] = ("AES128-SHA", "AES256-SHA")
"""Cipher suites enabled when none are given (OpenSSL names)."""


@dataclass(frozen=True, slots=True)
class SSLOptions:
    """TLS context and cipher suites for encrypted connections."""

    context: ssl.SSLContext
    """Context used to wrap connection sockets."""

    cipher_suites: tuple[str, ...] = DEFAULT_SSL_CIPHER_SUITES
    """Cipher suites to enable on each connection."""

    def __post_init__(self) -> None:
        """Reject an empty cipher suite list."""
        if not self.cipher_suites:
            raise ValueError("SSLOptions requires at least one cipher suite")

    @classmethod
    def default(cls) -> SSLOptions:
        """
        Build options from the platform's default client context.

        The context verifies server certificates against the system
        trust store.
        """
        return cls(context=ssl.create_default_context(ssl.Purpose.SERVER_AUTH))
