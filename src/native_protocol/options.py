"""
Options of the native binary protocol.

ProtocolOptions is the registry the connection layer reads every time
it opens a connection:

    port          -> TCP target
    ssl_options   -> wrap the socket in TLS, or not
    compression   -> algorithm offered during the options exchange

Port and SSL options are fixed when the object is built. Compression can
be changed at runtime by administrative code while connections are being
opened on other threads.

Thread Safety
-------------

The compression selection is a single reference to an enum member.
Rebinding an attribute is one atomic store in the interpreter, so a
reader sees either the previous member or the new one, never anything
in between. No lock is taken on either path.

Port and SSL options are written once in __init__ and only read after
that, so they can be shared freely once the object is published.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from typing_extensions import Self

from .compression import Compression
from .exceptions import InvalidCompressionError, InvalidPortError
from .manager import ClusterManager
from .ssl_options import SSLOptions

logger = logging.getLogger(__name__)

DEFAULT_PORT: Final = 9042
"""The default port for the native binary protocol."""

MIN_PORT: Final = 1
"""Lowest valid TCP port."""

MAX_PORT: Final = 65535
"""Highest valid TCP port."""


@dataclass(frozen=True, slots=True)
class ConnectionParameters:
    """
    Values one connection attempt uses for its handshake.

    Taken from a single read of each registry field, so a concurrent
    compression change cannot affect a handshake halfway through.
    """

    port: int
    """TCP port to connect to."""

    ssl_options: SSLOptions | None
    """TLS material, or None for a plaintext connection."""

    compression: Compression
    """Compression to offer to the server."""

    @property
    def ssl_enabled(self) -> bool:
        """Whether the connection must be wrapped in TLS."""
        return self.ssl_options is not None


class ProtocolOptions:
    """
    Options of the native binary protocol.

    Created once at startup and bound to the cluster manager with
    `register`. Read by every new connection from then on.
    """

    __slots__ = ("_port", "_ssl_options", "_compression", "_manager")

    def __init__(self, port: int = DEFAULT_PORT, ssl_options: SSLOptions | None = None) -> None:
        """
        Create protocol options.

        With no arguments the options use DEFAULT_PORT and no SSL.

        Args:
            port: Port to use for the binary protocol.
            ssl_options: SSL options to use. None disables SSL.

        Raises:
            InvalidPortError: If port is not an integer in [1, 65535].
        """
        # bool is an int subclass; True would otherwise pass as port 1.
        if isinstance(port, bool) or not isinstance(port, int):
            raise InvalidPortError(port, min_port=MIN_PORT, max_port=MAX_PORT)
        if not MIN_PORT <= port <= MAX_PORT:
            raise InvalidPortError(port, min_port=MIN_PORT, max_port=MAX_PORT)

        self._port = port
        self._ssl_options = ssl_options
        self._compression = Compression.NONE
        self._manager: ClusterManager | None = None

    def register(self, manager: ClusterManager) -> None:
        """
        Bind these options to the manager that owns the cluster's connections.

        Reserved for cluster lifecycle code, called once during startup.
        A later call replaces the earlier handle.
        """
        previous = self._manager
        self._manager = manager
        if previous is not None and previous is not manager:
            logger.info("Protocol options re-registered to a different manager")
        else:
            logger.debug("Protocol options registered to %r", manager)

    @property
    def manager(self) -> ClusterManager | None:
        """The manager bound by `register`, or None before registration."""
        return self._manager

    @property
    def port(self) -> int:
        """The port used to connect to hosts."""
        return self._port

    @property
    def ssl_options(self) -> SSLOptions | None:
        """The SSL options used to connect to hosts, or None if SSL is disabled."""
        return self._ssl_options

    @property
    def compression(self) -> Compression:
        """The compression offered to hosts. Defaults to Compression.NONE."""
        return self._compression

    def set_compression(self, compression: Compression) -> Self:
        """
        Set the compression to use.

        The setting can be changed at any time but only applies to
        connections opened after this call returns. Open connections keep
        whatever they negotiated.

        Args:
            compression: Algorithm to use, or Compression.NONE to disable.

        Returns:
            These options, for chaining.

        Raises:
            InvalidCompressionError: If compression is not a Compression member.
        """
        if not isinstance(compression, Compression):
            raise InvalidCompressionError(compression)

        previous = self._compression
        self._compression = compression
        logger.debug("Compression changed from %s to %s", previous.name, compression.name)
        return self

    def connection_parameters(self) -> ConnectionParameters:
        """Snapshot the values a new connection should use."""
        return ConnectionParameters(
            port=self._port,
            ssl_options=self._ssl_options,
            compression=self._compression,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(port={self._port}, "
            f"ssl={self._ssl_options is not None}, "
            f"compression={self._compression.name})"
        )
