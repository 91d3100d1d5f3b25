"""
Options of the native binary protocol.

The registry the connection layer consults when opening a connection:
port, transport security material, and the compression to offer.
"""

from .compression import Compression
from .exceptions import InvalidCompressionError, InvalidPortError, ProtocolOptionsError
from .manager import ClusterManager
from .options import DEFAULT_PORT, MAX_PORT, MIN_PORT, ConnectionParameters, ProtocolOptions
from .settings import ProtocolSettings
from .ssl_options import DEFAULT_SSL_CIPHER_SUITES, SSLOptions

__all__ = [
    # Registry
    "ProtocolOptions",
    "ConnectionParameters",
    "DEFAULT_PORT",
    "MIN_PORT",
    "MAX_PORT",
    # Compression
    "Compression",
    # Security material
    "SSLOptions",
    "DEFAULT_SSL_CIPHER_SUITES",
    # Owning manager
    "ClusterManager",
    # Configuration
    "ProtocolSettings",
    # Errors
    "ProtocolOptionsError",
    "InvalidPortError",
    "InvalidCompressionError",
]
