"""Exception hierarchy for protocol options."""

from __future__ import annotations

from typing import Any


class ProtocolOptionsError(Exception):
    """
    Base exception for all protocol option errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidPortError(ProtocolOptionsError):
    """
    Raised when a port is not a valid TCP port number.

    Attributes:
        port: The rejected value.
        min_port: The minimum allowed port (inclusive).
        max_port: The maximum allowed port (inclusive).
    """

    def __init__(self, port: Any, *, min_port: int, max_port: int) -> None:
        self.port = port
        self.min_port = min_port
        self.max_port = max_port

        if isinstance(port, int) and not isinstance(port, bool):
            msg = f"Port {port} is out of range (valid range: [{min_port}, {max_port}])"
        else:
            msg = f"Port must be an integer, got {type(port).__name__}: {port!r}"

        super().__init__(msg)


class InvalidCompressionError(ProtocolOptionsError):
    """
    Raised when a value does not name a supported compression algorithm.

    Attributes:
        value: The rejected value (may be truncated for display).
    """

    def __init__(self, value: Any) -> None:
        self.value = value

        value_repr = repr(value)
        if len(value_repr) > 50:
            value_repr = value_repr[:47] + "..."

        super().__init__(f"Unsupported compression: {value_repr}")
