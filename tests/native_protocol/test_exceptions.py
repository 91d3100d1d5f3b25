"""Tests for the protocol options exception hierarchy."""

from __future__ import annotations

from native_protocol import InvalidCompressionError, InvalidPortError, ProtocolOptionsError


def test_base_error_message() -> None:
    """The base error keeps its message and a readable repr."""
    error = ProtocolOptionsError("boom")

    assert error.message == "boom"
    assert str(error) == "boom"
    assert repr(error) == "ProtocolOptionsError('boom')"


def test_port_error_range_message() -> None:
    """Integer ports report the allowed range."""
    error = InvalidPortError(70000, min_port=1, max_port=65535)

    assert str(error) == "Port 70000 is out of range (valid range: [1, 65535])"
    assert isinstance(error, ProtocolOptionsError)


def test_port_error_type_message() -> None:
    """Non-integer ports report their type."""
    error = InvalidPortError("abc", min_port=1, max_port=65535)

    assert str(error) == "Port must be an integer, got str: 'abc'"


def test_compression_error_truncates_long_values() -> None:
    """Long rejected values are shortened in the message."""
    error = InvalidCompressionError("x" * 100)

    assert error.value == "x" * 100
    assert str(error).endswith("...")
    assert len(str(error)) < 100
