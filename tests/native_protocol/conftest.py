"""Shared fixtures for protocol options tests."""

from __future__ import annotations

import ssl

import pytest

from native_protocol import ProtocolOptions, SSLOptions


@pytest.fixture
def tls_options() -> SSLOptions:
    """SSL options backed by a fresh client context."""
    return SSLOptions(context=ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT))


@pytest.fixture
def options() -> ProtocolOptions:
    """Protocol options with defaults."""
    return ProtocolOptions()

