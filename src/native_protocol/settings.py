"""
Protocol settings loaded from external configuration.

Cluster bootstrap code describes the desired options as data (keyword
arguments, a parsed JSON/YAML/TOML mapping, or environment variables)
and turns them into a live ProtocolOptions registry with `to_options`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from pydantic import Field, field_validator

from .base import StrictBaseModel
from .compression import Compression
from .exceptions import InvalidPortError
from .options import DEFAULT_PORT, MAX_PORT, MIN_PORT, ProtocolOptions
from .ssl_options import SSLOptions

PORT_ENV_VAR: Final = "NATIVE_PROTOCOL_PORT"
"""Environment variable holding the port number."""

COMPRESSION_ENV_VAR: Final = "NATIVE_PROTOCOL_COMPRESSION"
"""Environment variable holding the compression negotiation name."""


class ProtocolSettings(StrictBaseModel):
    """Declarative description of a ProtocolOptions registry."""

    port: int = Field(default=DEFAULT_PORT, ge=MIN_PORT, le=MAX_PORT)
    """Port for the binary protocol."""

    compression: Compression = Compression.NONE
    """Initial compression selection."""

    @field_validator("compression", mode="before")
    @classmethod
    def _parse_compression_name(cls, v: Any) -> Any:
        """Accept negotiation names such as "snappy" from config documents."""
        if isinstance(v, str):
            return Compression.from_protocol_name(v)
        return v

    def to_options(self, ssl_options: SSLOptions | None = None) -> ProtocolOptions:
        """
        Build a registry from these settings.

        SSL material is not part of the settings because it is not plain
        data; pass it here when TLS is required.
        """
        return ProtocolOptions(self.port, ssl_options).set_compression(self.compression)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ProtocolSettings:
        """
        Read settings from environment variables.

        Unset or empty variables keep their defaults.

        Raises:
            InvalidPortError: If the port variable is not a plain decimal number.
            InvalidCompressionError: If the compression name is unknown.
            pydantic.ValidationError: If the port is out of range.
        """
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {}

        raw_port = environ.get(PORT_ENV_VAR, "").strip()
        if raw_port:
            # int() would also take "9_142", "+9142" and non-ASCII digits.
            if not (raw_port.isascii() and raw_port.isdecimal()):
                raise InvalidPortError(raw_port, min_port=MIN_PORT, max_port=MAX_PORT)
            values["port"] = int(raw_port)

        raw_compression = environ.get(COMPRESSION_ENV_VAR)
        if raw_compression is not None:
            values["compression"] = raw_compression

        return cls(**values)
