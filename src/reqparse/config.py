"""
=============================================================================
PARSER CONFIGURATION
=============================================================================

Centralized settings for the parser, the socket transport and the
greeting client.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m reqparse client --port 3000                     │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── REQPARSE_PORT=3000 python -m reqparse client              │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass
from typing import Optional

from .http.request import RequestParser


TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ParserConfig:
    """
    Configuration for parsing and transport.

    PARSER SETTINGS
    - strict, encoding

    TRANSPORT SETTINGS
    - host, port, buffer_size, max_request_size, timeout, greeting

    LOGGING
    - log_level
    """

    # ─────────────────────────────────────────────────────────────────────
    # PARSER SETTINGS
    # ─────────────────────────────────────────────────────────────────────

    strict: bool = False
    """
    Raise MalformedRequest for a missing request line or extra
    request-line tokens instead of filling in sentinels.
    """

    encoding: str = "utf-8"
    """Text encoding used to decode request bytes."""

    # ─────────────────────────────────────────────────────────────────────
    # TRANSPORT SETTINGS
    # ─────────────────────────────────────────────────────────────────────

    host: str = "127.0.0.1"
    port: int = 3000

    buffer_size: int = 5
    """
    Bytes per recv() call. The greeting client does a single read of
    exactly this many bytes.
    """

    max_request_size: int = 64 * 1024  # 64 KB
    """Largest request a Connection will buffer before giving up."""

    timeout: Optional[float] = 5.0
    """Socket timeout in seconds. None blocks forever."""

    greeting: str = "Hello"
    """Message the greeting client writes after connecting."""

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """
        Create configuration from environment variables.

        REQPARSE_STRICT       Strict parsing (default: off)
        REQPARSE_ENCODING     Request encoding (default: utf-8)
        REQPARSE_HOST         Client host (default: 127.0.0.1)
        REQPARSE_PORT         Client port (default: 3000)
        REQPARSE_BUFFER_SIZE  Read size in bytes (default: 5)
        REQPARSE_TIMEOUT      Socket timeout in seconds (default: 5)
        REQPARSE_LOG_LEVEL    Logging level (default: WARNING)
        """
        return cls(
            strict=os.getenv("REQPARSE_STRICT", "").lower() in TRUE_VALUES,
            encoding=os.getenv("REQPARSE_ENCODING", "utf-8"),
            host=os.getenv("REQPARSE_HOST", "127.0.0.1"),
            port=int(os.getenv("REQPARSE_PORT", "3000")),
            buffer_size=int(os.getenv("REQPARSE_BUFFER_SIZE", "5")),
            timeout=float(os.getenv("REQPARSE_TIMEOUT", "5")),
            log_level=os.getenv("REQPARSE_LOG_LEVEL", "WARNING"),
        )

    def validate(self) -> None:
        """Validate configuration values. Fails fast with ValueError."""
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}. Must be 1-65535.")

        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")

        if self.max_request_size < self.buffer_size:
            raise ValueError("max_request_size must be >= buffer_size")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0")

        try:
            "".encode(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")

    def parser(self) -> RequestParser:
        """Build a RequestParser with these settings."""
        return RequestParser(strict=self.strict, encoding=self.encoding)
