"""
=============================================================================
REQPARSE - Minimal HTTP/1.x Request Parser
=============================================================================

Turns raw request text into a structured value: method, resource,
version, headers and a single-line body.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    reqparse/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m reqparse)
    ├── config.py            # ParserConfig dataclass
    ├── http/
    │   └── request.py       # Data model and request parser
    └── core/
        ├── connection.py    # Reads a request from a socket
        └── client.py        # Greeting client

=============================================================================
QUICK START
=============================================================================

    from reqparse import parse_request, Method

    request = parse_request("GET / HTTP/1.1\\r\\nHost: example.com\\r\\n\\r\\n")
    assert request.method is Method.GET
    assert request.headers["Host"] == "example.com"

=============================================================================
"""

__version__ = "1.0.0"

from .config import ParserConfig
from .http import (
    MalformedRequest,
    Method,
    ParsedRequest,
    Path,
    RequestParser,
    Resource,
    Version,
    parse_request,
)

__all__ = [
    "ParsedRequest",
    "Method",
    "Version",
    "Resource",
    "Path",
    "RequestParser",
    "MalformedRequest",
    "parse_request",
    "ParserConfig",
    "__version__",
]
