"""
=============================================================================
HTTP REQUEST MODEL
=============================================================================

The protocol side of the package: turning request text into a structured
value.

    ┌─────────────────────────────────────────────────────────────────────┐
    │ REQUEST PARSER (request.py)                                         │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Parses request text into ParsedRequest objects                      │
    │                                                                      │
    │ Input:   "GET / HTTP/1.1\r\nHost: example.com\r\n\r\n"              │
    │ Output:  ParsedRequest(method=Method.GET, resource=Path("/"), ...) │
    │                                                                      │
    │ Handles:                                                             │
    │   • Request line (method, resource, version)                        │
    │   • Header lines (split on the first colon, trimmed)                │
    │   • A single body line                                              │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .request import (
    MalformedRequest,
    Method,
    ParsedRequest,
    Path,
    RequestParser,
    Resource,
    Version,
    parse_request,
    split_lines,
)

__all__ = [
    # Data model
    "ParsedRequest",
    "Method",
    "Version",
    "Resource",
    "Path",

    # Parsing
    "RequestParser",
    "parse_request",
    "split_lines",
    "MalformedRequest",
]
