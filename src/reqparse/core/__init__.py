"""
=============================================================================
TRANSPORT COMPONENTS
=============================================================================

The networking side of the package. Nothing here parses HTTP; these
classes only move bytes and hand complete text to the parser.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                          CONNECTION                                  │
    │  ─────────────────────────────────────────────────────────────────  │
    │  • Wraps an accepted client socket                                  │
    │  • Buffers recv() chunks until the header terminator arrives        │
    │  • Decodes the bytes and runs the request parser                    │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        GREETING CLIENT                               │
    │  ─────────────────────────────────────────────────────────────────  │
    │  • Connects, writes a short message, reads a fixed-size reply       │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .connection import Connection, ConnectionState
from .client import GreetingClient

__all__ = [
    "Connection",       # Reads a request from a client socket
    "ConnectionState",  # Enum for connection lifecycle states
    "GreetingClient",   # One-shot byte exchange client
]
