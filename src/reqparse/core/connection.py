"""
=============================================================================
REQUEST TRANSPORT
=============================================================================

Reads one complete request from a socket and hands it to the parser.

The parser itself never touches the network. It expects the whole request
as text, so this module does the part TCP makes awkward: TCP is a byte
stream, not a message stream, so a request can arrive split across any
number of recv() calls.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    read_request() Flow                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   recv() → buffer     until "\r\n\r\n" is seen or the peer closes   │
    │        │                                                             │
    │        ▼                                                             │
    │   decode(encoding)    undecodable bytes are replaced                │
    │        │                                                             │
    │        ▼                                                             │
    │   RequestParser.parse(text) → ParsedRequest                         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

There is no Content-Length handling, no keep-alive and no pipelining.
Anything the peer sends after the header terminator in the same recv()
call stays in the returned text, so a single-line body sent together with
the headers still reaches the parser.

=============================================================================
"""

import socket
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional
import uuid

from ..http.request import ParsedRequest, RequestParser


logger = logging.getLogger(__name__)


HEADER_TERMINATOR = b"\r\n\r\n"


class ConnectionState(Enum):
    """Connection lifecycle states."""
    NEW = "new"              # Accepted, nothing read yet
    READING = "reading"      # Receiving request bytes
    PARSING = "parsing"      # Request text handed to the parser
    CLOSED = "closed"        # Socket released


@dataclass
class Connection:
    """
    Wraps an accepted client socket.

    Attributes:
        socket: The client socket.
        address: Client's (ip, port) tuple.
        id: Short identifier used in log lines.
        state: Current connection state.
        buffer_size: Bytes per recv() call.
        max_request_size: Largest request buffered before giving up.
        timeout: Socket timeout in seconds (None blocks forever).
        encoding: Used to decode the request bytes.
    """

    socket: socket.socket
    address: tuple = ("", 0)

    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    state: ConnectionState = ConnectionState.NEW

    buffer_size: int = 4096
    max_request_size: int = 64 * 1024
    timeout: Optional[float] = 5.0
    encoding: str = "utf-8"

    _buffer: bytes = field(default=b"", repr=False)

    def __post_init__(self):
        self.socket.settimeout(self.timeout)

    def read_request(self) -> Optional[str]:
        """
        Read one request from the socket.

        Returns:
            The request decoded to text, or None if the peer closed
            the connection without sending anything.

        Raises:
            TimeoutError: If the peer stops sending before the request
                          is complete.
            ValueError: If the request exceeds max_request_size.
        """
        self.state = ConnectionState.READING

        try:
            while HEADER_TERMINATOR not in self._buffer:
                chunk = self._recv()
                if not chunk:
                    break  # Peer closed; parse whatever arrived

                self._buffer += chunk

                if len(self._buffer) > self.max_request_size:
                    logger.warning(
                        f"[{self.id}] Request too large: {len(self._buffer)} bytes"
                    )
                    raise ValueError(f"Request too large: {len(self._buffer)} bytes")
        except socket.timeout:
            logger.warning(f"[{self.id}] Timed out reading request from {self.address}")
            raise TimeoutError("Request read timeout")

        data, self._buffer = self._buffer, b""
        if not data:
            logger.debug(f"[{self.id}] Peer closed before sending a request")
            return None

        logger.debug(f"[{self.id}] Read {len(data)} bytes")
        return data.decode(self.encoding, errors="replace")

    def receive(self, parser: Optional[RequestParser] = None) -> Optional[ParsedRequest]:
        """
        Read one request and parse it.

        Args:
            parser: Parser to use. Defaults to a lenient parser with
                    this connection's encoding.

        Returns:
            The parsed request, or None if the peer sent nothing.
        """
        text = self.read_request()
        if text is None:
            return None

        self.state = ConnectionState.PARSING
        if parser is None:
            parser = RequestParser(encoding=self.encoding)
        return parser.parse(text)

    def _recv(self) -> bytes:
        """
        Receive from the socket.

        Returns:
            Received bytes, or empty bytes if the peer reset the connection.
        """
        try:
            return self.socket.recv(self.buffer_size)
        except (ConnectionResetError, BrokenPipeError) as e:
            logger.warning(f"[{self.id}] Connection lost: {e}")
            return b""

    def close(self):
        """
        Close the connection.

        shutdown(SHUT_WR) sends FIN first so the peer sees a clean end of
        stream, then the descriptor is released. Either step may fail on
        a socket the peer already tore down.
        """
        if self.state == ConnectionState.CLOSED:
            return

        try:
            self.socket.shutdown(socket.SHUT_WR)
        except OSError:
            pass  # Already disconnected

        try:
            self.socket.close()
        except OSError:
            pass

        self.state = ConnectionState.CLOSED
        logger.debug(f"[{self.id}] Connection closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
