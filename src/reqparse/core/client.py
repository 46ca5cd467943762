"""
Greeting client.

Connects to a TCP server, writes a short message and reads a fixed number
of bytes back. This is a plain byte exchange with no HTTP involved; it is
handy for checking that something is listening before pointing real
requests at it.
"""

import socket
import logging
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)


@dataclass
class GreetingClient:
    """
    One-shot TCP client.

    Attributes:
        host: Server host.
        port: Server port.
        message: Text written right after connecting.
        buffer_size: Size of the single read. The reply is whatever that
                     one recv() returns, up to this many bytes.
        timeout: Socket timeout in seconds.
        encoding: Used for both the message and the reply.
    """

    host: str = "127.0.0.1"
    port: int = 3000
    message: str = "Hello"
    buffer_size: int = 5
    timeout: Optional[float] = 5.0
    encoding: str = "utf-8"

    def exchange(self) -> str:
        """
        Send the message and return the reply.

        Raises:
            ConnectionError: If the server cannot be reached.
            TimeoutError: If the server does not answer in time.
        """
        logger.debug(f"Connecting to {self.host}:{self.port}")
        try:
            with socket.create_connection(
                (self.host, self.port), timeout=self.timeout
            ) as sock:
                sock.sendall(self.message.encode(self.encoding))
                reply = sock.recv(self.buffer_size)
        except socket.timeout:
            logger.warning(f"Timed out talking to {self.host}:{self.port}")
            raise TimeoutError(f"No reply from {self.host}:{self.port}")
        except OSError as e:
            logger.warning(f"Failed to reach {self.host}:{self.port}: {e}")
            raise ConnectionError(f"Cannot reach {self.host}:{self.port}: {e}") from e

        logger.debug(f"Got {len(reply)} bytes from {self.host}:{self.port}")
        return reply.decode(self.encoding, errors="replace")
