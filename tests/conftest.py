"""
pytest configuration and fixtures.
"""

import socket
import threading
from typing import Generator
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def sample_get_request() -> str:
    """Sample HTTP GET request."""
    return (
        "GET / HTTP/1.1\r\n"
        "Host: example.com\r\n"
        "Connection: keep-alive\r\n"
        "\r\n"
    )


@pytest.fixture
def sample_post_request() -> str:
    """Sample HTTP POST request with a single-line form body."""
    return (
        "POST /api/users HTTP/1.1\r\n"
        "Host: localhost\r\n"
        "Content-Type: application/x-www-form-urlencoded\r\n"
        "Content-Length: 18\r\n"
        "\r\n"
        "name=john&age=42&x"
    )


@pytest.fixture
def socket_pair() -> Generator[tuple[socket.socket, socket.socket], None, None]:
    """Connected (server side, client side) socket pair."""
    server_side, client_side = socket.socketpair()
    yield server_side, client_side
    for sock in (server_side, client_side):
        try:
            sock.close()
        except OSError:
            pass


class EchoServer:
    """Single-connection echo server that runs in a background thread."""

    def __init__(self):
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._socket.bind(("127.0.0.1", 0))
        self._socket.listen(1)
        self.port = self._socket.getsockname()[1]
        self.received = b""
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def _serve(self):
        conn, _ = self._socket.accept()
        with conn:
            self.received = conn.recv(1024)
            conn.sendall(self.received)

    def start(self):
        self._thread.start()

    def stop(self):
        self._socket.close()
        self._thread.join(timeout=5.0)


@pytest.fixture
def echo_server() -> Generator[EchoServer, None, None]:
    """Echo server on a free local port."""
    server = EchoServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def free_port() -> int:
    """Get a free port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]
