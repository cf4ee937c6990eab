"""TCP client and server exchanging single integers as text."""

from __future__ import annotations

import logging
import re
import socket

logger = logging.getLogger(__name__)

DEFAULT_PORT = 54000
BUFFER_SIZE = 4096
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


def _encode(value: int) -> bytes:
    """Encode an integer as decimal text followed by a NUL terminator."""
    return str(int(value)).encode("ascii") + b"\0"


def _parse_int(data: bytes) -> int:
    """Read the leading integer of ``data``; 0 if there is none."""
    match = _LEADING_INT.match(data)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


class _Connection:
    """Shared state and helpers of a connected peer."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self.connection_lost = True

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            self.connection_lost = True
            raise ConnectionError("not connected")
        return self._sock

    def _send_value(self, value: int) -> None:
        sock = self._require_socket()
        try:
            sock.sendall(_encode(value))
        except OSError as exc:
            self.connection_lost = True
            raise ConnectionError("failed to send data") from exc

    def _receive_value(self) -> int:
        sock = self._require_socket()
        try:
            data = sock.recv(BUFFER_SIZE)
        except OSError as exc:
            self.connection_lost = True
            raise ConnectionError("failed to receive data") from exc
        if not data:
            self.connection_lost = True
            raise ConnectionError("connection closed by peer")
        return _parse_int(data)

    def _close_connection(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        self.connection_lost = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._close_connection()


class NetworkClient(_Connection):
    """Client side of the integer exchange."""

    def __init__(self, ip_address: str, port: int) -> None:
        super().__init__()
        self.ip_address = ip_address
        self.port = port

    def connect(self) -> None:
        """Connect to the server; raises OSError if that fails."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.connect((self.ip_address, self.port))
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self.connection_lost = False
        logger.info("Connected to %s:%s", self.ip_address, self.port)

    def send(self, value: int) -> None:
        """Send ``value`` to the server."""
        self._send_value(value)

    def receive(self) -> int:
        """Block until the server sends data and return the integer it holds."""
        return self._receive_value()

    def close(self) -> None:
        """Close the connection to the server."""
        self._close_connection()


class NetworkServer(_Connection):
    """Server side that accepts a single client."""

    def __init__(self, host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> None:
        super().__init__()
        self.host = host
        self.port = port
        self._listener: socket.socket | None = None

    def listen(self) -> tuple[str, int]:
        """Bind and start listening; return the bound address."""
        if self._listener is None:
            listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            try:
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                listener.bind((self.host, self.port))
                listener.listen(socket.SOMAXCONN)
            except OSError:
                listener.close()
                raise
            self._listener = listener
        return self._listener.getsockname()

    def wait_connection(self) -> tuple[str, int]:
        """Accept one client, stop listening and return the client's address."""
        self.listen()
        assert self._listener is not None
        try:
            conn, address = self._listener.accept()
        finally:
            self._listener.close()
            self._listener = None
        self._sock = conn
        self.connection_lost = False
        try:
            host, service = socket.getnameinfo(address, 0)
        except OSError:
            host, service = address[0], str(address[1])
        logger.info("%s connected on port %s", host, service)
        return address

    def send(self, value: int) -> None:
        """Send ``value`` to the connected client."""
        self._send_value(value)

    def receive(self) -> int:
        """Block until the client sends data and return the integer it holds."""
        return self._receive_value()

    def close(self) -> None:
        """Stop listening and close the client connection."""
        if self._listener is not None:
            self._listener.close()
            self._listener = None
        self._close_connection()