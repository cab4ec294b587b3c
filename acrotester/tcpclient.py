"""A TCP client that reports its events through callbacks."""

from __future__ import annotations

import socket
from typing import Callable

CONNECT_TIMEOUT = 5.0


class TcpClient:
    """Blocking TCP client with connect, disconnect, data and error callbacks."""

    def __init__(
        self,
        on_data: Callable[[bytes], None] | None = None,
        on_connected: Callable[[], None] | None = None,
        on_disconnected: Callable[[], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.on_data = on_data
        self.on_connected = on_connected
        self.on_disconnected = on_disconnected
        self.on_error = on_error
        self.connect_timeout = CONNECT_TIMEOUT
        self._socket: socket.socket | None = None

    def __enter__(self) -> TcpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect_from_server()

    def _error(self, message: str) -> None:
        if self.on_error:
            self.on_error(message)

    def connect_to_server(self, address: str, port: int) -> None:
        """Connect unless a connection is already open; failures go to ``on_error``."""
        if self._socket is not None:
            return
        try:
            self._socket = socket.create_connection(
                (address, port), timeout=self.connect_timeout
            )
        except OSError as exc:
            self._error(str(exc))
            return
        if self.on_connected:
            self.on_connected()

    def disconnect_from_server(self) -> None:
        """Close the connection if one is open."""
        if self._socket is None:
            return
        sock, self._socket = self._socket, None
        try:
            sock.close()
        finally:
            if self.on_disconnected:
                self.on_disconnected()

    def is_connected(self) -> bool:
        return self._socket is not None

    def send_data(self, data: bytes) -> None:
        """Send ``data`` when connected; otherwise do nothing."""
        if self._socket is None:
            return
        try:
            self._socket.sendall(data)
        except OSError as exc:
            self._error(str(exc))

    def read_available(self, timeout: float = 1.0) -> bytes:
        """Wait up to ``timeout`` seconds for data and pass it to ``on_data``.

        Returns the bytes read, or ``b""`` when nothing arrived. A closed peer
        ends the connection.
        """
        if self._socket is None:
            return b""
        self._socket.settimeout(timeout)
        try:
            data = self._socket.recv(65536)
        except socket.timeout:
            return b""
        except OSError as exc:
            self._error(str(exc))
            self.disconnect_from_server()
            return b""
        if not data:
            self.disconnect_from_server()
            return b""
        if self.on_data:
            self.on_data(data)
        return data