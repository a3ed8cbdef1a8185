"""A TCP connection to a RESP server."""

from __future__ import annotations

import socket
from typing import BinaryIO

from .parser import parse_response


class RedisClient:
    """Holds one TCP connection to a server, resolved over IPv4 or IPv6."""

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self._sock: socket.socket | None = None
        self._reader: BinaryIO | None = None

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def fileno(self) -> int:
        """The socket's file descriptor, or -1 when not connected."""
        return self._sock.fileno() if self._sock is not None else -1

    def connect(self) -> None:
        """Connect to the first resolved address that accepts the connection.

        Raises ConnectionError when the name cannot be resolved or no address
        can be reached.
        """
        self.disconnect()
        try:
            infos = socket.getaddrinfo(
                self.host, self.port, socket.AF_UNSPEC, socket.SOCK_STREAM
            )
        except socket.gaierror as exc:
            raise ConnectionError(f"getaddrinfo: {exc.strerror}") from exc

        for family, socktype, proto, _, address in infos:
            try:
                sock = socket.socket(family, socktype, proto)
            except OSError:
                continue
            try:
                sock.connect(address)
            except OSError:
                sock.close()
                continue
            self._sock = sock
            self._reader = sock.makefile("rb")
            return
        raise ConnectionError(f"Could not connect to {self.host}:{self.port}")

    def disconnect(self) -> None:
        """Close the connection if one is open."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def send_command(self, command: bytes | str) -> None:
        """Send an encoded command; raises ConnectionError when not connected."""
        if self._sock is None:
            raise ConnectionError("not connected")
        data = command.encode("utf-8") if isinstance(command, str) else command
        self._sock.sendall(data)

    def read_response(self) -> str:
        """Read and render one reply from the server."""
        if self._reader is None:
            raise ConnectionError("not connected")
        return parse_response(self._reader)

    def __enter__(self) -> RedisClient:
        self.connect()
        return self

    def __exit__(self, *args) -> None:
        self.disconnect()