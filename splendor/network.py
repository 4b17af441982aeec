"""TCP link between a hosting and a joining player."""

from __future__ import annotations

import socket
import struct

from splendor.packet import NetworkPacket

DEFAULT_PORT = 52000
DEFAULT_IP = "127.0.0.1"

_SIZE = struct.Struct(">I")


class Network:
    """One peer of a two-player game; sends and receives framed packets."""

    def __init__(self, ip: str = DEFAULT_IP, port: int = DEFAULT_PORT) -> None:
        self.ip = ip
        self.port = port
        self.name = ""
        self._listener: socket.socket | None = None
        self._socket: socket.socket | None = None

    def start_server(self) -> None:
        """Listen for one client on the configured port."""
        self.name = "Server"
        self._listener = socket.create_server(("", self.port))
        self.port = self._listener.getsockname()[1]
        print(f"Server is running and accepting connections on port {self.port}")
        print("Waiting for clients to connect...", flush=True)

    def accept_connection(self) -> None:
        """Block until a client connects."""
        if self._listener is None:
            raise ConnectionError("server is not started")
        self._socket, address = self._listener.accept()
        print(f"New client connected: {address[0]}")

    def connect(self) -> bool:
        """Connect to the server at the configured address."""
        self.name = "Client"
        self._socket = socket.create_connection((self.ip, self.port))
        return True

    def _connected(self) -> socket.socket:
        if self._socket is None:
            raise ConnectionError("not connected")
        return self._socket

    def send(self, packet: NetworkPacket) -> None:
        """Send the packet, then clear it."""
        payload = packet.to_bytes()
        self._connected().sendall(_SIZE.pack(len(payload)) + payload)
        packet.clear()

    def _receive_exact(self, count: int) -> bytes:
        sock = self._connected()
        chunks = []
        remaining = count
        while remaining:
            chunk = sock.recv(remaining)
            if not chunk:
                raise ConnectionError("connection closed by peer")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def receive(self) -> NetworkPacket:
        """Block until a packet arrives and return it."""
        (size,) = _SIZE.unpack(self._receive_exact(_SIZE.size))
        packet = NetworkPacket.from_bytes(self._receive_exact(size))
        print("Received:")
        print(packet)
        return packet

    def close(self) -> None:
        for sock in (self._socket, self._listener):
            if sock is not None:
                sock.close()
        self._socket = None
        self._listener = None

    def __enter__(self) -> "Network":
        return self

    def __exit__(self, *args) -> None:
        self.close()