"""TCP server that receives player packets and tracks player state."""

from __future__ import annotations

import logging
import re
import socket
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
BACKLOG = 5
BUFFER_SIZE = 1024
_POLL_SECONDS = 0.1

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


@dataclass(frozen=True)
class Packet:
    """A client packet: ``type,player_id,username,x,y,z``."""

    packet_type: str
    player_id: int
    username: str
    position: tuple[float, float, float]


def parse_packet(data: str) -> Packet:
    """Parse comma-separated packet text; fields after the sixth are ignored."""
    fields = data.split(",")
    if len(fields) < 6:
        raise ValueError(f"packet needs six fields, got {len(fields)}: {data!r}")
    packet_type, player_id, username, x, y, z = fields[:6]
    return Packet(
        packet_type=packet_type,
        player_id=_leading_int(player_id),
        username=username,
        position=(_leading_float(x), _leading_float(y), _leading_float(z)),
    )


def _position(value) -> tuple[float, float, float]:
    result = tuple(float(v) for v in value)
    if len(result) != 3:
        raise ValueError("position must have three components")
    return result


class NetworkServer:
    """Accepts one client and applies its packets to the player table."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port
        self.address = None
        self._lock = threading.Lock()
        self._messages: list[str] = []
        self._ids: list[int] = [0]
        self._usernames: list[str] = ["ace"]
        self._positions: list[tuple[float, float, float]] = [(0.0, 0.0, 0.0)]
        self._socket: socket.socket | None = None
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()

    def __enter__(self) -> NetworkServer:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def server_messages(self) -> list[str]:
        """Status and client messages recorded so far, oldest first."""
        with self._lock:
            return list(self._messages)

    def _log(self, message: str) -> None:
        with self._lock:
            self._messages.append(message)

    def start(self) -> None:
        """Bind, listen and serve in a background thread."""
        if self._thread is not None:
            raise RuntimeError("server already started")
        try:
            server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError:
            self._log("ERROR::FAILED_TO_CREATE_SOCKET")
            raise
        try:
            server.bind((self.host, self.port))
        except OSError as error:
            server.close()
            self._log(f"ERROR::FAILED_TO_BIND, Code: {error.errno}")
            raise
        try:
            server.listen(BACKLOG)
        except OSError as error:
            server.close()
            self._log(f"ERROR::FAILED_TO_LISTEN, Code: {error.errno}")
            raise
        server.settimeout(_POLL_SECONDS)
        self._socket = server
        self.address = server.getsockname()
        self._log("SERVER::SERVER_STARTED")
        self._log("SERVER::AWAITING_CONNECTIONS")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, args=(server,), daemon=True)
        self._thread.start()

    def close(self) -> None:
        """Stop serving and wait for the background thread to finish."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
        if self._socket is not None:
            self._socket.close()

    def _accept(self, server: socket.socket):
        while not self._stop.is_set():
            try:
                client, _ = server.accept()
            except TimeoutError:
                continue
            except OSError:
                return None
            return client
        return None

    def _run(self, server: socket.socket) -> None:
        client = self._accept(server)
        if client is not None:
            self._log("CLIENT::CONNECTED")
            with client:
                client.settimeout(_POLL_SECONDS)
                self._serve(client)
            self._log("CLIENT::DISCONNECTED")
        server.close()
        self._log("SERVER::SERVER_ENDED")

    def _serve(self, client: socket.socket) -> None:
        while not self._stop.is_set():
            try:
                chunk = client.recv(BUFFER_SIZE)
            except TimeoutError:
                continue
            except OSError:
                return
            if not chunk:
                return
            data = chunk.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            self._log("CLIENT::" + data)
            try:
                keep_going = self.handle_packet(parse_packet(data))
            except ValueError:
                logger.warning("invalid packet %r", data)
                self._log("ERROR::INVALID_PACKET")
                continue
            except IndexError:
                logger.warning("packet for unknown player %r", data)
                self._log("ERROR::UNKNOWN_PLAYER")
                continue
            if not keep_going:
                return

    def handle_packet(self, packet: Packet) -> bool:
        """Apply a packet; return False when the client asked to quit."""
        if packet.packet_type == "quit":
            return False
        if packet.packet_type == "move":
            self.update_player_position(packet.player_id, packet.position)
        return True

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._ids):
            raise IndexError(f"no player at index {index}")

    def add_player(self, player_id, username, position) -> None:
        position = _position(position)
        with self._lock:
            self._ids.append(int(player_id))
            self._usernames.append(str(username))
            self._positions.append(position)

    def remove_player(self, index) -> None:
        with self._lock:
            self._check(index)
            del self._ids[index]
            del self._usernames[index]
            del self._positions[index]

    def update_player_id(self, index, new_id) -> None:
        with self._lock:
            self._check(index)
            self._ids[index] = int(new_id)

    def update_player_username(self, index, username) -> None:
        with self._lock:
            self._check(index)
            self._usernames[index] = str(username)

    def update_player_position(self, index, position) -> None:
        position = _position(position)
        with self._lock:
            self._check(index)
            self._positions[index] = position

    def player_id(self, index) -> int:
        with self._lock:
            self._check(index)
            return self._ids[index]

    def player_username(self, index) -> str:
        with self._lock:
            self._check(index)
            return self._usernames[index]

    def player_position(self, index) -> tuple[float, float, float]:
        with self._lock:
            self._check(index)
            return self._positions[index]