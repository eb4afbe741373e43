"""
Four-letter-word client for ZooKeeper ensembles.

Each command opens a fresh TCP connection, writes the command and reads
until the server closes the socket. Connection failures are reported as
a failed node rather than raised.
"""

from __future__ import annotations

import logging
import socket

from zkcheck.checks.quorum import NodeMode

logger = logging.getLogger(__name__)

DEFAULT_PORT = 2181
RECV_SIZE = 4096


def split_endpoint(server: str) -> tuple[str, int]:
    host, sep, port = server.rpartition(":")
    if not sep or "]" in port or (":" in host and not host.startswith("[")):
        # bare hostname or bare IPv6 address
        return server.strip("[]"), DEFAULT_PORT
    return host.strip("[]"), int(port)


def send_command(server: str, command: str, timeout_s: float) -> str:
    host, port = split_endpoint(server)
    chunks: list[bytes] = []
    with socket.create_connection((host, port), timeout=timeout_s) as sock:
        sock.sendall(command.encode("ascii"))
        while True:
            data = sock.recv(RECV_SIZE)
            if not data:
                break
            chunks.append(data)
    return b"".join(chunks).decode("utf-8", errors="replace")


def parse_mode(reply: str) -> NodeMode:
    for line in reply.splitlines():
        key, sep, value = line.partition(":")
        if sep and key.strip() == "Mode":
            return NodeMode.parse(value)
    return NodeMode.UNKNOWN


class FourLetterWordTransport:
    def ruok(self, servers: list[str], timeout_s: float) -> dict[str, bool]:
        out: dict[str, bool] = {}
        for server in servers:
            try:
                out[server] = send_command(server, "ruok", timeout_s).strip() == "imok"
            except (OSError, ValueError) as e:
                logger.debug("ruok to %s failed: %s", server, e)
                out[server] = False
        return out

    def srvr(self, servers: list[str], timeout_s: float) -> dict[str, NodeMode]:
        out: dict[str, NodeMode] = {}
        for server in servers:
            try:
                out[server] = parse_mode(send_command(server, "srvr", timeout_s))
            except (OSError, ValueError) as e:
                logger.debug("srvr to %s failed: %s", server, e)
                out[server] = NodeMode.UNKNOWN
        return out

    def query(
        self, servers: list[str], timeout_s: float, detailed: bool
    ) -> dict[str, bool] | dict[str, NodeMode]:
        if detailed:
            return self.srvr(servers, timeout_s)
        return self.ruok(servers, timeout_s)
