"""UDP server answering name and address lookups."""

from __future__ import annotations

import re
import select
import socket
import sys
from collections.abc import Sequence

from udpresolver.logger import RequestLog
from udpresolver.lookup import NOT_FOUND, LookupError_, Resolver, format_result
from udpresolver.validation import is_valid_ipv4

BUFFER_SIZE = 2048
_POLL_INTERVAL = 0.5
_PORT_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_port(text: str) -> int:
    """Read a leading decimal port number; raise ValueError if out of range."""
    match = _PORT_PATTERN.match(text)
    port = int(match.group(1)) if match else 0
    if not 0 < port <= 65535:
        raise ValueError("Invalid port number")
    return port


def process_request(request: str, resolver: Resolver) -> str:
    """Resolve *request* as an address or a name and return the reply text."""
    try:
        if is_valid_ipv4(request):
            names = resolver.reverse(request)
        else:
            names = resolver.forward(request)
    except LookupError_:
        return NOT_FOUND
    return format_result(names)


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class ResolverServer:
    """A UDP socket that answers each datagram with a lookup result."""

    def __init__(
        self,
        port: int,
        resolver: Resolver | None = None,
        log: RequestLog | None = None,
        host: str = "",
    ) -> None:
        self.resolver = resolver if resolver is not None else Resolver()
        self.log = log if log is not None else RequestLog()
        self._closed = False
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.bind((host, port))
        except OSError:
            self._sock.close()
            raise

    @property
    def address(self) -> tuple[str, int]:
        return self._sock.getsockname()

    def handle_one(self) -> str | None:
        """Receive one request, answer it and return the reply text."""
        try:
            data, client = self._sock.recvfrom(BUFFER_SIZE - 1)
        except OSError as exc:
            print(f"Error: Receive failed: {exc}", file=sys.stderr)
            return None
        request = _decode(data)
        client_ip, client_port = client[:2]
        print(
            f"Received request from {client_ip}:{client_port} - Query: {request}",
            flush=True,
        )
        result = process_request(request, self.resolver)
        print(f"Result: {result}\n", flush=True)
        self.log.write(request, result)
        try:
            self._sock.sendto(result.encode("utf-8"), client)
        except OSError as exc:
            print(f"Error: Send failed: {exc}", file=sys.stderr)
        return result

    def serve_forever(self) -> None:
        """Answer requests until the server is closed."""
        while not self._closed:
            try:
                ready, _, _ = select.select([self._sock], [], [], _POLL_INTERVAL)
            except (OSError, ValueError):
                if self._closed:
                    break
                raise
            if ready and not self._closed:
                self.handle_one()

    def close(self) -> None:
        self._closed = True
        self._sock.close()

    def __enter__(self) -> ResolverServer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: udpresolver-server PortNumber")
        return 1
    try:
        port = parse_port(args[0])
    except ValueError:
        print("Error: Invalid port number")
        return 1
    try:
        server = ResolverServer(port)
    except OSError as exc:
        print(f"Error: Bind failed: {exc}", file=sys.stderr)
        return 1
    with server:
        print(f"Server is running on port {port}")
        print("Waiting for requests...", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())