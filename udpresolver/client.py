"""Interactive UDP client for the resolver server."""

from __future__ import annotations

import socket
import sys
from collections.abc import Sequence
from typing import TextIO

from udpresolver.server import parse_port
from udpresolver.validation import is_valid_ipv4

BUFFER_SIZE = 2048
TIMEOUT_SEC = 5.0


class ResolverClient:
    """Sends queries to a resolver server and returns its replies."""

    def __init__(self, host: str, port: int, timeout: float = TIMEOUT_SEC) -> None:
        if not is_valid_ipv4(host):
            raise ValueError("Invalid server IP address")
        self.address = (host, port)
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.settimeout(timeout)

    def query(self, text: str) -> str:
        """Send *text* and return the reply; TimeoutError if none arrives."""
        payload = text.split("\0", 1)[0].encode("utf-8")
        self._sock.sendto(payload, self.address)
        try:
            data, _ = self._sock.recvfrom(BUFFER_SIZE - 1)
        except TimeoutError:
            raise
        except OSError as exc:
            raise TimeoutError("No response from server") from exc
        return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> ResolverClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def run_interactive(
    client: ResolverClient,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Read queries line by line until an empty line or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write("Enter domain name or IP address (press Enter to quit):\n")
    while True:
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        query = line[:-1] if line.endswith("\n") else line
        if not query:
            stdout.write("Exiting...\n")
            break
        try:
            reply = client.query(query)
        except TimeoutError:
            stdout.write("Error: No response from server (timeout)\n")
            continue
        except OSError as exc:
            print(f"Error: Send failed: {exc}", file=sys.stderr)
            continue
        stdout.write(f"{reply}\n")
    stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: udpresolver-client IPAddress PortNumber")
        return 1
    host, port_text = args
    try:
        port = parse_port(port_text)
    except ValueError:
        print("Error: Invalid port number")
        return 1
    try:
        client = ResolverClient(host, port)
    except ValueError:
        print("Error: Invalid server IP address")
        return 1
    except OSError as exc:
        print(f"Error: Could not create socket: {exc}", file=sys.stderr)
        return 1
    with client:
        print(f"Connected to server {host}:{port}")
        run_interactive(client, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())