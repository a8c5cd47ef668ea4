"""Forward and reverse IPv4 name lookups."""

from __future__ import annotations

import socket
from collections.abc import Callable, Iterable

MAX_QUERY_ATTEMPTS = 100
MAX_UNIQUE_HOSTNAMES = 10
NOT_FOUND = "Not found information"

_NUMERIC_CHARS = frozenset("0123456789.")


class LookupError_(LookupError):
    """Raised when a name or address cannot be resolved."""

    def __init__(self, message: str = NOT_FOUND) -> None:
        super().__init__(message)


def is_partial_numeric(hostname: str) -> bool:
    """Return True for digits-and-dots text that is not a four-part address."""
    if not set(hostname) <= _NUMERIC_CHARS:
        return False
    return hostname.count(".") != 3


def format_result(names: Iterable[str]) -> str:
    """Join lookup results into the newline-separated reply text."""
    return "\n".join(names)


class Resolver:
    """Resolves host names to IPv4 addresses and back."""

    def __init__(
        self,
        getaddrinfo: Callable = socket.getaddrinfo,
        getnameinfo: Callable = socket.getnameinfo,
    ) -> None:
        self._getaddrinfo = getaddrinfo
        self._getnameinfo = getnameinfo

    def _address_info(self, host: str) -> list:
        return list(self._getaddrinfo(host, None, socket.AF_INET, socket.SOCK_STREAM))

    def forward(self, hostname: str) -> list[str]:
        """Return the IPv4 addresses of *hostname* in resolver order."""
        if is_partial_numeric(hostname):
            raise LookupError_()
        try:
            infos = self._address_info(hostname)
        except (OSError, UnicodeError) as exc:
            raise LookupError_() from exc
        addresses = [
            sockaddr[0]
            for family, _type, _proto, _canon, sockaddr in infos
            if family == socket.AF_INET
        ]
        if not addresses:
            raise LookupError_()
        return addresses

    def reverse(self, ip: str) -> list[str]:
        """Return the primary name of *ip* followed by any further names."""
        try:
            host, _service = self._getnameinfo((ip, 0), socket.NI_NAMEREQD)
        except OSError as exc:
            raise LookupError_() from exc
        return [host, *self.additional_hostnames(host)]

    def additional_hostnames(self, primary_host: str) -> list[str]:
        """Collect other names reachable through the addresses of *primary_host*."""
        try:
            infos = self._address_info(primary_host)
        except (OSError, UnicodeError):
            return []
        found: list[str] = []
        for _attempt in range(MAX_QUERY_ATTEMPTS):
            for *_rest, sockaddr in infos:
                try:
                    name, _service = self._getnameinfo(sockaddr, socket.NI_NAMEREQD)
                except OSError:
                    continue
                if (
                    name != primary_host
                    and name not in found
                    and len(found) < MAX_UNIQUE_HOSTNAMES
                ):
                    found.append(name)
        return found