"""Validation of textual IPv4 addresses."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")


def _is_octet(part: str) -> bool:
    if not 1 <= len(part) <= 3 or not set(part) <= _DIGITS:
        return False
    if len(part) > 1 and part[0] == "0":
        return False
    return int(part) <= 255


def is_valid_ipv4(text: str) -> bool:
    """Return True if *text* is a strict dotted-quad IPv4 address."""
    parts = text.split(".")
    return len(parts) == 4 and all(_is_octet(part) for part in parts)