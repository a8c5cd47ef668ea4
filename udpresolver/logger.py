"""Append-only request log for the resolver server."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from udpresolver.lookup import NOT_FOUND

DEFAULT_LOG_PATH = "log_server.txt"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def format_entry(request: str, result: str, when: datetime) -> str:
    """Build one log line: ``[timestamp]$request$<+|->result``."""
    clean = result.replace("\n", " ").rstrip(" ")
    status = "-" if NOT_FOUND in clean else "+"
    return f"[{when.strftime(TIMESTAMP_FORMAT)}]${request}${status}{clean}\n"


class RequestLog:
    """Writes one line per handled request to a text file."""

    def __init__(
        self,
        path: str | Path = DEFAULT_LOG_PATH,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.path = Path(path)
        self.clock = clock

    def write(self, request: str, result: str) -> None:
        """Append an entry; report on stderr if the file cannot be opened."""
        entry = format_entry(request, result, self.clock())
        try:
            with self.path.open("a", encoding="utf-8") as log_file:
                log_file.write(entry)
        except OSError:
            print("Error: Could not open log file", file=sys.stderr)