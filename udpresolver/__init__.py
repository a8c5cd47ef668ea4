"""UDP name-resolution server and client for forward and reverse IPv4 lookups."""

__version__ = "0.1.0"
__all__ = ["validation", "lookup", "logger", "server", "client"]