"""Command-line client for Redis-compatible servers using the RESP2 protocol."""

__version__ = "1.0.0"
__all__ = ["cli", "client", "commands", "parser"]