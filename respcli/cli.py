"""Command-line front end: one-shot commands and an interactive prompt."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NamedTuple

from .client import RedisClient
from .commands import build_resp_command, split_args

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 6379
PROGRAM = "respcli"
VERSION = "1.0.0"

_WHITESPACE = " \t\n\r\f\v"

_HELP_SECTIONS = (
    (
        "Usage: ",
        [
            ("With arguments:", "{prog} -h <host> -p <port>"),
            ("Default Host (127.0.0.1):", "{prog} -p <port>"),
            ("Default Port (6379):", "{prog} -h <host>"),
            ("One-shot execution:", "{prog} <command> [arguments]"),
        ],
    ),
    (
        "Interactive Mode (REPL):",
        [("", "{prog}"), ("", "Type Redis commands directly.")],
    ),
    (
        "To get help about Redis commands type:",
        [("", '"help" to display this help message'), ("", '"quit" to exit')],
    ),
    (
        "Examples:",
        [
            ("", "{prog} PING"),
            ("", '{prog} SET mykey "Hello World"'),
            ("", "{prog} GET mykey"),
        ],
    ),
)

_PREFERENCES = (
    "To set {prog} preferences:",
    '      ":set hints" enable online hints',
    '      ":set nohints" disable online hints',
    "Set your preferences in ~/.{prog}rc",
)


def _help_lines(prog: str) -> list[str]:
    lines = [f"{prog} {VERSION}"]
    for title, entries in _HELP_SECTIONS:
        lines.append(title)
        for label, text in entries:
            text = text.format(prog=prog)
            if label:
                lines.append(f"      {label:<27}{text}")
            else:
                lines.append(f"      {text}")
        lines.append("")
    lines.extend(line.format(prog=prog) for line in _PREFERENCES)
    return lines


def print_help() -> None:
    """Print usage information to standard output."""
    sys.stdout.write("\n".join(_help_lines(PROGRAM)) + "\n\n")
    sys.stdout.flush()


class CliOptions(NamedTuple):
    host: str
    port: int
    command: list[str]


def parse_cli_args(argv: Sequence[str]) -> CliOptions:
    """Read ``-h`` and ``-p`` options; everything from the first other word on is a command.

    Raises ValueError when the port is not a number.
    """
    host = DEFAULT_HOST
    port = DEFAULT_PORT
    args = list(argv)
    while args:
        if args[0] == "-h" and len(args) > 1:
            host = args[1]
            args = args[2:]
        elif args[0] == "-p" and len(args) > 1:
            port = int(args[1])
            args = args[2:]
        else:
            break
    return CliOptions(host, port, args)


class CLI:
    """Runs commands against one server and prints the replies."""

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.client = RedisClient(host, port)

    def _send(self, args: Sequence[str]) -> str | None:
        try:
            self.client.send_command(build_resp_command(args))
        except OSError:
            print("(Error) Failed to send command.", file=sys.stderr)
            return None
        response = self.client.read_response()
        print(response)
        return response

    def execute_command(self, args: Sequence[str]) -> str | None:
        """Send one command and print its reply; returns the reply text."""
        if not args:
            return None
        return self._send(args)

    def run(self, command_args: Sequence[str]) -> None:
        """Connect, run ``command_args`` if given, then read commands from stdin."""
        try:
            self.client.connect()
        except ConnectionError as exc:
            print(exc, file=sys.stderr)
            return

        try:
            if command_args:
                self.execute_command(command_args)
            print(f"Connected to Redis at {self.host}:{self.port}")
            self._repl()
        finally:
            self.client.disconnect()

    def _repl(self) -> None:
        while True:
            print(f"{self.host}:{self.port}> ", end="", flush=True)
            raw = sys.stdin.readline()
            if not raw:
                break
            line = raw.strip(_WHITESPACE)
            if not line:
                continue
            if line in ("quit", "exit"):
                print("Goodbye.")
                break
            if line == "help":
                print_help()
                continue
            args = split_args(line)
            if not args:
                continue
            if self._send(args) is None:
                break


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``respcli`` command."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_cli_args(argv)
    except ValueError as exc:
        print(f"Invalid port: {exc}", file=sys.stderr)
        return 1
    CLI(options.host, options.port).run(options.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())