"""Splitting user input into arguments and encoding it as a RESP command."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WORD_PATTERN = re.compile(r'("[^"]+"|\S+)')


def split_args(line: str) -> list[str]:
    """Split a command line into words, keeping double-quoted strings whole.

    A word wrapped in double quotes has the quotes removed.
    """
    words = []
    for match in _WORD_PATTERN.finditer(line):
        word = match.group(0)
        if len(word) >= 2 and word.startswith('"') and word.endswith('"'):
            word = word[1:-1]
        words.append(word)
    return words


def _as_bytes(arg: str | bytes) -> bytes:
    return arg if isinstance(arg, bytes) else arg.encode("utf-8")


def build_resp_command(args: Iterable[str | bytes]) -> bytes:
    """Encode arguments as a RESP array of bulk strings."""
    encoded = [_as_bytes(arg) for arg in args]
    parts = [b"*%d\r\n" % len(encoded)]
    parts.extend(b"$%d\r\n%s\r\n" % (len(arg), arg) for arg in encoded)
    return b"".join(parts)