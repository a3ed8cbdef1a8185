"""Reading RESP2 replies from a binary stream and rendering them as text."""

from __future__ import annotations

from typing import BinaryIO

NO_RESPONSE = "(Error) No response or connection closed."
UNKNOWN_TYPE = "(Error) Unknown reply type."
INCOMPLETE_BULK = "(Error) Incomplete bulk data."
NIL = "(nil)"


class ProtocolError(ValueError):
    """Raised when a reply carries a length or count that is not a number."""


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _read_line(stream: BinaryIO) -> str:
    """Read up to a carriage return, consuming the line feed after it."""
    line = bytearray()
    while True:
        char = stream.read(1)
        if not char:
            break
        if char == b"\r":
            stream.read(1)
            break
        line += char
    return _decode(bytes(line))


def _read_number(stream: BinaryIO) -> int:
    text = _read_line(stream)
    try:
        return int(text)
    except ValueError:
        raise ProtocolError(f"invalid length in reply: {text!r}") from None


def _parse_bulk_string(stream: BinaryIO) -> str:
    length = _read_number(stream)
    if length == -1:
        return NIL
    data = stream.read(length) if length > 0 else b""
    if len(data) < max(length, 0):
        return INCOMPLETE_BULK
    stream.read(2)
    return _decode(data)


def _parse_array(stream: BinaryIO) -> str:
    count = _read_number(stream)
    if count == -1:
        return NIL
    return "\n".join(parse_response(stream) for _ in range(count))


def parse_response(stream: BinaryIO) -> str:
    """Read one reply from ``stream`` and return it as display text."""
    prefix = stream.read(1)
    if not prefix:
        return NO_RESPONSE
    if prefix == b"+":
        return _read_line(stream)
    if prefix == b"-":
        return "(Error) " + _read_line(stream)
    if prefix == b":":
        return _read_line(stream)
    if prefix == b"$":
        return _parse_bulk_string(stream)
    if prefix == b"*":
        return _parse_array(stream)
    return UNKNOWN_TYPE