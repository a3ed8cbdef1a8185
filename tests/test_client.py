import contextlib
import socket
import threading

import pytest

from respcli.client import RedisClient
from respcli.commands import build_resp_command


def _read_command(reader):
    header = reader.readline()
    if not header:
        return None
    count = int(header[1:].strip())
    args = []
    for _ in range(count):
        length = int(reader.readline()[1:].strip())
        args.append(reader.read(length + 2)[:-2].decode())
    return args


def _reply(args):
    name = args[0].upper()
    if name == "PING":
        return b"+PONG\r\n"
    if name == "ECHO":
        data = args[1].encode()
        return b"$%d\r\n%s\r\n" % (len(data), data)
    if name == "GET":
        return b"$-1\r\n"
    return b"-ERR unknown command\r\n"


@contextlib.contextmanager
def fake_server():
    listener = socket.socket()
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)
    received = []

    def serve():
        try:
            conn, _ = listener.accept()
        except OSError:
            return
        with conn, conn.makefile("rb") as reader:
            while (args := _read_command(reader)) is not None:
                received.append(args)
                conn.sendall(_reply(args))

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    try:
        yield listener.getsockname()[1], received
    finally:
        listener.close()
        thread.join(timeout=5)


def _closed_port():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_ping_round_trip():
    with fake_server() as (port, received):
        with RedisClient("127.0.0.1", port) as client:
            client.send_command(build_resp_command(["PING"]))
            assert client.read_response() == "PONG"
    assert received == [["PING"]]


def test_echo_and_nil_replies():
    with fake_server() as (port, received):
        with RedisClient("127.0.0.1", port) as client:
            client.send_command(build_resp_command(["ECHO", "Hello World"]))
            assert client.read_response() == "Hello World"
            client.send_command(build_resp_command(["GET", "missing"]))
            assert client.read_response() == "(nil)"
    assert received == [["ECHO", "Hello World"], ["GET", "missing"]]


def test_disconnect_clears_connection():
    with fake_server() as (port, _):
        client = RedisClient("127.0.0.1", port)
        client.connect()
        assert client.connected
        assert client.fileno() >= 0
        client.disconnect()
        assert not client.connected
        assert client.fileno() == -1


def test_connect_refused_raises():
    port = _closed_port()
    client = RedisClient("127.0.0.1", port)
    with pytest.raises(ConnectionError, match=f"Could not connect to 127.0.0.1:{port}"):
        client.connect()
    assert not client.connected


def test_send_without_connection_raises():
    with pytest.raises(ConnectionError):
        RedisClient("127.0.0.1", 1).send_command(b"*1\r\n$4\r\nPING\r\n")


def test_read_without_connection_raises():
    with pytest.raises(ConnectionError):
        RedisClient("127.0.0.1", 1).read_response()