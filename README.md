# respcli

A small command-line client for Redis and Redis-compatible servers. It talks
the RESP2 protocol over a plain TCP connection and prints server replies in a
readable form.

## Installation

```
pip install .
```

This installs the `respcli` command. The same entry point can also be run as
`python -m respcli.cli`.

## Usage

Connect to a server and enter the interactive prompt:

```
respcli                         # 127.0.0.1:6379
respcli -h 10.0.0.5             # custom host, default port 6379
respcli -p 6380                 # default host, custom port
respcli -h 10.0.0.5 -p 6380
```

Options are read only at the start of the command line. The first word that is
not `-h <host>` or `-p <port>` starts a command, and everything from there on is
sent as that command's arguments:

```
respcli PING
respcli SET mykey "Hello World"
respcli GET mykey
```

The command's reply is printed, then `Connected to Redis at <host>:<port>` and
the interactive prompt follow.

A port that is not a number is reported as `Invalid port: ...` and the command
exits with status 1. If the host name cannot be resolved or no address accepts
the connection, the reason is printed to standard error and the command ends.

### Interactive prompt

At the `host:port>` prompt, type Redis commands directly. Arguments are split
on whitespace; wrap an argument in double quotes to keep spaces in it.

- `help` shows the usage text
- `quit` or `exit` prints `Goodbye.` and closes the connection

The prompt also ends at end of input (Ctrl-D), and if a command cannot be sent,
after printing `(Error) Failed to send command.`.

### Reply formatting

| Reply type    | Shown as                         |
|---------------|----------------------------------|
| Simple string | the text, e.g. `OK`              |
| Error         | `(Error) <message>`              |
| Integer       | the number                       |
| Bulk string   | the contents, or `(nil)`         |
| Array         | one element per line, or `(nil)` |

A closed connection shows `(Error) No response or connection closed.`, an
unrecognised reply prefix shows `(Error) Unknown reply type.`, and a bulk
string cut short shows `(Error) Incomplete bulk data.`.

## Library use

The building blocks are available from Python:

```python
from respcli.commands import split_args, build_resp_command
from respcli.client import RedisClient

with RedisClient("127.0.0.1", 6379) as client:
    client.send_command(build_resp_command(split_args('SET greeting "hi there"')))
    print(client.read_response())
```

- `respcli.commands.split_args(line)` splits a line into words, removing the
  double quotes around quoted words.
- `respcli.commands.build_resp_command(args)` encodes `str` or `bytes`
  arguments as a RESP array of bulk strings and returns `bytes`.
- `respcli.client.RedisClient` connects over IPv4 or IPv6 (`connect()` raises
  `ConnectionError` on failure), sends with `send_command()`, reads one
  rendered reply with `read_response()`, and closes with `disconnect()`. It
  works as a context manager and has a `connected` property and `fileno()`.
- `respcli.parser.parse_response(stream)` reads one reply from any binary
  stream, for example an `io.BytesIO`, and returns its display text. A length
  or count that is not a number raises `respcli.parser.ProtocolError`.
- `respcli.cli.CLI` runs commands against one server; `execute_command(args)`
  prints and returns the reply text.

## What it does not do

- Only RESP2 replies are understood; RESP3 types show as an unknown reply type.
- There is no authentication, TLS, command history or line editing.
- The help text mentions `:set hints` and a `~/.respclirc` preferences file,
  but neither is acted on: `:set` lines are sent to the server like any other
  command, and no preferences file is read.

## Running the tests

```
pip install ".[test]"
pytest
```