# netlab

Three small command-line tools for looking at and using the network from
Python.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `netlab-adapters`

Lists the IPv4 and IPv6 addresses of every local network interface. Each
line has the interface name, the family and the numeric address, separated
by tabs:

```
$ netlab-adapters
lo	IPv4	127.0.0.1
lo	IPv6	::1
eth0	IPv4	192.0.2.10
```

If the interface table cannot be read, it prints `getifaddrs call failed`
and exits with status 1.

### `netlab-time-server`

Listens on TCP port 8080 on every interface, accepts a single client,
reads up to 1024 bytes of its request and answers with a minimal plain-text
HTTP response that holds the server's local time, then closes both the
connection and the listening socket.

Options:

- `--port PORT` listens on another port (default 8080).
- `--ipv6` listens on a dual-stack IPv6 socket, which also takes IPv4
  clients (they show up as `::ffff:127.0.0.1` and the like).

Try it with a browser or:

```
$ netlab-time-server
$ curl http://127.0.0.1:8080/
Local time is: Mon Jan  1 12:00:00 2024
```

### `netlab-tcp-client`

Takes a host and a port (or service name such as `http`) and connects to
it. Each line typed on standard input is sent to the peer, and whatever the
peer sends back is printed. The session ends when the peer closes the
connection or standard input reaches end of file.

```
$ netlab-tcp-client example.com http
```

Without both arguments it prints `Params required: hostname port` and exits
with status 1.

## Library use

The same pieces are available as functions:

- `netlab.adapters.list_addresses()` returns `InterfaceAddress` entries
  (`name`, `family`, `address`), and `format_address(entry)` renders one as a
  line of output.
- `netlab.time_server.create_listener(port, ipv6)` opens the listening
  socket; `serve_one(listener, now, out)` answers one client and returns its
  numeric address; `response_header()` and `time_message(now)` build the
  reply.
- `netlab.tcp_client.resolve_peer(host, service)` resolves the first stream
  address, `open_connection(host, service, out)` returns a connected socket,
  and `run_session(sock, source, out)` relays lines, returning `True` when the
  peer closed the connection and `False` when the input ran out.

## Limits

The time server answers exactly one client and then exits; it does not
parse the request. The TCP client waits on standard input with `select`,
so it needs a POSIX system.