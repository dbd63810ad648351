"""A one-shot TCP server that answers an HTTP request with the local time."""

from __future__ import annotations

import argparse
import socket
import sys
import time

DEFAULT_PORT = 8080
BACKLOG = 10
REQUEST_SIZE = 1024

_HEADER = (
    b"HTTP/1.1 200 OK\r\n"
    b"Connection: close\r\n"
    b"Content-Type: text/plain\r\n\r\n"
    b"Local time is: "
)


def response_header() -> bytes:
    """Return the fixed HTTP response head sent before the time."""
    return _HEADER


def time_message(now=None) -> bytes:
    """Return the local time in ctime form, newline-terminated."""
    return (time.ctime(now) + "\n").encode("ascii")


def _step(name, func, *args):
    try:
        return func(*args)
    except OSError as exc:
        raise OSError(exc.errno, f"{name} failed: {exc.strerror}") from exc


def create_listener(port=DEFAULT_PORT, ipv6=False) -> socket.socket:
    """Bind a listening TCP socket on every interface.

    With ipv6 the socket is dual-stack and also accepts IPv4 clients.
    """
    family = socket.AF_INET6 if ipv6 else socket.AF_INET
    infos = _step(
        "getaddrinfo()",
        socket.getaddrinfo,
        None,
        str(port),
        family,
        socket.SOCK_STREAM,
        0,
        socket.AI_PASSIVE,
    )
    family, socktype, proto, _, sockaddr = infos[0]
    listener = _step("socket()", socket.socket, family, socktype, proto)
    try:
        if ipv6:
            _step(
                "setsockopt()",
                listener.setsockopt,
                socket.IPPROTO_IPV6,
                socket.IPV6_V6ONLY,
                0,
            )
        _step("bind()", listener.bind, sockaddr)
        _step("listen()", listener.listen, BACKLOG)
    except OSError:
        listener.close()
        raise
    return listener


def serve_one(listener, now=None, out=None) -> str:
    """Accept one client, send it the time and close it.

    Returns the client's numeric host address.
    """
    out = sys.stdout if out is None else out
    print("Waiting for connection...", file=out)
    client, address = listener.accept()
    with client:
        print("Client is connected...", file=out)
        host, _ = socket.getnameinfo(
            address, socket.NI_NUMERICHOST | socket.NI_NUMERICSERV
        )
        print(host, file=out)

        print("Reading request...", file=out)
        request = client.recv(REQUEST_SIZE)
        print(f"Received {len(request)} bytes", file=out)

        print("Sending response...", file=out)
        for payload in (response_header(), time_message(now)):
            sent = client.send(payload)
            print(f"Sent {sent} of {len(payload)} bytes.", file=out)

        print("Closing connection...", file=out)
    return host


def main(argv=None) -> int:
    """Serve the local time to a single client."""
    parser = argparse.ArgumentParser(description="Serve the local time once.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--ipv6", action="store_true", help="listen on a dual-stack IPv6 socket"
    )
    args = parser.parse_args(argv)

    print("Local address configuration...")
    print("Creating socket...")
    print("Binding socket to local address...")
    try:
        listener = create_listener(args.port, args.ipv6)
    except OSError as exc:
        print(f"{exc.strerror} ({exc.errno})", file=sys.stderr)
        return 1
    print("Listening...")
    with listener:
        try:
            serve_one(listener)
        except OSError as exc:
            print(f"accept() failed. ({exc.errno})", file=sys.stderr)
            return 1
        print("Closing listening socket...")
    print("Finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())