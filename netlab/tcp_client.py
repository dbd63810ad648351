"""An interactive TCP client relaying standard input to a remote peer."""

from __future__ import annotations

import select
import socket
import sys

RECV_SIZE = 4096
POLL_INTERVAL = 0.1


def resolve_peer(host, service):
    """Resolve a host and port or service name to its first stream address.

    Returns a (family, type, proto, canonname, sockaddr) tuple and raises
    socket.gaierror when the name cannot be resolved.
    """
    return socket.getaddrinfo(host, service, type=socket.SOCK_STREAM)[0]


def _step(name, func, *args):
    try:
        return func(*args)
    except OSError as exc:
        raise OSError(exc.errno, f"{name} failed: {exc.strerror}") from exc


def open_connection(host, service, out=None) -> socket.socket:
    """Resolve the peer, report its address and return a connected socket."""
    out = sys.stdout if out is None else out
    print("Configuring remote address...", file=out)
    family, socktype, proto, _, sockaddr = _step(
        "getaddrinfo()", resolve_peer, host, service
    )
    address, port = socket.getnameinfo(sockaddr, socket.NI_NUMERICHOST)
    print(f"Remote address is: {address} {port}", file=out)

    print("Creating socket...", file=out)
    sock = _step("socket()", socket.socket, family, socktype, proto)
    print("Connecting...", file=out)
    try:
        _step("connect()", sock.connect, sockaddr)
    except OSError:
        sock.close()
        raise
    print("Connected", file=out)
    return sock


def run_session(sock, source=None, out=None) -> bool:
    """Relay lines from source to sock and print what the peer sends.

    Returns True when the peer closed the connection and False when the
    source ran out of input.
    """
    source = sys.stdin if source is None else source
    out = sys.stdout if out is None else out
    while True:
        readable, _, _ = select.select([sock, source], [], [], POLL_INTERVAL)
        if sock in readable:
            data = sock.recv(RECV_SIZE)
            if not data:
                print("Connection closed by peer.", file=out)
                return True
            text = data.decode("utf-8", errors="replace")
            print(f"Received ({len(data)} bytes): {text}", end="", file=out)
            out.flush()
        if source in readable:
            line = source.readline()
            if not line:
                return False
            print(f"Sending {line}", end="", file=out)
            sent = sock.send(line.encode("utf-8"))
            print(f"Sent {sent} bytes.", file=out)


def main(argv=None) -> int:
    """Connect to hostname and port given on the command line and chat."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Params required: hostname port", file=sys.stderr)
        return 1
    try:
        sock = open_connection(args[0], args[1])
    except OSError as exc:
        print(f"{exc.strerror} ({exc.errno})", file=sys.stderr)
        return 1
    print("To send data, enter text followed by enter")
    with sock:
        try:
            run_session(sock)
        except OSError as exc:
            print(f"select() failed. ({exc.errno})", file=sys.stderr)
            return 1
        print("Closing socket...", end="")
    print("Finish.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())