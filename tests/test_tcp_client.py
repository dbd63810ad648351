import io
import os
import socket

import pytest

from netlab.tcp_client import main, open_connection, resolve_peer, run_session


def test_resolve_peer_numeric_address():
    family, socktype, _, _, sockaddr = resolve_peer("127.0.0.1", "8080")
    assert family == socket.AF_INET
    assert socktype == socket.SOCK_STREAM
    assert sockaddr == ("127.0.0.1", 8080)


def test_resolve_peer_unknown_service_raises():
    with pytest.raises(socket.gaierror):
        resolve_peer("127.0.0.1", "no-such-service-xyz")


def test_open_connection_connects_and_reports():
    out = io.StringIO()
    with socket.create_server(("127.0.0.1", 0)) as server:
        port = server.getsockname()[1]
        with open_connection("127.0.0.1", str(port), out) as sock:
            peer, _ = server.accept()
            with peer:
                assert peer.getpeername() == sock.getsockname()
    log = out.getvalue()
    assert "Remote address is: 127.0.0.1" in log
    assert log.rstrip().endswith("Connected")


def _pipe_source():
    read_fd, write_fd = os.pipe()
    return os.fdopen(read_fd, "r"), write_fd


def test_run_session_prints_peer_data_until_close():
    client, peer = socket.socketpair()
    source, write_fd = _pipe_source()
    out = io.StringIO()
    try:
        peer.sendall(b"hi there\n")
        peer.close()
        closed_by_peer = run_session(client, source, out)
    finally:
        client.close()
        source.close()
        os.close(write_fd)
    assert closed_by_peer is True
    log = out.getvalue()
    assert "Received (9 bytes): hi there\n" in log
    assert log.endswith("Connection closed by peer.\n")


def test_run_session_sends_input_lines():
    client, peer = socket.socketpair()
    source, write_fd = _pipe_source()
    out = io.StringIO()
    try:
        os.write(write_fd, b"hello\n")
        os.close(write_fd)
        closed_by_peer = run_session(client, source, out)
        received = peer.recv(4096)
    finally:
        client.close()
        peer.close()
        source.close()
    assert closed_by_peer is False
    assert received == b"hello\n"
    assert "Sending hello\nSent 6 bytes.\n" in out.getvalue()


def test_main_requires_host_and_port(capsys):
    assert main(["localhost"]) == 1
    assert "Params required: hostname port" in capsys.readouterr().err


def test_main_reports_refused_connection(capsys):
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["127.0.0.1", str(port)]) == 1
    assert "connect() failed" in capsys.readouterr().err