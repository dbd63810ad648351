"""List the IPv4 and IPv6 addresses of the local network interfaces."""

from __future__ import annotations

import argparse
import socket
from dataclasses import dataclass

import psutil

_FAMILY_NAMES = {
    socket.AF_INET: "IPv4",
    socket.AF_INET6: "IPv6",
}


@dataclass(frozen=True)
class InterfaceAddress:
    """One numeric address bound to a network interface."""

    name: str
    family: str
    address: str


def list_addresses() -> list[InterfaceAddress]:
    """Return every IPv4 and IPv6 address of every local interface.

    Raises OSError when the interface table cannot be read.
    """
    return [
        InterfaceAddress(name, _FAMILY_NAMES[entry.family], entry.address)
        for name, entries in psutil.net_if_addrs().items()
        for entry in entries
        if entry.family in _FAMILY_NAMES
    ]


def format_address(entry: InterfaceAddress) -> str:
    """Render an address as a tab-separated line: name, family, address."""
    return f"{entry.name}\t{entry.family}\t{entry.address}"


def main(argv=None) -> int:
    """Print the local interface addresses, one per line."""
    parser = argparse.ArgumentParser(
        description="List the IPv4 and IPv6 addresses of local interfaces."
    )
    parser.parse_args(argv)
    try:
        addresses = list_addresses()
    except OSError:
        print("getifaddrs call failed")
        return 1
    for entry in addresses:
        print(format_address(entry))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())