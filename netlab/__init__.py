"""Small socket tools: interface listing, a one-shot time server and a TCP client."""

__version__ = "0.1.0"
__all__ = ["adapters", "time_server", "tcp_client"]