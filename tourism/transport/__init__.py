"""HTTP transport."""

from tourism.transport.client import DEFAULT_ACCEPT, DEFAULT_TIMEOUT, Transport, TransportClient

__all__ = [
    "DEFAULT_ACCEPT",
    "DEFAULT_TIMEOUT",
    "Transport",
    "TransportClient",
]
