from .base import (
    Transport,
    TransportError,
    TransportWriteFailure,
    TransportClosed,
)
from .stream import StreamTransport


__all__ = [
    "Transport",
    "TransportError",
    "TransportWriteFailure",
    "TransportClosed",
    "StreamTransport",
]
