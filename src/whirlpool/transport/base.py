"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`whirlpool.protocol` so the protocol remains
transport-agnostic: a transport moves encoded lines, it never looks inside
them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from ..errors import WhirlpoolError


# Transport agnostic exceptions

class TransportError(WhirlpoolError):
    """Base class for all transport-layer errors."""


class TransportWriteFailure(TransportError):
    """The output sink could not accept an encoded message."""


class TransportClosed(TransportWriteFailure):
    """A send was attempted after the transport was closed."""


class Transport(ABC):
    """Minimal contract for a line-oriented transport."""

    # Number of the most recently received input line, counting from 1.
    lineno = 0

    @abstractmethod
    def close(self) -> None:
        """Stop accepting sends; further receives report end-of-input."""

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Send one encoded message, including its trailing newline."""

    @abstractmethod
    def recv(self) -> Optional[bytes]:
        """Receive the next encoded message, or None at end-of-input."""

    @property
    def is_open(self) -> bool:
        """Whether the transport can still send."""
        return False

    def __iter__(self) -> Iterator[bytes]:
        while True:
            data = self.recv()
            if data is None:
                return
            yield data
