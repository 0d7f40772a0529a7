"""Line-delimited JSON over a pair of file objects.

The harness talks to a node over stdin/stdout: one JSON document per line
in each direction. Replies are flushed as soon as they are written so the
harness can observe them before it sends anything else.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Optional

from .base import Transport, TransportClosed, TransportWriteFailure

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class StreamTransport(Transport):
    """Read lines from *reader*, write lines to *writer*.

    Either stream may be binary (``sys.stdin.buffer``) or text
    (``sys.stdin``, :class:`io.StringIO`); text streams are converted to
    and from UTF-8 at this boundary, so the rest of the node only ever sees
    bytes. Blank input lines are skipped, but still counted in
    :attr:`lineno`. Closing the transport does not close the underlying
    streams.
    """

    def __init__(self, reader: IO, writer: IO):
        self.reader = reader
        self.writer = writer
        self.lineno = 0
        self._open = True
        self._text_writer = isinstance(writer, io.TextIOBase)

    @property
    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        self._open = False

    def recv(self) -> Optional[bytes]:
        while self._open:
            line = self.reader.readline()
            if not line:
                return None

            self.lineno += 1
            line = line.strip()
            if not line:
                continue

            if isinstance(line, str):
                line = line.encode(ENCODING)
            return line

        return None

    def send(self, data: bytes) -> None:
        if not self._open:
            raise TransportClosed("transport is closed")

        if self._text_writer:
            data = data.decode(ENCODING)

        try:
            self.writer.write(data)
            self.writer.flush()
        except (OSError, TypeError, ValueError) as e:
            # A broken pipe is an OSError, a closed stream a ValueError.
            logger.debug("write failed: %s", e)
            raise TransportWriteFailure(f"could not write reply: {e}") from e
