from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Type, Union

import msgspec

from .. import json
from ..errors import MalformedMessage
from . import fields
from .message import Body, Envelope
from .payload import Payload, Unsigned


# Line terminator; every encoded envelope is exactly one line.
_EOL = b"\n"


class _Header(msgspec.Struct):
    src: str
    dest: str
    body: Dict[str, Any]


def pack_line(envelope: Envelope) -> bytes:
    """
    Serialize Envelope -> bytes

    Layout:
        {"src": ..., "dest": ..., "body": {"type": ..., <payload fields>,
         "msg_id": ..., "in_reply_to": ...}}\\n

    msg_id and in_reply_to are omitted when absent, never written as null.
    """

    body = msgspec.to_builtins(envelope.body.payload)

    if envelope.body.msg_id is not None:
        body[fields.MSG_ID] = envelope.body.msg_id
    if envelope.body.in_reply_to is not None:
        body[fields.IN_REPLY_TO] = envelope.body.in_reply_to

    document = {
        fields.SRC:  envelope.src,
        fields.DEST: envelope.dest,
        fields.BODY: body,
    }

    return json.dumps(document) + _EOL


class Codec:
    """
    Decoder for one node's view of the wire. *variants* is the closed set
    of :class:`Payload` classes this node recognizes; a body whose type tag
    is not among them is rejected as malformed.
    """

    def __init__(self, variants: Iterable[Type[Payload]]):
        self.variants = tuple(variants)
        self.tags = frozenset(v.__struct_config__.tag for v in self.variants)
        self._union = Union[self.variants]

    def pack(self, envelope: Envelope) -> bytes:
        return pack_line(envelope)

    def unpack(self, line) -> Envelope:
        """
        Deserialize one line -> Envelope

        Raises MalformedMessage for anything that is not a complete envelope
        carrying a recognized payload.
        """

        try:
            document = json.loads(line)
        except json.DecodeErrors as e:
            raise MalformedMessage(f"invalid JSON: {e}", line) from e

        try:
            header = msgspec.convert(document, _Header)
        except msgspec.ValidationError as e:
            raise MalformedMessage(f"invalid envelope: {e}", line) from e

        body = dict(header.body)
        msg_id = self._identifier(body, fields.MSG_ID, line)
        in_reply_to = self._identifier(body, fields.IN_REPLY_TO, line)

        tag = body.get(fields.TYPE)
        if tag is None:
            raise MalformedMessage("message body has no type", line)
        if not isinstance(tag, str) or tag not in self.tags:
            raise MalformedMessage(f"unrecognized message type: {tag!r}", line)

        try:
            payload = msgspec.convert(body, self._union)
        except msgspec.ValidationError as e:
            raise MalformedMessage(f"invalid {tag} body: {e}", line) from e

        return Envelope(header.src, header.dest, Body(payload, msg_id, in_reply_to))

    @staticmethod
    def _identifier(body: Dict[str, Any], key: str, line) -> Optional[int]:
        value = body.pop(key, None)

        try:
            return msgspec.convert(value, Optional[Unsigned])
        except msgspec.ValidationError as e:
            raise MalformedMessage(f"invalid {key}: {e}", line) from e
