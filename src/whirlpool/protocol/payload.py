""" Typed representations of every payload a node can send or receive. Each
    payload is a frozen :class:`msgspec.Struct`; the wire *type* tag is the
    struct tag, so the set of classes handed to the decoder is the closed
    set of variants that decoder will accept.
"""

from typing import Annotated, ClassVar, Dict, List

import msgspec

from . import fields


Unsigned = Annotated[int, msgspec.Meta(ge=0)]

REQUEST = 'request'
REPLY = 'reply'


class Payload(msgspec.Struct, frozen=True, tag_field=fields.TYPE):
    """ Base class for all payloads. Subclasses declare their wire tag and
        which *family* they belong to: requests are what a node receives and
        acts upon, replies are what a node sends back.
    """

    family: ClassVar[str] = REQUEST

    @property
    def tag(self):
        return self.__struct_config__.tag


    def is_reply(self):
        return self.family == REPLY


# end of class Payload



class Echo(Payload, tag=fields.ECHO):
    echo: str


class EchoOk(Payload, tag=fields.ECHO_OK):
    family: ClassVar[str] = REPLY
    echo: str


class Init(Payload, tag=fields.INIT):
    node_id: str
    node_ids: List[str]


class InitOk(Payload, tag=fields.INIT_OK):
    family: ClassVar[str] = REPLY


class Generate(Payload, tag=fields.GENERATE):
    pass


class GenerateOk(Payload, tag=fields.GENERATE_OK):
    family: ClassVar[str] = REPLY
    id: str


class Add(Payload, tag=fields.ADD):
    delta: Unsigned


class AddOk(Payload, tag=fields.ADD_OK):
    family: ClassVar[str] = REPLY


class Broadcast(Payload, tag=fields.BROADCAST):
    message: Unsigned


class BroadcastOk(Payload, tag=fields.BROADCAST_OK):
    family: ClassVar[str] = REPLY


class Read(Payload, tag=fields.READ):
    pass


class ValueReadOk(Payload, tag=fields.READ_OK):
    """ Reply to a :class:`Read` against the counter workload.
    """

    family: ClassVar[str] = REPLY
    value: Unsigned


class MessagesReadOk(Payload, tag=fields.READ_OK):
    """ Reply to a :class:`Read` against the broadcast workload; *messages*
        is the full log in arrival order.
    """

    family: ClassVar[str] = REPLY
    messages: List[Unsigned]


class Topology(Payload, tag=fields.TOPOLOGY):
    topology: Dict[str, List[str]]


class TopologyOk(Payload, tag=fields.TOPOLOGY_OK):
    family: ClassVar[str] = REPLY


# Payloads every node understands, regardless of workload.

UNIVERSAL = (Echo, EchoOk, Init, InitOk, Generate, GenerateOk)

REPLY_TAGS = frozenset((
    fields.ECHO_OK,
    fields.INIT_OK,
    fields.GENERATE_OK,
    fields.ADD_OK,
    fields.BROADCAST_OK,
    fields.READ_OK,
    fields.TOPOLOGY_OK,
))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
