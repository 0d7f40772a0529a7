from . import fields
from . import payload
from . import message
from . import wire

from .message import Body, Envelope
from .wire import Codec, pack_line


"""
whirlpool Protocol Layer
========================

This package defines the typed message model exchanged between a node and
the test harness, and the line-oriented JSON codec that maps it onto the
wire.

The protocol layer MUST NOT depend on any transport implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Node (node.py)
    State machine: one inbound Envelope in, at most one reply out
    - echo / init / generate
    - workload operations (workload.py)

    │
    ▼
Codec (wire.py)
    Maps Envelope <-> one JSON line
    - Workload-aware decoding
    - Rejects malformed input with MalformedMessage

    │
    ▼
Message Model (message.py)
    Immutable protocol data structures
    - Envelope
    - Body
    Reply construction (src/dest swap, in_reply_to)

    │
    ▼
Payload Variants (payload.py)
    Closed tagged union keyed by the body "type" field
    - request family
    - reply family

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for envelope/body keys and type tags

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer (whirlpool.transport)
    Moves lines
    - stdin/stdout streams
    - any file-like object

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
