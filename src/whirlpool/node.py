""" The node state machine. A :class:`Node` consumes one inbound
    :class:`whirlpool.protocol.Envelope` at a time, updates its local
    state, and returns the reply envelope, if any. It performs no I/O;
    reading and writing lines is the business of :mod:`whirlpool.transport`
    and :mod:`whirlpool.run`.
"""

import logging

from . import idgen
from .errors import UnexpectedReply
from .protocol import payload as p
from .protocol.wire import Codec

logger = logging.getLogger(__name__)


class NodeState:
    """ Process-scoped state for a single node.

        :ivar next_message_id: Identification number for the next reply.
        :ivar workload: The :class:`whirlpool.workload.Workload` holding the
                        domain data.
    """

    def __init__(self, workload):
        self.next_message_id = 0
        self.workload = workload


    def __repr__(self):
        return 'NodeState(next_message_id=%d, workload=%r)' % (self.next_message_id, self.workload)


# end of class NodeState



class Node:
    """ A single participant driven by the test harness. The *workload* is a
        :class:`whirlpool.workload.Workload` instance; *generate_id* is a
        callable returning a globally unique string, used to answer
        *generate* requests, and defaults to :func:`whirlpool.idgen.generate`.

        The *codec* attribute is the decoder appropriate for this node's
        workload.
    """

    def __init__(self, workload, generate_id=None):

        if generate_id is None:
            generate_id = idgen.generate

        self.state = NodeState(workload)
        self.generate_id = generate_id
        self.codec = Codec(p.UNIVERSAL + workload.variants)


    @property
    def workload(self):
        return self.state.workload


    def step(self, envelope):
        """ Process one inbound *envelope*. The return value is the reply
            :class:`whirlpool.protocol.Envelope`, or None if the message does
            not warrant a reply. Every processed message advances the
            message counter by exactly one; a message rejected with
            :class:`whirlpool.errors.UnexpectedReply` does not.
        """

        payload = envelope.payload
        state = self.state

        logger.debug('%s -> %s: %s', envelope.src, envelope.dest, payload.tag)

        if payload.is_reply():
            if isinstance(payload, p.InitOk):
                reply = None
            else:
                raise UnexpectedReply(envelope)
        else:
            response = self._dispatch(envelope)
            reply = envelope.reply(response, state.next_message_id)

        state.next_message_id += 1
        return reply


    def _dispatch(self, envelope):
        """ Handle the universal requests here, and defer everything else to
            the workload.
        """

        payload = envelope.payload

        if isinstance(payload, p.Echo):
            return p.EchoOk(payload.echo)

        if isinstance(payload, p.Init):
            logger.info('initialized as %s (cluster: %s)', payload.node_id, ', '.join(payload.node_ids))
            return p.InitOk()

        if isinstance(payload, p.Generate):
            return p.GenerateOk(self.generate_id())

        return self.state.workload.apply(payload)


# end of class Node


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
