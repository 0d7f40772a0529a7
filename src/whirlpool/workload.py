""" Workload-specific behavior for a node. A workload owns the domain data
    (the counter value or the broadcast log, plus the topology map) and
    answers the domain subset of requests: add, broadcast, read and
    topology. Everything else about message handling, including identifier
    bookkeeping and reply construction, is shared and lives in
    :mod:`whirlpool.node`.
"""

import logging

from .errors import UnsupportedMessage
from .protocol import payload as p

logger = logging.getLogger(__name__)


class Workload:
    """ Base class for all workloads. The *variants* tuple lists the payload
        classes, requests and replies alike, that this workload adds to the
        universal set; the codec for a node running this workload accepts
        exactly those plus :data:`whirlpool.protocol.payload.UNIVERSAL`.

        Every workload keeps the most recent topology announced by the
        harness. A new topology replaces the old one wholesale.

        :ivar topology: Mapping of node id to the set of its neighbor ids.
    """

    name = None
    variants = (p.Read, p.Topology, p.TopologyOk)

    def __init__(self):
        self.topology = dict()


    def __repr__(self):
        return '%s()' % (self.__class__.__name__)


    def apply(self, payload):
        """ Apply a request *payload* to the local state and return the
            reply payload. Subclasses handle their own requests and defer
            to this method for everything else.
        """

        if isinstance(payload, p.Topology):
            topology = dict()
            for node, neighbors in payload.topology.items():
                topology[node] = set(neighbors)

            self.topology = topology
            logger.debug('topology replaced: %d nodes', len(topology))
            return p.TopologyOk()

        raise UnsupportedMessage('%s workload does not handle %s messages' % (self.name, payload.tag))


# end of class Workload



class CounterWorkload(Workload):
    """ A grow-only counter: *add* requests increase the accumulated value,
        *read* returns it.
    """

    name = 'counter'
    variants = Workload.variants + (p.Add, p.AddOk, p.ValueReadOk)

    def __init__(self):
        Workload.__init__(self)
        self.value = 0


    def apply(self, payload):

        if isinstance(payload, p.Add):
            self.value += payload.delta
            return p.AddOk()

        if isinstance(payload, p.Read):
            return p.ValueReadOk(self.value)

        return Workload.apply(self, payload)


# end of class CounterWorkload



class BroadcastWorkload(Workload):
    """ An append-only log of broadcast values. Values are kept in arrival
        order and duplicates are retained; *read* returns the whole log.
    """

    name = 'broadcast'
    variants = Workload.variants + (p.Broadcast, p.BroadcastOk, p.MessagesReadOk)

    def __init__(self):
        Workload.__init__(self)
        self.log = list()


    def apply(self, payload):

        if isinstance(payload, p.Broadcast):
            self.log.append(payload.message)
            return p.BroadcastOk()

        if isinstance(payload, p.Read):
            return p.MessagesReadOk(list(self.log))

        return Workload.apply(self, payload)


# end of class BroadcastWorkload


registry = dict()
registry[CounterWorkload.name] = CounterWorkload
registry[BroadcastWorkload.name] = BroadcastWorkload


def get(name):
    """ Return a new :class:`Workload` instance for the workload *name*.
    """

    try:
        workload = registry[name]
    except KeyError:
        raise ValueError('unknown workload: ' + repr(name))

    return workload()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
