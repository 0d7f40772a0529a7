import itertools
import pytest

import whirlpool


def _request(msg_type, msg_id=None, src='c1', dest='n1', **fields):

    body = dict(fields)
    body['type'] = msg_type
    if msg_id is not None:
        body['msg_id'] = msg_id

    return {'src': src, 'dest': dest, 'body': body}


@pytest.fixture
def make_request():
    """ Return a function that builds the wire form of an envelope as a
        dictionary: make_request('echo', 1, echo='hi').
    """

    return _request


@pytest.fixture
def sequential_ids():
    """ A deterministic stand-in for the unique-id capability.
    """

    counter = itertools.count(1)

    def generate():
        return 'id-%d' % (next(counter))

    return generate


@pytest.fixture
def counter_node(sequential_ids):
    return whirlpool.Node(whirlpool.workload.CounterWorkload(), sequential_ids)


@pytest.fixture
def broadcast_node(sequential_ids):
    return whirlpool.Node(whirlpool.workload.BroadcastWorkload(), sequential_ids)


@pytest.fixture
def deliver():
    """ Decode a request document with the node's own codec and step the
        node with it, returning the reply envelope (or None).
    """

    def deliver(node, document):
        envelope = node.codec.unpack(whirlpool.json.dumps(document))
        return node.step(envelope)

    return deliver


@pytest.fixture(autouse=True)
def quiet_logging():

    yield

    whirlpool.log.disable_logging()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
