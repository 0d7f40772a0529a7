import pytest
import whirlpool

from whirlpool.errors import UnexpectedReply, UnsupportedMessage
from whirlpool.protocol import payload


def test_echo(broadcast_node, deliver, make_request):

    for msg_id, text in enumerate(('one', 'two', '', 'Please echo 35')):
        reply = deliver(broadcast_node, make_request('echo', msg_id + 10, echo=text))

        assert reply.payload == payload.EchoOk(text)
        assert reply.body.in_reply_to == msg_id + 10
        assert reply.body.msg_id == msg_id


def test_init(counter_node, deliver, make_request):

    request = make_request('init', 1, src='c0', dest='n3', node_id='n3', node_ids=['n1', 'n2', 'n3'])
    reply = deliver(counter_node, request)

    assert reply.payload == payload.InitOk()
    assert reply.src == 'n3'
    assert reply.dest == 'c0'
    assert reply.body.in_reply_to == 1
    assert reply.body.msg_id == 0


def test_message_ids(broadcast_node, deliver, make_request):
    """ The message counter starts at zero and advances by exactly one for
        every processed message, whether or not it produced a reply.
    """

    assert broadcast_node.state.next_message_id == 0

    reply = deliver(broadcast_node, make_request('echo', 5, echo='a'))
    assert reply.body.msg_id == 0
    assert broadcast_node.state.next_message_id == 1

    reply = deliver(broadcast_node, make_request('init_ok', in_reply_to=0))
    assert reply is None
    assert broadcast_node.state.next_message_id == 2

    reply = deliver(broadcast_node, make_request('read', 6))
    assert reply.body.msg_id == 2
    assert broadcast_node.state.next_message_id == 3


def test_swap(counter_node, deliver, make_request):

    requests = (
        make_request('echo', 1, src='c7', dest='n2', echo='x'),
        make_request('init', 2, src='c7', dest='n2', node_id='n2', node_ids=['n2']),
        make_request('generate', 3, src='c7', dest='n2'),
        make_request('add', 4, src='c7', dest='n2', delta=1),
        make_request('read', 5, src='c7', dest='n2'),
        make_request('topology', 6, src='c7', dest='n2', topology={'n2': []}),
    )

    for request in requests:
        reply = deliver(counter_node, request)
        assert reply.src == 'n2'
        assert reply.dest == 'c7'
        assert reply.body.in_reply_to == request['body']['msg_id']


def test_no_request_id(broadcast_node, deliver, make_request):

    reply = deliver(broadcast_node, make_request('echo', echo='anonymous'))

    assert reply.body.in_reply_to is None
    assert reply.body.msg_id == 0


def test_generate(broadcast_node, deliver, make_request):

    first = deliver(broadcast_node, make_request('generate', 1))
    second = deliver(broadcast_node, make_request('generate', 2))

    assert first.payload.tag == 'generate_ok'
    assert first.payload.id == 'id-1'
    assert second.payload.id == 'id-2'


def test_generate_default_ids(deliver, make_request):

    node = whirlpool.Node(whirlpool.workload.BroadcastWorkload())

    first = deliver(node, make_request('generate', 1))
    second = deliver(node, make_request('generate', 2))

    assert isinstance(first.payload.id, str)
    assert first.payload.id != second.payload.id


def test_counter(counter_node, deliver, make_request):

    reply = deliver(counter_node, make_request('read', 1))
    assert reply.payload == payload.ValueReadOk(0)

    reply = deliver(counter_node, make_request('add', 2, delta=3))
    assert reply.payload == payload.AddOk()

    reply = deliver(counter_node, make_request('add', 3, delta=4))
    assert reply.payload == payload.AddOk()

    reply = deliver(counter_node, make_request('read', 4))
    assert reply.payload == payload.ValueReadOk(7)
    assert counter_node.workload.value == 7


def test_broadcast(broadcast_node, deliver, make_request):

    for msg_id, value in enumerate((5, 5, 9)):
        reply = deliver(broadcast_node, make_request('broadcast', msg_id, message=value))
        assert reply.payload == payload.BroadcastOk()

    reply = deliver(broadcast_node, make_request('read', 10))
    assert reply.payload == payload.MessagesReadOk([5, 5, 9])


def test_topology(broadcast_node, deliver, make_request):

    first = {'n1': ['n2', 'n3'], 'n2': ['n1']}
    second = {'n3': ['n1']}

    reply = deliver(broadcast_node, make_request('topology', 1, topology=first))
    assert reply.payload == payload.TopologyOk()
    assert broadcast_node.workload.topology == {'n1': {'n2', 'n3'}, 'n2': {'n1'}}

    reply = deliver(broadcast_node, make_request('topology', 2, topology=second))
    assert reply.payload == payload.TopologyOk()
    assert broadcast_node.workload.topology == {'n3': {'n1'}}


unexpected = (
    ('echo_ok', {'echo': 'hi'}),
    ('generate_ok', {'id': 'abc'}),
    ('broadcast_ok', {}),
    ('read_ok', {'messages': [1]}),
    ('topology_ok', {}),
)


def test_unexpected_reply(broadcast_node, deliver, make_request):

    for msg_type, fields in unexpected:
        request = make_request(msg_type, in_reply_to=1, **fields)

        with pytest.raises(UnexpectedReply) as caught:
            deliver(broadcast_node, request)

        assert msg_type in str(caught.value)
        assert caught.value.envelope.payload.tag == msg_type

    # None of the failed messages advanced the counter.
    assert broadcast_node.state.next_message_id == 0


def test_unexpected_reply_counter(counter_node, deliver, make_request):

    for msg_type, fields in (('add_ok', {}), ('read_ok', {'value': 3})):
        with pytest.raises(UnexpectedReply):
            deliver(counter_node, make_request(msg_type, in_reply_to=1, **fields))

    assert counter_node.state.next_message_id == 0
    assert counter_node.workload.value == 0


def test_init_ok(counter_node, deliver, make_request):

    reply = deliver(counter_node, make_request('init_ok', in_reply_to=0))

    assert reply is None
    assert counter_node.state.next_message_id == 1


def test_unsupported(counter_node):
    """ An envelope built by hand can still carry a payload outside the
        workload; the node refuses it without advancing.
    """

    body = whirlpool.protocol.Body(payload.Broadcast(4), msg_id=1)
    envelope = whirlpool.protocol.Envelope('c1', 'n1', body)

    with pytest.raises(UnsupportedMessage):
        counter_node.step(envelope)

    assert counter_node.state.next_message_id == 0


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
