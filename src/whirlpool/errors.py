""" Exception classes raised by the whirlpool protocol and node layers.
    Transport-level exceptions live in :mod:`whirlpool.transport.base`.
"""


class WhirlpoolError(Exception):
    """ Base class for all whirlpool errors.
    """



class MalformedMessage(WhirlpoolError):
    """ An inbound line could not be interpreted as an envelope: it is not
        valid JSON, a required field is missing or has the wrong type, or
        the body carries a *type* this node does not recognize. The raw
        *line*, if known, is retained for diagnostics.
    """

    def __init__(self, text, line=None):
        WhirlpoolError.__init__(self, text)
        self.line = line



class UnsupportedMessage(MalformedMessage):
    """ A well-formed payload reached a workload that does not implement it.
    """



class UnexpectedReply(WhirlpoolError):
    """ A reply-family payload arrived as an inbound message. This node never
        originates requests, so there is nothing such a reply could answer.
    """

    def __init__(self, envelope):
        tag = envelope.body.payload.tag
        WhirlpoolError.__init__(self, 'received unsolicited %s message from %s' % (tag, envelope.src))
        self.envelope = envelope



class ProcessingError(WhirlpoolError):
    """ Raised by the message-processing loop when handling the inbound line
        at *lineno* failed. The *stage* is either :data:`DECODE`, if the line
        could not be turned into an envelope, or :data:`STEP`, if the node
        or the transport failed while handling it. The original exception
        is chained as the cause.
    """

    DECODE = 'decode'
    STEP = 'step'

    def __init__(self, lineno, line, cause, stage=STEP):

        if stage == self.DECODE:
            text = 'input line %d could not be deserialized: %s' % (lineno, cause)
        else:
            text = 'node step function failed on input line %d: %s' % (lineno, cause)

        WhirlpoolError.__init__(self, text)
        self.lineno = lineno
        self.line = line
        self.cause = cause
        self.stage = stage


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
