""" A class representation of a whirlpool message: the :class:`Envelope`
    that travels between nodes, and the :class:`Body` it carries.
"""

from typing import Optional

import msgspec

from .payload import Payload


class Body(msgspec.Struct, frozen=True):
    """ The contents of an :class:`Envelope`: the *payload* itself plus the
        identification numbers used to correlate requests and replies.

        :ivar payload: A :class:`whirlpool.protocol.payload.Payload` instance.
        :ivar msg_id: Identification number assigned by the sender, if any.
        :ivar in_reply_to: The *msg_id* of the request this body answers.
    """

    payload: Payload
    msg_id: Optional[int] = None
    in_reply_to: Optional[int] = None


# end of class Body



class Envelope(msgspec.Struct, frozen=True):
    """ One directed message. An :class:`Envelope` is never modified after
        construction; a reply is a new :class:`Envelope` with the *src*
        and *dest* swapped, see :func:`reply`.
    """

    src: str
    dest: str
    body: Body

    @property
    def payload(self):
        return self.body.payload


    def reply(self, payload, msg_id):
        """ Build the response to this envelope. The reply travels back to
            the original sender, carries the supplied *msg_id*, and links
            to this envelope via *in_reply_to*.
        """

        if payload.is_reply():
            pass
        else:
            raise ValueError('a reply must carry a reply payload, not ' + repr(payload.tag))

        body = Body(payload, msg_id=msg_id, in_reply_to=self.body.msg_id)
        return Envelope(self.dest, self.src, body)


# end of class Envelope


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
