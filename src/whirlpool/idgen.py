import uuid


def generate():
    """ Return a globally unique identifier rendered as text. This is the
        default capability a :class:`whirlpool.node.Node` uses to answer
        *generate* requests.
    """

    return str(uuid.uuid4())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
