''' Wrapper module around :mod:`msgspec` to handle the equivalent of
    :func:`json.loads` and :func:`json.dumps`.
'''

import msgspec


# The msgspec 'encode' operation returns bytes. Everything that writes to
# the wire expects bytes from dumps(), and loads() accepts either bytes
# or str.

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

DecodeError = msgspec.DecodeError

# Raised by loads() for input that is not valid UTF-8 JSON.

DecodeErrors = (DecodeError, UnicodeDecodeError)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
