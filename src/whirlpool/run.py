""" The message-processing loop, and the command-line entry points that wire
    a :class:`whirlpool.node.Node` to the process streams.
"""

import argparse
import logging
import sys

from . import config
from . import log
from . import workload
from .errors import MalformedMessage, ProcessingError
from .node import Node
from .transport import StreamTransport

logger = logging.getLogger(__name__)


def serve(node, transport, skip_malformed=False):
    """ Feed every line received on *transport* through *node*, sending each
        reply back on the same *transport*, until the input is exhausted.
        Messages are handled strictly one at a time, and replies are sent in
        the order the requests arrived.

        Any failure, whatever its type, is raised as a
        :class:`whirlpool.errors.ProcessingError`
        identifying the offending input line. The one exception: if
        *skip_malformed* is True, lines that cannot be decoded are logged
        and ignored. Returns the number of messages processed.
    """

    processed = 0

    for line in transport:
        lineno = transport.lineno

        try:
            envelope = node.codec.unpack(line)
        except MalformedMessage as e:
            if skip_malformed:
                logger.warning('skipping input line %d: %s', lineno, e)
                continue
            raise ProcessingError(lineno, line, e, ProcessingError.DECODE) from e
        except Exception as e:
            raise ProcessingError(lineno, line, e, ProcessingError.DECODE) from e

        try:
            reply = node.step(envelope)
            if reply is not None:
                transport.send(node.codec.pack(reply))
        except Exception as e:
            raise ProcessingError(lineno, line, e, ProcessingError.STEP) from e

        processed += 1

    return processed



def parser(workload_name=None):
    """ Return the :class:`argparse.ArgumentParser` for a node process. If
        *workload_name* is specified it becomes the default workload, as
        used by the per-workload console scripts.
    """

    if workload_name is None:
        workload_name = config.default_workload

    description = 'Run a single whirlpool node against a test harness on stdin/stdout.'
    arguments = argparse.ArgumentParser(description=description)

    arguments.add_argument('-w', '--workload',
        default=workload_name,
        choices=sorted(workload.registry),
        help="Workload to serve (default: %(default)s).")

    arguments.add_argument('--skip-malformed',
        action='store_true',
        help='Log and skip inbound lines that cannot be decoded, instead of aborting.')

    arguments.add_argument('--log-level',
        default=config.default_log_level,
        type=str.upper,
        choices=config.log_levels,
        help='Threshold for diagnostics written to stderr (default: %(default)s).')

    return arguments



def main(argv=None, workload_name=None, stdin=None, stdout=None):
    """ Run a node until its input is exhausted. Returns the process exit
        status: zero on a clean end of input, one if processing aborted.
        *stdin* and *stdout* default to the binary process streams.
    """

    arguments = parser(workload_name).parse_args(argv)
    configuration = config.Configuration.from_arguments(arguments)

    log.enable_console_logging(configuration.log_level)

    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    node = Node(workload.get(configuration.workload))
    transport = StreamTransport(stdin, stdout)

    logger.debug('starting: %r', configuration)

    try:
        processed = serve(node, transport, configuration.skip_malformed)
    except ProcessingError as e:
        line = e.line
        if isinstance(line, bytes):
            line = line.decode('utf-8', 'replace')
        logger.error('%s; offending message: %s', e, line)
        return 1
    finally:
        transport.close()

    logger.info('input exhausted after %d messages', processed)
    return 0



def counter():
    sys.exit(main(workload_name='counter'))


def broadcast():
    sys.exit(main(workload_name='broadcast'))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
