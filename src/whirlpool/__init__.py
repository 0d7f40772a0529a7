""" Python implementation of a single node driven by a distributed-systems
    test harness. The node reads JSON envelopes one line at a time, answers
    the harness requests (echo, init, generate, and the counter or broadcast
    workloads), and writes each reply as a JSON line.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Utility components.

from . import json
from . import errors
from . import idgen
from . import log

# Submodules used by multiple other components.

from . import protocol
from . import workload
from . import config

# Primary public-facing interfaces.

from . import transport
from .node import Node, NodeState
from . import run
main = run.main

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
