""" Run-time configuration for a whirlpool node. The harness launches a node
    with no arguments at all, so every setting has a default that matches
    the expected harness behavior; command-line options exist for local
    experimentation and for the per-workload console scripts.
"""

from . import workload


default_workload = 'broadcast'
default_log_level = 'WARNING'

log_levels = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Configuration:
    """ The settings for one node process.

        :ivar workload: Name of the workload, a key of
                        :data:`whirlpool.workload.registry`.
        :ivar skip_malformed: If True, inbound lines that cannot be decoded
                              are logged and skipped; if False they abort
                              the run.
        :ivar log_level: Threshold for diagnostics written to stderr.
    """

    def __init__(self, workload=default_workload, skip_malformed=False, log_level=default_log_level):

        workload = str(workload).lower()
        _check_workload(workload)

        log_level = str(log_level).upper()
        if log_level in log_levels:
            pass
        else:
            raise ValueError('invalid log level: ' + repr(log_level))

        self.workload = workload
        self.skip_malformed = bool(skip_malformed)
        self.log_level = log_level


    def __repr__(self):
        return 'Configuration(workload=%r, skip_malformed=%r, log_level=%r)' % (self.workload, self.skip_malformed, self.log_level)


    @classmethod
    def from_arguments(cls, arguments):
        """ Build a :class:`Configuration` from an :class:`argparse.Namespace`,
            or any other object with the same named attributes. Missing
            attributes take their default values.
        """

        workload = getattr(arguments, 'workload', default_workload)
        skip_malformed = getattr(arguments, 'skip_malformed', False)
        log_level = getattr(arguments, 'log_level', default_log_level)

        return cls(workload, skip_malformed, log_level)


# end of class Configuration



def _check_workload(name):

    if name in workload.registry:
        pass
    else:
        known = ', '.join(sorted(workload.registry))
        raise ValueError("unknown workload '%s' (expected one of: %s)" % (name, known))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
