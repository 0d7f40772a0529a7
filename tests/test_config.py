import argparse
import logging
import pytest
import whirlpool

from whirlpool.config import Configuration


def test_defaults():

    configuration = Configuration()
    assert configuration.workload == 'broadcast'
    assert configuration.skip_malformed == False
    assert configuration.log_level == 'WARNING'


def test_normalized():

    configuration = Configuration('Counter', 1, 'debug')
    assert configuration.workload == 'counter'
    assert configuration.skip_malformed is True
    assert configuration.log_level == 'DEBUG'


def test_invalid():

    with pytest.raises(ValueError):
        Configuration(workload='kafka')

    with pytest.raises(ValueError):
        Configuration(log_level='LOUD')


def test_from_arguments():

    namespace = argparse.Namespace(workload='counter', skip_malformed=True, log_level='INFO')
    configuration = Configuration.from_arguments(namespace)

    assert configuration.workload == 'counter'
    assert configuration.skip_malformed == True
    assert configuration.log_level == 'INFO'

    # Missing attributes fall back to the defaults.

    configuration = Configuration.from_arguments(argparse.Namespace())
    assert configuration.workload == 'broadcast'
    assert configuration.skip_malformed == False


def test_console_logging():

    logger = logging.getLogger('whirlpool')

    whirlpool.log.enable_console_logging('INFO')
    whirlpool.log.enable_console_logging('DEBUG')

    handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG

    whirlpool.log.set_level('ERROR')
    assert handlers[0].level == logging.ERROR

    whirlpool.log.disable_logging()
    handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
    assert handlers == []


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
