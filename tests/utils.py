import logging
import time

from workload_estimator import log
from workload_estimator.config.constants import LOG_FMT_STRING

DEFAULT_TIMEOUT_SECONDS = 3
DEFAULT_TEST_NAMESPACE = 'default'
DEFAULT_TEST_GROUP_NAME = 'test-group'
DEFAULT_TEST_NODE = 'test-node'
DEFAULT_TEST_TAGS = {'node': DEFAULT_TEST_NODE}

HOUR_SEC = 60 * 60


def wait_until(func, timeout=DEFAULT_TIMEOUT_SECONDS, period=0.01):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if func():
            return
        time.sleep(period)

    raise TimeoutError(
        "Function did not succeed within timeout: '{}'.".format(timeout))


def gauge_value_equals(registry, key, expected_value, tags=DEFAULT_TEST_TAGS):
    value = registry.get_sample_value(key, tags)
    log.debug("gauge: '{}'='{}' expected: '{}'".format(key, value, expected_value))
    return value == expected_value


def config_logs(level):
    logging.basicConfig(
        format=LOG_FMT_STRING,
        datefmt='%d-%m-%Y:%H:%M:%S',
        level=level)
