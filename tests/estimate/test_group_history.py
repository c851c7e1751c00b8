import logging
import unittest
from unittest.mock import patch

from tests.utils import config_logs, DEFAULT_TEST_NAMESPACE, DEFAULT_TEST_GROUP_NAME
from workload_estimator.estimate.group_history import GroupHistory
from workload_estimator.model.usage_sample import ZERO_USAGE

config_logs(logging.DEBUG)


def get_test_history(capacity=10) -> GroupHistory:
    return GroupHistory(DEFAULT_TEST_NAMESPACE, DEFAULT_TEST_GROUP_NAME, capacity)


class TestGroupHistory(unittest.TestCase):

    def test_construction(self):
        history = GroupHistory(DEFAULT_TEST_NAMESPACE, DEFAULT_TEST_GROUP_NAME, 100)
        self.assertEqual(DEFAULT_TEST_NAMESPACE, history.get_namespace())
        self.assertEqual(DEFAULT_TEST_GROUP_NAME, history.get_group_name())
        self.assertEqual(100, history.get_capacity())
        self.assertEqual(0, history.get_sample_count())
        self.assertEqual(None, history.get_last_timestamp())

    def test_add_usage(self):
        history = get_test_history(3)

        history.add_usage(100, 2048, 1)
        history.add_usage(150, 3072, 1)
        history.add_usage(200, 4096, 2)

        samples = history.get_samples()
        self.assertEqual(3, len(samples))
        self.assertEqual(200, samples[2].cpu)

        # The oldest sample is evicted first
        history.add_usage(250, 5120, 2)
        samples = history.get_samples()
        self.assertEqual(3, len(samples))
        self.assertEqual([150, 200, 250], [s.cpu for s in samples])

    def test_eviction_is_fifo_not_by_value(self):
        history = get_test_history(2)

        history.add_usage(1, 1, 1)
        history.add_usage(500, 500, 5)
        history.add_usage(2, 2, 2)

        self.assertEqual([500, 2], [s.cpu for s in history.get_samples()])

    def test_length_is_bounded_by_capacity(self):
        capacity = 5
        for count in [0, 1, 4, 5, 6, 23]:
            history = get_test_history(capacity)
            for i in range(count):
                history.add_usage(i, i, i)

            samples = history.get_samples()
            self.assertEqual(min(count, capacity), len(samples))
            self.assertEqual(list(range(count))[-capacity:], [s.cpu for s in samples])

    def test_samples_are_timestamped(self):
        history = get_test_history()
        with patch('workload_estimator.estimate.group_history.time.time', return_value=1234.5):
            sample = history.add_usage(1, 2, 3)

        self.assertEqual(1234.5, sample.timestamp)
        self.assertEqual(1234.5, history.get_last_timestamp())

    def test_average(self):
        history = get_test_history()

        history.add_usage(100, 2000, 1)
        history.add_usage(200, 4000, 2)
        history.add_usage(300, 6000, 3)

        avg = history.get_average()
        self.assertEqual(200.0, avg.cpu)
        self.assertEqual(4000.0, avg.memory)
        self.assertEqual(2.0, avg.gpu)

    def test_peak(self):
        history = get_test_history()

        history.add_usage(100, 2000, 1)
        history.add_usage(300, 8000, 3)
        history.add_usage(200, 4000, 2)

        peak = history.get_peak()
        self.assertEqual(300.0, peak.cpu)
        self.assertEqual(8000.0, peak.memory)
        self.assertEqual(3.0, peak.gpu)

    def test_peak_is_component_wise(self):
        history = get_test_history()

        history.add_usage(100, 9000, 1)
        history.add_usage(300, 10, 3)

        peak = history.get_peak()
        self.assertEqual(300.0, peak.cpu)
        self.assertEqual(9000.0, peak.memory)
        self.assertEqual(3.0, peak.gpu)

    def test_average_and_peak(self):
        history = get_test_history()

        history.add_usage(100, 9000, 1)
        history.add_usage(300, 10, 3)

        avg, peak = history.get_average_and_peak()
        self.assertEqual(history.get_average(), avg)
        self.assertEqual(history.get_peak(), peak)
        self.assertEqual((ZERO_USAGE, ZERO_USAGE), get_test_history().get_average_and_peak())

    def test_peak_of_negative_values(self):
        history = get_test_history()

        history.add_usage(-5, -10, -1)
        history.add_usage(-3, -20, -2)

        peak = history.get_peak()
        self.assertEqual(-3.0, peak.cpu)
        self.assertEqual(-10.0, peak.memory)
        self.assertEqual(-1.0, peak.gpu)

    def test_empty_history(self):
        history = get_test_history()
        self.assertEqual(ZERO_USAGE, history.get_average())
        self.assertEqual(ZERO_USAGE, history.get_peak())

    def test_snapshot_is_detached(self):
        history = get_test_history()
        history.add_usage(100, 2000, 1)

        snapshot = history.snapshot()
        history.add_usage(200, 4000, 2)

        self.assertEqual(1, len(snapshot))
        self.assertEqual(2, history.get_sample_count())
        self.assertEqual(DEFAULT_TEST_NAMESPACE, snapshot.get_namespace())
        self.assertEqual(DEFAULT_TEST_GROUP_NAME, snapshot.get_group_name())
        self.assertEqual(10, snapshot.get_capacity())
        self.assertEqual(100, snapshot.get_samples()[0].cpu)

        d = snapshot.to_dict()
        self.assertEqual(1, len(d['samples']))
        self.assertEqual(2000, d['samples'][0]['memory'])
