import collections
import time
from threading import Lock
from typing import List, Optional, Tuple

from workload_estimator.model.history_snapshot import HistorySnapshot
from workload_estimator.model.usage_sample import UsageSample, ZERO_USAGE


class GroupHistory:

    def __init__(self, namespace: str, group_name: str, capacity: int):
        self.__namespace = namespace
        self.__group_name = group_name
        self.__capacity = capacity
        self.__lock = Lock()
        # Appending past capacity evicts the oldest sample.
        self.__samples = collections.deque([], capacity)

    def get_namespace(self) -> str:
        return self.__namespace

    def get_group_name(self) -> str:
        return self.__group_name

    def get_capacity(self) -> int:
        return self.__capacity

    def add_usage(self, cpu: float, memory: float, gpu: float) -> UsageSample:
        with self.__lock:
            sample = UsageSample(timestamp=time.time(), cpu=cpu, memory=memory, gpu=gpu)
            self.__samples.append(sample)
            return sample

    def get_samples(self) -> List[UsageSample]:
        with self.__lock:
            return list(self.__samples)

    def get_sample_count(self) -> int:
        with self.__lock:
            return len(self.__samples)

    def get_last_timestamp(self) -> Optional[float]:
        with self.__lock:
            if len(self.__samples) == 0:
                return None
            return self.__samples[-1].timestamp

    def get_average(self) -> UsageSample:
        return self.__average(self.get_samples())

    def get_peak(self) -> UsageSample:
        return self.__peak(self.get_samples())

    def get_average_and_peak(self) -> Tuple[UsageSample, UsageSample]:
        samples = self.get_samples()
        return self.__average(samples), self.__peak(samples)

    @staticmethod
    def __average(samples: List[UsageSample]) -> UsageSample:
        if len(samples) == 0:
            return ZERO_USAGE

        count = len(samples)
        return UsageSample(
            timestamp=0.0,
            cpu=sum(s.cpu for s in samples) / count,
            memory=sum(s.memory for s in samples) / count,
            gpu=sum(s.gpu for s in samples) / count)

    @staticmethod
    def __peak(samples: List[UsageSample]) -> UsageSample:
        """
        Each dimension is maximized independently, so the peak may combine values observed in different samples.
        """
        if len(samples) == 0:
            return ZERO_USAGE

        return UsageSample(
            timestamp=0.0,
            cpu=max(s.cpu for s in samples),
            memory=max(s.memory for s in samples),
            gpu=max(s.gpu for s in samples))

    def snapshot(self) -> HistorySnapshot:
        return HistorySnapshot(self.__namespace, self.__group_name, self.__capacity, tuple(self.get_samples()))

    def __str__(self):
        return "{}/{} ({}/{} samples)".format(
            self.__namespace, self.__group_name, self.get_sample_count(), self.__capacity)
