from typing import Optional, Tuple

from workload_estimator.model.usage_sample import UsageSample

NAMESPACE = 'namespace'
GROUP_NAME = 'group_name'
CAPACITY = 'capacity'
SAMPLES = 'samples'


class HistorySnapshot:
    """
    A read-only copy of a group's history, detached from the live buffer.
    """

    def __init__(self, namespace: str, group_name: str, capacity: int, samples: Tuple[UsageSample, ...]):
        self.__namespace = namespace
        self.__group_name = group_name
        self.__capacity = capacity
        self.__samples = tuple(samples)

    def get_namespace(self) -> str:
        return self.__namespace

    def get_group_name(self) -> str:
        return self.__group_name

    def get_capacity(self) -> int:
        return self.__capacity

    def get_samples(self) -> Tuple[UsageSample, ...]:
        return self.__samples

    def get_last_timestamp(self) -> Optional[float]:
        if len(self.__samples) == 0:
            return None
        return self.__samples[-1].timestamp

    def __len__(self):
        return len(self.__samples)

    def to_dict(self) -> dict:
        return {
            NAMESPACE: self.__namespace,
            GROUP_NAME: self.__group_name,
            CAPACITY: self.__capacity,
            SAMPLES: [s.to_dict() for s in self.__samples]
        }

    def __str__(self):
        return str(self.to_dict())
