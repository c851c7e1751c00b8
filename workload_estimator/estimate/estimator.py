import time
from datetime import timedelta
from threading import Lock
from typing import Dict, Optional, Tuple

from workload_estimator import log
from workload_estimator.config.constants import DEFAULT_MAX_HISTORY_SIZE
from workload_estimator.estimate.group_history import GroupHistory
from workload_estimator.model.constants import CPU, MEMORY, GPU, AVERAGE_WEIGHT, PEAK_WEIGHT, MILLI_CORES_PER_CORE
from workload_estimator.model.history_snapshot import HistorySnapshot


class NotFoundError(Exception):
    pass


def get_key(namespace: str, group_name: str) -> str:
    return "{}/{}".format(namespace, group_name)


class Estimator:
    """
    Tracks the resource usage history of workload groups and predicts what future runs of a group will need.

    The registry lock guards only the mapping of keys to histories. Each history carries its own lock, and
    ingestion never holds both at once: the history is resolved under the registry lock and the sample is
    appended after it has been released. The retention sweep is the only caller which nests the two, always
    registry first.
    """

    def __init__(self, capacity: int = DEFAULT_MAX_HISTORY_SIZE):
        if capacity < 1:
            raise ValueError("History capacity must be positive, got: '{}'".format(capacity))

        self.__capacity = capacity
        self.__lock = Lock()
        self.__histories = {}

        self.__metric_lock = Lock()
        self.__recorded_count = 0
        self.__estimated_count = 0
        self.__not_found_count = 0
        self.__removed_count = 0

        log.info("Created estimator with history capacity: %d", capacity)

    def get_capacity(self) -> int:
        return self.__capacity

    def record_usage(self, namespace: str, group_name: str, cpu: float, memory: float, gpu: float):
        key = get_key(namespace, group_name)

        with self.__lock:
            history = self.__histories.get((namespace, group_name), None)
            if history is None:
                history = GroupHistory(namespace, group_name, self.__capacity)
                self.__histories[(namespace, group_name)] = history
                log.info("Started tracking usage history for group: '%s'", key)

        history.add_usage(cpu, memory, gpu)
        with self.__metric_lock:
            self.__recorded_count += 1

        log.debug("Recorded usage for group: '%s' cpu: %s, memory: %s, gpu: %s", key, cpu, memory, gpu)

    def estimate_resources(self, namespace: str, group_name: str) -> Dict[str, int]:
        key = get_key(namespace, group_name)
        history = self.__get_group_history(namespace, group_name)
        if history is None:
            with self.__metric_lock:
                self.__not_found_count += 1
            log.warning("No history found for group: '%s'", key)
            raise NotFoundError("no history found for {}".format(key))

        avg, peak = history.get_average_and_peak()

        estimated_cpu = AVERAGE_WEIGHT * avg.cpu + PEAK_WEIGHT * peak.cpu
        estimated_mem = AVERAGE_WEIGHT * avg.memory + PEAK_WEIGHT * peak.memory
        estimated_gpu = AVERAGE_WEIGHT * avg.gpu + PEAK_WEIGHT * peak.gpu

        resources = {
            CPU: int(round(estimated_cpu * MILLI_CORES_PER_CORE)),
            MEMORY: int(estimated_mem)
        }

        # Groups which never used an accelerator get no accelerator entry at all.
        if estimated_gpu > 0:
            resources[GPU] = int(estimated_gpu)

        with self.__metric_lock:
            self.__estimated_count += 1

        log.info("Estimated resources for group: '%s' cpu: %s, memory: %s, gpu: %s",
                 key, estimated_cpu, estimated_mem, estimated_gpu)
        return resources

    def get_history(self, namespace: str, group_name: str) -> Tuple[Optional[HistorySnapshot], bool]:
        history = self.__get_group_history(namespace, group_name)
        if history is None:
            return None, False

        return history.snapshot(), True

    def clean_old_history(self, max_age: timedelta) -> int:
        removed = 0

        with self.__lock:
            cutoff = time.time() - max_age.total_seconds()
            for key, history in list(self.__histories.items()):
                # Histories without samples have nothing to age out and are left alone.
                last_timestamp = history.get_last_timestamp()
                if last_timestamp is not None and last_timestamp < cutoff:
                    del self.__histories[key]
                    removed += 1
                    log.debug("Removed usage history for group: '%s'", get_key(*key))

        with self.__metric_lock:
            self.__removed_count += removed

        log.info("Cleaned old histories, removed: %d", removed)
        return removed

    def get_history_count(self) -> int:
        with self.__lock:
            return len(self.__histories)

    def get_sample_count(self) -> int:
        with self.__lock:
            histories = list(self.__histories.values())

        return sum(h.get_sample_count() for h in histories)

    def get_recorded_count(self) -> int:
        with self.__metric_lock:
            return self.__recorded_count

    def get_estimated_count(self) -> int:
        with self.__metric_lock:
            return self.__estimated_count

    def get_not_found_count(self) -> int:
        with self.__metric_lock:
            return self.__not_found_count

    def get_removed_count(self) -> int:
        with self.__metric_lock:
            return self.__removed_count

    def __get_group_history(self, namespace: str, group_name: str) -> Optional[GroupHistory]:
        with self.__lock:
            return self.__histories.get((namespace, group_name), None)
