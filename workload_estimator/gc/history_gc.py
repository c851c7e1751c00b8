from datetime import timedelta

import schedule
from prometheus_client import Gauge

from workload_estimator import log
from workload_estimator.config.constants import DEFAULT_HISTORY_MAX_AGE_SEC, DEFAULT_HISTORY_GC_INTERVAL_SEC
from workload_estimator.estimate.estimator import Estimator
from workload_estimator.metrics.constants import HISTORY_GC_COUNT_KEY
from workload_estimator.metrics.metrics_reporter import MetricsReporter


class HistoryGarbageCollector(MetricsReporter):

    def __init__(self,
                 estimator: Estimator,
                 max_age_sec=DEFAULT_HISTORY_MAX_AGE_SEC,
                 gc_interval=DEFAULT_HISTORY_GC_INTERVAL_SEC):
        self.__estimator = estimator
        self.__max_age = timedelta(seconds=max_age_sec)
        self.__gauge = None

        log.info("Scheduling history garbage collection every {} seconds for histories older than {}".format(
            gc_interval, self.__max_age))
        schedule.every(gc_interval).seconds.do(self._gc_histories)

    def _gc_histories(self):
        try:
            self.__estimator.clean_old_history(self.__max_age)
        except Exception:
            log.exception("Failed to garbage collect histories.")

    def set_registry(self, registry, tags):
        self.__gauge = Gauge(
            HISTORY_GC_COUNT_KEY,
            "Usage histories removed for inactivity since startup",
            sorted(tags.keys()),
            registry=registry)

    def report_metrics(self, tags):
        self.__gauge.labels(**tags).set(self.__estimator.get_removed_count())
