from prometheus_client import Gauge

from workload_estimator import log
from workload_estimator.estimate.estimator import Estimator
from workload_estimator.metrics.constants import HISTORY_COUNT_KEY, SAMPLE_COUNT_KEY, HISTORY_CAPACITY_KEY, \
    RECORDED_KEY, ESTIMATED_KEY, NOT_FOUND_KEY
from workload_estimator.metrics.metrics_reporter import MetricsReporter


class EstimatorMetricsReporter(MetricsReporter):

    def __init__(self, estimator: Estimator):
        self.__estimator = estimator
        self.__gauges = {}

    def set_registry(self, registry, tags):
        label_names = sorted(tags.keys())

        def gauge(key, documentation):
            self.__gauges[key] = Gauge(key, documentation, label_names, registry=registry)

        gauge(HISTORY_COUNT_KEY, "Number of workload groups with a usage history")
        gauge(SAMPLE_COUNT_KEY, "Number of usage samples held across all histories")
        gauge(HISTORY_CAPACITY_KEY, "Maximum number of samples held per history")
        gauge(RECORDED_KEY, "Usage samples recorded since startup")
        gauge(ESTIMATED_KEY, "Resource estimates produced since startup")
        gauge(NOT_FOUND_KEY, "Estimates requested for groups without history since startup")

    def report_metrics(self, tags):
        log.debug("Reporting estimator metrics")
        self.__set(HISTORY_COUNT_KEY, tags, self.__estimator.get_history_count())
        self.__set(SAMPLE_COUNT_KEY, tags, self.__estimator.get_sample_count())
        self.__set(HISTORY_CAPACITY_KEY, tags, self.__estimator.get_capacity())
        self.__set(RECORDED_KEY, tags, self.__estimator.get_recorded_count())
        self.__set(ESTIMATED_KEY, tags, self.__estimator.get_estimated_count())
        self.__set(NOT_FOUND_KEY, tags, self.__estimator.get_not_found_count())

    def __set(self, key, tags, value):
        self.__gauges[key].labels(**tags).set(value)
