from typing import List

import schedule
from prometheus_client import CollectorRegistry

from workload_estimator import log
from workload_estimator.config.config_manager import ConfigManager
from workload_estimator.config.constants import DEFAULT_METRICS_INTERVAL_SEC
from workload_estimator.metrics.constants import NODE
from workload_estimator.metrics.metrics_reporter import MetricsReporter


class MetricsManager:

    def __init__(self,
                 reporters: List[MetricsReporter],
                 reg: CollectorRegistry,
                 config_manager: ConfigManager,
                 report_interval=DEFAULT_METRICS_INTERVAL_SEC):
        self.__reporters = reporters
        self.__reg = reg
        self.__config_manager = config_manager

        for reporter in self.__reporters:
            reporter.set_registry(self.__reg, self.get_tags())

        log.info("Scheduling metrics reporting every {} seconds".format(report_interval))
        schedule.every(report_interval).seconds.do(self._report_metrics)

    def get_registry(self) -> CollectorRegistry:
        return self.__reg

    def _report_metrics(self):
        try:
            tags = self.get_tags()

            for reporter in self.__reporters:
                reporter.report_metrics(tags)
        except Exception:
            log.exception("Failed to report metrics.")

    def get_tags(self) -> dict:
        return {NODE: self.__config_manager.get_node()}
