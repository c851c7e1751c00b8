#!/usr/bin/env python3
import logging

import click
from prometheus_client import CollectorRegistry

from workload_estimator import log
from workload_estimator.api.status import create_app
from workload_estimator.config.config_manager import ConfigManager
from workload_estimator.config.constants import LOG_FMT_STRING, MAX_HISTORY_SIZE, DEFAULT_MAX_HISTORY_SIZE, \
    HISTORY_MAX_AGE_SEC, DEFAULT_HISTORY_MAX_AGE_SEC, HISTORY_GC_INTERVAL_SEC, DEFAULT_HISTORY_GC_INTERVAL_SEC, \
    METRICS_INTERVAL_SEC, DEFAULT_METRICS_INTERVAL_SEC
from workload_estimator.config.env_property_provider import EnvPropertyProvider
from workload_estimator.estimate.estimator import Estimator
from workload_estimator.gc.history_gc import HistoryGarbageCollector
from workload_estimator.metrics.estimator_metrics_reporter import EstimatorMetricsReporter
from workload_estimator.metrics.metrics_manager import MetricsManager
from workload_estimator.real_exit_handler import RealExitHandler
from workload_estimator.utils import start_periodic_scheduling


@click.command()
@click.option('--admin-port', default=5000, help="The port for the HTTP server to listen on (default: 5000)")
@click.option('--log-level', default='INFO', help="The log level (default: INFO)")
def main(admin_port, log_level):
    logging.basicConfig(format=LOG_FMT_STRING, datefmt='%d-%m-%Y:%H:%M:%S')
    log.setLevel(log_level.upper())

    exit_handler = RealExitHandler()
    config_manager = ConfigManager(EnvPropertyProvider())

    # Setup the estimator
    capacity = config_manager.get_cached_int(MAX_HISTORY_SIZE, DEFAULT_MAX_HISTORY_SIZE)
    log.info("Setting up the estimator with history capacity: %d", capacity)
    estimator = Estimator(capacity)

    # Setup periodic history retention
    max_age_sec = config_manager.get_cached_float(HISTORY_MAX_AGE_SEC, DEFAULT_HISTORY_MAX_AGE_SEC)
    gc_interval = config_manager.get_cached_int(HISTORY_GC_INTERVAL_SEC, DEFAULT_HISTORY_GC_INTERVAL_SEC)
    history_gc = HistoryGarbageCollector(estimator, max_age_sec, gc_interval)

    # Setup metrics reporting
    log.info("Setting up the metrics manager...")
    registry = CollectorRegistry()
    report_interval = config_manager.get_cached_int(METRICS_INTERVAL_SEC, DEFAULT_METRICS_INTERVAL_SEC)
    MetricsManager([EstimatorMetricsReporter(estimator), history_gc], registry, config_manager, report_interval)

    log.info("Starting periodic scheduling...")
    start_periodic_scheduling(exit_handler)

    log.info("Startup complete, serving requests...")

    # Starting the HTTP server blocks exit forever
    app = create_app(estimator, registry)
    app.run(host="0.0.0.0", debug=False, port=admin_port)


if __name__ == "__main__":
    main()
