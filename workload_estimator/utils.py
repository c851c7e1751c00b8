import time
from threading import Thread, Lock

import schedule

from workload_estimator import log
from workload_estimator.constants import SCHEDULE_ONCE_FAILURE_EXIT_CODE, SCHEDULING_LOOP_FAILURE_EXIT_CODE
from workload_estimator.exit_handler import ExitHandler

SCHEDULING_SLEEP_INTERVAL = 10.0

scheduling_lock = Lock()
scheduling_started = False


def start_periodic_scheduling(exit_handler: ExitHandler):
    global scheduling_started

    with scheduling_lock:
        if scheduling_started:
            return

        worker_thread = Thread(target=__schedule_loop, args=[exit_handler])
        worker_thread.daemon = True
        worker_thread.start()
        scheduling_started = True


def __schedule_loop(exit_handler: ExitHandler):
    log.info("Starting scheduling loop...")
    while True:
        try:
            sleep_time = _schedule_once(exit_handler)
            log.debug("Scheduling thread sleeping for: '%d' seconds", sleep_time)
            time.sleep(sleep_time)
        except Exception:
            log.exception("Failed to run scheduling loop")
            exit_handler.exit(SCHEDULING_LOOP_FAILURE_EXIT_CODE)


def _schedule_once(exit_handler: ExitHandler) -> float:
    try:
        log.debug("Running pending scheduled tasks.")
        schedule.run_pending()

        sleep_time = SCHEDULING_SLEEP_INTERVAL
        if schedule.next_run() is not None:
            sleep_time = schedule.idle_seconds()

        if sleep_time < 0:
            sleep_time = SCHEDULING_SLEEP_INTERVAL

        return sleep_time
    except Exception:
        log.exception("Failed to run scheduling once")
        exit_handler.exit(SCHEDULE_ONCE_FAILURE_EXIT_CODE)
        return SCHEDULING_SLEEP_INTERVAL
