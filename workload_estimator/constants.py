SCHEDULE_ONCE_FAILURE_EXIT_CODE = 1
SCHEDULING_LOOP_FAILURE_EXIT_CODE = 2
