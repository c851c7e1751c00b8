LOG_FMT_STRING = '%(asctime)s,%(msecs)d %(levelname)s [%(filename)s:%(lineno)d] %(message)s'

# HISTORY CONSTANTS
MAX_HISTORY_SIZE = 'WORKLOAD_ESTIMATOR_MAX_HISTORY_SIZE'
DEFAULT_MAX_HISTORY_SIZE = 100

# GC environment variables
HISTORY_MAX_AGE_SEC = 'WORKLOAD_ESTIMATOR_HISTORY_MAX_AGE_SEC'
DEFAULT_HISTORY_MAX_AGE_SEC = 24 * 60 * 60
HISTORY_GC_INTERVAL_SEC = 'WORKLOAD_ESTIMATOR_HISTORY_GC_INTERVAL_SEC'
DEFAULT_HISTORY_GC_INTERVAL_SEC = 5 * 60

# METRICS CONSTANTS
METRICS_INTERVAL_SEC = 'WORKLOAD_ESTIMATOR_METRICS_INTERVAL_SEC'
DEFAULT_METRICS_INTERVAL_SEC = 60

# Static environment variables
NODE_NAME = 'NODE_NAME'
UNKNOWN_NODE = 'unknown'

PROPERTIES = [
    MAX_HISTORY_SIZE,
    HISTORY_MAX_AGE_SEC,
    HISTORY_GC_INTERVAL_SEC,
    METRICS_INTERVAL_SEC,
    NODE_NAME
]
