NODE = 'node'

HISTORY_COUNT_KEY = 'workload_estimator_history_count'
SAMPLE_COUNT_KEY = 'workload_estimator_sample_count'
HISTORY_CAPACITY_KEY = 'workload_estimator_history_capacity'
RECORDED_KEY = 'workload_estimator_recorded'
ESTIMATED_KEY = 'workload_estimator_estimated'
NOT_FOUND_KEY = 'workload_estimator_not_found'
HISTORY_GC_COUNT_KEY = 'workload_estimator_history_gc_count'
