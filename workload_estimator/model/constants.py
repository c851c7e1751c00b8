CPU = 'cpu'
MEMORY = 'memory'
GPU = 'nvidia.com/gpu'

MILLI_CORES_PER_CORE = 1000

# Estimates favor typical usage while keeping a margin from the observed worst case.
AVERAGE_WEIGHT = 0.7
PEAK_WEIGHT = 0.3
