from typing import NamedTuple

TIMESTAMP = 'timestamp'
CPU = 'cpu'
MEMORY = 'memory'
GPU = 'gpu'


class UsageSample(NamedTuple):
    timestamp: float
    cpu: float
    memory: float
    gpu: float

    def to_dict(self) -> dict:
        return {
            TIMESTAMP: self.timestamp,
            CPU: self.cpu,
            MEMORY: self.memory,
            GPU: self.gpu
        }


ZERO_USAGE = UsageSample(timestamp=0.0, cpu=0.0, memory=0.0, gpu=0.0)
