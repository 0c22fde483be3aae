"""Daily commission-weighted task queue."""

from .engine.optimizer import OptimizerResult, QueueOptimizer, build_queue, what_if
from .evaluation.metrics import PerformanceMetrics, metrics
from .models.task import ScoredTask, Task
from .policies.commission import estimate_beta
from .utils.config import OptimizerConfig

__version__ = "0.1.0"
__all__ = [
    'OptimizerResult',
    'QueueOptimizer',
    'build_queue',
    'what_if',
    'PerformanceMetrics',
    'metrics',
    'ScoredTask',
    'Task',
    'estimate_beta',
    'OptimizerConfig',
]
