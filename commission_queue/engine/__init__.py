"""Queue-building engine."""

from .knapsack import select_items
from .optimizer import OptimizerResult, QueueOptimizer, build_queue, replace_task, what_if

__all__ = ['select_items', 'OptimizerResult', 'QueueOptimizer', 'build_queue', 'replace_task', 'what_if']
