"""Evaluation, what-if and synthetic data modules."""

from .generator import TaskGenerator
from .metrics import PerformanceMetrics, metrics
from .what_if import WhatIfAnalyzer, WhatIfReport, adjust_task

__all__ = [
    'TaskGenerator',
    'PerformanceMetrics',
    'metrics',
    'WhatIfAnalyzer',
    'WhatIfReport',
    'adjust_task',
]
