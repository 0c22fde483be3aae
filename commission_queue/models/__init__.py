"""Task and trace data models."""

from .task import ScoredTask, Task
from .trace import AllocationDecision, AllocationTrace

__all__ = ['ScoredTask', 'Task', 'AllocationDecision', 'AllocationTrace']
