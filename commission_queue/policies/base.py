"""Base allocation policy interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.task import ScoredTask, Task
from ..utils.config import OptimizerConfig


class AllocationPolicy(ABC):
    """Abstract base class for allocation policies."""

    def __init__(self, config: Optional[OptimizerConfig] = None):
        """Initialize policy with configuration."""
        self.config = config or OptimizerConfig()

    @abstractmethod
    def score_task(self, task: Task, beta: float) -> ScoredTask:
        """Compute value and effort units for a task."""
        pass

    @abstractmethod
    def is_mandatory(self, task: Task, today: datetime) -> bool:
        """Whether the task must be scheduled regardless of value."""
        pass

    @abstractmethod
    def order_tasks(self, tasks: List[ScoredTask], today: datetime) -> List[ScoredTask]:
        """Order the queued tasks according to policy logic."""
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass
