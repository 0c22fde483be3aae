"""Today's queue: ties the engine to its task and target sources."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .engine.optimizer import OptimizerResult, QueueOptimizer, replace_task
from .evaluation.metrics import PerformanceMetrics, metrics
from .evaluation.what_if import WhatIfAnalyzer, WhatIfReport, adjust_task
from .repository import CommissionTargetSource, TaskRepository
from .utils.config import OptimizerConfig
from .utils.datetime_utils import DateLike, as_datetime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodayQueue:
    """Everything the daily queue screen shows."""

    result: OptimizerResult
    metrics: PerformanceMetrics

    @property
    def is_overloaded(self) -> bool:
        return self.result.overload_detected


class TodayQueueService:
    """Loads open tasks and this month's target, then builds the queue."""

    def __init__(
        self,
        tasks: TaskRepository,
        targets: CommissionTargetSource,
        daily_hours: Optional[float] = None,
        config: Optional[OptimizerConfig] = None,
    ):
        self.tasks = tasks
        self.targets = targets
        self.config = config or OptimizerConfig()
        self.daily_hours = daily_hours if daily_hours is not None else self.config.default_daily_hours
        self.optimizer = QueueOptimizer(config=self.config)

    def _build(self, today: datetime, open_tasks) -> OptimizerResult:
        target = self.targets.monthly_target(today.year, today.month)
        earned = self.targets.earned_so_far(today.year, today.month)
        return self.optimizer.build(today, open_tasks, self.daily_hours, target, earned)

    def load_today_queue(self, today: Optional[DateLike] = None) -> TodayQueue:
        """Build the queue and its metrics for the reference date."""
        today = as_datetime(today) if today is not None else datetime.now()
        open_tasks = self.tasks.fetch_open_tasks()

        result = self._build(today, open_tasks)
        logger.info(
            f"Queue for {today.date()}: {len(result.tasks)}/{len(open_tasks)} tasks, "
            f"{result.total_effort_hours:.1f}h, overload={result.overload_detected}"
        )

        return TodayQueue(result=result, metrics=metrics(result.tasks, today, self.config))

    def what_if(
        self,
        task_id: str,
        today: Optional[DateLike] = None,
        probability: Optional[float] = None,
        effort_hours: Optional[float] = None,
    ) -> WhatIfReport:
        """Compare today's queue with one where a stored task is adjusted."""
        today = as_datetime(today) if today is not None else datetime.now()
        open_tasks = self.tasks.fetch_open_tasks()

        original = next((t for t in open_tasks if t.task_id == task_id), None)
        if original is None:
            raise KeyError(f"No open task with id {task_id!r}")

        modified = adjust_task(original, probability=probability, effort_hours=effort_hours)

        base = self._build(today, open_tasks)
        hypothetical = self._build(today, replace_task(open_tasks, modified))

        return WhatIfAnalyzer().compare(base, hypothetical)
