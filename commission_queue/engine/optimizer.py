"""Core queue-building engine."""

import logging
import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from ..models.task import ScoredTask, Task
from ..models.trace import (
    MANDATORY,
    NOT_SELECTED,
    SELECTED,
    SKIPPED_OVERLOAD,
    AllocationDecision,
    AllocationTrace,
)
from ..policies.base import AllocationPolicy
from ..policies.commission import CommissionPolicy, estimate_beta
from ..utils.config import OptimizerConfig
from ..utils.datetime_utils import DateLike, as_datetime
from .knapsack import select_items

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizerResult:
    """The day's queue.

    total_expected_value is the summed knapsack value of the queued tasks:
    beta-scaled commission plus the priority bonus, not raw commission.
    Tasks are mutable, so they take part in equality but not in the hash.
    """

    tasks: Tuple[Task, ...] = field(hash=False)
    overload_detected: bool
    total_expected_value: float
    total_effort_hours: float
    trace: Optional[AllocationTrace] = field(default=None, compare=False)

    @property
    def task_ids(self) -> List[str]:
        return [task.task_id for task in self.tasks]


class QueueOptimizer:
    """Builds a daily execution queue from open tasks."""

    def __init__(
        self,
        policy: Optional[AllocationPolicy] = None,
        config: Optional[OptimizerConfig] = None,
    ):
        """Initialize optimizer with policy and configuration."""
        self.config = config or (policy.config if policy else OptimizerConfig())
        self.policy = policy or CommissionPolicy(self.config)

    def capacity_units(self, daily_hours: float) -> int:
        """Whole effort units available in the day, never negative."""
        if not math.isfinite(daily_hours):
            raise ValueError(f"daily_hours must be finite, got {daily_hours}")
        if daily_hours > self.config.max_daily_hours:
            raise ValueError(
                f"daily_hours must be at most {self.config.max_daily_hours}, got {daily_hours}"
            )
        units = math.floor(Decimal(str(daily_hours)) * self.config.granularity)
        return max(units, 0)

    def build(
        self,
        reference_date: DateLike,
        open_tasks: Sequence[Task],
        daily_hours: Optional[float] = None,
        monthly_target=Decimal('0'),
        earned_so_far=Decimal('0'),
    ) -> OptimizerResult:
        """Score, partition, allocate and order the open tasks."""
        today = as_datetime(reference_date)
        if daily_hours is None:
            daily_hours = self.config.default_daily_hours

        capacity_total = self.capacity_units(daily_hours)
        beta = estimate_beta(monthly_target, earned_so_far, self.config)

        mandatory: List[ScoredTask] = []
        optional: List[ScoredTask] = []
        for task in open_tasks:
            scored = self.policy.score_task(task, beta)
            if self.policy.is_mandatory(task, today):
                mandatory.append(scored)
            else:
                optional.append(scored)

        mandatory_units = sum(s.effort_units for s in mandatory)

        logger.debug(
            f"beta={beta:.3f} capacity={capacity_total} units, "
            f"{len(mandatory)} mandatory ({mandatory_units} units), {len(optional)} optional"
        )

        if mandatory_units > capacity_total:
            logger.warning(
                f"Overload: mandatory work needs {mandatory_units} units, "
                f"only {capacity_total} available"
            )
            queued = mandatory
            not_queued = optional
            overload = True
        else:
            selected = select_items(optional, capacity_total - mandatory_units)
            selected_ids = {id(s) for s in selected}
            queued = self.policy.order_tasks(mandatory + selected, today)
            not_queued = [s for s in optional if id(s) not in selected_ids]
            overload = False

        total_value = sum(s.value for s in queued)
        total_units = sum(s.effort_units for s in queued)

        trace = self._build_trace(
            today, beta, capacity_total, mandatory_units,
            queued, not_queued, mandatory, overload, len(open_tasks),
        )

        return OptimizerResult(
            tasks=tuple(s.task for s in queued),
            overload_detected=overload,
            total_expected_value=total_value,
            total_effort_hours=total_units / self.config.granularity,
            trace=trace,
        )

    def _build_trace(
        self,
        today: datetime,
        beta: float,
        capacity_total: int,
        mandatory_units: int,
        queued: List[ScoredTask],
        not_queued: List[ScoredTask],
        mandatory: List[ScoredTask],
        overload: bool,
        tasks_total: int,
    ) -> AllocationTrace:
        """Record one decision per task for observability."""
        mandatory_ids = {id(s) for s in mandatory}
        decisions = []

        for position, scored in enumerate(queued):
            if id(scored) in mandatory_ids:
                outcome, reason = MANDATORY, "Due today, overdue or undated"
            else:
                outcome, reason = SELECTED, "Chosen by knapsack for remaining capacity"
            decisions.append(AllocationDecision(
                task_id=scored.task_id,
                outcome=outcome,
                value=scored.value,
                effort_units=scored.effort_units,
                reason=reason,
                position=position,
            ))

        for scored in not_queued:
            if overload:
                outcome, reason = SKIPPED_OVERLOAD, "Mandatory work exceeds capacity"
            else:
                outcome, reason = NOT_SELECTED, "Not in the best-value subset"
            decisions.append(AllocationDecision(
                task_id=scored.task_id,
                outcome=outcome,
                value=scored.value,
                effort_units=scored.effort_units,
                reason=reason,
            ))

        queued_units = sum(s.effort_units for s in queued)

        return AllocationTrace(
            run_id=str(uuid.uuid4())[:8],
            timestamp=datetime.now(),
            reference_date=today,
            beta=beta,
            capacity_units=capacity_total,
            mandatory_units=mandatory_units,
            config={
                'policy': self.policy.get_policy_name(),
                'granularity': self.config.granularity,
                'alpha': self.config.alpha,
                'beta_range': [self.config.beta_min, self.config.beta_max],
            },
            decisions=decisions,
            summary_stats={
                'tasks_total': tasks_total,
                'tasks_queued': len(queued),
                'tasks_mandatory': len(mandatory),
                'tasks_unqueued': len(not_queued),
                'queued_units': queued_units,
                'overload_detected': overload,
                'utilization_percent': (
                    queued_units / capacity_total * 100 if capacity_total > 0 else 0
                ),
            },
        )


def replace_task(base_tasks: Sequence[Task], modified_task: Task) -> List[Task]:
    """Copy of base_tasks with modified_task swapped in by id, or appended."""
    tasks = list(base_tasks)
    for index, task in enumerate(tasks):
        if task.task_id == modified_task.task_id:
            tasks[index] = modified_task
            break
    else:
        tasks.append(modified_task)
    return tasks


def build_queue(
    reference_date: DateLike,
    open_tasks: Sequence[Task],
    daily_hours: Optional[float] = None,
    monthly_target=Decimal('0'),
    earned_so_far=Decimal('0'),
    config: Optional[OptimizerConfig] = None,
) -> OptimizerResult:
    """Build the day's prioritized, time-budgeted queue."""
    return QueueOptimizer(config=config).build(
        reference_date, open_tasks, daily_hours, monthly_target, earned_so_far,
    )


def what_if(
    base_tasks: Sequence[Task],
    modified_task: Task,
    reference_date: DateLike,
    daily_hours: Optional[float] = None,
    monthly_target=Decimal('0'),
    earned_so_far=Decimal('0'),
    config: Optional[OptimizerConfig] = None,
) -> OptimizerResult:
    """Rebuild the queue as if modified_task replaced its stored version."""
    return build_queue(
        reference_date,
        replace_task(base_tasks, modified_task),
        daily_hours,
        monthly_target,
        earned_so_far,
        config,
    )
