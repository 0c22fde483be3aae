"""Commission-weighted allocation policy."""

import logging
import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple

from ..models.task import ScoredTask, Task, to_decimal
from ..utils.config import OptimizerConfig
from ..utils.datetime_utils import is_due_by, is_mandatory_due
from .base import AllocationPolicy

logger = logging.getLogger(__name__)


def estimate_beta(
    monthly_target,
    earned_so_far,
    config: Optional[OptimizerConfig] = None,
) -> float:
    """Commission multiplier from the gap between target and earnings.

    The further behind the monthly target, the more commission counts
    relative to the priority bonus, clamped to [beta_min, beta_max].
    A zero (or negative) target means there is no gap to close.
    """
    config = config or OptimizerConfig()
    target = to_decimal(monthly_target)
    earned = to_decimal(earned_so_far)

    if target <= 0:
        beta_raw = 1.0
    else:
        gap = max(target - earned, Decimal('0'))
        beta_raw = float(Decimal('1') + gap / target)

    return min(max(beta_raw, config.beta_min), config.beta_max)


def effort_to_units(effort_hours, granularity: int) -> int:
    """Discretize hours into effort units, rounding half away from zero."""
    scaled = Decimal(str(effort_hours)) * granularity
    # ROUND_HALF_UP in decimal rounds ties away from zero
    return int(scaled.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


class CommissionPolicy(AllocationPolicy):
    """Scores by scaled commission plus a priority bonus.

    Mandatory tasks (undated, due today or overdue) come first, then
    descending value, then descending priority. Python's sort is stable, so
    anything still tied keeps its input order.
    """

    def score_task(self, task: Task, beta: float) -> ScoredTask:
        """Compute value and effort units, clamping negative or non-finite inputs to zero."""
        effort_hours, commission, priority = self._clamped_inputs(task)

        effort_units = effort_to_units(effort_hours, self.config.granularity)
        value = float(commission) * beta + self.config.alpha * priority

        return ScoredTask(task=task, value=value, effort_units=effort_units, priority=priority)

    def _clamped_inputs(self, task: Task) -> Tuple[float, Decimal, int]:
        effort_hours = task.effort_hours or 0.0
        commission = to_decimal(task.estimated_commission)
        priority = task.priority or 0

        if not math.isfinite(effort_hours):
            logger.warning(f"Task {task.task_id}: non-finite effort {effort_hours} clamped to 0")
            effort_hours = 0.0
        elif effort_hours < 0:
            logger.warning(f"Task {task.task_id}: negative effort {effort_hours}h clamped to 0")
            effort_hours = 0.0
        if commission < 0:
            logger.warning(f"Task {task.task_id}: negative commission {commission} clamped to 0")
            commission = Decimal('0')
        if priority < 0:
            logger.warning(f"Task {task.task_id}: negative priority {priority} clamped to 0")
            priority = 0

        return effort_hours, commission, priority

    def is_mandatory(self, task: Task, today: datetime) -> bool:
        """Undated, due on the reference day, or overdue."""
        return is_mandatory_due(task.due_date, today)

    def order_tasks(self, tasks: List[ScoredTask], today: datetime) -> List[ScoredTask]:
        """Due-by-today first, then value (desc), then priority (desc)."""

        def sort_key(scored: ScoredTask):
            # Primary: due or overdue first
            due_key = 0 if is_due_by(scored.task.due_date, today) else 1

            # Secondary: value (higher first, so negate)
            value_key = -scored.value

            # Tertiary: priority (higher first, so negate)
            priority_key = -scored.priority

            return (due_key, value_key, priority_key)

        return sorted(tasks, key=sort_key)

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "COMMISSION"
