"""Performance metrics for a task list."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Sequence

from ..models.task import Task, to_decimal
from ..utils.config import OptimizerConfig
from ..utils.datetime_utils import DateLike


@dataclass(frozen=True)
class PerformanceMetrics:
    """Summary ratios over raw commission (not the scaled knapsack value)."""

    average_value_per_hour: float
    total_expected_commission: Decimal
    efficiency: float

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON export."""
        return {
            'average_value_per_hour': self.average_value_per_hour,
            'total_expected_commission': str(self.total_expected_commission),
            'efficiency': self.efficiency,
        }


def metrics(
    tasks: Sequence[Task],
    reference_date: Optional[DateLike] = None,
    config: Optional[OptimizerConfig] = None,
) -> PerformanceMetrics:
    """Probability-weighted commission, commission per hour, and the share of
    high-priority tasks.

    reference_date is accepted for symmetry with build_queue and does not
    affect the figures.
    """
    config = config or OptimizerConfig()

    total_commission = sum(
        (to_decimal(task.estimated_commission) * Decimal(str(task.probability)) for task in tasks),
        Decimal('0'),
    )
    total_hours = sum(task.effort_hours for task in tasks)

    average_value_per_hour = float(total_commission) / total_hours if total_hours > 0 else 0.0

    high_priority = [t for t in tasks if t.priority >= config.high_priority_threshold]
    efficiency = len(high_priority) / len(tasks) if tasks else 0.0

    return PerformanceMetrics(
        average_value_per_hour=average_value_per_hour,
        total_expected_commission=total_commission,
        efficiency=efficiency,
    )
