"""Task and scored-task data models."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union

from ..utils.datetime_utils import parse_date


def to_decimal(value: Any) -> Decimal:
    """Convert a monetary amount to Decimal via its string form."""
    if value is None or value == '':
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid monetary amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid monetary amount: {value!r}")
    return amount


@dataclass
class Task:
    """An agent's open work item, as supplied by the task store."""

    task_id: str
    title: str = ""
    due_date: Optional[Union[date, datetime]] = None
    priority: int = 0
    effort_hours: float = 0.0
    estimated_commission: Decimal = Decimal('0')
    probability: float = 0.0
    status: str = "pending"
    client_name: Optional[str] = None
    notes: Optional[str] = None

    def __post_init__(self):
        """Keep commission exact regardless of how it was passed in."""
        self.estimated_commission = to_decimal(self.estimated_commission)

    @property
    def is_open(self) -> bool:
        return self.status == "pending"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Create a Task from a plain record (JSON/YAML row)."""
        task_id = data.get('id', data.get('task_id'))
        if task_id is None:
            raise ValueError(f"Task record missing id: {data!r}")

        try:
            effort_hours = float(data.get('effort_hours', 0.0))
            if not math.isfinite(effort_hours):
                raise ValueError(f"effort_hours must be finite, got {effort_hours}")
            probability = float(data.get('probability', 0.0))
            if not math.isfinite(probability):
                raise ValueError(f"probability must be finite, got {probability}")
            return cls(
                task_id=str(task_id),
                title=data.get('title') or '',
                due_date=parse_date(data.get('due_date')),
                priority=int(data.get('priority', 0)),
                effort_hours=effort_hours,
                estimated_commission=to_decimal(data.get('estimated_commission')),
                probability=probability,
                status=data.get('status', 'pending'),
                client_name=data.get('client_name'),
                notes=data.get('notes'),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Invalid task record {task_id!r}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain record for export."""
        return {
            'id': self.task_id,
            'title': self.title,
            'due_date': self.due_date.isoformat() if self.due_date is not None else None,
            'priority': self.priority,
            'effort_hours': self.effort_hours,
            'estimated_commission': str(self.estimated_commission),
            'probability': self.probability,
            'status': self.status,
            'client_name': self.client_name,
            'notes': self.notes,
        }


@dataclass(frozen=True)
class ScoredTask:
    """A task with its knapsack value and discretized effort.

    priority is the clamped priority that went into the value; ordering
    breaks value ties on it rather than on the raw task field.
    """

    task: Task
    value: float
    effort_units: int
    priority: int = 0

    @property
    def task_id(self) -> str:
        return self.task.task_id
