"""Task and commission-target sources consumed by the queue service."""

import json
import logging
import yaml
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .models.task import Task, to_decimal

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """Read access to the agent's tasks."""

    @abstractmethod
    def fetch_open_tasks(self) -> List[Task]:
        """Return all tasks that are not yet completed."""
        pass


class CommissionTargetSource(ABC):
    """Read access to monthly commission targets and earnings."""

    @abstractmethod
    def monthly_target(self, year: int, month: int) -> Decimal:
        """Target for the month, zero when none is recorded."""
        pass

    @abstractmethod
    def earned_so_far(self, year: int, month: int) -> Decimal:
        """Commission already earned in the month."""
        pass


class InMemoryTaskStore(TaskRepository, CommissionTargetSource):
    """Holds tasks and monthly targets in plain Python containers."""

    def __init__(
        self,
        tasks: Optional[Sequence[Task]] = None,
        targets: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        self.tasks = list(tasks or [])
        # keyed by 'YYYY-MM' -> {'target': ..., 'earned': ...}
        self.targets = targets or {}

    def fetch_open_tasks(self) -> List[Task]:
        return [task for task in self.tasks if task.is_open]

    def _month(self, year: int, month: int) -> Dict[str, Any]:
        return self.targets.get(f"{year:04d}-{month:02d}", {})

    def monthly_target(self, year: int, month: int) -> Decimal:
        return to_decimal(self._month(year, month).get('target'))

    def earned_so_far(self, year: int, month: int) -> Decimal:
        return to_decimal(self._month(year, month).get('earned'))


class FileTaskStore(InMemoryTaskStore):
    """Task store loaded from a YAML or JSON document.

    Expected shape::

        targets:
          "2026-10": {target: "5000", earned: "1200"}
        tasks:
          - id: t1
            title: Renewal call
            due_date: 2026-10-19
            priority: 2
            effort_hours: 1.5
            estimated_commission: "250.00"
            probability: 0.6
    """

    def __init__(self, path: str):
        self.path = Path(path)
        data = self._load(self.path)

        tasks = [Task.from_dict(row) for row in data.get('tasks') or []]
        targets = {str(k): v or {} for k, v in (data.get('targets') or {}).items()}

        logger.info(f"Loaded {len(tasks)} tasks and {len(targets)} monthly targets from {self.path}")

        super().__init__(tasks, targets)

    @staticmethod
    def _load(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Task file not found: {path}")

        with open(path, 'r') as f:
            if path.suffix.lower() in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported task file format: {path.suffix}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Task file must contain a mapping, got {type(data).__name__}")
        return data

    def save(self, path: Optional[str] = None):
        """Write tasks and targets back out as YAML or JSON."""
        out = Path(path) if path else self.path
        data = {
            'targets': {
                month: {key: str(amount) for key, amount in figures.items()}
                for month, figures in self.targets.items()
            },
            'tasks': [task.to_dict() for task in self.tasks],
        }
        with open(out, 'w') as f:
            if out.suffix.lower() == '.json':
                json.dump(data, f, indent=2, default=str)
            else:
                yaml.safe_dump(data, f, sort_keys=False)
