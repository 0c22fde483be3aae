"""Synthetic agent task generator."""

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List

from ..models.task import ScoredTask, Task


class TaskGenerator:
    """Generates deterministic task sets for demos and tests."""

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.gen_config = self.config.get('generator', {})

    def generate_tasks(
        self,
        count: int,
        today: datetime,
        due_date_range_days: int = 10,
    ) -> List[Task]:
        """Generate an agent's open tasks around the reference date."""
        tasks = []
        kinds = ['follow-up call', 'policy review', 'claim paperwork', 'renewal', 'fact finding']
        clients = ['Tan', 'Lim', 'Ng', 'Wong', 'Chua', 'Goh']
        overdue_ratio = self.gen_config.get('overdue_ratio', 0.2)
        undated_ratio = self.gen_config.get('undated_ratio', 0.1)
        max_commission = self.gen_config.get('max_commission', 500)

        for i in range(count):
            task_id = f"task_{i:03d}"

            # Mix of overdue, due today, undated and future work
            roll = self.random.random()
            if roll < undated_ratio:
                due_date = None
            elif roll < undated_ratio + overdue_ratio:
                due_date = today - timedelta(days=self.random.randint(0, 3))
            else:
                due_date = today + timedelta(days=self.random.randint(1, due_date_range_days))

            # Effort in tenths of an hour, 0.2h to 4h
            effort_hours = self.random.randint(2, 40) / 10

            # Whole-dollar commissions; some tasks earn nothing directly
            if self.random.random() < 0.2:
                commission = Decimal('0')
            else:
                commission = Decimal(self.random.randint(10, max_commission))

            task = Task(
                task_id=task_id,
                title=f"{self.random.choice(kinds).capitalize()} #{i}",
                due_date=due_date,
                priority=self.random.randint(0, 3),
                effort_hours=effort_hours,
                estimated_commission=commission,
                probability=round(self.random.random(), 1),
                client_name=self.random.choice(clients),
            )

            tasks.append(task)

        return tasks

    def generate_scored_items(self, count: int, max_units: int = 30, max_value: int = 100) -> List[ScoredTask]:
        """Generate knapsack items with integer-ish values for solver checks."""
        items = []
        for i in range(count):
            task = Task(task_id=f"item_{i:03d}")
            items.append(ScoredTask(
                task=task,
                value=self.random.randint(0, max_value * 10) / 10,
                effort_units=self.random.randint(0, max_units),
            ))
        return items

    def generate_task_stream(
        self,
        today: datetime,
        task_count: int = None,
        due_date_range_days: int = None,
    ) -> List[Task]:
        """Generate a task set sized from configuration."""
        task_count = task_count or self.gen_config.get('task_count', 12)
        due_date_range_days = due_date_range_days or self.gen_config.get('due_date_range_days', 10)

        return self.generate_tasks(task_count, today, due_date_range_days)
