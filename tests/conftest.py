"""Shared fixtures for queue tests."""

from datetime import datetime
from decimal import Decimal

import pytest

from commission_queue.models.task import Task


@pytest.fixture
def today():
    return datetime(2026, 10, 19, 9, 0)


@pytest.fixture
def scenario_tasks():
    """One mandatory task and two optional ones competing for 50 units."""
    mandatory = Task(
        task_id="M",
        title="Overdue renewal",
        due_date=datetime(2026, 10, 19),
        priority=1,
        effort_hours=3.0,
        estimated_commission=Decimal("100"),
        probability=0.5,
    )
    x = Task(
        task_id="X",
        title="Fact finding",
        due_date=datetime(2026, 10, 22),
        priority=0,
        effort_hours=2.0,
        estimated_commission=Decimal("50"),
        probability=0.4,
    )
    y = Task(
        task_id="Y",
        title="Policy review",
        due_date=datetime(2026, 10, 23),
        priority=0,
        effort_hours=4.0,
        estimated_commission=Decimal("90"),
        probability=0.8,
    )
    return [mandatory, x, y]


TASK_FILE = """
targets:
  "2026-10": {target: "1000", earned: "1000"}
tasks:
  - id: M
    title: Overdue renewal
    due_date: 2026-10-19
    priority: 1
    effort_hours: 3.0
    estimated_commission: "100"
    probability: 0.5
  - id: X
    title: Fact finding
    due_date: 2026-10-22
    effort_hours: 2.0
    estimated_commission: "50"
    probability: 0.4
  - id: Y
    title: Policy review
    due_date: "2026-10-23T10:00:00"
    effort_hours: 4.0
    estimated_commission: "90.00"
    probability: 0.8
  - id: done
    title: Signed last week
    status: completed
    effort_hours: 1.0
    estimated_commission: "400"
"""


@pytest.fixture
def task_file(tmp_path):
    path = tmp_path / "tasks.yaml"
    path.write_text(TASK_FILE)
    return path
