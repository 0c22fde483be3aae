"""What-if comparison between a base queue and a hypothetical one."""

import dataclasses
from typing import Dict, List, Optional

from ..engine.optimizer import OptimizerResult
from ..models.task import Task


def adjust_task(
    task: Task,
    probability: Optional[float] = None,
    effort_hours: Optional[float] = None,
    **changes,
) -> Task:
    """Return a modified copy of task; the original is left untouched."""
    if probability is not None:
        changes['probability'] = probability
    if effort_hours is not None:
        changes['effort_hours'] = effort_hours
    return dataclasses.replace(task, **changes)


class QueueChange:
    """How one task's place in the queue differs between two runs."""

    def __init__(self, task_id: str, change_type: str, description: str):
        self.task_id = task_id
        self.change_type = change_type  # 'added', 'removed', 'moved'
        self.description = description
        self.base_position: Optional[int] = None
        self.modified_position: Optional[int] = None


class WhatIfReport:
    """Differences between a base queue and a what-if queue."""

    def __init__(self, base: OptimizerResult, modified: OptimizerResult, changes: List[QueueChange]):
        self.base = base
        self.modified = modified
        self.changes = changes

    @property
    def value_delta(self) -> float:
        return self.modified.total_expected_value - self.base.total_expected_value

    @property
    def effort_delta_hours(self) -> float:
        return self.modified.total_effort_hours - self.base.total_effort_hours

    @property
    def overload_changed(self) -> bool:
        return self.base.overload_detected != self.modified.overload_detected

    def by_type(self, change_type: str) -> List[QueueChange]:
        return [c for c in self.changes if c.change_type == change_type]


class WhatIfAnalyzer:
    """Compares queues built before and after a hypothetical task change."""

    def compare(self, base: OptimizerResult, modified: OptimizerResult) -> WhatIfReport:
        """Classify every task whose queue membership or position changed."""
        changes = []

        base_positions = {task_id: i for i, task_id in enumerate(base.task_ids)}
        modified_positions = {task_id: i for i, task_id in enumerate(modified.task_ids)}

        for task_id, position in modified_positions.items():
            if task_id not in base_positions:
                change = QueueChange(
                    task_id=task_id,
                    change_type='added',
                    description=f"{task_id} enters the queue at #{position + 1}",
                )
            elif base_positions[task_id] != position:
                change = QueueChange(
                    task_id=task_id,
                    change_type='moved',
                    description=(
                        f"{task_id} moves from #{base_positions[task_id] + 1} to #{position + 1}"
                    ),
                )
                change.base_position = base_positions[task_id]
            else:
                continue
            change.modified_position = position
            changes.append(change)

        for task_id, position in base_positions.items():
            if task_id not in modified_positions:
                change = QueueChange(
                    task_id=task_id,
                    change_type='removed',
                    description=f"{task_id} drops out of the queue (was #{position + 1})",
                )
                change.base_position = position
                changes.append(change)

        return WhatIfReport(base, modified, changes)

    def generate_report(self, report: WhatIfReport) -> Dict:
        """Generate what-if report as a plain dictionary."""
        added = report.by_type('added')
        removed = report.by_type('removed')
        moved = report.by_type('moved')

        return {
            'summary': {
                'total_changes': len(report.changes),
                'added': len(added),
                'removed': len(removed),
                'moved': len(moved),
                'value_delta': report.value_delta,
                'effort_delta_hours': report.effort_delta_hours,
                'overload_before': report.base.overload_detected,
                'overload_after': report.modified.overload_detected,
            },
            'added': [
                {'task_id': c.task_id, 'description': c.description}
                for c in added
            ],
            'removed': [
                {'task_id': c.task_id, 'description': c.description}
                for c in removed
            ],
            'moved': [
                {'task_id': c.task_id, 'description': c.description}
                for c in moved
            ],
        }
