"""Allocation trace models for observability."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, List, Any

MANDATORY = 'mandatory'
SELECTED = 'selected'
NOT_SELECTED = 'not_selected'
SKIPPED_OVERLOAD = 'skipped_overload'


@dataclass
class AllocationDecision:
    """Records what happened to a single task."""

    task_id: str
    outcome: str
    value: float
    effort_units: int
    reason: str
    position: int = -1  # index in the final queue, -1 when not queued


@dataclass
class AllocationTrace:
    """Complete trace of a queue-building run."""

    run_id: str
    timestamp: datetime
    reference_date: datetime
    beta: float
    capacity_units: int
    mandatory_units: int
    config: Dict[str, Any]
    decisions: List[AllocationDecision]
    summary_stats: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Convert trace to dictionary for JSON export."""
        return asdict(self)

    def decision_for(self, task_id: str) -> AllocationDecision:
        for decision in self.decisions:
            if decision.task_id == task_id:
                return decision
        raise KeyError(task_id)

    def to_human_readable(self) -> str:
        """Generate human-readable log format."""
        lines = [
            f"=== Queue Run: {self.run_id} ===",
            f"Reference date: {self.reference_date}",
            f"Timestamp: {self.timestamp}",
            f"Beta: {self.beta:.3f}",
            f"Capacity: {self.capacity_units} units ({self.mandatory_units} mandatory)",
            "",
            "Configuration:",
        ]

        for key, value in self.config.items():
            lines.append(f"  {key}: {value}")

        lines.extend([
            "",
            "Decisions:",
        ])

        for decision in self.decisions:
            slot = f"#{decision.position + 1}" if decision.position >= 0 else "-"
            lines.append(
                f"  {decision.task_id} [{decision.outcome}] {slot}: "
                f"value {decision.value:.2f}, {decision.effort_units} units"
            )
            lines.append(f"    Reason: {decision.reason}")

        lines.extend([
            "",
            "Summary Statistics:",
        ])

        for key, value in self.summary_stats.items():
            lines.append(f"  {key}: {value}")

        lines.append("=" * 50)

        return "\n".join(lines)
