"""Configuration management."""

import json
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        elif path.suffix.lower() == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'optimizer': {
            'granularity': 10,  # effort units per hour
            'alpha': 0.1,  # priority bonus weight
            'default_daily_hours': 8.0,
            'beta_min': 1.0,
            'beta_max': 2.0,
            'max_daily_hours': 24.0,
            'high_priority_threshold': 2,
        },
        'generator': {
            'task_count': 12,
            'due_date_range_days': 10,
            'overdue_ratio': 0.2,
            'undated_ratio': 0.1,
            'max_commission': 500,
        },
    }


@dataclass(frozen=True)
class OptimizerConfig:
    """Immutable parameter set for the allocation engine."""

    granularity: int = 10
    alpha: float = 0.1
    default_daily_hours: float = 8.0
    beta_min: float = 1.0
    beta_max: float = 2.0
    max_daily_hours: float = 24.0
    high_priority_threshold: int = 2

    def __post_init__(self):
        if self.granularity <= 0:
            raise ValueError(f"granularity must be positive, got {self.granularity}")
        if self.beta_min > self.beta_max:
            raise ValueError(
                f"beta_min ({self.beta_min}) must not exceed beta_max ({self.beta_max})"
            )

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> "OptimizerConfig":
        """Build from the 'optimizer' section of a loaded config dict."""
        section = (config or {}).get('optimizer') or {}
        defaults = cls()
        return cls(
            granularity=int(section.get('granularity', defaults.granularity)),
            alpha=float(section.get('alpha', defaults.alpha)),
            default_daily_hours=float(section.get('default_daily_hours', defaults.default_daily_hours)),
            beta_min=float(section.get('beta_min', defaults.beta_min)),
            beta_max=float(section.get('beta_max', defaults.beta_max)),
            max_daily_hours=float(section.get('max_daily_hours', defaults.max_daily_hours)),
            high_priority_threshold=int(
                section.get('high_priority_threshold', defaults.high_priority_threshold)
            ),
        )
