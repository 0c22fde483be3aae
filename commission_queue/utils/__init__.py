"""Utility functions."""

from .config import OptimizerConfig, get_default_config, load_config
from .datetime_utils import is_due_by, is_mandatory_due, is_same_day, parse_date

__all__ = [
    'OptimizerConfig',
    'get_default_config',
    'load_config',
    'is_due_by',
    'is_mandatory_due',
    'is_same_day',
    'parse_date',
]
