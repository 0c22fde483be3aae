"""Allocation policy implementations."""

from .base import AllocationPolicy
from .commission import CommissionPolicy, effort_to_units, estimate_beta

__all__ = ['AllocationPolicy', 'CommissionPolicy', 'effort_to_units', 'estimate_beta']
