"""
Shared Eligibility

Base class and result types for shipping tier eligibility checks.
"""

from .base import EligibilityCheck, EligibilityResult, Eligible, Rejected

__all__ = [
    "EligibilityCheck",
    "EligibilityResult",
    "Eligible",
    "Rejected",
]
