"""
Package Express Data

Static reference configuration for eligibility limits and pricing.

Structure:
    - reference/limits.py:  Weight and size thresholds, frame field names
    - reference/pricing.py: Cost formula constants
"""

from .reference.limits import (
    WEIGHT_LIMIT_LBS,
    SIZE_LIMIT_IN,
    WEIGHT_FIELD,
    SIZE_FIELD,
    DIMENSION_FIELDS,
)
from .reference.pricing import COST_DIVISOR

__all__ = [
    "WEIGHT_LIMIT_LBS",
    "SIZE_LIMIT_IN",
    "WEIGHT_FIELD",
    "SIZE_FIELD",
    "DIMENSION_FIELDS",
    "COST_DIVISOR",
]
