"""
Weight Eligibility (WGT)

Rejects packages heavier than the Package Express weight limit.
"""

from shared.eligibility import EligibilityCheck

from ..data import WEIGHT_LIMIT_LBS, WEIGHT_FIELD


class WGT(EligibilityCheck):
    """Weight check - actual weight must not exceed 50 lbs."""

    # Identity
    name = "WGT"

    # Rule
    field = WEIGHT_FIELD
    threshold = WEIGHT_LIMIT_LBS
    reason = "Package too heavy to be shipped via Package Express. Have a good day."
