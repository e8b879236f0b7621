"""
Size Eligibility (SIZE)

Rejects packages whose aggregate size (width + height + length) exceeds the
Package Express size limit. The sum is computed by the caller, not here.
"""

from shared.eligibility import EligibilityCheck

from ..data import SIZE_LIMIT_IN, SIZE_FIELD


class SIZE(EligibilityCheck):
    """Size check - width + height + length must not exceed 50 in."""

    # Identity
    name = "SIZE"

    # Rule
    field = SIZE_FIELD
    threshold = SIZE_LIMIT_IN
    reason = "Package too big to be shipped via Package Express."
