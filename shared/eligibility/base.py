"""
Eligibility Base Class

Shared base class and result types for all shipping tier eligibility checks.
"""

from abc import ABC
from dataclasses import dataclass

import polars as pl


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class Eligible:
    """Package passed a check."""

    check: str

    @property
    def is_eligible(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """Package failed a check. The reason is shown to the user verbatim."""

    check: str
    reason: str

    @property
    def is_eligible(self) -> bool:
        return False


EligibilityResult = Eligible | Rejected


# =============================================================================
# BASE CLASS
# =============================================================================

class EligibilityCheck(ABC):
    """
    Base class for all eligibility checks.

    Attributes:
        IDENTITY
            name        - Short code (e.g., "WGT", "SIZE")

        RULE
            field       - Shipment frame column the threshold applies to
            threshold   - Inclusive upper limit (value <= threshold passes)
            reason      - Message returned when the check fails
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # RULE
    # -------------------------------------------------------------------------
    field: str
    threshold: float
    reason: str

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def passes(cls, value: float) -> bool:
        """True if value is within the inclusive threshold."""
        return value <= cls.threshold

    @classmethod
    def check(cls, value: float) -> EligibilityResult:
        """Evaluate a single measurement."""
        if cls.passes(value):
            return Eligible(check=cls.name)
        return Rejected(check=cls.name, reason=cls.reason)

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this check passes.

        Evaluated against the shipment frame column named by `field`.
        """
        return pl.col(cls.field) <= cls.threshold
