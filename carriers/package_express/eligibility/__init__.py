"""
Eligibility Package

Exports all Package Express eligibility checks.

Processing Order:
    1. WEIGHT - runs on the raw weight, before dimensions are collected
    2. SIZE   - runs on width + height + length, only if WEIGHT passed

The set of checks is closed. CHECKS maps each CheckKind to its class. ORDER
records the processing sequence above and ALL lists the classes in that
order; PackageProcessor.run applies them in the same sequence.
"""

from enum import Enum

from shared.eligibility import EligibilityCheck, EligibilityResult, Eligible, Rejected
from .weight import WGT
from .size import SIZE


class CheckKind(Enum):
    WEIGHT = "weight"
    SIZE = "size"


CHECKS: dict[CheckKind, type[EligibilityCheck]] = {
    CheckKind.WEIGHT: WGT,
    CheckKind.SIZE: SIZE,
}

ORDER = [CheckKind.WEIGHT, CheckKind.SIZE]

# All checks, in processing order
ALL = [CHECKS[kind] for kind in ORDER]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_checks(checks: dict[CheckKind, type[EligibilityCheck]] = CHECKS) -> None:
    """
    Validate check configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    missing = [kind.name for kind in CheckKind if kind not in checks]
    if missing:
        errors.append(f"no check registered for: {', '.join(missing)}")

    names = [c.name for c in checks.values()]
    if len(names) != len(set(names)):
        errors.append(f"duplicate check names: {names}")

    fields = [c.field for c in checks.values()]
    if len(fields) != len(set(fields)):
        errors.append(f"checks share a frame field: {fields}")

    for kind, c in checks.items():
        for attr in ("name", "field", "threshold", "reason"):
            if getattr(c, attr, None) is None:
                errors.append(f"{kind.name}: missing '{attr}'")

        threshold = getattr(c, "threshold", None)
        if threshold is not None and not isinstance(threshold, (int, float)):
            errors.append(f"{kind.name}: threshold must be numeric, got {threshold!r}")

    if errors:
        raise ValueError("Eligibility configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_checks()

__all__ = [
    # Base
    "EligibilityCheck",
    "EligibilityResult",
    "Eligible",
    "Rejected",
    # Check classes
    "WGT",
    "SIZE",
    # Registry
    "CheckKind",
    "CHECKS",
    "ORDER",
    "ALL",
    # Helpers
    "validate_checks",
]
