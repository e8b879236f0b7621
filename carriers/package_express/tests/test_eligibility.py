"""
Unit Tests for Package Express Eligibility Checks

Tests weight and size thresholds, rejection messages, and registry validation.

Run with: pytest carriers/package_express/tests/test_eligibility.py -v
"""

import pytest

from carriers.package_express.eligibility import (
    ALL,
    CHECKS,
    ORDER,
    SIZE,
    WGT,
    CheckKind,
    Eligible,
    Rejected,
    validate_checks,
)


HEAVY = "Package too heavy to be shipped via Package Express. Have a good day."
BIG = "Package too big to be shipped via Package Express."


# =============================================================================
# WEIGHT TESTS
# =============================================================================

class TestWeightCheck:
    """Tests for the weight limit."""

    @pytest.mark.parametrize("weight", [0.0, 1.0, 10.0, 49.99, 50.0])
    def test_eligible_up_to_limit(self, weight):
        """Weight <= 50 is eligible."""
        assert WGT.check(weight) == Eligible(check="WGT")

    @pytest.mark.parametrize("weight", [50.0001, 51.0, 60.0, 1000.0])
    def test_rejected_over_limit(self, weight):
        """Weight > 50 is rejected with the heavy-package message."""
        result = WGT.check(weight)
        assert isinstance(result, Rejected)
        assert result.reason == HEAVY
        assert result.check == "WGT"

    def test_limit_is_inclusive(self):
        """Exactly 50 passes."""
        assert WGT.check(50).is_eligible

    def test_negative_weight_passes(self):
        """Negative weight is not rejected by the current policy."""
        assert WGT.check(-5.0).is_eligible

    def test_idempotent(self):
        """Same input, same result."""
        assert WGT.check(60.0) == WGT.check(60.0)
        assert WGT.check(10.0) == WGT.check(10.0)


# =============================================================================
# SIZE TESTS
# =============================================================================

class TestSizeCheck:
    """Tests for the aggregate size limit."""

    @pytest.mark.parametrize("total_size", [0.0, 9.0, 49.5, 50.0])
    def test_eligible_up_to_limit(self, total_size):
        """Total size <= 50 is eligible."""
        assert SIZE.check(total_size) == Eligible(check="SIZE")

    @pytest.mark.parametrize("total_size", [50.0001, 60.0, 150.0])
    def test_rejected_over_limit(self, total_size):
        """Total size > 50 is rejected with the oversize message."""
        result = SIZE.check(total_size)
        assert isinstance(result, Rejected)
        assert result.reason == BIG
        assert not result.is_eligible

    def test_checks_value_as_given(self):
        """SIZE does not sum anything itself: it judges the value it is handed."""
        assert SIZE.check(20.0).is_eligible
        assert not SIZE.check(60.0).is_eligible

    def test_idempotent(self):
        """Same input, same result."""
        assert SIZE.check(60.0) == SIZE.check(60.0)
        assert SIZE.check(9.0) == SIZE.check(9.0)


# =============================================================================
# REGISTRY TESTS
# =============================================================================

class TestRegistry:
    """Tests for the check registry and its import-time validation."""

    def test_registry_keys(self):
        assert CHECKS[CheckKind.WEIGHT] is WGT
        assert CHECKS[CheckKind.SIZE] is SIZE

    def test_processing_order(self):
        """Weight runs before size."""
        assert ORDER == [CheckKind.WEIGHT, CheckKind.SIZE]
        assert ALL == [WGT, SIZE]

    def test_thresholds_are_independent(self):
        """Each check carries its own limit."""
        assert WGT.threshold == 50
        assert SIZE.threshold == 50
        assert WGT.field != SIZE.field

    def test_valid_registry_passes(self):
        validate_checks(CHECKS)

    def test_missing_kind_raises(self):
        with pytest.raises(ValueError, match="no check registered for: SIZE"):
            validate_checks({CheckKind.WEIGHT: WGT})

    def test_duplicate_names_raise(self):
        class WGT2(WGT):
            field = "other_field"

        with pytest.raises(ValueError, match="duplicate check names"):
            validate_checks({CheckKind.WEIGHT: WGT, CheckKind.SIZE: WGT2})

    def test_shared_field_raises(self):
        class SIZE2(SIZE):
            field = WGT.field

        with pytest.raises(ValueError, match="share a frame field"):
            validate_checks({CheckKind.WEIGHT: WGT, CheckKind.SIZE: SIZE2})

    def test_non_numeric_threshold_raises(self):
        class SIZE2(SIZE):
            threshold = "50"

        with pytest.raises(ValueError, match="threshold must be numeric"):
            validate_checks({CheckKind.WEIGHT: WGT, CheckKind.SIZE: SIZE2})
