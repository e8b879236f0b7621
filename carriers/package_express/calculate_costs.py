"""
Package Express Shipping Cost Calculator

DataFrame in, DataFrame out, for the shipment frame of a single package. The
frame path applies the same checks and cost formula as PackageProcessor, in
the same order, and is used to render the calculator's result summary.

REQUIRED INPUT COLUMNS
----------------------
    weight_lbs          - Actual weight
    width_in            - Package width
    height_in           - Package height
    length_in           - Package length

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - total_size_in

    calculate() adds:
        - eligible_weight, eligible_size (null if the weight check failed)
        - rejection_reason (null if eligible)
        - cost_total (null if rejected)
        - cost_model
        - calculator_version

USAGE
-----
    from carriers.package_express.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from .version import VERSION
from .data import WEIGHT_FIELD, SIZE_FIELD, DIMENSION_FIELDS
from .eligibility import WGT, SIZE
from .pricing import StandardCost


REQUIRED_COLUMNS = [WEIGHT_FIELD, *DIMENSION_FIELDS]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate the Package Express quote for a shipment DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with supplemented data, eligibility flags, and cost
    """
    df = supplement_shipments(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate input columns and add aggregate size.

    Raises:
        ValueError: if any required column is missing
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Shipment frame is missing required columns: {missing}")

    return df.with_columns(
        pl.sum_horizontal(*DIMENSION_FIELDS).alias(SIZE_FIELD)
    )


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Apply eligibility checks and price eligible shipments.

    Processing order:
        1. Weight check
        2. Size check     - only evaluated where the weight check passed
        3. Rejection reason
        4. Cost           - only where both checks passed, with the cost model name
        5. Version stamp
    """
    df = _apply_weight_check(df)
    df = _apply_size_check(df)
    df = _add_rejection_reason(df)
    df = _calculate_total(df)
    df = _stamp_version(df)
    return df


def _apply_weight_check(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(WGT.conditions().alias("eligible_weight"))


def _apply_size_check(df: pl.DataFrame) -> pl.DataFrame:
    """Size is only checked once weight has passed; otherwise the flag stays null."""
    return df.with_columns(
        pl.when(pl.col("eligible_weight"))
        .then(SIZE.conditions())
        .otherwise(pl.lit(None, dtype=pl.Boolean))
        .alias("eligible_size")
    )


def _add_rejection_reason(df: pl.DataFrame) -> pl.DataFrame:
    """First failing check wins."""
    return df.with_columns(
        pl.when(~pl.col("eligible_weight"))
        .then(pl.lit(WGT.reason))
        .when(~pl.col("eligible_size"))
        .then(pl.lit(SIZE.reason))
        .otherwise(pl.lit(None, dtype=pl.Utf8))
        .alias("rejection_reason")
    )


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns([
        pl.when(pl.col("rejection_reason").is_null())
        .then(StandardCost.expression())
        .otherwise(pl.lit(None, dtype=pl.Float64))
        .alias("cost_total"),

        pl.lit(StandardCost.name).alias("cost_model"),
    ])


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
]
