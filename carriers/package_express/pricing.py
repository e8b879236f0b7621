"""
Package Express Cost Model

Standard Package Express rate. The formula has no domain restriction: zero
and negative inputs are priced as given.
"""

import polars as pl

from .data import COST_DIVISOR
from .models import Measurement, Quote


class StandardCost:
    """cost = width * height * length * weight / 100"""

    name = "STANDARD"
    divisor = COST_DIVISOR

    @classmethod
    def amount(
        cls,
        width: Measurement,
        height: Measurement,
        length: Measurement,
        weight: Measurement,
    ) -> float:
        """Raw, unrounded cost."""
        return (width * height * length * weight) / cls.divisor

    @classmethod
    def price(
        cls,
        width: Measurement,
        height: Measurement,
        length: Measurement,
        weight: Measurement,
    ) -> Quote:
        return Quote(cls.amount(width, height, length, weight))

    @classmethod
    def expression(cls) -> pl.Expr:
        """Polars expression for the cost of each shipment frame row."""
        return (
            pl.col("width_in") * pl.col("height_in") * pl.col("length_in") * pl.col("weight_lbs")
        ) / cls.divisor
