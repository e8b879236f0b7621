"""
Package Express Value Types

Plain values passed between the calculator and the processor. None of them
outlive a single quote.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP


# Weight or a single linear dimension, in caller-consistent units
Measurement = float


@dataclass(frozen=True)
class PackageDimensions:
    """Width, height and length of one package."""

    width: Measurement
    height: Measurement
    length: Measurement

    @property
    def total_size(self) -> Measurement:
        """Aggregate size: width + height + length."""
        return self.width + self.height + self.length


@dataclass(frozen=True)
class Quote:
    """
    Computed shipping price for one package.

    `amount` is kept exactly as the cost model produced it. Rounding to cents
    happens only in display().
    """

    amount: float

    def display(self) -> str:
        """Amount rounded half away from zero to 2 decimals, e.g. '2.40'."""
        if not math.isfinite(self.amount):
            return f"{self.amount:.2f}"
        cents = Decimal(repr(self.amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if cents == 0:
            cents = abs(cents)
        return f"{cents:.2f}"
