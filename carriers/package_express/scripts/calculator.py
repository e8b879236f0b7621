"""
Package Express Cost Calculator
===============================

Interactive CLI tool to quote a single package for Package Express.

Asks for the weight first and stops right away if the package is too heavy.
Only then asks for width, height and length, checks the aggregate size, and
prints the quote.

Usage:
    python -m carriers.package_express.scripts.calculator
    python -m carriers.package_express.scripts.calculator --details
"""

import argparse
import math
import re
import sys
from dataclasses import dataclass

import polars as pl

from carriers.package_express.calculate_costs import calculate_costs
from carriers.package_express.models import PackageDimensions
from carriers.package_express.processor import PackageProcessor
from carriers.package_express.version import VERSION


WELCOME = "Welcome to Package Express. Please follow the instructions below."
DIMENSIONS = ["width", "height", "length"]

# Optional sign, digits with an optional decimal point, optional exponent
DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


# =============================================================================
# INPUT
# =============================================================================

@dataclass(frozen=True)
class InvalidInput:
    """A field whose text could not be read as a number."""

    field: str

    @property
    def message(self) -> str:
        return f"Invalid {self.field} input."


def parse_measurement(text: str | None, field: str) -> float | InvalidInput:
    """Parse a decimal token. Missing, blank, non-numeric, nan and inf are invalid."""
    if text is None:
        return InvalidInput(field)
    token = text.strip()
    if not DECIMAL.fullmatch(token):
        return InvalidInput(field)
    value = float(token)
    if not math.isfinite(value):
        return InvalidInput(field)
    return value


def read_line() -> str | None:
    """Next line from stdin, or None once input is exhausted."""
    try:
        return input()
    except EOFError:
        return None


def read_measurement(field: str) -> float | InvalidInput:
    """Prompt for one field and parse the answer."""
    print(f"Please enter the package {field}:")
    return parse_measurement(read_line(), field)


class DimensionsReader:
    """
    Prompts for width, height and length when called.

    Returns None at the first field that fails to parse and keeps that field
    in `invalid`, so the caller can report it.
    """

    def __init__(self):
        self.invalid: InvalidInput | None = None

    def __call__(self) -> PackageDimensions | None:
        values = {}
        for field in DIMENSIONS:
            value = read_measurement(field)
            if isinstance(value, InvalidInput):
                self.invalid = value
                return None
            values[field] = value
        return PackageDimensions(**values)


def create_shipment_df(weight: float, dimensions: PackageDimensions) -> pl.DataFrame:
    """Create a single-row DataFrame from user input."""
    return pl.DataFrame([{
        "weight_lbs": weight,
        "width_in": dimensions.width,
        "height_in": dimensions.height,
        "length_in": dimensions.length,
    }])


# =============================================================================
# OUTPUT
# =============================================================================

def print_results(df: pl.DataFrame) -> None:
    """Print the shipment frame breakdown."""
    row = df.row(0, named=True)

    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    print(f"\nPackage: {row['width_in']}x{row['height_in']}x{row['length_in']}, {row['weight_lbs']} lbs")
    print(f"Total size: {row['total_size_in']}")
    print(f"Weight check: {'passed' if row['eligible_weight'] else 'failed'}")
    print(f"Size check: {'passed' if row['eligible_size'] else 'failed'}")
    print(f"Raw cost: {row['cost_total']} ({row['cost_model']})")
    print(f"Calculator version: {row['calculator_version']}")
    print()


# =============================================================================
# RUN
# =============================================================================

def run(processor: PackageProcessor, details: bool = False) -> None:
    """Collect input and quote one package, printing each outcome."""
    weight = read_measurement("weight")
    if isinstance(weight, InvalidInput):
        print(weight.message)
        return

    reader = DimensionsReader()
    result = processor.run(weight, reader)

    if reader.invalid is not None:
        print(reader.invalid.message)
        return

    if result.rejection is not None:
        print(result.rejection.reason)
        return

    print(f"Your estimated total for shipping this package is: ${result.quote.display()}")
    print("Thank you!")

    if details:
        print_results(calculate_costs(create_shipment_df(weight, result.dimensions)))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Quote a single package for Package Express.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Print a calculation breakdown after the quote",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    args = parser.parse_args(argv)

    print(WELCOME)

    try:
        run(PackageProcessor(), details=args.details)
    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"An error occurred: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
