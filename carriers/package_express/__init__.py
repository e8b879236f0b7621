"""
Package Express Carrier Module

Eligibility checks and cost quote for the Package Express shipping tier.
"""

from .calculate_costs import calculate_costs
from .models import PackageDimensions, Quote
from .processor import PackageProcessor, PipelineResult, Stage
from .version import VERSION

__all__ = [
    "calculate_costs",
    "PackageDimensions",
    "Quote",
    "PackageProcessor",
    "PipelineResult",
    "Stage",
    "VERSION",
]
