"""
Package Express Processor

Validate-then-price pipeline for a single package.

PROCESSING ORDER
----------------
    1. check_weight  - weight against the weight limit
    2. check_size    - width + height + length against the size limit
    3. price         - cost formula

Each stage is reached only if every earlier stage passed. A rejection is a
normal outcome returned as a Rejected value, never raised and never printed
here. Reporting it is up to the caller.

Dimensions may be passed as a callable. It is only invoked once the weight
check has passed, so an interactive caller never asks for dimensions of a
package that is already too heavy.

USAGE
-----
    from carriers.package_express.processor import PackageProcessor
    result = PackageProcessor().run(10, PackageDimensions(2, 3, 4))
    result.quote.display()  # '2.40'
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .eligibility import CHECKS, CheckKind, EligibilityCheck, EligibilityResult, Rejected
from .models import Measurement, PackageDimensions, Quote
from .pricing import StandardCost


class Stage(Enum):
    START = "start"
    WEIGHT_CHECKED = "weight_checked"
    SIZE_CHECKED = "size_checked"
    PRICED = "priced"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of one run.

    `stages` is the path walked, always starting at START. It ends at PRICED
    with a quote, at REJECTED with a rejection, or at WEIGHT_CHECKED if the
    dimensions callable returned None.
    """

    stages: tuple[Stage, ...]
    quote: Quote | None = None
    rejection: Rejected | None = None
    dimensions: PackageDimensions | None = None

    @property
    def stage(self) -> Stage:
        return self.stages[-1]

    @property
    def is_priced(self) -> bool:
        return self.stage is Stage.PRICED

    @property
    def rejected_at(self) -> Stage | None:
        """Last stage passed before the rejection (START or WEIGHT_CHECKED)."""
        if self.stage is not Stage.REJECTED:
            return None
        return self.stages[-2]


DimensionsSource = PackageDimensions | Callable[[], PackageDimensions | None]


class PackageProcessor:
    """
    Sequences the eligibility checks and the cost model.

    Holds no state between calls; one instance can quote any number of
    packages.
    """

    def __init__(
        self,
        checks: dict[CheckKind, type[EligibilityCheck]] | None = None,
        cost_model: type[StandardCost] = StandardCost,
    ):
        self.checks = CHECKS if checks is None else checks
        self.cost_model = cost_model

    # -------------------------------------------------------------------------
    # STAGES
    # -------------------------------------------------------------------------

    def check_weight(self, weight: Measurement) -> EligibilityResult:
        return self.checks[CheckKind.WEIGHT].check(weight)

    def check_size(self, total_size: Measurement) -> EligibilityResult:
        """Check aggregate size. The caller sums width + height + length."""
        return self.checks[CheckKind.SIZE].check(total_size)

    def price(
        self,
        width: Measurement,
        height: Measurement,
        length: Measurement,
        weight: Measurement,
    ) -> Quote:
        return self.cost_model.price(width, height, length, weight)

    # -------------------------------------------------------------------------
    # FULL RUN
    # -------------------------------------------------------------------------

    def run(self, weight: Measurement, dimensions: DimensionsSource) -> PipelineResult:
        """
        Run all stages in order, stopping at the first rejection.

        START -> WEIGHT_CHECKED -> SIZE_CHECKED -> PRICED, or REJECTED after
        either check.
        """
        stages = [Stage.START]

        result = self.check_weight(weight)
        if isinstance(result, Rejected):
            return PipelineResult((*stages, Stage.REJECTED), rejection=result)
        stages.append(Stage.WEIGHT_CHECKED)

        if callable(dimensions):
            dimensions = dimensions()
            if dimensions is None:
                return PipelineResult(tuple(stages))

        result = self.check_size(dimensions.total_size)
        if isinstance(result, Rejected):
            return PipelineResult((*stages, Stage.REJECTED), rejection=result, dimensions=dimensions)
        stages.append(Stage.SIZE_CHECKED)

        quote = self.price(dimensions.width, dimensions.height, dimensions.length, weight)
        return PipelineResult((*stages, Stage.PRICED), quote=quote, dimensions=dimensions)


__all__ = [
    "DimensionsSource",
    "PackageProcessor",
    "PipelineResult",
    "Stage",
]
