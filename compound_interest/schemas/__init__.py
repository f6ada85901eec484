"""Data contracts shared by the calculators and the interactive menu."""

from compound_interest.schemas.interest import (
    Breakdown,
    FrequencyComparison,
    InterestParams,
    InterestResult,
    TaxedGrowthResult,
)

__all__ = [
    "Breakdown",
    "FrequencyComparison",
    "InterestParams",
    "InterestResult",
    "TaxedGrowthResult",
]
