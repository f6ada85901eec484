"""Compound interest projections: future value, required principal, time to target."""

from compound_interest.core.formatting import (
    format_currency,
    format_growth_factor,
    format_percentage,
)
from compound_interest.core.interest import (
    STANDARD_FREQUENCIES,
    calculate_compound_interest,
    calculate_compound_interest_with_contributions,
    calculate_principal_for_target,
    calculate_time_to_target,
    compare_compounding_frequencies,
    future_value_of_monthly_contributions,
    generate_breakdown,
)
from compound_interest.core.trader import calculate_weekly_with_yearly_tax
from compound_interest.core.validation import InvalidArgument
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
    "InvalidArgument",
    "STANDARD_FREQUENCIES",
    "TaxedGrowthResult",
    "calculate_compound_interest",
    "calculate_compound_interest_with_contributions",
    "calculate_principal_for_target",
    "calculate_time_to_target",
    "calculate_weekly_with_yearly_tax",
    "compare_compounding_frequencies",
    "format_currency",
    "format_growth_factor",
    "format_percentage",
    "future_value_of_monthly_contributions",
    "generate_breakdown",
]
