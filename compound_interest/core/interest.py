"""Closed-form compound interest calculations."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Tuple

from compound_interest.core.validation import (
    InvalidArgument,
    checked,
    periodic_base,
    require_compounding,
    require_finite,
    require_non_negative,
    require_positive,
)
from compound_interest.schemas.interest import (
    Breakdown,
    FrequencyComparison,
    InterestParams,
    InterestResult,
)

MONTHS_PER_YEAR = 12

STANDARD_FREQUENCIES: Tuple[Tuple[str, int], ...] = (
    ("Annually", 1),
    ("Semi-annually", 2),
    ("Quarterly", 4),
    ("Monthly", 12),
    ("Daily", 365),
)


def _validate_params(params: InterestParams) -> None:
    require_non_negative("principal", params.principal)
    require_finite("annual_rate", params.annual_rate)
    require_compounding(params.compounds_per_year)
    require_non_negative("years", params.years)


def _growth_factor(annual_rate: float, compounds_per_year: int, years: float) -> float:
    """(1 + r/n)^(n*t); a zero base is allowed since it simply means total loss."""
    base = periodic_base(annual_rate, compounds_per_year, allow_zero=True)
    return checked("growth factor", lambda: base ** (compounds_per_year * years))


def _effective_annual_rate(annual_rate: float, compounds_per_year: int) -> float:
    base = periodic_base(annual_rate, compounds_per_year, allow_zero=True)
    return checked("effective annual rate", lambda: base**compounds_per_year - 1.0)


def calculate_compound_interest(params: InterestParams) -> InterestResult:
    """
    Project a lump sum using A = P(1 + r/n)^(nt).

    total_interest is everything earned above the principal; effective_annual_rate
    is the once-a-year rate that grows money at the same pace.
    """
    _validate_params(params)

    factor = _growth_factor(params.annual_rate, params.compounds_per_year, params.years)
    final_amount = checked("final amount", lambda: params.principal * factor)

    return InterestResult(
        final_amount=final_amount,
        total_interest=final_amount - params.principal,
        principal=params.principal,
        effective_annual_rate=_effective_annual_rate(params.annual_rate, params.compounds_per_year),
    )


def future_value_of_monthly_contributions(
    monthly_contribution: float,
    annual_rate: float,
    years: float,
) -> float:
    """
    Future value of a deposit made at the end of every month.

    Always compounds monthly, whatever frequency the lump sum uses. A zero rate
    falls back to the plain sum of deposits, the limit of the annuity formula.
    """
    require_non_negative("monthly_contribution", monthly_contribution)
    require_finite("annual_rate", annual_rate)
    require_non_negative("years", years)

    total_months = years * MONTHS_PER_YEAR
    if annual_rate == 0:
        return checked("contribution future value", lambda: monthly_contribution * total_months)

    monthly_rate = annual_rate / MONTHS_PER_YEAR
    base = periodic_base(annual_rate, MONTHS_PER_YEAR, allow_zero=True)
    return checked(
        "contribution future value",
        lambda: monthly_contribution * (base**total_months - 1.0) / monthly_rate,
    )


def calculate_compound_interest_with_contributions(
    params: InterestParams,
    monthly_contribution: float,
) -> InterestResult:
    """Lump-sum growth plus a stream of monthly deposits; deposits are not counted as interest."""
    lump_sum = calculate_compound_interest(params)
    contributions_value = future_value_of_monthly_contributions(
        monthly_contribution, params.annual_rate, params.years
    )

    final_amount = checked("final amount", lambda: lump_sum.final_amount + contributions_value)
    total_contributions = monthly_contribution * MONTHS_PER_YEAR * params.years
    total_interest = checked(
        "total interest", lambda: final_amount - params.principal - total_contributions
    )

    return InterestResult(
        final_amount=final_amount,
        total_interest=total_interest,
        principal=params.principal,
        effective_annual_rate=lump_sum.effective_annual_rate,
    )


def calculate_time_to_target(
    principal: float,
    target_amount: float,
    annual_rate: float,
    compounds_per_year: int,
) -> float:
    """
    Years until principal grows to target_amount, t = ln(A/P) / (n ln(1 + r/n)).

    A target at or below the principal is already reached and yields 0.0.
    """
    require_positive("principal", principal)
    require_positive("target_amount", target_amount)
    require_positive("annual_rate", annual_rate)
    compounds_per_year = require_compounding(compounds_per_year)

    if target_amount <= principal:
        return 0.0

    return checked(
        "time to target",
        lambda: math.log(target_amount / principal)
        / (compounds_per_year * math.log1p(annual_rate / compounds_per_year)),
    )


def calculate_principal_for_target(
    target_amount: float,
    annual_rate: float,
    compounds_per_year: int,
    years: float,
) -> float:
    """Principal needed today to reach target_amount after years, P = A / (1 + r/n)^(nt)."""
    require_non_negative("target_amount", target_amount)
    require_finite("annual_rate", annual_rate)
    compounds_per_year = require_compounding(compounds_per_year)
    require_non_negative("years", years)

    base = periodic_base(annual_rate, compounds_per_year)
    factor = checked("growth factor", lambda: base ** (compounds_per_year * years))
    return checked("required principal", lambda: target_amount / factor)


def generate_breakdown(params: InterestParams) -> Breakdown:
    """
    Year-by-year snapshot keyed 1..ceil(years).

    Each entry is the projection stopped at that year; the last one uses the
    exact (possibly fractional) horizon instead of rounding up.
    """
    _validate_params(params)

    last_year = math.ceil(params.years)
    breakdown: Breakdown = {}
    for year in range(1, last_year + 1):
        breakdown[year] = calculate_compound_interest(params.with_years(min(float(year), params.years)))
    return breakdown


def compare_compounding_frequencies(
    principal: float,
    annual_rate: float,
    years: float,
    frequencies: Optional[Iterable[Tuple[str, int]]] = None,
) -> List[FrequencyComparison]:
    """Run the same lump sum through several compounding frequencies."""
    rows: List[FrequencyComparison] = []
    for label, compounds_per_year in STANDARD_FREQUENCIES if frequencies is None else frequencies:
        compounds_per_year = require_compounding(compounds_per_year)
        params = InterestParams(
            principal=principal,
            annual_rate=annual_rate,
            compounds_per_year=compounds_per_year,
            years=years,
        )
        rows.append(
            FrequencyComparison(
                label=label,
                compounds_per_year=compounds_per_year,
                result=calculate_compound_interest(params),
            )
        )
    if not rows:
        raise InvalidArgument("at least one compounding frequency is required")
    return rows
