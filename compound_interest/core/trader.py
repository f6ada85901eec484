"""Weekly compounding with contributions and capital gains tax settled every year."""

from __future__ import annotations

from typing import Tuple

from compound_interest.core.validation import (
    InvalidArgument,
    checked,
    require_finite,
    require_non_negative,
)
from compound_interest.schemas.interest import TaxedGrowthResult

WEEKS_PER_YEAR = 52


def _grow_for_weeks(
    balance: float,
    weekly_rate: float,
    weeks: int,
    weekly_contribution: float,
) -> Tuple[float, float]:
    """Return (ending balance, deposits made) after `weeks` of growth and end-of-week deposits."""
    deposits = weekly_contribution * weeks
    factor = checked("weekly growth factor", lambda: (1.0 + weekly_rate) ** weeks)
    if weekly_rate == 0:
        deposits_value = deposits
    else:
        deposits_value = weekly_contribution * (factor - 1.0) / weekly_rate
    ending = checked("weekly balance", lambda: balance * factor + deposits_value)
    return ending, deposits


def calculate_weekly_with_yearly_tax(
    principal: float,
    weekly_rate: float,
    weeks: int,
    weekly_contribution: float,
    capital_gains_tax: float,
) -> TaxedGrowthResult:
    """
    Simulate a trading account that compounds weekly and pays tax on each year's profit.

    Tax is only charged on a positive yearly profit (growth above the year's starting
    balance and deposits); the after-tax balance carries into the next year. A trailing
    partial year is taxed pro rata, at rate * weeks / 52.
    """
    require_non_negative("principal", principal)
    require_finite("weekly_rate", weekly_rate)
    if weekly_rate <= -1:
        raise InvalidArgument(f"weekly_rate must be greater than -1, got {weekly_rate!r}")
    if isinstance(weeks, bool) or not isinstance(weeks, int) or weeks < 0:
        raise InvalidArgument(f"weeks must be a non-negative whole number, got {weeks!r}")
    require_non_negative("weekly_contribution", weekly_contribution)
    require_finite("capital_gains_tax", capital_gains_tax)
    if not 0 <= capital_gains_tax <= 1:
        raise InvalidArgument(
            f"capital_gains_tax must be between 0 and 1, got {capital_gains_tax!r}"
        )

    full_years, remaining_weeks = divmod(weeks, WEEKS_PER_YEAR)

    balance = principal
    total_tax = 0.0
    total_contributions = 0.0

    periods = [(WEEKS_PER_YEAR, capital_gains_tax)] * full_years
    if remaining_weeks:
        periods.append((remaining_weeks, capital_gains_tax * remaining_weeks / WEEKS_PER_YEAR))

    for period_weeks, tax_rate in periods:
        start = balance
        ending, deposits = _grow_for_weeks(start, weekly_rate, period_weeks, weekly_contribution)
        total_contributions += deposits

        profit = ending - start - deposits
        tax = profit * tax_rate if profit > 0 else 0.0
        total_tax += tax
        balance = ending - tax

    return TaxedGrowthResult(
        final_amount_after_tax=balance,
        profit_before_tax=balance + total_tax - principal - total_contributions,
        total_tax_paid=total_tax,
        total_contributions=total_contributions,
    )
