from __future__ import annotations

from math import isclose

import pytest

from compound_interest import (
    InterestParams,
    InvalidArgument,
    calculate_compound_interest,
    calculate_compound_interest_with_contributions,
    future_value_of_monthly_contributions,
)


def test_monthly_contributions_over_twenty_years():
    """
    10,000 at 6% compounded monthly plus 500 a month for 20 years:
    33,102.04 from the lump sum and 231,020.45 from the deposits.
    """
    params = InterestParams(principal=10000.0, annual_rate=0.06, compounds_per_year=12, years=20.0)

    result = calculate_compound_interest_with_contributions(params, 500.0)

    assert isclose(result.final_amount, 264122.49, abs_tol=1.0)
    assert isclose(result.total_interest, result.final_amount - 10000.0 - 120000.0, abs_tol=1e-6)
    assert result.principal == 10000.0


def test_zero_rate_is_principal_plus_deposits():
    params = InterestParams(principal=10000.0, annual_rate=0.0, compounds_per_year=4, years=20.0)

    result = calculate_compound_interest_with_contributions(params, 500.0)

    assert isclose(result.final_amount, 130000.0, abs_tol=1e-9)
    assert isclose(result.total_interest, 0.0, abs_tol=1e-9)
    assert result.effective_annual_rate == 0.0


def test_annuity_always_compounds_monthly():
    """The deposit term ignores the lump sum's frequency; only the lump sum changes."""
    annual = InterestParams(principal=1000.0, annual_rate=0.05, compounds_per_year=1, years=10.0)
    daily = annual.model_copy(update={"compounds_per_year": 365})

    annual_result = calculate_compound_interest_with_contributions(annual, 100.0)
    daily_result = calculate_compound_interest_with_contributions(daily, 100.0)

    deposits = future_value_of_monthly_contributions(100.0, 0.05, 10.0)
    assert isclose(
        annual_result.final_amount - deposits,
        calculate_compound_interest(annual).final_amount,
        abs_tol=1e-6,
    )
    assert isclose(
        daily_result.final_amount - deposits,
        calculate_compound_interest(daily).final_amount,
        abs_tol=1e-6,
    )
    assert isclose(annual_result.effective_annual_rate, 0.05, abs_tol=1e-12)


def test_contributions_increase_final_amount():
    params = InterestParams(principal=1000.0, annual_rate=0.05, compounds_per_year=12, years=10.0)

    with_deposits = calculate_compound_interest_with_contributions(params, 100.0)
    without = calculate_compound_interest(params)

    assert with_deposits.final_amount > without.final_amount


def test_zero_contribution_matches_lump_sum():
    params = InterestParams(principal=2500.0, annual_rate=0.04, compounds_per_year=4, years=3.0)

    result = calculate_compound_interest_with_contributions(params, 0.0)

    assert isclose(result.final_amount, calculate_compound_interest(params).final_amount)


def test_negative_rate_still_uses_annuity_formula():
    value = future_value_of_monthly_contributions(100.0, -0.12, 1.0)
    expected = 100.0 * (0.99**12 - 1.0) / -0.01

    assert isclose(value, expected, rel_tol=1e-12)
    assert value < 1200.0


@pytest.mark.parametrize("contribution", [-1.0, float("nan")])
def test_bad_contribution_is_rejected(contribution):
    params = InterestParams(principal=1000.0, annual_rate=0.05, compounds_per_year=12, years=1.0)

    with pytest.raises(InvalidArgument):
        calculate_compound_interest_with_contributions(params, contribution)


def test_frequency_validation_runs_before_annuity():
    params = InterestParams(principal=1000.0, annual_rate=0.05, compounds_per_year=0, years=1.0)

    with pytest.raises(InvalidArgument, match="compounds_per_year"):
        calculate_compound_interest_with_contributions(params, 100.0)


def test_zero_rate_deposit_overflow_is_rejected():
    with pytest.raises(InvalidArgument, match="not a finite"):
        future_value_of_monthly_contributions(1e308, 0.0, 10.0)


def test_overflowing_total_is_rejected_instead_of_returning_infinity():
    params = InterestParams(principal=1e308, annual_rate=0.0, compounds_per_year=1, years=1.0)

    with pytest.raises(InvalidArgument, match="not a finite"):
        calculate_compound_interest_with_contributions(params, 1e307)
