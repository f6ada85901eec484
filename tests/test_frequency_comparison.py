from __future__ import annotations

import pytest

from compound_interest import (
    STANDARD_FREQUENCIES,
    InvalidArgument,
    compare_compounding_frequencies,
)


def test_standard_frequencies_in_order():
    rows = compare_compounding_frequencies(10000.0, 0.05, 10.0)

    assert [row.label for row in rows] == [label for label, _ in STANDARD_FREQUENCIES]
    assert [row.compounds_per_year for row in rows] == [1, 2, 4, 12, 365]

    amounts = [row.result.final_amount for row in rows]
    assert amounts == sorted(amounts)
    rates = [row.result.effective_annual_rate for row in rows]
    assert rates == sorted(rates)


def test_custom_frequencies():
    rows = compare_compounding_frequencies(1000.0, 0.04, 2.0, [("Weekly", 52)])

    assert len(rows) == 1
    assert rows[0].label == "Weekly"
    assert rows[0].result.principal == 1000.0


def test_invalid_frequency_in_list_is_rejected():
    with pytest.raises(InvalidArgument):
        compare_compounding_frequencies(1000.0, 0.04, 2.0, [("Never", 0)])


def test_empty_frequency_list_is_rejected():
    with pytest.raises(InvalidArgument, match="at least one"):
        compare_compounding_frequencies(1000.0, 0.04, 2.0, [])


@pytest.mark.parametrize("compounds", [2.5, -1, 0])
def test_bad_frequency_raises_invalid_argument_not_validation_error(compounds):
    with pytest.raises(InvalidArgument, match="compounds_per_year"):
        compare_compounding_frequencies(1000.0, 0.05, 1.0, [("odd", compounds)])


def test_whole_float_frequency_is_accepted():
    rows = compare_compounding_frequencies(1000.0, 0.05, 1.0, [("Monthly", 12.0)])

    assert rows[0].compounds_per_year == 12
