"""Three years of 2% weekly returns with 37% capital gains tax paid every year."""

from compound_interest import (
    calculate_weekly_with_yearly_tax,
    format_currency,
    format_percentage,
)


def main() -> None:
    principal = 13500.0
    weekly_rate = 0.02
    weeks = 156
    weekly_contribution = 100.0
    capital_gains_tax = 0.37

    taxed = calculate_weekly_with_yearly_tax(
        principal, weekly_rate, weeks, weekly_contribution, capital_gains_tax
    )
    untaxed = calculate_weekly_with_yearly_tax(principal, weekly_rate, weeks, weekly_contribution, 0.0)

    print("=== Trader Scenario: Weekly Compounding with Yearly Tax ===\n")
    print(f"Weekly Rate: {format_percentage(weekly_rate)} over {weeks} weeks")
    print(f"Total Contributions: {format_currency(taxed.total_contributions)}")
    print(f"Final Amount (before tax): {format_currency(taxed.final_amount_before_tax)}")
    print(f"Total Tax Paid: {format_currency(taxed.total_tax_paid)}")
    print(f"Final Amount (after tax): {format_currency(taxed.final_amount_after_tax)}")
    print(f"Without any tax: {format_currency(untaxed.final_amount_after_tax)}")
    print(
        "Cost of paying tax every year: "
        f"{format_currency(untaxed.final_amount_after_tax - taxed.final_amount_after_tax)}"
    )


if __name__ == "__main__":
    main()
