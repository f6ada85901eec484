"""Walk through every calculator with fixed inputs."""

from compound_interest import (
    InterestParams,
    calculate_compound_interest,
    calculate_compound_interest_with_contributions,
    calculate_principal_for_target,
    calculate_time_to_target,
    compare_compounding_frequencies,
    format_currency,
    format_growth_factor,
    format_percentage,
    generate_breakdown,
)


def main() -> None:
    print("=== Compound Interest Calculator Examples ===\n")

    params = InterestParams(principal=10000.0, annual_rate=0.06, compounds_per_year=12, years=20.0)
    result = calculate_compound_interest(params)
    print("Example 1: Basic Compound Interest")
    print(f"Final Amount: {format_currency(result.final_amount)}")
    print(f"Total Interest: {format_currency(result.total_interest)}")
    print(f"Growth Factor: {format_growth_factor(result.growth_factor)}\n")

    with_deposits = calculate_compound_interest_with_contributions(params, 500.0)
    print("Example 2: Compound Interest with Monthly Contributions")
    print(f"Total Contributions: {format_currency(500.0 * 12 * params.years)}")
    print(f"Final Amount: {format_currency(with_deposits.final_amount)}")
    print(f"Total Interest: {format_currency(with_deposits.total_interest)}\n")

    years = calculate_time_to_target(10000.0, 20000.0, 0.07, 12)
    print("Example 3: Time to Double Your Money")
    print(f"Time to double: {years:.1f} years ({years * 12:.0f} months)\n")

    principal = calculate_principal_for_target(100000.0, 0.05, 12, 15.0)
    print("Example 4: Required Principal for Target")
    print(f"Required Principal: {format_currency(principal)}\n")

    short = InterestParams(principal=5000.0, annual_rate=0.08, compounds_per_year=12, years=5.0)
    print("Example 5: Year-by-Year Breakdown")
    print(f"{'Year':<6} {'Amount':<15} {'Interest':<15} {'Growth':<15}")
    print("-" * 60)
    for year, row in generate_breakdown(short).items():
        print(
            f"{year:<6} {format_currency(row.final_amount):<15} "
            f"{format_currency(row.total_interest):<15} {format_growth_factor(row.growth_factor):<15}"
        )
    print()

    print("Example 6: Compounding Frequency Comparison")
    print(f"{'Frequency':<15} {'Final Amount':<15} {'Total Interest':<15} {'Effective Rate':<15}")
    print("-" * 70)
    for row in compare_compounding_frequencies(10000.0, 0.05, 10.0):
        print(
            f"{row.label:<15} {format_currency(row.result.final_amount):<15} "
            f"{format_currency(row.result.total_interest):<15} "
            f"{format_percentage(row.result.effective_annual_rate):<15}"
        )


if __name__ == "__main__":
    main()
