"""Interactive text menu around the calculators."""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from compound_interest.config import VALID_LOG_LEVELS, get_settings
from compound_interest.core.formatting import (
    format_currency,
    format_growth_factor,
    format_percentage,
)
from compound_interest.core.interest import (
    calculate_compound_interest,
    calculate_compound_interest_with_contributions,
    calculate_principal_for_target,
    calculate_time_to_target,
    generate_breakdown,
)
from compound_interest.core.trader import WEEKS_PER_YEAR, calculate_weekly_with_yearly_tax
from compound_interest.core.validation import InvalidArgument
from compound_interest.schemas.interest import InterestParams

logger = logging.getLogger(__name__)

Money = Callable[[float], str]

RATE_PROMPT = "Enter annual interest rate (as decimal, e.g., 0.05 for 5%)"
FREQUENCY_PROMPT = (
    "Enter number of times interest is compounded per year (1=annually, 12=monthly, 365=daily)"
)

MENU = """Choose an option:
1. Calculate compound interest
2. Calculate compound interest with monthly contributions
3. Calculate time to reach target amount
4. Calculate required principal for target amount
5. Generate year-by-year breakdown
6. Exit
7. Calculate weekly compounding with yearly tax (trader scenario)"""


def read_float(prompt: str) -> float:
    while True:
        raw = input(f"{prompt}: ")
        try:
            return float(raw.strip())
        except ValueError:
            print("Please enter a valid number.")


def read_int(prompt: str) -> int:
    while True:
        raw = input(f"{prompt}: ")
        try:
            return int(raw.strip())
        except ValueError:
            print("Please enter a valid whole number.")


def read_params(principal_prompt: str = "Enter principal amount ($)") -> InterestParams:
    return InterestParams(
        principal=read_float(principal_prompt),
        annual_rate=read_float(RATE_PROMPT),
        compounds_per_year=read_int(FREQUENCY_PROMPT),
        years=read_float("Enter number of years"),
    )


def _print_terms(params: InterestParams) -> None:
    print(f"Annual Interest Rate: {format_percentage(params.annual_rate)}")
    print(f"Compounding Frequency: {params.compounds_per_year} times per year")
    print(f"Time Period: {params.years:.1f} years")


def basic_interest(money: Money) -> None:
    print("\n--- Basic Compound Interest Calculation ---\n")
    params = read_params()
    result = calculate_compound_interest(params)

    print("\n=== Results ===")
    print(f"Initial Principal: {money(result.principal)}")
    _print_terms(params)
    print(f"Final Amount: {money(result.final_amount)}")
    print(f"Total Interest Earned: {money(result.total_interest)}")
    print(f"Effective Annual Rate: {format_percentage(result.effective_annual_rate)}")
    print(f"Growth Factor: {format_growth_factor(result.growth_factor)}")
    print()


def interest_with_contributions(money: Money) -> None:
    print("\n--- Compound Interest with Monthly Contributions ---\n")
    params = read_params("Enter initial principal amount ($)")
    monthly_contribution = read_float("Enter monthly contribution amount ($)")

    result = calculate_compound_interest_with_contributions(params, monthly_contribution)
    without = calculate_compound_interest(params)
    total_contributions = monthly_contribution * 12 * params.years

    print("\n=== Results ===")
    print(f"Initial Principal: {money(result.principal)}")
    print(f"Monthly Contribution: {money(monthly_contribution)}")
    print(f"Total Contributions: {money(total_contributions)}")
    _print_terms(params)
    print(f"Final Amount: {money(result.final_amount)}")
    print(f"Total Interest Earned: {money(result.total_interest)}")
    print(f"Effective Annual Rate: {format_percentage(result.effective_annual_rate)}")
    print()
    print("--- Comparison ---")
    print(f"Without contributions: {money(without.final_amount)}")
    print(f"With contributions: {money(result.final_amount)}")
    print(f"Difference: {money(result.final_amount - without.final_amount)}")
    print()


def time_to_target(money: Money) -> None:
    print("\n--- Time to Reach Target Amount ---\n")
    principal = read_float("Enter current principal amount ($)")
    target_amount = read_float("Enter target amount ($)")
    annual_rate = read_float(RATE_PROMPT)
    compounds_per_year = read_int(FREQUENCY_PROMPT)

    years = calculate_time_to_target(principal, target_amount, annual_rate, compounds_per_year)

    print("\n=== Results ===")
    print(f"Current Principal: {money(principal)}")
    print(f"Target Amount: {money(target_amount)}")
    print(f"Annual Interest Rate: {format_percentage(annual_rate)}")
    print(f"Compounding Frequency: {compounds_per_year} times per year")
    if years == 0:
        print("The principal already meets the target.")
    else:
        print(f"Time to reach target: {years:.1f} years")
        print(f"Time to reach target: {years * 12:.0f} months")
    print()


def principal_for_target(money: Money) -> None:
    print("\n--- Required Principal for Target Amount ---\n")
    target_amount = read_float("Enter target amount ($)")
    annual_rate = read_float(RATE_PROMPT)
    compounds_per_year = read_int(FREQUENCY_PROMPT)
    years = read_float("Enter number of years")

    principal = calculate_principal_for_target(target_amount, annual_rate, compounds_per_year, years)

    print("\n=== Results ===")
    print(f"Target Amount: {money(target_amount)}")
    print(f"Annual Interest Rate: {format_percentage(annual_rate)}")
    print(f"Compounding Frequency: {compounds_per_year} times per year")
    print(f"Time Period: {years:.1f} years")
    print(f"Required Principal: {money(principal)}")
    print()


def breakdown_table(money: Money) -> None:
    print("\n--- Year-by-Year Breakdown ---\n")
    params = read_params()
    breakdown = generate_breakdown(params)

    print("\n=== Year-by-Year Breakdown ===")
    print(f"Initial Principal: {money(params.principal)}")
    print(f"Annual Interest Rate: {format_percentage(params.annual_rate)}")
    print(f"Compounding Frequency: {params.compounds_per_year} times per year")
    print()
    print(f"{'Year':<6} {'Amount':<15} {'Interest':<15} {'Growth':<15}")
    print("-" * 60)
    for year, result in breakdown.items():
        print(
            f"{year:<6} {money(result.final_amount):<15} "
            f"{money(result.total_interest):<15} {format_growth_factor(result.growth_factor):<15}"
        )
    print()


def weekly_with_tax(money: Money) -> None:
    print("\n--- Weekly Compounding with Contributions and Yearly Capital Gains Tax ---\n")
    principal = read_float("Enter initial/carry-forward principal ($)")
    weekly_rate = read_float("Enter weekly rate of return (as decimal, e.g., 0.02 for 2%)")
    weeks = read_int("Enter number of weeks to extrapolate")
    weekly_contribution = read_float("Enter weekly contribution amount ($)")
    capital_gains_tax = read_float("Enter capital gains tax rate (as decimal, e.g., 0.37 for 37%)")

    result = calculate_weekly_with_yearly_tax(
        principal, weekly_rate, weeks, weekly_contribution, capital_gains_tax
    )
    invested = principal + result.total_contributions

    print("\n=== Results ===")
    print(f"Initial Principal: {money(principal)}")
    print(f"Weekly Contribution: {money(weekly_contribution)}")
    print(f"Total Contributions: {money(result.total_contributions)}")
    print(f"Weekly Rate: {format_percentage(weekly_rate)}")
    print(f"Weeks: {weeks}")
    print(f"Years: {weeks / WEEKS_PER_YEAR:.1f}")
    print(f"Final Amount (before tax): {money(result.final_amount_before_tax)}")
    print(f"Profit (before tax): {money(result.profit_before_tax)}")
    print(f"Capital Gains Tax Rate: {format_percentage(capital_gains_tax)}")
    print(f"Total Tax Paid (yearly): {money(result.total_tax_paid)}")
    print(f"Final Amount (after tax): {money(result.final_amount_after_tax)}")
    print(
        "Growth Factor (after tax): "
        f"{format_growth_factor(result.final_amount_after_tax / invested if invested else None)}"
    )
    print()


ACTIONS: Dict[str, Tuple[str, Callable[[Money], None]]] = {
    "1": ("compound interest", basic_interest),
    "2": ("compound interest with contributions", interest_with_contributions),
    "3": ("time to target", time_to_target),
    "4": ("principal for target", principal_for_target),
    "5": ("breakdown", breakdown_table),
    "7": ("weekly with yearly tax", weekly_with_tax),
}
EXIT_CHOICE = "6"


def run_menu(currency_symbol: str = "$") -> None:
    """Serve one calculation per menu choice until the user exits or input runs out."""
    money: Money = partial(format_currency, symbol=currency_symbol)
    print("=== Compound Interest Calculator ===\n")

    try:
        while True:
            print(MENU)
            choice = input("\nEnter your choice (1-7): ").strip()

            if choice == EXIT_CHOICE:
                print("Goodbye!")
                return

            action = ACTIONS.get(choice)
            if action is None:
                print("Invalid choice. Please try again.\n")
                continue

            label, handler = action
            logger.debug("Menu choice %s (%s)", choice, label)
            try:
                handler(money)
            except InvalidArgument as exc:
                logger.info("Rejected %s: %s", label, exc)
                print(f"\nError: {exc}\n")
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compound-interest",
        description="Interactive compound interest calculator",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help="Override the configured log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, args.log_level or settings.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Starting calculator (currency=%s)", settings.currency_symbol)

    run_menu(currency_symbol=settings.currency_symbol)
    return 0


if __name__ == "__main__":
    sys.exit(main())
