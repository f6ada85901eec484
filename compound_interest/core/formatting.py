"""Display helpers for money and rates.

Values are rounded to two decimals with ROUND_HALF_UP on their shortest decimal
representation, so 2.675 shows as 2.68 even though the float is slightly below it.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from compound_interest.core.validation import require_finite

CENTS = Decimal("0.01")


def _decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def _to_cents(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        # wide enough for the integer digits of any finite float
        ctx.prec = 400
        rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    # never show "-0.00"
    return rounded.copy_abs() if rounded.is_zero() else rounded


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format an amount like $1,234.50 (negative amounts as -$1,234.50)."""
    require_finite("amount", amount)
    value = _to_cents(_decimal(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_percentage(rate: float) -> str:
    """Format a decimal rate like 5.00% (0.05 in, "5.00%" out)."""
    require_finite("rate", rate)
    value = _to_cents(_decimal(rate) * 100)
    return f"{value:.2f}%"


def format_growth_factor(factor: Optional[float]) -> str:
    """Format a multiple like 3.31x; "n/a" when there is nothing to compare against."""
    if factor is None:
        return "n/a"
    require_finite("growth factor", factor)
    return f"{_to_cents(_decimal(factor)):.2f}x"
