"""Data contracts for compound interest calculations."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class InterestParams(BaseModel):
    """Inputs shared by the compound interest calculators."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(..., description="Initial amount invested.")
    annual_rate: float = Field(
        ...,
        description="Annual interest rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    compounds_per_year: int = Field(
        ...,
        description="Number of times interest is applied per year (1, 12, 365, ...).",
    )
    years: float = Field(..., description="Investment horizon in years, may be fractional.")

    def with_years(self, years: float) -> "InterestParams":
        """Return a copy of these parameters over a different horizon."""
        return self.model_copy(update={"years": years})


class InterestResult(BaseModel):
    """Outcome of a single compound interest projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    final_amount: float
    total_interest: float
    principal: float
    effective_annual_rate: float

    @property
    def growth_factor(self) -> Optional[float]:
        """Final amount as a multiple of the principal; None without a principal."""
        if self.principal == 0:
            return None
        return self.final_amount / self.principal


# Year number (1..N) -> projection truncated at that year; insertion-ordered.
Breakdown = Dict[int, InterestResult]


class FrequencyComparison(BaseModel):
    """One row of a compounding-frequency comparison."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    compounds_per_year: int
    result: InterestResult


class TaxedGrowthResult(BaseModel):
    """
    Weekly-compounded growth with capital gains tax settled once a year.

    profit_before_tax excludes both the starting principal and the contributions.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    final_amount_after_tax: float
    profit_before_tax: float
    total_tax_paid: float
    total_contributions: float

    @property
    def final_amount_before_tax(self) -> float:
        return self.final_amount_after_tax + self.total_tax_paid
