"""Domain guards shared by the calculators."""

from __future__ import annotations

import math
from typing import Callable


class InvalidArgument(ValueError):
    """Raised when a calculation is asked to work outside its valid domain."""


def require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be a finite number, got {value!r}")
    return value


def require_non_negative(name: str, value: float) -> float:
    require_finite(name, value)
    if value < 0:
        raise InvalidArgument(f"{name} must not be negative, got {value!r}")
    return value


def require_positive(name: str, value: float) -> float:
    require_finite(name, value)
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value!r}")
    return value


def require_compounding(compounds_per_year: int) -> int:
    """Reject frequencies that would divide by zero or run backwards."""
    if isinstance(compounds_per_year, float) and compounds_per_year.is_integer():
        compounds_per_year = int(compounds_per_year)
    if isinstance(compounds_per_year, bool) or not isinstance(compounds_per_year, int):
        raise InvalidArgument(
            f"compounds_per_year must be a whole number, got {compounds_per_year!r}"
        )
    if compounds_per_year < 1:
        raise InvalidArgument(
            f"compounds_per_year must be at least 1, got {compounds_per_year}"
        )
    return compounds_per_year


def periodic_base(annual_rate: float, periods_per_year: int, allow_zero: bool = False) -> float:
    """Return 1 + r/n, refusing bases a fractional power cannot be taken of."""
    base = 1.0 + annual_rate / periods_per_year
    if base < 0 or (base == 0 and not allow_zero):
        raise InvalidArgument(
            f"annual_rate {annual_rate!r} wipes out more than the whole balance "
            f"in a single period when compounded {periods_per_year} times per year"
        )
    return base


def checked(description: str, compute: Callable[[], float]) -> float:
    """Run a float computation, turning overflow or a non-finite result into InvalidArgument."""
    try:
        value = compute()
    except (OverflowError, ZeroDivisionError) as exc:
        raise InvalidArgument(f"{description} is out of range: {exc}") from exc
    if isinstance(value, complex) or not math.isfinite(value):
        raise InvalidArgument(f"{description} is not a finite real number")
    return value
