"""
RETURN CALCULATION ENGINE
Project earnings for a capital amount held in an instrument

Two separate formulas, never merged:
- compound: principal × (1 + r)^(months / 12), annual compounding
- YTD:      principal × r, simple rate application

All outputs are quantized to 2 dp with ROUND_HALF_UP.
Arithmetic runs in a local context sized to the principal, not the
28-digit default context.
"""

from decimal import Decimal, ROUND_HALF_UP, Overflow, localcontext
from typing import Union

from app.domain.models import CompoundReturn, YtdProjection

Number = Union[int, float, Decimal]

CENT = Decimal('0.01')
HUNDRED = Decimal('100')
MONTHS_PER_YEAR = Decimal('12')

# Significant digits used for intermediate results
WORKING_PRECISION = 50


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal via str() so 27.5 stays 27.5"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    """
    Quantize to cents, widening precision for values with many integer digits.

    Raises:
        ValueError: if value is not finite
    """
    if not value.is_finite():
        raise ValueError(f"Cannot round non-finite value {value}")
    with localcontext() as ctx:
        ctx.prec = max(WORKING_PRECISION, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_compound_return(
    principal: Number,
    annual_rate_percent: Number,
    period_months: Number,
) -> CompoundReturn:
    """
    Compound a principal annually over a (possibly fractional) number of years.

    Args:
        principal: Capital invested, >= 0
        annual_rate_percent: Nominal annual rate, e.g. 27.5 for 27.5%
        period_months: Holding period in months, > 0

    Returns:
        CompoundReturn with total_return, earnings and effective_rate

    Raises:
        ValueError: if any input is outside its domain, or the growth
            factor exceeds the Decimal exponent range
    """
    principal = to_decimal(principal)
    rate = to_decimal(annual_rate_percent)
    months = to_decimal(period_months)

    if not principal.is_finite() or principal < 0:
        raise ValueError(f"Principal must be >= 0, got {principal}")
    if not rate.is_finite() or rate < 0:
        raise ValueError(f"Annual rate must be >= 0, got {rate}")
    if not months.is_finite() or months <= 0:
        raise ValueError(f"Period must be > 0 months, got {months}")

    with localcontext() as ctx:
        ctx.prec = max(WORKING_PRECISION, principal.adjusted() + WORKING_PRECISION)
        try:
            years = months / MONTHS_PER_YEAR
            growth = (1 + rate / HUNDRED) ** years

            total_return = principal * growth
            earnings = total_return - principal
            effective_rate = (growth - 1) * HUNDRED
        except Overflow:
            raise ValueError(
                f"Projection out of range: {rate}% over {months} months"
            )

    return CompoundReturn(
        total_return=round_money(total_return),
        earnings=round_money(earnings),
        effective_rate=round_money(effective_rate),
    )


def compute_ytd_projection(principal: Number, ytd_rate_percent: Number) -> YtdProjection:
    """
    Apply a year-to-date rate to a principal (no compounding).

    Raises:
        ValueError: if principal or rate is negative
    """
    principal = to_decimal(principal)
    rate = to_decimal(ytd_rate_percent)

    if not principal.is_finite() or principal < 0:
        raise ValueError(f"Principal must be >= 0, got {principal}")
    if not rate.is_finite() or rate < 0:
        raise ValueError(f"YTD rate must be >= 0, got {rate}")

    with localcontext() as ctx:
        ctx.prec = max(WORKING_PRECISION, principal.adjusted() + WORKING_PRECISION)
        ytd_earnings = principal * (rate / HUNDRED)
        projected_value = principal + ytd_earnings

    return YtdProjection(
        ytd_earnings=round_money(ytd_earnings),
        projected_value=round_money(projected_value),
    )
