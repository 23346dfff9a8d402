"""
Unit Tests for the return calculation functions
"""

import pytest
from decimal import Decimal

from app.domain.services.return_engine import (
    compute_compound_return,
    compute_ytd_projection,
    round_money,
)


class TestCompoundReturn:
    """Annual compounding with fractional-year exponent"""

    def test_one_year(self):
        result = compute_compound_return(1000, 27.5, 12)
        assert result.total_return == Decimal('1275.00')
        assert result.earnings == Decimal('275.00')
        assert result.effective_rate == Decimal('27.50')

    def test_half_year_uses_fractional_exponent(self):
        # 1000 × 1.275^0.5, not monthly compounding
        result = compute_compound_return(1000, 27.5, 6)
        assert result.total_return == Decimal('1129.16')
        assert result.earnings == Decimal('129.16')
        assert result.effective_rate == Decimal('12.92')

    def test_two_years_rounds_half_up(self):
        # 1000 × 1.275^2 = 1625.625 exactly
        result = compute_compound_return(1000, 27.5, 24)
        assert result.total_return == Decimal('1625.63')
        assert result.earnings == Decimal('625.63')
        assert result.effective_rate == Decimal('62.56')

    def test_accepts_decimal_inputs(self):
        result = compute_compound_return(Decimal('1000'), Decimal('30.0'), 12)
        assert result.earnings == Decimal('300.00')

    def test_zero_principal(self):
        result = compute_compound_return(0, 27.5, 12)
        assert result.total_return == Decimal('0')
        assert result.earnings == Decimal('0')

    def test_zero_rate(self):
        result = compute_compound_return(1000, 0, 7)
        assert result.total_return == Decimal('1000.00')
        assert result.earnings == Decimal('0.00')
        assert result.effective_rate == Decimal('0.00')

    def test_negative_principal_rejected(self):
        with pytest.raises(ValueError, match="Principal must be >= 0"):
            compute_compound_return(-1, 27.5, 12)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError, match="Annual rate must be >= 0"):
            compute_compound_return(1000, -0.5, 12)

    @pytest.mark.parametrize("months", [0, -6])
    def test_non_positive_period_rejected(self, months):
        with pytest.raises(ValueError, match="Period must be > 0"):
            compute_compound_return(1000, 27.5, months)

    @pytest.mark.parametrize("principal", [0, 1, 50, 999.99, 1000, 123456.78])
    @pytest.mark.parametrize("rate", [0, 0.5, 22.0, 29.5])
    @pytest.mark.parametrize("months", [1, 6, 12, 37, 60])
    def test_total_never_below_principal(self, principal, rate, months):
        result = compute_compound_return(principal, rate, months)
        assert result.total_return >= round_money(Decimal(str(principal)))
        assert abs(result.earnings - (result.total_return - Decimal(str(principal)))) <= Decimal('0.01')


class TestYtdProjection:
    """Simple rate application"""

    def test_reference_value(self):
        result = compute_ytd_projection(1000, 26.8)
        assert result.ytd_earnings == Decimal('268.00')
        assert result.projected_value == Decimal('1268.00')

    def test_not_compounded(self):
        result = compute_ytd_projection(2500, 24.2)
        assert result.ytd_earnings == Decimal('605.00')
        assert result.projected_value == Decimal('3105.00')

    def test_zero_principal(self):
        result = compute_ytd_projection(0, 26.8)
        assert result.ytd_earnings == Decimal('0')
        assert result.projected_value == Decimal('0')

    def test_negative_principal_rejected(self):
        with pytest.raises(ValueError):
            compute_ytd_projection(-100, 26.8)

    def test_differs_from_compound_path(self):
        ytd = compute_ytd_projection(1000, 27.5)
        compound = compute_compound_return(1000, 27.5, 24)
        assert ytd.ytd_earnings == Decimal('275.00')
        assert compound.earnings != ytd.ytd_earnings * 2


class TestLargeInputs:
    """Results wider than the default 28-digit Decimal context"""

    def test_compound_large_principal(self):
        result = compute_compound_return(1e26, 27.5, 12)
        assert result.total_return == Decimal('1.275E+26')
        assert result.earnings == Decimal('2.75E+25')
        assert result.effective_rate == Decimal('27.50')

    def test_compound_long_period(self):
        # 250 years at 30%
        result = compute_compound_return(1000, 30.0, 3000)
        assert result.total_return > Decimal('1E+30')
        assert abs(result.earnings - (result.total_return - 1000)) <= Decimal('0.01')

    def test_compound_out_of_exponent_range(self):
        with pytest.raises(ValueError, match="out of range"):
            compute_compound_return(1000, 30.0, 10**9)

    def test_ytd_large_principal(self):
        result = compute_ytd_projection(1e26, 26.8)
        assert result.ytd_earnings == Decimal('2.68E+25')
        assert result.projected_value == Decimal('1.268E+26')

    def test_ytd_largest_float(self):
        result = compute_ytd_projection(1e308, 26.8)
        assert result.projected_value == Decimal('1.268E+308')

    def test_round_money_non_finite(self):
        with pytest.raises(ValueError):
            round_money(Decimal('Infinity'))
