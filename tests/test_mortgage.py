"""Tests for payment and recast calculations."""

import pytest

from mortgage_options.mortgage import (
    LoanParameters,
    compute_monthly_payment,
    compute_recast_payment,
    monthly_rate,
    round_currency,
)


class TestComputeMonthlyPayment:
    """Tests for the fixed payment formula."""

    def test_standard_30_year(self):
        """$300,000 at 6% for 30 years."""
        payment = compute_monthly_payment(300000, 6, 360)

        # Expected: ~$1,798.65
        assert abs(payment - 1798.65) < 0.01

    def test_zero_rate_is_straight_line(self):
        """Test edge case of 0% interest."""
        assert compute_monthly_payment(12000, 0, 12) == 1000.0

    def test_zero_principal(self):
        """Test that nothing owed means nothing to pay."""
        assert compute_monthly_payment(0, 6, 360) == 0.0

    def test_zero_term_fails(self):
        """Test that a zero term is a division by zero, not a silent result."""
        with pytest.raises(ZeroDivisionError):
            compute_monthly_payment(100000, 6, 0)

        with pytest.raises(ZeroDivisionError):
            compute_monthly_payment(100000, 0, 0)

    def test_shorter_term_higher_payment(self):
        """Test that a 15-year loan costs more per month than a 30-year loan."""
        assert compute_monthly_payment(300000, 6, 180) > compute_monthly_payment(300000, 6, 360)

    def test_idempotent(self):
        """Test that identical inputs give bit-identical outputs."""
        assert compute_monthly_payment(275000, 4.375, 300) == compute_monthly_payment(275000, 4.375, 300)


class TestComputeRecastPayment:
    """Tests for recast after a lump-sum payment."""

    def test_recast_reduces_payment(self):
        """Test that a lump sum strictly lowers the payment at a positive rate."""
        original = compute_monthly_payment(300000, 6, 360)
        recast = compute_recast_payment(300000, 6, 360, 50000)

        assert recast < original
        assert recast == compute_monthly_payment(250000, 6, 360)

    def test_no_extra_payment(self):
        """Test that a missing or zero lump sum leaves the payment unchanged."""
        original = compute_monthly_payment(300000, 6, 360)

        assert compute_recast_payment(300000, 6, 360) == original
        assert compute_recast_payment(300000, 6, 360, 0) == original

    def test_zero_rate_recast(self):
        """Test recast of an interest-free loan."""
        assert compute_recast_payment(12000, 0, 12, 6000) == 500.0

    def test_lump_sum_larger_than_principal(self):
        """Test that an oversized lump sum gives a negative payment rather than an error."""
        assert compute_recast_payment(10000, 5, 60, 15000) < 0


class TestLoanParameters:
    """Tests for LoanParameters dataclass."""

    def test_monthly_rate(self):
        """Test conversion of an annual percentage to a monthly rate."""
        loan = LoanParameters(principal=300000, annual_rate_percent=6, term_months=360)

        assert loan.monthly_rate == pytest.approx(0.005)
        assert monthly_rate(4.5) == pytest.approx(0.00375)

    def test_monthly_payment_matches_function(self):
        """Test that the property matches the standalone function."""
        loan = LoanParameters(principal=250000, annual_rate_percent=7, term_months=360)

        assert loan.monthly_payment == compute_monthly_payment(250000, 7, 360)

    def test_recast(self):
        """Test that recast applies the lump sum and keeps rate and term."""
        loan = LoanParameters(
            principal=300000,
            annual_rate_percent=6,
            term_months=360,
            extra_payment=50000,
        )

        recast = loan.recast()

        assert recast.principal == 250000
        assert recast.extra_payment == 0.0
        assert recast.annual_rate_percent == 6
        assert recast.term_months == 360
        assert loan.recast_payment == recast.monthly_payment

    def test_frozen(self):
        """Test that loan parameters cannot be mutated."""
        loan = LoanParameters(principal=1000, annual_rate_percent=5, term_months=12)

        with pytest.raises(AttributeError):
            loan.principal = 2000


def test_round_currency():
    assert round_currency(1798.6515754582) == 1798.65
