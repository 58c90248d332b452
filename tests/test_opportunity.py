"""Tests for lump-sum opportunity cost."""

import numpy as np
import pytest

from mortgage_options.amortization import compute_total_interest, generate_amortization_schedule
from mortgage_options.mortgage import compute_monthly_payment, compute_recast_payment
from mortgage_options.opportunity import (
    compute_opportunity_cost,
    effective_monthly_return,
    invested_value,
    opportunity_curve,
)


def _schedules(principal=300000, rate=6, term=360, lump_sum=50000):
    current_payment = compute_monthly_payment(principal, rate, term)
    recast_payment = compute_recast_payment(principal, rate, term, lump_sum)
    current = generate_amortization_schedule(principal, rate, term, current_payment)
    recast = generate_amortization_schedule(principal - lump_sum, rate, term, recast_payment)
    return current, recast


class TestInvestedValue:
    """Tests for compounding helpers."""

    def test_one_year_matches_annual_return(self):
        """Test that 12 months of effective monthly growth equals the annual return."""
        assert invested_value(1000, 12, 12) == pytest.approx(1120)

    def test_zero_return(self):
        assert effective_monthly_return(0) == 0
        assert invested_value(5000, 0, 120) == 5000

    def test_zero_months(self):
        assert invested_value(5000, 7, 0) == 5000


class TestComputeOpportunityCost:
    """Tests for recast vs invest comparison."""

    def test_high_return_favors_investing(self):
        """Test 30 years at 7% outgrowing the interest saved."""
        result = compute_opportunity_cost(50000, interest_saved=57900, term_months=360, annual_return_percent=7)

        assert result.investment_gain == pytest.approx(50000 * (1.07 ** 30 - 1))
        assert result.net_benefit_of_recast == pytest.approx(57900 - result.investment_gain)
        assert not result.favors_recast

    def test_zero_return_favors_recast(self):
        """Test that any interest saved beats money that does not grow."""
        result = compute_opportunity_cost(50000, interest_saved=1000, term_months=360, annual_return_percent=0)

        assert result.investment_gain == 0
        assert result.favors_recast

    def test_no_lump_sum(self):
        result = compute_opportunity_cost(0, interest_saved=0, term_months=360, annual_return_percent=7)

        assert result.investment_gain == 0
        assert not result.favors_recast


class TestOpportunityCurve:
    """Tests for month-by-month opportunity data."""

    def test_curve_shape(self):
        current, recast = _schedules()

        df = opportunity_curve(current, recast, 50000, annual_return_percent=7)

        assert len(df) == 360
        assert list(df.columns) == ['month', 'interest_saved', 'investment_gain', 'recast_advantage']
        assert df['month'].iloc[0] == 1

    def test_final_interest_saved_matches_totals(self):
        """Test that cumulative savings end at the difference in total interest."""
        current, recast = _schedules()
        current_payment = compute_monthly_payment(300000, 6, 360)
        recast_payment = compute_recast_payment(300000, 6, 360, 50000)
        expected = (
            compute_total_interest(300000, 6, 360, current_payment)
            - compute_total_interest(250000, 6, 360, recast_payment)
        )

        df = opportunity_curve(current, recast, 50000)

        assert df['interest_saved'].iloc[-1] == pytest.approx(expected)
        assert np.all(np.diff(df['interest_saved']) > 0)

    def test_final_gain_matches_invested_value(self):
        current, recast = _schedules()

        df = opportunity_curve(current, recast, 50000, annual_return_percent=5)

        assert df['investment_gain'].iloc[-1] == pytest.approx(invested_value(50000, 5, 360) - 50000)

    def test_uneven_schedule_lengths(self):
        """Test that a shorter schedule is padded with zero interest."""
        current = generate_amortization_schedule(100000, 6, 360, compute_monthly_payment(100000, 6, 360))
        faster = generate_amortization_schedule(100000, 6, 360, 2000)

        df = opportunity_curve(current, faster, 0, annual_return_percent=0)

        assert len(df) == 360
        assert np.all(df['investment_gain'] == 0)
