"""Fixed-rate payment and recast calculations."""

from dataclasses import dataclass, replace
from typing import Optional


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate (4.5 for 4.5%) to a monthly decimal rate."""
    return annual_rate_percent / 100 / 12


def round_currency(value: float) -> float:
    return round(value, 2)


def compute_monthly_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """Calculate the fixed payment that fully amortizes a loan.

    M = P * [r(1+r)^n] / [(1+r)^n - 1]

    A zero rate falls back to straight-line repayment. ``term_months`` must
    be at least 1; zero raises ZeroDivisionError.
    """
    r = monthly_rate(annual_rate_percent)
    n = term_months
    p = principal

    if r == 0:
        return p / n

    factor = (1 + r)**n
    return p * r * factor / (factor - 1)


def compute_recast_payment(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    extra_payment: Optional[float] = None,
) -> float:
    """Payment after a lump-sum curtailment, keeping rate and term.

    The caller guarantees ``extra_payment <= principal``; a larger lump sum
    yields a negative payment.
    """
    new_principal = principal - (extra_payment or 0)
    return compute_monthly_payment(new_principal, annual_rate_percent, term_months)


@dataclass(frozen=True)
class LoanParameters:
    """Terms of a fixed-rate loan."""

    principal: float
    annual_rate_percent: float  # e.g., 6.5 for 6.5%
    term_months: int
    extra_payment: float = 0.0  # one-time curtailment, used by recast only

    @property
    def monthly_rate(self) -> float:
        return monthly_rate(self.annual_rate_percent)

    @property
    def monthly_payment(self) -> float:
        return compute_monthly_payment(self.principal, self.annual_rate_percent, self.term_months)

    @property
    def recast_payment(self) -> float:
        return compute_recast_payment(
            self.principal, self.annual_rate_percent, self.term_months, self.extra_payment
        )

    def recast(self) -> "LoanParameters":
        """Return the loan re-amortized after applying ``extra_payment``."""
        return replace(self, principal=self.principal - self.extra_payment, extra_payment=0.0)
