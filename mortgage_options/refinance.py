"""Refinance closing costs and break-even analysis."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Union

import pandas as pd

from .config import DEFAULT_CLOSING_COST_PCT
from .mortgage import round_currency


class ClosingCostSource(Enum):
    BREAKDOWN = "breakdown"
    FLAT = "flat"
    DEFAULT_PERCENTAGE = "default_percentage"


@dataclass(frozen=True)
class FlatEstimate:
    """A single lump estimate of closing costs."""

    amount: float


@dataclass(frozen=True)
class DetailedBreakdown:
    """Closing costs itemized by fee name (appraisal, title, origination...)."""

    fees: Mapping[str, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return sum(self.fees.values())


@dataclass(frozen=True)
class ResolvedClosingCosts:
    amount: float
    source: ClosingCostSource


@dataclass(frozen=True)
class BreakEvenAnalysis:
    """Months of payment savings needed to recoup refinance costs."""

    refinance_costs: float
    monthly_savings: float
    months: Union[int, float]  # float only for inf or NaN
    breaks_even: bool


def resolve_closing_costs(
    principal: float,
    flat: Optional[FlatEstimate] = None,
    breakdown: Optional[DetailedBreakdown] = None,
    default_pct: float = DEFAULT_CLOSING_COST_PCT,
) -> ResolvedClosingCosts:
    """Pick the closing-cost figure for a refinance.

    Precedence:
    1. An itemized breakdown, when its fees sum to more than zero
    2. A flat estimate, when one is given (zero means a no-cost refinance)
    3. ``default_pct`` of the principal
    """
    if breakdown is not None and breakdown.total > 0:
        return ResolvedClosingCosts(breakdown.total, ClosingCostSource.BREAKDOWN)

    if flat is not None:
        return ResolvedClosingCosts(flat.amount, ClosingCostSource.FLAT)

    return ResolvedClosingCosts(principal * default_pct, ClosingCostSource.DEFAULT_PERCENTAGE)


def compute_break_even_months(
    refinance_costs: float,
    current_payment: float,
    new_payment: float,
) -> Union[int, float]:
    """Months until payment savings cover ``refinance_costs``, rounded up.

    No guard is applied: a higher new payment gives a negative count and an
    unchanged payment gives ``math.inf``. Infinite or NaN inputs come back
    unrounded. Callers must treat anything that is not a finite result of
    positive savings as "never breaks even" (see ``analyze_break_even``).
    """
    monthly_savings = current_payment - new_payment

    if refinance_costs == 0:
        return 0
    if monthly_savings == 0:
        if math.isnan(refinance_costs):
            return refinance_costs
        return math.inf if refinance_costs > 0 else -math.inf

    months = refinance_costs / monthly_savings
    if not math.isfinite(months):
        return months
    return math.ceil(months)


def analyze_break_even(
    refinance_costs: float,
    current_payment: float,
    new_payment: float,
) -> BreakEvenAnalysis:
    """Break-even months together with whether refinancing ever pays off."""
    monthly_savings = current_payment - new_payment
    months = compute_break_even_months(refinance_costs, current_payment, new_payment)

    return BreakEvenAnalysis(
        refinance_costs=refinance_costs,
        monthly_savings=monthly_savings,
        months=months,
        breaks_even=monthly_savings > 0 and math.isfinite(months),
    )


def generate_break_even_chart_data(
    current_payment: float,
    new_payment: float,
    upfront_costs: float,
    months_to_show: int = 120,
    current_term_months: Optional[int] = None,
    new_term_months: Optional[int] = None,
) -> pd.DataFrame:
    """Cumulative cost of keeping vs refinancing, month by month.

    The refinance path starts at ``upfront_costs``. Payments stop once a
    loan's term (when given) is over.
    """
    if months_to_show < 0:
        raise ValueError(f"months_to_show must be non-negative, got {months_to_show}")

    data = []
    current_cumulative = 0.0
    new_cumulative = upfront_costs

    for month in range(1, months_to_show + 1):
        if current_term_months is None or month <= current_term_months:
            current_cumulative += current_payment

        if new_term_months is None or month <= new_term_months:
            new_cumulative += new_payment

        data.append({
            'month': month,
            'current_cumulative': round_currency(current_cumulative),
            'new_cumulative': round_currency(new_cumulative),
            'savings': round_currency(current_cumulative - new_cumulative),
        })

    return pd.DataFrame(data, columns=['month', 'current_cumulative', 'new_cumulative', 'savings'])
