"""Side-by-side comparison of keeping, refinancing and recasting a mortgage."""

import logging
from dataclasses import dataclass
from typing import List

import pandas as pd

from .amortization import ScheduleEntry, amortize
from .config import DEFAULT_INVESTMENT_RETURN_PCT, PREVIEW_MONTHS
from .mortgage import LoanParameters
from .opportunity import OpportunityCost, compute_opportunity_cost
from .refinance import (
    BreakEvenAnalysis,
    DetailedBreakdown,
    FlatEstimate,
    ResolvedClosingCosts,
    analyze_break_even,
    resolve_closing_costs,
)
from .validation import MortgageInputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanOption:
    """One path (current, refinance or recast) and its amortization."""

    name: str
    loan: LoanParameters
    monthly_payment: float
    total_interest: float
    schedule: List[ScheduleEntry]
    did_not_fully_amortize: bool


@dataclass(frozen=True)
class MortgageOptions:
    current: LoanOption
    refinance: LoanOption
    recast: LoanOption
    closing_costs: ResolvedClosingCosts
    break_even: BreakEvenAnalysis
    opportunity: OpportunityCost

    @property
    def options(self) -> List[LoanOption]:
        return [self.current, self.refinance, self.recast]


def _build_option(name: str, loan: LoanParameters) -> LoanOption:
    result = amortize(loan)
    if result.did_not_fully_amortize:
        logger.warning(
            "%s loan does not fully amortize within %d months (balance left %.2f)",
            name, loan.term_months, result.schedule[-1].remaining_balance,
        )
    return LoanOption(
        name=name,
        loan=loan,
        monthly_payment=result.payment,
        total_interest=result.total_interest,
        schedule=result.schedule,
        did_not_fully_amortize=result.did_not_fully_amortize,
    )


def _closing_costs(inputs: MortgageInputs) -> ResolvedClosingCosts:
    flat = FlatEstimate(inputs.closing_costs) if inputs.closing_costs is not None else None
    breakdown = (
        DetailedBreakdown(inputs.closing_cost_breakdown)
        if inputs.closing_cost_breakdown is not None else None
    )
    resolved = resolve_closing_costs(inputs.current_balance, flat=flat, breakdown=breakdown)
    logger.debug("Closing costs %.2f from %s", resolved.amount, resolved.source.value)
    return resolved


def calculate_mortgage_options(
    inputs: MortgageInputs,
    investment_return_percent: float = DEFAULT_INVESTMENT_RETURN_PCT,
) -> MortgageOptions:
    """Compute the current, refinance and recast paths for validated inputs.

    The lump sum reduces the principal of both the refinance and the recast.
    The refinance uses the new rate and the refinance term; the recast keeps
    the current rate and the remaining term. Closing costs are based on the
    current balance.
    """
    current_loan = LoanParameters(
        principal=inputs.current_balance,
        annual_rate_percent=inputs.current_rate,
        term_months=inputs.remaining_term,
        extra_payment=inputs.lump_sum,
    )
    refinance_loan = LoanParameters(
        principal=inputs.current_balance - inputs.lump_sum,
        annual_rate_percent=inputs.new_rate,
        term_months=inputs.effective_refinance_term,
    )

    current = _build_option("current", current_loan)
    refinance = _build_option("refinance", refinance_loan)
    recast = _build_option("recast", current_loan.recast())

    closing_costs = _closing_costs(inputs)
    break_even = analyze_break_even(
        closing_costs.amount, current.monthly_payment, refinance.monthly_payment
    )
    if not break_even.breaks_even:
        logger.warning(
            "Refinancing never breaks even (monthly savings %.2f)", break_even.monthly_savings
        )

    opportunity = compute_opportunity_cost(
        inputs.lump_sum,
        current.total_interest - recast.total_interest,
        inputs.remaining_term,
        investment_return_percent,
    )

    return MortgageOptions(
        current=current,
        refinance=refinance,
        recast=recast,
        closing_costs=closing_costs,
        break_even=break_even,
        opportunity=opportunity,
    )


def schedule_comparison_frame(options: MortgageOptions, months: int = PREVIEW_MONTHS) -> pd.DataFrame:
    """First ``months`` rows of each schedule side by side.

    Savings columns are the current payment minus the alternative payment
    (positive = the alternative is cheaper that month). Rows stop at the
    shortest of the three schedules.
    """
    if months < 0:
        raise ValueError(f"months must be non-negative, got {months}")

    rows = []
    for current, refinance, recast in zip(
        options.current.schedule[:months],
        options.refinance.schedule[:months],
        options.recast.schedule[:months],
    ):
        rows.append({
            'month': current.month,
            'current_payment': current.payment,
            'current_principal': current.principal_portion,
            'current_interest': current.interest_portion,
            'refinance_payment': refinance.payment,
            'refinance_principal': refinance.principal_portion,
            'refinance_interest': refinance.interest_portion,
            'refinance_savings': current.payment - refinance.payment,
            'recast_payment': recast.payment,
            'recast_principal': recast.principal_portion,
            'recast_interest': recast.interest_portion,
            'recast_savings': current.payment - recast.payment,
        })

    columns = [
        'month',
        'current_payment', 'current_principal', 'current_interest',
        'refinance_payment', 'refinance_principal', 'refinance_interest', 'refinance_savings',
        'recast_payment', 'recast_principal', 'recast_interest', 'recast_savings',
    ]
    return pd.DataFrame(rows, columns=columns)
