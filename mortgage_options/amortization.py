"""Month-by-month amortization: schedules, interest totals and summaries."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from .config import BALANCE_TOLERANCE, PREVIEW_MONTHS
from .mortgage import LoanParameters, monthly_rate


@dataclass(frozen=True)
class ScheduleEntry:
    """One period of an amortization schedule."""

    month: int  # 1-indexed
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float  # floored at 0


@dataclass(frozen=True)
class AmortizationResult:
    """Payment, schedule and interest total for one loan."""

    payment: float
    schedule: List[ScheduleEntry]
    total_interest: float
    did_not_fully_amortize: bool


@dataclass(frozen=True)
class PaymentBreakdown:
    principal_share: float
    interest_share: float


@dataclass(frozen=True)
class PeriodSummary:
    """Totals over the first ``months`` entries of a schedule."""

    months: int
    total_payment: float
    total_principal: float
    total_interest: float


def compute_total_interest(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    payment: float,
) -> float:
    """Total interest paid before payoff or the end of the term.

    Stops at the first period whose payment brings the balance to zero or
    below. A payment too small to amortize the loan runs the full term and
    leaves the unpaid balance out of the total.
    """
    r = monthly_rate(annual_rate_percent)
    balance = principal
    total_interest = 0.0

    for _ in range(1, term_months + 1):
        interest = balance * r
        principal_paid = payment - interest

        total_interest += interest
        balance -= principal_paid

        if balance <= 0:
            break

    return total_interest


def generate_amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    payment: float,
) -> List[ScheduleEntry]:
    """Generate the amortization schedule for a fixed payment.

    Emits one entry per period up to ``term_months``. The entry that first
    brings the balance to zero or below is the last one. The payment is not
    adjusted on the final period, so its principal portion may exceed the
    balance that was left.
    """
    r = monthly_rate(annual_rate_percent)
    balance = principal
    schedule = []

    for month in range(1, term_months + 1):
        interest = balance * r
        principal_paid = payment - interest
        balance -= principal_paid

        schedule.append(ScheduleEntry(
            month=month,
            payment=payment,
            principal_portion=principal_paid,
            interest_portion=interest,
            remaining_balance=max(0.0, balance),
        ))

        if balance <= 0:
            break

    return schedule


def did_not_fully_amortize(
    schedule: Sequence[ScheduleEntry],
    tolerance: float = BALANCE_TOLERANCE,
) -> bool:
    """True when the schedule ends with more than ``tolerance`` still owed.

    Happens when the payment cannot retire the loan within the term,
    including negative amortization where interest exceeds the payment.
    """
    if not schedule:
        return False
    return schedule[-1].remaining_balance > tolerance


def amortize(loan: LoanParameters, payment: Optional[float] = None) -> AmortizationResult:
    """Run the schedule for ``loan`` at ``payment`` (its own payment by default)."""
    if payment is None:
        payment = loan.monthly_payment

    schedule = generate_amortization_schedule(
        loan.principal, loan.annual_rate_percent, loan.term_months, payment
    )
    total_interest = compute_total_interest(
        loan.principal, loan.annual_rate_percent, loan.term_months, payment
    )

    return AmortizationResult(
        payment=payment,
        schedule=schedule,
        total_interest=total_interest,
        did_not_fully_amortize=did_not_fully_amortize(schedule),
    )


def payment_breakdown(entry: ScheduleEntry) -> PaymentBreakdown:
    """Split of a payment into principal and interest shares (fractions, not percent)."""
    if entry.payment == 0:
        return PaymentBreakdown(principal_share=0.0, interest_share=0.0)
    return PaymentBreakdown(
        principal_share=entry.principal_portion / entry.payment,
        interest_share=entry.interest_portion / entry.payment,
    )


def summarize_period(schedule: Sequence[ScheduleEntry], months: int = PREVIEW_MONTHS) -> PeriodSummary:
    """Total payment, principal and interest over the first ``months`` entries."""
    if months < 0:
        raise ValueError(f"months must be non-negative, got {months}")

    window = schedule[:months]
    return PeriodSummary(
        months=len(window),
        total_payment=sum(e.payment for e in window),
        total_principal=sum(e.principal_portion for e in window),
        total_interest=sum(e.interest_portion for e in window),
    )


def schedule_to_frame(schedule: Sequence[ScheduleEntry], decimals: Optional[int] = None) -> pd.DataFrame:
    """Tabular view of a schedule.

    Returns DataFrame with columns:
    - month: payment number (1-indexed)
    - payment: scheduled payment
    - principal: principal portion of payment
    - interest: interest portion of payment
    - balance: remaining balance after payment
    - cumulative_interest: total interest paid to date
    - cumulative_principal: total principal paid to date

    Values are raw unless ``decimals`` is given.
    """
    columns = ['month', 'payment', 'principal', 'interest', 'balance',
               'cumulative_interest', 'cumulative_principal']
    df = pd.DataFrame(
        [{
            'month': e.month,
            'payment': e.payment,
            'principal': e.principal_portion,
            'interest': e.interest_portion,
            'balance': e.remaining_balance,
        } for e in schedule],
        columns=columns[:5],
    )
    df['cumulative_interest'] = df['interest'].cumsum()
    df['cumulative_principal'] = df['principal'].cumsum()

    if decimals is not None:
        money = columns[1:]
        df[money] = df[money].round(decimals)

    return df[columns]
