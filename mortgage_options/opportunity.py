"""Opportunity cost of putting a lump sum into the mortgage instead of investing it."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .amortization import ScheduleEntry
from .config import DEFAULT_INVESTMENT_RETURN_PCT


@dataclass(frozen=True)
class OpportunityCost:
    """Recast interest savings vs growth of the same money invested."""

    lump_sum: float
    horizon_months: int
    annual_return_percent: float
    interest_saved: float
    investment_gain: float
    net_benefit_of_recast: float  # negative = investing wins

    @property
    def favors_recast(self) -> bool:
        return self.net_benefit_of_recast > 0


def effective_monthly_return(annual_return_percent: float) -> float:
    """Monthly rate that compounds to the annual return: (1+R)^(1/12) - 1."""
    return (1 + annual_return_percent / 100) ** (1 / 12) - 1


def invested_value(amount: float, annual_return_percent: float, months: int) -> float:
    """Value of ``amount`` after compounding monthly for ``months``."""
    return amount * (1 + effective_monthly_return(annual_return_percent)) ** months


def compute_opportunity_cost(
    lump_sum: float,
    interest_saved: float,
    term_months: int,
    annual_return_percent: float = DEFAULT_INVESTMENT_RETURN_PCT,
) -> OpportunityCost:
    """Compare interest saved by a recast against investing the lump sum for the term."""
    gain = invested_value(lump_sum, annual_return_percent, term_months) - lump_sum

    return OpportunityCost(
        lump_sum=lump_sum,
        horizon_months=term_months,
        annual_return_percent=annual_return_percent,
        interest_saved=interest_saved,
        investment_gain=gain,
        net_benefit_of_recast=interest_saved - gain,
    )


def _interest_array(schedule: Sequence[ScheduleEntry], length: int) -> np.ndarray:
    interest = np.zeros(length)
    interest[:len(schedule)] = [e.interest_portion for e in schedule]
    return interest


def opportunity_curve(
    current_schedule: Sequence[ScheduleEntry],
    recast_schedule: Sequence[ScheduleEntry],
    lump_sum: float,
    annual_return_percent: float = DEFAULT_INVESTMENT_RETURN_PCT,
) -> pd.DataFrame:
    """Month-by-month cumulative interest saved vs cumulative investment gain.

    Columns: month, interest_saved, investment_gain, recast_advantage.
    """
    length = max(len(current_schedule), len(recast_schedule))
    months = np.arange(1, length + 1)

    saved = np.cumsum(
        _interest_array(current_schedule, length) - _interest_array(recast_schedule, length)
    )
    growth = (1 + effective_monthly_return(annual_return_percent)) ** months
    gain = lump_sum * (growth - 1)

    return pd.DataFrame({
        'month': months,
        'interest_saved': saved,
        'investment_gain': gain,
        'recast_advantage': saved - gain,
    })
