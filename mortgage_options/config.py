"""Engine defaults, overridable through environment variables."""

import os

# Refinance closing costs when no estimate is given (fraction of balance)
DEFAULT_CLOSING_COST_PCT = float(os.environ.get("MORTGAGE_OPTIONS_CLOSING_COST_PCT", "0.03"))

# Expected annual return on an invested lump sum, as a percentage
DEFAULT_INVESTMENT_RETURN_PCT = float(os.environ.get("MORTGAGE_OPTIONS_INVESTMENT_RETURN_PCT", "7.0"))

# Rows shown in schedule previews and period totals (first 2 years)
PREVIEW_MONTHS = int(os.environ.get("MORTGAGE_OPTIONS_PREVIEW_MONTHS", "24"))

MAX_TERM_MONTHS = int(os.environ.get("MORTGAGE_OPTIONS_MAX_TERM_MONTHS", "600"))

# Balances within a cent of zero count as paid off
BALANCE_TOLERANCE = 0.01
