"""Current loan vs refinance vs recast comparison engine."""
