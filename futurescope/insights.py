from __future__ import annotations

from typing import List, Optional

from .calculators.monte_carlo import MonteCarloSummary
from .calculators.optimizer import ContributionAllocation
from .calculators.projections import ProjectionResults


def _outlook(success_rate: float) -> str:
    if success_rate >= 0.85:
        return "high chance of success"
    if success_rate >= 0.6:
        return "moderate chance of success"
    return "plan may be at risk"


def generate_insights(
    results: ProjectionResults,
    monte_carlo: Optional[MonteCarloSummary] = None,
    allocation: Optional[ContributionAllocation] = None,
) -> List[str]:
    """Return short plain-language recommendations for a projection.

    Rule based: a shortfall warning (or an on-track note), the Monte Carlo
    outlook when a summary is given, the tax savings of the suggested
    allocation, and the standing advice to capture the full employer match.
    """
    last_age = results.yearly_data[-1].age if results.yearly_data else "retirement"
    messages = []

    if results.retirement_shortfall > 0:
        messages.append(
            f"Projected income falls short by ${results.retirement_shortfall:,.0f} per year. "
            f"Increase monthly savings to ${results.recommended_monthly_savings:,.0f} to meet retirement goals."
        )
    else:
        messages.append(
            f"On track: projected income of ${results.monthly_retirement_income:,.0f}/month "
            f"replaces {results.replacement_ratio * 100:.1f}% of your final salary."
        )

    if monte_carlo is not None:
        messages.append(
            f"Monte Carlo outlook: {_outlook(monte_carlo.success_rate)} "
            f"({monte_carlo.success_rate * 100:.1f}% of {monte_carlo.iterations:,} trials reach the goal). "
            f"Median balance at age {last_age} is ${monte_carlo.median:,.0f}."
        )

    if allocation is not None and allocation.total_tax_savings > 0:
        messages.append(
            f"Pre-tax 401(k) contributions of ${allocation.optimal_401k:,.0f}/month "
            f"save about ${allocation.total_tax_savings:,.0f} in taxes each year."
        )

    messages.append("Maximize your employer 401(k) match; it is part of your compensation.")
    return messages


__all__ = ["generate_insights"]
