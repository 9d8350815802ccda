"""Split monthly savings across account types.

Requested amounts are clamped to the monthly share of the annual
contribution limits (2024: $23,000 for a 401(k), $7,000 for a Roth IRA);
taxable brokerage savings are unlimited.  Only pre-tax 401(k) dollars reduce
this year's taxes, so the tax-savings estimate is
``optimal_401k * 12 * tax_rate``.

Example
-------

>>> from futurescope.inputs import CalculatorInputs
>>> alloc = optimize_contributions(CalculatorInputs.default(), 5000, 1000, 500)
>>> round(alloc.optimal_401k, 2), round(alloc.optimal_roth_ira, 2)
(1916.67, 583.33)
"""

from __future__ import annotations

from dataclasses import dataclass

from ..assumptions import DEFAULT_ALLOCATION_SPLIT, MAX_401K_ANNUAL, MAX_ROTH_IRA_ANNUAL
from ..inputs import CalculatorInputs


@dataclass(frozen=True)
class ContributionAllocation:
    optimal_401k: float
    optimal_roth_ira: float
    optimal_taxable: float
    total_tax_savings: float   # annual


def optimize_contributions(
    inputs: CalculatorInputs,
    target_401k: float,
    target_roth_ira: float,
    target_taxable: float,
    max_401k_annual: float = MAX_401K_ANNUAL,
    max_roth_ira_annual: float = MAX_ROTH_IRA_ANNUAL,
) -> ContributionAllocation:
    """Clamp the requested monthly amounts and estimate the annual tax savings."""
    optimal_401k = min(target_401k, max_401k_annual / 12)
    optimal_roth_ira = min(target_roth_ira, max_roth_ira_annual / 12)

    return ContributionAllocation(
        optimal_401k=optimal_401k,
        optimal_roth_ira=optimal_roth_ira,
        optimal_taxable=target_taxable,
        total_tax_savings=optimal_401k * 12 * inputs.tax_rate,
    )


def default_allocation(inputs: CalculatorInputs) -> ContributionAllocation:
    """Allocate the plan's monthly contribution 60/30/10 across 401(k), Roth IRA and taxable."""
    share_401k, share_roth, share_taxable = DEFAULT_ALLOCATION_SPLIT
    monthly = inputs.monthly_contribution
    return optimize_contributions(inputs, monthly * share_401k, monthly * share_roth, monthly * share_taxable)


__all__ = ["ContributionAllocation", "optimize_contributions", "default_allocation"]
