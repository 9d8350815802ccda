"""Year-by-year accumulation model.

Starting from the current age, each year of work adds the employee
contribution, the employer match and one year of interest on the balance
carried in from the previous year.  The projection stops at the retirement
age (inclusive), so a plan that retires this year still gets one row.

Salary and contribution for year ``n`` are always computed from the base
values (``base * (1 + g) ** n``) rather than compounded row to row.

After the loop the terminal balance is converted into a monthly income with
:func:`~futurescope.calculators.formulas.sustainable_withdrawal_rate`, using
half of the accumulation-phase return for the withdrawal phase.  The
shortfall remedy, in contrast, is solved at the full expected return.
"""

from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..assumptions import WITHDRAWAL_RETURN_FACTOR
from ..inputs import CalculatorInputs
from .formulas import (
    calculate_employer_match,
    calculate_required_savings,
    inflation_adjusted_value,
    salary_projection,
    sustainable_withdrawal_rate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearlyProjection:
    age: int
    year: int
    salary: float
    monthly_contribution: float
    employer_match: float          # monthly
    total_contribution: float      # employee + employer, annual
    total_savings: float
    total_savings_inflation_adjusted: float
    interest_earned: float


@dataclass(frozen=True)
class ProjectionResults:
    yearly_data: Tuple[YearlyProjection, ...]
    retirement_value: float
    retirement_value_inflation_adjusted: float
    monthly_retirement_income: float
    monthly_retirement_income_inflation_adjusted: float
    total_contributions: float
    total_interest_earned: float
    years_of_retirement: int
    retirement_shortfall: float    # annual dollars, never negative
    recommended_monthly_savings: float
    replacement_ratio: float

    @property
    def on_track(self) -> bool:
        return self.retirement_shortfall <= 0


def _ratio(numerator: float, denominator: float) -> float:
    # a zero salary gives inf (or nan for 0/0) instead of raising
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def calculate_projections(inputs: CalculatorInputs, start_year: Optional[int] = None) -> ProjectionResults:
    """Project savings from the current age to retirement.

    Parameters
    ----------
    inputs : CalculatorInputs
        Plan assumptions.  Not validated; inconsistent ages produce an empty
        or degenerate projection rather than an error.
    start_year : int, optional
        Calendar year of the first row.  Defaults to the current year.

    Returns
    -------
    ProjectionResults
        The yearly rows plus retirement summary metrics.
    """
    if start_year is None:
        start_year = datetime.date.today().year

    years_to_retirement = inputs.years_to_retirement
    years_of_retirement = inputs.years_of_retirement
    if years_to_retirement < 0 or years_of_retirement < 0:
        logger.warning(
            "Inconsistent ages (current=%s, retirement=%s, life expectancy=%s); results are not meaningful",
            inputs.current_age,
            inputs.retirement_age,
            inputs.life_expectancy,
        )

    yearly_data = []
    salary = inputs.current_salary
    monthly_contribution = inputs.monthly_contribution
    total_savings = inputs.current_savings
    total_contributions = 0.0
    total_interest_earned = 0.0

    for year in range(int(years_to_retirement) + 1):
        if year > 0:
            salary = salary_projection(inputs.current_salary, inputs.salary_growth_rate, year)
            monthly_contribution = inputs.monthly_contribution * (1 + inputs.contribution_increase_rate) ** year

        monthly_match = calculate_employer_match(
            salary / 12,
            monthly_contribution,
            inputs.employer_match_percent,
            inputs.employer_match_limit,
        )
        annual_contribution = (monthly_contribution + monthly_match) * 12

        # contributions made this year earn nothing until next year
        interest_earned = total_savings * inputs.expected_return
        total_savings = total_savings + annual_contribution + interest_earned

        total_contributions += annual_contribution
        total_interest_earned += interest_earned

        yearly_data.append(
            YearlyProjection(
                age=inputs.current_age + year,
                year=start_year + year,
                salary=salary,
                monthly_contribution=monthly_contribution,
                employer_match=monthly_match,
                total_contribution=annual_contribution,
                total_savings=total_savings,
                total_savings_inflation_adjusted=inflation_adjusted_value(total_savings, inputs.inflation_rate, year),
                interest_earned=interest_earned,
            )
        )

    retirement_value = total_savings
    retirement_value_real = inflation_adjusted_value(retirement_value, inputs.inflation_rate, years_to_retirement)

    monthly_income = sustainable_withdrawal_rate(
        retirement_value,
        years_of_retirement,
        inputs.expected_return * WITHDRAWAL_RETURN_FACTOR,
    ) + inputs.social_security_benefit
    monthly_income_real = inflation_adjusted_value(monthly_income, inputs.inflation_rate, years_to_retirement)

    final_salary = salary_projection(inputs.current_salary, inputs.salary_growth_rate, years_to_retirement)
    replacement_ratio = _ratio(monthly_income * 12, final_salary)

    desired_annual_income = inputs.desired_retirement_income * 12
    actual_annual_income = monthly_income * 12
    shortfall = max(0.0, desired_annual_income - actual_annual_income)

    recommended = inputs.monthly_contribution
    if shortfall > 0:
        recommended = calculate_required_savings(
            shortfall * years_of_retirement + retirement_value,
            inputs.current_savings,
            inputs.expected_return,
            years_to_retirement,
            inputs.inflation_rate,
        )

    logger.debug(
        "Projected %d years: retirement value %.2f, monthly income %.2f, shortfall %.2f",
        len(yearly_data),
        retirement_value,
        monthly_income,
        shortfall,
    )

    return ProjectionResults(
        yearly_data=tuple(yearly_data),
        retirement_value=retirement_value,
        retirement_value_inflation_adjusted=retirement_value_real,
        monthly_retirement_income=monthly_income,
        monthly_retirement_income_inflation_adjusted=monthly_income_real,
        total_contributions=total_contributions,
        total_interest_earned=total_interest_earned,
        years_of_retirement=years_of_retirement,
        retirement_shortfall=shortfall,
        recommended_monthly_savings=recommended,
        replacement_ratio=replacement_ratio,
    )


__all__ = ["YearlyProjection", "ProjectionResults", "calculate_projections"]
