"""Simplified Social Security benefit estimator.

The benefit at full retirement age (the Primary Insurance Amount, PIA) is a
piecewise function of Average Indexed Monthly Earnings (AIME) with two bend
points.  With the 2024 bend points of $1,174 and $7,078 the PIA is:

* 90 % of AIME up to the first bend point, plus
* 32 % of AIME between the two bend points, plus
* 15 % of AIME above the second bend point.

The PIA is then adjusted for the claiming age relative to full retirement
age (FRA):

* Claiming early reduces the benefit by 5/9 of 1 % (0.00555) for each of the
  first 36 months and by 5/12 of 1 % (0.00417) for each additional month.
* Claiming late adds 2/3 of 1 % (0.00667) per month of delay.

Claiming ages are not clamped to the 62-70 window; callers pass realistic
values.

Example
-------

>>> round(calculate_social_security(3000, 67, 67), 2)
1640.92

>>> # Three years early: 36 months at 0.00555 -> 19.98 % reduction
>>> round(calculate_social_security(3000, 67, 64), 2)
1313.06
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..assumptions import (
    AIME_YEARS,
    BEND_POINTS,
    DELAYED_CREDIT_RATE,
    EARLY_REDUCTION_MONTHS,
    EARLY_REDUCTION_RATE,
    EARNINGS_START_AGE,
    EXTENDED_EARLY_REDUCTION_RATE,
    FULL_RETIREMENT_AGE,
    PIA_FACTORS,
)

if TYPE_CHECKING:
    from ..inputs import CalculatorInputs


def primary_insurance_amount(average_indexed_monthly_earnings: float) -> float:
    """Monthly benefit at full retirement age for a given AIME."""
    aime = average_indexed_monthly_earnings
    bend1, bend2 = BEND_POINTS
    low, mid, high = PIA_FACTORS
    if aime <= bend1:
        return low * aime
    if aime <= bend2:
        return low * bend1 + mid * (aime - bend1)
    return low * bend1 + mid * (bend2 - bend1) + high * (aime - bend2)


def claiming_adjustment(full_retirement_age: float, claiming_age: float) -> float:
    """Multiplier applied to the PIA for claiming at ``claiming_age``."""
    months_early = (full_retirement_age - claiming_age) * 12
    months_late = (claiming_age - full_retirement_age) * 12

    if months_early > 0:
        reduction = (
            min(EARLY_REDUCTION_MONTHS, months_early) * EARLY_REDUCTION_RATE
            + max(0, months_early - EARLY_REDUCTION_MONTHS) * EXTENDED_EARLY_REDUCTION_RATE
        )
        return 1 - reduction
    if months_late > 0:
        return 1 + months_late * DELAYED_CREDIT_RATE
    return 1.0


def calculate_social_security(
    average_indexed_monthly_earnings: float,
    full_retirement_age: float,
    claiming_age: float,
) -> float:
    """Estimate the monthly Social Security benefit.

    Parameters
    ----------
    average_indexed_monthly_earnings : float
        AIME in today's dollars.
    full_retirement_age : float
        Age at which the unreduced PIA is paid.
    claiming_age : float
        Age at which benefits start.

    Returns
    -------
    float
        Monthly benefit after the early-claiming reduction or delayed credit.
    """
    pia = primary_insurance_amount(average_indexed_monthly_earnings)
    return pia * claiming_adjustment(full_retirement_age, claiming_age)


def estimate_aime(
    current_age: int,
    retire_age: int,
    salary: float,
    salary_growth: float,
) -> float:
    """Roughly estimate AIME from a projected earnings history.

    Earnings are assumed from age 22 until the year before ``retire_age``,
    growing at ``salary_growth`` each year (past years are back-filled by
    discounting the current salary).  The highest 35 years are averaged per
    month, with missing years counted as zero.  Wage indexing is ignored.
    """
    if retire_age <= EARNINGS_START_AGE or salary <= 0:
        return 0.0

    earnings = []

    past_salary = salary
    for _age in range(current_age - 1, EARNINGS_START_AGE - 1, -1):
        past_salary /= (1 + salary_growth)
        earnings.append(past_salary)
    earnings.reverse()

    if current_age < retire_age:
        earnings.append(salary)
    future_salary = salary
    for _age in range(current_age + 1, retire_age):
        future_salary *= (1 + salary_growth)
        earnings.append(future_salary)

    top_earnings = sorted(earnings, reverse=True)[:AIME_YEARS]
    return sum(top_earnings) / (AIME_YEARS * 12)


def estimate_benefit(
    inputs: "CalculatorInputs",
    full_retirement_age: float = FULL_RETIREMENT_AGE,
    from_history: bool = False,
) -> float:
    """Quick estimate used by the optimisation view.

    By default the current monthly salary stands in for AIME.  With
    ``from_history=True`` the AIME comes from :func:`estimate_aime` over
    the earnings history implied by the plan's salary and growth rate.
    Benefits are claimed at the planned retirement age either way.
    """
    if from_history:
        aime = estimate_aime(
            inputs.current_age,
            inputs.retirement_age,
            inputs.current_salary,
            inputs.salary_growth_rate,
        )
    else:
        aime = inputs.current_salary / 12
    return calculate_social_security(aime, full_retirement_age, inputs.retirement_age)


__all__ = [
    "primary_insurance_amount",
    "claiming_adjustment",
    "calculate_social_security",
    "estimate_aime",
    "estimate_benefit",
]
