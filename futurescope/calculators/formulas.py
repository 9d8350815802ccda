"""Closed-form time-value-of-money helpers.

These are the building blocks of the projection engine.  Every function is
pure and accepts any float; callers are responsible for sensible ranges
(negative horizons or rates at or below -100 % give meaningless results).
Rates are annual fractions (``0.07`` = 7 %) and compounding inside the
annuity formulas is monthly.

Example
-------

>>> round(future_value(10000, 500, 0.07, 10), 2)
106639.02

>>> future_value(10000.0, 500.0, 0.0, 10)
70000.0
"""

from __future__ import annotations


def future_value(principal: float, monthly_payment: float, annual_rate: float, years: float) -> float:
    """Value of ``principal`` plus ``monthly_payment`` deposits after ``years``.

    Parameters
    ----------
    principal : float
        Starting balance.
    monthly_payment : float
        Amount added at the end of every month.
    annual_rate : float
        Nominal annual return, compounded monthly.
    years : float
        Length of the horizon.

    Returns
    -------
    float
        Balance at the end of the horizon.  With a zero rate this is simply
        ``principal + monthly_payment * months``.
    """
    monthly_rate = annual_rate / 12
    months = years * 12

    if monthly_rate == 0:
        return principal + monthly_payment * months

    growth = (1 + monthly_rate) ** months
    return principal * growth + monthly_payment * ((growth - 1) / monthly_rate)


def present_value(future_value: float, annual_rate: float, years: float) -> float:
    """Discount ``future_value`` back ``years`` at ``annual_rate``."""
    if annual_rate == 0:
        return future_value
    return future_value / ((1 + annual_rate) ** years)


def inflation_adjusted_value(amount: float, inflation_rate: float, years: float) -> float:
    """Express ``amount`` received ``years`` from now in today's dollars."""
    if inflation_rate == 0:
        return amount
    return amount / ((1 + inflation_rate) ** years)


def sustainable_withdrawal_rate(total_savings: float, years_in_retirement: float, annual_return: float = 0.04) -> float:
    """Level monthly payment that exhausts ``total_savings`` over the horizon.

    This is the standard amortisation payment at ``annual_return / 12`` per
    month.  A zero return spreads the balance evenly over the months, and a
    zero-length horizon pays out the whole balance at once.
    """
    months = years_in_retirement * 12
    if months == 0:
        return total_savings
    if annual_return == 0:
        return total_savings / months

    monthly_rate = annual_return / 12
    return (total_savings * monthly_rate) / (1 - (1 + monthly_rate) ** -months)


def salary_projection(current_salary: float, growth_rate: float, years: float) -> float:
    return current_salary * ((1 + growth_rate) ** years)


def tax_adjusted_contribution(gross_contribution: float, tax_rate: float, is_pre_tax: bool = True) -> float:
    """Take-home cost of a contribution.

    A pre-tax contribution of ``gross_contribution`` only reduces take-home
    pay by ``gross * (1 - tax_rate)``; post-tax contributions cost their
    full amount.
    """
    if is_pre_tax:
        return gross_contribution * (1 - tax_rate)
    return gross_contribution


def calculate_employer_match(
    monthly_salary: float,
    employee_contribution: float,
    match_percent: float,
    match_limit: float,
) -> float:
    """Monthly employer match.

    The employer adds ``match_percent`` of the employee contribution, but no
    more than ``match_limit`` (a fraction) of the monthly salary.
    """
    max_match_amount = monthly_salary * match_limit
    match_amount = employee_contribution * match_percent
    return min(match_amount, max_match_amount)


def real_rate_of_return(nominal_rate: float, inflation_rate: float) -> float:
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def calculate_required_savings(
    target_amount: float,
    current_savings: float,
    annual_return: float,
    years: float,
    inflation_rate: float,
) -> float:
    """Monthly contribution needed to reach ``target_amount`` in ``years``.

    Growth is measured at the real (inflation-adjusted) rate of return.  The
    result is zero when ``current_savings`` alone already grows past the
    target.  With no time left the whole remaining gap is due now.
    """
    monthly_rate = real_rate_of_return(annual_return, inflation_rate) / 12
    months = years * 12

    future_value_of_current = current_savings * (1 + monthly_rate) ** months
    remaining_needed = target_amount - future_value_of_current
    if remaining_needed <= 0:
        return 0.0
    if months == 0:
        return remaining_needed
    if monthly_rate == 0:
        return remaining_needed / months

    return remaining_needed * monthly_rate / ((1 + monthly_rate) ** months - 1)


__all__ = [
    "future_value",
    "present_value",
    "inflation_adjusted_value",
    "sustainable_withdrawal_rate",
    "salary_projection",
    "tax_adjusted_contribution",
    "calculate_employer_match",
    "real_rate_of_return",
    "calculate_required_savings",
]
