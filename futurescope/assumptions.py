"""Fixed planning assumptions used throughout the calculators.

Values here are policy constants (statutory limits, Social Security bend
points) or modelling choices (scenario presets, Monte Carlo volatility).
They are kept in one place so the calculators and their tests agree on
the numbers.
"""

from __future__ import annotations

from typing import Dict, Tuple

# Scenario presets: name -> (expected_return, inflation_rate)
SCENARIOS: Dict[str, Tuple[float, float]] = {
    "conservative": (0.04, 0.035),
    "moderate": (0.07, 0.03),
    "aggressive": (0.10, 0.025),
}

# Monte Carlo
MONTE_CARLO_VOLATILITY = 0.15
DEFAULT_ITERATIONS = 1000

# Withdrawal phase assumes half the accumulation-phase return.
WITHDRAWAL_RETURN_FACTOR = 0.5
DEFAULT_WITHDRAWAL_RETURN = 0.04

# 2024 contribution limits (annual)
MAX_401K_ANNUAL = 23000.0
MAX_ROTH_IRA_ANNUAL = 7000.0

# Social Security (2024 bend points)
BEND_POINTS = (1174.0, 7078.0)
PIA_FACTORS = (0.90, 0.32, 0.15)
FULL_RETIREMENT_AGE = 67
EARLY_REDUCTION_MONTHS = 36
EARLY_REDUCTION_RATE = 0.00555        # per month, first 36 months
EXTENDED_EARLY_REDUCTION_RATE = 0.00417  # per month beyond 36
DELAYED_CREDIT_RATE = 0.00667         # per month past FRA
EARNINGS_START_AGE = 22
AIME_YEARS = 35

# Monthly split of the contribution used by the optimisation tab.
DEFAULT_ALLOCATION_SPLIT = (0.6, 0.3, 0.1)

DEFAULT_INPUTS: Dict[str, float] = {
    "current_age": 30,
    "retirement_age": 65,
    "life_expectancy": 90,
    "current_salary": 75000.0,
    "salary_growth_rate": 0.03,
    "current_savings": 50000.0,
    "monthly_contribution": 500.0,
    "contribution_increase_rate": 0.03,
    "employer_match_percent": 0.5,
    "employer_match_limit": 0.06,
    "expected_return": 0.07,
    "inflation_rate": 0.03,
    "tax_rate": 0.22,
    "retirement_tax_rate": 0.15,
    "desired_retirement_income": 5000.0,
    "social_security_benefit": 2000.0,
}
